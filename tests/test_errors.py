import pytest

from lathecad.errors import (
    ComputationFault,
    DegenerateResult,
    EmptyProfile,
    ErrorKind,
    InsufficientChain,
    InvalidParameters,
    RevolveError,
)


@pytest.mark.parametrize('cls, kind', [
    (EmptyProfile, ErrorKind.EMPTY_PROFILE),
    (InsufficientChain, ErrorKind.INSUFFICIENT_CHAIN),
    (DegenerateResult, ErrorKind.DEGENERATE_RESULT),
    (ComputationFault, ErrorKind.COMPUTATION_FAULT),
    (InvalidParameters, ErrorKind.INVALID_PARAMETERS),
])
def test_error_kinds(cls, kind):
    err = cls('something went wrong')
    assert isinstance(err, RevolveError)
    assert err.kind is kind
    assert err.message == 'something went wrong'
    assert str(err) == f'{kind.value}: something went wrong'
