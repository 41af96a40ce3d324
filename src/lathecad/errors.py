"""
Exceptions raised by the profile tracing and revolve pipeline.

Every error carries an ``ErrorKind`` so callers can branch on the failure
without matching message text.  All kinds are terminal for the current
invocation: nothing is retried and no partial mesh is returned.
"""

from enum import Enum


class ErrorKind(Enum):
    """Failure categories reported by the revolve pipeline."""
    EMPTY_PROFILE = "empty_profile"
    INSUFFICIENT_CHAIN = "insufficient_chain"
    DEGENERATE_RESULT = "degenerate_result"
    COMPUTATION_FAULT = "computation_fault"
    INVALID_PARAMETERS = "invalid_parameters"


class RevolveError(Exception):
    """Base class for all revolve pipeline errors."""

    kind: ErrorKind = ErrorKind.COMPUTATION_FAULT

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class EmptyProfile(RevolveError):
    """No edges were supplied."""
    kind = ErrorKind.EMPTY_PROFILE


class InsufficientChain(RevolveError):
    """No traced chain has at least two points."""
    kind = ErrorKind.INSUFFICIENT_CHAIN


class DegenerateResult(RevolveError):
    """Meshing finished without producing a single triangle."""
    kind = ErrorKind.DEGENERATE_RESULT


class ComputationFault(RevolveError):
    """Unexpected numerical failure, e.g. a zero-length axis direction."""
    kind = ErrorKind.COMPUTATION_FAULT


class InvalidParameters(RevolveError):
    """Sweep parameters or settings outside their accepted range."""
    kind = ErrorKind.INVALID_PARAMETERS


__all__ = [
    "ErrorKind",
    "RevolveError",
    "EmptyProfile",
    "InsufficientChain",
    "DegenerateResult",
    "ComputationFault",
    "InvalidParameters",
]
