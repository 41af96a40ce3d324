import math

import pytest

from lathecad.errors import ErrorKind, InvalidParameters
from lathecad.geom import Axis
from lathecad.params import (
    RevolveParams,
    clamp_segments,
    is_full_revolution,
    parse_user_text,
)

Z = Axis((0, 0, 0), (0, 0, 1))


def test_clamp_segments():
    assert clamp_segments(1) == 3
    assert clamp_segments(3) == 3
    assert clamp_segments(36) == 36
    assert clamp_segments(1000) == 360


def test_is_full_revolution():
    assert is_full_revolution(360.0)
    assert is_full_revolution(math.degrees(2 * math.pi - 0.0005))
    assert not is_full_revolution(359.0)
    assert not is_full_revolution(180.0)


def test_defaults():
    params = RevolveParams(Z)
    assert params.angle == 360.0
    assert params.segments == 24
    assert params.full
    assert params.step_count == 24
    assert params.angle_step == pytest.approx(15.0)


def test_partial_sweep_has_one_extra_profile():
    params = RevolveParams(Z, 180, 6)
    assert not params.full
    assert params.step_count == 7
    assert params.angle_step == pytest.approx(30.0)


def test_segments_are_clamped():
    assert RevolveParams(Z, 90, 1).segments == 3
    assert RevolveParams(Z, 90, 5000).segments == 360


@pytest.mark.parametrize('angle', [0, -10, 361, 720])
def test_bad_angle(angle):
    with pytest.raises(InvalidParameters) as info:
        RevolveParams(Z, angle, 12)
    assert info.value.kind is ErrorKind.INVALID_PARAMETERS


def test_angle_just_over_full_turn_is_accepted():
    params = RevolveParams(Z, 360.00001, 12)
    assert params.angle == 360.0
    assert params.full


def test_from_points():
    params = RevolveParams.from_points((1, 1, 0), (1, 1, 10), 90, 4)
    assert params.axis.point == (1.0, 1.0, 0.0)
    assert params.axis.direction == pytest.approx((0, 0, 1))
    assert params.segments == 4


@pytest.mark.parametrize('end', [(1, 1, 0), (1, 1, 0.00005)])
def test_from_points_coincident(end):
    with pytest.raises(InvalidParameters):
        RevolveParams.from_points((1, 1, 0), end)


@pytest.mark.parametrize('text, expected', [
    ('36s', (36, 360.0)),
    ('36S', (36, 360.0)),
    ('2s', (3, 360.0)),
    ('500s', (360, 360.0)),
    ('180', (24, 180.0)),
    (' 90.5 ', (24, 90.5)),
    ('360', (24, 360.0)),
    ('0', (24, 360.0)),
    ('400', (24, 360.0)),
    ('-90', (24, 360.0)),
    ('abc', (24, 360.0)),
    ('', (24, 360.0)),
])
def test_parse_user_text(text, expected):
    assert parse_user_text(text, 24, 360.0) == expected
