import math

import pytest

from lathecad.errors import ComputationFault, ErrorKind
from lathecad.geom import (
    Axis,
    centroid,
    close,
    cross,
    dist,
    dot,
    isgoodnum,
    mag,
    midpoint,
    to_vec3,
    triangle_is_valid,
    triangle_normal,
)


def test_isgoodnum_rejects_bool():
    assert isgoodnum(1)
    assert isgoodnum(2.5)
    assert not isgoodnum(True)
    assert not isgoodnum('1')


def test_to_vec3_accepts_homogeneous_points():
    assert to_vec3([1, 2, 3, 1]) == (1.0, 2.0, 3.0)
    assert to_vec3((4, 5, 6)) == (4.0, 5.0, 6.0)
    with pytest.raises(ValueError):
        to_vec3((1, 2))


def test_vector_basics():
    assert cross((1, 0, 0), (0, 1, 0)) == (0, 0, 1)
    assert dot((1, 2, 3), (4, 5, 6)) == 32
    assert mag((3, 4, 0)) == 5.0
    assert dist((1, 1, 1), (1, 1, 4)) == 3.0
    assert midpoint((0, 0, 0), (2, 4, 6)) == (1.0, 2.0, 3.0)
    assert centroid([(0, 0, 0), (2, 0, 0), (1, 3, 0)]) == (1.0, 1.0, 0.0)
    assert close(0.1 + 0.2, 0.3)


def test_centroid_of_nothing():
    with pytest.raises(ValueError):
        centroid([])


def test_axis_normalizes_direction():
    axis = Axis((0, 0, 0), (0, 0, 2))
    assert axis.direction == (0.0, 0.0, 1.0)


def test_axis_zero_direction():
    with pytest.raises(ComputationFault) as info:
        Axis((1, 2, 3), (0, 0, 0))
    assert info.value.kind is ErrorKind.COMPUTATION_FAULT


def test_axis_distance_and_projection_off_origin():
    axis = Axis.from_points((1, 1, 0), (1, 1, 5))
    assert axis.closest_point((4, 5, 3)) == pytest.approx((1, 1, 3))
    assert axis.distance((4, 5, 3)) == pytest.approx(5.0)
    assert axis.radial((4, 5, 3)) == pytest.approx((3, 4, 0))
    assert axis.distance((1, 1, -8)) == pytest.approx(0.0)


def test_axis_distance_tilted():
    axis = Axis((0, 0, 0), (1, 1, 0))
    # (1, -1, 0) is perpendicular to the axis direction
    assert axis.distance((1, -1, 0)) == pytest.approx(math.sqrt(2))
    assert axis.distance((3, 3, 0)) == pytest.approx(0.0, abs=1e-12)


def test_triangle_validity():
    assert triangle_is_valid((0, 0, 0), (1, 0, 0), (0, 1, 0))
    # collinear
    assert not triangle_is_valid((0, 0, 0), (1, 0, 0), (2, 0, 0))
    # an edge shorter than the tolerance
    assert not triangle_is_valid((0, 0, 0), (0.00001, 0, 0), (0, 1, 0))
    assert not triangle_is_valid((0, 0, 0), (0, 1, 0), (0, 1, 0.00001))


def test_triangle_normal():
    assert triangle_normal((0, 0, 0), (1, 0, 0), (0, 1, 0)) == pytest.approx((0, 0, 1))
    assert triangle_normal((0, 0, 0), (0, 1, 0), (1, 0, 0)) == pytest.approx((0, 0, -1))
    assert triangle_normal((0, 0, 0), (1, 0, 0), (2, 0, 0)) is None
