## foundational geometry primitives for lathecad

## Copyright (c) 2026 lathecad contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""foundational geometry primitives for **lathecad**

Points and vectors are plain ``(x, y, z)`` float tuples.  Anything with
at least three numeric components (including yapCAD-style homogeneous
``[x, y, z, w]`` lists) can be turned into one with ``to_vec3()``.

Two tolerances are used throughout.  ``epsilon`` is the numeric noise
floor for scalar comparisons.  ``TOLERANCE`` is the geometric tolerance
used to decide whether a point lies on the rotation axis, whether two
points coincide, and whether a triangle is degenerate.  Point identity
during chain tracing is decided separately, by rounding to
``KEY_PRECISION`` decimal places.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import sqrt
from typing import Iterable, Sequence, Tuple

from lathecad.errors import ComputationFault

Vec3 = Tuple[float, float, float]

## constants
epsilon = 0.000005
TOLERANCE = 0.0001
KEY_PRECISION = 4


## operations on scalars
## -----------------------

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def close(a, b, tol=epsilon):
    """ are two scalars the same within ``tol``
    """
    return abs(a - b) < tol


## operations on vectors
## ------------------------

def to_vec3(point_like: Sequence[float]) -> Vec3:
    """Return the XYZ components of a point-like sequence as a tuple."""

    if len(point_like) < 3:
        raise ValueError("value must have at least three components")
    return float(point_like[0]), float(point_like[1]), float(point_like[2])


def add(a, b) -> Vec3:
    """ 3 vector, `a + b`"""
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def sub(a, b) -> Vec3:
    """ 3 vector, `a - b`"""
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def scale3(a, c) -> Vec3:
    """ 3 vector ``a`` times scalar ``c``"""
    return (a[0] * c, a[1] * c, a[2] * c)


def cross(a, b) -> Vec3:
    """ 3 vector cross product `a x b`"""
    return (a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0])


def dot(a, b) -> float:
    """ 3 vector ``a`` dot ``b`` """
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def mag(a) -> float:
    """ compute the magnitude of 3 vector ``a``"""
    return sqrt(a[0] * a[0] + a[1] * a[1] + a[2] * a[2])


def dist(a, b) -> float:
    """ euclidean distance between two points ``a`` and ``b``"""
    return mag(sub(a, b))


def lerp(a, b, u) -> Vec3:
    """ linear combination `(1-u)*a + u*b`"""
    return (a[0] + (b[0] - a[0]) * u,
            a[1] + (b[1] - a[1]) * u,
            a[2] + (b[2] - a[2]) * u)


def midpoint(a, b) -> Vec3:
    return lerp(a, b, 0.5)


def centroid(points: Iterable[Sequence[float]]) -> Vec3:
    """ arithmetic mean of a non-empty collection of points"""
    sx = sy = sz = 0.0
    n = 0
    for p in points:
        sx += p[0]
        sy += p[1]
        sz += p[2]
        n += 1
    if n == 0:
        raise ValueError('centroid of an empty point set is undefined')
    return (sx / n, sy / n, sz / n)


## triangles
## ---------

def triangle_is_valid(p1, p2, p3, tol=TOLERANCE) -> bool:
    """Return ``False`` if any edge is shorter than ``tol`` or the points
    are collinear (cross product magnitude below ``tol``)."""

    v1 = sub(p2, p1)
    v2 = sub(p3, p1)
    if mag(v1) < tol or mag(v2) < tol:
        return False
    if dist(p2, p3) < tol:
        return False
    return mag(cross(v1, v2)) >= tol


def triangle_normal(p1, p2, p3) -> Vec3 | None:
    """Return the unit normal implied by the winding ``p1, p2, p3`` or
    ``None`` if the triangle is degenerate."""

    n = cross(sub(p2, p1), sub(p3, p1))
    length = mag(n)
    if length <= epsilon:
        return None
    return scale3(n, 1.0 / length)


## axis lines
## ----------

@dataclass(frozen=True)
class Axis:
    """A rotation axis: a point on the line plus a unit direction.

    The direction is normalized on construction.  The sense of the
    direction fixes the rotation sense by the right-hand rule.
    """

    point: Vec3
    direction: Vec3

    def __post_init__(self):
        p = to_vec3(self.point)
        d = to_vec3(self.direction)
        m = mag(d)
        if m < epsilon:
            raise ComputationFault('axis direction has zero length')
        object.__setattr__(self, 'point', p)
        object.__setattr__(self, 'direction', scale3(d, 1.0 / m))

    @classmethod
    def from_points(cls, start, end) -> "Axis":
        """Axis through ``start`` pointing towards ``end``."""
        start = to_vec3(start)
        return cls(start, sub(to_vec3(end), start))

    def closest_point(self, p) -> Vec3:
        """ perpendicular projection of ``p`` onto the axis line"""
        t = dot(sub(p, self.point), self.direction)
        return add(self.point, scale3(self.direction, t))

    def distance(self, p) -> float:
        """ perpendicular distance from ``p`` to the axis line"""
        return dist(p, self.closest_point(p))

    def radial(self, p) -> Vec3:
        """ vector from the axis line out to ``p``, perpendicular to the axis"""
        return sub(p, self.closest_point(p))


__all__ = [
    'Vec3',
    'epsilon',
    'TOLERANCE',
    'KEY_PRECISION',
    'isgoodnum',
    'close',
    'to_vec3',
    'add',
    'sub',
    'scale3',
    'cross',
    'dot',
    'mag',
    'dist',
    'lerp',
    'midpoint',
    'centroid',
    'triangle_is_valid',
    'triangle_normal',
    'Axis',
]
