## matrix transformation operations for 3D homogeneous coordinates in
## lathecad

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

from math import cos, radians, sin

import lathecad.geom as geom
from lathecad.errors import ComputationFault

## A matrix is a list of four rows of four numbers.  Points are
## treated as column vectors with an implicit w=1, so ``M.mul(x)``
## computes Mx.  Angles are in degrees, and rotations follow the
## right-hand rule about the (normalized) axis direction.


class Matrix:
    """4x4 transformation matrix for homogeneous 3D coordinates"""

    def __init__(self, a=None):
        self.m = [[1.0, 0.0, 0.0, 0.0],
                  [0.0, 1.0, 0.0, 0.0],
                  [0.0, 0.0, 1.0, 0.0],
                  [0.0, 0.0, 0.0, 1.0]]

        if isinstance(a, Matrix):
            self.m = [list(row) for row in a.m]
        elif isinstance(a, (tuple, list)):
            if len(a) == 4 and all(isinstance(r, (tuple, list)) and len(r) == 4 for r in a):
                rows = a
            elif len(a) == 16:
                rows = [a[i * 4:i * 4 + 4] for i in range(4)]
            else:
                raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
            for i in range(4):
                for j in range(4):
                    x = rows[i][j]
                    if not geom.isgoodnum(x):
                        raise ValueError('bad element in matrix initialization: {}'.format(x))
                    self.m[i][j] = float(x)
        elif a is not None:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

    def __repr__(self):
        return "Matrix({},{},{},{})".format(self.m[0], self.m[1],
                                            self.m[2], self.m[3])

    # matrix multiply.  If x is a matrix, compute MX.  If x is a point
    # (three or four components), compute Mx and return an XYZ tuple.
    def mul(self, x):
        if isinstance(x, Matrix):
            result = Matrix()
            for i in range(4):
                row = self.m[i]
                for j in range(4):
                    result.m[i][j] = sum(row[k] * x.m[k][j] for k in range(4))
            return result
        if isinstance(x, (tuple, list)) and len(x) in (3, 4):
            w = float(x[3]) if len(x) == 4 else 1.0
            v = (float(x[0]), float(x[1]), float(x[2]), w)
            out = [sum(self.m[i][k] * v[k] for k in range(4)) for i in range(4)]
            if geom.close(out[3], 1.0) or out[3] == 0.0:
                return (out[0], out[1], out[2])
            return (out[0] / out[3], out[1] / out[3], out[2] / out[3])
        raise ValueError('bad thing passed to mul(): {}'.format(x))


def Rotation(axis, angle, inverse=False):
    """Return the 4x4 rotation matrix for ``angle`` degrees about the
    direction ``axis`` through the origin."""

    m = geom.mag(axis)
    if m < geom.epsilon:
        raise ComputationFault('zero-length rotation axis not allowed')
    ux, uy, uz = geom.scale3(axis, 1.0 / m)

    if inverse:
        angle = -angle
    rad = radians(angle % 360.0)

    cang = cos(rad)
    cmin = 1.0 - cang
    sang = sin(rad)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux * ux * cmin, ux * uy * cmin - uz * sang, ux * uz * cmin + uy * sang, 0],
         [uy * ux * cmin + uz * sang, cang + uy * uy * cmin, uy * uz * cmin - ux * sang, 0],
         [uz * ux * cmin - uy * sang, uz * uy * cmin + ux * sang, cang + uz * uz * cmin, 0],
         [0, 0, 0, 1]]
    return Matrix(R)


def Translation(delta, inverse=False):
    if inverse:
        delta = geom.scale3(delta, -1.0)
    dx, dy, dz = delta[0], delta[1], delta[2]
    T = [[1, 0, 0, dx],
         [0, 1, 0, dy],
         [0, 0, 1, dz],
         [0, 0, 0, 1]]
    return Matrix(T)


def AxisRotation(axis: geom.Axis, angle, inverse=False):
    """Rotation by ``angle`` degrees about a line that need not pass
    through the origin."""

    to_origin = Translation(axis.point, inverse=True)
    back = Translation(axis.point)
    return back.mul(Rotation(axis.direction, angle, inverse=inverse)).mul(to_origin)


def rotate_points(points, axis: geom.Axis, angle):
    """Rotate every point in ``points`` by ``angle`` degrees about ``axis``."""

    m = AxisRotation(axis, angle)
    return [m.mul(p) for p in points]


__all__ = [
    'Matrix',
    'Rotation',
    'Translation',
    'AxisRotation',
    'rotate_points',
]
