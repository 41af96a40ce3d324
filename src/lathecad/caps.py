"""End caps for partial sweeps of closed profiles.

Two strategies are available.  ``fan`` triangulates from the centroid
of the off-axis profile points, which is exact for convex profiles.
``earcut`` projects the profile into its best-fit plane and hands it to
``mapbox-earcut`` (the ear clipping implementation used by Mapbox GL),
which also copes with concave profiles.  Both orient their triangles
the same way for a given ``reverse`` flag.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

try:
    import mapbox_earcut as _earcut
except ImportError as exc:  # pragma: no cover - import guard
    raise ImportError(
        "mapbox-earcut must be installed to triangulate end caps"
    ) from exc

from lathecad.geom import (
    TOLERANCE,
    Axis,
    Vec3,
    centroid,
    cross,
    dist,
    dot,
    mag,
    scale3,
    sub,
    triangle_normal,
)
from lathecad.mesh import Mesh

logger = logging.getLogger(__name__)

CAP_STYLES = ('fan', 'earcut')


def off_axis_points(profile: Sequence[Vec3], axis: Axis, tol: float = TOLERANCE) -> List[Vec3]:
    return [p for p in profile if axis.distance(p) > tol]


def fan_cap(mesh: Mesh, profile: Sequence[Vec3], axis: Axis, reverse: bool,
            tol: float = TOLERANCE) -> int:
    """Add a centroid fan over ``profile`` to ``mesh``.

    Returns the number of triangles added.  Points on the axis are left
    out; fewer than three remaining points means no cap.
    """

    if len(profile) < 3:
        return 0
    valid = off_axis_points(profile, axis, tol)
    if len(valid) < 3:
        return 0

    c = centroid(valid)
    pairs = [(valid[i], valid[i + 1]) for i in range(len(valid) - 1)]
    if dist(profile[0], profile[-1]) < tol:
        pairs.append((valid[-1], valid[0]))

    added = 0
    for p1, p2 in pairs:
        if dist(c, p1) < tol or dist(c, p2) < tol or dist(p1, p2) < tol:
            continue
        if reverse:
            ok = mesh.add_triangle(c, p1, p2)
        else:
            ok = mesh.add_triangle(c, p2, p1)
        added += ok
    return added


def newell_normal(loop: Sequence[Vec3]) -> Vec3:
    """Area-weighted normal of a (possibly non-planar) closed loop."""

    nx = ny = nz = 0.0
    n = len(loop)
    for i in range(n):
        x0, y0, z0 = loop[i]
        x1, y1, z1 = loop[(i + 1) % n]
        nx += (y0 - y1) * (z0 + z1)
        ny += (z0 - z1) * (x0 + x1)
        nz += (x0 - x1) * (y0 + y1)
    return (nx, ny, nz)


def _plane_basis(normal: Vec3):
    n = scale3(normal, 1.0 / mag(normal))
    helper = (1.0, 0.0, 0.0) if abs(n[0]) < 0.9 else (0.0, 1.0, 0.0)
    u = cross(helper, n)
    u = scale3(u, 1.0 / mag(u))
    v = cross(n, u)
    return n, u, v


def _dedupe_loop(points: Sequence[Vec3], tol: float) -> List[Vec3]:
    loop: List[Vec3] = []
    for p in points:
        if loop and dist(loop[-1], p) < tol:
            continue
        loop.append(p)
    if len(loop) > 1 and dist(loop[0], loop[-1]) < tol:
        loop.pop()
    return loop


def earcut_cap(mesh: Mesh, profile: Sequence[Vec3], axis: Axis, reverse: bool,
               tol: float = TOLERANCE) -> int:
    """Add an ear-clipped cap over ``profile`` to ``mesh``.

    Returns the number of triangles added.
    """

    if len(profile) < 3:
        return 0
    loop = _dedupe_loop(off_axis_points(profile, axis, tol), tol)
    if len(loop) < 3:
        return 0

    normal = newell_normal(loop)
    if mag(normal) < tol:
        logger.debug("cap loop has no usable plane; skipping")
        return 0
    n, u, v = _plane_basis(normal)
    target = n if reverse else scale3(n, -1.0)

    origin = loop[0]
    coords = np.asarray([(dot(sub(p, origin), u), dot(sub(p, origin), v)) for p in loop],
                        dtype=np.float64)
    rings = np.asarray([len(loop)], dtype=np.uint32)
    indices = _earcut.triangulate_float64(coords, rings)

    added = 0
    for i in range(0, len(indices), 3):
        a = loop[int(indices[i])]
        b = loop[int(indices[i + 1])]
        c = loop[int(indices[i + 2])]
        tri_n = triangle_normal(a, b, c)
        if tri_n is None:
            continue
        if dot(tri_n, target) < 0:
            b, c = c, b
        added += mesh.add_triangle(a, b, c)
    return added


def add_profile_cap(mesh: Mesh, profile: Sequence[Vec3], axis: Axis, reverse: bool,
                    tol: float = TOLERANCE, style: str = 'fan') -> int:
    """Cap ``profile`` with the requested triangulation ``style``."""

    if style == 'fan':
        return fan_cap(mesh, profile, axis, reverse, tol)
    if style == 'earcut':
        return earcut_cap(mesh, profile, axis, reverse, tol)
    raise ValueError(f'unknown cap style: {style!r}')


__all__ = [
    'CAP_STYLES',
    'off_axis_points',
    'fan_cap',
    'newell_normal',
    'earcut_cap',
    'add_profile_cap',
]
