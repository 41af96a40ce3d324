"""Per-chain winding decision for revolved triangles.

The default ``radial`` orientation uses the reference-segment rule: the
first triangle built over a segment that stays off the axis must face
away from the axis.  The ``solid`` orientation instead orients closed
chains from the signed area of the loop in the axis half-plane, so the
swept solid faces outward; open chains still use the radial rule.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from lathecad.geom import TOLERANCE, Axis, cross, dist, dot, mag, midpoint, sub
from lathecad.xform import AxisRotation

logger = logging.getLogger(__name__)

ORIENTATIONS = ('radial', 'solid')


def reference_segment(distances: Sequence[float], tol: float = TOLERANCE) -> int:
    """Index ``i`` of the first segment ``(i, i+1)`` with both ends off the
    axis, or 0 if there is none."""

    for i in range(len(distances) - 1):
        if distances[i] > tol and distances[i + 1] > tol:
            return i
    return 0


def half_plane_area(chain: Sequence[Sequence[float]], axis: Axis) -> float:
    """Signed shoelace area of ``chain`` in ``(radius, height)`` coordinates.

    Radius is the distance from the axis and height the position along the
    axis direction.  Positive means counter-clockwise with the radius as
    abscissa.
    """

    rh = [(axis.distance(p), dot(sub(p, axis.point), axis.direction)) for p in chain]
    area = 0.0
    for i in range(len(rh)):
        r0, h0 = rh[i]
        r1, h1 = rh[(i + 1) % len(rh)]
        area += r0 * h1 - r1 * h0
    return area / 2.0


def _outward_radial(p1, p2, axis: Axis, tol: float) -> Optional[tuple]:
    for candidate in (midpoint(p1, p2), p1, p2):
        radial = axis.radial(candidate)
        if mag(radial) >= tol:
            return radial
    return None


def resolve_winding(chain: Sequence[Sequence[float]],
                    distances: Sequence[float],
                    axis: Axis,
                    angle_step: float,
                    tol: float = TOLERANCE,
                    orientation: str = 'radial') -> bool:
    """Return ``True`` if triangles built from ``chain`` must be reversed.

    The triangle ``(p[i], p[i+1], rot(p[i+1]))`` over the reference
    segment, with ``rot`` a single angular step of ``angle_step`` degrees
    about ``axis``, gives the normal implied by the unflipped winding.  If that normal points towards the axis (negative
    dot product with the outward radial at the segment) the whole chain is
    flipped.  Degenerate references default to no flip.

    With ``orientation="solid"`` a closed chain of at least four points is
    instead flipped when its loop runs counter-clockwise in the
    ``(radius, height)`` half-plane; unflipped faces of a clockwise loop
    already point out of the swept solid.
    """

    if orientation not in ORIENTATIONS:
        raise ValueError(f'unknown orientation: {orientation!r}')

    if orientation == 'solid' and len(chain) >= 4 and dist(chain[0], chain[-1]) < tol:
        area = half_plane_area(chain, axis)
        if abs(area) >= tol * tol:
            flip = area > 0.0
            logger.debug("closed chain, half-plane area %.6g, flip=%s", area, flip)
            return flip

    i = reference_segment(distances, tol)
    if i + 1 >= len(chain):
        return False

    p1 = chain[i]
    p2 = chain[i + 1]

    radial = _outward_radial(p1, p2, axis, tol)
    if radial is None:
        logger.debug("no usable radial direction; keeping default winding")
        return False

    p3 = AxisRotation(axis, angle_step).mul(p2)
    normal = cross(sub(p2, p1), sub(p3, p1))
    if mag(normal) < tol:
        return False

    flip = dot(normal, radial) < 0
    logger.debug("winding reference segment %d, flip=%s", i, flip)
    return flip


__all__ = ['ORIENTATIONS', 'reference_segment', 'half_plane_area', 'resolve_winding']
