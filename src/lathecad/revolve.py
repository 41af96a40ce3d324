"""Surface-of-revolution meshing for traced profile chains.

``revolve_chain`` sweeps one chain and is a pure function of its
inputs.  ``build_mesh`` sweeps every chain into one ``Mesh``, and
``revolve_profile`` is the full pipeline from loose edges to a mesh,
reporting failures as ``RevolveError`` subclasses.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from lathecad.caps import add_profile_cap
from lathecad.chains import Chain, Edge, build_adjacency, trace_all_chains
from lathecad.config import RevolveSettings
from lathecad.errors import (
    ComputationFault,
    DegenerateResult,
    EmptyProfile,
    InsufficientChain,
    RevolveError,
)
from lathecad.geom import TOLERANCE, Vec3, dist, to_vec3
from lathecad.mesh import Mesh
from lathecad.params import RevolveParams
from lathecad.winding import resolve_winding
from lathecad.xform import rotate_points

logger = logging.getLogger(__name__)


def rotated_profiles(points: Sequence[Vec3], params: RevolveParams) -> List[List[Vec3]]:
    """Return ``params.step_count`` copies of ``points``, copy ``k``
    rotated by ``k * angle_step`` degrees about the axis."""

    return [rotate_points(points, params.axis, step * params.angle_step)
            for step in range(params.step_count)]


def _add_cell(mesh: Mesh, p1, p2, p3, p4, d1: float, d2: float, flip: bool, tol: float) -> None:
    if d1 < tol and d2 < tol:
        return
    if d1 < tol:
        mesh.add_triangle(p1, p2, p3, flip)
        return
    if d2 < tol:
        mesh.add_triangle(p1, p2, p4, flip)
        return
    mesh.add_triangle(p1, p2, p3, flip)
    mesh.add_triangle(p1, p3, p4, flip)


def revolve_chain(chain: Sequence[Sequence[float]], params: RevolveParams,
                  tol: float = TOLERANCE, cap_style: str = 'fan',
                  orientation: str = 'radial') -> Mesh:
    """Sweep one chain and return the triangles it produces.

    With the default ``radial`` orientation the start cap is always
    reversed and the end cap never is.  With ``solid`` the cap flags follow
    the chain's flip so caps wind consistently with the side faces.
    """

    mesh = Mesh(tol)
    points = [to_vec3(p) for p in chain]
    if len(points) < 2:
        return mesh

    axis = params.axis
    segments = params.segments
    step_count = params.step_count
    full = params.full

    distances = [axis.distance(p) for p in points]
    flip = resolve_winding(points, distances, axis, params.angle_step, tol, orientation)
    profiles = rotated_profiles(points, params)

    for step in range(segments):
        nxt = (step + 1) % step_count
        if not full and step == segments - 1:
            nxt = step + 1
        if nxt >= len(profiles):
            continue
        profile_a = profiles[step]
        profile_b = profiles[nxt]
        for i in range(len(points) - 1):
            _add_cell(mesh,
                      profile_a[i], profile_a[i + 1], profile_b[i + 1], profile_b[i],
                      distances[i], distances[i + 1], flip, tol)

    closed = dist(points[0], points[-1]) < tol
    if not full and closed and len(points) >= 4:
        start_reverse = flip if orientation == 'solid' else True
        start = add_profile_cap(mesh, profiles[0], axis, start_reverse, tol, cap_style)
        end = add_profile_cap(mesh, profiles[-1], axis, not start_reverse, tol, cap_style)
        logger.debug("added end caps: %d + %d triangles", start, end)

    logger.debug("chain of %d points (%s) -> %d triangles, flip=%s",
                 len(points), 'closed' if closed else 'open', mesh.triangle_count, flip)
    return mesh


def build_mesh(chains: Iterable[Sequence[Sequence[float]]], params: RevolveParams,
               tol: float = TOLERANCE, cap_style: str = 'fan',
               orientation: str = 'radial') -> Mesh:
    """Sweep every chain with ``params`` and collect the triangles."""

    mesh = Mesh(tol)
    for chain in chains:
        if len(chain) < 2:
            continue
        mesh.extend(revolve_chain(chain, params, tol, cap_style, orientation))
    return mesh


def revolve_profile(edges: Sequence[Edge], params: RevolveParams,
                    settings: Optional[RevolveSettings] = None) -> Mesh:
    """Trace ``edges`` into chains and revolve them.

    Raises ``EmptyProfile`` when there are no edges, ``InsufficientChain``
    when no chain has two points, ``DegenerateResult`` when the sweep
    yields no triangles, and ``ComputationFault`` for any other numerical
    failure.  A mesh is only returned when it holds at least one triangle.
    """

    settings = settings or RevolveSettings()
    edges = list(edges)
    if not edges:
        raise EmptyProfile('no edges found in the profile')

    try:
        chains: List[Chain] = trace_all_chains(build_adjacency(edges, settings.key_precision))
        if not chains:
            raise InsufficientChain('profile must have at least 2 connected points')

        logger.info("revolving %d edge(s) as %d chain(s) through %.6g degrees in %d segments",
                    len(edges), len(chains), params.angle, params.segments)
        for n, chain in enumerate(chains):
            logger.debug("chain %d: %d points, %s", n, len(chain),
                         'closed' if chain.is_closed(settings.tolerance) else 'open')

        mesh = build_mesh(chains, params, settings.tolerance, settings.cap_style,
                          settings.orientation)
    except RevolveError:
        raise
    except (ArithmeticError, LookupError, TypeError, ValueError) as exc:
        raise ComputationFault(f'error during revolve: {exc}') from exc

    if mesh.triangle_count == 0:
        raise DegenerateResult('could not create revolve geometry; check that the profile '
                               'is not on the axis')

    logger.info("revolve produced %d triangle(s) (%d degenerate candidate(s) dropped)",
                mesh.triangle_count, mesh.rejected)
    return mesh


__all__ = [
    'rotated_profiles',
    'revolve_chain',
    'build_mesh',
    'revolve_profile',
]
