"""Validation helpers for revolved meshes."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List

from lathecad.geom import (
    TOLERANCE,
    Axis,
    centroid,
    cross,
    dot,
    epsilon,
    triangle_is_valid,
    triangle_normal,
)
from lathecad.mesh import Mesh


def no_degenerate_triangles(mesh: Mesh, tol: float = TOLERANCE) -> "CheckResult":
    bad = [idx for idx, tri in enumerate(mesh) if not triangle_is_valid(*tri, tol)]
    if bad:
        return CheckResult(False, [f'degenerate triangle indices: {bad}'])
    return CheckResult(True, [])


def faces_consistent(mesh: Mesh, precision: int = 6) -> "CheckResult":
    """Check that neighbouring triangles agree on winding.

    With a consistent winding every directed edge is used at most once;
    a shared edge is walked in opposite directions by its two faces.
    """

    _, faces = mesh.indexed(precision)
    directed = Counter()
    for a, b, c in faces:
        directed[(a, b)] += 1
        directed[(b, c)] += 1
        directed[(c, a)] += 1
    repeated = [edge for edge, count in directed.items() if count > 1]
    if repeated:
        return CheckResult(False, [f'{len(repeated)} directed edges used more than once'])
    return CheckResult(True, [])


def mesh_watertight(mesh: Mesh, precision: int = 6) -> "CheckResult":
    _, faces = mesh.indexed(precision)
    edges = Counter()

    for a, b, c in faces:
        edges[_edge_key(a, b)] += 1
        edges[_edge_key(b, c)] += 1
        edges[_edge_key(c, a)] += 1

    boundary = [edge for edge, count in edges.items() if count == 1]
    invalid = [edge for edge, count in edges.items() if count > 2]

    warnings: List[str] = []
    ok = True
    if boundary:
        ok = False
        warnings.append(f'{len(boundary)} boundary edges detected')
    if invalid:
        ok = False
        warnings.append(f'edges with multiplicity >2: {invalid}')

    return CheckResult(ok, warnings)


def signed_volume(mesh: Mesh) -> float:
    """Volume enclosed by ``mesh`` by the divergence theorem.

    Each triangle ``(p0, p1, p2)`` contributes ``dot(p0, p1 x p2) / 6``.
    The sum is positive when a closed, consistently wound mesh has its
    normals pointing out of the enclosed volume.
    """

    total = 0.0
    for p0, p1, p2 in mesh:
        total += dot(p0, cross(p1, p2))
    return total / 6.0


def faces_outward(mesh: Mesh, tol: float = epsilon) -> "CheckResult":
    """Check that a closed mesh encloses a positive volume."""

    volume = signed_volume(mesh)
    if volume > tol:
        return CheckResult(True, [])
    if volume < -tol:
        return CheckResult(False, [f'normals point inward (signed volume {volume:.6g})'])
    return CheckResult(False, ['mesh encloses no volume'])


def faces_radially_outward(mesh: Mesh, axis: Axis, tol: float = epsilon) -> "CheckResult":
    """Check that no triangle normal points towards ``axis``.

    Each normal is compared with the radial direction at the triangle
    centroid; triangles whose centroid lies on the axis are ignored.
    """

    inward = []
    for idx, tri in enumerate(mesh):
        n = triangle_normal(*tri)
        if n is None:
            continue
        radial = axis.radial(centroid(tri))
        if dot(n, radial) < -tol:
            inward.append(idx)
    if inward:
        return CheckResult(False, [f'{len(inward)} triangles face the axis'])
    return CheckResult(True, [])


def _edge_key(a: int, b: int) -> tuple[int, int]:
    return (a, b) if a < b else (b, a)


@dataclass
class CheckResult:
    ok: bool
    warnings: List[str]

    def __bool__(self) -> bool:
        return self.ok


__all__ = [
    'CheckResult',
    'no_degenerate_triangles',
    'faces_consistent',
    'mesh_watertight',
    'signed_volume',
    'faces_outward',
    'faces_radially_outward',
]
