"""Flatten profile entities into world-space edges.

A profile is a mix of loose edges and faces.  A loose edge is a pair of
points; a face is given by its boundary loop (a sequence of three or
more points, optionally repeating the first point at the end).  Each
face contributes its boundary edges.  Edges shared between faces, or
repeated as loose edges, are emitted once.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Set, Tuple

from lathecad.chains import Edge, point_key
from lathecad.geom import KEY_PRECISION, Vec3, to_vec3
from lathecad.xform import Matrix


def is_edge(entity) -> bool:
    return (isinstance(entity, (tuple, list)) and len(entity) == 2
            and all(isinstance(p, (tuple, list)) and len(p) >= 3 for p in entity))


def is_loop(entity) -> bool:
    return (isinstance(entity, (tuple, list)) and len(entity) >= 3
            and all(isinstance(p, (tuple, list)) and len(p) >= 3 for p in entity))


def loop_edges(loop: Sequence[Sequence[float]]) -> List[Tuple[Vec3, Vec3]]:
    """Boundary edges of a closed loop, including the closing edge."""

    pts = [to_vec3(p) for p in loop]
    if len(pts) > 1 and pts[0] == pts[-1]:
        pts = pts[:-1]
    return [(pts[i], pts[(i + 1) % len(pts)]) for i in range(len(pts))]


def collect_edges(entities: Iterable, transform: Optional[Matrix] = None,
                  precision: int = KEY_PRECISION) -> List[Edge]:
    """Return the unique edges of ``entities`` in world space.

    ``transform`` is applied to every endpoint (for example a group's
    placement).  Edges are unique up to direction and key quantization;
    the first occurrence wins.
    """

    edges: List[Edge] = []
    seen: Set[frozenset] = set()

    def _emit(p1, p2):
        if transform is not None:
            p1 = transform.mul(p1)
            p2 = transform.mul(p2)
        else:
            p1, p2 = to_vec3(p1), to_vec3(p2)
        key = frozenset((point_key(p1, precision), point_key(p2, precision)))
        if key in seen:
            return
        seen.add(key)
        edges.append((p1, p2))

    for entity in entities:
        if is_edge(entity):
            _emit(entity[0], entity[1])
        elif is_loop(entity):
            for p1, p2 in loop_edges(entity):
                _emit(p1, p2)
        else:
            raise ValueError(f'unrecognized profile entity: {entity!r}')
    return edges


__all__ = ['is_edge', 'is_loop', 'loop_edges', 'collect_edges']
