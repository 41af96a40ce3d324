"""Reconstruct ordered polyline chains from unordered profile edges.

Endpoints are identified by rounding each coordinate to a fixed number
of decimal places.  The rounded triple is the point's key; a
``PointArena`` maps each key to a compact integer index so that the
adjacency graph and the traversal state are plain lists indexed by
point, rather than dictionaries keyed by strings.

Tracing is deterministic but not a full decomposition of branching
profiles.  At a junction (degree > 2) one unvisited branch is followed
and the others are left for later starting vertices, if any remain
unvisited by the time iteration reaches them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from lathecad.geom import KEY_PRECISION, TOLERANCE, Vec3, dist, to_vec3

logger = logging.getLogger(__name__)

PointKey = Tuple[int, int, int]
Edge = Tuple[Sequence[float], Sequence[float]]


def point_key(p: Sequence[float], precision: int = KEY_PRECISION) -> PointKey:
    """Quantize ``p`` to an integer triple at ``precision`` decimal places.

    Each coordinate is rounded to ``precision`` places and scaled to an
    integer, so two points share a key exactly when their rounded
    coordinates agree.
    """

    scale = 10 ** precision
    return (int(round(round(p[0], precision) * scale)),
            int(round(round(p[1], precision) * scale)),
            int(round(round(p[2], precision) * scale)))


class PointArena:
    """Spatial hash from quantized point keys to compact indices.

    The most recent point registered under a key is that index's
    representative point.
    """

    def __init__(self, precision: int = KEY_PRECISION):
        self.precision = precision
        self._index: Dict[PointKey, int] = {}
        self.points: List[Vec3] = []

    def __len__(self) -> int:
        return len(self.points)

    def __contains__(self, p) -> bool:
        return point_key(p, self.precision) in self._index

    def key(self, p: Sequence[float]) -> PointKey:
        return point_key(p, self.precision)

    def add(self, p: Sequence[float]) -> int:
        """Return the index for ``p``, registering it if the key is new.

        A point whose key is already known replaces the stored
        representative.
        """
        k = point_key(p, self.precision)
        idx = self._index.get(k)
        if idx is None:
            idx = len(self.points)
            self._index[k] = idx
            self.points.append(to_vec3(p))
        else:
            self.points[idx] = to_vec3(p)
        return idx

    def find(self, p: Sequence[float]) -> Optional[int]:
        return self._index.get(point_key(p, self.precision))

    def point(self, idx: int) -> Vec3:
        return self.points[idx]


@dataclass
class AdjacencyGraph:
    """Undirected graph over arena indices.

    ``neighbors[i]`` lists the neighbors of point ``i`` without
    duplicates, in the order they were first seen in the input edges.
    """

    arena: PointArena
    neighbors: List[List[int]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.neighbors)

    def degree(self, idx: int) -> int:
        return len(self.neighbors[idx])

    def point(self, idx: int) -> Vec3:
        return self.arena.point(idx)

    def connect(self, a: int, b: int) -> None:
        while len(self.neighbors) < len(self.arena):
            self.neighbors.append([])
        if a == b:
            return
        if b not in self.neighbors[a]:
            self.neighbors[a].append(b)
        if a not in self.neighbors[b]:
            self.neighbors[b].append(a)


@dataclass(frozen=True)
class Chain:
    """An ordered traced polyline of at least two points."""

    points: Tuple[Vec3, ...]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, i):
        return self.points[i]

    def is_closed(self, tol: float = TOLERANCE) -> bool:
        """True if the first and last points coincide within ``tol``."""
        return dist(self.points[0], self.points[-1]) < tol


def build_adjacency(edges: Iterable[Edge], precision: int = KEY_PRECISION) -> AdjacencyGraph:
    """Build the point adjacency graph for an unordered edge collection.

    Both endpoints of every edge are quantized into a shared arena and
    linked in both directions.  An empty edge list yields an empty graph.
    """

    arena = PointArena(precision)
    graph = AdjacencyGraph(arena)
    for p1, p2 in edges:
        a = arena.add(p1)
        b = arena.add(p2)
        graph.connect(a, b)
    return graph


def _resolve_start(graph: AdjacencyGraph, start: int) -> int:
    """Walk back from a mid-chain vertex towards a natural endpoint.

    Stops on a vertex whose degree is not 2, or on a vertex already seen
    during this walk (a closed loop), which then becomes the start.
    """

    if graph.degree(start) != 2:
        return start

    current = start
    prev = None
    seen = set()
    while graph.degree(current) == 2 and current not in seen:
        seen.add(current)
        nxt = next((n for n in graph.neighbors[current] if n != prev), None)
        if nxt is None:
            break
        prev, current = current, nxt
    return current


def _trace_from(graph: AdjacencyGraph, start: int, visited: List[bool]) -> List[Vec3]:
    points: List[Vec3] = []
    current = start
    prev = None

    while True:
        if visited[current] and points:
            break
        visited[current] = True
        points.append(graph.point(current))

        candidates = [n for n in graph.neighbors[current] if n != prev]
        if not candidates:
            break

        if len(candidates) == 1:
            nxt = candidates[0]
            if nxt == start and len(points) > 2:
                points.append(graph.point(nxt))
                break
            if visited[nxt]:
                break
        else:
            # junction: follow the first branch not yet traced
            nxt = next((n for n in candidates if not visited[n]), None)
            if nxt is None:
                break

        prev, current = current, nxt

    return points


def trace_all_chains(graph: AdjacencyGraph) -> List[Chain]:
    """Extract ordered chains from ``graph``.

    Every vertex is visited at most once per call.  Chains shorter than
    two points are discarded.
    """

    visited = [False] * len(graph)
    chains: List[Chain] = []

    for idx in range(len(graph)):
        if visited[idx]:
            continue
        start = _resolve_start(graph, idx)
        points = _trace_from(graph, start, visited)
        if len(points) >= 2:
            chains.append(Chain(tuple(points)))

    if any(graph.degree(i) > 2 for i in range(len(graph))):
        logger.warning("profile has junction vertices; some branches may not be traced")
    logger.debug("traced %d chain(s) from %d point(s)", len(chains), len(graph))
    return chains


def trace_chains(edges: Iterable[Edge], precision: int = KEY_PRECISION) -> List[Chain]:
    """Convenience wrapper: ``trace_all_chains(build_adjacency(edges))``."""
    return trace_all_chains(build_adjacency(edges, precision))


__all__ = [
    'PointKey',
    'Edge',
    'point_key',
    'PointArena',
    'AdjacencyGraph',
    'Chain',
    'build_adjacency',
    'trace_all_chains',
    'trace_chains',
]
