"""Triangle accumulator for revolved surfaces."""

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from lathecad.chains import point_key
from lathecad.geom import TOLERANCE, Vec3, to_vec3, triangle_is_valid, triangle_normal

Tri = Tuple[Vec3, Vec3, Vec3]
TriTuple = Tuple[Vec3, Vec3, Vec3, Vec3]


class Mesh:
    """An ordered collection of validated triangles.

    ``add_triangle`` refuses triangles with an edge shorter than the
    tolerance or with near-zero area, so every stored triangle is
    non-degenerate.  Vertex order is preserved exactly as given.
    """

    def __init__(self, tol: float = TOLERANCE):
        self.tol = tol
        self._triangles: List[Tri] = []
        self.rejected = 0

    def __len__(self) -> int:
        return len(self._triangles)

    def __iter__(self) -> Iterator[Tri]:
        return iter(self._triangles)

    @property
    def triangle_count(self) -> int:
        return len(self._triangles)

    @property
    def triangles(self) -> List[Tri]:
        return list(self._triangles)

    def add_triangle(self, p1, p2, p3, flip: bool = False) -> bool:
        """Validate and store a triangle, reversing it if ``flip`` is set.

        Returns ``True`` if the triangle was stored.
        """

        a, b, c = to_vec3(p1), to_vec3(p2), to_vec3(p3)
        if not triangle_is_valid(a, b, c, self.tol):
            self.rejected += 1
            return False
        if flip:
            self._triangles.append((a, c, b))
        else:
            self._triangles.append((a, b, c))
        return True

    def extend(self, other: "Mesh") -> None:
        """Append every triangle of ``other``; they are already validated."""
        self._triangles.extend(other._triangles)
        self.rejected += other.rejected

    def indexed(self, precision: int = 6) -> Tuple[List[Vec3], List[List[int]]]:
        """Weld coincident vertices and return ``(vertices, faces)``.

        Vertices are merged when they agree to ``precision`` decimal
        places; faces index into the vertex list.
        """

        index: Dict[Tuple[int, int, int], int] = {}
        verts: List[Vec3] = []
        faces: List[List[int]] = []
        for tri in self._triangles:
            face = []
            for v in tri:
                k = point_key(v, precision)
                idx = index.get(k)
                if idx is None:
                    idx = len(verts)
                    index[k] = idx
                    verts.append(v)
                face.append(idx)
            faces.append(face)
        return verts, faces

def mesh_view(mesh: Mesh) -> Iterator[TriTuple]:
    """Yield triangles as ``(normal, v0, v1, v2)``.

    Normals are unit vectors following the stored winding.  Stored
    triangles are never degenerate, but a normal that still underflows
    is skipped silently.
    """

    for v0, v1, v2 in mesh:
        n = triangle_normal(v0, v1, v2)
        if n is None:
            continue
        yield n, v0, v1, v2


__all__ = [
    'Tri',
    'TriTuple',
    'Mesh',
    'mesh_view',
]
