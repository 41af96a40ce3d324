"""Read revolve profiles from DXF drawings with ``ezdxf``.

LINE entities become single edges.  LWPOLYLINE, POLYLINE, ARC, CIRCLE,
ELLIPSE and SPLINE entities are flattened into straight segments with
``ezdxf.path``; 3DFACE entities contribute their boundary loop.  All
coordinates are returned in WCS.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

import ezdxf
from ezdxf import path as ezpath

from lathecad.chains import Edge
from lathecad.geom import KEY_PRECISION
from lathecad.profile import collect_edges

logger = logging.getLogger(__name__)

_PATH_TYPES = ('LWPOLYLINE', 'POLYLINE', 'ARC', 'CIRCLE', 'ELLIPSE', 'SPLINE')


def _xyz(v):
    return (float(v.x), float(v.y), float(v.z))


def _entity_geometry(entity, flatten_distance: float) -> list:
    kind = entity.dxftype()
    if kind == 'LINE':
        return [(_xyz(entity.dxf.start), _xyz(entity.dxf.end))]
    if kind == '3DFACE':
        verts = [_xyz(v) for v in entity.wcs_vertices()]
        # a triangular face repeats its last vertex
        unique = []
        for v in verts:
            if v not in unique:
                unique.append(v)
        return [unique] if len(unique) >= 3 else []
    if kind in _PATH_TYPES:
        pts = [_xyz(v) for v in ezpath.make_path(entity).flattening(flatten_distance)]
        return [(pts[i], pts[i + 1]) for i in range(len(pts) - 1) if pts[i] != pts[i + 1]]
    return []


def edges_from_entities(entities: Iterable, *, flatten_distance: float = 0.01,
                        layers: Optional[Iterable[str]] = None,
                        precision: int = KEY_PRECISION) -> List[Edge]:
    """Convert DXF entities into unique world-space edges.

    Edges are de-duplicated at ``precision`` decimals.
    """

    wanted = set(layers) if layers is not None else None
    geometry = []
    skipped = 0
    for entity in entities:
        if wanted is not None and entity.dxf.layer not in wanted:
            continue
        parts = _entity_geometry(entity, flatten_distance)
        if not parts:
            skipped += 1
        geometry.extend(parts)
    if skipped:
        logger.debug("ignored %d DXF entit(ies) without profile geometry", skipped)
    return collect_edges(geometry, precision=precision)


def read_profile_edges(path: Union[str, Path], *, flatten_distance: float = 0.01,
                       layers: Optional[Iterable[str]] = None,
                       precision: int = KEY_PRECISION) -> List[Edge]:
    """Read the modelspace of the DXF file at ``path`` as profile edges."""

    doc = ezdxf.readfile(str(path))
    edges = edges_from_entities(doc.modelspace(), flatten_distance=flatten_distance,
                                layers=layers, precision=precision)
    logger.info("read %d edge(s) from %s", len(edges), path)
    return edges


__all__ = ['edges_from_entities', 'read_profile_edges']
