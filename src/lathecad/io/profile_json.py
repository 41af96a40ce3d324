"""JSON edge lists.

The format is a mapping with an ``edges`` list of point pairs and an
optional ``loops`` list of closed point loops (faces)::

    {"edges": [[[1, 0, 0], [1, 0, 1]], ...],
     "loops": [[[0, 0, 0], [1, 0, 0], [1, 0, 1]]]}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence

from lathecad.chains import Edge
from lathecad.geom import KEY_PRECISION
from lathecad.profile import collect_edges

SCHEMA_ID = "lathecad-profile-v1"


def _as_point(value: Any) -> List[float]:
    if not isinstance(value, (list, tuple)) or len(value) not in (2, 3):
        raise ValueError(f'bad point in profile: {value!r}')
    pt = [float(c) for c in value]
    if len(pt) == 2:
        pt.append(0.0)
    return pt


def edges_from_json(data: Dict[str, Any], precision: int = KEY_PRECISION) -> List[Edge]:
    if not isinstance(data, dict):
        raise ValueError('profile JSON must be an object')
    entities = []
    for edge in data.get('edges', []):
        if not isinstance(edge, (list, tuple)) or len(edge) != 2:
            raise ValueError(f'bad edge in profile: {edge!r}')
        entities.append([_as_point(edge[0]), _as_point(edge[1])])
    for loop in data.get('loops', []):
        pts = [_as_point(p) for p in loop]
        if len(pts) < 3:
            raise ValueError('a loop needs at least three points')
        entities.append(pts)
    return collect_edges(entities, precision=precision)


def load_edges(path_or_file, precision: int = KEY_PRECISION) -> List[Edge]:
    """Read edges from a JSON file path or an open text stream.

    Duplicate edges are merged at ``precision`` decimals, the key
    precision the tracer will use.
    """

    if hasattr(path_or_file, 'read'):
        data = json.load(path_or_file)
    else:
        with Path(path_or_file).open('r', encoding='utf-8') as fp:
            data = json.load(fp)
    return edges_from_json(data, precision)


def dump_edges(edges: Sequence[Edge], path_or_file) -> None:
    payload = {
        'schema': SCHEMA_ID,
        'edges': [[[float(c) for c in p1[:3]], [float(c) for c in p2[:3]]] for p1, p2 in edges],
    }
    if hasattr(path_or_file, 'write'):
        json.dump(payload, path_or_file, indent=2)
    else:
        with Path(path_or_file).open('w', encoding='utf-8') as fp:
            json.dump(payload, fp, indent=2)


__all__ = ['SCHEMA_ID', 'edges_from_json', 'load_edges', 'dump_edges']
