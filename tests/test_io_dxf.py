import ezdxf
import pytest

from lathecad.chains import trace_chains
from lathecad.io.dxf import edges_from_entities, read_profile_edges

SQUARE = [(1, 0, 0), (1, 0, 1), (2, 0, 1), (2, 0, 0)]


def _square_lines(msp, layer='0'):
    for i in range(4):
        msp.add_line(SQUARE[i], SQUARE[(i + 1) % 4], dxfattribs={'layer': layer})


def test_read_lines(tmp_path):
    doc = ezdxf.new('R2010')
    _square_lines(doc.modelspace())
    path = tmp_path / 'square.dxf'
    doc.saveas(path)

    edges = read_profile_edges(path)
    assert len(edges) == 4
    chains = trace_chains(edges)
    assert len(chains) == 1
    assert len(chains[0]) == 5
    assert chains[0].is_closed()


def test_closed_lwpolyline():
    doc = ezdxf.new('R2010')
    msp = doc.modelspace()
    msp.add_lwpolyline([(1, 0), (2, 0), (2, 1), (1, 1)], close=True)
    edges = edges_from_entities(msp)
    assert len(edges) == 4
    assert all(p[2] == 0.0 for edge in edges for p in edge)


def test_arc_is_flattened():
    doc = ezdxf.new('R2010')
    msp = doc.modelspace()
    msp.add_arc((0, 0), radius=2, start_angle=0, end_angle=90)
    edges = edges_from_entities(msp, flatten_distance=0.01)
    assert len(edges) > 2
    chains = trace_chains(edges)
    assert len(chains) == 1
    assert chains[0][0] == pytest.approx((2, 0, 0), abs=1e-9)
    assert chains[0][-1] == pytest.approx((0, 2, 0), abs=1e-9)


def test_3dface_contributes_its_boundary():
    doc = ezdxf.new('R2010')
    msp = doc.modelspace()
    msp.add_3dface(SQUARE)
    # triangular face: the fourth vertex repeats the third
    msp.add_3dface([(3, 0, 0), (4, 0, 0), (3, 0, 1), (3, 0, 1)])
    edges = edges_from_entities(msp)
    assert len(edges) == 4 + 3


def test_layer_filter():
    doc = ezdxf.new('R2010')
    msp = doc.modelspace()
    _square_lines(msp, layer='PROFILE')
    msp.add_line((5, 0, 0), (6, 0, 0), dxfattribs={'layer': 'NOTES'})
    assert len(edges_from_entities(msp)) == 5
    assert len(edges_from_entities(msp, layers=['PROFILE'])) == 4


def test_unsupported_entities_are_ignored():
    doc = ezdxf.new('R2010')
    msp = doc.modelspace()
    msp.add_text('label')
    msp.add_point((1, 1))
    assert edges_from_entities(msp) == []


def test_duplicate_lines_follow_key_precision(tmp_path):
    doc = ezdxf.new('R2010')
    msp = doc.modelspace()
    msp.add_line((1, 0, 0), (1, 0, 1))
    msp.add_line((1.00001, 0, 0), (1.00001, 0, 1))
    assert len(edges_from_entities(msp)) == 1
    assert len(edges_from_entities(msp, precision=6)) == 2

    path = tmp_path / 'close.dxf'
    doc.saveas(path)
    assert len(read_profile_edges(path, precision=6)) == 2
