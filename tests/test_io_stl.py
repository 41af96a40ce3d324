import io
import struct

import pytest

from lathecad.geom import Axis
from lathecad.io.stl import write_stl
from lathecad.params import RevolveParams
from lathecad.revolve import revolve_profile

SQUARE_EDGES = [
    ((1, 0, 0), (1, 0, 1)),
    ((1, 0, 1), (2, 0, 1)),
    ((2, 0, 1), (2, 0, 0)),
    ((2, 0, 0), (1, 0, 0)),
]


@pytest.fixture
def ring():
    return revolve_profile(SQUARE_EDGES, RevolveParams(Axis((0, 0, 0), (0, 0, 1)), 360, 4))


def test_write_binary_stl(tmp_path, ring):
    path = tmp_path / 'ring.stl'
    count = write_stl(ring, path, name='ring')
    assert count == 32
    data = path.read_bytes()
    assert len(data) == 84 + 50 * 32
    assert data[:4] == b'ring'
    assert struct.unpack('<I', data[80:84])[0] == 32


def test_write_binary_stl_to_stream(ring):
    buf = io.BytesIO()
    write_stl(ring, buf)
    assert len(buf.getvalue()) == 84 + 50 * 32
    assert not buf.closed


def test_write_ascii_stl(tmp_path, ring):
    path = tmp_path / 'ring.stl'
    count = write_stl(ring, path, binary=False, name='ring')
    text = path.read_text()
    assert count == 32
    assert text.startswith('solid ring\n')
    assert text.rstrip().endswith('endsolid ring')
    assert text.count('facet normal') == 32
    assert text.count('vertex') == 96


def test_first_facet_normal_is_unit(ring):
    buf = io.BytesIO()
    write_stl(ring, buf)
    values = struct.unpack('<12fH', buf.getvalue()[84:134])
    nx, ny, nz = values[:3]
    assert nx * nx + ny * ny + nz * nz == pytest.approx(1.0, abs=1e-6)
