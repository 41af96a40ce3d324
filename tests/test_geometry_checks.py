import pytest

from lathecad.geom import Axis
from lathecad.geometry_checks import (
    CheckResult,
    faces_consistent,
    faces_outward,
    faces_radially_outward,
    mesh_watertight,
    no_degenerate_triangles,
    signed_volume,
)
from lathecad.mesh import Mesh
from lathecad.params import RevolveParams
from lathecad.revolve import revolve_chain

TETRA = [(0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1)]
TETRA_FACES = [(0, 2, 1), (0, 1, 3), (1, 2, 3), (0, 3, 2)]


def _make_tetra(flip_last=False):
    mesh = Mesh()
    for n, (a, b, c) in enumerate(TETRA_FACES):
        flip = flip_last and n == len(TETRA_FACES) - 1
        mesh.add_triangle(TETRA[a], TETRA[b], TETRA[c], flip)
    return mesh


def _make_square():
    mesh = Mesh()
    mesh.add_triangle((0, 0, 0), (1, 0, 0), (1, 1, 0))
    mesh.add_triangle((0, 0, 0), (1, 1, 0), (0, 1, 0))
    return mesh


def test_check_result_truthiness():
    assert CheckResult(True, [])
    assert not CheckResult(False, ['nope'])


def test_tetra_is_closed_and_consistent():
    mesh = _make_tetra()
    assert no_degenerate_triangles(mesh)
    assert faces_consistent(mesh)
    assert mesh_watertight(mesh)


def test_flipped_face_is_inconsistent():
    mesh = _make_tetra(flip_last=True)
    result = faces_consistent(mesh)
    assert not result
    assert 'directed edges' in result.warnings[0]
    # flipping does not open the surface
    assert mesh_watertight(mesh)


def test_open_square_has_boundary():
    result = mesh_watertight(_make_square())
    assert not result
    assert result.warnings == ['4 boundary edges detected']
    assert faces_consistent(_make_square())


def test_degenerate_detected_with_stricter_tolerance():
    mesh = _make_square()
    assert no_degenerate_triangles(mesh)
    assert not no_degenerate_triangles(mesh, tol=2.0)


def test_radially_outward():
    axis = Axis((0, 0, 0), (0, 0, 1))
    chain = [(1, 0, 0), (1, 0, 1)]
    mesh = revolve_chain(chain, RevolveParams(axis, 360, 6))
    assert faces_radially_outward(mesh, axis)

    reversed_mesh = Mesh()
    for a, b, c in mesh:
        reversed_mesh.add_triangle(a, b, c, flip=True)
    result = faces_radially_outward(reversed_mesh, axis)
    assert not result
    assert result.warnings == ['12 triangles face the axis']


def test_signed_volume_of_tetra():
    assert signed_volume(_make_tetra()) == pytest.approx(1.0 / 6.0)
    assert faces_outward(_make_tetra())


def test_inside_out_tetra():
    mesh = Mesh()
    for a, b, c in _make_tetra():
        mesh.add_triangle(a, b, c, flip=True)
    assert signed_volume(mesh) == pytest.approx(-1.0 / 6.0)
    result = faces_outward(mesh)
    assert not result
    assert result.warnings[0].startswith('normals point inward')


def test_flat_surface_has_no_volume():
    result = faces_outward(_make_square())
    assert not result
    assert result.warnings == ['mesh encloses no volume']
