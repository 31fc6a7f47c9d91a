import numpy as np
import pytest

from codedrills.sphere import build_sphere


def test_default_mesh_sizes():
    mesh = build_sphere()
    assert mesh.vertices.shape == ((18 + 1) * (36 + 1), 6)
    assert mesh.indices.size % 3 == 0


def test_positions_lie_on_sphere():
    mesh = build_sphere(2.5, 12, 8)
    distances = np.linalg.norm(mesh.positions, axis=1)
    assert np.allclose(distances, 2.5, atol=1e-5)


def test_normals_are_unit_and_radial():
    mesh = build_sphere(3.0, 10, 6)
    assert np.allclose(np.linalg.norm(mesh.normals, axis=1), 1.0, atol=1e-5)
    assert np.allclose(mesh.normals * 3.0, mesh.positions, atol=1e-5)


def test_first_vertex_is_north_pole():
    mesh = build_sphere(2.0, 8, 4)
    assert np.allclose(mesh.positions[0], [0.0, 0.0, 2.0], atol=1e-6)
    assert np.allclose(mesh.positions[-1], [0.0, 0.0, -2.0], atol=1e-6)


def test_indices_refer_to_existing_vertices():
    mesh = build_sphere(1.0, 7, 5)
    assert mesh.indices.max() < len(mesh.vertices)
    assert mesh.indices.dtype == np.uint32


def test_first_triangles_follow_winding():
    sectors = 4
    mesh = build_sphere(1.0, sectors, 3)
    first = mesh.triangles[0].tolist()
    assert first == [1, sectors + 1, sectors + 2]


def test_pole_rows_have_single_triangles():
    sectors, stacks = 6, 5
    mesh = build_sphere(1.0, sectors, stacks)
    full_rows = stacks - 2
    assert len(mesh.triangles) == sectors * (2 * full_rows + 2)


def test_triangles_have_distinct_corners():
    mesh = build_sphere(1.0, 9, 7)
    corner_counts = [len(set(triangle)) for triangle in mesh.triangles.tolist()]
    assert len(corner_counts) == 9 * (2 * 5 + 2)
    assert corner_counts == [3] * len(corner_counts)


@pytest.mark.parametrize(
    "radius, sectors, stacks",
    [(0.0, 36, 18), (-1.0, 36, 18), (1.0, 0, 18), (1.0, 36, 0)],
)
def test_rejects_invalid_parameters(radius, sectors, stacks):
    with pytest.raises(ValueError):
        build_sphere(radius, sectors, stacks)