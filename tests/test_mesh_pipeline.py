import pytest
import numpy as np
import math
import trimesh

from mesh_primitives import TriangleFace, decompose, vertex_normals, extrema
from mesh_primitives.adapters import to_trimesh


def test_cylinder_watertightness(axis_cylinder, temp_dir):
    """Test that the cylinder mesh survives an STL round trip closed."""
    cylinder, radius, length = axis_cylinder

    result = to_trimesh(cylinder, 32)
    assert result.is_success()
    mesh = result.metadata['mesh']

    assert mesh.is_watertight, "Cylinder mesh should be watertight"
    assert mesh.is_winding_consistent, "Cylinder faces should be wound consistently"

    stl_path = temp_dir / "cylinder.stl"
    mesh.export(stl_path)
    reloaded = trimesh.load(stl_path)

    assert reloaded.is_watertight, "Reloaded mesh should be watertight"
    assert len(reloaded.faces) == 64


@pytest.mark.parametrize("facets", [8, 16, 30, 64])
def test_cylinder_volume(axis_cylinder, facets):
    """Test that the enclosed volume is the inscribed prism volume."""
    cylinder, radius, length = axis_cylinder
    mesh = to_trimesh(cylinder, facets).metadata['mesh']

    nbv = facets // 2
    expected = 0.5 * nbv * radius**2 * math.sin(2 * math.pi / nbv) * length
    # positive volume means the faces point outward
    assert mesh.volume == pytest.approx(expected, rel=1e-9)


def test_tilted_cylinder_volume(tilted_cylinder):
    """Test that orientation does not change the enclosed volume."""
    cylinder, radius, length = tilted_cylinder
    mesh = to_trimesh(cylinder, 24).metadata['mesh']

    expected = 0.5 * 12 * radius**2 * math.sin(2 * math.pi / 12) * length
    assert mesh.is_watertight
    assert mesh.volume == pytest.approx(expected, rel=1e-9)

    low, high = extrema(cylinder)
    assert np.all(mesh.bounds[0] >= low - 1e-9)
    assert np.all(mesh.bounds[1] <= high + 1e-9)


def test_cylinder_normals_point_outward(tilted_cylinder):
    """Test that averaged vertex normals of the ring point away from the axis."""
    cylinder, radius, length = tilted_cylinder
    vertices, triangles = decompose(TriangleFace, cylinder, 20)
    normals = vertex_normals(vertices, triangles)

    axis = (cylinder.extremity - cylinder.origin) / length
    ring = vertices[:-2] - cylinder.origin
    radial = ring - np.outer(ring @ axis, axis)

    assert np.all(np.sum(normals[:-2] * radial, axis=1) > 0)
    assert np.dot(normals[-2], axis) == pytest.approx(-1.0)
    assert np.dot(normals[-1], axis) == pytest.approx(1.0)


def test_sphere_faces_point_outward(unit_sphere):
    """Test that every non-degenerate sphere triangle faces away from the center."""
    vertices, triangles = decompose(TriangleFace, unit_sphere, 16)

    v = vertices[triangles]
    n = np.cross(v[:, 1] - v[:, 0], v[:, 2] - v[:, 0])
    keep = np.linalg.norm(n, axis=1) > 1e-10
    centroids = v.mean(axis=1)

    assert keep.sum() > 0
    assert np.all(np.sum(n[keep] * centroids[keep], axis=1) > 0)


def test_sphere_mesh_area(unit_sphere):
    """Test that a fine sphere mesh approaches the analytic surface area."""
    mesh = to_trimesh(unit_sphere, 96).metadata['mesh']

    assert mesh.area == pytest.approx(4 * math.pi, rel=1e-2)
    assert mesh.area < 4 * math.pi


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
