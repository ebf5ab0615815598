"""
Tests for the dispatching mesh entry points.
"""

import pytest
import numpy as np
from mesh_primitives.core.faces import NgonFace, LineFace, TriangleFace
from mesh_primitives.core.primitives import (
    Circle, Sphere, Cylinder2, Cylinder3, Rect, Quad, Pyramid, Particle, HyperSphere,
)
from mesh_primitives.ops.decompose import (
    primitive_kind,
    default_resolution,
    coordinates,
    faces,
    texturecoordinates,
    normals,
    decompose,
)
from mesh_primitives.params.presets import get_preset


@pytest.mark.parametrize("p, kind", [
    (Circle((0, 0), 1.0), "circle"),
    (Sphere((0, 0, 0), 1.0), "sphere"),
    (HyperSphere((0, 0), 1.0), "circle"),
    (Cylinder2((0, 0), (0, 1), 1.0), "cylinder2"),
    (Cylinder3((0, 0, 0), (0, 0, 1), 1.0), "cylinder3"),
    (Rect((0, 0), (1, 1)), "rect"),
    (Quad((0, 0, 0), (1, 0, 0), (0, 1, 0)), "quad"),
    (Pyramid((0, 0, 0), 1.0, 1.0), "pyramid"),
])
def test_primitive_kind(p, kind):
    """Test generator family lookup."""
    assert primitive_kind(p) == kind


def test_unsupported_primitives():
    """Test that primitives without a generator raise TypeError."""
    with pytest.raises(TypeError):
        primitive_kind(Particle((0, 0, 0), (1, 0, 0)))
    with pytest.raises(TypeError):
        coordinates(HyperSphere((0, 0, 0, 0), 1.0))
    with pytest.raises(TypeError):
        decompose(TriangleFace, Particle((0, 0), (0, 1)))


@pytest.mark.parametrize("p, n_points, face_shape", [
    (Circle((0, 0), 1.0), 64, (61, 3)),
    (Sphere((0, 0, 0), 1.0), 576, (529, 4)),
    (Cylinder2((0, 0), (0, 1), 1.0), 4, (1, 4)),
    (Cylinder3((0, 0, 0), (0, 0, 1), 1.0), 32, (60, 3)),
    (Rect((0, 0), (1, 1)), 4, (1, 4)),
    (Quad((0, 0, 0), (1, 0, 0), (0, 1, 0)), 4, (1, 4)),
    (Pyramid((0, 0, 0), 1.0, 1.0), 18, (6, 3)),
])
def test_default_shapes(p, n_points, face_shape):
    """Test vertex and face counts at the default resolution."""
    points = coordinates(p)
    quads_or_tris = faces(p)

    assert points.shape == (n_points, p.ndim)
    assert quads_or_tris.shape == face_shape
    assert quads_or_tris.max() < n_points


def test_default_resolution():
    """Test resolution lookup from presets."""
    assert default_resolution(Sphere((0, 0, 0), 1.0)) == 24
    assert default_resolution(Rect((0, 0), (1, 1))) == (2, 2)
    assert default_resolution(Pyramid((0, 0, 0), 1.0, 1.0)) is None
    assert default_resolution(Circle((0, 0), 1.0), get_preset("fine")) == 256


def test_preset_resolution():
    """Test that params supply the resolution when none is given."""
    sphere = Sphere((0, 0, 0), 1.0)
    coarse = get_preset("coarse")

    assert coordinates(sphere, params=coarse).shape == (64, 3)
    assert faces(sphere, params=coarse).shape == (49, 4)
    # an explicit resolution wins over params
    assert coordinates(sphere, 5, params=coarse).shape == (25, 3)


def test_decompose_sphere_triangles():
    """Test triangulating a sphere."""
    vertices, triangles = decompose(TriangleFace, Sphere((0, 0, 0), 1.0), 12)

    assert vertices.shape == (144, 3)
    assert triangles.shape == (242, 3)
    assert triangles.dtype == np.int64


def test_decompose_rect_edges():
    """Test the wireframe of a single-cell rectangle."""
    vertices, edges = decompose(LineFace, Rect((0, 0), (1, 1)))

    assert vertices.shape == (4, 2)
    np.testing.assert_array_equal(edges, [[0, 2], [2, 3], [3, 1], [1, 0]])


def test_decompose_keeps_triangles():
    """Test that triangle faces pass through unchanged."""
    cyl = Cylinder3((0, 0, 0), (0, 0, 1), 1.0)
    _, triangles = decompose(TriangleFace, cyl, 16)

    np.testing.assert_array_equal(triangles, faces(cyl, 16))


def test_decompose_needs_fixed_arity():
    """Test that NgonFace is not a valid decompose target."""
    with pytest.raises(ValueError):
        decompose(NgonFace, Sphere((0, 0, 0), 1.0), 4)


def test_texturecoordinates():
    """Test UVs for the kinds that have them."""
    assert texturecoordinates(Circle((0, 0), 1.0)).shape == (64, 2)
    assert texturecoordinates(Sphere((0, 0, 0), 1.0), 6).shape == (36, 2)
    assert texturecoordinates(Rect((0, 0), (1, 1)), (3, 4)).shape == (12, 2)
    assert texturecoordinates(Quad((0, 0, 0), (1, 0, 0), (0, 1, 0))).shape == (4, 2)


def test_texturecoordinates_unsupported():
    """Test that cylinders and pyramids have no UVs."""
    with pytest.raises(TypeError):
        texturecoordinates(Cylinder3((0, 0, 0), (0, 0, 1), 1.0))
    with pytest.raises(TypeError):
        texturecoordinates(Pyramid((0, 0, 0), 1.0, 1.0))


def test_cylinder_normals_unit():
    """Test that every cylinder vertex gets a unit normal."""
    n = normals(Cylinder3((1, 0, 0), (2, 3, 4), 0.5), 12)

    assert n.shape == (14, 3)
    np.testing.assert_allclose(np.linalg.norm(n, axis=1), 1.0)


def test_circle_normals():
    """Test that circle normals point down except the unused closing sample."""
    n = normals(Circle((0, 0), 1.0), 16)

    assert n.shape == (16, 3)
    np.testing.assert_allclose(n[:-1], np.tile([0.0, 0.0, -1.0], (15, 1)))
    np.testing.assert_array_equal(n[-1], [0.0, 0.0, 0.0])


def test_rect_normals():
    """Test that rectangle normals point up."""
    n = normals(Rect((0, 0), (2, 1)), (3, 3))
    np.testing.assert_allclose(n, np.tile([0.0, 0.0, 1.0], (9, 1)))


def test_sphere_and_quad_normals_analytic():
    """Test that sphere and quad normals have one row per vertex."""
    assert normals(Sphere((0, 0, 0), 2.0), 6).shape == (36, 3)
    n = normals(Quad((0, 0, 0), (1, 0, 0), (0, 1, 0)), (2, 3))
    np.testing.assert_allclose(n, np.tile([0.0, 0.0, 1.0], (6, 1)))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
