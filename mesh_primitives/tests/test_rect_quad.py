"""
Tests for grid tessellation of rectangles and quads.
"""

import pytest
import numpy as np
from mesh_primitives.core.primitives import Rect, Quad
from mesh_primitives.ops.normals import vertex_normals
from mesh_primitives.ops.rect import (
    grid_faces,
    grid_texturecoordinates,
    rect_coordinates,
    quad_coordinates,
    quad_normals,
)


def test_grid_faces():
    """Test quad indices of a 3 x 2 grid."""
    np.testing.assert_array_equal(
        grid_faces((3, 2)),
        [[0, 2, 3, 1], [2, 4, 5, 3]],
    )


def test_grid_face_count():
    """Test (nw - 1) * (nh - 1) faces."""
    assert grid_faces((5, 7)).shape == (24, 4)
    assert grid_faces(4).shape == (9, 4)


def test_grid_rejects_small_resolution():
    """Test that every axis needs at least two samples."""
    with pytest.raises(ValueError):
        grid_faces((1, 4))
    with pytest.raises(ValueError):
        grid_faces((2, 2, 2))


def test_rect_coordinates():
    """Test grid points of a rectangle, x outer and y inner."""
    rect = Rect((0, 0), (2, 1))
    points = rect_coordinates(rect, (3, 2))

    np.testing.assert_allclose(
        points,
        [[0, 0], [0, 1], [1, 0], [1, 1], [2, 0], [2, 1]],
    )


def test_rect_from_bounds():
    """Test construction from corner and extents."""
    rect = Rect.from_bounds(1, 2, 3, 4)
    np.testing.assert_array_equal(rect.origin, [1, 2])
    np.testing.assert_array_equal(rect.widths, [3, 4])


def test_grid_texturecoordinates():
    """Test that v runs from 1 down to 0."""
    np.testing.assert_allclose(
        grid_texturecoordinates((2, 2)),
        [[0, 1], [0, 0], [1, 1], [1, 0]],
    )


def test_rect_faces_counter_clockwise():
    """Test that grid faces over a rectangle face +z."""
    rect = Rect((0, 0), (3, 2))
    points = rect_coordinates(rect, (4, 3))
    lifted = np.column_stack([points, np.zeros(len(points))])

    normals = vertex_normals(lifted, grid_faces((4, 3)))
    np.testing.assert_allclose(normals, np.tile([0, 0, 1], (12, 1)))


def test_quad_coordinates():
    """Test corners of a unit quad in the xy plane."""
    quad = Quad((0, 0, 0), (1, 0, 0), (0, 1, 0))
    points = quad_coordinates(quad)

    np.testing.assert_allclose(
        points,
        [[0, 0, 0], [0, 1, 0], [1, 0, 0], [1, 1, 0]],
    )


def test_quad_skewed_grid():
    """Test interior grid points of a parallelogram."""
    quad = Quad((1, 1, 1), (2, 0, 0), (1, 0, 2))
    points = quad_coordinates(quad, (3, 3))

    assert points.shape == (9, 3)
    np.testing.assert_allclose(points[4], [2.5, 1.0, 2.0])
    np.testing.assert_allclose(points[-1], [4.0, 1.0, 3.0])


def test_quad_normals():
    """Test that analytic quad normals match averaged face normals."""
    quad = Quad((0, 0, 0), (2, 0, 0), (0, 0, 3))
    analytic = quad_normals(quad, (3, 4))

    np.testing.assert_allclose(analytic, np.tile([0, -1, 0], (12, 1)))

    averaged = vertex_normals(quad_coordinates(quad, (3, 4)), grid_faces((3, 4)))
    np.testing.assert_allclose(averaged, analytic, atol=1e-12)


def test_quad_degenerate_normal():
    """Test that a collapsed quad has no normal."""
    quad = Quad((0, 0, 0), (1, 0, 0), (2, 0, 0))
    with pytest.raises(ValueError, match="zero-length"):
        quad_normals(quad)


def test_quad_normals_small_scale():
    """Test that a tiny but valid quad keeps its normal."""
    quad = Quad((0, 0, 0), (1e-7, 0, 0), (0, 1e-7, 0))
    np.testing.assert_allclose(quad_normals(quad, (2, 2)), np.tile([0, 0, 1], (4, 1)))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
