import pytest
import numpy as np
from pathlib import Path
import tempfile

from mesh_primitives import Cylinder3, Sphere


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def axis_cylinder():
    """Create a cylinder along +z for testing."""
    radius = 0.5
    length = 5.0

    cylinder = Cylinder3(origin=(0, 0, 0), extremity=(0, 0, length), r=radius)

    return cylinder, radius, length


@pytest.fixture
def tilted_cylinder():
    """Create a cylinder whose axis is not aligned with any coordinate axis."""
    origin = np.array([1.0, -2.0, 0.5])
    axis = np.array([2.0, 1.0, 3.0])
    radius = 0.3

    cylinder = Cylinder3(origin=origin, extremity=origin + axis, r=radius)

    return cylinder, radius, float(np.linalg.norm(axis))


@pytest.fixture
def unit_sphere():
    """Create a unit sphere at the origin."""
    return Sphere(center=(0, 0, 0), r=1.0)
