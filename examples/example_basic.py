"""
Basic example of using the mesh_primitives package.

This example demonstrates:
1. Building primitives
2. Generating vertices, faces and normals
3. Exporting a cylinder through trimesh
"""

import logging

from mesh_primitives import (
    Cylinder3,
    Sphere,
    TriangleFace,
    coordinates,
    faces,
    normals,
    decompose,
    extrema,
    get_preset,
    setup_logging,
)
from mesh_primitives.adapters import to_trimesh

setup_logging(logging.INFO)

cylinder = Cylinder3(origin=(0, 0, 0), extremity=(1, 2, 3), r=0.25)
sphere = Sphere(center=(0, 0, 0), r=1.0)

print("Generating meshes...")

points = coordinates(cylinder, 16)
triangles = faces(cylinder, 16)
print(f"Cylinder: {len(points)} vertices, {len(triangles)} triangles")

vertices, sphere_triangles = decompose(TriangleFace, sphere, params=get_preset("preview"))
print(f"Sphere: {len(vertices)} vertices, {len(sphere_triangles)} triangles")
print(f"Sphere normals: {normals(sphere, 16).shape}")

low, high = extrema(cylinder)
print(f"Cylinder bounds: {low} -> {high}")

result = to_trimesh(cylinder, 64)

print("\n=== Export Results ===")
print(f"Status: {result.status.value}")
print(f"Watertight: {result.metadata.get('is_watertight')}")

if result.is_success():
    mesh = result.metadata['mesh']
    print(f"Volume: {mesh.volume:.6f}")
    mesh.export("cylinder.stl")
else:
    print(f"Errors: {result.error_codes}")
