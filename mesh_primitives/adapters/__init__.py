"""Adapters to external mesh libraries."""

from .mesh_adapter import to_trimesh

__all__ = [
    "to_trimesh",
]
