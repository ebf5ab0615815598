"""Tessellation presets for the primitive generators.

Each preset is a TessellationParams holding the resolution used for a
primitive kind when a generator is called without an explicit one.
Single numbers are sample or facet counts; pairs are grid vertices per
axis.
"""

from dataclasses import dataclass, asdict
from typing import Tuple


@dataclass(frozen=True)
class TessellationParams:
    """Default resolution per primitive kind."""

    circle: int = 64  # samples around the circle, first == last
    sphere: int = 24  # samples per theta / phi axis
    cylinder2: Tuple[int, int] = (2, 2)
    cylinder3: int = 30  # facets, rounded down to even, at least 8
    rect: Tuple[int, int] = (2, 2)
    quad: Tuple[int, int] = (2, 2)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> "TessellationParams":
        """Create from dictionary; missing keys keep their defaults."""
        kwargs = {}
        for name, value in d.items():
            if name not in cls.__dataclass_fields__:
                raise ValueError(f"Unknown tessellation parameter: {name}")
            kwargs[name] = tuple(value) if isinstance(value, list) else value
        return cls(**kwargs)


DEFAULT_RESOLUTIONS = TessellationParams().to_dict()


def default() -> TessellationParams:
    """Library defaults."""
    return TessellationParams()


def coarse() -> TessellationParams:
    """
    Smallest meshes that still read as the intended shape.

    Cylinders sit at the 8-facet minimum.
    """
    return TessellationParams(
        circle=16,
        sphere=8,
        cylinder3=8,
    )


def preview() -> TessellationParams:
    """Interactive preview quality."""
    return TessellationParams(
        circle=32,
        sphere=16,
        cylinder3=16,
    )


def fine() -> TessellationParams:
    """
    High quality output for smooth shading.

    Grids get interior vertices so per-vertex normals and UVs have
    something to interpolate over.
    """
    return TessellationParams(
        circle=256,
        sphere=96,
        cylinder2=(4, 16),
        cylinder3=128,
        rect=(8, 8),
        quad=(8, 8),
    )


PRESETS = {
    "default": default,
    "coarse": coarse,
    "preview": preview,
    "fine": fine,
}


def get_preset(name: str) -> TessellationParams:
    """
    Get a tessellation preset by name.

    Parameters
    ----------
    name : str
        Preset name (e.g., "coarse", "fine")

    Returns
    -------
    TessellationParams
        Resolution configuration

    Raises
    ------
    ValueError
        If preset name is not recognized
    """
    if name not in PRESETS:
        available = ", ".join(PRESETS.keys())
        raise ValueError(f"Unknown preset '{name}'. Available: {available}")

    return PRESETS[name]()


def list_presets() -> list:
    """List all available preset names."""
    return list(PRESETS.keys())
