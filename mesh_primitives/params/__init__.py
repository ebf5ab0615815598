"""Tessellation presets and resolution validation."""

from .presets import (
    TessellationParams,
    DEFAULT_RESOLUTIONS,
    default,
    coarse,
    preview,
    fine,
    get_preset,
    list_presets,
    PRESETS,
)

from .validation import (
    validate_resolution,
    validate_params,
    validate_and_warn,
    PARAM_BOUNDS,
)

__all__ = [
    # Presets
    "TessellationParams",
    "DEFAULT_RESOLUTIONS",
    "default",
    "coarse",
    "preview",
    "fine",
    "get_preset",
    "list_presets",
    "PRESETS",
    # Validation
    "validate_resolution",
    "validate_params",
    "validate_and_warn",
    "PARAM_BOUNDS",
]
