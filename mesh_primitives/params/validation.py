"""Resolution validation with bounds checking.

validate_resolution is the hard check used by every generator: it
normalizes an int or tuple and raises on malformed input.
validate_params is the soft check for whole presets: it reports values
outside the recommended ranges as warnings.
"""

import logging
from numbers import Integral
from typing import List, Tuple, Union

from .presets import TessellationParams

logger = logging.getLogger(__name__)


PARAM_BOUNDS = {
    "circle": (4, 4096, "samples"),
    "sphere": (3, 1024, "samples"),
    "cylinder2": (2, 1024, "samples per axis"),
    "cylinder3": (8, 4096, "facets"),
    "rect": (2, 1024, "samples per axis"),
    "quad": (2, 1024, "samples per axis"),
}


def _as_count(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return int(value)


def validate_resolution(
    resolution: Union[int, Tuple[int, ...]],
    ndims: int = 1,
    minimum: int = 1,
) -> Union[int, Tuple[int, ...]]:
    """
    Normalize and check a resolution argument.

    Parameters
    ----------
    resolution : int or tuple of int
        Sample count, or counts per axis. A single int is repeated for
        every axis when ndims > 1.
    ndims : int
        Number of axes expected
    minimum : int
        Smallest allowed count per axis

    Returns
    -------
    int or tuple of int
        An int when ndims == 1, otherwise a tuple of length ndims

    Raises
    ------
    ValueError
        If the resolution is not integral, has the wrong number of axes,
        or is below minimum on some axis
    """
    if isinstance(resolution, (tuple, list)):
        counts = tuple(_as_count(v, "resolution") for v in resolution)
        if len(counts) != ndims:
            raise ValueError(
                f"resolution needs {ndims} values, got {len(counts)}: {resolution!r}"
            )
    else:
        counts = (_as_count(resolution, "resolution"),) * ndims

    for count in counts:
        if count < minimum:
            raise ValueError(f"resolution {resolution!r} is below minimum {minimum}")

    return counts[0] if ndims == 1 else counts


def validate_params(params: TessellationParams) -> Tuple[bool, List[str]]:
    """
    Validate TessellationParams against bounds.

    Parameters
    ----------
    params : TessellationParams
        Parameters to validate

    Returns
    -------
    is_valid : bool
        True if all parameters are valid
    warnings : list of str
        List of validation warnings/errors
    """
    warnings = []

    for param_name, (min_val, max_val, unit) in PARAM_BOUNDS.items():
        value = getattr(params, param_name)
        values = value if isinstance(value, tuple) else (value,)

        for v in values:
            if v < min_val:
                warnings.append(
                    f"{param_name} = {value} {unit} is below minimum {min_val} {unit}"
                )
                break
            if v > max_val:
                warnings.append(
                    f"{param_name} = {value} {unit} exceeds maximum {max_val} {unit}"
                )
                break

    if params.cylinder3 % 2 == 1:
        warnings.append(
            f"cylinder3 ({params.cylinder3}) is odd and will be rounded down to "
            f"{params.cylinder3 - 1} facets"
        )

    if params.circle < 5:
        warnings.append(
            f"circle ({params.circle}) repeats its first sample as the last one, "
            "leaving fewer than 4 distinct points"
        )

    is_valid = len(warnings) == 0
    return is_valid, warnings


def validate_and_warn(params: TessellationParams) -> TessellationParams:
    """
    Validate parameters and log warnings.

    Parameters
    ----------
    params : TessellationParams
        Parameters to validate

    Returns
    -------
    params : TessellationParams
        Same parameters (for chaining)
    """
    is_valid, warnings = validate_params(params)

    if not is_valid:
        logger.warning("Tessellation parameter warnings (%d):", len(warnings))
        for warning in warnings:
            logger.warning("  - %s", warning)

    return params
