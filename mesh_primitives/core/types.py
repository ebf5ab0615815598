"""
Point types and small vector helpers shared by the mesh generators.
"""

from dataclasses import dataclass
from typing import Sequence
import numpy as np


@dataclass(frozen=True)
class PointType:
    """
    Fixed-size point of a given dimension and floating dtype.

    Calling a point type converts any sequence into a point of that type,
    padding missing coordinates with zeros and dropping extra ones.

    Example
    -------
    >>> Point3((1.0, 2.0))
    array([1., 2., 0.])
    """

    ndim: int
    dtype: type = np.float64

    def __post_init__(self):
        if self.ndim < 1:
            raise ValueError(f"Point dimension must be >= 1, got {self.ndim}")
        if not np.issubdtype(np.dtype(self.dtype), np.floating):
            raise ValueError(f"Point dtype must be floating, got {self.dtype}")

    def __call__(self, values: Sequence[float]) -> np.ndarray:
        """Convert values to a point of this type."""
        values = np.asarray(values, dtype=self.dtype).reshape(-1)
        point = np.zeros(self.ndim, dtype=self.dtype)
        n = min(self.ndim, values.shape[0])
        point[:n] = values[:n]
        return point

    def zeros(self, n: int) -> np.ndarray:
        """Array of n zero points."""
        return np.zeros((n, self.ndim), dtype=self.dtype)


Point2 = PointType(2)
Point3 = PointType(3)
Point2f = PointType(2, np.float32)
Point3f = PointType(3, np.float32)


def as_float_dtype(dtype) -> np.dtype:
    """Validate and return a floating numpy dtype."""
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.floating):
        raise ValueError(f"Expected a floating dtype, got {dtype}")
    return dtype


def norm(v: np.ndarray):
    """Euclidean length, in the dtype of v."""
    return np.linalg.norm(v)


def normalize(v: np.ndarray) -> np.ndarray:
    """
    Unit vector in the direction of v.

    Raises
    ------
    ValueError
        If v is exactly zero or has a non-finite length. Tiny vectors
        are normalized as they are, so the result does not depend on scale.
    """
    length = norm(v)
    if length == 0 or not np.isfinite(length):
        raise ValueError("Cannot normalize zero-length vector")
    return v / length
