"""
Face index types.

A face is an ordered tuple of 0-based vertex indices into a vertex
array. Fixed-arity subclasses check their length on construction.
"""

from typing import Iterable, Optional


class NgonFace(tuple):
    """Ordered tuple of vertex indices with any number of entries."""

    N: Optional[int] = None

    def __new__(cls, indices: Iterable[int] = ()):
        face = super().__new__(cls, (int(i) for i in indices))
        if cls.N is not None and len(face) != cls.N:
            raise ValueError(
                f"{cls.__name__} needs {cls.N} indices, got {len(face)}"
            )
        if cls.N is None and len(face) < 1:
            raise ValueError("NgonFace needs at least one index")
        return face

    def __repr__(self) -> str:
        return f"{type(self).__name__}{tuple.__repr__(self)}"

    def is_degenerate(self) -> bool:
        """True if an index appears more than once."""
        return len(set(self)) != len(self)

    def offset(self, amount: int) -> "NgonFace":
        """Same face with every index shifted by amount."""
        return type(self)(i + amount for i in self)


class LineFace(NgonFace):
    """Line segment between two vertices."""
    N = 2


class TriangleFace(NgonFace):
    """Triangle over three vertices."""
    N = 3


class QuadFace(NgonFace):
    """Quadrilateral over four vertices."""
    N = 4
