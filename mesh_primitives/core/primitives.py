"""
Geometric primitive catalog.

Primitives are immutable value types. Array fields are stored as
read-only numpy arrays in the primitive's floating dtype, so every
quantity derived from a primitive is computed in one precision.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional
import numpy as np

from .types import as_float_dtype


def _as_point(values, ndim: Optional[int], dtype: np.dtype, name: str) -> np.ndarray:
    point = np.array(values, dtype=dtype).reshape(-1)
    if ndim is not None and point.shape[0] != ndim:
        raise ValueError(f"{name} must have {ndim} coordinates, got {point.shape[0]}")
    point.setflags(write=False)
    return point


@dataclass(frozen=True, eq=False)
class GeometryPrimitive:
    """Base for all primitives: dtype handling and serialization."""

    TYPE_TAG: ClassVar[str] = ""
    NDIM: ClassVar[Optional[int]] = None

    def _set(self, name: str, value) -> None:
        object.__setattr__(self, name, value)

    def _init_dtype(self) -> np.dtype:
        dtype = as_float_dtype(self.dtype)
        self._set("dtype", dtype)
        return dtype

    @property
    def ndim(self) -> int:
        raise NotImplementedError

    def _payload(self) -> dict:
        raise NotImplementedError

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        d = {"type": self.TYPE_TAG}
        d.update(self._payload())
        d["dtype"] = self.dtype.name
        return d

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v}" for k, v in self._payload().items())
        return f"{type(self).__name__}({fields})"


@dataclass(frozen=True, eq=False, repr=False)
class HyperSphere(GeometryPrimitive):
    """
    N-dimensional sphere given by its center and radius ``r``.

    ``Circle`` and ``Sphere`` fix the dimension to 2 and 3.
    """

    center: np.ndarray
    r: float
    dtype: type = np.float64

    TYPE_TAG: ClassVar[str] = "hypersphere"

    def __post_init__(self):
        dtype = self._init_dtype()
        self._set("center", _as_point(self.center, self.NDIM, dtype, "center"))
        self._set("r", dtype.type(self.r))
        if self.r < 0:
            raise ValueError(f"Radius must be non-negative, got {self.r}")

    @property
    def ndim(self) -> int:
        return self.center.shape[0]

    def _payload(self) -> dict:
        return {"center": self.center.tolist(), "r": float(self.r)}

    @classmethod
    def from_dict(cls, d: dict) -> "HyperSphere":
        """Create from dictionary."""
        return cls(center=d["center"], r=d["r"], dtype=d.get("dtype", "float64"))


@dataclass(frozen=True, eq=False, repr=False)
class Circle(HyperSphere):
    """Two-dimensional HyperSphere."""

    TYPE_TAG: ClassVar[str] = "circle"
    NDIM: ClassVar[Optional[int]] = 2


@dataclass(frozen=True, eq=False, repr=False)
class Sphere(HyperSphere):
    """Three-dimensional HyperSphere."""

    TYPE_TAG: ClassVar[str] = "sphere"
    NDIM: ClassVar[Optional[int]] = 3


@dataclass(frozen=True, eq=False, repr=False)
class Cylinder(GeometryPrimitive):
    """
    Cylinder from ``origin`` to ``extremity`` with radius ``r``.

    In 2D this is a rectangle of width ``r`` along the segment; in 3D a
    closed circular cylinder. Use ``Cylinder2`` / ``Cylinder3`` to fix
    the dimension.
    """

    origin: np.ndarray
    extremity: np.ndarray
    r: float
    dtype: type = np.float64

    TYPE_TAG: ClassVar[str] = "cylinder"

    def __post_init__(self):
        dtype = self._init_dtype()
        self._set("origin", _as_point(self.origin, self.NDIM, dtype, "origin"))
        self._set(
            "extremity",
            _as_point(self.extremity, self.origin.shape[0], dtype, "extremity"),
        )
        if self.origin.shape[0] not in (2, 3):
            raise ValueError(f"Cylinder must be 2D or 3D, got {self.origin.shape[0]}D")
        self._set("r", dtype.type(self.r))
        if self.r < 0:
            raise ValueError(f"Radius must be non-negative, got {self.r}")

    @property
    def ndim(self) -> int:
        return self.origin.shape[0]

    def _payload(self) -> dict:
        return {
            "origin": self.origin.tolist(),
            "extremity": self.extremity.tolist(),
            "r": float(self.r),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Cylinder":
        """Create from dictionary."""
        return cls(
            origin=d["origin"],
            extremity=d["extremity"],
            r=d["r"],
            dtype=d.get("dtype", "float64"),
        )


@dataclass(frozen=True, eq=False, repr=False)
class Cylinder2(Cylinder):
    """Two-dimensional cylinder (a rotated rectangle)."""

    TYPE_TAG: ClassVar[str] = "cylinder2"
    NDIM: ClassVar[Optional[int]] = 2


@dataclass(frozen=True, eq=False, repr=False)
class Cylinder3(Cylinder):
    """Three-dimensional cylinder."""

    TYPE_TAG: ClassVar[str] = "cylinder3"
    NDIM: ClassVar[Optional[int]] = 3


@dataclass(frozen=True, eq=False, repr=False)
class Rect(GeometryPrimitive):
    """Axis-aligned rectangle with lower-left ``origin`` and ``widths``."""

    origin: np.ndarray
    widths: np.ndarray
    dtype: type = np.float64

    TYPE_TAG: ClassVar[str] = "rect"
    NDIM: ClassVar[Optional[int]] = 2

    def __post_init__(self):
        dtype = self._init_dtype()
        self._set("origin", _as_point(self.origin, self.NDIM, dtype, "origin"))
        self._set("widths", _as_point(self.widths, self.NDIM, dtype, "widths"))

    @classmethod
    def from_bounds(cls, x: float, y: float, w: float, h: float, dtype=np.float64) -> "Rect":
        """Create from lower-left corner and extents."""
        return cls(origin=(x, y), widths=(w, h), dtype=dtype)

    @property
    def ndim(self) -> int:
        return 2

    def _payload(self) -> dict:
        return {"origin": self.origin.tolist(), "widths": self.widths.tolist()}

    @classmethod
    def from_dict(cls, d: dict) -> "Rect":
        """Create from dictionary."""
        return cls(origin=d["origin"], widths=d["widths"], dtype=d.get("dtype", "float64"))


@dataclass(frozen=True, eq=False, repr=False)
class Quad(GeometryPrimitive):
    """Parallelogram in 3D spanned by ``width`` and ``height`` from ``downleft``."""

    downleft: np.ndarray
    width: np.ndarray
    height: np.ndarray
    dtype: type = np.float64

    TYPE_TAG: ClassVar[str] = "quad"
    NDIM: ClassVar[Optional[int]] = 3

    def __post_init__(self):
        dtype = self._init_dtype()
        for name in ("downleft", "width", "height"):
            self._set(name, _as_point(getattr(self, name), self.NDIM, dtype, name))

    @property
    def ndim(self) -> int:
        return 3

    def _payload(self) -> dict:
        return {
            "downleft": self.downleft.tolist(),
            "width": self.width.tolist(),
            "height": self.height.tolist(),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Quad":
        """Create from dictionary."""
        return cls(
            downleft=d["downleft"],
            width=d["width"],
            height=d["height"],
            dtype=d.get("dtype", "float64"),
        )


@dataclass(frozen=True, eq=False, repr=False)
class Pyramid(GeometryPrimitive):
    """Square pyramid: base centered on ``middle``, apex ``length`` above it."""

    middle: np.ndarray
    length: float
    width: float
    dtype: type = np.float64

    TYPE_TAG: ClassVar[str] = "pyramid"
    NDIM: ClassVar[Optional[int]] = 3

    def __post_init__(self):
        dtype = self._init_dtype()
        self._set("middle", _as_point(self.middle, self.NDIM, dtype, "middle"))
        self._set("length", dtype.type(self.length))
        self._set("width", dtype.type(self.width))

    @property
    def ndim(self) -> int:
        return 3

    def _payload(self) -> dict:
        return {
            "middle": self.middle.tolist(),
            "length": float(self.length),
            "width": float(self.width),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Pyramid":
        """Create from dictionary."""
        return cls(
            middle=d["middle"],
            length=d["length"],
            width=d["width"],
            dtype=d.get("dtype", "float64"),
        )


@dataclass(frozen=True, eq=False, repr=False)
class Particle(GeometryPrimitive):
    """Point particle with a velocity."""

    position: np.ndarray
    velocity: np.ndarray
    dtype: type = np.float64

    TYPE_TAG: ClassVar[str] = "particle"

    def __post_init__(self):
        dtype = self._init_dtype()
        self._set("position", _as_point(self.position, None, dtype, "position"))
        self._set(
            "velocity",
            _as_point(self.velocity, self.position.shape[0], dtype, "velocity"),
        )

    @property
    def ndim(self) -> int:
        return self.position.shape[0]

    def _payload(self) -> dict:
        return {"position": self.position.tolist(), "velocity": self.velocity.tolist()}

    @classmethod
    def from_dict(cls, d: dict) -> "Particle":
        """Create from dictionary."""
        return cls(
            position=d["position"],
            velocity=d["velocity"],
            dtype=d.get("dtype", "float64"),
        )


PRIMITIVE_TYPES = {
    cls.TYPE_TAG: cls
    for cls in (
        HyperSphere, Circle, Sphere,
        Cylinder, Cylinder2, Cylinder3,
        Rect, Quad, Pyramid, Particle,
    )
}


def primitive_from_dict(d: dict) -> GeometryPrimitive:
    """Create primitive from dictionary based on type."""
    primitive_type = d.get("type")
    cls = PRIMITIVE_TYPES.get(primitive_type)
    if cls is None:
        raise ValueError(f"Unknown primitive type: {primitive_type}")
    return cls.from_dict(d)
