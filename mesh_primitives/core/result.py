"""
Result type for mesh building operations that report instead of raise.

The generators raise on bad input; adapters that hand meshes to other
libraries wrap the outcome in an OperationResult so callers can inspect
status, warnings and error codes in one place.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional
from enum import Enum


class OperationStatus(Enum):
    """Status of an operation."""
    SUCCESS = "success"
    PARTIAL_SUCCESS = "partial_success"
    FAILURE = "failure"


class ErrorCode(Enum):
    """Why a mesh could not be built."""
    INVALID_RESOLUTION = "INVALID_RESOLUTION"  # malformed or too-small resolution
    DEGENERATE_GEOMETRY = "DEGENERATE_GEOMETRY"  # e.g. zero-length cylinder
    UNSUPPORTED_PRIMITIVE = "UNSUPPORTED_PRIMITIVE"  # no generator for the kind
    MESH_EXPORT_FAILED = "MESH_EXPORT_FAILED"  # rejected by the target library


def _json_safe(value) -> bool:
    return isinstance(value, (str, int, float, bool, list, dict, type(None)))


@dataclass
class OperationResult:
    """
    Outcome of a mesh operation.

    Library objects such as a ``trimesh.Trimesh`` travel in ``metadata``
    next to plain counts and flags; ``to_dict`` keeps only the plain ones.
    """

    status: OperationStatus
    message: str = ""
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    error_codes: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def is_success(self) -> bool:
        """Check if operation was successful."""
        return self.status in (OperationStatus.SUCCESS, OperationStatus.PARTIAL_SUCCESS)

    def is_failure(self) -> bool:
        """Check if operation failed."""
        return self.status == OperationStatus.FAILURE

    @property
    def mesh(self):
        """The built mesh, or None on failure."""
        return self.metadata.get('mesh')

    def add_warning(self, warning: str) -> None:
        """Add a warning message."""
        self.warnings.append(warning)

    def add_error(self, error: str, code: Optional[ErrorCode] = None) -> None:
        """Add an error message with optional error code."""
        self.errors.append(error)
        if code is not None:
            self.error_codes.append(code.value)

    def to_dict(self) -> dict:
        """Convert to a JSON-safe dictionary; non-plain metadata is dropped."""
        return {
            "status": self.status.value,
            "message": self.message,
            "warnings": list(self.warnings),
            "errors": list(self.errors),
            "error_codes": list(self.error_codes),
            "metadata": {k: v for k, v in self.metadata.items() if _json_safe(v)},
        }

    @classmethod
    def from_dict(cls, d: dict) -> "OperationResult":
        """Create from dictionary."""
        return cls(
            status=OperationStatus(d["status"]),
            message=d.get("message", ""),
            warnings=d.get("warnings", []),
            errors=d.get("errors", []),
            error_codes=d.get("error_codes", []),
            metadata=d.get("metadata", {}),
        )

    @classmethod
    def success(cls, message: str = "", **kwargs) -> "OperationResult":
        """Create a success result."""
        return cls(status=OperationStatus.SUCCESS, message=message, **kwargs)

    @classmethod
    def failure(cls, message: str = "", **kwargs) -> "OperationResult":
        """Create a failure result."""
        return cls(status=OperationStatus.FAILURE, message=message, **kwargs)

    @classmethod
    def from_exception(cls, exc: Exception, code: ErrorCode, context: str = "Mesh export failed") -> "OperationResult":
        """
        Failure result for an exception raised by a generator or library.

        The exception text becomes both the message suffix and the single
        error entry, tagged with ``code``.
        """
        result = cls.failure(f"{context}: {exc}")
        result.add_error(str(exc), code)
        return result
