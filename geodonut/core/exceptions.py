"""Unified exception taxonomy.

Every domain exception inherits from ``GeodonutError`` and carries
structured context fields so callers can branch on category and log a
stable error payload.

Taxonomy categories
-------------------
- ``ValidationError``: invalid radii, coordinates, styles or configuration.
- ``RenderError``: a path could not be emitted for the requested backend.

Degenerate projections (poles, zero radius) are not errors: the projector
substitutes an approximate or zero radius and carries on.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class GeodonutError(Exception):
    """Base exception for all geodonut errors.

    Attributes:
        message: Human-readable error description.
        operation: Operation where the error occurred
            (e.g. ``"set_inner_radius"``, ``"emit"``).
        code: Machine-readable error code (e.g. ``"INVALID_GEOMETRY"``).
    """

    #: Default operation for subclasses (override via class attribute or kwarg).
    default_operation: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        operation: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.operation = operation or self.default_operation
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, RenderError):
            return "render"
        return "internal"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "operation": self.operation,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(GeodonutError):
    """Input or domain-model validation failure."""


class RenderError(GeodonutError):
    """A rendering backend could not be selected or driven."""

    default_operation = "render"
    default_code = "RENDER_FAILED"


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


class InvalidGeometry(ValueError, ValidationError):
    """Raised when a radius, coordinate or style violates its invariant.

    Always raised before any state is changed, so the object that raised
    it is left exactly as it was.

    Attributes:
        field_name: The field that violated the invariant.
        value: The rejected value.
    """

    default_operation = "geometry"
    default_code = "INVALID_GEOMETRY"

    def __init__(
        self,
        field_name: str,
        value: object,
        message: str,
        *,
        operation: str = "",
    ) -> None:
        self.field_name = field_name
        self.value = value
        formatted = f"{field_name}={value!r}: {message}"
        GeodonutError.__init__(self, formatted, operation=operation)
