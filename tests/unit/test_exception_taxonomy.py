"""Tests for the unified exception taxonomy.

Validates:
- GeodonutError hierarchy and structured attributes
- Category classification (validation, render, internal)
- ``to_error_dict()`` produces stable payload keys
- Domain exceptions are GeodonutError subclasses
"""

from __future__ import annotations

from typing import ClassVar

import pytest

from geodonut.core.config import ConfigValidationError
from geodonut.core.exceptions import (
    GeodonutError,
    InvalidGeometry,
    RenderError,
    ValidationError,
)


class TestGeodonutErrorBase:
    """GeodonutError base class behavior."""

    def test_default_attributes(self) -> None:
        err = GeodonutError("boom")
        assert err.message == "boom"
        assert err.operation == ""
        assert err.code == ""
        assert str(err) == "boom"

    def test_explicit_attributes(self) -> None:
        err = GeodonutError("boom", operation="emit", code="X")
        assert err.operation == "emit"
        assert err.code == "X"

    def test_internal_category(self) -> None:
        assert GeodonutError("boom").category == "internal"


class TestCategories:
    CASES: ClassVar[list[tuple[GeodonutError, str]]] = [
        (ValidationError("bad"), "validation"),
        (InvalidGeometry("radius", -1, "must be >= 0"), "validation"),
        (ConfigValidationError("GEODONUT_CRS", "x", "unknown"), "validation"),
        (RenderError("no context"), "render"),
    ]

    @pytest.mark.parametrize(("err", "category"), CASES)
    def test_category(self, err: GeodonutError, category: str) -> None:
        assert isinstance(err, GeodonutError)
        assert err.category == category


class TestInvalidGeometry:
    def test_is_value_error(self) -> None:
        err = InvalidGeometry("radius", -1, "must be >= 0")
        assert isinstance(err, ValueError)
        assert isinstance(err, ValidationError)

    def test_fields_and_message(self) -> None:
        err = InvalidGeometry("inner_radius", 250, "too big", operation="set_inner_radius")
        assert err.field_name == "inner_radius"
        assert err.value == 250
        assert err.message == "inner_radius=250: too big"
        assert err.operation == "set_inner_radius"
        assert err.code == "INVALID_GEOMETRY"

    def test_default_operation(self) -> None:
        assert InvalidGeometry("lat", "x", "bad").operation == "geometry"


class TestRenderError:
    def test_defaults(self) -> None:
        err = RenderError("no context")
        assert err.operation == "render"
        assert err.code == "RENDER_FAILED"

    def test_override_code(self) -> None:
        assert RenderError("x", code="UNKNOWN_BACKEND").code == "UNKNOWN_BACKEND"


class TestErrorDict:
    def test_stable_keys(self) -> None:
        payload = InvalidGeometry("radius", 0, "must be > 0", operation="__init__").to_error_dict()
        assert set(payload) == {"category", "code", "operation", "message"}
        assert payload == {
            "category": "validation",
            "code": "INVALID_GEOMETRY",
            "operation": "__init__",
            "message": "radius=0: must be > 0",
        }

    def test_config_error_payload(self) -> None:
        payload = ConfigValidationError("GEODONUT_TILE_SIZE", 0, "must be > 0").to_error_dict()
        assert payload["operation"] == "config"
        assert "GEODONUT_TILE_SIZE=0" in str(payload["message"])
