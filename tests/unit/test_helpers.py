"""Tests for the shared numeric helpers."""

from __future__ import annotations

import math
from fractions import Fraction

import pytest

from geodonut.utils.helpers import format_number, is_real, round_half_up, safe_acos


class TestIsReal:
    @pytest.mark.parametrize("value", [0, 1, -3.5, 1e308, Fraction(1, 3)])
    def test_accepts_finite_numbers(self, value: object) -> None:
        assert is_real(value) is True

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, True, False, "1", None, 1j])
    def test_rejects_everything_else(self, value: object) -> None:
        assert is_real(value) is False


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(2.5, 3), (0.5, 1), (-2.5, -2), (-0.5, 0), (2.4999, 2), (65.9, 66), (0.0, 0)],
    )
    def test_matches_javascript_math_round(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected


class TestFormatNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(100, "100"), (100.0, "100"), (-40.0, "-40"), (0.2, "0.2"), (90.25, "90.25"), (-0.5, "-0.5")],
    )
    def test_javascript_style(self, value: float, expected: str) -> None:
        assert format_number(value) == expected


class TestSafeAcos:
    def test_in_range(self) -> None:
        assert safe_acos(1.0) == 0.0
        assert safe_acos(-1.0) == pytest.approx(math.pi)

    @pytest.mark.parametrize("value", [1.0000001, -1.5, math.nan])
    def test_out_of_range_is_nan(self, value: float) -> None:
        assert math.isnan(safe_acos(value))
