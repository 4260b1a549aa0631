"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
equality semantics, and settings validation.
"""

from __future__ import annotations

import pytest

from romancalc.core.models import (
    CalculatorSettings,
    Expression,
    NumeralSystem,
    Operand,
    RomanDigit,
)
from romancalc.exceptions import ConfigurationError


# ---------------------------------------------------------------------------
# RomanDigit
# ---------------------------------------------------------------------------

class TestRomanDigit:
    def test_fields_accessible(self) -> None:
        d = RomanDigit("CM", 900)
        assert d.symbol == "CM"
        assert d.value == 900

    def test_frozen(self) -> None:
        d = RomanDigit("I", 1)
        with pytest.raises(AttributeError):
            d.value = 2  # type: ignore[misc]

    def test_equality(self) -> None:
        assert RomanDigit("X", 10) == RomanDigit("X", 10)


# ---------------------------------------------------------------------------
# Operand / Expression
# ---------------------------------------------------------------------------

class TestExpression:
    def test_system_follows_left_operand(self) -> None:
        expr = Expression(
            Operand(3, NumeralSystem.ROMAN),
            "+",
            Operand(4, NumeralSystem.ROMAN),
        )
        assert expr.system is NumeralSystem.ROMAN

    def test_operand_frozen(self) -> None:
        op = Operand(1, NumeralSystem.ARABIC)
        with pytest.raises(AttributeError):
            op.value = 2  # type: ignore[misc]


# ---------------------------------------------------------------------------
# CalculatorSettings
# ---------------------------------------------------------------------------

class TestCalculatorSettings:
    def test_defaults(self) -> None:
        s = CalculatorSettings()
        assert s.min_operand == 1
        assert s.max_operand == 10

    def test_equal_bounds_allowed(self) -> None:
        s = CalculatorSettings(min_operand=5, max_operand=5)
        assert s.min_operand == s.max_operand == 5

    def test_inverted_bounds_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="greater than"):
            CalculatorSettings(min_operand=11, max_operand=10)

    def test_frozen(self) -> None:
        s = CalculatorSettings()
        with pytest.raises(AttributeError):
            s.max_operand = 20  # type: ignore[misc]
