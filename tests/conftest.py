"""Shared pytest fixtures and configuration for the roman-calc test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* CLI tests feed stdin through ``monkeypatch`` and read ``capsys``.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import pytest

from romancalc.core.calculator import Calculator
from romancalc.core.models import CalculatorSettings


@pytest.fixture
def calculator() -> Calculator:
    """Calculator with the default ``1..10`` operand bounds."""
    return Calculator(CalculatorSettings())
