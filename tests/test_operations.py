"""Tests for operator dispatch (core/operations.py)."""

from __future__ import annotations

import pytest

from romancalc.core.operations import OPERATIONS, apply_operation
from romancalc.exceptions import DivisionByZeroError, UnknownOperatorError


class TestOperations:
    def test_known_symbols(self) -> None:
        assert set(OPERATIONS) == {"+", "-", "*", "/"}

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            OPERATIONS["%"] = lambda a, b: a % b  # type: ignore[index]

    @pytest.mark.parametrize(
        ("operator", "a", "b", "expected"),
        [
            ("+", 3, 4, 7),
            ("-", 3, 4, -1),
            ("*", 6, 7, 42),
            ("/", 10, 3, 3),
            ("/", 1, 2, 0),
        ],
    )
    def test_apply(self, operator: str, a: int, b: int, expected: int) -> None:
        assert apply_operation(operator, a, b) == expected

    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [(-7, 2, -3), (7, -2, -3), (-7, -2, 3)],
    )
    def test_division_truncates_toward_zero(self, a: int, b: int, expected: int) -> None:
        assert apply_operation("/", a, b) == expected

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZeroError):
            apply_operation("/", 10, 0)

    def test_unknown_operator(self) -> None:
        with pytest.raises(UnknownOperatorError) as exc_info:
            apply_operation("%", 1, 2)
        assert exc_info.value.operator == "%"
