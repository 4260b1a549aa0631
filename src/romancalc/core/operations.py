"""Integer arithmetic dispatched on an operator symbol.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from romancalc.exceptions import DivisionByZeroError, UnknownOperatorError

BinaryOperation = Callable[[int, int], int]


def _add(a: int, b: int) -> int:
    return a + b


def _subtract(a: int, b: int) -> int:
    return a - b


def _multiply(a: int, b: int) -> int:
    return a * b


def _divide(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise DivisionByZeroError("could not divide by 0")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


OPERATIONS: Mapping[str, BinaryOperation] = MappingProxyType(
    {
        "+": _add,
        "-": _subtract,
        "*": _multiply,
        "/": _divide,
    }
)


def apply_operation(operator: str, a: int, b: int) -> int:
    """Apply the arithmetic function registered for *operator*.

    Raises
    ------
    UnknownOperatorError
        When *operator* is not one of :data:`OPERATIONS`.
    DivisionByZeroError
        When dividing by zero.
    """
    try:
        operation = OPERATIONS[operator]
    except KeyError:
        raise UnknownOperatorError(operator, tuple(OPERATIONS)) from None
    return operation(a, b)
