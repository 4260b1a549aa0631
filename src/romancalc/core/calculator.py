"""Core calculator service — evaluates one expression line.

Pipeline order (enforced by :meth:`Calculator.evaluate`):

1. **Tokenize** — upper-case and split on whitespace.
2. **Parse** — classify operands, check bounds, systems and operator.
3. **Compute** — apply the integer operation.
4. **Render** — write the result in the operands' numeral system.

Guarantees
----------
* Pure — no I/O, no ``print()``.
* Only :class:`~romancalc.exceptions.RomanCalcError` subclasses escape.
"""

from __future__ import annotations

from romancalc.core.models import CalculatorSettings, Expression, Operand
from romancalc.core.numerals import classify, render
from romancalc.core.operations import OPERATIONS, apply_operation
from romancalc.exceptions import (
    DivisionByZeroError,
    ExpressionSyntaxError,
    NumeralSystemMismatchError,
    OperandOutOfBoundsError,
    UnknownOperatorError,
)

EXPRESSION_TOKENS: int = 3


def tokenize(line: str) -> list[str]:
    """Upper-case *line* and split it on any run of whitespace."""
    return line.upper().split()


def _check_bounds(name: str, operand: Operand, settings: CalculatorSettings) -> None:
    if not settings.min_operand <= operand.value <= settings.max_operand:
        raise OperandOutOfBoundsError(
            name,
            operand.value,
            settings.min_operand,
            settings.max_operand,
        )


def parse_expression(line: str, settings: CalculatorSettings) -> Expression:
    """Parse *line* into a validated :class:`Expression`.

    Raises
    ------
    ExpressionSyntaxError
        When the line does not hold exactly three tokens.
    UndefinedNumeralSystemError
        When an operand is not a numeral.
    NumeralSystemMismatchError
        When the operands use different numeral systems.
    UnknownOperatorError
        When the operator is not supported.
    DivisionByZeroError
        When dividing by a zero operand.
    OperandOutOfBoundsError
        When an operand lies outside the configured bounds.
    """
    tokens = tokenize(line)
    if len(tokens) != EXPRESSION_TOKENS:
        raise ExpressionSyntaxError(
            f"must be binary operation, got {len(tokens)} token(s)",
            hint="Write expressions as: operand operator operand (e.g. 3 + 4).",
        )
    left_token, operator, right_token = tokens

    left = classify(left_token)
    _check_bounds("operand1", left, settings)
    right = classify(right_token)

    if left.system is not right.system:
        raise NumeralSystemMismatchError(
            "operands should have same numeral systems",
            hint=f"Got {left.system.value} and {right.system.value}.",
        )
    if operator not in OPERATIONS:
        raise UnknownOperatorError(operator, tuple(OPERATIONS))
    # A zero divisor is reported as such rather than as a bounds failure.
    if operator == "/" and right.value == 0:
        raise DivisionByZeroError("could not divide by 0")
    _check_bounds("operand2", right, settings)
    return Expression(left, operator, right)


class Calculator:
    """Stateless evaluator for single expression lines.

    Parameters
    ----------
    settings:
        Operand bounds; defaults to ``1..10``.
    """

    def __init__(self, settings: CalculatorSettings | None = None) -> None:
        self._settings: CalculatorSettings = settings or CalculatorSettings()

    @property
    def settings(self) -> CalculatorSettings:
        return self._settings

    def parse(self, line: str) -> Expression:
        """Parse *line* with this calculator's settings."""
        return parse_expression(line, self._settings)

    def compute(self, expression: Expression) -> int:
        """Return the integer result of *expression*."""
        return apply_operation(
            expression.operator,
            expression.left.value,
            expression.right.value,
        )

    def evaluate(self, line: str) -> str:
        """Evaluate *line* and render the result in the operands' system.

        Raises
        ------
        RomanCalcError
            Any parse, arithmetic or rendering failure.
        """
        return self.evaluate_expression(self.parse(line))

    def evaluate_expression(self, expression: Expression) -> str:
        """Compute an already parsed *expression* and render its result."""
        return render(self.compute(expression), expression.system)
