"""Line-oriented evaluation loop.

Reads one expression per line until end of input, writes each result
to *out* followed by a newline, and reports failures on stderr via the
console proxy.

Design
------
* A failing line never stops the loop unless ``strict`` is set.
* Whitespace-only lines are skipped.
* Only :class:`~romancalc.exceptions.RomanCalcError` is handled here;
  anything else propagates to the error boundary in :mod:`romancalc.cli.app`.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from romancalc.cli import exit_codes
from romancalc.cli.console import console, report_error
from romancalc.core.calculator import Calculator
from romancalc.core.models import Expression
from romancalc.core.numerals import convert
from romancalc.exceptions import RomanCalcError


def _trace(expression: Expression) -> None:
    """Print the parsed form of *expression* in dim text (verbose mode)."""
    console.print_styled(
        (
            f"{expression.left.value} {expression.operator} {expression.right.value} "
            f"({expression.system.value})",
            "dim",
        ),
    )


def evaluate_line(
    calculator: Calculator,
    line: str,
    *,
    out: TextIO,
    verbose: bool = False,
) -> None:
    """Evaluate a single *line* and write its result to *out*.

    Raises
    ------
    RomanCalcError
        When the line cannot be evaluated.  Nothing is written to *out*.
    """
    expression = calculator.parse(line)
    if verbose:
        _trace(expression)
    result = calculator.evaluate_expression(expression)
    print(result, file=out, flush=True)


def run_session(
    lines: Iterable[str],
    calculator: Calculator,
    *,
    out: TextIO,
    strict: bool = False,
    verbose: bool = False,
) -> int:
    """Evaluate every line of *lines*.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when every line succeeded,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    failures = 0
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            evaluate_line(calculator, line, out=out, verbose=verbose)
        except RomanCalcError as exc:
            failures += 1
            report_error(exc, prefix=f"line {number}: ")
            if strict:
                break

    return exit_codes.GENERAL_ERROR if failures else exit_codes.SUCCESS


def convert_token(token: str, *, out: TextIO) -> int:
    """Write *token* converted to the other numeral system."""
    print(convert(token), file=out)
    return exit_codes.SUCCESS
