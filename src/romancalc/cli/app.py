"""CLI application entry point and command routing for roman-calc.

This module is the **sole error boundary** for the entire application.
It catches :class:`~romancalc.exceptions.RomanCalcError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core layer
  and the session loop.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from romancalc.cli import exit_codes
from romancalc.cli.console import console, report_error
from romancalc.core.models import (
    DEFAULT_MAX_OPERAND,
    DEFAULT_MIN_OPERAND,
    CalculatorSettings,
)
from romancalc.exceptions import RomanCalcError
from romancalc.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``roman-calc``                 — evaluate expressions from stdin
    * ``roman-calc -e "III + IV"``   — evaluate one expression
    * ``roman-calc --convert XIV``   — convert between numeral systems
    * ``roman-calc --version``
    """
    parser = argparse.ArgumentParser(
        prog="roman-calc",
        description=(
            "Evaluate 'operand operator operand' expressions written in "
            "Arabic or Roman numerals, one per line."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-e",
        "--expression",
        default=None,
        help="Evaluate a single expression instead of reading stdin.",
    )
    mode.add_argument(
        "--convert",
        metavar="NUMERAL",
        default=None,
        help="Convert one numeral to the other numeral system and exit.",
    )
    parser.add_argument(
        "--min-operand",
        type=int,
        default=DEFAULT_MIN_OPERAND,
        help="Smallest accepted operand (default: %(default)s).",
    )
    parser.add_argument(
        "--max-operand",
        type=int,
        default=DEFAULT_MAX_OPERAND,
        help="Largest accepted operand (default: %(default)s).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Stop at the first line that fails.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Trace each parsed expression on stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_session(args: argparse.Namespace) -> int:
    """Evaluate expressions from ``-e`` or from stdin until EOF."""
    from romancalc.cli.session import run_session
    from romancalc.core.calculator import Calculator

    settings = CalculatorSettings(
        min_operand=args.min_operand,
        max_operand=args.max_operand,
    )
    calculator = Calculator(settings)

    lines = [args.expression] if args.expression is not None else sys.stdin
    return run_session(
        lines,
        calculator,
        out=sys.stdout,
        strict=args.strict,
        verbose=args.verbose,
    )


def _handle_convert(token: str) -> int:
    """Dispatch the ``--convert`` command."""
    from romancalc.cli.session import convert_token

    return convert_token(token, out=sys.stdout)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the roman-calc CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.convert is not None:
        return _handle_convert(args.convert)

    return _handle_session(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except RomanCalcError as exc:
        report_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print_styled(("\nAborted by user.", "yellow"))
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print_styled(
            ("Unexpected error.", "bold red"),
            (f" Please report this issue.\n  {type(exc).__name__}: {exc}", None),
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
