"""CLI console helpers with optional Rich support.

Diagnostics (errors, hints, verbose traces) go to stderr through
:data:`console`.  Results are written to stdout by the session loop and
never pass through this module.

Rich is imported lazily so ``--help`` and ``--version`` keep working
when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from romancalc.exceptions import EnvironmentError, RomanCalcError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True, highlight=False)


Segment = tuple[str, str | None]
"""Plain text paired with an optional Rich style name."""


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print_styled(self, *segments: Segment) -> None:
        """Render *segments* on one line.

        Text is always escaped before styling, so user input can never be
        read as markup.  Without Rich the styles are dropped and the text
        is printed unchanged.
        """
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print("".join(text for text, _ in segments), file=sys.stderr)
            return

        from rich.markup import escape

        markup = "".join(
            f"[{style}]{escape(text)}[/{style}]" if style else escape(text)
            for text, style in segments
        )
        rich_console.print(markup)


console = _ConsoleProxy()


def report_error(exc: RomanCalcError, *, prefix: str = "") -> None:
    """Render *exc* and its hint, if any, on stderr."""
    console.print_styled(("Error:", "bold red"), (f" {prefix}{exc}", None))
    if exc.hint:
        console.print_styled(("Hint:", "yellow"), (f" {exc.hint}", None))
