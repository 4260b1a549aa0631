"""Allow ``python -m romancalc`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m romancalc`` behaves identically to the ``roman-calc``
console script.
"""

from __future__ import annotations

from romancalc.cli.app import cli

if __name__ == "__main__":
    cli()
