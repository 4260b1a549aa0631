"""roman-calc — line-oriented calculator for Arabic and Roman numerals.

Each input line holds one binary expression; the result is echoed back
in the numeral system shared by both operands.
"""

from romancalc.version import __version__

__all__: list[str] = ["__version__"]
