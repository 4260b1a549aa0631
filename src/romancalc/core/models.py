"""Domain models for roman-calc.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and construction-time validation.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from romancalc.exceptions import ConfigurationError

DEFAULT_MIN_OPERAND: int = 1
DEFAULT_MAX_OPERAND: int = 10


class NumeralSystem(enum.Enum):
    """Numeral system an operand was written in."""

    ARABIC = "arabic"
    ROMAN = "roman"


# ---------------------------------------------------------------------------
# Roman digit table entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RomanDigit:
    """One atom of the Roman digit table.

    Subtractive pairs (``CM``, ``IV``…) are atoms in their own right.
    """

    symbol: str
    """One or two Roman letters."""

    value: int
    """Positive integer value of :attr:`symbol`."""


# ---------------------------------------------------------------------------
# Expression parts
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Operand:
    """A classified operand token."""

    value: int
    system: NumeralSystem


@dataclass(frozen=True, slots=True)
class Expression:
    """A parsed ``operand operator operand`` line."""

    left: Operand
    operator: str
    right: Operand

    @property
    def system(self) -> NumeralSystem:
        """Numeral system shared by both operands."""
        return self.left.system


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CalculatorSettings:
    """Operand bounds applied to every expression.

    Raises
    ------
    ConfigurationError
        When ``min_operand`` is greater than ``max_operand``.
    """

    min_operand: int = DEFAULT_MIN_OPERAND
    max_operand: int = DEFAULT_MAX_OPERAND

    def __post_init__(self) -> None:
        if self.min_operand > self.max_operand:
            raise ConfigurationError(
                f"min operand {self.min_operand} is greater than "
                f"max operand {self.max_operand}",
                hint="Check the --min-operand and --max-operand options.",
            )
