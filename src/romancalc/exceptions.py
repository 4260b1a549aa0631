"""Custom exception hierarchy for roman-calc.

Every error condition raised by the core layer is a subclass of
:class:`RomanCalcError`.  The core never recovers from its own errors;
the CLI session decides whether a failed line aborts the run or is
reported and skipped.

Hierarchy
---------
RomanCalcError
├── NumeralError
│   ├── MalformedNumeralError
│   ├── OrderingViolationError
│   ├── RepetitionViolationError
│   ├── OutOfRangeError
│   └── UndefinedNumeralSystemError
├── ExpressionError
│   ├── ExpressionSyntaxError
│   ├── UnknownOperatorError
│   ├── OperandOutOfBoundsError
│   └── NumeralSystemMismatchError
├── DivisionByZeroError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations


class RomanCalcError(Exception):
    """Base exception for all roman-calc errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Numerals --------------------------------------------------------------

class NumeralError(RomanCalcError):
    """Base class for failures while reading or writing a single numeral."""


class MalformedNumeralError(NumeralError):
    """Raised when a numeral contains characters no Roman digit matches."""

    def __init__(self, numeral: str, remainder: str) -> None:
        super().__init__(f"unknown digits in {remainder!r} of numeral {numeral!r}")
        self.numeral: str = numeral
        self.remainder: str = remainder


class OrderingViolationError(NumeralError):
    """Raised when a Roman digit is followed by a larger one."""

    def __init__(self, numeral: str, previous: int, digit: int) -> None:
        super().__init__(
            f"wrong digit position in {numeral!r}: {previous} stays before {digit}",
        )
        self.numeral: str = numeral
        self.previous: int = previous
        self.digit: int = digit


class RepetitionViolationError(NumeralError):
    """Raised when the same Roman digit appears more than three times in a row."""

    def __init__(self, numeral: str, digit: int) -> None:
        super().__init__(
            f"there can't be more than 3 equal digits {digit} in a row in {numeral!r}",
        )
        self.numeral: str = numeral
        self.digit: int = digit


class OutOfRangeError(NumeralError):
    """Raised when a value cannot be written as a Roman numeral."""

    def __init__(self, value: int, lower: int, upper: int) -> None:
        if value < lower:
            hint = "Roman numerals have no zero or negative values."
        else:
            hint = f"The largest Roman numeral is {upper}."
        super().__init__(
            f"{value} is beyond the Roman boundaries {lower}..{upper}",
            hint=hint,
        )
        self.value: int = value
        self.lower: int = lower
        self.upper: int = upper


class UndefinedNumeralSystemError(NumeralError):
    """Raised when a token is neither an Arabic nor a Roman numeral."""

    def __init__(self, token: str) -> None:
        super().__init__(f"undefined numeral system for {token!r}")
        self.token: str = token


# --- Expressions -----------------------------------------------------------

class ExpressionError(RomanCalcError):
    """Base class for malformed input lines."""


class ExpressionSyntaxError(ExpressionError):
    """Raised when a line is not exactly ``operand operator operand``."""


class UnknownOperatorError(ExpressionError):
    """Raised when the operator symbol has no arithmetic function."""

    def __init__(self, operator: str, known: tuple[str, ...]) -> None:
        super().__init__(
            f"operation {operator!r} not found",
            hint=f"Supported operators: {' '.join(known)}",
        )
        self.operator: str = operator


class OperandOutOfBoundsError(ExpressionError):
    """Raised when an operand lies outside the configured bounds."""

    def __init__(self, name: str, value: int, lower: int, upper: int) -> None:
        super().__init__(f"{name}={value} must be within {lower}..{upper}")
        self.name: str = name
        self.value: int = value


class NumeralSystemMismatchError(ExpressionError):
    """Raised when the two operands use different numeral systems."""


# --- Arithmetic ------------------------------------------------------------

class DivisionByZeroError(RomanCalcError):
    """Raised when the divisor of ``/`` is zero."""


# --- Configuration / environment -------------------------------------------

class ConfigurationError(RomanCalcError):
    """Raised when command-line settings are inconsistent."""


class EnvironmentError(RomanCalcError):
    """Raised when a required runtime dependency is not available."""
