"""Roman numeral codec.

Both directions share :data:`DIGIT_TABLE`, an ordered tuple of atoms
sorted by strictly descending value.  Subtractive pairs are atoms of
their own, which is what makes greedy matching correct in both
directions:

* :func:`decode` takes the first atom that prefixes the unread input,
  so ``CM`` wins over ``C``.
* :func:`encode` takes the first atom not larger than the remaining
  value.

Both functions are pure and safe to call from any thread.
"""

from __future__ import annotations

from romancalc.core.models import RomanDigit
from romancalc.exceptions import (
    MalformedNumeralError,
    NumeralError,
    OrderingViolationError,
    OutOfRangeError,
    RepetitionViolationError,
)

MIN_ROMAN: int = 1
MAX_ROMAN: int = 3999

MAX_REPEAT: int = 3
"""Longest allowed run of one digit value."""

DIGIT_TABLE: tuple[RomanDigit, ...] = (
    RomanDigit("M", 1000),
    RomanDigit("CM", 900),
    RomanDigit("D", 500),
    RomanDigit("CD", 400),
    RomanDigit("C", 100),
    RomanDigit("XC", 90),
    RomanDigit("L", 50),
    RomanDigit("XL", 40),
    RomanDigit("X", 10),
    RomanDigit("IX", 9),
    RomanDigit("V", 5),
    RomanDigit("IV", 4),
    RomanDigit("I", 1),
)


def _match_digit(numeral: str, position: int) -> RomanDigit | None:
    """Return the first table atom that prefixes ``numeral[position:]``."""
    for digit in DIGIT_TABLE:
        if numeral.startswith(digit.symbol, position):
            return digit
    return None


def decode(numeral: str) -> int:
    """Parse an upper-case Roman numeral into an integer.

    Matching is case-sensitive; callers normalise case beforehand.

    Raises
    ------
    MalformedNumeralError
        When no atom matches at some position (including empty input).
    OrderingViolationError
        When a digit is larger than the one before it.
    RepetitionViolationError
        When one digit value repeats more than three times in a row.
    """
    if not numeral:
        raise MalformedNumeralError(numeral, numeral)

    total = 0
    position = 0
    previous = MAX_ROMAN
    run_length = 0
    while position < len(numeral):
        digit = _match_digit(numeral, position)
        if digit is None:
            raise MalformedNumeralError(numeral, numeral[position:])
        if digit.value > previous:
            raise OrderingViolationError(numeral, previous, digit.value)
        run_length = run_length + 1 if digit.value == previous else 1
        if run_length > MAX_REPEAT:
            raise RepetitionViolationError(numeral, digit.value)

        previous = digit.value
        total += digit.value
        position += len(digit.symbol)
    return total


def encode(value: int) -> str:
    """Render *value* as a canonical Roman numeral.

    Raises
    ------
    OutOfRangeError
        When *value* is outside ``[MIN_ROMAN, MAX_ROMAN]``.
    """
    if value < MIN_ROMAN or value > MAX_ROMAN:
        raise OutOfRangeError(value, MIN_ROMAN, MAX_ROMAN)

    parts: list[str] = []
    remaining = value
    while remaining > 0:
        digit = next(d for d in DIGIT_TABLE if d.value <= remaining)
        parts.append(digit.symbol)
        remaining -= digit.value
    return "".join(parts)


def is_roman(numeral: str) -> bool:
    """Return ``True`` when *numeral* decodes without error."""
    try:
        decode(numeral)
    except NumeralError:
        return False
    return True
