"""Numeral classification and rendering.

A token is tried as an Arabic integer literal first and as a Roman
numeral second.  Roman digits are letters, so no token is ambiguous.
"""

from __future__ import annotations

import re

from romancalc.core.models import NumeralSystem, Operand
from romancalc.core.roman import decode, encode
from romancalc.exceptions import NumeralError, UndefinedNumeralSystemError

_ARABIC_RE = re.compile(r"[+-]?[0-9]+")


def _parse_arabic(token: str) -> int | None:
    """Return the integer value of a base-10 literal, or ``None``."""
    if _ARABIC_RE.fullmatch(token) is None:
        return None
    try:
        return int(token)
    except ValueError:
        # Literals beyond the interpreter's digit limit.
        return None


def classify(token: str) -> Operand:
    """Detect the numeral system of *token* and return its value.

    Raises
    ------
    UndefinedNumeralSystemError
        When *token* is neither an Arabic literal nor a valid Roman numeral.
    """
    arabic = _parse_arabic(token)
    if arabic is not None:
        return Operand(arabic, NumeralSystem.ARABIC)

    try:
        roman = decode(token)
    except NumeralError as exc:
        raise UndefinedNumeralSystemError(token) from exc
    return Operand(roman, NumeralSystem.ROMAN)


def render(value: int, system: NumeralSystem) -> str:
    """Write *value* in *system*.

    Raises
    ------
    OutOfRangeError
        When *system* is Roman and *value* has no Roman form.
    """
    if system is NumeralSystem.ROMAN:
        return encode(value)
    return str(value)


def convert(token: str) -> str:
    """Translate a single numeral into the other numeral system.

    Lower-case Roman input is accepted.
    """
    operand = classify(token.strip().upper())
    if operand.system is NumeralSystem.ARABIC:
        return render(operand.value, NumeralSystem.ROMAN)
    return render(operand.value, NumeralSystem.ARABIC)
