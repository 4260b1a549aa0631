"""Core / service layer — pure numeral and arithmetic logic.

Rules
-----
* No ``print()`` calls.
* No filesystem or stream I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from romancalc.core.calculator import Calculator, parse_expression, tokenize
from romancalc.core.models import (
    CalculatorSettings,
    Expression,
    NumeralSystem,
    Operand,
    RomanDigit,
)
from romancalc.core.numerals import classify, convert, render
from romancalc.core.operations import OPERATIONS, apply_operation
from romancalc.core.roman import DIGIT_TABLE, MAX_ROMAN, MIN_ROMAN, decode, encode, is_roman

__all__: list[str] = [
    "DIGIT_TABLE",
    "MAX_ROMAN",
    "MIN_ROMAN",
    "OPERATIONS",
    "Calculator",
    "CalculatorSettings",
    "Expression",
    "NumeralSystem",
    "Operand",
    "RomanDigit",
    "apply_operation",
    "classify",
    "convert",
    "decode",
    "encode",
    "is_roman",
    "parse_expression",
    "render",
    "tokenize",
]
