"""
Domain models and value objects.

Contains the symbol tables, typed errors, conversion algorithms
and the RomanNumeral value object.
"""

from roman_numerals.core.domain.symbols import (
    INITIAL_PREVIOUS_VALUE,
    MAX_VALUE,
    MIN_VALUE,
    SINGLE_SYMBOL_VALUES,
    SYMBOL_VALUES,
    is_symbol,
)
from roman_numerals.core.domain.errors import (
    NumeralError,
    NumeralFormatError,
    NumeralRangeError,
)
from roman_numerals.core.domain.codec import (
    decode,
    encode,
    normalize,
    validate_int_value,
)
from roman_numerals.core.domain.numeral import NUMERAL_SCHEMA_VERSION, RomanNumeral

__all__ = [
    # Symbols
    "MIN_VALUE",
    "MAX_VALUE",
    "SYMBOL_VALUES",
    "SINGLE_SYMBOL_VALUES",
    "INITIAL_PREVIOUS_VALUE",
    "is_symbol",
    # Errors
    "NumeralError",
    "NumeralRangeError",
    "NumeralFormatError",
    # Codec
    "encode",
    "decode",
    "normalize",
    "validate_int_value",
    # RomanNumeral model
    "RomanNumeral",
    "NUMERAL_SCHEMA_VERSION",
]
