"""
roman_numerals — конвертация между целыми числами и римской записью.

    >>> from roman_numerals import from_int, from_string, is_canonical
    >>> str(from_int(1999))
    'MCMXCIX'
    >>> from_string("mim").to_int()
    1999
    >>> is_canonical("IIII")
    False
"""

from roman_numerals.converter import (
    CanonicalCheckResult,
    ConverterConfig,
    NumeralConverter,
    check_canonical,
    from_int,
    from_payload,
    from_string,
    is_canonical,
)
from roman_numerals.core.domain import (
    MAX_VALUE,
    MIN_VALUE,
    NumeralError,
    NumeralFormatError,
    NumeralRangeError,
    RomanNumeral,
    decode,
    encode,
)

__version__ = "0.1.0"

__all__ = [
    # Converter
    "NumeralConverter",
    "ConverterConfig",
    "CanonicalCheckResult",
    "from_int",
    "from_string",
    "is_canonical",
    "check_canonical",
    "from_payload",
    # Domain
    "RomanNumeral",
    "MIN_VALUE",
    "MAX_VALUE",
    "encode",
    "decode",
    # Errors
    "NumeralError",
    "NumeralRangeError",
    "NumeralFormatError",
]
