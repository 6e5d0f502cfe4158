"""Converter — публичная точка входа конвертации int ↔ римское число.

- NumeralConverter: конфигурируемый конвертер
- from_int / from_string / is_canonical / check_canonical / from_payload:
  функции с конфигурацией по умолчанию
"""

from .numeral_converter import (
    CanonicalCheckResult,
    ConverterConfig,
    NumeralConverter,
    check_canonical,
    from_int,
    from_payload,
    from_string,
    is_canonical,
)

__all__ = [
    "NumeralConverter",
    "ConverterConfig",
    "CanonicalCheckResult",
    "from_int",
    "from_string",
    "is_canonical",
    "check_canonical",
    "from_payload",
]
