"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных римских чисел.
"""

from .validators import (
    ContractValidator,
    RomanNumeralValidator,
    SchemaLoader,
    validate_roman_numeral,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RomanNumeralValidator",
    # Functions
    "validate_roman_numeral",
]
