"""
Core math modules для roman_numerals

Целочисленная арифметика фиксированной ширины с детекцией переполнения.
"""

from roman_numerals.core.math.checked_arithmetic import (
    DEFAULT_ACCUMULATOR_BITS,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    checked_add,
    int_bounds,
)

__all__ = [
    # Constants
    "DEFAULT_ACCUMULATOR_BITS",
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    # Functions
    "int_bounds",
    "checked_add",
]
