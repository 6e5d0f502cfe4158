"""
Checked Arithmetic — Целочисленная арифметика фиксированной ширины

Целые числа Python не переполняются, поэтому аккумулятор фиксированной
ширины моделируется явно: сумма вычисляется точно, затем сравнивается
с границами знакового целого заданной разрядности.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. checked_add никогда не возвращает значение вне [min, max] для bits
2. Выход за границы → OverflowError (без усечения и без wrap-around)
"""

from typing import Final

# =============================================================================
# ГРАНИЦЫ СТАНДАРТНЫХ ШИРИН
# =============================================================================

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Ширина аккумулятора по умолчанию
DEFAULT_ACCUMULATOR_BITS: Final[int] = 32


def int_bounds(bits: int) -> tuple[int, int]:
    """
    Границы знакового целого (two's complement) заданной разрядности.

    Args:
        bits: Разрядность (>= 2)

    Returns:
        (min_value, max_value)

    Raises:
        ValueError: Если bits < 2

    Examples:
        >>> int_bounds(8)
        (-128, 127)
        >>> int_bounds(32) == (INT32_MIN, INT32_MAX)
        True
    """
    if bits < 2:
        raise ValueError(f"bits must be >= 2, got {bits}")

    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def checked_add(left: int, right: int, bits: int = DEFAULT_ACCUMULATOR_BITS) -> int:
    """
    Сложение с детекцией переполнения аккумулятора фиксированной ширины.

    Сумма считается в неограниченной точности, затем проверяется на
    попадание в диапазон bits-битного знакового целого.

    Args:
        left: Левый операнд
        right: Правый операнд (может быть отрицательным)
        bits: Разрядность аккумулятора (default: 32)

    Returns:
        left + right

    Raises:
        OverflowError: Если сумма не помещается в bits
        ValueError: Если bits < 2

    Examples:
        >>> checked_add(1000, 900)
        1900
        >>> checked_add(INT32_MAX, 1)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        OverflowError: ...
    """
    min_value, max_value = int_bounds(bits)
    result = left + right

    if result > max_value or result < min_value:
        raise OverflowError(
            f"{bits}-bit accumulator overflow: {left} + {right} = {result} "
            f"outside [{min_value}, {max_value}]"
        )

    return result
