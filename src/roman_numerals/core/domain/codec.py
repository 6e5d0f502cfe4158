"""
Codec — Алгоритмы конвертации int ↔ римское число

Модуль содержит чистые функции без состояния:
- encode: целое → каноническая строка (жадное вычитание по SYMBOL_VALUES)
- decode: строка → целое (сканирование справа налево по SINGLE_SYMBOL_VALUES)

decode намеренно "мягкий": принимает неканонические записи
(IIII = 4, MIM = 1999, MDCCCCLXXXXVIIII = 1999) и не проверяет диапазон.
Проверка диапазона результата выполняется в NumeralConverter.from_string.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. encode(n) детерминирован и каноничен для всех n в [MIN_VALUE, MAX_VALUE]
2. decode(encode(n)) == n для всех n в [MIN_VALUE, MAX_VALUE]
3. Все символы проверяются ДО начала арифметики
4. Аккумулятор decode не выходит за границы accumulator_bits
"""

from roman_numerals.core.domain.errors import NumeralFormatError, NumeralRangeError
from roman_numerals.core.domain.symbols import (
    INITIAL_PREVIOUS_VALUE,
    MAX_VALUE,
    MIN_VALUE,
    SINGLE_SYMBOL_VALUES,
    SYMBOL_VALUES,
    is_symbol,
)
from roman_numerals.core.math.checked_arithmetic import (
    DEFAULT_ACCUMULATOR_BITS,
    checked_add,
)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_int_value(value: int) -> None:
    """
    Проверка типа и диапазона целого значения.

    bool отклоняется, хотя является подклассом int.

    Args:
        value: Проверяемое значение

    Raises:
        TypeError: Если value не int
        NumeralRangeError: Если value вне [MIN_VALUE, MAX_VALUE]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")

    if value < MIN_VALUE or value > MAX_VALUE:
        raise NumeralRangeError(value, MIN_VALUE, MAX_VALUE)


def normalize(text: str) -> str:
    """
    Приведение строки к верхнему регистру с проверкой символов.

    Args:
        text: Исходная строка

    Returns:
        Строка в верхнем регистре

    Raises:
        TypeError: Если text не str
        NumeralFormatError: Если встречен символ вне {I, V, X, L, C, D, M}
            (позиция отсчитывается в строке после upper())
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    upper = text.upper()

    for position, char in enumerate(upper):
        if not is_symbol(char):
            raise NumeralFormatError(
                f"Illegal Roman numeral character {char!r} at position {position} in {upper!r}"
            )

    return upper


# =============================================================================
# ENCODE / DECODE
# =============================================================================


def encode(value: int) -> str:
    """
    Конверсия целого в каноническое римское число.

    Жадно проходит SYMBOL_VALUES по убыванию: пока остаток >= значения группы,
    добавляет символ группы и вычитает её значение.

    Args:
        value: Целое в [MIN_VALUE, MAX_VALUE]

    Returns:
        Каноническая строка

    Raises:
        TypeError: Если value не int
        NumeralRangeError: Если value вне диапазона

    Examples:
        >>> encode(1999)
        'MCMXCIX'
        >>> encode(2043)
        'MMXLIII'
        >>> encode(3999)
        'MMMCMXCIX'
    """
    validate_int_value(value)

    parts: list[str] = []
    remaining = value

    for symbol, amount in SYMBOL_VALUES:
        while remaining >= amount:
            parts.append(symbol)
            remaining -= amount

    return "".join(parts)


def decode(text: str, accumulator_bits: int = DEFAULT_ACCUMULATOR_BITS) -> int:
    """
    Конверсия римского числа (в том числе неканонического) в целое.

    Сканирование справа налево: если значение текущего символа меньше
    предыдущего, оно вычитается, иначе прибавляется.
    Предыдущее значение инициализируется значением I.

    Результат может быть вне [MIN_VALUE, MAX_VALUE] (например, "MMMM" → 4000,
    "" → 0): диапазон здесь НЕ проверяется.

    Args:
        text: Строка символов (регистр не важен)
        accumulator_bits: Разрядность аккумулятора (default: 32)

    Returns:
        Декодированное значение

    Raises:
        TypeError: Если text не str
        NumeralFormatError: Если встречен недопустимый символ
        OverflowError: Если сумма не помещается в accumulator_bits

    Examples:
        >>> decode("MCMXCIX")
        1999
        >>> decode("mim")
        1999
        >>> decode("IIII")
        4
    """
    upper = normalize(text)

    total = 0
    previous = INITIAL_PREVIOUS_VALUE

    for char in reversed(upper):
        current = SINGLE_SYMBOL_VALUES[char]
        if current < previous:
            total = checked_add(total, -current, accumulator_bits)
        else:
            total = checked_add(total, current, accumulator_bits)
        previous = current

    return total
