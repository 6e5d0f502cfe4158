"""
Symbols — Таблицы символов римских чисел

Две независимые таблицы:
- SYMBOL_VALUES: 13 канонических групп субтрактивной нотации (для encode)
- SINGLE_SYMBOL_VALUES: 7 одиночных символов (для decode и проверки символов)

Таблицы неизменяемы и инициализируются один раз при импорте модуля.
Безопасны для конкурентного чтения без синхронизации.
"""

from types import MappingProxyType
from typing import Final, Mapping


# =============================================================================
# ДИАПАЗОН ЗНАЧЕНИЙ
# =============================================================================

# Минимальное представимое значение
MIN_VALUE: Final[int] = 1

# Максимальное представимое значение (MMMCMXCIX)
MAX_VALUE: Final[int] = 3999


# =============================================================================
# ТАБЛИЦЫ СИМВОЛОВ
# =============================================================================

# Группы символов строго по убыванию значения.
# Порядок критичен: encode жадно проходит таблицу сверху вниз.
SYMBOL_VALUES: Final[tuple[tuple[str, int], ...]] = (
    ("M", 1000),
    ("CM", 900),
    ("D", 500),
    ("CD", 400),
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
)

# Одиночные символы и их атомарные значения
SINGLE_SYMBOL_VALUES: Final[Mapping[str, int]] = MappingProxyType(
    {
        "I": 1,
        "V": 5,
        "X": 10,
        "L": 50,
        "C": 100,
        "D": 500,
        "M": 1000,
    }
)

# Значение, с которого начинается сканирование справа налево в decode
INITIAL_PREVIOUS_VALUE: Final[int] = SINGLE_SYMBOL_VALUES["I"]


def is_symbol(char: str) -> bool:
    """
    Проверка, является ли символ допустимым одиночным символом римского числа.

    Регистр учитывается: ожидается уже приведённый к верхнему регистру символ.

    Args:
        char: Проверяемый символ

    Returns:
        True если char входит в {I, V, X, L, C, D, M}
    """
    return char in SINGLE_SYMBOL_VALUES
