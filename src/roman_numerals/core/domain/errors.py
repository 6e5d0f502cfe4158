"""
Errors — Типизированные ошибки конвертации римских чисел

Иерархия:
- NumeralError (ValueError)
  - NumeralRangeError: значение вне [MIN_VALUE, MAX_VALUE]
  - NumeralFormatError: недопустимый символ или неканоническая запись в контракте

Переполнение аккумулятора сигнализируется встроенным OverflowError
(см. core.math.checked_arithmetic).
"""


class NumeralError(ValueError):
    """Базовая ошибка домена римских чисел."""

    pass


class NumeralRangeError(NumeralError):
    """
    Значение вне допустимого диапазона.

    Возникает при конструировании из целого числа, а также когда
    результат decode строки не попадает в [MIN_VALUE, MAX_VALUE].
    """

    def __init__(self, value: int, min_value: int, max_value: int):
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(
            f"Roman numeral value must be in [{min_value}, {max_value}], got {value}"
        )


class NumeralFormatError(NumeralError):
    """Строка не может быть интерпретирована как римское число."""

    pass
