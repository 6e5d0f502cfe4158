"""Numeral Converter — точка входа конвертации int ↔ римское число

Операции:
- from_int: целое → RomanNumeral (проверка типа и диапазона)
- from_string: строка → RomanNumeral (символы → decode → диапазон)
- is_canonical / check_canonical: проверка канонической формы через round-trip
- from_payload: JSON контракт → RomanNumeral

Диапазон проверяется одинаково для обоих конструкторов: строка,
декодируемая вне [MIN_VALUE, MAX_VALUE] (например, "MMMM"), отклоняется
с NumeralRangeError.

Интеграция:
- Алгоритмы из core.domain.codec
- Value object core.domain.numeral.RomanNumeral
- Контракт core.contracts (roman_numeral.json)
"""

from dataclasses import dataclass
from typing import Any, Dict, Final

from roman_numerals.core.contracts import RomanNumeralValidator
from roman_numerals.core.domain.codec import decode, encode, normalize, validate_int_value
from roman_numerals.core.domain.errors import (
    NumeralFormatError,
    NumeralRangeError,
)
from roman_numerals.core.domain.numeral import RomanNumeral
from roman_numerals.core.domain.symbols import MAX_VALUE, MIN_VALUE
from roman_numerals.core.math.checked_arithmetic import (
    DEFAULT_ACCUMULATOR_BITS,
    int_bounds,
)


# =============================================================================
# CONSTANTS
# =============================================================================

# Причины вердикта check_canonical
REASON_CANONICAL: Final[str] = "canonical"
REASON_NON_CANONICAL: Final[str] = "non_canonical"
REASON_ILLEGAL_CHARACTER: Final[str] = "illegal_character"
REASON_OVERFLOW: Final[str] = "overflow"
REASON_OUT_OF_RANGE: Final[str] = "out_of_range"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CanonicalCheckResult:
    """Результат проверки канонической формы."""

    text: str
    normalized: str  # text.upper()
    is_canonical: bool

    # None если decode не выполнился (недопустимый символ / переполнение)
    decoded_value: int | None
    # None если decoded_value вне диапазона
    canonical_form: str | None

    reason: str


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConverterConfig:
    """Конфигурация конвертера.

    Разрядность знакового аккумулятора decode. 32 бита соответствуют
    исходному целому типу; сумма за пределами границ → OverflowError.
    """

    accumulator_bits: int = DEFAULT_ACCUMULATOR_BITS


# =============================================================================
# CONVERTER
# =============================================================================


class NumeralConverter:
    """Конвертер int ↔ римское число.

    Все операции синхронны и не имеют состояния помимо неизменяемой
    конфигурации, поэтому один экземпляр можно разделять между потоками.
    """

    def __init__(self, config: ConverterConfig | None = None):
        """Инициализация конвертера.

        Args:
            config: конфигурация (опционально, используется default)

        Raises:
            ValueError: Если accumulator_bits < 2
        """
        self.config = config or ConverterConfig()
        int_bounds(self.config.accumulator_bits)
        self._payload_validator = RomanNumeralValidator()

    def from_int(self, value: int) -> RomanNumeral:
        """Конструирование из целого.

        Args:
            value: Целое в [MIN_VALUE, MAX_VALUE]

        Returns:
            RomanNumeral

        Raises:
            TypeError: Если value не int
            NumeralRangeError: Если value вне диапазона
        """
        validate_int_value(value)
        return RomanNumeral(value=value)

    def from_string(self, text: str) -> RomanNumeral:
        """Конструирование из строки (регистр не важен).

        Неканонические записи допускаются ("IIII", "MIM"), но результат
        decode обязан попасть в [MIN_VALUE, MAX_VALUE].

        Args:
            text: Римское число

        Returns:
            RomanNumeral

        Raises:
            TypeError: Если text не str
            NumeralFormatError: Недопустимый символ
            OverflowError: Переполнение аккумулятора
            NumeralRangeError: Декодированное значение вне диапазона
        """
        value = decode(text, self.config.accumulator_bits)

        if value < MIN_VALUE or value > MAX_VALUE:
            raise NumeralRangeError(value, MIN_VALUE, MAX_VALUE)

        return RomanNumeral(value=value)

    def check_canonical(self, text: str) -> CanonicalCheckResult:
        """Подробная проверка канонической формы.

        Порядок проверок:
        1. Допустимость символов
        2. decode без переполнения
        3. Диапазон decoded_value
        4. encode(decoded_value) == text.upper()

        Raises:
            TypeError: Если text не str
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")

        upper = text.upper()

        def verdict(
            reason: str,
            decoded_value: int | None = None,
            canonical_form: str | None = None,
        ) -> CanonicalCheckResult:
            return CanonicalCheckResult(
                text=text,
                normalized=upper,
                is_canonical=reason == REASON_CANONICAL,
                decoded_value=decoded_value,
                canonical_form=canonical_form,
                reason=reason,
            )

        try:
            normalize(upper)
        except NumeralFormatError:
            return verdict(REASON_ILLEGAL_CHARACTER)

        try:
            value = decode(upper, self.config.accumulator_bits)
        except OverflowError:
            return verdict(REASON_OVERFLOW)

        if value < MIN_VALUE or value > MAX_VALUE:
            return verdict(REASON_OUT_OF_RANGE, decoded_value=value)

        canonical_form = encode(value)
        if canonical_form != upper:
            return verdict(REASON_NON_CANONICAL, value, canonical_form)

        return verdict(REASON_CANONICAL, value, canonical_form)

    def is_canonical(self, text: str) -> bool:
        """True если encode(decode(text)) совпадает с text.upper()."""
        return self.check_canonical(text).is_canonical

    def from_payload(self, data: Dict[str, Any]) -> RomanNumeral:
        """Десериализация из словаря контракта roman_numeral.

        Поле numeral обязано быть канонической записью поля value.
        JSON Schema считает 5.0 целым, поэтому тип value проверяется отдельно.

        Raises:
            jsonschema.ValidationError: Нарушение схемы
            NumeralFormatError: value не int, или numeral не совпадает с encode(value)
        """
        self._payload_validator.validate(data)

        value = data["value"]
        if isinstance(value, bool) or not isinstance(value, int):
            raise NumeralFormatError(
                f"Payload value must be an int, got {type(value).__name__} {value!r}"
            )

        numeral = self.from_int(value)
        if numeral.to_string() != data["numeral"]:
            raise NumeralFormatError(
                f"Payload numeral {data['numeral']!r} is not the canonical form "
                f"{numeral.to_string()!r} of value {numeral.value}"
            )

        return numeral


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

# Конвертер с конфигурацией по умолчанию
_DEFAULT_CONVERTER = NumeralConverter()


def from_int(value: int) -> RomanNumeral:
    """Конструирование RomanNumeral из целого (конфигурация по умолчанию)."""
    return _DEFAULT_CONVERTER.from_int(value)


def from_string(text: str) -> RomanNumeral:
    """Конструирование RomanNumeral из строки (конфигурация по умолчанию)."""
    return _DEFAULT_CONVERTER.from_string(text)


def is_canonical(text: str) -> bool:
    """Проверка канонической формы (конфигурация по умолчанию)."""
    return _DEFAULT_CONVERTER.is_canonical(text)


def check_canonical(text: str) -> CanonicalCheckResult:
    """Подробная проверка канонической формы (конфигурация по умолчанию)."""
    return _DEFAULT_CONVERTER.check_canonical(text)


def from_payload(data: Dict[str, Any]) -> RomanNumeral:
    """Десериализация из контракта roman_numeral (конфигурация по умолчанию)."""
    return _DEFAULT_CONVERTER.from_payload(data)
