"""
RomanNumeral — Value object римского числа

Immutable Pydantic модель, хранящая одно провалидированное значение
в диапазоне [MIN_VALUE, MAX_VALUE]. Строковое представление всегда
каноническое и вычисляется при запросе.

Сериализованная форма соответствует JSON Schema roman_numeral.json
(см. core.contracts).
"""

from typing import Any, Final

from pydantic import BaseModel, Field

from roman_numerals.core.domain.codec import encode
from roman_numerals.core.domain.symbols import MAX_VALUE, MIN_VALUE

# Версия контракта сериализованного числа
NUMERAL_SCHEMA_VERSION: Final[str] = "1"


class RomanNumeral(BaseModel):
    """
    Римское число.

    Immutable модель (frozen=True): равенство и хэш определяются значением.
    Строгая типизация поля: bool и строки не приводятся к int.

    Создаётся через NumeralConverter.from_int / from_string, либо напрямую
    RomanNumeral(value=...) с валидацией Pydantic.
    """

    value: int = Field(
        ...,
        ge=MIN_VALUE,
        le=MAX_VALUE,
        strict=True,
        description="Целое значение римского числа",
    )

    model_config = {"frozen": True}

    def to_int(self) -> int:
        """Целое значение."""
        return self.value

    def to_string(self) -> str:
        """
        Каноническая запись в субтрактивной нотации.

        Returns:
            Например, 'MCMXCIX' для 1999
        """
        return encode(self.value)

    def to_payload(self) -> dict[str, Any]:
        """
        Сериализация в словарь, соответствующий контракту roman_numeral.

        Returns:
            {"schema_version": "1", "value": ..., "numeral": ...}
        """
        return {
            "schema_version": NUMERAL_SCHEMA_VERSION,
            "value": self.value,
            "numeral": self.to_string(),
        }

    def __str__(self) -> str:
        return self.to_string()

    def __int__(self) -> int:
        return self.value
