"""
JSON Schema Contract Validators

Проверка сериализованных римских чисел против JSON Schema (draft 2020-12).
Схемы лежат в каталоге schema/ рядом с модулем и поставляются как package data.

Схемы:
- roman_numeral.json — {"schema_version", "value", "numeral"}
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

# Каталог схем по умолчанию
SCHEMA_DIR: Path = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Кэширующий загрузчик схем с meta-validation при первой загрузке."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Raises:
            FileNotFoundError: Файла schema_dir/<schema_name>.json нет
            json.JSONDecodeError: Файл не JSON
            ValueError: Файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор одного контракта.

    Подклассы задают schema_name на уровне класса; базовый класс
    принимает имя схемы явно.
    """

    schema_name: str

    def __init__(self, schema_name: str | None = None):
        if schema_name is not None:
            self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """Raises ValidationError на первом нарушении схемы."""
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все нарушения схемы, без остановки на первом."""
        return self.validator.iter_errors(data)


class RomanNumeralValidator(ContractValidator):
    """Контракт roman_numeral (RomanNumeral.to_payload)."""

    schema_name = "roman_numeral"


def validate_roman_numeral(data: Dict[str, Any]) -> None:
    """
    Проверка payload римского числа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RomanNumeralValidator().validate(data)
