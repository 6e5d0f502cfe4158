"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидатора roman_numeral:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (min/max/const/pattern)
- Интеграция с Pydantic моделью
"""

import json

import pytest
from jsonschema import ValidationError

from roman_numerals.core.contracts import (
    ContractValidator,
    RomanNumeralValidator,
    SchemaLoader,
    validate_roman_numeral,
)
from roman_numerals.core.domain import RomanNumeral


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_roman_numeral():
    """Валидный roman_numeral для тестирования."""
    return {
        "schema_version": "1",
        "value": 1999,
        "numeral": "MCMXCIX",
    }


@pytest.fixture
def validator():
    """Валидатор roman_numeral."""
    return RomanNumeralValidator()


# =============================================================================
# SCHEMA LOADER
# =============================================================================


def test_schema_loader_loads_roman_numeral():
    """Схема загружается и проходит meta-validation."""
    schema = SchemaLoader().load_schema("roman_numeral")
    assert schema["title"] == "roman_numeral"
    assert set(schema["required"]) == {"schema_version", "value", "numeral"}


def test_schema_loader_caches():
    """Повторная загрузка возвращает закэшированную схему."""
    loader = SchemaLoader()
    assert loader.load_schema("roman_numeral") is loader.load_schema("roman_numeral")


def test_schema_loader_missing_schema():
    """Несуществующая схема → FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="Schema not found"):
        SchemaLoader().load_schema("does_not_exist")


def test_schema_loader_missing_directory(tmp_path):
    """Несуществующий каталог → RuntimeError."""
    with pytest.raises(RuntimeError, match="Schema directory not found"):
        SchemaLoader(tmp_path / "missing")


def test_schema_loader_invalid_schema(tmp_path):
    """Невалидная JSON Schema → ValueError."""
    (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
        SchemaLoader(tmp_path).load_schema("broken")


def test_contract_validator_explicit_schema_name(valid_roman_numeral):
    """Базовый валидатор принимает имя схемы явно."""
    validator = ContractValidator("roman_numeral")
    assert validator.schema_name == RomanNumeralValidator.schema_name == "roman_numeral"
    assert validator.is_valid(valid_roman_numeral)


# =============================================================================
# ROMAN_NUMERAL VALIDATION
# =============================================================================


def test_valid_roman_numeral(validator, valid_roman_numeral):
    """Валидные данные проходят."""
    validator.validate(valid_roman_numeral)
    assert validator.is_valid(valid_roman_numeral)
    validate_roman_numeral(valid_roman_numeral)


def test_missing_required_field(validator, valid_roman_numeral):
    """Отсутствие обязательного поля."""
    data = dict(valid_roman_numeral)
    del data["value"]

    with pytest.raises(ValidationError) as exc_info:
        validator.validate(data)
    assert "'value' is a required property" in str(exc_info.value)


def test_value_wrong_type(validator, valid_roman_numeral):
    """value должен быть integer."""
    data = dict(valid_roman_numeral, value="1999")

    with pytest.raises(ValidationError) as exc_info:
        validator.validate(data)
    assert "is not of type 'integer'" in str(exc_info.value)


def test_value_bool_rejected(validator, valid_roman_numeral):
    """bool не является integer в JSON Schema."""
    data = dict(valid_roman_numeral, value=True)
    assert not validator.is_valid(data)


def test_value_below_minimum(validator, valid_roman_numeral):
    """value < 1."""
    data = dict(valid_roman_numeral, value=0)

    with pytest.raises(ValidationError):
        validator.validate(data)


def test_value_above_maximum(validator, valid_roman_numeral):
    """value > 3999."""
    data = dict(valid_roman_numeral, value=4000)

    with pytest.raises(ValidationError):
        validator.validate(data)


def test_numeral_lowercase_rejected(validator, valid_roman_numeral):
    """numeral должен быть в верхнем регистре."""
    data = dict(valid_roman_numeral, numeral="mcmxcix")

    with pytest.raises(ValidationError):
        validator.validate(data)


def test_numeral_illegal_character(validator, valid_roman_numeral):
    """numeral не содержит посторонних символов."""
    data = dict(valid_roman_numeral, numeral="MZV")
    assert not validator.is_valid(data)


def test_numeral_empty_rejected(validator, valid_roman_numeral):
    """Пустой numeral отклоняется."""
    data = dict(valid_roman_numeral, numeral="")
    assert not validator.is_valid(data)


def test_schema_version_const(validator, valid_roman_numeral):
    """schema_version зафиксирован."""
    data = dict(valid_roman_numeral, schema_version="2")
    assert not validator.is_valid(data)


def test_additional_properties_rejected(validator, valid_roman_numeral):
    """Посторонние поля запрещены."""
    data = dict(valid_roman_numeral, extra=1)
    assert not validator.is_valid(data)


def test_iter_errors_reports_all(validator):
    """iter_errors возвращает все нарушения."""
    data = {"schema_version": "2", "value": 0, "numeral": "abc"}
    errors = list(validator.iter_errors(data))
    assert len(errors) == 3


# =============================================================================
# PYDANTIC INTEGRATION
# =============================================================================


def test_pydantic_payload_matches_schema(validator):
    """to_payload() RomanNumeral соответствует схеме."""
    for value in (1, 4, 1244, 1999, 2043, 3147, 3999):
        validator.validate(RomanNumeral(value=value).to_payload())
