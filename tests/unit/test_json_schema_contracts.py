"""
Tests for JSON Schema Contract Validators

Тестирование контракта настроек движка:
- Загрузка и meta-валидация схем
- Валидация правильных настроек
- Детекция нарушений типов и constraints (min/max/enum)
- Интеграция с BigConfig и BigEngine.from_settings
"""

import json

import pytest
from jsonschema import SchemaError, ValidationError

from bigdec import BigConfig, BigEngine, RoundingMode
from bigdec.core.contracts import load_schema, settings_validator, validate_big_config


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_big_config():
    """Валидный словарь настроек движка."""
    return {
        "decimal_places": 10,
        "rounding_mode": "HALF_EVEN",
        "negative_exponent_threshold": -7,
        "positive_exponent_threshold": 21,
        "strict": True,
        "max_decimal_places": 1000,
        "max_power_magnitude": 1000,
    }


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_load_schema_returns_settings_schema():
    """Схема big_config поставляется с пакетом."""
    schema = load_schema("big_config")

    assert schema["type"] == "object"
    assert schema["additionalProperties"] is False


def test_load_schema_caches_schemas():
    """Повторная загрузка возвращает тот же объект (кэш)."""
    assert load_schema("big_config") is load_schema("big_config")


def test_load_schema_raises_on_missing_schema():
    """Отсутствующая схема → FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_schema("non_existent_schema")


def test_load_schema_rejects_invalid_schema(tmp_path):
    """Meta-validation: невалидная схема отклоняется."""
    (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")

    with pytest.raises(SchemaError):
        load_schema("broken", tmp_path)


# =============================================================================
# TESTS - BIG CONFIG VALIDATION
# =============================================================================


def test_big_config_accepts_valid_data(valid_big_config):
    """Валидация правильного big_config."""
    validate_big_config(valid_big_config)  # Не должно выбросить исключение
    assert settings_validator().is_valid(valid_big_config)


def test_big_config_accepts_empty_mapping():
    """Все поля необязательны."""
    validate_big_config({})


def test_big_config_accepts_integer_rounding_mode(valid_big_config):
    """Режим округления задаётся кодом 0..3."""
    data = valid_big_config.copy()
    data["rounding_mode"] = 3
    validate_big_config(data)


def test_big_config_rejects_wrong_type(valid_big_config):
    """Валидация отклоняет неправильный тип данных."""
    data = valid_big_config.copy()
    data["decimal_places"] = "10"

    with pytest.raises(ValidationError) as exc_info:
        validate_big_config(data)
    assert "is not of type 'integer'" in str(exc_info.value)


def test_big_config_rejects_negative_decimal_places(valid_big_config):
    """decimal_places >= 0."""
    data = valid_big_config.copy()
    data["decimal_places"] = -1

    with pytest.raises(ValidationError):
        validate_big_config(data)


def test_big_config_rejects_invalid_rounding_mode(valid_big_config):
    """Неизвестный режим округления."""
    data = valid_big_config.copy()
    data["rounding_mode"] = "HALF_DOWN"

    with pytest.raises(ValidationError):
        validate_big_config(data)


def test_big_config_rejects_positive_negative_threshold(valid_big_config):
    """negative_exponent_threshold <= 0."""
    data = valid_big_config.copy()
    data["negative_exponent_threshold"] = 1

    with pytest.raises(ValidationError):
        validate_big_config(data)


def test_big_config_rejects_unknown_field(valid_big_config):
    """additionalProperties: false."""
    data = valid_big_config.copy()
    data["precision"] = 5

    with pytest.raises(ValidationError) as exc_info:
        validate_big_config(data)
    assert "Additional properties are not allowed" in str(exc_info.value)


def test_big_config_reports_all_errors(valid_big_config):
    """Валидатор находит все нарушения, не только первое."""
    data = valid_big_config.copy()
    data["decimal_places"] = -1
    data["strict"] = "yes"

    errors = list(settings_validator().iter_errors(data))
    assert len(errors) == 2


# =============================================================================
# TESTS - MODEL INTEGRATION
# =============================================================================


def test_big_config_model_dump_is_valid_settings():
    """BigConfig.model_dump(mode='json') проходит контракт big_config."""
    config = BigConfig(decimal_places=4, rounding_mode=RoundingMode.DOWN, strict=True)
    validate_big_config(config.model_dump(mode="json"))


def test_from_settings_round_trip(valid_big_config):
    """Настройки → движок → настройки."""
    engine = BigEngine.from_settings(valid_big_config)
    validate_big_config(engine.config.model_dump(mode="json"))
    assert engine.config.rounding_mode is RoundingMode.HALF_EVEN


def test_from_settings_reads_json_document():
    """Настройки из JSON-документа приложения."""
    document = '{"decimal_places": 2, "rounding_mode": 0}'
    engine = BigEngine.from_settings(json.loads(document))
    assert engine("2").div(3).to_string() == "0.66"
