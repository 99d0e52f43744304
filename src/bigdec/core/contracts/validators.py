"""
Settings Contract — JSON Schema контракт настроек движка

Словарь настроек (например, прочитанный из JSON-файла приложения)
проверяется схемой big_config до построения BigConfig. Схема повторяет
диапазоны полей модели, поэтому ошибка указывает на поле словаря,
а не на внутреннее состояние движка.

Схемы лежат в каталоге schema/ рядом с модулем и поставляются
вместе с пакетом (package-data).
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Mapping

from jsonschema import Draft202012Validator

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema (кэшируется).

    Args:
        schema_name: Имя схемы без расширения ('big_config')
        schema_dir: Каталог схем

    Raises:
        FileNotFoundError: Файл схемы не найден
        jsonschema.SchemaError: Файл не является схемой Draft 2020-12
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    Draft202012Validator.check_schema(schema)
    return schema


@lru_cache(maxsize=None)
def settings_validator() -> Draft202012Validator:
    """Валидатор контракта big_config."""
    return Draft202012Validator(load_schema("big_config"))


def validate_big_config(settings: Mapping[str, Any]) -> None:
    """
    Проверка словаря настроек BigEngine.from_settings.

    Raises:
        jsonschema.ValidationError: Первое найденное нарушение контракта
    """
    settings_validator().validate(dict(settings))
