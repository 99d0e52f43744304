"""
Contract Validation Module

JSON Schema контракт словаря настроек движка.
"""

from .validators import SCHEMA_DIR, load_schema, settings_validator, validate_big_config

__all__ = [
    "SCHEMA_DIR",
    "load_schema",
    "settings_validator",
    "validate_big_config",
]
