"""
BigConfig — Конфигурация десятичной арифметики

Immutable Pydantic модель с параметрами по умолчанию для операций,
которые не получают явных переопределений (decimal places, rounding mode,
пороги экспоненциальной нотации, strict-режим).

Конфигурация не является глобальной: она принадлежит конкретному
BigEngine, и разные движки не разделяют изменяемого состояния.
"""

from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from .errors import ERROR_PREFIX, InvalidRoundingMode


# =============================================================================
# ЛИМИТЫ
# =============================================================================

# Абсолютный максимум decimal places (и max_decimal_places)
MAX_DP_LIMIT: Final[int] = 1_000_000

# Абсолютный максимум модуля показателя степени в pow
MAX_POWER_LIMIT: Final[int] = 1_000_000

# Абсолютный максимум модуля порогов экспоненциальной нотации
EXPONENT_THRESHOLD_LIMIT: Final[int] = 1_000_000


# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(int, Enum):
    """
    Режим округления.

    Целые коды 0..3 принимаются наравне с членами перечисления:
    - DOWN (0): к нулю, отбрасывание
    - HALF_UP (1): к ближайшему, при равенстве от нуля
    - HALF_EVEN (2): к ближайшему, при равенстве к чётному (banker's rounding)
    - UP (3): от нуля
    """

    DOWN = 0
    HALF_UP = 1
    HALF_EVEN = 2
    UP = 3


def coerce_rounding_mode(value: Any) -> RoundingMode:
    """
    Приведение значения к RoundingMode.

    Принимает RoundingMode, целый код 0..3 или имя режима ('half_even').

    Raises:
        InvalidRoundingMode: Если значение не соответствует ни одному режиму
    """
    if isinstance(value, RoundingMode):
        return value

    if isinstance(value, str):
        try:
            return RoundingMode[value.strip().upper()]
        except KeyError:
            raise InvalidRoundingMode(f"{ERROR_PREFIX}Invalid rounding mode: {value!r}") from None

    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return RoundingMode(value)
        except ValueError:
            raise InvalidRoundingMode(f"{ERROR_PREFIX}Invalid rounding mode: {value!r}") from None

    raise InvalidRoundingMode(f"{ERROR_PREFIX}Invalid rounding mode: {value!r}")


# =============================================================================
# CONFIG MODEL
# =============================================================================


class BigConfig(BaseModel):
    """
    Параметры по умолчанию для операций BigEngine.

    Immutable модель (frozen=True). Изменение конфигурации движка создаёт
    новый экземпляр через BigEngine.configure().
    """

    # Лимиты объявлены первыми: валидатор decimal_places читает их из info.data
    max_decimal_places: int = Field(
        MAX_DP_LIMIT, ge=0, le=MAX_DP_LIMIT, description="Верхняя граница decimal_places"
    )
    max_power_magnitude: int = Field(
        MAX_POWER_LIMIT, ge=1, le=MAX_POWER_LIMIT, description="Максимум |n| для pow(n)"
    )

    decimal_places: int = Field(
        20, ge=0, le=MAX_DP_LIMIT, description="Максимум знаков после запятой для div, sqrt и pow(-n)"
    )
    rounding_mode: RoundingMode = Field(
        RoundingMode.HALF_UP, description="Режим округления по умолчанию"
    )
    negative_exponent_threshold: int = Field(
        -7,
        ge=-EXPONENT_THRESHOLD_LIMIT,
        le=0,
        description="Экспонента, при которой и ниже to_string переходит в экспоненциальную нотацию",
    )
    positive_exponent_threshold: int = Field(
        21,
        ge=0,
        le=EXPONENT_THRESHOLD_LIMIT,
        description="Экспонента, при которой и выше to_string переходит в экспоненциальную нотацию",
    )
    strict: bool = Field(
        False, description="Запрет нативных чисел на входе, value_of() и неточного to_number()"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("rounding_mode", mode="before")
    @classmethod
    def parse_rounding_mode(cls, v: Any) -> RoundingMode:
        """Имена режимов ('HALF_EVEN') принимаются наравне с кодами 0..3"""
        try:
            return coerce_rounding_mode(v)
        except InvalidRoundingMode as e:
            raise ValueError(str(e)) from None

    @field_validator("decimal_places", "max_decimal_places", "max_power_magnitude", mode="before")
    @classmethod
    def reject_bool(cls, v: Any) -> Any:
        """bool является подклассом int, но не является количеством"""
        if isinstance(v, bool):
            raise ValueError(f"expected an integer, got {v!r}")
        return v

    @field_validator("decimal_places")
    @classmethod
    def check_decimal_places_limit(cls, v: int, info) -> int:
        """decimal_places не может превышать max_decimal_places"""
        if "max_decimal_places" in info.data:
            max_dp = info.data["max_decimal_places"]
            if v > max_dp:
                raise ValueError(f"decimal_places {v} exceeds max_decimal_places {max_dp}")
        return v
