"""
BigEngine — Движок десятичной арифметики с собственной конфигурацией

Каждый движок владеет своей BigConfig; числа Big привязаны к движку,
который их создал. Разные движки не разделяют изменяемого состояния,
поэтому изолированные места вызова могут использовать разную точность
и режим округления без блокировок.

Пути создания числа:
- from_string(text)  — десятичный текст
- from_number(n)     — int или float (запрещено в strict-режиме)
- from_value(big)    — копия значения существующего Big
- big(value) / engine(value) — диспетчеризация по типу аргумента
"""

import logging
from functools import singledispatchmethod
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from bigdec.core.contracts import validate_big_config
from bigdec.core.domain.config import BigConfig
from bigdec.core.domain.errors import (
    ERROR_PREFIX,
    InvalidDecimalPlaces,
    InvalidNumber,
    InvalidRoundingMode,
)
from bigdec.core.text.parsing import parse_number, parse_text
from bigdec.number import Big

logger = logging.getLogger(__name__)

# Поля конфигурации, ошибки которых переводятся в таксономию bigdec
_FIELD_ERRORS = {
    "decimal_places": InvalidDecimalPlaces,
    "rounding_mode": InvalidRoundingMode,
}


def _build_config(base: BigConfig, changes: Mapping[str, Any]) -> BigConfig:
    """
    Новая BigConfig из base с заменой полей changes.

    Ошибки decimal_places и rounding_mode переводятся в типизированные
    ошибки bigdec с отклонённым значением (в том числе прежним, если
    нарушение вызвано изменением другого поля, например max_decimal_places).

    Raises:
        InvalidDecimalPlaces: неверный decimal_places
        InvalidRoundingMode: неверный rounding_mode
        pydantic.ValidationError: прочие нарушения
    """
    fields = {**base.model_dump(), **changes}
    try:
        return BigConfig(**fields)
    except ValidationError as e:
        for error in e.errors():
            field = error["loc"][0] if error["loc"] else None
            if field in _FIELD_ERRORS:
                raise _FIELD_ERRORS[field](
                    f"{ERROR_PREFIX}Invalid {str(field).replace('_', ' ')}: {fields[field]!r}"
                ) from e
        raise


class BigEngine:
    """
    Фабрика чисел Big, связанная с конфигурацией.

    Example:
        >>> engine = BigEngine(BigConfig(decimal_places=5))
        >>> engine("1").div(3).to_string()
        '0.33333'
    """

    def __init__(self, config: Optional[BigConfig] = None):
        self._config = config if config is not None else BigConfig()

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "BigEngine":
        """
        Движок из словаря настроек (например, из JSON).

        Настройки проверяются контрактом big_config, затем моделью BigConfig
        (с тем же переводом ошибок, что и в configure).

        Raises:
            jsonschema.ValidationError: Нарушение контракта
            InvalidDecimalPlaces: decimal_places больше max_decimal_places
        """
        validate_big_config(settings)
        return cls(_build_config(BigConfig(), settings))

    # -------------------------------------------------------------------------
    # Конфигурация
    # -------------------------------------------------------------------------

    @property
    def config(self) -> BigConfig:
        return self._config

    def configure(self, **changes: Any) -> BigConfig:
        """
        Замена конфигурации движка.

        Новая конфигурация валидируется целиком; при ошибке движок
        сохраняет прежнюю конфигурацию.

        Args:
            **changes: Поля BigConfig для изменения

        Returns:
            Новая конфигурация

        Raises:
            InvalidDecimalPlaces: неверный decimal_places
            InvalidRoundingMode: неверный rounding_mode
            pydantic.ValidationError: прочие нарушения
        """
        config = _build_config(self._config, changes)

        logger.debug("Engine reconfigured: %s", changes)
        self._config = config
        return config

    # -------------------------------------------------------------------------
    # Создание чисел
    # -------------------------------------------------------------------------

    def from_string(self, text: str) -> Big:
        return Big(self, parse_text(text))

    def from_number(self, number: int | float) -> Big:
        return Big(self, parse_number(number, strict=self._config.strict))

    def from_value(self, other: Big) -> Big:
        return Big(self, other.value)

    @singledispatchmethod
    def big(self, value: Any) -> Big:
        """
        Создание Big из str, int, float или Big.

        Raises:
            InvalidNumber: неподдерживаемый тип или неверный текст
            NumericCoercionDisallowed: int или float в strict-режиме
        """
        raise InvalidNumber(f"{ERROR_PREFIX}Invalid number: {value!r}")

    @big.register
    def _(self, value: str) -> Big:
        return self.from_string(value)

    @big.register
    def _(self, value: bool) -> Big:
        raise InvalidNumber(f"{ERROR_PREFIX}Invalid number: {value!r}")

    @big.register
    def _(self, value: int) -> Big:
        return self.from_number(value)

    @big.register
    def _(self, value: float) -> Big:
        return self.from_number(value)

    @big.register
    def _(self, value: Big) -> Big:
        return self.from_value(value)

    def __call__(self, value: Any) -> Big:
        return self.big(value)

    def __repr__(self) -> str:
        return f"BigEngine({self._config!r})"
