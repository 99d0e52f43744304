"""
bigdec — Arbitrary-precision decimal arithmetic

Точная десятичная арифметика: сложение, вычитание, умножение, деление,
остаток, целая степень, квадратный корень, четыре режима округления,
фиксированная и экспоненциальная нотация.

Examples:
    >>> from bigdec import big
    >>> (big("0.1") + "0.2").to_string()
    '0.3'
    >>> big("1").div(3).to_string()
    '0.33333333333333333333'

    >>> engine = BigEngine(BigConfig(decimal_places=2, rounding_mode=RoundingMode.HALF_EVEN))
    >>> engine("2").div(3).to_string()
    '0.67'
"""

import logging

from bigdec.core.domain import (
    BigConfig,
    BigError,
    DecimalValue,
    DivisionByZero,
    ImpreciseConversion,
    InvalidDecimalPlaces,
    InvalidExponent,
    InvalidNumber,
    InvalidPrecision,
    InvalidRoundingMode,
    NoSquareRoot,
    NumericCoercionDisallowed,
    RoundingMode,
)
from bigdec.engine import BigEngine
from bigdec.number import Big

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Движок по умолчанию для кода, которому не нужна собственная конфигурация
default_engine = BigEngine()


def big(value) -> Big:
    """Big из str, int, float или Big на движке по умолчанию."""
    return default_engine.big(value)


__all__ = [
    "Big",
    "BigConfig",
    "BigEngine",
    "DecimalValue",
    "RoundingMode",
    "big",
    "default_engine",
    # Errors
    "BigError",
    "InvalidNumber",
    "InvalidDecimalPlaces",
    "InvalidPrecision",
    "InvalidRoundingMode",
    "InvalidExponent",
    "DivisionByZero",
    "NoSquareRoot",
    "ImpreciseConversion",
    "NumericCoercionDisallowed",
]
