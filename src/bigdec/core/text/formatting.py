"""
Formatting — DecimalValue → текст

Две нотации:
- фиксированная: '123.45', '0.000123', '1200'
- экспоненциальная: '1.2345e+2', '1.23e-4'

Выбор нотации для to_string/to_json/value_of:
    экспоненциальная ⇔ e <= negative_exponent_threshold
                      или e >= positive_exponent_threshold

to_fixed, to_exponential, to_precision сначала округляют значение
до запрошенного количества цифр, затем дополняют нулями справа.

Знак:
- ненулевые значения всегда со знаком
- ноль без знака, кроме value_of (signed zero → '-0')
- to_fixed/to_exponential/to_precision: знак, если исходное значение
  было ненулевым ('-0.1'.to_fixed(0) == '-0')
"""

import logging
import math
from typing import Any, Optional, Sequence

from bigdec.core.domain.config import BigConfig
from bigdec.core.domain.errors import (
    ERROR_PREFIX,
    ImpreciseConversion,
    InvalidDecimalPlaces,
    InvalidPrecision,
    NumericCoercionDisallowed,
)
from bigdec.core.domain.value import DecimalValue
from bigdec.core.math.comparison import compare
from bigdec.core.math.rounding import round_digits
from bigdec.core.text.parsing import parse_text

logger = logging.getLogger(__name__)


# =============================================================================
# STRINGIFY
# =============================================================================


def stringify(
    sign: int,
    exponent: int,
    digits: Sequence[int],
    exponential: bool,
    signed: bool,
) -> str:
    """
    Текст из (sign, exponent, digits).

    digits может содержать хвостовые нули (дополнение до запрошенной
    длины в to_fixed/to_precision).

    Args:
        sign: Знак
        exponent: Степень десяти первой цифры
        digits: Цифры коэффициента
        exponential: Экспоненциальная нотация
        signed: Выводить '-' при sign < 0

    Examples:
        >>> stringify(1, 2, (1, 2, 3, 4, 5), True, True)
        '1.2345e+2'
        >>> stringify(-1, -4, (1, 2, 3), False, True)
        '-0.000123'
    """
    s = "".join(map(str, digits))
    n = len(s)

    if exponential:
        s = s[0] + ("." + s[1:] if n > 1 else "") + ("e" if exponent < 0 else "e+") + str(exponent)
    elif exponent < 0:
        s = "0." + "0" * (-exponent - 1) + s
    elif exponent > 0:
        if exponent + 1 > n:
            s += "0" * (exponent + 1 - n)
        elif exponent + 1 < n:
            s = s[: exponent + 1] + "." + s[exponent + 1 :]
    elif n > 1:
        s = s[0] + "." + s[1:]

    return "-" + s if sign < 0 and signed else s


def _uses_exponential(exponent: int, config: BigConfig) -> bool:
    return (
        exponent <= config.negative_exponent_threshold
        or exponent >= config.positive_exponent_threshold
    )


def _padded(value: DecimalValue, length: int) -> tuple[int, ...]:
    """Цифры значения, дополненные нулями справа до length."""
    if len(value.digits) >= length:
        return value.digits
    return value.digits + (0,) * (length - len(value.digits))


def _check_integer(value: Any, low: int, high: int, error: type[Exception], what: str) -> int:
    """
    Проверка целочисленного аргумента в диапазоне [low, high].

    Raises:
        error: Если value не int или вне диапазона
    """
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        raise error(f"{ERROR_PREFIX}Invalid {what}: {value!r}")
    return value


def check_decimal_places(dp: Any, config: BigConfig, allow_negative: bool = False) -> int:
    """Проверка decimal places: [0 или -max, max_decimal_places]."""
    high = config.max_decimal_places
    low = -high if allow_negative else 0
    return _check_integer(dp, low, high, InvalidDecimalPlaces, "decimal places")


def check_precision(sd: Any, config: BigConfig) -> int:
    """Проверка количества значащих цифр: [1, max_decimal_places]."""
    return _check_integer(sd, 1, config.max_decimal_places, InvalidPrecision, "precision")


# =============================================================================
# КАНОНИЧНЫЙ ТЕКСТ
# =============================================================================


def to_string(value: DecimalValue, config: BigConfig) -> str:
    """
    Каноничный текст (также JSON-представление).

    Знак у нуля не выводится.

    Examples:
        >>> to_string(parse_text("1e21"), BigConfig())
        '1e+21'
        >>> to_string(parse_text("-0"), BigConfig())
        '0'
    """
    return stringify(
        value.sign,
        value.exponent,
        value.digits,
        _uses_exponential(value.exponent, config),
        not value.is_zero,
    )


def value_of(value: DecimalValue, config: BigConfig) -> str:
    """
    Текст для числовой коэрции с сохранением знака нуля.

    Raises:
        NumericCoercionDisallowed: В strict-режиме
    """
    if config.strict:
        raise NumericCoercionDisallowed(f"{ERROR_PREFIX}value_of disallowed")

    return stringify(
        value.sign,
        value.exponent,
        value.digits,
        _uses_exponential(value.exponent, config),
        True,
    )


# =============================================================================
# ФИКСИРОВАННОЕ КОЛИЧЕСТВО ЦИФР
# =============================================================================


def to_fixed(
    value: DecimalValue,
    config: BigConfig,
    decimal_places: Optional[int] = None,
    rounding_mode: Any = None,
) -> str:
    """
    Фиксированная нотация с decimal_places знаками после запятой.

    Без decimal_places — фиксированная нотация без округления.

    Raises:
        InvalidDecimalPlaces: decimal_places вне [0, max_decimal_places]
        InvalidRoundingMode: неверный rounding_mode

    Examples:
        >>> to_fixed(parse_text("1.005"), BigConfig(), 2, RoundingMode.HALF_EVEN)
        '1.00'
        >>> to_fixed(parse_text("-0.1"), BigConfig(), 0)
        '-0'
    """
    signed = not value.is_zero
    digits = value.digits
    x = value

    if decimal_places is not None:
        dp = check_decimal_places(decimal_places, config)
        mode = config.rounding_mode if rounding_mode is None else rounding_mode
        x = round_digits(value, dp + value.exponent + 1, mode)
        # exponent мог измениться при округлении вверх
        digits = _padded(x, dp + x.exponent + 1)

    return stringify(x.sign, x.exponent, digits, False, signed)


def to_exponential(
    value: DecimalValue,
    config: BigConfig,
    decimal_places: Optional[int] = None,
    rounding_mode: Any = None,
) -> str:
    """
    Экспоненциальная нотация с decimal_places цифрами после точки.

    Examples:
        >>> to_exponential(parse_text("45.6"), BigConfig(), 0)
        '5e+1'
        >>> to_exponential(parse_text("45.6"), BigConfig(), 3)
        '4.560e+1'
    """
    signed = not value.is_zero
    digits = value.digits
    x = value

    if decimal_places is not None:
        dp = check_decimal_places(decimal_places, config)
        mode = config.rounding_mode if rounding_mode is None else rounding_mode
        x = round_digits(value, dp + 1, mode)
        digits = _padded(x, dp + 1)

    return stringify(x.sign, x.exponent, digits, True, signed)


def to_precision(
    value: DecimalValue,
    config: BigConfig,
    significant_digits: Optional[int] = None,
    rounding_mode: Any = None,
) -> str:
    """
    Текст с significant_digits значащими цифрами.

    Экспоненциальная нотация, если significant_digits не хватает для
    целой части (sd <= e) или этого требуют пороги конфигурации.

    Raises:
        InvalidPrecision: significant_digits вне [1, max_decimal_places]

    Examples:
        >>> to_precision(parse_text("45.6"), BigConfig(), 1)
        '5e+1'
        >>> to_precision(parse_text("45.6"), BigConfig(), 5)
        '45.600'
    """
    signed = not value.is_zero
    digits = value.digits
    x = value
    exponential = _uses_exponential(value.exponent, config)

    if significant_digits is not None:
        sd = check_precision(significant_digits, config)
        mode = config.rounding_mode if rounding_mode is None else rounding_mode
        x = round_digits(value, sd, mode)
        digits = _padded(x, sd)
        exponential = sd <= x.exponent or _uses_exponential(x.exponent, config)

    return stringify(x.sign, x.exponent, digits, exponential, signed)


# =============================================================================
# FLOAT
# =============================================================================


def to_number(value: DecimalValue, config: BigConfig) -> float:
    """
    Конверсия в float.

    Raises:
        ImpreciseConversion: В strict-режиме, если float не восстанавливает
            исходное значение
    """
    number = float(stringify(value.sign, value.exponent, value.digits, True, True))

    if config.strict:
        if not math.isfinite(number) or compare(value, parse_text(repr(number))) != 0:
            logger.debug("Imprecise float conversion of %s", to_string(value, config))
            raise ImpreciseConversion(f"{ERROR_PREFIX}Imprecise conversion")

    return number
