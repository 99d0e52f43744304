"""
Parsing — Текст и нативные числа → DecimalValue

Грамматика:
    -?([0-9]+(.[0-9]+)?|.[0-9]+)([eE][+-]?[0-9]+)?

Алгоритм:
1. Знак
2. Позиция десятичной точки (удаляется из текста)
3. Экспонента прибавляется к позиции точки
4. Ведущие нули удаляются (сдвигают exponent), хвостовые нули удаляются
5. Пустой остаток → ноль

float конвертируется через кратчайшее round-trip представление (repr),
int через точное десятичное представление.
"""

import logging
import math
import re
from typing import Final

from bigdec.core.domain.errors import ERROR_PREFIX, InvalidNumber, NumericCoercionDisallowed
from bigdec.core.domain.value import DecimalValue, zero

logger = logging.getLogger(__name__)

NUMERIC_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"-?([0-9]+(\.[0-9]+)?|\.[0-9]+)([eE][+-]?[0-9]+)?"
)

# Максимум цифр экспоненты в литерале (лимит str -> int интерпретатора)
EXPONENT_DIGITS_LIMIT: Final[int] = 4300


# =============================================================================
# TEXT
# =============================================================================


def parse_text(text: str) -> DecimalValue:
    """
    Разбор десятичного текста.

    Args:
        text: Десятичный литерал ('-1.25e+3', '.5', '007')

    Returns:
        Нормализованное значение

    Raises:
        InvalidNumber: Если текст не соответствует грамматике
            или экспонента длиннее EXPONENT_DIGITS_LIMIT цифр

    Examples:
        >>> parse_text("1.50")
        DecimalValue(sign=1, exponent=0, digits=(1, 5))
        >>> parse_text("-0.00e5")
        DecimalValue(sign=-1, exponent=0, digits=(0,))
    """
    if not isinstance(text, str) or NUMERIC_PATTERN.fullmatch(text) is None:
        raise InvalidNumber(f"{ERROR_PREFIX}Invalid number: {text!r}")

    sign = 1
    if text[0] == "-":
        sign = -1
        text = text[1:]

    point = text.find(".")
    if point > -1:
        text = text.replace(".", "", 1)

    marker = text.find("e")
    if marker < 0:
        marker = text.find("E")

    if marker > 0:
        if point < 0:
            point = marker
        exponent_text = text[marker + 1 :]
        if len(exponent_text.lstrip("+-")) > EXPONENT_DIGITS_LIMIT:
            raise InvalidNumber(f"{ERROR_PREFIX}Invalid number: exponent too long")
        point += int(exponent_text)
        text = text[:marker]
    elif point < 0:
        point = len(text)

    length = len(text)
    leading = 0
    while leading < length and text[leading] == "0":
        leading += 1

    if leading == length:
        return zero(sign)

    while text[length - 1] == "0":
        length -= 1

    return DecimalValue(
        sign,
        point - leading - 1,
        tuple(int(ch) for ch in text[leading:length]),
    )


# =============================================================================
# NATIVE NUMBERS
# =============================================================================

# Длина блока цифр при переводе int в текст; меньше лимита str(int) интерпретатора
INT_CHUNK_DIGITS: Final[int] = 1000


def _int_to_text(number: int) -> str:
    """
    Точная десятичная запись int любой длины.

    str(int) отказывает на числах длиннее 4300 цифр, поэтому модуль
    разбивается на блоки по INT_CHUNK_DIGITS цифр через divmod.
    """
    magnitude = -number if number < 0 else number
    base = 10**INT_CHUNK_DIGITS

    chunks = []
    while magnitude >= base:
        magnitude, chunk = divmod(magnitude, base)
        chunks.append(f"{chunk:0{INT_CHUNK_DIGITS}d}")
    chunks.append(str(magnitude))

    text = "".join(reversed(chunks))
    return f"-{text}" if number < 0 else text


def number_to_text(number: int | float) -> str:
    """
    Десятичный текст нативного числа.

    -0.0 сохраняет знак ('-0'). NaN/Inf и bool отклоняются.

    Raises:
        InvalidNumber: Если число не конечное или не int/float
    """
    if isinstance(number, bool) or not isinstance(number, (int, float)):
        raise InvalidNumber(f"{ERROR_PREFIX}Invalid number: {number!r}")

    if isinstance(number, int):
        return _int_to_text(number)

    if not math.isfinite(number):
        raise InvalidNumber(f"{ERROR_PREFIX}Invalid number: {number!r}")

    if number == 0:
        return "-0" if math.copysign(1.0, number) < 0 else "0"

    return repr(number)


def parse_number(number: int | float, strict: bool = False) -> DecimalValue:
    """
    Разбор нативного числа.

    Args:
        number: int (всегда точный) или float
        strict: Запрет нативных чисел на входе (только текст)

    Raises:
        NumericCoercionDisallowed: int или float в strict-режиме
        InvalidNumber: NaN, Inf или неподдерживаемый тип
    """
    if strict and isinstance(number, (int, float)) and not isinstance(number, bool):
        logger.debug("Rejected %s input in strict mode", type(number).__name__)
        raise NumericCoercionDisallowed(
            f"{ERROR_PREFIX}Invalid number: {type(number).__name__} input in strict mode"
        )

    return parse_text(number_to_text(number))
