"""
Rounding — Округление до N значащих цифр

Единый движок округления для div, sqrt, round, prec и строковых
конверсий (to_fixed, to_exponential, to_precision).

Решение об округлении вверх (d — первая отбрасываемая цифра,
any — есть ли ненулевые отбрасываемые цифры или флаг more):
- DOWN: никогда
- HALF_UP: d >= 5
- HALF_EVEN: d > 5, или d == 5 и (any за пределами d, или предыдущая цифра нечётная)
- UP: any

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат нормализован (хвостовые нули удалены)
2. Повторное округление с теми же sd и mode ничего не меняет
3. Знак сохраняется, даже если результат — ноль (signed zero)
"""

from typing import Any, Sequence

from bigdec.core.domain.config import RoundingMode, coerce_rounding_mode
from bigdec.core.domain.value import DecimalValue, from_digits, zero


def _rounds_up(
    mode: RoundingMode,
    discarded: int,
    tail_nonzero: bool,
    previous_odd: bool,
) -> bool:
    """
    Решение об округлении вверх.

    Args:
        mode: Режим округления
        discarded: Первая отбрасываемая цифра
        tail_nonzero: Есть ли ненулевые цифры после discarded (или флаг more)
        previous_odd: Нечётна ли последняя сохраняемая цифра
    """
    if mode is RoundingMode.HALF_UP:
        return discarded >= 5
    if mode is RoundingMode.HALF_EVEN:
        return discarded > 5 or (discarded == 5 and (tail_nonzero or previous_odd))
    if mode is RoundingMode.UP:
        return discarded > 0 or tail_nonzero
    return False


def round_digits(
    value: DecimalValue,
    sd: int,
    mode: Any,
    more: bool = False,
) -> DecimalValue:
    """
    Округление значения до sd значащих цифр.

    Args:
        value: Исходное значение (не изменяется)
        sd: Количество значащих цифр (может быть <= 0)
        mode: Режим округления (RoundingMode или код 0..3)
        more: Были ли отброшены ненулевые цифры до вызова (остаток деления)

    Returns:
        Новое округлённое значение

    Raises:
        InvalidRoundingMode: Если mode не является режимом округления

    Examples:
        >>> round_digits(parse_text("1.005"), 3, RoundingMode.HALF_EVEN)
        DecimalValue(sign=1, exponent=0, digits=(1,))
        >>> round_digits(parse_text("9.99"), 2, RoundingMode.HALF_UP)
        DecimalValue(sign=1, exponent=1, digits=(1,))
    """
    return round_buffer(value.sign, value.exponent, value.digits, sd, mode, more)


def round_buffer(
    sign: int,
    exponent: int,
    digits: Sequence[int],
    sd: int,
    mode: Any,
    more: bool = False,
) -> DecimalValue:
    """
    Округление ненормализованного буфера цифр.

    Буфер может содержать хвостовые нули (частное деления) или быть
    единственной цифрой 0. Хвостовые нули участвуют в решении как
    отбрасываемые цифры, поэтому флаг more не теряется.

    Args:
        sign: Знак результата
        exponent: Степень десяти для digits[0]
        digits: Цифры без ведущих нулей (кроме единственного 0)
        sd: Количество значащих цифр
        mode: Режим округления
        more: Были ли отброшены ненулевые цифры до вызова
    """
    mode = coerce_rounding_mode(mode)

    if sd < 1:
        # Всё отбрасывается: результат 0 или единица в разряде 10^(e - sd + 1).
        # При sd < 0 даже первая цифра лежит ниже округляемого разряда,
        # поэтому half-режимы дают ноль.
        tail_nonzero = more or any(digits[1:])
        if mode is RoundingMode.UP:
            up = digits[0] != 0 or tail_nonzero
        elif sd == 0:
            up = _rounds_up(mode, digits[0], tail_nonzero, False)
        else:
            up = False

        if up:
            return DecimalValue(sign, exponent - sd + 1, (1,))
        return zero(sign)

    if sd >= len(digits):
        return from_digits(sign, exponent, digits)

    kept = list(digits[:sd])
    tail_nonzero = more or any(digits[sd + 1 :])

    if _rounds_up(mode, digits[sd], tail_nonzero, kept[-1] % 2 == 1):
        i = sd - 1
        kept[i] += 1
        while kept[i] > 9:
            kept[i] = 0
            if i == 0:
                kept.insert(0, 1)
                exponent += 1
                break
            i -= 1
            kept[i] += 1

    return from_digits(sign, exponent, kept)
