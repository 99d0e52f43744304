"""
Division — Деление в столбик и остаток от деления

Деление выполняется непосредственно на массивах десятичных цифр:
частное формируется по одной цифре, каждая цифра — количество
вычитаний делителя из текущего остатка (0..9). Нативное деление
и умножение чисел не используются.

Рабочая точность:
    p = decimal_places + (x.e - y.e) + 1

Если получено больше p цифр, результат округляется с флагом more
(остался ли ненулевой остаток или непрочитанные цифры делимого).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль → DivisionByZero
2. Знак частного = XOR знаков операндов (в том числе для нуля)
3. Количество итераций ограничено decimal_places (гарантия завершения)
"""

from typing import Any

from bigdec.core.domain.config import RoundingMode, coerce_rounding_mode
from bigdec.core.domain.errors import ERROR_PREFIX, DivisionByZero
from bigdec.core.domain.value import DecimalValue, from_digits, zero
from bigdec.core.math.arithmetic import multiply, subtract
from bigdec.core.math.comparison import compare_magnitude
from bigdec.core.math.rounding import round_buffer


# =============================================================================
# ОПЕРАЦИИ НАД ОСТАТКОМ
# =============================================================================


def _compare_digits(a: list[int], b: list[int]) -> int:
    """Сравнение целых без ведущих нулей, заданных списками цифр."""
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    for da, db in zip(a, b):
        if da != db:
            return 1 if da > db else -1
    return 0


def _subtract_in_place(remainder: list[int], divisor: list[int]) -> None:
    """
    remainder -= divisor (remainder >= divisor).

    Ведущие нули результата удаляются; нулевой остаток — пустой список.
    """
    offset = len(remainder) - len(divisor)
    borrow = 0
    for i in range(len(remainder) - 1, -1, -1):
        j = i - offset
        d = remainder[i] - borrow - (divisor[j] if j >= 0 else 0)
        if d < 0:
            d += 10
            borrow = 1
        else:
            borrow = 0
        remainder[i] = d

    while remainder and remainder[0] == 0:
        del remainder[0]


def _long_division(
    dividend: tuple[int, ...],
    divisor: tuple[int, ...],
    limit: int,
) -> tuple[list[int], bool]:
    """
    Деление в столбик.

    Args:
        dividend: Цифры делимого
        divisor: Цифры делителя
        limit: Максимум дополнительных цифр частного после первой

    Returns:
        (цифры частного, флаг more)
    """
    divisor_digits = list(divisor)
    size = len(divisor_digits)

    # Остаток стартует со старших цифр делимого, дополненных нулями до длины делителя
    remainder = list(dividend[:size])
    remainder.extend([0] * (size - len(remainder)))
    next_index = size

    quotient: list[int] = []

    while True:
        n = 0
        while _compare_digits(remainder, divisor_digits) >= 0:
            _subtract_in_place(remainder, divisor_digits)
            n += 1
        quotient.append(n)

        pulled_real_digit = next_index < len(dividend)
        digit = dividend[next_index] if pulled_real_digit else 0
        next_index += 1

        more = pulled_real_digit or bool(remainder)

        if remainder or digit:
            remainder.append(digit)

        if not more or limit <= 0:
            return quotient, more
        limit -= 1


def divide(
    x: DecimalValue,
    y: DecimalValue,
    decimal_places: int,
    rounding_mode: Any,
) -> DecimalValue:
    """
    Частное x / y, округлённое до decimal_places знаков после запятой.

    Args:
        x: Делимое
        y: Делитель
        decimal_places: Максимум знаков после запятой (>= 0)
        rounding_mode: Режим округления последней цифры

    Raises:
        DivisionByZero: Если y == 0
        InvalidRoundingMode: Если rounding_mode не является режимом округления

    Examples:
        >>> divide(parse_text("1"), parse_text("3"), 20, RoundingMode.HALF_UP)
        # 0.33333333333333333333
    """
    rounding_mode = coerce_rounding_mode(rounding_mode)

    if y.is_zero:
        raise DivisionByZero(f"{ERROR_PREFIX}Division by zero")

    sign = 1 if x.sign == y.sign else -1

    if x.is_zero:
        return zero(sign)

    exponent = x.exponent - y.exponent
    precision = decimal_places + exponent + 1

    quotient, more = _long_division(x.digits, y.digits, max(precision, 0))
    produced = len(quotient)

    # Ведущий ноль частного (не более одного); единственная цифра 0 остаётся
    if quotient[0] == 0 and produced != 1:
        del quotient[0]
        exponent -= 1
        precision -= 1

    if len(quotient) > precision:
        return round_buffer(sign, exponent, quotient, precision, rounding_mode, more)

    return from_digits(sign, exponent, quotient)


# =============================================================================
# ОСТАТОК ОТ ДЕЛЕНИЯ
# =============================================================================


def modulo(x: DecimalValue, y: DecimalValue) -> DecimalValue:
    """
    Остаток x mod y по правилу усечённого деления.

    Знак результата совпадает со знаком делимого.

    Алгоритм:
    1. y == 0 → DivisionByZero
    2. |y| > |x| → x
    3. q = trunc(x / y) (decimal_places=0, DOWN); результат x - q * y

    Examples:
        >>> modulo(parse_text("-7"), parse_text("3"))
        DecimalValue(sign=-1, exponent=0, digits=(1,))
    """
    if y.is_zero:
        raise DivisionByZero(f"{ERROR_PREFIX}Division by zero")

    if compare_magnitude(y, x) == 1:
        return x

    quotient = divide(x, y, 0, RoundingMode.DOWN)
    return subtract(x, multiply(quotient, y))
