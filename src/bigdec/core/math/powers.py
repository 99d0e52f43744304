"""
Powers — Целая степень и квадратный корень

power: бинарное возведение в степень (square-and-multiply),
O(log|n|) умножений. Отрицательная степень — 1 / x^|n| через divide.

square_root: метод Ньютона r = 0.5 * (r + x / r) с начальной оценкой
из float и guard-цифрами (decimal_places + 4) на время итераций.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. pow(x, 0) == 1 для любого x
2. |n| <= max_power_magnitude, n целое
3. sqrt(0) == 0, sqrt(x < 0) → NoSquareRoot
4. Итерации Ньютона завершаются: сравнивается конечное окно цифр
"""

import logging
import math
from typing import Any, Final

from bigdec.core.domain.errors import ERROR_PREFIX, InvalidExponent, NoSquareRoot
from bigdec.core.domain.value import HALF, ONE, DecimalValue
from bigdec.core.math.arithmetic import add, multiply
from bigdec.core.math.division import divide
from bigdec.core.math.rounding import round_digits
from bigdec.core.text.parsing import number_to_text, parse_text

logger = logging.getLogger(__name__)

# Дополнительные цифры рабочей точности на время итераций Ньютона
SQRT_GUARD_DIGITS: Final[int] = 4


# =============================================================================
# POWER
# =============================================================================


def power(
    x: DecimalValue,
    n: int,
    max_power: int,
    decimal_places: int,
    rounding_mode: Any,
) -> DecimalValue:
    """
    Возведение x в целую степень n.

    Args:
        x: Основание
        n: Целый показатель, |n| <= max_power
        max_power: Лимит модуля показателя
        decimal_places: Точность деления для n < 0
        rounding_mode: Режим округления для n < 0

    Raises:
        InvalidExponent: n не int или |n| > max_power
        DivisionByZero: x == 0 и n < 0

    Examples:
        >>> power(parse_text("2"), 10, 10**6, 20, RoundingMode.HALF_UP)
        DecimalValue(sign=1, exponent=3, digits=(1, 0, 2, 4))
    """
    if isinstance(n, bool) or not isinstance(n, int) or abs(n) > max_power:
        raise InvalidExponent(f"{ERROR_PREFIX}Invalid exponent: {n!r}")

    negative = n < 0
    remaining = -n if negative else n

    result = ONE
    base = x
    while True:
        if remaining & 1:
            result = multiply(result, base)
        remaining >>= 1
        if not remaining:
            break
        base = multiply(base, base)

    if negative:
        return divide(ONE, result, decimal_places, rounding_mode)
    return result


# =============================================================================
# SQUARE ROOT
# =============================================================================


def _halve_exponent(exponent: int) -> int:
    """
    Exponent начальной оценки корня при переоценке через коэффициент.

    Деление пополам с усечением к нулю, минус 1 для отрицательных
    и нечётных exponent.
    """
    half = int((exponent + 1) / 2)
    if exponent < 0 or exponent & 1:
        half -= 1
    return half


def _initial_estimate(x: DecimalValue) -> DecimalValue:
    """
    Начальная оценка sqrt(x) через float.

    Если float переполняется или обнуляется, корень берётся из
    коэффициента как целого числа (с дополнением до чётности),
    а exponent оценки выставляется явно.
    """
    coefficient = "".join(map(str, x.digits))

    # x = 0.d1d2...dn * 10^(e + 1)
    estimate = math.sqrt(float(f"0.{coefficient}e{x.exponent + 1}"))

    if estimate != 0 and not math.isinf(estimate):
        return parse_text(number_to_text(estimate))

    if not (len(coefficient) + x.exponent) & 1:
        coefficient += "0"

    estimate = math.sqrt(float(coefficient))
    exponent = _halve_exponent(x.exponent)

    if math.isinf(estimate):
        mantissa = "5"
    else:
        mantissa = format(estimate, ".16e").split("e")[0]

    logger.debug("sqrt float estimate out of range, re-derived from coefficient (e=%d)", exponent)
    return parse_text(f"{mantissa}e{exponent}")


def square_root(
    x: DecimalValue,
    decimal_places: int,
    rounding_mode: Any,
) -> DecimalValue:
    """
    Квадратный корень, округлённый до decimal_places знаков после запятой.

    Алгоритм:
    1. Начальная оценка r через float
    2. r = 0.5 * (r + x / r), деление с точностью decimal_places + 4
    3. Остановка, когда первые r.e + decimal_places + 4 цифр совпадают
       у двух последовательных итераций
    4. Округление до decimal_places

    Raises:
        NoSquareRoot: x < 0

    Examples:
        >>> square_root(parse_text("4"), 20, RoundingMode.HALF_UP)
        DecimalValue(sign=1, exponent=0, digits=(2,))
    """
    if x.is_zero:
        return x

    if x.sign < 0:
        raise NoSquareRoot(f"{ERROR_PREFIX}No square root")

    working_dp = decimal_places + SQRT_GUARD_DIGITS
    r = _initial_estimate(x)
    # Корень ниже рабочей точности: окно пустое, хватает одной итерации
    window = max(r.exponent + working_dp, 0)

    iterations = 0
    while True:
        previous = r
        r = multiply(HALF, add(previous, divide(x, previous, working_dp, rounding_mode)))
        iterations += 1
        if previous.digits[:window] == r.digits[:window]:
            break

    logger.debug("sqrt converged after %d iterations (dp=%d)", iterations, decimal_places)
    return round_digits(r, decimal_places + r.exponent + 1, rounding_mode)
