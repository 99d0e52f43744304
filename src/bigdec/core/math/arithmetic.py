"""
Arithmetic — Сложение, вычитание и умножение DecimalValue

Сложение и вычитание взаимно рекурсивны по знаку:
- add(x, y) при разных знаках → subtract(x, -y)
- subtract(x, y) при разных знаках → add(x, -y)

Умножение — школьная свёртка цифр (outer loop по короткому операнду).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операнды не изменяются (работа идёт на копиях списков цифр)
2. x - x == +0
3. Результат всегда нормализован
"""

from bigdec.core.domain.value import DecimalValue, ZERO, from_digits, zero


# =============================================================================
# ВЫРАВНИВАНИЕ
# =============================================================================


def _align(x: DecimalValue, y: DecimalValue) -> tuple[list[int], list[int], int]:
    """
    Выравнивание разрядов двух значений.

    Операнд с меньшим exponent дополняется ведущими нулями, чтобы
    цифры одинакового веса стояли на одинаковых позициях.

    Returns:
        (цифры x, цифры y, общий exponent)
    """
    xc = list(x.digits)
    yc = list(y.digits)
    shift = x.exponent - y.exponent

    if shift > 0:
        yc[:0] = [0] * shift
        return xc, yc, x.exponent
    if shift < 0:
        xc[:0] = [0] * -shift
    return xc, yc, y.exponent


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add(x: DecimalValue, y: DecimalValue) -> DecimalValue:
    """
    Сумма x + y.

    Examples:
        >>> add(parse_text("0.1"), parse_text("0.2"))
        DecimalValue(sign=1, exponent=-1, digits=(3,))
    """
    if x.sign != y.sign:
        return subtract(x, y.negate())

    if x.is_zero or y.is_zero:
        if not y.is_zero:
            return y
        if not x.is_zero:
            return x
        # -0 + -0 = -0
        return zero(x.sign)

    xc, yc, exponent = _align(x, y)

    # Более длинный список принимает сумму, хвост короткого не нужен
    if len(xc) < len(yc):
        xc, yc = yc, xc

    carry = 0
    for i in range(len(yc) - 1, -1, -1):
        total = xc[i] + yc[i] + carry
        xc[i] = total % 10
        carry = total // 10

    if carry:
        xc.insert(0, carry)
        exponent += 1

    return from_digits(x.sign, exponent, xc)


def subtract(x: DecimalValue, y: DecimalValue) -> DecimalValue:
    """
    Разность x - y.

    Знак результата — знак большего по модулю операнда,
    инвертированный, если больше вычитаемое.

    Examples:
        >>> subtract(parse_text("1"), parse_text("3"))
        DecimalValue(sign=-1, exponent=0, digits=(2,))
    """
    if x.sign != y.sign:
        return add(x, y.negate())

    if x.is_zero or y.is_zero:
        if not y.is_zero:
            return y.negate()
        if not x.is_zero:
            return x
        return ZERO

    sign = x.sign
    xc, yc, exponent = _align(x, y)

    # Поразрядное сравнение выровненных модулей
    x_smaller = len(xc) < len(yc)
    for a, b in zip(xc, yc):
        if a != b:
            x_smaller = a < b
            break

    if x_smaller:
        xc, yc = yc, xc
        sign = -sign

    if len(xc) < len(yc):
        xc.extend([0] * (len(yc) - len(xc)))

    borrow = 0
    for j in range(len(xc) - 1, -1, -1):
        d = xc[j] - borrow - (yc[j] if j < len(yc) else 0)
        if d < 0:
            d += 10
            borrow = 1
        else:
            borrow = 0
        xc[j] = d

    result = from_digits(sign, exponent, xc)

    # n - n = +0
    if result.is_zero:
        return ZERO
    return result


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply(x: DecimalValue, y: DecimalValue) -> DecimalValue:
    """
    Произведение x * y.

    Буфер результата длиной len(x) + len(y); для каждой цифры короткого
    операнда накапливается произведение с цифрами длинного и перенос.
    Exponent = x.e + y.e (+1, если старшая позиция буфера ненулевая).

    Ноль в любом операнде даёт ноль со знаком произведения.
    """
    sign = x.sign * y.sign

    if x.is_zero or y.is_zero:
        return zero(sign)

    long_digits = x.digits
    short_digits = y.digits
    if len(long_digits) < len(short_digits):
        long_digits, short_digits = short_digits, long_digits

    la = len(long_digits)
    buffer = [0] * (la + len(short_digits))

    for i in range(len(short_digits) - 1, -1, -1):
        carry = 0
        multiplier = short_digits[i]
        for j in range(la + i, i, -1):
            total = buffer[j] + multiplier * long_digits[j - i - 1] + carry
            buffer[j] = total % 10
            carry = total // 10
        buffer[i] = carry

    exponent = x.exponent + y.exponent
    if buffer[0]:
        exponent += 1
    else:
        del buffer[0]

    return from_digits(sign, exponent, buffer)
