"""
Comparison — Полный порядок на DecimalValue

compare(x, y) возвращает -1, 0 или +1.
Signed zero равен каноничному нулю.
"""

from bigdec.core.domain.value import DecimalValue


def compare(x: DecimalValue, y: DecimalValue) -> int:
    """
    Сравнение двух значений.

    Алгоритм:
    1. Нули: оба нули → 0; один ноль → знак ненулевого (инвертированный для y)
    2. Разные знаки → знак x
    3. Разные exponent → больший exponent больше по модулю
    4. Поразрядное сравнение digits
    5. Общий префикс → длиннее больше по модулю

    Для отрицательных чисел направление шагов 3-5 инвертируется.

    Examples:
        >>> compare(parse_text("1e2"), parse_text("100"))
        0
        >>> compare(parse_text("-1"), parse_text("0"))
        -1
    """
    if x.is_zero or y.is_zero:
        if x.is_zero:
            return 0 if y.is_zero else -y.sign
        return x.sign

    if x.sign != y.sign:
        return x.sign

    flip = x.sign

    if x.exponent != y.exponent:
        return flip if x.exponent > y.exponent else -flip

    for a, b in zip(x.digits, y.digits):
        if a != b:
            return flip if a > b else -flip

    if len(x.digits) == len(y.digits):
        return 0

    return flip if len(x.digits) > len(y.digits) else -flip


def compare_magnitude(x: DecimalValue, y: DecimalValue) -> int:
    """Сравнение |x| и |y|."""
    return compare(x.magnitude(), y.magnitude())
