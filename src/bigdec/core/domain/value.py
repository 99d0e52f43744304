"""
DecimalValue — Нормализованное представление десятичного числа

Тройка (sign, exponent, digits):
- sign: +1 или -1
- exponent: степень десяти первой (старшей) цифры
- digits: значащие десятичные цифры, без ведущих и хвостовых нулей

Значение числа: sign * 0.d1d2...dn * 10^(exponent + 1)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digits не пустой
2. Ненулевое значение: первая и последняя цифры ненулевые
3. Ноль: digits == (0,), exponent == 0 (sign может быть -1, signed zero)
4. Значение immutable: все операции возвращают новый экземпляр
"""

from dataclasses import dataclass
from typing import Final, Sequence


# =============================================================================
# VALUE
# =============================================================================


@dataclass(frozen=True)
class DecimalValue:
    """Нормализованное десятичное значение."""

    sign: int
    exponent: int
    digits: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.sign not in (1, -1):
            raise ValueError(f"sign must be +1 or -1, got {self.sign}")

        if not self.digits:
            raise ValueError("digits must not be empty")

        if any(d < 0 or d > 9 for d in self.digits):
            raise ValueError(f"digits must be in 0..9, got {self.digits}")

        if self.digits[0] == 0:
            if self.digits != (0,) or self.exponent != 0:
                raise ValueError(
                    f"non-canonical zero or leading zero: "
                    f"exponent={self.exponent}, digits={self.digits}"
                )
        elif self.digits[-1] == 0:
            raise ValueError(f"trailing zero digit in {self.digits}")

    @property
    def is_zero(self) -> bool:
        return self.digits[0] == 0

    @property
    def is_negative(self) -> bool:
        return self.sign < 0

    def negate(self) -> "DecimalValue":
        return DecimalValue(-self.sign, self.exponent, self.digits)

    def with_sign(self, sign: int) -> "DecimalValue":
        if sign == self.sign:
            return self
        return DecimalValue(sign, self.exponent, self.digits)

    def magnitude(self) -> "DecimalValue":
        return self.with_sign(1)


# Каноничный ноль и signed zero
ZERO: Final[DecimalValue] = DecimalValue(1, 0, (0,))
NEGATIVE_ZERO: Final[DecimalValue] = DecimalValue(-1, 0, (0,))
ONE: Final[DecimalValue] = DecimalValue(1, 0, (1,))
HALF: Final[DecimalValue] = DecimalValue(1, -1, (5,))


def zero(sign: int = 1) -> DecimalValue:
    """Ноль с заданным знаком (sign=-1 даёт signed zero)."""
    return NEGATIVE_ZERO if sign < 0 else ZERO


def from_digits(sign: int, exponent: int, digits: Sequence[int]) -> DecimalValue:
    """
    Сборка DecimalValue из ненормализованного буфера цифр.

    Удаляет ведущие нули (корректируя exponent) и хвостовые нули.
    Пустой результат превращается в ноль с тем же знаком.

    Args:
        sign: Знак результата
        exponent: Степень десяти для digits[0]
        digits: Буфер цифр (может содержать ведущие/хвостовые нули)

    Returns:
        Нормализованное значение
    """
    start = 0
    end = len(digits)

    while start < end and digits[start] == 0:
        start += 1

    if start == end:
        return zero(sign)

    while digits[end - 1] == 0:
        end -= 1

    return DecimalValue(sign, exponent - start, tuple(digits[start:end]))
