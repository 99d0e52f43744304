"""
Errors — Таксономия ошибок десятичной арифметики

Все ошибки синхронные и прерывают только текущий вызов.
Операнды при ошибке никогда не изменяются (значения immutable).

Каждая ошибка наследует BigError и ближайшее встроенное исключение,
поэтому обычные обработчики (ValueError, ZeroDivisionError, ...) продолжают
работать.
"""

from typing import Final

# Префикс всех сообщений об ошибках
ERROR_PREFIX: Final[str] = "[bigdec] "


# =============================================================================
# BASE
# =============================================================================


class BigError(Exception):
    """Базовая ошибка библиотеки bigdec."""

    pass


# =============================================================================
# ВХОДНЫЕ ДАННЫЕ
# =============================================================================


class InvalidNumber(BigError, ValueError):
    """Текст не соответствует грамматике десятичного числа."""

    pass


class InvalidDecimalPlaces(BigError, ValueError):
    """Количество знаков после запятой не целое или вне допустимого диапазона."""

    pass


class InvalidPrecision(BigError, ValueError):
    """Количество значащих цифр не целое или вне диапазона [1, max_decimal_places]."""

    pass


class InvalidRoundingMode(BigError, ValueError):
    """Режим округления не является одним из DOWN, HALF_UP, HALF_EVEN, UP."""

    pass


class InvalidExponent(BigError, ValueError):
    """Показатель степени не целый или по модулю больше max_power_magnitude."""

    pass


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class DivisionByZero(BigError, ZeroDivisionError):
    """Деление или остаток от деления на ноль."""

    pass


class NoSquareRoot(BigError, ValueError):
    """Квадратный корень из отрицательного числа."""

    pass


# =============================================================================
# КОНВЕРСИЯ (STRICT MODE)
# =============================================================================


class ImpreciseConversion(BigError, ArithmeticError):
    """
    Конверсия в float теряет информацию.

    Возникает только в strict-режиме, когда float не восстанавливает
    исходное значение.
    """

    pass


class NumericCoercionDisallowed(BigError, TypeError):
    """
    Неявная конверсия запрещена strict-режимом.

    Относится к вводу float в конструктор и к value_of().
    """

    pass
