"""
Big — Десятичное число произвольной точности

Immutable обёртка над DecimalValue, привязанная к BigEngine.
Операции без явных параметров читают конфигурацию движка в момент
вызова (не в момент создания числа).

Создание — только через движок:
    >>> engine = BigEngine()
    >>> x = engine.from_string("0.1")
    >>> (x + "0.2").to_string()
    '0.3'
"""

from typing import TYPE_CHECKING, Any, Optional

from bigdec.core.domain.value import DecimalValue
from bigdec.core.math.arithmetic import add, multiply, subtract
from bigdec.core.math.comparison import compare
from bigdec.core.math.division import divide, modulo
from bigdec.core.math.powers import power, square_root
from bigdec.core.math.rounding import round_digits
from bigdec.core.text import formatting

if TYPE_CHECKING:
    from bigdec.engine import BigEngine


# Типы, которые принимают арифметические операторы
_OPERAND_TYPES = (str, int, float)


class Big:
    """
    Десятичное число произвольной точности.

    Хранит знак, экспоненту и цифры (DecimalValue) и движок, чья
    конфигурация применяется к div, sqrt, pow(-n), round и конверсиям.
    """

    __slots__ = ("_engine", "_value")

    def __init__(self, engine: "BigEngine", value: DecimalValue):
        self._engine = engine
        self._value = value

    # -------------------------------------------------------------------------
    # Атрибуты
    # -------------------------------------------------------------------------

    @property
    def engine(self) -> "BigEngine":
        return self._engine

    @property
    def value(self) -> DecimalValue:
        return self._value

    @property
    def sign(self) -> int:
        return self._value.sign

    @property
    def exponent(self) -> int:
        return self._value.exponent

    @property
    def digits(self) -> tuple[int, ...]:
        return self._value.digits

    def is_zero(self) -> bool:
        return self._value.is_zero

    def _new(self, value: DecimalValue) -> "Big":
        return Big(self._engine, value)

    def _operand(self, other: Any) -> DecimalValue:
        return self._engine.big(other).value

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def cmp(self, other: Any) -> int:
        """-1, 0 или 1."""
        return compare(self._value, self._operand(other))

    def eq(self, other: Any) -> bool:
        return self.cmp(other) == 0

    def gt(self, other: Any) -> bool:
        return self.cmp(other) > 0

    def gte(self, other: Any) -> bool:
        return self.cmp(other) > -1

    def lt(self, other: Any) -> bool:
        return self.cmp(other) < 0

    def lte(self, other: Any) -> bool:
        return self.cmp(other) < 1

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def abs(self) -> "Big":
        return self._new(self._value.magnitude())

    def neg(self) -> "Big":
        return self._new(self._value.negate())

    def plus(self, other: Any) -> "Big":
        return self._new(add(self._value, self._operand(other)))

    def minus(self, other: Any) -> "Big":
        return self._new(subtract(self._value, self._operand(other)))

    def times(self, other: Any) -> "Big":
        return self._new(multiply(self._value, self._operand(other)))

    def div(
        self,
        other: Any,
        decimal_places: Optional[int] = None,
        rounding_mode: Any = None,
    ) -> "Big":
        """
        Частное, округлённое до decimal_places знаков после запятой.

        Без аргументов используются decimal_places и rounding_mode движка.

        Raises:
            DivisionByZero: делитель равен нулю
            InvalidDecimalPlaces: decimal_places вне [0, max_decimal_places]
        """
        config = self._engine.config
        dp = config.decimal_places
        if decimal_places is not None:
            dp = formatting.check_decimal_places(decimal_places, config)
        mode = config.rounding_mode if rounding_mode is None else rounding_mode
        return self._new(divide(self._value, self._operand(other), dp, mode))

    def mod(self, other: Any) -> "Big":
        """Остаток усечённого деления (знак делимого)."""
        return self._new(modulo(self._value, self._operand(other)))

    def pow(self, n: int) -> "Big":
        """
        Целая степень.

        Для n < 0 результат округляется до decimal_places движка.

        Raises:
            InvalidExponent: n не int или |n| > max_power_magnitude
        """
        config = self._engine.config
        return self._new(
            power(
                self._value,
                n,
                config.max_power_magnitude,
                config.decimal_places,
                config.rounding_mode,
            )
        )

    def sqrt(self) -> "Big":
        """
        Квадратный корень, округлённый до decimal_places движка.

        Raises:
            NoSquareRoot: значение отрицательное
        """
        config = self._engine.config
        return self._new(square_root(self._value, config.decimal_places, config.rounding_mode))

    # -------------------------------------------------------------------------
    # Округление
    # -------------------------------------------------------------------------

    def round(self, decimal_places: Optional[int] = None, rounding_mode: Any = None) -> "Big":
        """
        Округление до decimal_places знаков после запятой (по умолчанию 0).

        Отрицательный decimal_places округляет до кратного 10^-decimal_places.

        Examples:
            >>> engine("123.456").round(-1).to_string()
            '120'
        """
        config = self._engine.config
        dp = 0
        if decimal_places is not None:
            dp = formatting.check_decimal_places(decimal_places, config, allow_negative=True)
        mode = config.rounding_mode if rounding_mode is None else rounding_mode
        return self._new(round_digits(self._value, dp + self._value.exponent + 1, mode))

    def prec(self, significant_digits: int, rounding_mode: Any = None) -> "Big":
        """
        Округление до significant_digits значащих цифр.

        Raises:
            InvalidPrecision: significant_digits вне [1, max_decimal_places]
        """
        config = self._engine.config
        sd = formatting.check_precision(significant_digits, config)
        mode = config.rounding_mode if rounding_mode is None else rounding_mode
        return self._new(round_digits(self._value, sd, mode))

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        return formatting.to_string(self._value, self._engine.config)

    def to_json(self) -> str:
        return formatting.to_string(self._value, self._engine.config)

    def value_of(self) -> str:
        return formatting.value_of(self._value, self._engine.config)

    def to_fixed(self, decimal_places: Optional[int] = None, rounding_mode: Any = None) -> str:
        return formatting.to_fixed(self._value, self._engine.config, decimal_places, rounding_mode)

    def to_exponential(self, decimal_places: Optional[int] = None, rounding_mode: Any = None) -> str:
        return formatting.to_exponential(
            self._value, self._engine.config, decimal_places, rounding_mode
        )

    def to_precision(self, significant_digits: Optional[int] = None, rounding_mode: Any = None) -> str:
        return formatting.to_precision(
            self._value, self._engine.config, significant_digits, rounding_mode
        )

    def to_number(self) -> float:
        return formatting.to_number(self._value, self._engine.config)

    # -------------------------------------------------------------------------
    # Протоколы Python
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Big('{self.to_string()}')"

    def __float__(self) -> float:
        return self.to_number()

    def __bool__(self) -> bool:
        return not self._value.is_zero

    def __hash__(self) -> int:
        value = self._value
        if value.is_zero:
            return hash((0, value.digits))
        return hash((value.sign, value.exponent, value.digits))

    # Равенство и порядок определены только между Big: hash не совместим с int/float
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Big):
            return NotImplemented
        return compare(self._value, other._value) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Big):
            return NotImplemented
        return compare(self._value, other._value) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Big):
            return NotImplemented
        return compare(self._value, other._value) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Big):
            return NotImplemented
        return compare(self._value, other._value) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Big):
            return NotImplemented
        return compare(self._value, other._value) >= 0

    def __neg__(self) -> "Big":
        return self.neg()

    def __pos__(self) -> "Big":
        return self

    def __abs__(self) -> "Big":
        return self.abs()

    def __add__(self, other: Any) -> "Big":
        if not isinstance(other, (Big, *_OPERAND_TYPES)):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other: Any) -> "Big":
        if not isinstance(other, _OPERAND_TYPES):
            return NotImplemented
        return self._engine.big(other).plus(self)

    def __sub__(self, other: Any) -> "Big":
        if not isinstance(other, (Big, *_OPERAND_TYPES)):
            return NotImplemented
        return self.minus(other)

    def __rsub__(self, other: Any) -> "Big":
        if not isinstance(other, _OPERAND_TYPES):
            return NotImplemented
        return self._engine.big(other).minus(self)

    def __mul__(self, other: Any) -> "Big":
        if not isinstance(other, (Big, *_OPERAND_TYPES)):
            return NotImplemented
        return self.times(other)

    def __rmul__(self, other: Any) -> "Big":
        if not isinstance(other, _OPERAND_TYPES):
            return NotImplemented
        return self._engine.big(other).times(self)

    def __truediv__(self, other: Any) -> "Big":
        if not isinstance(other, (Big, *_OPERAND_TYPES)):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: Any) -> "Big":
        if not isinstance(other, _OPERAND_TYPES):
            return NotImplemented
        return self._engine.big(other).div(self)

    def __mod__(self, other: Any) -> "Big":
        if not isinstance(other, (Big, *_OPERAND_TYPES)):
            return NotImplemented
        return self.mod(other)

    def __rmod__(self, other: Any) -> "Big":
        if not isinstance(other, _OPERAND_TYPES):
            return NotImplemented
        return self._engine.big(other).mod(self)

    def __pow__(self, n: Any) -> "Big":
        if not isinstance(n, int):
            return NotImplemented
        return self.pow(n)
