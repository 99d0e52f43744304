"""
Тесты для модуля Arithmetic

Проверяет:
1. Точное сложение и вычитание (0.1 + 0.2 == 0.3)
2. Перенос и заём через разряды
3. Умножение в столбик
4. Знак нуля в результатах
"""

import pytest

from bigdec.core.domain.value import NEGATIVE_ZERO, ZERO, DecimalValue
from bigdec.core.math.arithmetic import add, multiply, subtract
from bigdec.core.text.parsing import parse_text


def _p(text: str) -> DecimalValue:
    return parse_text(text)


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


class TestAdd:
    """Тесты для add"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("0.1", "0.2", "0.3"),
            ("999", "1", "1000"),
            ("1.5", "2.25", "3.75"),
            ("-1.5", "-2.25", "-3.75"),
            ("5", "-3", "2"),
            ("-5", "3", "-2"),
            ("0", "7", "7"),
            ("7", "0", "7"),
            ("1e-3", "1e3", "1000.001"),
        ],
    )
    def test_add(self, a: str, b: str, expected: str) -> None:
        """Сумма точна"""
        assert add(_p(a), _p(b)) == _p(expected)

    def test_exact_for_distant_exponents(self) -> None:
        """1e10 + 1e-10 — все 21 цифра сохраняются"""
        result = add(_p("1e10"), _p("1e-10"))
        assert result == DecimalValue(1, 10, (1,) + (0,) * 19 + (1,))

    def test_opposites_give_positive_zero(self) -> None:
        """x + (-x) == +0"""
        assert add(_p("1"), _p("-1")) == ZERO
        assert add(_p("-1.25"), _p("1.25")) == ZERO

    def test_zero_signs(self) -> None:
        """-0 + -0 == -0, 0 + -0 == 0"""
        assert add(NEGATIVE_ZERO, NEGATIVE_ZERO) == NEGATIVE_ZERO
        assert add(ZERO, NEGATIVE_ZERO) == ZERO

    def test_operands_unchanged(self) -> None:
        """Операнды не изменяются"""
        a, b = _p("9.9"), _p("0.1")
        add(a, b)
        assert a == DecimalValue(1, 0, (9, 9))
        assert b == DecimalValue(1, -1, (1,))


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


class TestSubtract:
    """Тесты для subtract"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("1", "3", "-2"),
            ("1.5", "0.25", "1.25"),
            ("0.25", "1.5", "-1.25"),
            ("100", "0.001", "99.999"),
            ("1.1", "1.09", "0.01"),
            ("-3", "2", "-5"),
            ("3", "-2", "5"),
            ("0", "5", "-5"),
            ("5", "0", "5"),
            ("1000", "1", "999"),
        ],
    )
    def test_subtract(self, a: str, b: str, expected: str) -> None:
        """Разность точна"""
        assert subtract(_p(a), _p(b)) == _p(expected)

    def test_self_subtraction_is_positive_zero(self) -> None:
        """x - x == +0"""
        assert subtract(_p("5"), _p("5")) == ZERO
        assert subtract(_p("-5"), _p("-5")) == ZERO
        assert subtract(ZERO, ZERO) == ZERO

    def test_result_normalized(self) -> None:
        """Ведущие нули разности удаляются"""
        result = subtract(_p("1.001"), _p("1"))
        assert result == DecimalValue(1, -3, (1,))


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


class TestMultiply:
    """Тесты для multiply"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("12", "3", "36"),
            ("0.5", "0.5", "0.25"),
            ("-2", "3", "-6"),
            ("-2", "-3", "6"),
            ("99", "99", "9801"),
            ("1.25", "8", "10"),
            ("1e-5", "1e5", "1"),
            ("123456789", "987654321", "121932631112635269"),
        ],
    )
    def test_multiply(self, a: str, b: str, expected: str) -> None:
        """Произведение точно"""
        assert multiply(_p(a), _p(b)) == _p(expected)

    def test_zero_sign_is_xor(self) -> None:
        """Знак нулевого произведения — XOR знаков"""
        assert multiply(ZERO, _p("-5")) == NEGATIVE_ZERO
        assert multiply(NEGATIVE_ZERO, _p("-5")) == ZERO
        assert multiply(_p("5"), ZERO) == ZERO
