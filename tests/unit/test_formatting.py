"""
Тесты для модуля Formatting

Проверяет:
1. stringify: фиксированная и экспоненциальная нотации
2. Пороги экспоненциальной нотации для to_string
3. to_fixed / to_exponential / to_precision с округлением и дополнением нулями
4. Знак нуля и value_of
5. to_number и strict-режим
"""

import math

import pytest

from bigdec.core.domain.config import BigConfig, RoundingMode
from bigdec.core.domain.errors import (
    ImpreciseConversion,
    InvalidDecimalPlaces,
    InvalidPrecision,
    InvalidRoundingMode,
    NumericCoercionDisallowed,
)
from bigdec.core.text.formatting import (
    stringify,
    to_exponential,
    to_fixed,
    to_number,
    to_precision,
    to_string,
    value_of,
)
from bigdec.core.text.parsing import parse_text

DEFAULT = BigConfig()
STRICT = BigConfig(strict=True)


# =============================================================================
# STRINGIFY
# =============================================================================


class TestStringify:
    """Тесты для stringify"""

    @pytest.mark.parametrize(
        "sign, exponent, digits, exponential, expected",
        [
            (1, 2, (1, 2, 3, 4, 5), True, "1.2345e+2"),
            (1, -4, (1, 2, 3), True, "1.23e-4"),
            (1, 0, (7,), True, "7e+0"),
            (1, 2, (1, 2, 3, 4, 5), False, "123.45"),
            (1, -4, (1, 2, 3), False, "0.000123"),
            (1, 3, (1, 2), False, "1200"),
            (1, 0, (1, 5), False, "1.5"),
            (1, 1, (1, 0, 0), False, "10.0"),
            (-1, 0, (0, 0, 0), False, "-0.00"),
        ],
    )
    def test_notation(self, sign, exponent, digits, exponential, expected) -> None:
        assert stringify(sign, exponent, digits, exponential, True) == expected

    def test_unsigned(self) -> None:
        """signed=False подавляет минус"""
        assert stringify(-1, 0, (5,), False, False) == "5"


# =============================================================================
# TO_STRING / VALUE_OF
# =============================================================================


class TestToString:
    """Тесты для to_string и value_of"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1e21", "1e+21"),
            ("1e20", "100000000000000000000"),
            ("1e-7", "1e-7"),
            ("1e-6", "0.000001"),
            ("123.456", "123.456"),
            ("-1.5e-10", "-1.5e-10"),
            ("1.5e+25", "1.5e+25"),
            ("-0", "0"),
            ("0.000", "0"),
        ],
    )
    def test_default_thresholds(self, text: str, expected: str) -> None:
        """Пороги по умолчанию: -7 и 21"""
        assert to_string(parse_text(text), DEFAULT) == expected

    def test_custom_thresholds(self) -> None:
        """Пороги 0 и 0 — всегда экспоненциальная нотация"""
        config = BigConfig(negative_exponent_threshold=0, positive_exponent_threshold=0)
        assert to_string(parse_text("0.5"), config) == "5e-1"
        assert to_string(parse_text("5"), config) == "5e+0"
        assert to_string(parse_text("12.5"), config) == "1.25e+1"

    def test_value_of_keeps_negative_zero(self) -> None:
        """value_of выводит знак нуля"""
        assert value_of(parse_text("-0"), DEFAULT) == "-0"
        assert value_of(parse_text("-1.5"), DEFAULT) == "-1.5"

    def test_value_of_strict(self) -> None:
        """value_of запрещён в strict-режиме"""
        with pytest.raises(NumericCoercionDisallowed):
            value_of(parse_text("1"), STRICT)


# =============================================================================
# TO_FIXED
# =============================================================================


class TestToFixed:
    """Тесты для to_fixed"""

    @pytest.mark.parametrize(
        "text, dp, mode, expected",
        [
            ("1.005", 2, RoundingMode.HALF_EVEN, "1.00"),
            ("1.005", 2, RoundingMode.HALF_UP, "1.01"),
            ("45.6", 0, RoundingMode.HALF_UP, "46"),
            ("45.6", 3, RoundingMode.HALF_UP, "45.600"),
            ("0.0001", 2, RoundingMode.HALF_UP, "0.00"),
            ("-0.0001", 2, RoundingMode.HALF_UP, "-0.00"),
            ("-0.1", 0, RoundingMode.HALF_UP, "-0"),
            ("-0", 1, RoundingMode.HALF_UP, "0.0"),
            ("9.99", 1, RoundingMode.HALF_UP, "10.0"),
            ("1e21", 2, RoundingMode.HALF_UP, "1000000000000000000000.00"),
            ("0.5", 0, RoundingMode.HALF_EVEN, "0"),
            ("1.5", 0, RoundingMode.HALF_EVEN, "2"),
        ],
    )
    def test_to_fixed(self, text: str, dp: int, mode: RoundingMode, expected: str) -> None:
        assert to_fixed(parse_text(text), DEFAULT, dp, mode) == expected

    def test_without_decimal_places(self) -> None:
        """Без dp — фиксированная нотация без округления"""
        assert to_fixed(parse_text("1e21"), DEFAULT) == "1000000000000000000000"
        assert to_fixed(parse_text("1e-7"), DEFAULT) == "0.0000001"

    def test_default_rounding_mode_from_config(self) -> None:
        """Режим по умолчанию берётся из конфигурации"""
        config = BigConfig(rounding_mode=RoundingMode.DOWN)
        assert to_fixed(parse_text("1.99"), config, 1) == "1.9"

    @pytest.mark.parametrize("dp", [-1, 1.5, True, "2", 1_000_001])
    def test_invalid_decimal_places(self, dp) -> None:
        with pytest.raises(InvalidDecimalPlaces, match="Invalid decimal places"):
            to_fixed(parse_text("1"), DEFAULT, dp)

    def test_max_decimal_places_respected(self) -> None:
        """dp ограничен max_decimal_places"""
        config = BigConfig(max_decimal_places=5, decimal_places=5)
        assert to_fixed(parse_text("1"), config, 5) == "1.00000"
        with pytest.raises(InvalidDecimalPlaces):
            to_fixed(parse_text("1"), config, 6)

    def test_invalid_rounding_mode(self) -> None:
        with pytest.raises(InvalidRoundingMode):
            to_fixed(parse_text("1.5"), DEFAULT, 0, 7)


# =============================================================================
# TO_EXPONENTIAL
# =============================================================================


class TestToExponential:
    """Тесты для to_exponential"""

    @pytest.mark.parametrize(
        "text, dp, expected",
        [
            ("45.6", None, "4.56e+1"),
            ("45.6", 0, "5e+1"),
            ("45.6", 3, "4.560e+1"),
            ("0", 2, "0.00e+0"),
            ("-0.000123", 1, "-1.2e-4"),
            ("9.99", 1, "1.0e+1"),
        ],
    )
    def test_to_exponential(self, text: str, dp, expected: str) -> None:
        assert to_exponential(parse_text(text), DEFAULT, dp) == expected

    def test_invalid_decimal_places(self) -> None:
        with pytest.raises(InvalidDecimalPlaces):
            to_exponential(parse_text("1"), DEFAULT, -1)


# =============================================================================
# TO_PRECISION
# =============================================================================


class TestToPrecision:
    """Тесты для to_precision"""

    @pytest.mark.parametrize(
        "text, sd, expected",
        [
            ("45.6", None, "45.6"),
            ("45.6", 1, "5e+1"),
            ("45.6", 2, "46"),
            ("45.6", 5, "45.600"),
            ("0.000123", 2, "0.00012"),
            ("1e21", 3, "1.00e+21"),
            ("123456", 3, "1.23e+5"),
            ("1e-7", 2, "1.0e-7"),
        ],
    )
    def test_to_precision(self, text: str, sd, expected: str) -> None:
        assert to_precision(parse_text(text), DEFAULT, sd) == expected

    @pytest.mark.parametrize("sd", [0, -1, 1.5, 1_000_001])
    def test_invalid_precision(self, sd) -> None:
        with pytest.raises(InvalidPrecision, match="Invalid precision"):
            to_precision(parse_text("1"), DEFAULT, sd)


# =============================================================================
# TO_NUMBER
# =============================================================================


class TestToNumber:
    """Тесты для to_number"""

    def test_simple(self) -> None:
        assert to_number(parse_text("0.1"), DEFAULT) == 0.1
        assert to_number(parse_text("-1.5e-10"), DEFAULT) == -1.5e-10

    def test_negative_zero(self) -> None:
        """-0 → -0.0"""
        number = to_number(parse_text("-0"), DEFAULT)
        assert number == 0.0
        assert math.copysign(1.0, number) == -1.0

    def test_overflow_non_strict(self) -> None:
        """Без strict переполнение даёт inf"""
        assert math.isinf(to_number(parse_text("1e400"), DEFAULT))

    def test_strict_exact(self) -> None:
        """strict: точно представимое значение проходит"""
        assert to_number(parse_text("0.1"), STRICT) == 0.1

    @pytest.mark.parametrize("text", ["0.10000000000000000001", "1e400", "123456789012345678901"])
    def test_strict_imprecise(self, text: str) -> None:
        """strict: потеря точности → ImpreciseConversion"""
        with pytest.raises(ImpreciseConversion):
            to_number(parse_text(text), STRICT)
