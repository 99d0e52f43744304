"""
Domain models and value objects.

Contains the normalized DecimalValue, BigConfig and the error taxonomy.
"""

from bigdec.core.domain.config import (
    MAX_DP_LIMIT,
    MAX_POWER_LIMIT,
    BigConfig,
    RoundingMode,
    coerce_rounding_mode,
)
from bigdec.core.domain.errors import (
    BigError,
    DivisionByZero,
    ImpreciseConversion,
    InvalidDecimalPlaces,
    InvalidExponent,
    InvalidNumber,
    InvalidPrecision,
    InvalidRoundingMode,
    NoSquareRoot,
    NumericCoercionDisallowed,
)
from bigdec.core.domain.value import (
    HALF,
    NEGATIVE_ZERO,
    ONE,
    ZERO,
    DecimalValue,
    from_digits,
    zero,
)

__all__ = [
    # Value
    "DecimalValue",
    "ZERO",
    "NEGATIVE_ZERO",
    "ONE",
    "HALF",
    "from_digits",
    "zero",
    # Config
    "BigConfig",
    "RoundingMode",
    "MAX_DP_LIMIT",
    "MAX_POWER_LIMIT",
    "coerce_rounding_mode",
    # Errors
    "BigError",
    "InvalidNumber",
    "InvalidDecimalPlaces",
    "InvalidPrecision",
    "InvalidRoundingMode",
    "InvalidExponent",
    "DivisionByZero",
    "NoSquareRoot",
    "ImpreciseConversion",
    "NumericCoercionDisallowed",
]
