"""
Core math modules для bigdec

Алгоритмы над DecimalValue: сравнение, округление, арифметика,
деление в столбик, степени и квадратный корень.
"""

# Comparison
from bigdec.core.math.comparison import compare, compare_magnitude

# Rounding
from bigdec.core.math.rounding import round_buffer, round_digits

# Arithmetic
from bigdec.core.math.arithmetic import add, multiply, subtract

# Division
from bigdec.core.math.division import divide, modulo

# Powers
from bigdec.core.math.powers import SQRT_GUARD_DIGITS, power, square_root

__all__ = [
    # Comparison
    "compare",
    "compare_magnitude",
    # Rounding
    "round_buffer",
    "round_digits",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    # Division
    "divide",
    "modulo",
    # Powers — Constants
    "SQRT_GUARD_DIGITS",
    # Powers — Functions
    "power",
    "square_root",
]
