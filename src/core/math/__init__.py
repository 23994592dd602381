"""
Core math modules

Денежная арифметика и zero-sum проверки расчёта ставок.
"""

from src.core.math.numerical_safeguards import (
    EPS_MONEY_COMPARE_ABS,
    MONEY_DECIMALS,
    ZERO_SUM_EPS,
    ZeroSumViolation,
    check_zero_sum,
    zero_sum_tolerance,
    is_close,
    is_valid_float,
    is_zero,
    round_money,
)

__all__ = [
    # Constants
    "EPS_MONEY_COMPARE_ABS",
    "MONEY_DECIMALS",
    "ZERO_SUM_EPS",
    # Exceptions
    "ZeroSumViolation",
    # Functions
    "check_zero_sum",
    "zero_sum_tolerance",
    "is_close",
    "is_valid_float",
    "is_zero",
    "round_money",
]
