"""
Тесты для Numerical Safeguards — денежная арифметика

Проверяемые инварианты:
1. Округление до центов без "-0.0"
2. Zero-sum проверка с толерантностью, масштабированной по модулю дельт
3. NaN/Inf не попадают в денежные суммы
"""

import math

import pytest

from src.core.math import (
    ZERO_SUM_EPS,
    ZeroSumViolation,
    check_zero_sum,
    is_close,
    is_valid_float,
    is_zero,
    round_money,
    zero_sum_tolerance,
)


class TestFloatChecks:
    """Тесты is_valid_float / is_close / is_zero."""

    def test_is_valid_float(self):
        assert is_valid_float(1.5)
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))

    def test_is_close_fractional_payouts(self):
        """Дробные выплаты (2/3 × 3 = 2) сравниваются с толерантностью."""
        assert is_close((2 / 3) * 3, 2.0)
        assert not is_close(1.0, 1.01)

    def test_is_zero(self):
        assert is_zero(0.0)
        assert is_zero(1e-12)
        assert not is_zero(0.01)


class TestRoundMoney:
    """Тесты round_money."""

    def test_cents(self):
        assert round_money(0.6666666) == 0.67
        assert round_money(1.5) == 1.5
        assert round_money(-24.0) == -24.0

    def test_negative_zero_normalized(self):
        """-0.0 нормализуется в 0.0."""
        result = round_money(-1e-12)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0

    def test_nan_rejected(self):
        with pytest.raises(ValueError, match="NaN/Inf"):
            round_money(float("nan"))


class TestCheckZeroSum:
    """Тесты check_zero_sum."""

    def test_balanced_row(self):
        assert check_zero_sum([4.0, -2.0, -2.0]) == 0.0

    def test_fractional_row_within_eps(self):
        """Три проигравших по 2/3 против двух победителей по 1."""
        row = [1.0, 1.0, -2 / 3, -2 / 3, -2 / 3]
        assert abs(check_zero_sum(row)) <= ZERO_SUM_EPS

    def test_empty_row(self):
        assert check_zero_sum([]) == 0.0

    def test_violation(self):
        with pytest.raises(ZeroSumViolation):
            check_zero_sum([1.0, -0.5])

    def test_custom_eps(self):
        check_zero_sum([1.0, -0.99], eps=0.1)
        with pytest.raises(ZeroSumViolation):
            check_zero_sum([1.0, -0.99], eps=1e-3)

    def test_tolerance_scales_with_magnitude(self):
        """Крупные выплаты: допуск растёт вместе с модулем дельт."""
        wager = 12345678901.3
        row = [1.5 * wager, 1.5 * wager, -wager, -wager, -wager]
        assert zero_sum_tolerance(row) == pytest.approx(ZERO_SUM_EPS * 1.5 * wager)
        check_zero_sum(row)

    def test_tolerance_floor_for_small_amounts(self):
        assert zero_sum_tolerance([0.25, -0.25]) == ZERO_SUM_EPS
        assert zero_sum_tolerance([]) == ZERO_SUM_EPS

    def test_relative_violation_still_detected(self):
        with pytest.raises(ZeroSumViolation):
            check_zero_sum([2e10, -1.99e10])

    def test_non_finite_rejected(self):
        with pytest.raises(ZeroSumViolation):
            check_zero_sum([float("inf"), -float("inf")])
        with pytest.raises(ZeroSumViolation):
            check_zero_sum([float("nan"), 0.0])
