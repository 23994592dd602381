"""
Numerical Safeguards — денежная арифметика расчёта ставок

Модуль обеспечивает численную устойчивость расчётов выплат:
- Epsilon-сравнения float (выплаты при неравных командах дробные: 1.5, 0.666...)
- Округление денежных сумм до центов с нормализацией -0.0
- Проверка zero-sum инварианта с допуском, масштабированным по величине сумм

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сумма дельт любой рассчитанной лунки равна 0 (в пределах zero_sum_tolerance)
2. Сумма итогов по всем игрокам равна 0 (в пределах zero_sum_tolerance)
3. NaN/Inf никогда не попадают в денежные суммы
"""

import math
from typing import Final, Iterable

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность zero-sum проверки (сумма строки дельт / сумма итогов)
ZERO_SUM_EPS: Final[float] = 1e-6

# Абсолютная толерантность для сравнения денежных сумм
EPS_MONEY_COMPARE_ABS: Final[float] = 1e-9

# Количество знаков после запятой для отображения денежных сумм
MONEY_DECIMALS: Final[int] = 2


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ZeroSumViolation(ArithmeticError):
    """
    Нарушение zero-sum инварианта: выигрыши не равны проигрышам.

    Вызывается только при ошибке в формулах выплат, а не из-за входных данных.
    """


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_close(
    a: float,
    b: float,
    abs_tol: float = EPS_MONEY_COMPARE_ABS,
) -> bool:
    """
    Сравнение денежных сумм с абсолютной толерантностью.

    Examples:
        >>> is_close(1.5, 1.5 + 1e-12)
        True
        >>> is_close(1.0, 1.01)
        False
    """
    return math.isclose(a, b, rel_tol=0.0, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_MONEY_COMPARE_ABS) -> bool:
    """True если abs(value) <= tol."""
    return abs(value) <= tol


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_money(value: float, decimals: int = MONEY_DECIMALS) -> float:
    """
    Округление денежной суммы до центов.

    Результат -0.0 нормализуется в 0.0, чтобы итоги не печатались как "-0.00".

    Args:
        value: Сумма
        decimals: Количество знаков после запятой (default: MONEY_DECIMALS)

    Returns:
        Округлённая сумма

    Raises:
        ValueError: Если value содержит NaN/Inf

    Examples:
        >>> round_money(0.6666666)
        0.67
        >>> round_money(-1e-12)
        0.0
    """
    if not is_valid_float(value):
        raise ValueError(f"Money amount contains NaN/Inf: {value}")

    rounded = round(value, decimals)
    if rounded == 0.0:
        return 0.0
    return rounded


# =============================================================================
# ZERO-SUM
# =============================================================================


def zero_sum_tolerance(values: Iterable[float], eps: float = ZERO_SUM_EPS) -> float:
    """
    Допуск zero-sum проверки, масштабированный по величине сумм.

    Ошибка округления float пропорциональна модулю слагаемых, поэтому
    при крупной ставке абсолютный eps заменяется на eps × max(1, max|v|).

    Examples:
        >>> zero_sum_tolerance([1.0, -1.0])
        1e-06
        >>> zero_sum_tolerance([2e10, -2e10])
        20000.0
    """
    return eps * max(1.0, max((abs(v) for v in values), default=0.0))


def check_zero_sum(values: Iterable[float], eps: float = ZERO_SUM_EPS) -> float:
    """
    Проверка zero-sum инварианта.

    Сумма считается через math.fsum, чтобы дробные выплаты (2/3, 3/2)
    не накапливали ошибку округления. Допуск масштабируется по величине
    дельт (zero_sum_tolerance).

    Args:
        values: Денежные дельты (строка лунки или вектор итогов)
        eps: Относительный допуск суммы (для сумм < 1 — абсолютный)

    Returns:
        Фактическая сумма (для диагностики)

    Raises:
        ZeroSumViolation: Если сумма выходит за допуск или есть NaN/Inf
    """
    values = list(values)
    if not all(is_valid_float(v) for v in values):
        raise ZeroSumViolation(f"Zero-sum check on NaN/Inf values: {values}")

    total = math.fsum(values)
    tolerance = zero_sum_tolerance(values, eps)
    if abs(total) > tolerance:
        raise ZeroSumViolation(
            f"Zero-sum violated: sum={total:.12f} exceeds tolerance={tolerance:.1e}"
        )
    return total
