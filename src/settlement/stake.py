"""
Stake Calculator — размер ставки на решённой лунке

ФОРМУЛЫ:
    units = 1 + (carry если carry_over иначе 0)
    stake = unit_wager × units × multiplier(winning_best, par)

    multiplier:
        3 если triple_on_two_below_par и winning_best <= par - 2
        2 если double_on_one_below_par и winning_best == par - 1
        1 иначе

Множитель определяется ТОЛЬКО лучшим результатом победившей стороны.
Результаты проигравших на множитель не влияют.

Выплаты команд (W победителей, L проигравших):
    per_winner_gain = stake            если W >= L, иначе stake × L / W
    per_loser_loss  = stake × W / L    если W > L,  иначе stake
    per_winner_gain × W == per_loser_loss × L  (zero-sum)

    double_on_minority_win и W == 1, L >= 2 → обе величины × 2
"""

from typing import Final, NamedTuple

from src.core.domain.settings import WagerSettings


# =============================================================================
# МНОЖИТЕЛИ
# =============================================================================

# Результат на 1 удар лучше par (birdie)
DOUBLE_MULTIPLIER: Final[int] = 2

# Результат на 2+ удара лучше par (eagle и лучше)
TRIPLE_MULTIPLIER: Final[int] = 3

# Одиночка обыграл команду из 2+ игроков
MINORITY_WIN_MULTIPLIER: Final[int] = 2


# =============================================================================
# STAKE
# =============================================================================


def stake_multiplier(winning_best: int, par: int, settings: WagerSettings) -> int:
    """
    Множитель ставки по результату победителей относительно par.

    Тройной множитель имеет приоритет над двойным.

    Examples:
        >>> s = WagerSettings(carry_over=False, double_on_one_below_par=True,
        ...                   triple_on_two_below_par=True, double_on_minority_win=False)
        >>> stake_multiplier(3, 4, s)
        2
        >>> stake_multiplier(2, 4, s)
        3
        >>> stake_multiplier(4, 4, s)
        1
    """
    relative = winning_best - par

    if settings.triple_on_two_below_par and relative <= -2:
        return TRIPLE_MULTIPLIER
    if settings.double_on_one_below_par and relative == -1:
        return DOUBLE_MULTIPLIER
    return 1


def carry_units(carry: int, settings: WagerSettings) -> int:
    """Количество базовых ставок с учётом переноса."""
    return 1 + (carry if settings.carry_over else 0)


class Stake(NamedTuple):
    """Ставка решённой лунки и применённый множитель."""

    amount: float
    multiplier: int


def stake_for(winning_best: int, par: int, carry: int, settings: WagerSettings) -> Stake:
    """
    Ставка за решённую лунку.

    Множитель считается один раз и возвращается вместе с суммой.

    Args:
        winning_best: лучший результат победившей стороны
        par: par лунки
        carry: текущий счётчик переноса
        settings: настройки матча

    Returns:
        Stake: amount (сумма, которую платит каждый проигравший, до коррекции
        неравных команд) и multiplier
    """
    multiplier = stake_multiplier(winning_best, par, settings)
    return Stake(
        amount=settings.unit_wager * carry_units(carry, settings) * multiplier,
        multiplier=multiplier,
    )


# =============================================================================
# TEAM PAYOUTS
# =============================================================================


class TeamPayout(NamedTuple):
    """Выплаты одного игрока каждой из сторон командной лунки."""

    per_winner_gain: float
    per_loser_loss: float
    minority_doubled: bool


def team_payouts(
    stake: float,
    n_winners: int,
    n_losers: int,
    settings: WagerSettings,
) -> TeamPayout:
    """
    Выплаты при неравных командах.

    Меньшая сторона платит/получает полную ставку, большая делит
    пропорционально, чтобы суммарный выигрыш равнялся суммарному проигрышу.

    Raises:
        ValueError: Если одна из сторон пуста

    Examples:
        >>> s = WagerSettings(carry_over=False, double_on_one_below_par=False,
        ...                   triple_on_two_below_par=False, double_on_minority_win=False)
        >>> team_payouts(1.0, 2, 3, s)
        TeamPayout(per_winner_gain=1.5, per_loser_loss=1.0, minority_doubled=False)
    """
    if n_winners < 1 or n_losers < 1:
        raise ValueError(
            f"Both sides must be non-empty: winners={n_winners}, losers={n_losers}"
        )

    if n_winners >= n_losers:
        per_winner_gain = stake
    else:
        per_winner_gain = stake * (n_losers / n_winners)

    if n_winners > n_losers:
        per_loser_loss = stake * (n_winners / n_losers)
    else:
        per_loser_loss = stake

    minority_doubled = settings.double_on_minority_win and n_winners == 1 and n_losers >= 2
    if minority_doubled:
        per_winner_gain *= MINORITY_WIN_MULTIPLIER
        per_loser_loss *= MINORITY_WIN_MULTIPLIER

    return TeamPayout(per_winner_gain, per_loser_loss, minority_doubled)
