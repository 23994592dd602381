"""Settlement Engine — расчёт дельт по лункам и итогов матча.

Движок: левая свёртка по лункам в порядке игры. Единственный аккумулятор
между лунками: счётчик переноса (carry):
- ничья (TIE) → carry + 1 (если carry_over), дельты нулевые
- нет результатов (VOID) → дельты нулевые, carry не меняется
- все SIT (DEGENERATE) → дельты нулевые, carry не меняется
- решённая лунка (SETTLED) → выплаты, carry = 0

Каждый вызов пересчитывает матч с первой лунки; скрытого состояния между
вызовами нет. На данных лунок исключений не бросает.
"""

import itertools
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

from src.core.domain.hole import Hole
from src.core.domain.match import Match
from src.core.domain.roster import Roster
from src.core.domain.settings import WagerSettings
from src.core.math.numerical_safeguards import (
    ZERO_SUM_EPS,
    check_zero_sum,
    zero_sum_tolerance,
)
from src.settlement.partitioner import (
    HoleMode,
    Partition,
    active_scores,
    partition_hole,
)
from src.settlement.stake import stake_for, team_payouts


logger = logging.getLogger(__name__)


# =============================================================================
# RESULTS
# =============================================================================


class HoleStatus(str, Enum):
    """Итог лунки."""

    SETTLED = "SETTLED"
    TIE = "TIE"
    VOID = "VOID"
    DEGENERATE = "DEGENERATE"


@dataclass(frozen=True)
class HoleOutcome:
    """Результат расчёта одной лунки."""

    hole_index: int
    mode: HoleMode
    status: HoleStatus
    deltas: tuple[float, ...]

    # Перенос
    carry_before: int
    carry_after: int

    # Решённая лунка
    winners: tuple[int, ...] = ()
    losers: tuple[int, ...] = ()
    winning_best: Optional[int] = None
    stake: float = 0.0
    multiplier: int = 1
    minority_doubled: bool = False

    # Для отладки
    details: str = ""


@dataclass(frozen=True)
class SettlementResult:
    """Результат пересчёта матча.

    deltas[hole][active]: дельта игрока на лунке, totals[active]: итог.
    active_slots[active]: слот ростера для столбца.
    """

    deltas: tuple[tuple[float, ...], ...]
    totals: tuple[float, ...]
    active_slots: tuple[int, ...]
    outcomes: tuple[HoleOutcome, ...]
    final_carry: int

    def slot_totals(self) -> dict[int, float]:
        """Итоги по слотам ростера."""
        return dict(zip(self.active_slots, self.totals))

    def is_balanced(self, eps: float = ZERO_SUM_EPS) -> bool:
        """True если сумма итогов равна 0 в пределах допуска.

        Допуск масштабируется по наибольшей дельте матча (zero_sum_tolerance).
        """
        magnitudes = itertools.chain(self.totals, *self.deltas)
        return abs(math.fsum(self.totals)) <= zero_sum_tolerance(magnitudes, eps)


# =============================================================================
# ONE HOLE
# =============================================================================


def _outcome(
    hole_index: int,
    mode: HoleMode,
    status: HoleStatus,
    n_active: int,
    carry_before: int,
    carry_after: int,
    details: str,
) -> HoleOutcome:
    return HoleOutcome(
        hole_index=hole_index,
        mode=mode,
        status=status,
        deltas=(0.0,) * n_active,
        carry_before=carry_before,
        carry_after=carry_after,
        details=details,
    )


def _tie_carry(carry: int, settings: WagerSettings) -> int:
    return carry + 1 if settings.carry_over else carry


def _settle_individual(
    hole_index: int,
    hole: Hole,
    partition: Partition,
    scores: Sequence[Optional[int]],
    carry: int,
    settings: WagerSettings,
) -> HoleOutcome:
    n_active = len(scores)
    participants = partition.participants
    scored = [scores[aj] for aj in participants if scores[aj] is not None]

    if not scored:
        return _outcome(
            hole_index, partition.mode, HoleStatus.VOID, n_active, carry, carry,
            details="No scores recorded",
        )

    best = min(scored)
    best_list = [aj for aj in participants if scores[aj] == best]

    if len(best_list) != 1:
        carry_after = _tie_carry(carry, settings)
        return _outcome(
            hole_index, partition.mode, HoleStatus.TIE, n_active, carry, carry_after,
            details=f"{len(best_list)} players tied at {best}",
        )

    winner = best_list[0]
    # Игроки группы без результата тоже проигрывают
    losers = tuple(aj for aj in participants if aj != winner)
    quote = stake_for(best, hole.par, carry, settings)
    stake = quote.amount

    row = [0.0] * n_active
    for aj in losers:
        row[aj] -= stake
    row[winner] += stake * len(losers)

    return HoleOutcome(
        hole_index=hole_index,
        mode=partition.mode,
        status=HoleStatus.SETTLED,
        deltas=tuple(row),
        carry_before=carry,
        carry_after=0,
        winners=(winner,),
        losers=losers,
        winning_best=best,
        stake=stake,
        multiplier=quote.multiplier,
        details=f"Player {winner} wins with {best} (par {hole.par}), stake={stake}",
    )


def _group_best(group: Sequence[int], scores: Sequence[Optional[int]]) -> Optional[int]:
    recorded = [scores[aj] for aj in group if scores[aj] is not None]
    return min(recorded) if recorded else None


def _settle_team(
    hole_index: int,
    hole: Hole,
    partition: Partition,
    scores: Sequence[Optional[int]],
    carry: int,
    settings: WagerSettings,
) -> HoleOutcome:
    n_active = len(scores)
    best_a = _group_best(partition.group_a, scores)
    best_b = _group_best(partition.group_b, scores)

    if best_a is None or best_b is None:
        return _outcome(
            hole_index, partition.mode, HoleStatus.VOID, n_active, carry, carry,
            details=f"Missing team scores: A={best_a}, B={best_b}",
        )

    if best_a == best_b:
        carry_after = _tie_carry(carry, settings)
        return _outcome(
            hole_index, partition.mode, HoleStatus.TIE, n_active, carry, carry_after,
            details=f"Teams tied at {best_a}",
        )

    if best_a < best_b:
        winners, losers, winning_best = partition.group_a, partition.group_b, best_a
    else:
        winners, losers, winning_best = partition.group_b, partition.group_a, best_b

    quote = stake_for(winning_best, hole.par, carry, settings)
    stake = quote.amount
    payout = team_payouts(stake, len(winners), len(losers), settings)

    row = [0.0] * n_active
    for aj in winners:
        row[aj] += payout.per_winner_gain
    for aj in losers:
        row[aj] -= payout.per_loser_loss

    return HoleOutcome(
        hole_index=hole_index,
        mode=partition.mode,
        status=HoleStatus.SETTLED,
        deltas=tuple(row),
        carry_before=carry,
        carry_after=0,
        winners=winners,
        losers=losers,
        winning_best=winning_best,
        stake=stake,
        multiplier=quote.multiplier,
        minority_doubled=payout.minority_doubled,
        details=(
            f"{len(winners)}v{len(losers)} won with {winning_best} (par {hole.par}), "
            f"gain={payout.per_winner_gain}, loss={payout.per_loser_loss}"
        ),
    )


def settle_hole(
    hole: Hole,
    active_slots: Sequence[int],
    carry: int,
    settings: WagerSettings,
    hole_index: int = 0,
) -> HoleOutcome:
    """Расчёт одной лунки (один шаг свёртки).

    Args:
        hole: лунка
        active_slots: слоты активных игроков (позиция = active index)
        carry: счётчик переноса до лунки
        settings: настройки матча
        hole_index: номер лунки (для диагностики)

    Returns:
        HoleOutcome со строкой дельт и новым значением переноса
    """
    partition = partition_hole(hole, active_slots)
    scores = active_scores(hole, active_slots)

    if partition.mode == HoleMode.INDIVIDUAL:
        outcome = _settle_individual(hole_index, hole, partition, scores, carry, settings)
    elif partition.mode == HoleMode.TEAM:
        outcome = _settle_team(hole_index, hole, partition, scores, carry, settings)
    else:
        outcome = _outcome(
            hole_index, partition.mode, HoleStatus.DEGENERATE, len(scores), carry, carry,
            details="No players assigned",
        )

    if outcome.status == HoleStatus.SETTLED:
        check_zero_sum(outcome.deltas)

    return outcome


# =============================================================================
# MATCH
# =============================================================================


def compute_deltas(
    holes: Sequence[Hole],
    settings: WagerSettings,
    players: Union[Roster, Sequence[str]],
) -> SettlementResult:
    """Полный пересчёт матча с первой лунки.

    Args:
        holes: лунки в порядке игры
        settings: настройки матча
        players: ростер или имена по слотам

    Returns:
        SettlementResult: матрица дельт [hole][active], итоги, исходы лунок
    """
    roster = players if isinstance(players, Roster) else Roster(names=players)
    active_slots = roster.active_slots()

    outcomes: list[HoleOutcome] = []
    carry = 0
    for hole_index, hole in enumerate(holes):
        outcome = settle_hole(hole, active_slots, carry, settings, hole_index)
        logger.debug(
            "hole=%d mode=%s status=%s stake=%s carry %d -> %d",
            hole_index + 1,
            outcome.mode.value,
            outcome.status.value,
            outcome.stake,
            outcome.carry_before,
            outcome.carry_after,
        )
        outcomes.append(outcome)
        carry = outcome.carry_after

    deltas = tuple(outcome.deltas for outcome in outcomes)
    totals = tuple(
        math.fsum(row[aj] for row in deltas) for aj in range(len(active_slots))
    )

    return SettlementResult(
        deltas=deltas,
        totals=totals,
        active_slots=active_slots,
        outcomes=tuple(outcomes),
        final_carry=carry,
    )


class SettlementEngine:
    """Движок расчёта матча.

    Stateless: каждый вызов settle() делает полный пересчёт снапшота матча.
    """

    def settle(self, match: Match) -> SettlementResult:
        """Пересчёт матча.

        Args:
            match: снапшот матча

        Returns:
            SettlementResult
        """
        return compute_deltas(match.holes, match.settings, match.roster)
