"""Settlement — расчёт ставок матча по лункам.

- partitioner: разбиение лунки на группы A/B и режим лунки
- stake: размер ставки и выплаты неравных команд
- engine: свёртка по лункам с переносом, матрица дельт и итоги
- ledger: взаиморасчёты по итогам
"""

from .engine import (
    HoleOutcome,
    HoleStatus,
    SettlementEngine,
    SettlementResult,
    compute_deltas,
    settle_hole,
)
from .ledger import Transfer, build_transfers, named_totals
from .partitioner import HoleMode, Partition, partition_hole
from .stake import Stake, stake_for, stake_multiplier, team_payouts

__all__ = [
    "HoleOutcome",
    "HoleStatus",
    "SettlementEngine",
    "SettlementResult",
    "compute_deltas",
    "settle_hole",
    "Transfer",
    "build_transfers",
    "named_totals",
    "HoleMode",
    "Partition",
    "partition_hole",
    "Stake",
    "stake_for",
    "stake_multiplier",
    "team_payouts",
]
