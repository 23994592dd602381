"""Ledger — взаиморасчёты по итогам матча.

Итоги переводятся в центы и гасятся жадно: крупнейший должник платит
крупнейшему кредитору, пока одна из сторон не закончится. Остаток меньше
цента (следствие дробных выплат 1/3, 2/3) отбрасывается.
"""

from dataclasses import dataclass
from typing import Iterable, Mapping, Union

from src.core.domain.roster import Roster
from src.settlement.engine import SettlementResult


@dataclass(frozen=True)
class Transfer:
    """Платёж одного игрока другому."""

    payer: str
    payee: str
    amount: float


def named_totals(result: SettlementResult, roster: Roster) -> list[tuple[str, float]]:
    """Итоги матча с именами игроков (в порядке ростера)."""
    return [
        (roster.names[slot].strip(), total)
        for slot, total in zip(result.active_slots, result.totals)
    ]


def build_transfers(
    totals: Union[Mapping[str, float], Iterable[tuple[str, float]]],
) -> list[Transfer]:
    """Минимальный набор платежей, закрывающий итоги матча.

    Args:
        totals: итог по игроку (положительный = выиграл)

    Returns:
        Список Transfer; суммы округлены до центов
    """
    items = totals.items() if isinstance(totals, Mapping) else totals
    cents = [(name, round(amount * 100)) for name, amount in items]

    creditors = sorted(
        ([name, c] for name, c in cents if c > 0), key=lambda x: x[1], reverse=True
    )
    debtors = sorted(
        ([name, -c] for name, c in cents if c < 0), key=lambda x: x[1], reverse=True
    )

    transfers: list[Transfer] = []
    ci = di = 0
    while ci < len(creditors) and di < len(debtors):
        creditor, debtor = creditors[ci], debtors[di]
        paid = min(creditor[1], debtor[1])
        transfers.append(Transfer(payer=debtor[0], payee=creditor[0], amount=paid / 100))

        creditor[1] -= paid
        debtor[1] -= paid
        if creditor[1] == 0:
            ci += 1
        if debtor[1] == 0:
            di += 1

    return transfers
