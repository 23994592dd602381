"""Round Partitioner — разбиение активных игроков лунки на группы.

Классификация лунки (в порядке приоритета):
1. INDIVIDUAL: заполнена ровно одна из групп A/B → каждый сам за себя
2. TEAM: заполнены обе группы → команда против команды
3. DEGENERATE: обе группы пусты (все SIT) → нет расчёта, перенос не меняется

Чистая функция от лунки и списка активных слотов.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from src.core.domain.hole import Hole, Pick


class HoleMode(str, Enum):
    """Режим расчёта лунки."""

    INDIVIDUAL = "INDIVIDUAL"
    TEAM = "TEAM"
    DEGENERATE = "DEGENERATE"


@dataclass(frozen=True)
class Partition:
    """Результат разбиения лунки. Индексы — active indices."""

    group_a: tuple[int, ...]
    group_b: tuple[int, ...]
    mode: HoleMode

    @property
    def participants(self) -> tuple[int, ...]:
        """Все игроки, участвующие в лунке (SIT не входят)."""
        return self.group_a + self.group_b


def classify(group_a: Sequence[int], group_b: Sequence[int]) -> HoleMode:
    """Режим лунки по размерам групп."""
    if group_a and group_b:
        return HoleMode.TEAM
    if group_a or group_b:
        return HoleMode.INDIVIDUAL
    return HoleMode.DEGENERATE


def partition_hole(hole: Hole, active_slots: Sequence[int]) -> Partition:
    """Разбиение активных игроков лунки на группы A и B.

    Args:
        hole: лунка (picks индексируются слотами ростера)
        active_slots: слоты активных игроков; позиция в списке = active index

    Returns:
        Partition с упорядоченными active indices групп и режимом лунки
    """
    group_a: list[int] = []
    group_b: list[int] = []

    for active, slot in enumerate(active_slots):
        pick = hole.pick_for(slot)
        if pick == Pick.A:
            group_a.append(active)
        elif pick == Pick.B:
            group_b.append(active)

    return Partition(
        group_a=tuple(group_a),
        group_b=tuple(group_b),
        mode=classify(group_a, group_b),
    )


def active_scores(hole: Hole, active_slots: Sequence[int]) -> tuple[Optional[int], ...]:
    """Результаты лунки, переиндексированные по active index."""
    return tuple(hole.score_for(slot) for slot in active_slots)
