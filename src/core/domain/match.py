"""
Match — Снапшот матча для пересчёта

Immutable Pydantic модель: ростер + настройки + упорядоченный список лунок.
Вызывающая сторона меняет лунки между пересчётами, создавая новые экземпляры
(with_hole / with_pars); движок получает снапшот и ничего в нём не меняет.
"""

import math
from typing import Any, Final, Optional, Sequence

from pydantic import BaseModel, Field

from .hole import DEFAULT_PAR, MIN_PAR, Hole, Pick
from .roster import MAX_PLAYERS, Roster
from .settings import DEFAULT_SETTINGS, WagerSettings


# Количество лунок в стандартном раунде
HOLES_PER_ROUND: Final[int] = 18


def _course_par(raw: Any) -> int:
    # Числа (не bool) ограничиваются снизу MIN_PAR, остальное → DEFAULT_PAR
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return DEFAULT_PAR
    try:
        finite = math.isfinite(raw)
    except OverflowError:
        return DEFAULT_PAR
    return max(MIN_PAR, int(raw)) if finite else DEFAULT_PAR


class Match(BaseModel):
    """Матч: всё, что нужно движку для полного пересчёта."""

    roster: Roster = Field(default_factory=Roster, description="Ростер")
    settings: WagerSettings = Field(..., description="Настройки ставки")
    holes: tuple[Hole, ...] = Field(default=(), description="Лунки в порядке игры")

    model_config = {"frozen": True}

    @classmethod
    def new(
        cls,
        names: Sequence[str],
        settings: Optional[WagerSettings] = None,
        holes: int = HOLES_PER_ROUND,
    ) -> "Match":
        """
        Новый матч: par 4 на каждой лунке, все игроки SIT, результатов нет.

        Args:
            names: Имена по слотам (пустое имя = свободный слот)
            settings: Настройки ставки (default: DEFAULT_SETTINGS)
            holes: Количество лунок

        Returns:
            Новый Match
        """
        blank = Hole(
            par=DEFAULT_PAR,
            picks=(Pick.SIT,) * MAX_PLAYERS,
            scores=(None,) * MAX_PLAYERS,
        )
        return cls(
            roster=Roster(names=tuple(names)),
            settings=settings or DEFAULT_SETTINGS,
            holes=(blank,) * holes,
        )

    def with_pars(self, pars: Sequence[Any]) -> "Match":
        """
        Применение списка par (шаблон поля) к лункам матча.

        Лунки за концом списка получают DEFAULT_PAR. Команды и результаты
        не меняются.
        """
        holes = tuple(
            hole.model_copy(
                update={"par": _course_par(pars[i]) if i < len(pars) else DEFAULT_PAR}
            )
            for i, hole in enumerate(self.holes)
        )
        return self.model_copy(update={"holes": holes})

    def with_hole(self, index: int, hole: Hole) -> "Match":
        """
        Копия матча с заменённой лункой.

        Raises:
            IndexError: Если index вне диапазона лунок
        """
        if not 0 <= index < len(self.holes):
            raise IndexError(f"Hole index {index} out of range (holes={len(self.holes)})")
        holes = self.holes[:index] + (hole,) + self.holes[index + 1:]
        return self.model_copy(update={"holes": holes})

    def pars(self) -> tuple[int, ...]:
        """Par всех лунок (для сохранения шаблона поля вызывающей стороной)."""
        return tuple(hole.par for hole in self.holes)
