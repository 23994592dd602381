"""
Roster — Состав игроков матча

Immutable Pydantic модель. Слот активен, если имя непустое после strip.

Два вида индексов:
- slot: стабильный индекс поля ростера (как его видит UI)
- active: плотный индекс 0..n_active-1 (столбец матрицы дельт)
"""

from typing import Any, Final

from pydantic import BaseModel, Field, field_validator


# Максимальное количество слотов в ростере
MAX_PLAYERS: Final[int] = 5


class Roster(BaseModel):
    """Ростер матча. Фиксирован на весь матч."""

    names: tuple[str, ...] = Field(
        default=(), max_length=MAX_PLAYERS, description="Имена по слотам"
    )

    model_config = {"frozen": True}

    @field_validator("names", mode="before")
    @classmethod
    def normalize_names(cls, v: Any) -> tuple[str, ...]:
        if v is None:
            return ()
        if isinstance(v, str):
            # Одно имя, а не последовательность символов
            return (v,)
        return tuple("" if name is None else str(name) for name in v)

    def active_slots(self) -> tuple[int, ...]:
        """Слоты активных игроков в порядке ростера."""
        return tuple(i for i, name in enumerate(self.names) if name.strip())

    def active_names(self) -> tuple[str, ...]:
        """Имена активных игроков (без пробелов по краям)."""
        return tuple(self.names[i].strip() for i in self.active_slots())

    def to_active(self, slot: int) -> int:
        """
        Конверсия slot → active index.

        Raises:
            ValueError: Если слот неактивен
        """
        return self.active_slots().index(slot)

    def to_slot(self, active: int) -> int:
        """
        Конверсия active index → slot.

        Raises:
            IndexError: Если active вне диапазона
        """
        slots = self.active_slots()
        if not 0 <= active < len(slots):
            raise IndexError(f"Active index {active} out of range (n_active={len(slots)})")
        return slots[active]
