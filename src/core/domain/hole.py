"""
Hole — Модель одной лунки

Immutable Pydantic модель. Сырые данные формы (пустые строки, строки с числами,
None) приводятся к типам ровно один раз при создании модели. Движок расчёта
работает только с уже нормализованными значениями:
- par: int >= MIN_PAR (иначе DEFAULT_PAR)
- picks: кортеж Pick по слотам ростера
- scores: кортеж Optional[int] по слотам ростера (None = результат не внесён)

Коэрсия никогда не бросает исключений: невалидное содержимое лунки
деградирует детерминированно.
"""

import math
from enum import Enum
from typing import Any, Final, Optional

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# PAR
# =============================================================================

# Par по умолчанию для пустого или невалидного значения
DEFAULT_PAR: Final[int] = 4

# Минимальный допустимый par
MIN_PAR: Final[int] = 3


def _is_finite_number(raw: float) -> bool:
    # int вне диапазона float (10**400): math.isfinite бросает OverflowError
    try:
        return math.isfinite(raw)
    except OverflowError:
        return False


def _parse_number(raw: str) -> Optional[float]:
    text = raw.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def coerce_par(raw: Any) -> int:
    """
    Нормализация par.

    - число (не bool), конечное, >= MIN_PAR → int(raw)
    - непустая числовая строка → max(MIN_PAR, value)
    - всё остальное (None, "", < MIN_PAR, NaN, int вне диапазона float, мусор)
      → DEFAULT_PAR

    Examples:
        >>> coerce_par(5)
        5
        >>> coerce_par("2")
        3
        >>> coerce_par(2)
        4
        >>> coerce_par("")
        4
    """
    if isinstance(raw, bool):
        return DEFAULT_PAR

    if isinstance(raw, (int, float)):
        if _is_finite_number(raw) and raw >= MIN_PAR:
            return int(raw)
        return DEFAULT_PAR

    if isinstance(raw, str):
        value = _parse_number(raw)
        if value is None:
            return DEFAULT_PAR
        return max(MIN_PAR, int(value))

    return DEFAULT_PAR


# =============================================================================
# SCORES
# =============================================================================


def coerce_score(raw: Any) -> Optional[int]:
    """
    Нормализация результата игрока на лунке.

    None означает "результат не внесён": такой игрок не участвует в сравнении
    на этой лунке, но остаётся в ростере.

    - None, "", пробелы, bool, int вне диапазона float, мусор → None
    - отрицательные и дробные значения → None
    - целые числа и числовые строки → int

    Examples:
        >>> coerce_score("")
        >>> coerce_score("5")
        5
        >>> coerce_score(4.0)
        4
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, str):
        value: Optional[float] = _parse_number(raw)
        if value is None:
            return None
    elif isinstance(raw, (int, float)):
        if not _is_finite_number(raw):
            return None
        value = float(raw)
    else:
        return None

    if value < 0 or not value.is_integer():
        return None
    return int(value)


# =============================================================================
# PICKS
# =============================================================================


class Pick(str, Enum):
    """Распределение игрока на лунке."""

    A = "A"
    B = "B"
    SIT = "SIT"

    @classmethod
    def coerce(cls, raw: Any) -> "Pick":
        """
        Нормализация выбора команды.

        Принимает также обозначения старого формата (T1/T2/Sit).
        Неизвестное значение → SIT.
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            return _PICK_ALIASES.get(raw.strip().upper(), cls.SIT)
        return cls.SIT


_PICK_ALIASES: Final[dict[str, Pick]] = {
    "A": Pick.A,
    "T1": Pick.A,
    "B": Pick.B,
    "T2": Pick.B,
    "SIT": Pick.SIT,
}


# =============================================================================
# HOLE MODEL
# =============================================================================


class Hole(BaseModel):
    """
    Модель лунки.

    Индексы picks/scores: слоты ростера (а не индексы активных игроков).
    Кортежи могут быть короче ростера: недостающие слоты читаются как SIT / None.
    """

    par: int = Field(DEFAULT_PAR, ge=MIN_PAR, description="Par лунки")
    picks: tuple[Pick, ...] = Field(default=(), description="Команда по слотам")
    scores: tuple[Optional[int], ...] = Field(default=(), description="Результаты по слотам")

    model_config = {"frozen": True}

    @field_validator("par", mode="before")
    @classmethod
    def normalize_par(cls, v: Any) -> int:
        return coerce_par(v)

    @field_validator("picks", mode="before")
    @classmethod
    def normalize_picks(cls, v: Any) -> tuple[Pick, ...]:
        if not isinstance(v, (list, tuple)):
            return ()
        return tuple(Pick.coerce(p) for p in v)

    @field_validator("scores", mode="before")
    @classmethod
    def normalize_scores(cls, v: Any) -> tuple[Optional[int], ...]:
        if not isinstance(v, (list, tuple)):
            return ()
        return tuple(coerce_score(s) for s in v)

    def pick_for(self, slot: int) -> Pick:
        """Команда игрока в слоте (SIT за пределами кортежа)."""
        if 0 <= slot < len(self.picks):
            return self.picks[slot]
        return Pick.SIT

    def score_for(self, slot: int) -> Optional[int]:
        """Результат игрока в слоте (None за пределами кортежа)."""
        if 0 <= slot < len(self.scores):
            return self.scores[slot]
        return None
