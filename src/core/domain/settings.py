"""
WagerSettings — Настройки ставки на матч

Immutable Pydantic модель. Задаётся один раз на матч и только читается движком.

Правила:
- unit_wager: базовая ставка за лунку (денежные единицы, 0..MAX_UNIT_WAGER)
- carry_over: ничьи переносят ставку на следующую решённую лунку
- double_on_one_below_par: x2 если лучший результат победителей = par - 1
- triple_on_two_below_par: x3 если лучший результат победителей <= par - 2
- double_on_minority_win: x2 если один игрок обыграл команду из 2+ игроков
"""

from typing import Final

from pydantic import BaseModel, Field


# Ставка по умолчанию, если вызывающая сторона её не передала
DEFAULT_UNIT_WAGER: Final[float] = 1.0

# Верхняя граница базовой ставки
MAX_UNIT_WAGER: Final[float] = 1e12


class WagerSettings(BaseModel):
    """
    Настройки ставки.

    Булевы правила обязательны: у движка нет своего мнения о правилах игры.
    """

    unit_wager: float = Field(
        DEFAULT_UNIT_WAGER,
        ge=0,
        le=MAX_UNIT_WAGER,
        allow_inf_nan=False,
        description="Базовая ставка за лунку",
    )
    carry_over: bool = Field(..., description="Перенос ставки после ничьей")
    double_on_one_below_par: bool = Field(..., description="x2 за результат par - 1")
    triple_on_two_below_par: bool = Field(..., description="x3 за результат par - 2 и лучше")
    double_on_minority_win: bool = Field(
        ..., description="x2 когда одиночка обыгрывает команду из 2+ игроков"
    )

    model_config = {"frozen": True}


# Начальное состояние нового матча
DEFAULT_SETTINGS: Final[WagerSettings] = WagerSettings(
    unit_wager=DEFAULT_UNIT_WAGER,
    carry_over=True,
    double_on_one_below_par=True,
    triple_on_two_below_par=True,
    double_on_minority_win=False,
)
