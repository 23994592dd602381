"""
Domain models and value objects.

Contains fundamental domain entities like Hole, Roster, WagerSettings, Match.
"""

from src.core.domain.hole import (
    DEFAULT_PAR,
    MIN_PAR,
    Hole,
    Pick,
    coerce_par,
    coerce_score,
)
from src.core.domain.match import HOLES_PER_ROUND, Match
from src.core.domain.roster import MAX_PLAYERS, Roster
from src.core.domain.settings import (
    DEFAULT_SETTINGS,
    DEFAULT_UNIT_WAGER,
    MAX_UNIT_WAGER,
    WagerSettings,
)

__all__ = [
    # Hole model
    "DEFAULT_PAR",
    "MIN_PAR",
    "Hole",
    "Pick",
    "coerce_par",
    "coerce_score",
    # Roster model
    "MAX_PLAYERS",
    "Roster",
    # Settings model
    "DEFAULT_SETTINGS",
    "DEFAULT_UNIT_WAGER",
    "MAX_UNIT_WAGER",
    "WagerSettings",
    # Match model
    "HOLES_PER_ROUND",
    "Match",
]
