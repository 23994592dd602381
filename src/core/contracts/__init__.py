"""
Contract Validation Module

Модуль для валидации JSON снапшотов матча.
"""

from .validators import (
    ContractValidator,
    MatchValidator,
    SchemaLoader,
    dump_match,
    load_match,
    validate_match,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatchValidator",
    # Functions
    "validate_match",
    "load_match",
    "dump_match",
]
