"""
JSON Schema Contract Validators

Модуль для валидации JSON снапшотов матча, которые передаёт UI / хранилище.
Использует библиотеку jsonschema для проверки структуры данных.

Схемы:
- match.json (ростер + настройки + лунки)

Схема проверяет только структуру (типы, обязательные ключи). Содержимое
лунок (пустой par, пустые результаты) нормализуется моделями домена
и ошибкой не считается.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.hole import Hole
from src.core.domain.match import Match
from src.core.domain.roster import Roster
from src.core.domain.settings import WagerSettings


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'match')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """True если данные валидны, без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class MatchValidator(ContractValidator):
    """Валидатор для match контракта."""

    def __init__(self):
        super().__init__("match")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_match(data: Dict[str, Any]) -> None:
    """
    Валидация снапшота матча.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MatchValidator().validate(data)


def load_match(data: Dict[str, Any]) -> Match:
    """
    Валидация и построение Match из JSON снапшота.

    Args:
        data: Снапшот матча ({"players", "settings", "holes"})

    Returns:
        Match с нормализованными лунками

    Raises:
        ValidationError: Если структура не соответствует схеме
    """
    validate_match(data)

    return Match(
        roster=Roster(names=data["players"]),
        settings=WagerSettings(**data["settings"]),
        holes=tuple(Hole(**hole) for hole in data["holes"]),
    )


def dump_match(match: Match) -> Dict[str, Any]:
    """
    Сериализация Match в JSON снапшот (обратный к load_match формат).

    Returns:
        dict, проходящий validate_match
    """
    return {
        "players": list(match.roster.names),
        "settings": match.settings.model_dump(),
        "holes": [
            {
                "par": hole.par,
                "picks": [pick.value for pick in hole.picks],
                "scores": list(hole.scores),
            }
            for hole in match.holes
        ],
    }
