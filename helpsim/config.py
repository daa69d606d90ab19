from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path
from typing import Any

from .catalog import IngredientSlots, UNLOCK_LEVELS
from .ex import ExBonus, ExType


@dataclass(frozen=True)
class SubSkills:
    speed: float = 0.0
    ingredient: float = 0.0
    skill: float = 0.0
    berry_count: int = 0


@dataclass(frozen=True)
class FieldConfig:
    bonus_percent: float = 0.0
    berry_affinity: float = 1.0


@dataclass(frozen=True)
class ExConfig:
    type: ExType = "none"
    bonus: ExBonus = "none"


@dataclass(frozen=True)
class RunConfiguration:
    helper: str
    level: int = 1
    nature: str = ""
    subskills: SubSkills = SubSkills()
    team_bonus: int = 0
    field: FieldConfig = FieldConfig()
    camp_divisor: float = 1.0
    ex: ExConfig = ExConfig()
    # None keeps the helper's default ingredient slots.
    ingredients: IngredientSlots | None = None
    extra_ingredient_count: int = 0

    @staticmethod
    def from_json_file(path: str | Path) -> "RunConfiguration":
        """Load a run configuration from a JSON file on disk."""
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        return RunConfiguration.from_dict(raw)

    @staticmethod
    def from_dict(raw: dict[str, Any]) -> "RunConfiguration":
        """Build a run configuration from a decoded JSON dict."""
        subskills_raw = raw.get("subskills", {})
        field_raw = raw.get("field", {})
        ex_raw = raw.get("ex", {})

        subskills = SubSkills(
            speed=float(subskills_raw.get("speed", 0.0)),
            ingredient=float(subskills_raw.get("ingredient", 0.0)),
            skill=float(subskills_raw.get("skill", 0.0)),
            berry_count=int(subskills_raw.get("berry_count", 0)),
        )
        field_cfg = FieldConfig(
            bonus_percent=float(field_raw.get("bonus_percent", 0.0)),
            berry_affinity=float(field_raw.get("berry_affinity", 1.0)),
        )
        ex = ExConfig(
            type=_normalize_ex_type(ex_raw.get("type", "none")),
            bonus=_normalize_ex_bonus(ex_raw.get("bonus", "none")),
        )
        return RunConfiguration(
            helper=str(raw["helper"]),
            level=int(raw.get("level", 1)),
            nature=str(raw.get("nature") or ""),
            subskills=subskills,
            team_bonus=int(raw.get("team_bonus", 0)),
            field=field_cfg,
            camp_divisor=float(raw.get("camp_divisor", 1.0)),
            ex=ex,
            ingredients=_parse_ingredient_slots(raw.get("ingredients")),
            extra_ingredient_count=int(raw.get("extra_ingredient_count", 0)),
        )


def _normalize_ex_type(raw: Any) -> ExType:
    """Normalize EX mode identifiers to canonical values."""
    if raw is None:
        return "none"
    key = str(raw).strip().lower()
    if key in ("main", "メイン"):
        return "main"
    if key in ("sub", "サブ"):
        return "sub"
    if key in ("none", "no", "", "なし"):
        return "none"
    raise ValueError(f"Unknown EX type: {raw}")


def _normalize_ex_bonus(raw: Any) -> ExBonus:
    """Normalize EX bonus identifiers, accepting 'ex berry', 'ex_berry' and plain 'berry'."""
    if raw is None:
        return "none"
    key = str(raw).strip().lower()
    if key in ("none", "no", ""):
        return "none"
    norm = key.replace(" ", "").replace("_", "").replace("-", "")
    if norm in ("exberry", "berry"):
        return "exberry"
    if norm in ("exingredient", "ingredient"):
        return "exingredient"
    if norm in ("exskill", "skill"):
        return "exskill"
    raise ValueError(f"Unknown EX bonus: {raw}")


def _parse_unlock_level(raw: Any) -> int:
    key = str(raw).strip().lower()
    if key.startswith("lv"):
        key = key[2:]
    try:
        level = int(key)
    except ValueError:
        raise ValueError(f"Unknown ingredient unlock level: {raw}") from None
    if level not in UNLOCK_LEVELS:
        raise ValueError(f"Unknown ingredient unlock level: {raw}")
    return level


def _parse_ingredient_slots(raw: Any) -> IngredientSlots | None:
    """Parse ingredient choices keyed by unlock level; empty strings mean no slot."""
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError("ingredients must be a mapping of unlock level -> ingredient")
    chosen: dict[int, str | None] = {}
    for key, value in raw.items():
        level = _parse_unlock_level(key)
        name = str(value).strip() if value is not None else ""
        chosen[level] = name or None
    return IngredientSlots(lv1=chosen.get(1), lv30=chosen.get(30), lv60=chosen.get(60))
