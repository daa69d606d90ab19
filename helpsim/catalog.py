from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

Specialty = Literal["berry", "ingredient", "skill", "all", "none"]

UNLOCK_LEVELS: tuple[int, ...] = (1, 30, 60)


class DataError(RuntimeError):
    pass


DATA_DIR = Path(os.getenv("HELPSIM_DATA_DIR", Path(__file__).resolve().parents[1] / "data"))


def _load_json(path: Path) -> Any:
    if not path.exists():
        raise DataError(f"Missing data file: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


@dataclass(frozen=True)
class IngredientSlots:
    """Ingredient chosen for each unlock level; None means the slot is undefined."""

    lv1: str | None = None
    lv30: str | None = None
    lv60: str | None = None

    def for_level(self, unlock_level: int) -> str | None:
        if unlock_level == 1:
            return self.lv1
        if unlock_level == 30:
            return self.lv30
        if unlock_level == 60:
            return self.lv60
        raise ValueError(f"Unknown unlock level: {unlock_level}")


@dataclass(frozen=True)
class EntityProfile:
    name: str
    berry_type: str
    specialty: Specialty
    help_time: float
    berry_energy: float
    ingredient_rate: float
    skill_rate: float
    ingredient_slots: IngredientSlots = IngredientSlots()


def is_berry_specialty(specialty: Specialty) -> bool:
    """Return True if the specialty picks an extra berry per help."""
    return specialty in ("berry", "all")


def is_ingredient_specialty(specialty: Specialty) -> bool:
    return specialty in ("ingredient", "all")


IngredientCounts = dict[str, dict[str, dict[int, int]]]


@dataclass(frozen=True)
class HelperCatalog:
    profiles: dict[str, EntityProfile]
    # helper -> ingredient -> unlock level -> base count
    ingredient_counts: IngredientCounts
    # ingredient -> energy per unit
    ingredient_energy: dict[str, int]

    def profile(self, name: str) -> EntityProfile | None:
        """Return a profile by exact name, then by normalized name."""
        if name in self.profiles:
            return self.profiles[name]
        wanted = _normalize_name(name)
        for key, profile in self.profiles.items():
            if _normalize_name(key) == wanted:
                return profile
        return None


def _normalize_name(raw: str) -> str:
    return "".join(ch for ch in str(raw).lower() if ch.isalnum())


def normalize_specialty(raw: Any) -> Specialty:
    """Normalize specialty labels, accepting the in-game Japanese labels."""
    if raw is None:
        return "none"
    key = str(raw).strip().lower()
    if key in ("berry", "berries", "きのみ"):
        return "berry"
    if key in ("ingredient", "ingredients", "食材"):
        return "ingredient"
    if key in ("skill", "skills", "スキル"):
        return "skill"
    if key in ("all", "オール"):
        return "all"
    if key in ("none", "", "なし"):
        return "none"
    raise ValueError(f"Unknown specialty: {raw}")


def _parse_level_counts(raw: Any, helper: str, ingredient: str) -> dict[int, int]:
    if not isinstance(raw, dict):
        raise DataError(f"{helper}.ingredients.{ingredient} must be a mapping of unlock level -> count")
    counts: dict[int, int] = {}
    for level_raw, count in raw.items():
        level = int(level_raw)
        if level not in UNLOCK_LEVELS:
            raise DataError(f"{helper}.ingredients.{ingredient} has unknown unlock level {level_raw}")
        counts[level] = int(count)
    return counts


def load_ingredient_energy(data_dir: Path = DATA_DIR, filename: str = "ingredients.json") -> dict[str, int]:
    raw = _load_json(data_dir / filename)
    if not isinstance(raw, dict):
        raise DataError(f"{filename} must be a mapping of ingredient -> energy")
    return {str(name): int(energy) for name, energy in raw.items()}


def load_catalog(data_dir: Path = DATA_DIR) -> HelperCatalog:
    """Load helper profiles, ingredient counts and ingredient energy from data_dir."""
    helpers_raw = _load_json(data_dir / "helpers.json")
    ingredient_energy = load_ingredient_energy(data_dir)

    profiles: dict[str, EntityProfile] = {}
    counts: IngredientCounts = {}
    for name, data in helpers_raw.items():
        if not isinstance(data, dict):
            continue
        per_ingredient: dict[str, dict[int, int]] = {}
        for ingredient, level_counts in (data.get("ingredients") or {}).items():
            per_ingredient[str(ingredient)] = _parse_level_counts(level_counts, name, ingredient)

        # Insertion order of the ingredient table decides the default slot choice.
        candidates: dict[int, tuple[str, ...]] = {}
        for level in UNLOCK_LEVELS:
            names = tuple(ing for ing, by_level in per_ingredient.items() if by_level.get(level, 0) > 0)
            if names:
                candidates[level] = names

        defaults = IngredientSlots(
            lv1=candidates.get(1, (None,))[0],
            lv30=candidates.get(30, (None,))[0],
            lv60=candidates.get(60, (None,))[0],
        )
        profiles[name] = EntityProfile(
            name=name,
            berry_type=str(data.get("berry_type", "")),
            specialty=normalize_specialty(data.get("specialty")),
            help_time=float(data["help_time"]),
            berry_energy=float(data["berry_energy"]),
            ingredient_rate=float(data.get("ingredient_rate", 0.0)),
            skill_rate=float(data.get("skill_rate", 0.0)),
            ingredient_slots=defaults,
        )
        counts[name] = per_ingredient

    return HelperCatalog(profiles=profiles, ingredient_counts=counts, ingredient_energy=ingredient_energy)
