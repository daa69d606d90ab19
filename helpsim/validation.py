from __future__ import annotations

from helpsim.catalog import HelperCatalog
from helpsim.config import RunConfiguration
from helpsim.natures import NatureModifier


class ValidationError(ValueError):
    """Raised when input data is logically invalid."""


def validate_run_config(cfg: RunConfiguration, catalog: HelperCatalog | None = None) -> None:
    """Validate configuration invariants before any formula runs."""
    if cfg.level < 1:
        raise ValidationError(f"level must be >= 1 (got {cfg.level})")
    if cfg.camp_divisor <= 0:
        raise ValidationError(f"camp_divisor must be > 0 (got {cfg.camp_divisor})")
    _ensure_non_negative(cfg.team_bonus, "team_bonus")
    _ensure_non_negative(cfg.extra_ingredient_count, "extra_ingredient_count")
    _ensure_non_negative(cfg.subskills.speed, "subskills.speed")
    _ensure_non_negative(cfg.subskills.ingredient, "subskills.ingredient")
    _ensure_non_negative(cfg.subskills.skill, "subskills.skill")
    _ensure_non_negative(cfg.subskills.berry_count, "subskills.berry_count")
    _ensure_non_negative(cfg.field.bonus_percent, "field.bonus_percent")
    _ensure_non_negative(cfg.field.berry_affinity, "field.berry_affinity")

    if catalog is not None:
        _validate_helper(cfg, catalog)


def validate_nature(nature: NatureModifier) -> None:
    for name in ("speed", "ingredient", "skill", "genki"):
        value = getattr(nature, name)
        if value <= 0:
            raise ValidationError(f"nature.{name} must be > 0 (got {value})")


def _ensure_non_negative(value: float, name: str) -> None:
    if value < 0:
        raise ValidationError(f"{name} must be >= 0 (got {value})")


def _validate_helper(cfg: RunConfiguration, catalog: HelperCatalog) -> None:
    profile = catalog.profile(cfg.helper)
    if profile is None:
        raise ValidationError(f"unknown helper '{cfg.helper}'")
    if cfg.ingredients is None:
        return
    known = catalog.ingredient_counts.get(profile.name, {})
    for level, name in ((1, cfg.ingredients.lv1), (30, cfg.ingredients.lv30), (60, cfg.ingredients.lv60)):
        if name is None:
            continue
        if name not in known:
            raise ValidationError(f"helper '{profile.name}' has no ingredient '{name}' (lv{level} slot)")
