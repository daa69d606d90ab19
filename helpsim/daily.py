from __future__ import annotations

from dataclasses import dataclass

from helpsim.berries import calc_berry_energy, round_half_up
from helpsim.catalog import EntityProfile, HelperCatalog
from helpsim.config import RunConfiguration
from helpsim.help_time import calc_help_time
from helpsim.ingredients import calc_ingredients_per_day, ingredient_chance
from helpsim.natures import NatureModifier, nature_for
from helpsim.skills import calc_skill_per_day
from helpsim.validation import ValidationError, validate_nature, validate_run_config

SECONDS_PER_DAY = 86400
BASE_BERRY_COUNT = 1


@dataclass(frozen=True)
class IngredientYield:
    count: float
    energy: float


@dataclass(frozen=True)
class DailyResult:
    standard_help_time: int
    effective_help_time: float
    helps_per_day: float
    berry_energy_per_help: int
    berry_energy_per_day: float
    berry_only_energy_per_day: float
    skill_per_day: float
    ingredients: dict[str, IngredientYield]
    ingredient_energy_per_day: float
    total_energy_per_day: int


def compute_daily_result(
    profile: EntityProfile,
    nature: NatureModifier,
    config: RunConfiguration,
    catalog: HelperCatalog,
) -> DailyResult:
    """
    Run every calculator for one helper configuration and combine the results.

    A help yields either berries or ingredients, so the normal berry energy is
    discounted by the ingredient chance. The ingredient yield is not
    discounted the other way round.
    """
    sub = config.subskills
    help_time = calc_help_time(
        profile.help_time,
        config.level,
        nature,
        sub.speed,
        config.team_bonus,
        config.ex.type,
        config.camp_divisor,
    )
    if help_time.effective <= 0:
        raise ValidationError(f"effective help time must be > 0 (got {help_time.effective})")
    helps_per_day = SECONDS_PER_DAY / help_time.effective

    berry_per_help = calc_berry_energy(
        config.level,
        profile.berry_energy,
        BASE_BERRY_COUNT,
        config.field.berry_affinity,
        sub.berry_count,
        config.field.bonus_percent,
        config.ex.bonus,
        profile.specialty,
        config.ex.type,
    )
    chance = ingredient_chance(profile.ingredient_rate, nature, sub.ingredient)
    berry_per_day = berry_per_help * helps_per_day * (1 - chance)
    berry_only_per_day = berry_per_help * helps_per_day

    skill_per_day = calc_skill_per_day(
        profile.skill_rate,
        nature,
        sub.skill,
        config.ex.bonus,
        config.ex.type,
        helps_per_day,
    )

    slots = config.ingredients if config.ingredients is not None else profile.ingredient_slots
    counts = calc_ingredients_per_day(
        profile.name,
        config.level,
        profile.ingredient_rate,
        nature,
        sub.ingredient,
        config.ex.bonus,
        profile.specialty,
        config.ex.type,
        slots,
        helps_per_day,
        catalog.ingredient_counts,
        extra_per_slot=config.extra_ingredient_count,
    )
    field_factor = 1 + config.field.bonus_percent / 100
    ingredients: dict[str, IngredientYield] = {}
    ingredient_energy_total = 0.0
    for name, count in counts.items():
        energy = count * catalog.ingredient_energy.get(name, 0) * field_factor
        ingredients[name] = IngredientYield(count=count, energy=energy)
        ingredient_energy_total += energy

    return DailyResult(
        standard_help_time=help_time.standard,
        effective_help_time=help_time.effective,
        helps_per_day=helps_per_day,
        berry_energy_per_help=berry_per_help,
        berry_energy_per_day=berry_per_day,
        berry_only_energy_per_day=berry_only_per_day,
        skill_per_day=skill_per_day,
        ingredients=ingredients,
        ingredient_energy_per_day=ingredient_energy_total,
        total_energy_per_day=round_half_up(berry_per_day + ingredient_energy_total),
    )


def compute_for_config(config: RunConfiguration, catalog: HelperCatalog) -> DailyResult:
    """Validate a run configuration, resolve its helper and nature, and compute the day."""
    validate_run_config(config, catalog)
    profile = catalog.profile(config.helper)
    if profile is None:
        raise ValidationError(f"unknown helper '{config.helper}'")
    nature = nature_for(config.nature)
    validate_nature(nature)
    return compute_daily_result(profile, nature, config, catalog)
