from __future__ import annotations

from dataclasses import dataclass

from helpsim.catalog import IngredientCounts, IngredientSlots, Specialty, UNLOCK_LEVELS, is_ingredient_specialty
from helpsim.ex import ExBonus, ExType, is_ex_active
from helpsim.natures import NatureModifier

EXINGREDIENT_EXTRA = 1.0
EXINGREDIENT_SPECIALIST_EXTRA = 0.5


@dataclass(frozen=True)
class UnlockedSlot:
    ingredient: str
    unlock_level: int


def unlocked_slots(level: int, slots: IngredientSlots) -> list[UnlockedSlot]:
    """Return the defined slots the helper has reached, in unlock order."""
    out: list[UnlockedSlot] = []
    for unlock_level in UNLOCK_LEVELS:
        ingredient = slots.for_level(unlock_level)
        if not ingredient:
            continue
        if level >= unlock_level:
            out.append(UnlockedSlot(ingredient=ingredient, unlock_level=unlock_level))
    return out


def ingredient_chance(base_ingredient_rate: float, nature: NatureModifier, sub_ingredient: float) -> float:
    """Return the chance that a help gathers ingredients instead of berries."""
    return base_ingredient_rate * nature.ingredient * (1 + sub_ingredient)


def extra_per_proc(ex_bonus: ExBonus, specialty: Specialty, ex_type: ExType) -> float:
    if ex_bonus != "exingredient" or not is_ex_active(ex_type):
        return 0.0
    extra = EXINGREDIENT_EXTRA
    if is_ingredient_specialty(specialty):
        extra += EXINGREDIENT_SPECIALIST_EXTRA
    return extra


def calc_ingredients_per_day(
    helper_name: str,
    level: int,
    base_ingredient_rate: float,
    nature: NatureModifier,
    sub_ingredient: float,
    ex_bonus: ExBonus,
    specialty: Specialty,
    ex_type: ExType,
    slots: IngredientSlots,
    helps_per_day: float,
    ingredient_counts: IngredientCounts,
    extra_per_slot: int = 0,
) -> dict[str, float]:
    """
    Return expected ingredients gathered per day, keyed by ingredient name.

    Each unlocked slot is picked with equal probability when an ingredient
    help happens. Slots sharing an ingredient pool their base counts, and
    each occurrence gets the EX and per-slot extras. Ingredients missing from
    the helper's count table are skipped but their slot still dilutes the
    others.
    """
    slots_open = unlocked_slots(level, slots)
    slot_count = len(slots_open)
    if slot_count == 0:
        return {}

    chance = ingredient_chance(base_ingredient_rate, nature, sub_ingredient)
    extra = extra_per_proc(ex_bonus, specialty, ex_type) + extra_per_slot

    helper_counts = ingredient_counts.get(helper_name, {})
    base_sum: dict[str, int] = {}
    occurrences: dict[str, int] = {}
    for slot in slots_open:
        by_level = helper_counts.get(slot.ingredient)
        if not by_level:
            continue
        base_sum[slot.ingredient] = base_sum.get(slot.ingredient, 0) + by_level.get(slot.unlock_level, 0)
        occurrences[slot.ingredient] = occurrences.get(slot.ingredient, 0) + 1

    per_day: dict[str, float] = {}
    for ingredient, summed in base_sum.items():
        per_help = chance * (1 / slot_count) * (summed + occurrences[ingredient] * extra)
        per_day[ingredient] = per_help * helps_per_day
    return per_day
