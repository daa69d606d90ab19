import pytest

from helpsim.catalog import IngredientSlots
from helpsim.ingredients import (
    UnlockedSlot,
    calc_ingredients_per_day,
    extra_per_proc,
    ingredient_chance,
    unlocked_slots,
)
from helpsim.natures import DEFAULT_NATURE, NatureModifier

COUNTS = {
    "Tester": {
        "Apple": {1: 1, 30: 2, 60: 4},
        "Milk": {30: 3, 60: 5},
    }
}
SLOTS = IngredientSlots(lv1="Apple", lv30="Milk", lv60="Apple")


def _per_day(level, slots=SLOTS, ex_bonus="none", specialty="none", ex_type="none", extra_per_slot=0):
    return calc_ingredients_per_day(
        "Tester",
        level,
        0.2,
        DEFAULT_NATURE,
        0.0,
        ex_bonus,
        specialty,
        ex_type,
        slots,
        100,
        COUNTS,
        extra_per_slot=extra_per_slot,
    )


def test_unlocked_slots_follow_level_thresholds():
    """Level 30 and 60 slots open only at their thresholds."""
    assert unlocked_slots(1, SLOTS) == [UnlockedSlot("Apple", 1)]
    assert unlocked_slots(29, SLOTS) == [UnlockedSlot("Apple", 1)]
    assert unlocked_slots(30, SLOTS) == [UnlockedSlot("Apple", 1), UnlockedSlot("Milk", 30)]
    assert len(unlocked_slots(60, SLOTS)) == 3


def test_unlocked_slots_skip_undefined():
    """Undefined slots never count, even past their level."""
    assert unlocked_slots(60, IngredientSlots(lv30="Milk")) == [UnlockedSlot("Milk", 30)]
    assert unlocked_slots(100, IngredientSlots()) == []


def test_level_one_single_slot():
    """One open slot takes every ingredient help."""
    assert _per_day(1) == {"Apple": pytest.approx(20.0)}


def test_level_thirty_splits_between_slots():
    """Two open slots split the ingredient chance evenly."""
    result = _per_day(30)
    assert result["Apple"] == pytest.approx(10.0)
    assert result["Milk"] == pytest.approx(30.0)


def test_level_sixty_pools_repeated_ingredient():
    """The same ingredient in two slots pools its per-level base counts."""
    result = _per_day(60)
    # Apple: 1 (lv1) + 4 (lv60), Milk: 3 (lv30), over three slots.
    assert result["Apple"] == pytest.approx(0.2 / 3 * 5 * 100)
    assert result["Milk"] == pytest.approx(0.2 / 3 * 3 * 100)


def test_exingredient_specialist_bonus():
    """EX ingredient adds 1.5 per occurrence for ingredient specialists, 1 otherwise."""
    specialist = _per_day(60, ex_bonus="exingredient", specialty="ingredient", ex_type="main")
    assert specialist["Apple"] == pytest.approx(0.2 / 3 * (5 + 2 * 1.5) * 100)
    assert specialist["Milk"] == pytest.approx(0.2 / 3 * (3 + 1.5) * 100)

    other = _per_day(60, ex_bonus="exingredient", specialty="berry", ex_type="sub")
    assert other["Milk"] == pytest.approx(0.2 / 3 * 4 * 100)

    inactive = _per_day(60, ex_bonus="exingredient", specialty="ingredient", ex_type="none")
    assert inactive == _per_day(60)


def test_extra_per_proc_values():
    assert extra_per_proc("exingredient", "all", "main") == 1.5
    assert extra_per_proc("exingredient", "skill", "main") == 1.0
    assert extra_per_proc("exberry", "ingredient", "main") == 0.0


def test_extra_per_slot_adds_to_each_occurrence():
    """A per-slot extra count adds to every unlocked slot occurrence."""
    assert _per_day(1, extra_per_slot=1) == {"Apple": pytest.approx(40.0)}


def test_no_slots_returns_empty_mapping():
    """No defined or unlocked slot means no ingredients and no division."""
    assert _per_day(1, slots=IngredientSlots()) == {}
    assert _per_day(1, slots=IngredientSlots(lv30="Milk", lv60="Apple")) == {}


def test_unknown_ingredient_still_dilutes():
    """An ingredient missing from the count table is skipped but keeps its slot share."""
    result = _per_day(30, slots=IngredientSlots(lv1="Apple", lv30="Mystery"))
    assert result == {"Apple": pytest.approx(10.0)}


def test_unknown_helper_yields_nothing():
    result = calc_ingredients_per_day(
        "Nobody", 60, 0.2, DEFAULT_NATURE, 0.0, "none", "none", "none", SLOTS, 100, COUNTS
    )
    assert result == {}


def test_ingredient_chance_modifiers():
    """Nature and sub-skill multiply the base ingredient rate."""
    nature = NatureModifier(ingredient=1.2)
    assert ingredient_chance(0.2, nature, 0.18) == pytest.approx(0.2 * 1.2 * 1.18)
