from __future__ import annotations

import math

from helpsim.catalog import Specialty, is_berry_specialty
from helpsim.ex import EXBERRY_ENERGY_FACTOR, ExBonus, ExType, is_ex_active

COMPOUND_GROWTH = 1.025


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounding up (JS Math.round semantics)."""
    return int(math.floor(value + 0.5))


def berry_growth(base_berry_energy: float, level: int) -> float:
    """Return the level-scaled berry energy: the larger of the linear and compound curves."""
    linear = base_berry_energy + (level - 1)
    compound = base_berry_energy * COMPOUND_GROWTH ** (level - 1)
    return max(linear, compound)


def berry_count(base_berry_count: int, specialty: Specialty, berry_count_skill: int) -> int:
    bonus = 1 if is_berry_specialty(specialty) else 0
    return base_berry_count + bonus + berry_count_skill


def calc_berry_energy(
    level: int,
    base_berry_energy: float,
    base_berry_count: int,
    field_berry_affinity: float,
    berry_count_skill: int,
    field_bonus_percent: float,
    ex_bonus: ExBonus,
    specialty: Specialty,
    ex_type: ExType,
) -> int:
    """Return the berry energy gathered by a single berry help."""
    energy = berry_growth(base_berry_energy, level)
    energy *= field_berry_affinity
    if ex_bonus == "exberry" and is_ex_active(ex_type):
        energy *= EXBERRY_ENERGY_FACTOR
    energy *= 1 + field_bonus_percent / 100
    return round_half_up(energy) * berry_count(base_berry_count, specialty, berry_count_skill)
