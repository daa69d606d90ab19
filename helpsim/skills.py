from __future__ import annotations

from helpsim.ex import EXSKILL_RATE_FACTOR, ExBonus, ExType, is_ex_active
from helpsim.natures import NatureModifier


def final_skill_rate(
    base_skill_rate: float,
    nature: NatureModifier,
    sub_skill: float,
    ex_bonus: ExBonus,
    ex_type: ExType,
) -> float:
    ex_factor = EXSKILL_RATE_FACTOR if ex_bonus == "exskill" and is_ex_active(ex_type) else 1.0
    return base_skill_rate * nature.skill * (1 + sub_skill) * ex_factor


def calc_skill_per_day(
    base_skill_rate: float,
    nature: NatureModifier,
    sub_skill: float,
    ex_bonus: ExBonus,
    ex_type: ExType,
    helps_per_day: float,
) -> float:
    """Return the expected number of skill activations per day."""
    return helps_per_day * final_skill_rate(base_skill_rate, nature, sub_skill, ex_bonus, ex_type)
