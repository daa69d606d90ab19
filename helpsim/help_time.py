from __future__ import annotations

from dataclasses import dataclass
import math

from helpsim.ex import EX_TIME_FACTORS, ExType
from helpsim.natures import NatureModifier
from helpsim.validation import ValidationError

MAX_SPEED_BONUS = 0.35
TEAM_BONUS_STEP = 0.05
LEVEL_TIME_REDUCTION = 0.002


@dataclass(frozen=True)
class HelpTime:
    standard: int
    effective: float


def total_speed_bonus(sub_speed: float, team_bonus: int) -> float:
    """Combine sub-skill and team speed bonuses, capped at MAX_SPEED_BONUS."""
    return min(sub_speed + team_bonus * TEAM_BONUS_STEP, MAX_SPEED_BONUS)


def level_factor(level: int) -> float:
    # Linear and unbounded below; callers keep level in a sane range.
    return 1 - (level - 1) * LEVEL_TIME_REDUCTION


def standard_help_time(
    base_time: float,
    level: int,
    nature: NatureModifier,
    sub_speed: float,
    team_bonus: int,
) -> int:
    """Return the displayed help time in seconds, truncated like the game does."""
    speed_factor = 1 - total_speed_bonus(sub_speed, team_bonus)
    return math.floor(base_time * level_factor(level) * nature.speed * speed_factor)


def calc_help_time(
    base_time: float,
    level: int,
    nature: NatureModifier,
    sub_speed: float,
    team_bonus: int,
    ex_type: ExType,
    camp_divisor: float,
) -> HelpTime:
    """
    Compute the standard and effective time of a single help.

    The standard time is what the game displays. The effective time applies
    the EX mode, the camp divisor and the nature's genki factor on top of it.
    """
    if camp_divisor <= 0:
        raise ValidationError(f"camp_divisor must be > 0 (got {camp_divisor})")
    standard = standard_help_time(base_time, level, nature, sub_speed, team_bonus)
    ex_factor = EX_TIME_FACTORS.get(ex_type, 1.0)
    camp_factor = 1 / camp_divisor
    effective = standard * ex_factor * camp_factor * nature.genki
    return HelpTime(standard=standard, effective=effective)
