from __future__ import annotations

from typing import Literal

ExType = Literal["main", "sub", "none"]
ExBonus = Literal["none", "exberry", "exingredient", "exskill"]

# Help time multiplier per EX mode: a matching specialization shortens the help.
EX_TIME_FACTORS: dict[str, float] = {
    "main": 0.909,
    "sub": 1.0,
    "none": 1.15,
}

EXBERRY_ENERGY_FACTOR = 1.2
EXSKILL_RATE_FACTOR = 1.25


def is_ex_active(ex_type: ExType) -> bool:
    """Return True if the EX specialization applies (main or sub)."""
    return ex_type in ("main", "sub")
