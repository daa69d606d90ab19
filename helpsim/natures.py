from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NatureModifier:
    speed: float = 1.0
    ingredient: float = 1.0
    skill: float = 1.0
    # Help time multiplier from the energy (genki) state the nature settles into.
    genki: float = 0.492


DEFAULT_NATURE = NatureModifier()

# Speed is a help time multiplier, so "up" natures sit below 1.0.
SPEED_UP = 0.9
SPEED_DOWN = 1.075
INGREDIENT_UP = 1.2
INGREDIENT_DOWN = 0.8
SKILL_UP = 1.2
SKILL_DOWN = 0.8
GENKI_UP = 0.48
GENKI_DOWN = 0.51

NATURE_MODIFIERS: dict[str, NatureModifier] = {
    # neutral
    "bashful": DEFAULT_NATURE,
    "docile": DEFAULT_NATURE,
    "hardy": DEFAULT_NATURE,
    "quirky": DEFAULT_NATURE,
    "serious": DEFAULT_NATURE,
    # speed up
    "lonely": NatureModifier(speed=SPEED_UP, genki=GENKI_DOWN),
    "adamant": NatureModifier(speed=SPEED_UP, ingredient=INGREDIENT_DOWN),
    "naughty": NatureModifier(speed=SPEED_UP, skill=SKILL_DOWN),
    "brave": NatureModifier(speed=SPEED_UP),
    # genki up
    "bold": NatureModifier(speed=SPEED_DOWN, genki=GENKI_UP),
    "impish": NatureModifier(ingredient=INGREDIENT_DOWN, genki=GENKI_UP),
    "lax": NatureModifier(skill=SKILL_DOWN, genki=GENKI_UP),
    "relaxed": NatureModifier(genki=GENKI_UP),
    # ingredient up
    "modest": NatureModifier(speed=SPEED_DOWN, ingredient=INGREDIENT_UP),
    "mild": NatureModifier(ingredient=INGREDIENT_UP, genki=GENKI_DOWN),
    "rash": NatureModifier(ingredient=INGREDIENT_UP, skill=SKILL_DOWN),
    "quiet": NatureModifier(ingredient=INGREDIENT_UP),
    # skill up
    "calm": NatureModifier(speed=SPEED_DOWN, skill=SKILL_UP),
    "gentle": NatureModifier(skill=SKILL_UP, genki=GENKI_DOWN),
    "careful": NatureModifier(ingredient=INGREDIENT_DOWN, skill=SKILL_UP),
    "sassy": NatureModifier(skill=SKILL_UP),
    # exp up natures only touch what we do not model here
    "timid": NatureModifier(speed=SPEED_DOWN),
    "hasty": NatureModifier(genki=GENKI_DOWN),
    "jolly": NatureModifier(ingredient=INGREDIENT_DOWN),
    "naive": NatureModifier(skill=SKILL_DOWN),
}


def normalize_nature_name(raw: str | None) -> str:
    """Normalize a nature key for table lookup."""
    if raw is None:
        return ""
    return str(raw).strip().lower()


def nature_for(key: str | None, table: dict[str, NatureModifier] | None = None) -> NatureModifier:
    """Return the nature modifier for a key, falling back to DEFAULT_NATURE."""
    natures = NATURE_MODIFIERS if table is None else table
    return natures.get(normalize_nature_name(key), DEFAULT_NATURE)
