from __future__ import annotations

import sys

from helpsim.catalog import load_catalog
from helpsim.config import RunConfiguration
from helpsim.daily import compute_for_config
from helpsim.ingredients import unlocked_slots
from helpsim.natures import NATURE_MODIFIERS, normalize_nature_name
from helpsim.report import format_report


def main() -> int:
    """Run the daily calculation for a JSON run configuration."""
    if len(sys.argv) != 2:
        print("Usage: python -m helpsim.main path/to/config.json")
        return 2

    cfg = RunConfiguration.from_json_file(sys.argv[1])
    catalog = load_catalog()
    result = compute_for_config(cfg, catalog)
    profile = catalog.profile(cfg.helper)
    slots = cfg.ingredients if cfg.ingredients is not None else profile.ingredient_slots

    nature_key = normalize_nature_name(cfg.nature)
    if nature_key and nature_key not in NATURE_MODIFIERS:
        print(f"note: unknown nature '{cfg.nature}', using neutral modifiers")

    print(
        f"helper={profile.name} berry={profile.berry_type} specialty={profile.specialty} "
        f"level={cfg.level} nature={nature_key or 'neutral'}"
    )
    print(
        f"subskills: speed={cfg.subskills.speed} ingredient={cfg.subskills.ingredient} "
        f"skill={cfg.subskills.skill} berry_count={cfg.subskills.berry_count} team_bonus={cfg.team_bonus}"
    )
    print(
        f"field bonus={cfg.field.bonus_percent}% berry affinity={cfg.field.berry_affinity} "
        f"camp divisor={cfg.camp_divisor} ex={cfg.ex.type}/{cfg.ex.bonus}"
    )
    open_slots = unlocked_slots(cfg.level, slots)
    slot_summary = ", ".join(f"lv{s.unlock_level}={s.ingredient}" for s in open_slots)
    print(f"ingredient slots: {slot_summary or 'none'}\n")

    print(format_report(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
