from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from helpsim.catalog import HelperCatalog, load_catalog
from helpsim.config import RunConfiguration
from helpsim.daily import compute_for_config

MAX_LEVEL = 100
SLOT_LEVELS = (30, 60)
DEFAULT_OUTPUT = "level_curve.png"


@dataclass(frozen=True)
class LevelCurve:
    levels: np.ndarray
    berry: np.ndarray
    ingredient: np.ndarray
    total: np.ndarray
    skill: np.ndarray


def _level_range(start: int, end: int) -> list[int]:
    """Return an inclusive level range, clamped to 1..MAX_LEVEL."""
    start = max(1, int(start))
    end = min(MAX_LEVEL, int(end))
    if end < start:
        raise ValueError(f"empty level range {start}..{end}")
    return list(range(start, end + 1))


def _parse_level_span(raw: str) -> tuple[int, int]:
    start, sep, end = raw.partition("-")
    if not sep:
        raise ValueError(f"level range must look like START-END, got '{raw}'")
    try:
        return int(start), int(end)
    except ValueError:
        raise ValueError(f"level range must look like START-END, got '{raw}'") from None


def _parse_args(argv: list[str]) -> tuple[str, str, tuple[int, int]]:
    """Parse CLI args into (config_path, output_path, (first_level, last_level))."""
    span = (1, MAX_LEVEL)
    args: list[str] = []
    idx = 1
    while idx < len(argv):
        arg = argv[idx]
        if arg == "--levels":
            if idx + 1 >= len(argv):
                raise ValueError("missing value for --levels")
            span = _parse_level_span(argv[idx + 1])
            idx += 2
            continue
        if arg.startswith("--levels="):
            span = _parse_level_span(arg.split("=", 1)[1])
            idx += 1
            continue
        args.append(arg)
        idx += 1

    if not args:
        raise ValueError("missing config path")
    if len(args) > 2:
        raise ValueError(f"unexpected argument '{args[2]}'")
    output_path = args[1] if len(args) > 1 else DEFAULT_OUTPUT
    return args[0], output_path, span


def _energy_curve(cfg: RunConfiguration, catalog: HelperCatalog, levels: list[int]) -> LevelCurve:
    berry: list[float] = []
    ingredient: list[float] = []
    total: list[int] = []
    skill: list[float] = []
    for level in levels:
        result = compute_for_config(replace(cfg, level=level), catalog)
        berry.append(result.berry_energy_per_day)
        ingredient.append(result.ingredient_energy_per_day)
        total.append(result.total_energy_per_day)
        skill.append(result.skill_per_day)
    return LevelCurve(
        levels=np.array(levels, dtype=int),
        berry=np.array(berry, dtype=float),
        ingredient=np.array(ingredient, dtype=float),
        total=np.array(total, dtype=float),
        skill=np.array(skill, dtype=float),
    )


def _best_level_gain(curve: LevelCurve) -> tuple[int, float]:
    """Return the level whose step from the previous level adds the most total energy."""
    if len(curve.levels) < 2:
        return int(curve.levels[0]), 0.0
    gains = np.diff(curve.total)
    idx = int(np.argmax(gains))
    return int(curve.levels[idx + 1]), float(gains[idx])


def main() -> int:
    try:
        config_path, output_path, (first_level, last_level) = _parse_args(sys.argv)
        levels = _level_range(first_level, last_level)
    except ValueError as exc:
        print(f"Error: {exc}")
        print("Usage: python -m helpsim.level_curve_app path/to/config.json [output.png] [--levels START-END]")
        return 2

    cfg = RunConfiguration.from_json_file(config_path)
    catalog = load_catalog()

    curve = _energy_curve(cfg, catalog, levels)
    best_level, best_gain = _best_level_gain(curve)

    print(f"helper: {cfg.helper} (configured level {cfg.level})")
    print(f"total energy/day at level {levels[0]}: {int(curve.total[0]):,}")
    print(f"total energy/day at level {levels[-1]}: {int(curve.total[-1]):,}")
    print(f"largest single-level gain: level {best_level} (+{best_gain:,.0f} energy/day)")

    fig, (energy_ax, skill_ax) = plt.subplots(2, 1, figsize=(10, 8), sharex=True)
    energy_ax.stackplot(
        curve.levels,
        curve.berry,
        curve.ingredient,
        labels=["berry energy", "ingredient energy"],
        alpha=0.6,
    )
    energy_ax.plot(curve.levels, curve.total, label="total energy", linewidth=2, color="black")
    for slot_level in SLOT_LEVELS:
        energy_ax.axvline(slot_level, color="grey", linestyle="--", linewidth=1)
    energy_ax.axvline(cfg.level, color="red", linewidth=1, label="configured level")
    energy_ax.set_title(f"{cfg.helper}: energy per day by level")
    energy_ax.set_ylabel("Energy / day")
    energy_ax.legend(loc="upper left")
    energy_ax.grid(True, alpha=0.2)

    skill_ax.plot(curve.levels, curve.skill, linewidth=2)
    skill_ax.set_xlabel("Level")
    skill_ax.set_ylabel("Skill activations / day")
    skill_ax.grid(True, alpha=0.2)

    output_path = str(Path(output_path))
    fig.tight_layout()
    fig.savefig(output_path, dpi=200)
    print(f"\nchart saved to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
