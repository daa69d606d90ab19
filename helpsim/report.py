from __future__ import annotations

from helpsim.berries import round_half_up
from helpsim.daily import DailyResult

NO_INGREDIENTS = "(no ingredients)"


def summary_lines(result: DailyResult) -> list[str]:
    """Return the headline numbers of a daily result, one per line."""
    return [
        f"help time: {result.effective_help_time:.1f} s (standard: {result.standard_help_time} s)",
        f"berry energy (normal): {round_half_up(result.berry_energy_per_day)} energy/day",
        f"berry energy (berries only): {round_half_up(result.berry_only_energy_per_day)} energy/day",
        f"skill activations: {result.skill_per_day:.2f} /day",
        f"ingredient energy: {result.ingredient_energy_per_day:.1f} energy/day",
        f"TOTAL ENERGY: {result.total_energy_per_day} energy/day",
    ]


def ingredient_table_lines(result: DailyResult) -> list[str]:
    """Return a fixed-width per-ingredient breakdown table."""
    headers = ("ingredient", "count/day", "energy/day")
    rows = [
        (name, f"{yield_.count:.2f}", f"{yield_.energy:.1f}")
        for name, yield_ in result.ingredients.items()
    ]
    if not rows:
        return [NO_INGREDIENTS]

    widths = [max(len(headers[i]), *(len(row[i]) for row in rows)) for i in range(3)]
    lines = [
        f"{headers[0]:<{widths[0]}}  {headers[1]:>{widths[1]}}  {headers[2]:>{widths[2]}}",
        "  ".join("-" * w for w in widths),
    ]
    for name, count, energy in rows:
        lines.append(f"{name:<{widths[0]}}  {count:>{widths[1]}}  {energy:>{widths[2]}}")
    return lines


def format_report(result: DailyResult) -> str:
    lines = summary_lines(result)
    lines.append("")
    lines.append("ingredients per day:")
    lines.extend(f"  {line}" for line in ingredient_table_lines(result))
    return "\n".join(lines)
