import pytest

from helpsim.natures import DEFAULT_NATURE, NatureModifier
from helpsim.skills import calc_skill_per_day, final_skill_rate


def test_skill_per_day_base():
    """Without modifiers the rate is simply base rate times helps."""
    assert calc_skill_per_day(0.05, DEFAULT_NATURE, 0.0, "none", "none", 100) == pytest.approx(5.0)


def test_skill_rate_with_all_modifiers():
    """Nature, sub-skill and EX skill bonus should all multiply."""
    nature = NatureModifier(skill=1.2)
    assert final_skill_rate(0.05, nature, 0.18, "exskill", "main") == pytest.approx(0.0885)
    assert calc_skill_per_day(0.05, nature, 0.18, "exskill", "main", 100) == pytest.approx(8.85)


def test_exskill_needs_active_ex():
    """EX skill bonus is ignored without an active EX mode."""
    assert final_skill_rate(0.05, DEFAULT_NATURE, 0.0, "exskill", "none") == pytest.approx(0.05)
    assert final_skill_rate(0.05, DEFAULT_NATURE, 0.0, "exberry", "main") == pytest.approx(0.05)


@pytest.mark.parametrize("helps", [0.0, 10.0, 65.2, 120.0])
def test_skill_scales_linearly_with_helps(helps):
    """Doubling helps per day doubles skill activations."""
    nature = NatureModifier(skill=0.8)
    single = calc_skill_per_day(0.04, nature, 0.1, "exskill", "sub", helps)
    double = calc_skill_per_day(0.04, nature, 0.1, "exskill", "sub", helps * 2)
    assert double == pytest.approx(single * 2)
