import pytest

from helpsim.berries import berry_count, berry_growth, calc_berry_energy, round_half_up


def test_reference_berry_energy():
    """Base 20 at level 1 with no bonuses should yield exactly 20."""
    assert calc_berry_energy(1, 20, 1, 1.0, 0, 0, "none", "none", "none") == 20


@pytest.mark.parametrize("level", [1, 2, 10, 30, 31, 45, 60, 75, 100])
def test_growth_is_max_of_linear_and_compound(level):
    """Growth should always take the larger of the two curves."""
    base = 20
    linear = base + (level - 1)
    compound = base * 1.025 ** (level - 1)
    assert berry_growth(base, level) == max(linear, compound)


def test_growth_curves_cross():
    """Linear dominates at low level, compound at high level."""
    assert berry_growth(20, 1) == 20
    assert berry_growth(20, 2) == 21
    assert berry_growth(20, 60) == pytest.approx(20 * 1.025 ** 59)


def test_round_half_up():
    """Halves should round up, unlike Python's banker's rounding."""
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(1.4) == 1
    assert round_half_up(1.6) == 2


@pytest.mark.parametrize(
    "specialty, skill_count, expected",
    [
        ("none", 0, 1),
        ("ingredient", 0, 1),
        ("skill", 0, 1),
        ("berry", 0, 2),
        ("all", 0, 2),
        ("berry", 1, 3),
    ],
)
def test_berry_count(specialty, skill_count, expected):
    """Berry and all specialists pick one extra berry per help."""
    assert berry_count(1, specialty, skill_count) == expected


def test_berry_specialist_doubles_single_berry():
    """A berry specialist with one base berry should get twice the energy."""
    assert calc_berry_energy(1, 20, 1, 1.0, 0, 0, "none", "berry", "none") == 40
    assert calc_berry_energy(1, 20, 1, 1.0, 1, 0, "none", "all", "none") == 60


def test_exberry_requires_active_ex():
    """The EX berry bonus only applies with main or sub EX mode."""
    assert calc_berry_energy(1, 20, 1, 1.0, 0, 0, "exberry", "none", "main") == 24
    assert calc_berry_energy(1, 20, 1, 1.0, 0, 0, "exberry", "none", "sub") == 24
    assert calc_berry_energy(1, 20, 1, 1.0, 0, 0, "exberry", "none", "none") == 20
    assert calc_berry_energy(1, 20, 1, 1.0, 0, 0, "exskill", "none", "main") == 20


def test_field_affinity_and_bonus():
    """Field affinity and field bonus percent both multiply before rounding."""
    assert calc_berry_energy(1, 20, 1, 2.0, 0, 0, "none", "none", "none") == 40
    assert calc_berry_energy(1, 20, 1, 1.0, 0, 50, "none", "none", "none") == 30
    # 25 * 1.1 = 27.5 -> 28
    assert calc_berry_energy(1, 25, 1, 1.0, 0, 10, "none", "none", "none") == 28
