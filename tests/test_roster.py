import pytest

from arena.core.types import DEFAULT_HP, Direction, Side
from arena.entities import Combatant
from arena.world import Roster


def test_default_roster_in_turn_order():
    roster = Roster.create_default()
    assert [c.side for c in roster] == [Side.UP, Side.LEFT, Side.DOWN, Side.RIGHT]
    up = roster.get(Side.UP)
    assert (up.row, up.col, up.hp) == (0, 5, DEFAULT_HP)
    assert up.shield is Direction.UP and up.aim is Direction.UP


def test_combatant_at_ignores_the_dead():
    roster = Roster.create_default()
    assert roster.combatant_at(5, 0).side is Side.LEFT
    roster.get(Side.LEFT).hp = 0
    assert roster.combatant_at(5, 0) is None
    assert roster.combatant_at(3, 3) is None


def test_alive_combatants_keep_turn_order():
    roster = Roster.create_default()
    roster.get(Side.LEFT).hp = 0
    assert [c.side for c in roster.alive_combatants()] == [Side.UP, Side.DOWN, Side.RIGHT]


def test_active_combatant_by_index():
    roster = Roster.create_default()
    assert roster.active_combatant(2).side is Side.DOWN


def test_roster_requires_turn_order():
    combatants = [Combatant.at_start(side) for side in reversed(list(Side))]
    with pytest.raises(ValueError):
        Roster(combatants)


def test_take_damage_clamps_and_reports_elimination():
    combatant = Combatant.at_start(Side.DOWN)
    combatant.hp = 1
    assert combatant.take_damage(3) is True
    assert combatant.hp == 0
    assert not combatant.alive
    assert combatant.take_damage(1) is False
