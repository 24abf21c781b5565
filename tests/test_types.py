import pytest

from arena.core.actions import Command
from arena.core.types import ActionType, Direction, Side, TURN_ORDER, start_position


def test_opposite_is_total_and_involutive():
    pairs = {
        Direction.UP: Direction.DOWN,
        Direction.DOWN: Direction.UP,
        Direction.LEFT: Direction.RIGHT,
        Direction.RIGHT: Direction.LEFT,
    }
    for direction, opposite in pairs.items():
        assert direction.opposite is opposite
        assert direction.opposite.opposite is direction


def test_unit_vectors_use_screen_rows():
    assert Direction.UP.unit_vector == (-1, 0)
    assert Direction.DOWN.unit_vector == (1, 0)
    assert Direction.LEFT.unit_vector == (0, -1)
    assert Direction.RIGHT.unit_vector == (0, 1)


def test_turn_order_and_start_positions():
    assert TURN_ORDER == (Side.UP, Side.LEFT, Side.DOWN, Side.RIGHT)
    assert start_position(Side.UP) == (0, 5)
    assert start_position(Side.LEFT) == (5, 0)
    assert start_position(Side.DOWN) == (10, 5)
    assert start_position(Side.RIGHT) == (5, 10)


def test_side_display_names():
    assert Side.UP.display_name == "Player A (Up)"
    assert Side.RIGHT.display_name == "Player D (Right)"
    assert Side.LEFT.home_direction is Direction.LEFT


def test_command_from_dict_parses_wire_names():
    command = Command.from_dict({"actor": "up", "action": "shoot", "direction": "down"})
    assert command == Command.shoot(Side.UP, Direction.DOWN)
    assert Command.from_json(command.to_json()) == command
    assert command.to_dict() == {"actor": "up", "action": "shoot", "direction": "down"}


@pytest.mark.parametrize(
    "data",
    [
        {"actor": "up", "action": "dance", "direction": "down"},
        {"actor": "north", "action": "move", "direction": "down"},
        {"actor": "up", "action": "move", "direction": "sideways"},
        {"actor": "up", "action": "move"},
    ],
)
def test_command_from_dict_rejects_bad_input(data):
    with pytest.raises(ValueError):
        Command.from_dict(data)


def test_action_type_parse_accepts_enum():
    assert ActionType.parse(ActionType.SHIELD) is ActionType.SHIELD
    assert ActionType.parse("MOVE") is ActionType.MOVE
