from arena.core.events import EventKind
from arena.core.types import ActionType, Direction, Phase, Side
from arena.core.validation import allowed_commands
from arena.mechanics import ActionResolver
from arena.world import MatchState


def test_move_updates_position_and_aim():
    state = MatchState()
    up = state.roster.get(Side.UP)

    result = ActionResolver().resolve(state, up, ActionType.MOVE, Direction.DOWN)

    assert result.consumed
    assert up.pos == (1, 5)
    assert up.aim is Direction.DOWN
    assert [e.kind for e in result.events] == [EventKind.MOVED]
    assert result.events[0].payload == {"direction": "down", "from": [0, 5], "to": [1, 5]}


def test_move_off_board_rejected(state_snapshot):
    state = MatchState()
    before = state_snapshot(state)

    result = ActionResolver().resolve(state, state.roster.get(Side.UP), ActionType.MOVE, Direction.UP)

    assert not result.consumed
    assert result.failure_reason == "OUT_OF_BOUNDS"
    assert result.events[0].kind is EventKind.MOVE_REJECTED
    assert state_snapshot(state) == before


def test_move_into_block_rejected():
    state = MatchState()
    left = state.roster.get(Side.LEFT)

    result = ActionResolver().resolve(state, left, ActionType.MOVE, Direction.RIGHT)

    assert not result.consumed
    assert result.failure_reason == "BLOCKED"
    assert left.pos == (5, 0)


def test_move_into_living_combatant_rejected(make_state):
    state = make_state({Side.UP: {"pos": (4, 4)}, Side.LEFT: {"pos": (4, 5)}})
    up = state.roster.get(Side.UP)

    result = ActionResolver().resolve(state, up, ActionType.MOVE, Direction.RIGHT)

    assert not result.consumed
    assert result.failure_reason == "OCCUPIED"
    assert up.pos == (4, 4)


def test_move_onto_dead_combatant_allowed(make_state):
    state = make_state({Side.UP: {"pos": (4, 4)}, Side.LEFT: {"pos": (4, 5), "hp": 0}})
    up = state.roster.get(Side.UP)

    result = ActionResolver().resolve(state, up, ActionType.MOVE, Direction.RIGHT)

    assert result.consumed
    assert up.pos == (4, 5)


def test_shield_always_consumes():
    state = MatchState()
    left = state.roster.get(Side.LEFT)

    result = ActionResolver().resolve(state, left, ActionType.SHIELD, Direction.LEFT)

    assert result.consumed
    assert left.shield is Direction.LEFT
    assert result.events[0].kind is EventKind.SHIELD_REPOSITIONED


def test_cannot_shoot_through_own_shield(state_snapshot):
    state = MatchState()
    before = state_snapshot(state)

    result = ActionResolver().resolve(state, state.roster.get(Side.UP), ActionType.SHOOT, Direction.UP)

    assert not result.consumed
    assert result.failure_reason == "SHIELD_IN_WAY"
    assert result.events[0].kind is EventKind.SHOT_REJECTED
    assert state_snapshot(state) == before


def test_shoot_sets_aim_and_consumes():
    state = MatchState()
    up = state.roster.get(Side.UP)

    result = ActionResolver().resolve(state, up, ActionType.SHOOT, Direction.LEFT)

    assert result.consumed
    assert up.aim is Direction.LEFT
    assert result.shot is not None
    assert result.shot.outcome is EventKind.BEAM_MISS


def test_unknown_action_is_a_noop(state_snapshot):
    state = MatchState()
    before = state_snapshot(state)

    result = ActionResolver().resolve(state, state.roster.get(Side.UP), "dance", Direction.DOWN)

    assert not result.consumed
    assert result.events == []
    assert state_snapshot(state) == before


def test_allowed_commands_for_opening_turn():
    state = MatchState()
    state.phase = Phase.PLAYING
    commands = allowed_commands(state, state.roster.get(Side.UP))

    moves = {c.direction for c in commands if c.action is ActionType.MOVE}
    shots = {c.direction for c in commands if c.action is ActionType.SHOOT}
    shields = {c.direction for c in commands if c.action is ActionType.SHIELD}
    assert moves == {Direction.LEFT, Direction.DOWN, Direction.RIGHT}
    assert shots == {Direction.LEFT, Direction.DOWN, Direction.RIGHT}
    assert shields == set(Direction)
    assert allowed_commands(state, state.roster.get(Side.LEFT)) == []
