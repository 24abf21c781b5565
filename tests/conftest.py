from __future__ import annotations

import os

# Keep the API module from writing a log file when it is imported.
os.environ.setdefault("ARENA_LOG_FILE", "")

from typing import Any, Dict, Optional, Sequence

import pytest

from arena.core.types import Direction, Phase, Side
from arena.entities import Combatant
from arena.world import BoardState, MatchState, Roster

EMPTY_TEMPLATE = tuple(tuple(0 for _ in range(11)) for _ in range(11))

# Out-of-the-way cells for combatants a test does not care about
CORNERS = {
    Side.UP: (0, 0),
    Side.LEFT: (10, 0),
    Side.DOWN: (10, 10),
    Side.RIGHT: (0, 10),
}


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


def build_state(
    placements: Optional[Dict[Side, Dict[str, Any]]] = None,
    template: Sequence[Sequence[int]] = EMPTY_TEMPLATE,
    phase: Phase = Phase.PLAYING,
) -> MatchState:
    """
    Build a match with a custom board and combatant placement.

    Each placement may set `pos`, `hp`, `shield` and `aim`; sides that are not
    listed sit in a corner with default stats.
    """
    placements = placements or {}
    combatants = []
    for side in Side:
        placement = placements.get(side, {})
        row, col = placement.get("pos", CORNERS[side])
        home = side.home_direction
        combatants.append(Combatant(
            side=side,
            row=row,
            col=col,
            hp=placement.get("hp", 10),
            shield=placement.get("shield", home),
            aim=placement.get("aim", home),
        ))
    state = MatchState(board=BoardState.from_template(template), roster=Roster(combatants))
    state.phase = phase
    return state


@pytest.fixture
def make_state():
    return build_state


def template_with(blocks: Dict[tuple, int]) -> tuple:
    """Empty template with the given (row, col) -> strength blocks."""
    rows = [list(row) for row in EMPTY_TEMPLATE]
    for (row, col), strength in blocks.items():
        rows[row][col] = strength
    return tuple(tuple(row) for row in rows)


@pytest.fixture
def blocks_template():
    return template_with


def snapshot(state: MatchState) -> Dict[str, Any]:
    """Everything gameplay-relevant about a match, minus the log."""
    return {
        "phase": state.phase,
        "board": state.board.to_rows(),
        "combatants": state.roster.to_dict(),
        "turns": state.turns.to_dict(),
    }


@pytest.fixture
def state_snapshot():
    return snapshot


