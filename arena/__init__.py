"""
Laser Arena - four-sided turn-based grid combat engine.

Quick start:
    from arena import MatchController, Command, Side, Direction

    controller = MatchController()
    controller.start()
    controller.submit(Command.shoot(Side.UP, Direction.DOWN))
"""

from .core import (
    Direction,
    Side,
    ActionType,
    Phase,
    Command,
    Event,
    EventKind,
    EffectRecord,
)
from .world import BoardState, Roster, MatchState
from .entities import Combatant
from .controller import MatchController, TurnOutcome

__all__ = [
    "Direction",
    "Side",
    "ActionType",
    "Phase",
    "Command",
    "Event",
    "EventKind",
    "EffectRecord",
    "BoardState",
    "Roster",
    "MatchState",
    "Combatant",
    "MatchController",
    "TurnOutcome",
]
