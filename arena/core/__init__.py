"""
Core types and constants for the Laser Arena.
"""

# Instead of from arena.core.types import Direction, you can do: from arena.core import Direction
from .types import (
    GridPos,
    Direction,
    Side,
    ActionType,
    Phase,
    TileKind,
    BlockHit,
    TURN_ORDER,
)
from .actions import Command
from .events import Event, EventKind, EffectRecord, EffectKind


__all__ = [
    "GridPos",
    "Direction",
    "Side",
    "ActionType",
    "Phase",
    "TileKind",
    "BlockHit",
    "TURN_ORDER",
    "Command",
    "Event",
    "EventKind",
    "EffectRecord",
    "EffectKind",
]
