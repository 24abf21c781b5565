"""
World state management for the Laser Arena.

This module provides:
- BoardState: Cell storage and laser damage
- Roster: The four combatants
- MatchState: Everything one match owns
"""

from .board import BoardState, Tile
from .roster import Roster
from .match_state import MatchState

__all__ = [
    "BoardState",
    "Tile",
    "Roster",
    "MatchState",
]
