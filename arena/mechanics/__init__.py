"""
Mechanics module - Action resolution systems.

This module provides resolvers for match actions:
- TurnSequencer: Cycles the active turn and counts rounds
- RayCaster: Resolves laser shots against the first obstruction
- ActionResolver: Resolves move / shield / shoot actions
- VictoryConditions: Checks for the last combatant standing

All resolvers except the TurnSequencer are stateless - they take a
MatchState and return results without modifying their own state.
"""

from .turns import TurnSequencer, TurnAdvance
from .raycast import RayCaster, ShotResult
from .resolver import ActionResolver, ActionResult
from .victory import VictoryConditions, VictoryResult

__all__ = [
    "TurnSequencer",
    "TurnAdvance",
    "RayCaster",
    "ShotResult",
    "ActionResolver",
    "ActionResult",
    "VictoryConditions",
    "VictoryResult",
]
