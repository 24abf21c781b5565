"""
Victory condition checking for the Laser Arena.

This module provides pure logic for determining the match outcome:
last combatant standing wins.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..world.match_state import MatchState
    from ..entities.combatant import Combatant


@dataclass
class VictoryResult:
    """
    Result of a victory condition check.

    Attributes:
        is_game_over: True once exactly one combatant remains
        reason: Human-readable explanation of the outcome
        winner: Surviving combatant (None while the match continues)
    """
    is_game_over: bool
    reason: str
    winner: Optional[Combatant] = None

    def __str__(self) -> str:
        """Human-readable representation."""
        if not self.is_game_over:
            return "Match in progress"
        return self.reason


class VictoryConditions:
    """
    Stateless checker for the match victory condition.

    Usage:
        result = VictoryConditions().check_all(state)

        if result.is_game_over:
            print(f"Winner: {result.winner.label()}")
    """

    def check_all(self, state: MatchState) -> VictoryResult:
        """
        Check all victory conditions.

        Only called after a consumed action, before the turn advances.
        """
        return self.check_last_standing(state)

    def check_last_standing(self, state: MatchState) -> VictoryResult:
        """
        The match ends when exactly one combatant is alive.

        Args:
            state: Current match state

        Returns:
            VictoryResult naming the survivor, or an in-progress result
        """
        alive = state.roster.alive_combatants()

        if len(alive) == 1:
            winner = alive[0]
            return VictoryResult(
                is_game_over=True,
                reason=f"{winner.label()} wins the match.",
                winner=winner,
            )

        return VictoryResult(
            is_game_over=False,
            reason=f"{len(alive)} combatants standing",
            winner=None,
        )
