"""
MatchState - Everything one match owns.

The MatchState is a plain value held by a MatchController. Nothing about a
match lives at module level, so any number of matches can run side by side.

It does NOT handle:
- Action resolution (delegated to ActionResolver / RayCaster)
- Turn order (delegated to TurnSequencer)
- Win detection (delegated to VictoryConditions)
"""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Dict, List, Optional

from .board import BoardState
from .roster import Roster
from ..core.types import Phase, MATCH_LOG_SIZE
from ..entities.combatant import Combatant
from ..mechanics.turns import TurnSequencer


class MatchState:
    """
    The complete state of a single match.

    Attributes:
        phase: IDLE, PLAYING or FINISHED
        board: Board cells
        roster: The four combatants
        turns: Active-turn pointer and round counter
        winner: Last combatant standing once the match is finished
    """

    def __init__(
            self,
            board: Optional[BoardState] = None,
            roster: Optional[Roster] = None,
    ):
        """
        Initialize an idle match.

        Args:
            board: Starting board (standard arena if omitted)
            roster: Starting roster (default start positions if omitted)
        """
        self.phase: Phase = Phase.IDLE
        self.board = board if board is not None else BoardState.standard()
        self.roster = roster if roster is not None else Roster.create_default()
        self.turns = TurnSequencer()
        self.winner: Optional[Combatant] = None

        # Newest first; oldest entries fall off the end
        self._log: Deque[str] = deque(maxlen=MATCH_LOG_SIZE)

    # ========================================================================
    # TURN ACCESS
    # ========================================================================

    @property
    def round(self) -> int:
        return self.turns.round

    @property
    def active_index(self) -> int:
        return self.turns.active_index

    def active_combatant(self) -> Combatant:
        """Combatant whose command is currently accepted."""
        return self.roster.active_combatant(self.turns.active_index)

    # ========================================================================
    # MATCH LOG
    # ========================================================================

    def push_log(self, message: str) -> None:
        """Record a line at the front of the match log."""
        self._log.appendleft(message)

    @property
    def logs(self) -> List[str]:
        """Match log, newest first."""
        return list(self._log)

    # ========================================================================
    # UTILITY
    # ========================================================================

    def status_line(self) -> str:
        """One-line summary suitable for a status bar."""
        if self.phase == Phase.IDLE:
            return "Press Start Match."
        if self.phase == Phase.FINISHED:
            if self.winner is not None:
                return f"{self.winner.label()} wins."
            return "Match finished."
        active = self.active_combatant()
        return f"Active: {active.label()}. Choose command and direction."

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize match state to dictionary.

        Returns:
            JSON-serializable snapshot of the match
        """
        return {
            "phase": self.phase.value,
            "round": self.turns.round,
            "active": self.turns.active_side.value,
            "turns": self.turns.to_dict(),
            "winner": self.winner.side.value if self.winner else None,
            "status": self.status_line(),
            "board": self.board.to_dict(),
            "combatants": self.roster.to_dict(),
            "logs": self.logs,
        }

    def __str__(self) -> str:
        """String representation."""
        return (f"MatchState(phase={self.phase}, round={self.turns.round}, "
                f"active={self.turns.active_side}, {self.roster})")
