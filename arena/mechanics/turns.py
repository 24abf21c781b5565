"""
TurnSequencer - Whose turn it is, and which round.

The sequencer walks the fixed four-slot order, skipping eliminated
combatants. A round ends whenever the pointer wraps back to (or past) the
slot it started from.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple, TYPE_CHECKING

from ..core.types import Side, TURN_ORDER

if TYPE_CHECKING:
    from ..world.roster import Roster


@dataclass(frozen=True)
class TurnAdvance:
    """
    Result of advancing the turn pointer.

    Attributes:
        previous_index: Active index before the advance
        active_index: Active index after the advance
        round: Round number after the advance
        wrapped: True if the advance started a new round
    """
    previous_index: int
    active_index: int
    round: int
    wrapped: bool


class TurnSequencer:
    """
    Cyclic active-turn pointer with a round counter.

    Attributes:
        order: Fixed turn order of sides
        active_index: Index into `order` of the combatant to act
        round: Current round, starting at 1
    """

    def __init__(self, order: Tuple[Side, ...] = TURN_ORDER):
        self.order = order
        self.active_index = 0
        self.round = 1

    @property
    def active_side(self) -> Side:
        return self.order[self.active_index]

    def advance(self, roster: Roster) -> TurnAdvance:
        """
        Move the pointer to the next living combatant.

        Must only be called while at least two combatants are alive.

        Args:
            roster: Roster used to skip eliminated combatants

        Returns:
            TurnAdvance describing the move
        """
        before = self.active_index
        slots = len(self.order)
        candidate = before

        for _ in range(slots):
            candidate = (candidate + 1) % slots
            if roster.get(self.order[candidate]).alive:
                break

        self.active_index = candidate
        wrapped = candidate <= before
        if wrapped:
            self.round += 1

        return TurnAdvance(
            previous_index=before,
            active_index=candidate,
            round=self.round,
            wrapped=wrapped,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "order": [side.value for side in self.order],
            "active_index": self.active_index,
            "active": self.active_side.value,
            "round": self.round,
        }
