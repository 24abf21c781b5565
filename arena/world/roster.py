"""
Roster - The fixed set of four combatants.

The roster never grows or shrinks during a match; eliminated combatants stay
in place with zero HP so turn-order indices remain stable.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence

from ..core.types import Side, TURN_ORDER
from ..entities.combatant import Combatant


class Roster:
    """
    Combatants stored in turn order.

    Mutation of combatant fields is left to the mechanics resolvers; the
    roster itself only answers queries.
    """

    def __init__(self, combatants: Sequence[Combatant]):
        """
        Initialize a roster.

        Args:
            combatants: One combatant per side, in turn order

        Raises:
            ValueError: If sides are missing, duplicated or out of order
        """
        sides = tuple(c.side for c in combatants)
        if sides != TURN_ORDER:
            raise ValueError(f"Roster must list sides in turn order {TURN_ORDER}, got {sides}")

        self._combatants: List[Combatant] = list(combatants)
        self._by_side: Dict[Side, Combatant] = {c.side: c for c in self._combatants}

    @classmethod
    def create_default(cls) -> Roster:
        """All four combatants at their start positions with full HP."""
        return cls([Combatant.at_start(side) for side in TURN_ORDER])

    def __len__(self) -> int:
        return len(self._combatants)

    def __iter__(self):
        return iter(self._combatants)

    def get(self, side: Side) -> Combatant:
        """Get the combatant for a side."""
        return self._by_side[side]

    def active_combatant(self, index: int) -> Combatant:
        """Get the combatant at a turn-order index."""
        return self._combatants[index]

    def combatant_at(self, row: int, col: int) -> Optional[Combatant]:
        """
        First living combatant at a cell.

        Returns:
            Combatant if the cell is occupied, None otherwise
        """
        for combatant in self._combatants:
            if combatant.alive and combatant.row == row and combatant.col == col:
                return combatant
        return None

    def alive_combatants(self) -> List[Combatant]:
        """Living combatants in turn order."""
        return [c for c in self._combatants if c.alive]

    def to_dict(self) -> List[Dict[str, Any]]:
        return [c.to_dict() for c in self._combatants]

    def __str__(self) -> str:
        return f"Roster(alive={len(self.alive_combatants())}/{len(self._combatants)})"
