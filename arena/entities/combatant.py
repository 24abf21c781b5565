"""
Combatant entity - one of the four laser knights.

Combatants:
- Occupy one cell
- Carry a directional shield that absorbs hits from one side
- Aim their laser in the last direction they moved or fired
- Are marked dead (never removed) when their HP reaches zero
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

from ..core.types import Direction, GridPos, Side, DEFAULT_HP, start_position


@dataclass
class Combatant:
    """
    A combatant on the arena board.

    Attributes:
        side: Identity and turn-order slot
        row, col: Current cell
        hp: Remaining hit points (0..DEFAULT_HP)
        shield: Direction the shield currently faces
        aim: Direction the laser currently points
    """

    side: Side
    row: int
    col: int
    hp: int = DEFAULT_HP
    shield: Direction = Direction.UP
    aim: Direction = Direction.UP

    @classmethod
    def at_start(cls, side: Side) -> Combatant:
        """Create a combatant at its edge midpoint with default stats."""
        row, col = start_position(side)
        home = side.home_direction
        return cls(side=side, row=row, col=col, hp=DEFAULT_HP, shield=home, aim=home)

    @property
    def alive(self) -> bool:
        return self.hp > 0

    @property
    def pos(self) -> GridPos:
        return (self.row, self.col)

    def take_damage(self, amount: int) -> bool:
        """
        Reduce HP, clamping at zero.

        Returns:
            True if this hit eliminated the combatant
        """
        if not self.alive:
            return False
        self.hp = max(0, self.hp - amount)
        return self.hp == 0

    def label(self) -> str:
        return self.side.display_name

    def to_dict(self) -> Dict[str, Any]:
        """Serialize combatant to a JSON-friendly dict."""
        return {
            "side": self.side.value,
            "label": self.side.label,
            "name": self.side.display_name,
            "row": self.row,
            "col": self.col,
            "hp": self.hp,
            "shield": self.shield.key,
            "aim": self.aim.key,
            "alive": self.alive,
        }

    def __str__(self) -> str:
        state = "Alive" if self.alive else "Dead"
        return f"{self.label()} | HP {self.hp} | Shield {self.shield.key} | {state}"
