"""
Command definitions and utilities.

A command is what a player submits on their turn: who is acting, what they
do, and in which direction. This module provides:
- Command dataclass
- Command factory methods
- Command serialization
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any
import json

from .types import ActionType, Direction, Side


@dataclass(frozen=True)
class Command:
    """
    A single turn command addressed to one combatant.

    Use static factory methods for convenient construction:
        - Command.move(Side.UP, Direction.DOWN)
        - Command.shield(Side.LEFT, Direction.RIGHT)
        - Command.shoot(Side.DOWN, Direction.UP)

    Or parse wire input:
        - Command.from_dict({"actor": "up", "action": "shoot", "direction": "down"})
    """

    actor: Side
    action: ActionType
    direction: Direction

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert command to a JSON-serializable dictionary.

        Returns:
            Dictionary representation of the command
        """
        return {
            "actor": self.actor.value,
            "action": self.action.value,
            "direction": self.direction.key,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Command:
        """
        Create a command from a dictionary.

        Args:
            data: Dictionary containing 'actor', 'action' and 'direction'

        Returns:
            Command instance

        Raises:
            ValueError: If a key is missing or holds an unknown name
        """
        for key in ("actor", "action", "direction"):
            if key not in data:
                raise ValueError(f"Command dictionary must contain '{key}'")

        return cls(
            actor=Side.parse(data["actor"]),
            action=ActionType.parse(data["action"]),
            direction=Direction.parse(data["direction"]),
        )

    def to_json(self) -> str:
        """Convert command to JSON string."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> Command:
        """Create command from JSON string."""
        return cls.from_dict(json.loads(json_str))

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"{self.actor.display_name}: {self.action.name} {self.direction.name}"

    # FACTORY METHODS
    @staticmethod
    def move(actor: Side, direction: Direction) -> Command:
        """Create a MOVE command stepping one cell toward `direction`."""
        return Command(actor, ActionType.MOVE, direction)

    @staticmethod
    def shield(actor: Side, direction: Direction) -> Command:
        """Create a SHIELD command facing the shield toward `direction`."""
        return Command(actor, ActionType.SHIELD, direction)

    @staticmethod
    def shoot(actor: Side, direction: Direction) -> Command:
        """Create a SHOOT command firing the laser toward `direction`."""
        return Command(actor, ActionType.SHOOT, direction)
