"""
Core type definitions for the Laser Arena.

This module contains all fundamental types, enums, and constants used
throughout the system. No logic, just pure data structures.
"""

from __future__ import annotations
from enum import Enum
from typing import Tuple
from dataclasses import dataclass

# ============================================================================
# SPATIAL TYPES
# ============================================================================

# Grid position: (row, col) where:
# - Row increases DOWNWARD
# - Col increases to the RIGHT
# - Origin (0, 0) is at TOP-LEFT
GridPos = Tuple[int, int]

BOARD_ROWS = 11
BOARD_COLS = 11

# Block strength sentinel for cells that can never be destroyed
INDESTRUCTIBLE = -1

# 0 = empty, -1 = indestructible, n > 0 = destructible block of strength n
BOARD_TEMPLATE: Tuple[Tuple[int, ...], ...] = (
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 2, 0, 0, 0, 2, 0, 0, 0),
    (0, -1, 0, 0, 0, 1, 0, 0, 0, -1, 0),
    (2, 0, 1, 0, -1, 0, -1, 0, 1, 0, 2),
    (0, 0, 0, 0, 2, 0, 2, 0, 0, 0, 0),
    (0, 1, -1, 2, 0, 0, 0, 2, -1, 1, 0),
    (0, 0, 0, 0, 2, 0, 2, 0, 0, 0, 0),
    (2, 0, 1, 0, -1, 0, -1, 0, 1, 0, 2),
    (0, -1, 0, 0, 0, 1, 0, 0, 0, -1, 0),
    (0, 0, 0, 2, 0, 0, 0, 2, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
)

# ============================================================================
# COMBAT CONSTANTS
# ============================================================================

DEFAULT_HP = 10
LASER_DAMAGE = 1

# Visual effect lifetimes (milliseconds)
LASER_BEAM_DURATION_MS = 1000
HIT_FLASH_DURATION_MS = 700
HIT_SHAKE_DURATION_MS = 260
HIT_SHAKE_AMPLITUDE = 4.5

# Newest-first match log capacity
MATCH_LOG_SIZE = 14


class Direction(Enum):
    """
    Cardinal directions in screen coordinates (row grows downward).
    Each direction provides a unit vector (d_row, d_col).
    """
    UP = (-1, 0)
    LEFT = (0, -1)
    DOWN = (1, 0)
    RIGHT = (0, 1)

    @property
    def unit_vector(self) -> Tuple[int, int]:
        """Get the (d_row, d_col) step for this direction."""
        return self.value

    @property
    def opposite(self) -> Direction:
        """Get the direction pointing the other way."""
        d_row, d_col = self.value
        return Direction((-d_row, -d_col))

    @property
    def key(self) -> str:
        """Lowercase wire name ("up", "left", ...)."""
        return self.name.lower()

    @classmethod
    def parse(cls, raw: str | Direction) -> Direction:
        """
        Parse a direction from its wire name.

        Raises:
            ValueError: If the name is not one of up/left/down/right
        """
        if isinstance(raw, Direction):
            return raw
        try:
            return cls[str(raw).upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {raw!r}") from None

    def __str__(self) -> str:
        return self.key


class Side(Enum):
    """
    Combatant identity: the board edge a combatant starts on.

    Declaration order is the fixed turn order.
    """
    UP = "up"
    LEFT = "left"
    DOWN = "down"
    RIGHT = "right"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Short player letter shown on the HP badge."""
        return {
            Side.UP: "A",
            Side.LEFT: "B",
            Side.DOWN: "C",
            Side.RIGHT: "D",
        }[self]

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. 'Player A (Up)'."""
        return f"Player {self.label} ({self.value.title()})"

    @property
    def home_direction(self) -> Direction:
        """Direction of the edge this side starts on (initial shield and aim)."""
        return Direction[self.name]

    @classmethod
    def parse(cls, raw: str | Side) -> Side:
        """
        Parse a side from its wire name.

        Raises:
            ValueError: If the name is not a known side
        """
        if isinstance(raw, Side):
            return raw
        try:
            return cls(str(raw).lower())
        except ValueError:
            raise ValueError(f"Unknown combatant: {raw!r}") from None


TURN_ORDER: Tuple[Side, ...] = tuple(Side)


def start_position(side: Side) -> GridPos:
    """Midpoint of the combatant's home edge."""
    mid_row = BOARD_ROWS // 2
    mid_col = BOARD_COLS // 2
    return {
        Side.UP: (0, mid_col),
        Side.LEFT: (mid_row, 0),
        Side.DOWN: (BOARD_ROWS - 1, mid_col),
        Side.RIGHT: (mid_row, BOARD_COLS - 1),
    }[side]


# ============================================================================
# ACTIONS
# ============================================================================

class ActionType(Enum):
    """Types of actions a combatant can perform on its turn."""
    MOVE = "move"  # Step one cell
    SHIELD = "shield"  # Reposition the shield
    SHOOT = "shoot"  # Fire the laser

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: str | ActionType) -> ActionType:
        """
        Parse an action from its wire name.

        Raises:
            ValueError: If the name is not move/shield/shoot
        """
        if isinstance(raw, ActionType):
            return raw
        try:
            return cls(str(raw).lower())
        except ValueError:
            raise ValueError(f"Unknown action: {raw!r}") from None


# ============================================================================
# BOARD
# ============================================================================

class TileKind(Enum):
    """What occupies a board cell."""
    EMPTY = "empty"
    BLOCK = "block"

    def __str__(self) -> str:
        return self.value


class BlockHit(Enum):
    """Outcome of a laser striking a block."""
    BLOCKED = "blocked"  # Indestructible, unchanged
    WEAKENED = "weakened"  # Strength reduced, still standing
    DESTROYED = "destroyed"  # Cell is now empty

    def __str__(self) -> str:
        return self.value


# ============================================================================
# MATCH PHASE
# ============================================================================

class Phase(Enum):
    """Match lifecycle phase."""
    IDLE = "idle"
    PLAYING = "playing"
    FINISHED = "finished"

    def __str__(self) -> str:
        return self.value


# ============================================================================
# ACTION VALIDATION
# ============================================================================

@dataclass
class ActionValidation:
    """
    Structured result of validating a command or action.

    This provides detailed information about why an action is valid or invalid,
    enabling better error messages and debugging.

    Attributes:
        valid: Whether the action is valid
        error_code: Machine-readable error code (None if valid)
        message: Human-readable message explaining the result

    Error codes:
        - "NOT_PLAYING": Match is not in the playing phase
        - "NOT_ACTIVE": Command came from a combatant whose turn it is not
        - "ACTOR_DEAD": Addressed combatant has been eliminated
        - "OUT_OF_BOUNDS": Movement would leave the board
        - "BLOCKED": Movement target is a block
        - "OCCUPIED": Movement target holds a living combatant
        - "SHIELD_IN_WAY": Shot aimed through the shooter's own shield
    """
    valid: bool
    error_code: str | None = None
    message: str = ""

    @staticmethod
    def success(message: str = "") -> ActionValidation:
        """Create a validation success result."""
        return ActionValidation(valid=True, error_code=None, message=message)

    @staticmethod
    def fail(error_code: str, message: str) -> ActionValidation:
        """Create a validation failure result."""
        return ActionValidation(valid=False, error_code=error_code, message=message)
