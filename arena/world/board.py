"""
BoardState - Cell storage for the arena.

The BoardState handles:
- Coordinate validation
- Tile lookup
- Laser damage to blocks

Coordinate System:
- Row increases DOWNWARD
- Col increases to the RIGHT
- Origin (0, 0) is at TOP-LEFT

Callers check `in_bounds` before any other accessor; out-of-bounds access
is a programming error and raises IndexError.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from ..core.types import (
    BOARD_TEMPLATE,
    INDESTRUCTIBLE,
    BlockHit,
    TileKind,
)


@dataclass
class Tile:
    """
    A single board cell.

    Attributes:
        kind: EMPTY or BLOCK
        strength: Remaining hits for a block, INDESTRUCTIBLE for permanent
                  blocks, None for empty cells
    """
    kind: TileKind = TileKind.EMPTY
    strength: Optional[int] = None

    @staticmethod
    def empty() -> Tile:
        return Tile(TileKind.EMPTY, None)

    @staticmethod
    def block(strength: int) -> Tile:
        if strength <= 0 and strength != INDESTRUCTIBLE:
            raise ValueError(f"Block strength must be positive or INDESTRUCTIBLE: {strength}")
        return Tile(TileKind.BLOCK, strength)

    @property
    def is_block(self) -> bool:
        return self.kind == TileKind.BLOCK

    @property
    def indestructible(self) -> bool:
        return self.is_block and self.strength == INDESTRUCTIBLE

    def encode(self) -> int:
        """Template encoding: 0 empty, -1 indestructible, n strength."""
        return self.strength if self.is_block else 0


class BoardState:
    """
    A fixed-size grid of tiles.

    Only laser damage mutates the board after construction.

    Attributes:
        rows: Number of rows
        cols: Number of columns
    """

    def __init__(self, cells: List[List[Tile]]):
        """
        Initialize a board from a rectangular tile matrix.

        Raises:
            ValueError: If the matrix is empty or ragged
        """
        if not cells or not cells[0]:
            raise ValueError("Board must have at least one cell")
        width = len(cells[0])
        if any(len(row) != width for row in cells):
            raise ValueError("Board rows must all have the same length")

        self.rows = len(cells)
        self.cols = width
        self._cells = cells

    @classmethod
    def from_template(cls, template: Sequence[Sequence[int]] = BOARD_TEMPLATE) -> BoardState:
        """
        Build a fresh board from a template of integer codes.

        Args:
            template: Rows of 0 (empty), -1 (indestructible) or n > 0 (strength)
        """
        cells = [
            [Tile.empty() if code == 0 else Tile.block(code) for code in row]
            for row in template
        ]
        return cls(cells)

    @classmethod
    def standard(cls) -> BoardState:
        """The fixed 11x11 arena layout."""
        return cls.from_template(BOARD_TEMPLATE)

    def in_bounds(self, row: int, col: int) -> bool:
        """
        Check if a position is within board boundaries.

        Args:
            row: Row index
            col: Column index

        Returns:
            True if position is valid, False otherwise
        """
        return 0 <= row < self.rows and 0 <= col < self.cols

    def tile_at(self, row: int, col: int) -> Tile:
        """
        Get the tile at a position.

        Raises:
            IndexError: If the position is off the board
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell out of bounds: ({row}, {col})")
        return self._cells[row][col]

    def is_block(self, row: int, col: int) -> bool:
        """Whether the in-bounds cell holds a block."""
        return self.tile_at(row, col).is_block

    def apply_damage(self, row: int, col: int) -> BlockHit:
        """
        Apply one point of laser damage to the block at a position.

        Indestructible blocks are left untouched. A destructible block loses
        one strength and is cleared to an empty cell when it reaches zero.

        Returns:
            BLOCKED, WEAKENED or DESTROYED

        Raises:
            IndexError: If the position is off the board
            ValueError: If the cell holds no block
        """
        tile = self.tile_at(row, col)
        if not tile.is_block:
            raise ValueError(f"No block to damage at ({row}, {col})")

        if tile.indestructible:
            return BlockHit.BLOCKED

        tile.strength -= 1
        if tile.strength <= 0:
            self._cells[row][col] = Tile.empty()
            return BlockHit.DESTROYED
        return BlockHit.WEAKENED

    def to_rows(self) -> List[List[int]]:
        """Encode the board back into template form."""
        return [[tile.encode() for tile in row] for row in self._cells]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize board to a JSON-friendly dict."""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "cells": self.to_rows(),
        }

    def __str__(self) -> str:
        """String representation."""
        return f"BoardState({self.rows}x{self.cols})"

    def __repr__(self) -> str:
        """Detailed representation."""
        blocks = sum(tile.is_block for row in self._cells for tile in row)
        return f"BoardState(rows={self.rows}, cols={self.cols}, blocks={blocks})"
