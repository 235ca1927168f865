"""
Type definitions and protocols for the Knight Swap puzzle.

This module provides:
- Board geometry constants
- Value types for positions, sides and moves
- The error types raised by the core
- The protocol a state must satisfy to be searched
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Iterable, List, Protocol, TypeVar

# Board geometry
ROWS: int = 4
COLS: int = 3
EMPTY: str = '.'

# Type aliases
Cell = str  # one of EMPTY, Side.LIGHT.symbol, Side.DARK.symbol
Board = List[List[Cell]]

M = TypeVar('M', bound=Hashable)


class OutOfBoundsError(ValueError):
    """A coordinate pair lies outside the 4x3 board."""


class IllegalMoveError(ValueError):
    """A move was applied that the current state does not allow."""


def in_bounds(row: int, col: int) -> bool:
    """Whether (row, col) addresses a square on the board."""
    return 0 <= row < ROWS and 0 <= col < COLS


class Side(Enum):
    """The two knight colours. LIGHT starts on the bottom row and moves first."""

    LIGHT = 'L'
    DARK = 'D'

    @property
    def symbol(self) -> Cell:
        return self.value

    def opponent(self) -> "Side":
        return Side.DARK if self is Side.LIGHT else Side.LIGHT


@dataclass(frozen=True, order=True)
class Position:
    """Immutable, bounds-checked (row, col) coordinate on the board."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not in_bounds(self.row, self.col):
            raise OutOfBoundsError(
                f"Invalid position ({self.row}, {self.col}) for a {ROWS}x{COLS} board"
            )

    def is_knight_move(self, start: "Position") -> bool:
        """True if this square is one knight jump away from ``start``."""
        d_row = abs(self.row - start.row)
        d_col = abs(self.col - start.col)
        return (d_row, d_col) in ((2, 1), (1, 2))

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


@dataclass(frozen=True)
class Move:
    """A single knight relocation from ``start`` to ``end``."""

    start: Position
    end: Position

    def __str__(self) -> str:
        return f"{self.start} -> {self.end}"


def all_positions() -> Iterable[Position]:
    """Every square on the board in row-major order."""
    for r in range(ROWS):
        for c in range(COLS):
            yield Position(r, c)


class SearchableState(Protocol[M]):
    """Capabilities a state must expose to be explored by the search."""

    def is_solved(self) -> bool:
        ...

    def legal_moves(self) -> Iterable[M]:
        ...

    def apply_move(self, move: M) -> None:
        ...

    def clone(self) -> "SearchableState[M]":
        ...

    def __eq__(self, other: object) -> bool:
        ...

    def __hash__(self) -> int:
        ...
