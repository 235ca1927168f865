"""
The Knight Swap puzzle state.

Dark knights start on row 0, light knights on row 3, and light moves first.
The puzzle is solved once the two rows have been fully exchanged.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence, Set, Tuple

from knightswap.moves import MoveGenerator, parse_move_str
from knightswap.types import (
    Board,
    Cell,
    COLS,
    EMPTY,
    IllegalMoveError,
    Move,
    OutOfBoundsError,
    ROWS,
    Side,
    in_bounds,
)

logger = logging.getLogger(__name__)

_generator = MoveGenerator()


def initial_board() -> Board:
    """Initial position: Dark on row 0, Light on row 3."""
    b: Board = [[EMPTY] * COLS for _ in range(ROWS)]
    b[0] = [Side.DARK.symbol] * COLS
    b[ROWS - 1] = [Side.LIGHT.symbol] * COLS
    return b


def _check_layout(rows: Sequence[Sequence[str]]) -> None:
    if len(rows) != ROWS or any(len(r) != COLS for r in rows):
        raise ValueError(f"layout must be {ROWS} rows of {COLS} symbols")
    allowed = {EMPTY, Side.LIGHT.symbol, Side.DARK.symbol}
    for r in rows:
        bad = set(r) - allowed
        if bad:
            raise ValueError(f"unknown board symbols: {sorted(bad)}")


class PuzzleState:
    """Board contents plus the side to move.

    ``apply_move`` is the only mutating operation; it re-validates the move
    and leaves the state untouched when the move is rejected.
    """

    def __init__(self, board: Optional[Board] = None, current_side: Side = Side.LIGHT) -> None:
        if board is not None:
            _check_layout(board)
        self.board: Board = [row[:] for row in board] if board is not None else initial_board()
        self.current_side: Side = current_side

    @classmethod
    def from_rows(cls, rows: Sequence[str], current_side: Side = Side.LIGHT) -> "PuzzleState":
        """Build a state from four strings of ``L``, ``D`` and ``.`` symbols."""
        return cls([list(r) for r in rows], current_side)

    # -------- Queries --------

    def piece_at(self, row: int, col: int) -> Cell:
        if not in_bounds(row, col):
            raise OutOfBoundsError(f"Invalid position ({row}, {col}) for a {ROWS}x{COLS} board")
        return self.board[row][col]

    def get_current_side(self) -> Side:
        return self.current_side

    def is_solved(self) -> bool:
        light, dark = Side.LIGHT.symbol, Side.DARK.symbol
        top_swapped = all(cell == light for cell in self.board[0])
        bottom_swapped = all(cell == dark for cell in self.board[ROWS - 1])
        return top_swapped and bottom_swapped

    def is_legal_from(self, row: int, col: int) -> bool:
        """Whether (row, col) holds a knight of the side to move.

        Out-of-range coordinates report False instead of raising.
        """
        return _generator.is_legal_from(self.board, self.current_side, row, col)

    def is_legal_move(self, move: Move) -> bool:
        return _generator.is_legal_move(self.board, self.current_side, move)

    def is_legal_move_str(self, text: str) -> bool:
        move = parse_move_str(text)
        return move is not None and self.is_legal_move(move)

    def legal_moves(self) -> Set[Move]:
        return _generator.legal_moves(self.board, self.current_side)

    # -------- Mutation --------

    def apply_move(self, move: Move) -> None:
        if not self.is_legal_move(move):
            raise IllegalMoveError(f"Illegal move {move} for {self.current_side.name}")
        start, end = move.start, move.end
        piece = self.board[start.row][start.col]
        self.board[start.row][start.col] = EMPTY
        self.board[end.row][end.col] = piece
        logger.debug("%s moved %s", self.current_side.name, move)
        self.current_side = self.current_side.opponent()

    def clone(self) -> "PuzzleState":
        return PuzzleState(self.board, self.current_side)

    # -------- Identity --------

    def key(self) -> Tuple[Side, Tuple[Cell, ...]]:
        """Hashable key capturing board layout and side to move."""
        flattened = tuple(cell for row in self.board for cell in row)
        return (self.current_side, flattened)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PuzzleState):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def __str__(self) -> str:
        lines = [f"Current turn: {self.current_side.name}", "Board:"]
        for row in self.board:
            lines.append("".join(f"{cell} " for cell in row))
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        rows = ", ".join(repr("".join(row)) for row in self.board)
        return f"PuzzleState([{rows}], {self.current_side})"


__all__ = [
    "PuzzleState",
    "initial_board",
]
