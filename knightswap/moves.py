from __future__ import annotations

from typing import List, Optional, Set, Tuple

from knightswap.types import (
    Board,
    EMPTY,
    Move,
    Position,
    Side,
    in_bounds,
    all_positions,
)

# The eight knight jumps as (d_row, d_col)
KNIGHT_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-2, -1), (-2, 1),
    (-1, -2), (-1, 2),
    (1, -2), (1, 2),
    (2, -1), (2, 1),
)


def knight_targets(pos: Position) -> List[Position]:
    """Squares on the board a knight on ``pos`` could jump to."""
    targets: List[Position] = []
    for dr, dc in KNIGHT_OFFSETS:
        nr, nc = pos.row + dr, pos.col + dc
        if in_bounds(nr, nc):
            targets.append(Position(nr, nc))
    return targets


def is_attacked(board: Board, pos: Position, by_side: Side) -> bool:
    """True if a knight of ``by_side`` sits one jump away from ``pos``."""
    symbol = by_side.symbol
    for target in knight_targets(pos):
        if board[target.row][target.col] == symbol:
            return True
    return False


class MoveGenerator:
    """Generates legal knight moves for a board and the side to move.

    A move is legal when the start square holds a knight of the side to move,
    the end square is empty and one knight jump away, and no enemy knight
    attacks the end square.
    """

    def is_legal_from(self, board: Board, side: Side, row: int, col: int) -> bool:
        if not in_bounds(row, col):
            return False
        return board[row][col] == side.symbol

    def is_legal_move(self, board: Board, side: Side, move: Move) -> bool:
        start, end = move.start, move.end
        if not self.is_legal_from(board, side, start.row, start.col):
            return False
        if board[end.row][end.col] != EMPTY:
            return False
        if not end.is_knight_move(start):
            return False
        return not is_attacked(board, end, side.opponent())

    def legal_moves(self, board: Board, side: Side) -> Set[Move]:
        moves: Set[Move] = set()
        for start in all_positions():
            if board[start.row][start.col] != side.symbol:
                continue
            for end in knight_targets(start):
                move = Move(start, end)
                if self.is_legal_move(board, side, move):
                    moves.add(move)
        return moves


# ============================
# Text notation
# ============================
def parse_move_str(s: str) -> Optional[Move]:
    """Parse ``"startRow startCol endRow endCol"`` into a move.

    Returns None for anything other than four in-bounds integers.
    """
    if s is None:
        return None
    parts: List[str] = s.split()
    if len(parts) != 4:
        return None
    try:
        sr, sc, er, ec = (int(p) for p in parts)
    except ValueError:
        return None
    if not (in_bounds(sr, sc) and in_bounds(er, ec)):
        return None
    return Move(Position(sr, sc), Position(er, ec))


def move_to_str(move: Move) -> str:
    """Convert a move to its ``"r c r c"`` notation."""
    return f"{move.start.row} {move.start.col} {move.end.row} {move.end.col}"
