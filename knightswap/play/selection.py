"""
Two-click move selection: pick a knight, then pick its destination.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, List, Optional, Set

from knightswap.play.constants import (
    MSG_CANCELLED,
    MSG_EMPTY_SQUARE,
    MSG_GAME_OVER,
    MSG_ILLEGAL,
    MSG_MOVED,
    MSG_NOT_YOUR_PIECE,
    MSG_SELECTED,
    MSG_SOLVED,
)
from knightswap.play.game_session import GameSession
from knightswap.types import EMPTY, Move, Position

logger = logging.getLogger(__name__)


def group_moves_by_start(moves: Set[Move]) -> Dict[Position, List[Move]]:
    """Group moves by their starting square."""
    result: Dict[Position, List[Move]] = {}
    for move in sorted(moves, key=lambda m: (m.start, m.end)):
        result.setdefault(move.start, []).append(move)
    return result


class SelectionOutcome(Enum):
    SELECTED = auto()
    EMPTY_SQUARE = auto()
    NOT_YOUR_PIECE = auto()
    CANCELLED = auto()
    MOVED = auto()
    ILLEGAL_MOVE = auto()
    SOLVED = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class SelectionResult:
    outcome: SelectionOutcome
    message: str
    move: Optional[Move] = None


class SelectionController:
    """State machine with two states: nothing selected, or a piece selected.

    ``select_square`` is the single input event. With nothing selected it
    picks up a knight of the side to move; with a piece selected it either
    cancels (same square) or attempts the move.
    """

    def __init__(self, session: GameSession):
        self.session = session
        self.selected: Optional[Position] = None

    @property
    def has_selection(self) -> bool:
        return self.selected is not None

    def destinations(self) -> List[Position]:
        """Legal target squares for the selected knight."""
        if self.selected is None:
            return []
        moves = group_moves_by_start(self.session.state.legal_moves())
        return [m.end for m in moves.get(self.selected, [])]

    def cancel(self) -> None:
        self.selected = None

    def select_square(self, pos: Position) -> SelectionResult:
        if self.session.is_solved:
            self.selected = None
            return SelectionResult(SelectionOutcome.GAME_OVER, MSG_GAME_OVER)
        if self.selected is None:
            return self._pick_up(pos)
        if pos == self.selected:
            self.selected = None
            logger.info("Selection at %s cancelled.", pos)
            return SelectionResult(SelectionOutcome.CANCELLED, MSG_CANCELLED)
        return self._move_to(self.selected, pos)

    def _pick_up(self, pos: Position) -> SelectionResult:
        state = self.session.state
        if state.is_legal_from(pos.row, pos.col):
            self.selected = pos
            logger.info("Piece selected at %s. Current side: %s.", pos, state.current_side.name)
            return SelectionResult(SelectionOutcome.SELECTED, MSG_SELECTED.format(pos=pos))
        if state.piece_at(pos.row, pos.col) == EMPTY:
            logger.debug("Clicked on empty square at %s.", pos)
            return SelectionResult(SelectionOutcome.EMPTY_SQUARE, MSG_EMPTY_SQUARE)
        logger.warning("Opponent's piece clicked at %s; %s to move.", pos, state.current_side.name)
        return SelectionResult(
            SelectionOutcome.NOT_YOUR_PIECE,
            MSG_NOT_YOUR_PIECE.format(side=state.current_side.name),
        )

    def _move_to(self, start: Position, pos: Position) -> SelectionResult:
        move = Move(start, pos)
        self.selected = None
        if not self.session.try_move(move):
            return SelectionResult(SelectionOutcome.ILLEGAL_MOVE, MSG_ILLEGAL, move)
        if self.session.is_solved:
            return SelectionResult(
                SelectionOutcome.SOLVED,
                MSG_SOLVED.format(moves=self.session.moves_made),
                move,
            )
        return SelectionResult(
            SelectionOutcome.MOVED,
            MSG_MOVED.format(move=move, side=self.session.current_side.name),
            move,
        )
