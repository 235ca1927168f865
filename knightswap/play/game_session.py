"""
Game session management for interactive play.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from knightswap.scores import ScoreBoard
from knightswap.state import PuzzleState
from knightswap.types import IllegalMoveError, Move, Side

logger = logging.getLogger(__name__)


class GameSession:
    """One player's attempt at the puzzle: the live state, move count and history.

    The player name and score board are injected; a solved puzzle is recorded
    on the score board exactly once.
    """

    def __init__(self, player_name: str = "Guest", score_board: Optional[ScoreBoard] = None):
        self.player_name = player_name.strip() or "Guest"
        self.score_board = score_board
        self.state = PuzzleState()
        self.moves_made = 0
        self.last_move: Optional[Move] = None
        self.history: List[Tuple[PuzzleState, int, Optional[Move]]] = []
        self.score_recorded = False
        logger.info("Game session started for player: %s", self.player_name)

    def reset(self) -> None:
        """Reset the game to the starting position."""
        self.state = PuzzleState()
        self.moves_made = 0
        self.last_move = None
        self.history.clear()
        self.score_recorded = False
        logger.info("Game reset. Moves reset to 0 for player: %s", self.player_name)

    @property
    def current_side(self) -> Side:
        return self.state.current_side

    @property
    def is_solved(self) -> bool:
        return self.state.is_solved()

    def make_move(self, move: Move) -> None:
        """Apply a move; raises IllegalMoveError and changes nothing if it is not legal."""
        if self.is_solved:
            raise IllegalMoveError("The puzzle is already solved")

        snapshot = self.state.clone()
        self.state.apply_move(move)
        self.history.append((snapshot, self.moves_made, self.last_move))
        self.moves_made += 1
        self.last_move = move
        logger.info(
            "Move %s. Moves made: %d. Next side: %s.",
            move, self.moves_made, self.state.current_side.name,
        )

        if self.is_solved:
            logger.info("Puzzle solved in %d moves by %s.", self.moves_made, self.player_name)
            self._record_score()

    def try_move(self, move: Move) -> bool:
        """Apply a move if legal and report whether it was applied."""
        try:
            self.make_move(move)
        except IllegalMoveError as e:
            logger.warning("Illegal move attempted by %s: %s", self.player_name, e)
            return False
        return True

    def undo_move(self) -> bool:
        """Undo the last move and return success. A solved puzzle cannot be undone."""
        if not self.history or self.is_solved:
            return False
        self.state, self.moves_made, self.last_move = self.history.pop()
        logger.debug("Undo: back to %d moves, %s to move.", self.moves_made, self.state.current_side.name)
        return True

    def best_score(self) -> Optional[int]:
        if self.score_board is None:
            return None
        entry = self.score_board.get_player_score(self.player_name)
        return entry.best_score if entry is not None else None

    def _record_score(self) -> None:
        if self.score_recorded:
            return
        self.score_recorded = True
        if self.score_board is None:
            logger.debug("No score board attached; result for %s not stored.", self.player_name)
            return
        self.score_board.add_or_update(self.player_name, self.moves_made)
