"""Knight Swap package: puzzle state, move rules, solver and score board.

Usage examples:
    from knightswap import PuzzleState, solve
    from knightswap import ScoreBoard
    from knightswap.play import GameSession, SelectionController
"""
from __future__ import annotations

# Core types
from .types import (
    ROWS,
    COLS,
    EMPTY,
    IllegalMoveError,
    Move,
    OutOfBoundsError,
    Position,
    SearchableState,
    Side,
)

# Rules
from .moves import (
    KNIGHT_OFFSETS,
    MoveGenerator,
    is_attacked,
    knight_targets,
    move_to_str,
    parse_move_str,
)
from .state import PuzzleState, initial_board

# Search
from .search import BreadthFirstSearch, SearchNode, SearchStats, SearchStrategy, get_search_strategy, solve

# Persistence
from .scores import PlayerScore, RankedPlayerScore, ScoreBoard

__version__ = "1.0.0"
