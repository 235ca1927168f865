"""
Headless interactive play: session, two-click selection and text rendering.
"""
from __future__ import annotations

from .constants import *
from .game_session import GameSession
from .selection import SelectionController, SelectionOutcome, SelectionResult, group_moves_by_start
from .board_renderer import BoardRenderer, render_board

__all__ = [
    # Constants
    "LIGHT_KNIGHT_GLYPH", "DARK_KNIGHT_GLYPH", "EMPTY_GLYPH",

    # Core components
    "GameSession",
    "SelectionController",
    "SelectionOutcome",
    "SelectionResult",
    "BoardRenderer",

    # Utility functions
    "group_moves_by_start",
    "render_board",
]
