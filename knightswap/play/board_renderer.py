"""
Text rendering of the board for the console game.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from knightswap.play.constants import DARK_KNIGHT_GLYPH, EMPTY_GLYPH, LIGHT_KNIGHT_GLYPH
from knightswap.state import PuzzleState
from knightswap.types import COLS, EMPTY, Position, Side


class BoardRenderer:
    """Renders a PuzzleState as lines of text."""

    def __init__(self, use_unicode: bool = True, show_coordinates: bool = True):
        self.use_unicode = use_unicode
        self.show_coordinates = show_coordinates

    def glyph(self, cell: str) -> str:
        if not self.use_unicode:
            return cell
        if cell == Side.LIGHT.symbol:
            return LIGHT_KNIGHT_GLYPH
        if cell == Side.DARK.symbol:
            return DARK_KNIGHT_GLYPH
        return EMPTY_GLYPH if cell == EMPTY else cell

    def render(self, state: PuzzleState, highlights: Optional[Iterable[Position]] = None) -> str:
        marked = set(highlights or ())
        lines: List[str] = []
        if self.show_coordinates:
            lines.append("  " + " ".join(str(c) for c in range(COLS)))
        for r, row in enumerate(state.board):
            cells = []
            for c, cell in enumerate(row):
                cells.append("*" if Position(r, c) in marked else self.glyph(cell))
            prefix = f"{r} " if self.show_coordinates else ""
            lines.append(prefix + " ".join(cells))
        return "\n".join(lines)


def render_board(state: PuzzleState, use_unicode: bool = True, show_coordinates: bool = True) -> str:
    return BoardRenderer(use_unicode, show_coordinates).render(state)
