from __future__ import annotations

# Piece glyphs
LIGHT_KNIGHT_GLYPH = "♘"  # white chess knight
DARK_KNIGHT_GLYPH = "♞"   # black chess knight
EMPTY_GLYPH = "·"         # middle dot

# Status messages
MSG_SELECTED = "Selected: {pos}. Choose target."
MSG_EMPTY_SQUARE = "Empty square! Select a piece."
MSG_NOT_YOUR_PIECE = "Not your piece! ({side} to move)"
MSG_CANCELLED = "Selection cancelled."
MSG_MOVED = "Moved {move}. {side} to move."
MSG_ILLEGAL = "Invalid move! Try again."
MSG_SOLVED = "Congratulations! Puzzle solved in {moves} moves."
MSG_GAME_OVER = "Puzzle already solved. Reset to play again."
