from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Iterable, List, Optional

from config import ensure_dirs, get_config, load_config_from_file, setup_logging
from knightswap import ScoreBoard, move_to_str, parse_move_str
from knightswap.play import BoardRenderer, GameSession

logger = logging.getLogger(__name__)

HELP_TEXT = """Enter a move as four numbers: startRow startCol endRow endCol (e.g. "3 0 1 1").
Commands: moves, undo, reset, top, help, quit"""


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Play the Knight Swap puzzle in the console")
    ap.add_argument("--name", default=None, help="Player name for the score board")
    ap.add_argument("--scores", default=None, help="Score file path")
    ap.add_argument("--config", default=None, help="JSON configuration file")
    ap.add_argument("--plain", action="store_true", help="Draw pieces as letters")
    return ap.parse_args(argv)


def print_leaderboard(scores: ScoreBoard, limit: int, out: Callable[[str], None]) -> None:
    ranked = scores.ranked_scores(limit)
    if not ranked:
        out("No scores yet.")
        return
    out("Rank  Player               Moves")
    for row in ranked:
        out(f"{row.rank:>4}  {row.player_score.player_name:<20} {row.player_score.best_score:>5}")


def run_console(session: GameSession, renderer: BoardRenderer, lines: Iterable[str],
                out: Callable[[str], None] = print, leaderboard_size: int = 10) -> None:
    """Drive a session from text lines until quit, end of input, or a solve."""
    out(HELP_TEXT)
    out(renderer.render(session.state))
    out(f"{session.current_side.name} to move.")

    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        command = line.lower()

        if command in ("quit", "exit", "q"):
            out("Bye.")
            return
        if command == "help":
            out(HELP_TEXT)
            continue
        if command == "moves":
            legal = sorted(session.state.legal_moves(), key=lambda m: (m.start, m.end))
            out("Legal moves: " + (", ".join(move_to_str(m) for m in legal) or "none"))
            continue
        if command == "undo":
            out("Move undone." if session.undo_move() else "Nothing to undo.")
            out(renderer.render(session.state))
            continue
        if command == "reset":
            session.reset()
            out(renderer.render(session.state))
            continue
        if command == "top":
            if session.score_board is None:
                out("No score board attached.")
            else:
                print_leaderboard(session.score_board, leaderboard_size, out)
            continue

        move = parse_move_str(line)
        if move is None:
            out(f"Could not read '{line}' as a move. Type 'help' for the format.")
            continue
        if not session.try_move(move):
            out("Invalid move! Try again.")
            continue

        out(renderer.render(session.state))
        if session.is_solved:
            out(f"Congratulations {session.player_name}! Puzzle solved in {session.moves_made} moves.")
            best = session.best_score()
            if best is not None:
                out(f"Your best: {best} moves.")
            return
        out(f"Moves: {session.moves_made}. {session.current_side.name} to move.")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    cfg = load_config_from_file(args.config) if args.config else get_config()
    if args.scores:
        cfg.scores.score_file = args.scores
    setup_logging(cfg.logging.log_level)
    ensure_dirs(cfg)

    name = args.name or cfg.scores.default_player_name
    scores = ScoreBoard(cfg.scores.score_file)
    session = GameSession(name, scores)
    renderer = BoardRenderer(use_unicode=cfg.ui.use_unicode and not args.plain,
                             show_coordinates=cfg.ui.show_coordinates)
    logger.info("The application has been started.")
    run_console(session, renderer, sys.stdin, print, cfg.scores.leaderboard_size)
    return 0


if __name__ == "__main__":
    sys.exit(main())
