from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from config import get_config, load_config_from_file, setup_logging
from knightswap import BreadthFirstSearch, PuzzleState, move_to_str


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Find the shortest Knight Swap solution with breadth-first search")
    ap.add_argument("--max-nodes", type=int, default=None, help="Give up after expanding this many states")
    ap.add_argument("--config", default=None, help="JSON configuration file")
    ap.add_argument("--quiet", action="store_true", help="Only print the move count")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    cfg = load_config_from_file(args.config) if args.config else get_config()
    setup_logging(cfg.logging.log_level)

    max_nodes = args.max_nodes if args.max_nodes is not None else cfg.search.max_nodes
    initial = PuzzleState()
    searcher = BreadthFirstSearch(max_nodes=max_nodes, log_progress_every=cfg.search.log_progress_every)
    solution = searcher.search(initial)

    if solution is None:
        print("No solution found.")
        return 1

    moves = solution.path()
    print(f"Solution found in {len(moves)} moves.")
    if not args.quiet:
        side = initial.current_side
        for i, move in enumerate(moves, start=1):
            print(f"{i:3d}. {side.name:<5} {move_to_str(move)}   {move}")
            side = side.opponent()
        stats = searcher.stats
        print(f"Expanded {stats.nodes_expanded} states in {stats.elapsed:.3f}s.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
