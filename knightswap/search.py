"""
Search interfaces and the breadth-first solver.
"""
from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Generic, List, Optional, Set, TypeVar

from knightswap.types import SearchableState

logger = logging.getLogger(__name__)

S = TypeVar('S', bound=SearchableState)


@dataclass(eq=False)
class SearchNode(Generic[S]):
    """A searched state, the node it was reached from, and the move taken."""

    state: S
    parent: Optional["SearchNode[S]"] = None
    move: Optional[Any] = None
    depth: int = 0

    def path(self) -> List[Any]:
        """Moves from the root to this node, in play order."""
        moves: List[Any] = []
        node: Optional[SearchNode[S]] = self
        while node is not None and node.parent is not None:
            moves.append(node.move)
            node = node.parent
        moves.reverse()
        return moves

    def states(self) -> List[S]:
        """States from the root to this node, inclusive."""
        states: List[S] = []
        node: Optional[SearchNode[S]] = self
        while node is not None:
            states.append(node.state)
            node = node.parent
        states.reverse()
        return states


@dataclass
class SearchStats:
    """Statistics from a single search run."""

    nodes_expanded: int = 0
    nodes_generated: int = 0
    max_frontier: int = 0
    elapsed: float = 0.0
    truncated: bool = False
    solution_length: Optional[int] = None


class SearchStrategy(ABC):
    """Abstract interface for puzzle search strategies."""

    @abstractmethod
    def search(self, start: S) -> Optional[SearchNode[S]]:  # pragma: no cover
        raise NotImplementedError


class BreadthFirstSearch(SearchStrategy):
    """Level-order search returning a solution with the fewest moves.

    States are deduplicated by equality; every expansion works on a fresh
    clone so nothing stored in the visited set is ever mutated.
    """

    def __init__(self, max_nodes: Optional[int] = None, log_progress_every: int = 1000) -> None:
        self.max_nodes = max_nodes
        self.log_progress_every = max(1, log_progress_every)
        self.stats = SearchStats()

    def search(self, start: S) -> Optional[SearchNode[S]]:
        self.stats = SearchStats()
        started = time.perf_counter()
        try:
            return self._search(start)
        finally:
            self.stats.elapsed = time.perf_counter() - started

    def _search(self, start: S) -> Optional[SearchNode[S]]:
        root: SearchNode[S] = SearchNode(state=start.clone())
        frontier: Deque[SearchNode[S]] = deque([root])
        visited: Set[S] = {root.state}
        self.stats.nodes_generated = 1

        while frontier:
            node = frontier.popleft()
            if node.state.is_solved():
                self.stats.solution_length = node.depth
                logger.info(
                    "Solution found at depth %d after expanding %d nodes",
                    node.depth, self.stats.nodes_expanded,
                )
                return node

            if self.max_nodes is not None and self.stats.nodes_expanded >= self.max_nodes:
                self.stats.truncated = True
                logger.warning("Search stopped after %d expanded nodes", self.stats.nodes_expanded)
                return None

            self.stats.nodes_expanded += 1
            if self.stats.nodes_expanded % self.log_progress_every == 0:
                logger.debug(
                    "Expanded %d nodes, frontier %d, visited %d",
                    self.stats.nodes_expanded, len(frontier), len(visited),
                )

            for move in node.state.legal_moves():
                child_state = node.state.clone()
                child_state.apply_move(move)
                if child_state in visited:
                    continue
                visited.add(child_state)
                frontier.append(SearchNode(state=child_state, parent=node, move=move, depth=node.depth + 1))
                self.stats.nodes_generated += 1

            if len(frontier) > self.stats.max_frontier:
                self.stats.max_frontier = len(frontier)

        logger.info("No solution: explored %d reachable states", len(visited))
        return None


def get_search_strategy(max_nodes: Optional[int] = None) -> SearchStrategy:
    """Factory for the default search strategy (breadth-first)."""
    return BreadthFirstSearch(max_nodes=max_nodes)


def solve(start: S, max_nodes: Optional[int] = None) -> Optional[SearchNode[S]]:
    """Run a breadth-first search from ``start``."""
    return BreadthFirstSearch(max_nodes=max_nodes).search(start)


__all__ = [
    "SearchNode",
    "SearchStats",
    "SearchStrategy",
    "BreadthFirstSearch",
    "get_search_strategy",
    "solve",
]
