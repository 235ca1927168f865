"""
Persistent score board: each player's fewest moves to solve the puzzle.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class PlayerScore(BaseModel):
    """A player's name and best (lowest) move count."""

    model_config = ConfigDict(populate_by_name=True)

    player_name: str = Field(alias="playerName", min_length=1)
    best_score: int = Field(alias="bestScore", ge=0)

    def __str__(self) -> str:
        return f"{self.player_name}: {self.best_score} score"


@dataclass(frozen=True)
class RankedPlayerScore:
    """A leaderboard row: a player score and its 1-based rank."""

    player_score: PlayerScore
    rank: int


class ScoreBoard:
    """Score store backed by a JSON file.

    The file holds a list of ``{"playerName": ..., "bestScore": ...}`` objects.
    A missing, empty or corrupt file yields an empty board.
    """

    def __init__(self, path: str = "scores.json") -> None:
        self.path = path
        self._scores: List[PlayerScore] = []
        self.load()

    def load(self) -> None:
        if not os.path.exists(self.path):
            logger.info("Score file '%s' not found. Starting with an empty score list.", self.path)
            self._scores = []
            return

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load scores from '%s': %s. Starting with an empty score list.", self.path, e)
            self._scores = []
            return

        if not isinstance(data, list):
            logger.warning("Score file '%s' does not hold a list, ignoring its contents.", self.path)
            self._scores = []
            return

        try:
            self._scores = [PlayerScore.model_validate(item) for item in data]
        except ValidationError as e:
            logger.error("Invalid score entry in '%s': %s. Starting with an empty score list.", self.path, e)
            self._scores = []
            return
        logger.info("Loaded %d player scores from '%s'.", len(self._scores), self.path)

    def save(self) -> None:
        """Write all scores to the file, creating its directory if needed."""
        parent = os.path.dirname(self.path)
        try:
            if parent and not os.path.exists(parent):
                os.makedirs(parent, exist_ok=True)
                logger.debug("Created directory for score file: %s", parent)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump([s.model_dump(by_alias=True) for s in self._scores], f, indent=2)
        except OSError as e:
            logger.error("Failed to save scores to '%s': %s", self.path, e)
            raise
        logger.info("Saved %d player scores to '%s'.", len(self._scores), self.path)

    def _save_after_change(self) -> None:
        try:
            self.save()
        except OSError:
            logger.warning("Score change kept in memory only; '%s' was not updated.", self.path)

    def add_or_update(self, player_name: str, moves: int) -> bool:
        """Record a result; returns True if the stored best changed."""
        existing = self.get_player_score(player_name)
        if existing is None:
            self._scores.append(PlayerScore(player_name=player_name, best_score=moves))
            logger.info("Added new player '%s' with initial score %d moves.", player_name, moves)
            self._save_after_change()
            return True

        if moves < existing.best_score:
            logger.debug(
                "Updating best score for player '%s': from %d to %d moves.",
                player_name, existing.best_score, moves,
            )
            existing.best_score = moves
            self._save_after_change()
            return True

        logger.debug(
            "Score for player '%s' (%d moves) is not better than existing best (%d moves).",
            player_name, moves, existing.best_score,
        )
        return False

    def get_player_score(self, player_name: str) -> Optional[PlayerScore]:
        for score in self._scores:
            if score.player_name == player_name:
                return score
        return None

    def top_scores(self, limit: int) -> List[PlayerScore]:
        """Best scores first; ties keep insertion order."""
        if limit <= 0:
            return []
        return sorted(self._scores, key=lambda s: s.best_score)[:limit]

    def ranked_scores(self, limit: int) -> List[RankedPlayerScore]:
        return [RankedPlayerScore(score, rank) for rank, score in enumerate(self.top_scores(limit), start=1)]

    def to_dict(self) -> Dict[str, int]:
        return {s.player_name: s.best_score for s in self._scores}

    def __len__(self) -> int:
        return len(self._scores)
