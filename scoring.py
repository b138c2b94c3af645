# scoring.py - Score Tracking
"""
Per-round scoring plus the process-wide best score.
"""

from __future__ import annotations

from typing import Callable

from logger import get_logger
from models import Obstacle

log = get_logger("scoring")


def update(queue: list[Obstacle], bird_x: float, score: int) -> int:
    """Count every pipe whose trailing edge has just scrolled past the bird."""
    for obstacle in queue:
        if not obstacle.passed and obstacle.right < bird_x:
            obstacle.passed = True
            score += 1
    return score


class HighScoreTracker:
    """Owns the best score and decides when it has to be written out."""

    def __init__(self, best: int, save: Callable[[int], bool]) -> None:
        self.best = best
        self.pending = False  # Record set but not yet on disk
        self._save = save

    def finalize(self, score: int) -> bool:
        """
        Compare a finished round against the best score.

        A strictly greater score becomes the new best and is written once.
        Returns True when the round set a new record.
        """
        if score <= self.best:
            return False
        log.info("new record: %d (previous %d)", score, self.best)
        self.best = score
        self.pending = True
        self.flush()
        return True

    def flush(self) -> None:
        """Write the best score if a record is still pending."""
        if not self.pending:
            return
        if self._save(self.best):
            self.pending = False
