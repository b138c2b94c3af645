# world.py - Obstacle Stream
"""
Scrolls, retires and spawns the pipes of a round.
"""

from __future__ import annotations

import random

from config import (BIRD_CLEARANCE, BIRD_HEIGHT, GAP_MARGIN, INITIAL_PIPES,
                    PIPE_GAP, PIPE_SPEED, PIPE_WIDTH, SPAWN_INTERVAL)
from logger import get_logger
from models import Obstacle

log = get_logger("world")


class WorldGenerator:
    """Produces the obstacle stream for a screen of the given size."""

    def __init__(self, width: int, height: int, rng: random.Random | None = None,
                 *, gap_height: int = PIPE_GAP, margin: int = GAP_MARGIN,
                 speed: float = PIPE_SPEED, spawn_interval: int = SPAWN_INTERVAL,
                 pipe_width: int = PIPE_WIDTH) -> None:
        if gap_height < BIRD_HEIGHT + BIRD_CLEARANCE:
            raise ValueError(f"gap of {gap_height} rows cannot fit the bird")
        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.gap_height = gap_height
        self.margin = margin
        self.speed = speed
        self.spawn_interval = spawn_interval
        self.pipe_width = pipe_width

    def populate(self, queue: list[Obstacle], count: int = INITIAL_PIPES) -> None:
        """Fill an empty queue with the opening pipes, starting mid-screen."""
        for i in range(count):
            queue.append(self._make(self.width // 2 + i * self.spawn_interval))

    def tick(self, queue: list[Obstacle], elapsed_ticks: int) -> None:
        """Scroll every obstacle, drop those fully off-screen, spawn when due."""
        for obstacle in queue:
            obstacle.x -= self.speed

        # Queue is in screen order, so retired pipes are always at the front
        while queue and queue[0].is_offscreen():
            queue.pop(0)

        if not queue:
            queue.append(self._make(self.width))
            log.debug("tick %d: spawned pipe into empty queue", elapsed_ticks)
        elif self.width - queue[-1].x >= self.spawn_interval:
            queue.append(self._make(queue[-1].x + self.spawn_interval))
            log.debug("tick %d: spawned pipe at x=%.1f", elapsed_ticks, queue[-1].x)

    def gap_range(self) -> tuple[int, int]:
        """Inclusive bounds for a gap's first row."""
        low = self.margin
        high = self.height - self.margin - self.gap_height
        return low, max(low, high)

    def _make(self, x: float) -> Obstacle:
        low, high = self.gap_range()
        gap_start = self.rng.randint(low, high)
        return Obstacle(x=float(x), gap_start=gap_start,
                        gap_end=gap_start + self.gap_height, width=self.pipe_width)
