# ticker.py - Fixed-Rate Game Clock
"""
Holds the game loop to a steady tick rate using pygame's clock.
Physics always steps by the fixed dt; a slow frame only delays rendering.
"""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")  # Keep stdout clean for curses

import pygame  # noqa: E402  Timing (pygame.time.Clock)

from config import TICK_RATE  # noqa: E402


class Ticker:
    """Produces ticks of fixed duration via pygame.time.Clock."""

    def __init__(self, rate: int = TICK_RATE) -> None:
        """Create the clock for the given number of ticks per second."""
        self.rate = rate
        self.dt: float = 1.0 / rate  # Seconds per tick, fed to physics
        self.interval_ms: float = 1000.0 / rate
        self._clock = pygame.time.Clock()

    def wait(self) -> int:
        """
        Sleep until the next tick boundary.

        Returns:
            int: Milliseconds since the previous call (includes the sleep).
        """
        return self._clock.tick(self.rate)

    @property
    def lagging(self) -> bool:
        """True if the last frame's own work took longer than one tick."""
        return self._clock.get_rawtime() > self.interval_ms
