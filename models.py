# models.py - Game Data Model
"""
Plain data objects shared by the physics, world, collision and scoring modules.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from config import BIRD_HEIGHT, BIRD_WIDTH, BIRD_X, PIPE_GAP, PIPE_WIDTH


class GameState(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"
    QUIT = "quit"


@dataclass
class Bird:
    """The player: moves only vertically, the world scrolls past it."""

    y: float  # Top edge, in screen rows
    velocity: float = 0.0  # Rows per second, positive = down
    x: int = BIRD_X
    width: int = BIRD_WIDTH
    height: int = BIRD_HEIGHT

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass
class Obstacle:
    """A pipe pair with a passable gap between gap_start and gap_end."""

    x: float  # Leading (left) edge, in columns
    gap_start: int  # First free row
    gap_end: int = -1  # Row where the lower pipe begins
    width: int = PIPE_WIDTH
    passed: bool = False

    def __post_init__(self) -> None:
        if self.gap_end < 0:
            self.gap_end = self.gap_start + PIPE_GAP

    @property
    def right(self) -> float:
        """Trailing edge."""
        return self.x + self.width

    def is_offscreen(self) -> bool:
        return self.right < 0

    def overlaps(self, x: float, width: float) -> bool:
        """True if the column span [x, x + width) intersects this obstacle."""
        return x + width > self.x and x < self.right


@dataclass
class GameSession:
    """Everything that belongs to one round."""

    bird: Bird
    obstacles: list[Obstacle] = field(default_factory=list)  # Spawn order = screen order
    elapsed_ticks: int = 0
    score: int = 0
    running: bool = True  # Cleared when the round ends; a stopped session never ticks


@dataclass(frozen=True)
class ObstacleView:
    x: float
    gap_start: int
    gap_end: int
    width: int


@dataclass(frozen=True)
class Snapshot:
    """Read-only copy of a session handed to the renderer."""

    width: int
    height: int
    bird_x: int
    bird_y: float
    obstacles: tuple[ObstacleView, ...]
    score: int
    high_score: int
    is_new_record: bool

    @classmethod
    def capture(cls, session: GameSession, width: int, height: int,
                high_score: int, is_new_record: bool) -> "Snapshot":
        views = tuple(ObstacleView(o.x, o.gap_start, o.gap_end, o.width)
                      for o in session.obstacles)
        return cls(width=width, height=height, bird_x=session.bird.x,
                   bird_y=session.bird.y, obstacles=views, score=session.score,
                   high_score=high_score, is_new_record=is_new_record)
