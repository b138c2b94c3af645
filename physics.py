# physics.py - Bird Physics
"""
Fixed-step integration of the bird's vertical motion.
"""

from config import GRAVITY, JUMP_VELOCITY, TICK_SECONDS
from models import Bird


def advance(bird: Bird, jumped: bool, dt: float = TICK_SECONDS, *,
            screen_height: float, gravity: float = GRAVITY,
            jump_velocity: float = JUMP_VELOCITY) -> None:
    """
    Advance the bird by one tick.

    Gravity is applied first, then a jump replaces the velocity outright
    (jumps never stack), then the position is integrated and clamped to
    [0, screen_height - bird.height]. Hitting the top stops the bird; sitting
    on the bottom edge is left for the collision check to report.
    """
    bird.velocity += gravity * dt
    if jumped:
        bird.velocity = jump_velocity

    bird.y += bird.velocity * dt

    floor = screen_height - bird.height
    if bird.y < 0:
        bird.y = 0.0
        bird.velocity = 0.0  # No bounce off the ceiling
    elif bird.y > floor:
        bird.y = float(floor)
