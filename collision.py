# collision.py - Collision Detection
"""
Tests the bird against the screen floor and the nearest overlapping pipe.
"""

from enum import Enum

from models import Bird, Obstacle


class CollisionResult(Enum):
    NONE = "none"
    HIT_GROUND = "hit_ground"
    HIT_OBSTACLE = "hit_obstacle"


def check(bird: Bird, queue: list[Obstacle], screen_height: float) -> CollisionResult:
    """Return the collision for this tick; anything but NONE ends the round."""
    if bird.bottom >= screen_height:
        return CollisionResult.HIT_GROUND

    for obstacle in queue:
        if not obstacle.overlaps(bird.x, bird.width):
            continue
        # First overlap is authoritative, the gap bounds are inclusive
        if bird.y < obstacle.gap_start or bird.bottom > obstacle.gap_end:
            return CollisionResult.HIT_OBSTACLE
        break

    return CollisionResult.NONE
