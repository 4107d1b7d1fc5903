"""Opponent AI.

Paddle two chases the ball vertically with no prediction. The only
randomness in the simulation is the opponent's speed, redrawn after every
paddle collision test; it lives in SpeedRandomizer so tests can seed or
replace it.
"""
import random
from typing import Optional

from pong.config import AI_SPEED_MAX, AI_SPEED_MIN
from pong.entities import Ball, Paddle


class SpeedRandomizer:
    """Draws opponent speeds uniformly from ``[min, max) * factor``.

    Args:
        rng: Random source (a fresh ``random.Random`` if omitted)
        seed: Seed for the fresh random source; ignored when ``rng`` is given
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        speed_min: float = AI_SPEED_MIN,
        speed_max: float = AI_SPEED_MAX,
    ):
        self._rng = rng if rng is not None else random.Random(seed)
        self.speed_min = speed_min
        self.speed_max = speed_max

    def draw(self, factor: float) -> float:
        """Draw a new opponent speed for a difficulty factor."""
        base = self._rng.random() * (self.speed_max - self.speed_min) + self.speed_min
        return base * factor


def track_ball(paddle: Paddle, ball: Ball, surface_height: float) -> None:
    """Move the paddle one speed step toward the ball.

    Moves up while the ball is above the paddle's top edge, down while it
    is below the bottom edge, and holds otherwise. The paddle may overshoot
    and oscillate around the ball by up to one step.
    """
    if ball.y < paddle.top:
        paddle.move(-paddle.speed, surface_height)
    elif ball.y > paddle.bottom:
        paddle.move(paddle.speed, surface_height)


def randomize_speed(paddle: Paddle, randomizer: SpeedRandomizer, factor: float) -> float:
    """Redraw the opponent paddle speed. Returns the new speed."""
    paddle.speed = randomizer.draw(factor)
    return paddle.speed
