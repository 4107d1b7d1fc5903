"""Paddle entity with vertical movement.

Paddle one follows keyboard direction; paddle two is steered by the
opponent AI. Both are clamped to the surface after every move.
"""

import math
from enum import Enum


class PaddleDirection(str, Enum):
    """Input direction for the human paddle."""
    UP = "up"
    DOWN = "down"
    NONE = "none"


class Paddle:
    """Vertical paddle anchored at a fixed X position.

    ``y`` is the top edge; the paddle spans ``[y, y + height]``.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        speed: float,
    ):
        """Initialize paddle.

        Args:
            x: Left edge X position
            y: Top edge Y position
            width: Paddle width
            height: Paddle height
            speed: Vertical speed in pixels/tick
        """
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.speed = speed
        self.direction = PaddleDirection.NONE

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.y) and math.isfinite(self.speed)

    def contains_y(self, y: float) -> bool:
        """Check whether a vertical position lies within the paddle span."""
        return self.y <= y <= self.y + self.height

    def clamp(self, surface_height: float) -> None:
        """Keep the paddle fully on the surface."""
        max_y = max(0.0, surface_height - self.height)
        self.y = max(0.0, min(max_y, self.y))

    def move(self, dy: float, surface_height: float) -> None:
        """Move by ``dy`` and clamp to the surface."""
        self.y += dy
        self.clamp(surface_height)

    def move_in_direction(self, surface_height: float) -> None:
        """Move one speed step in the current input direction."""
        if self.direction == PaddleDirection.UP:
            self.move(-self.speed, surface_height)
        elif self.direction == PaddleDirection.DOWN:
            self.move(self.speed, surface_height)

    def center_on(self, surface_height: float) -> None:
        """Center the paddle vertically and clear its input direction."""
        self.y = surface_height / 2 - self.height / 2
        self.direction = PaddleDirection.NONE
        self.clamp(surface_height)

    def __repr__(self) -> str:
        return (f"Paddle(x={self.x:.1f}, y={self.y:.2f}, speed={self.speed:.2f}, "
                f"direction={self.direction.value})")
