"""Ball entity with per-tick velocity integration.

The ball is an immutable value: every operation returns a new Ball,
and the simulation context swaps in the result.
"""

import math


class Ball:
    """Ball with position, fixed diameter and velocity in pixels/tick."""

    def __init__(
        self,
        x: float,
        y: float,
        size: float,
        vx: float = 0.0,
        vy: float = 0.0,
    ):
        """Initialize ball.

        Args:
            x: Center X position
            y: Center Y position
            size: Diameter (must be positive)
            vx: X velocity (pixels/tick)
            vy: Y velocity (pixels/tick)
        """
        if size <= 0:
            raise ValueError(f"Ball size must be positive, got {size}")
        self._x = x
        self._y = y
        self._size = size
        self._vx = vx
        self._vy = vy

    @property
    def x(self) -> float:
        """Get ball center X."""
        return self._x

    @property
    def y(self) -> float:
        """Get ball center Y."""
        return self._y

    @property
    def size(self) -> float:
        """Get ball diameter."""
        return self._size

    @property
    def radius(self) -> float:
        return self._size / 2

    @property
    def vx(self) -> float:
        return self._vx

    @property
    def vy(self) -> float:
        return self._vy

    @property
    def is_finite(self) -> bool:
        """True when position and velocity are all finite numbers."""
        return all(math.isfinite(v) for v in (self._x, self._y, self._vx, self._vy))

    def update(self) -> 'Ball':
        """Advance one tick along the current velocity.

        Returns:
            New Ball with updated position
        """
        return Ball(self._x + self._vx, self._y + self._vy, self._size, self._vx, self._vy)

    def set_position(self, x: float, y: float) -> 'Ball':
        return Ball(x, y, self._size, self._vx, self._vy)

    def set_velocity(self, vx: float, vy: float) -> 'Ball':
        return Ball(self._x, self._y, self._size, vx, vy)

    def bounce_horizontal(self) -> 'Ball':
        """Bounce off a paddle face (reverse X velocity)."""
        return Ball(self._x, self._y, self._size, -self._vx, self._vy)

    def bounce_vertical(self) -> 'Ball':
        """Bounce off the top or bottom wall (reverse Y velocity)."""
        return Ball(self._x, self._y, self._size, self._vx, -self._vy)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ball):
            return NotImplemented
        return (self._x, self._y, self._size, self._vx, self._vy) == (
            other._x, other._y, other._size, other._vx, other._vy
        )

    def __repr__(self) -> str:
        return (f"Ball(x={self._x:.2f}, y={self._y:.2f}, size={self._size}, "
                f"vx={self._vx:.2f}, vy={self._vy:.2f})")
