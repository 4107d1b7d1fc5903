"""
Resize throttle.

Window systems report a stream of sizes while the user drags a window
edge. Each resize pauses the match and recentres the ball, so the host
passes sizes through this throttle: the first report opens a window, and
the latest size seen is delivered once the window has been open for
``interval`` seconds. Deliveries are therefore at least ``interval`` apart.
"""
import time
from typing import Callable, Optional, Tuple

Size = Tuple[int, int]


class ResizeThrottle:
    """Trailing-edge throttle for window sizes.

    Args:
        interval: Minimum seconds between deliveries
        clock: Time source in seconds (default: time.monotonic)
    """

    def __init__(
        self,
        interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        if interval < 0:
            raise ValueError(f"interval must be non-negative, got {interval}")
        self.interval = interval
        self._clock = clock
        self._pending: Optional[Size] = None
        self._window_start: Optional[float] = None

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def submit(self, width: int, height: int, now: Optional[float] = None) -> None:
        """Record a reported size. Opens a window if none is open."""
        if now is None:
            now = self._clock()
        self._pending = (width, height)
        if self._window_start is None:
            self._window_start = now

    def poll(self, now: Optional[float] = None) -> Optional[Size]:
        """Return the latest size if its window has elapsed, else None."""
        if self._pending is None or self._window_start is None:
            return None
        if now is None:
            now = self._clock()
        if now - self._window_start < self.interval:
            return None

        size = self._pending
        self._pending = None
        self._window_start = None
        return size
