"""
Loop driver and frame scheduler.

The host calls ``FrameScheduler.run_frame`` once per display frame. The
LoopDriver asks for one frame at a time and, when it runs, checks the
state machine first: outside PLAYING it does nothing and does not ask for
another frame, so a callback that arrives after a pause or game over
cancels itself.

While PLAYING each frame runs exactly one tick:

    physics -> collision -> scoring -> win-check

There is no catch-up; a long stall simply delays the next tick.
"""

import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from pong.context import SimulationContext
from pong.errors import PhysicsInvariantError
from pong.logging import get_logger
from pong.models import Side
from pong.physics import PhysicsResult, step_physics
from pong.scoring import evaluate_win, step_scoring
from pong.skins.base import NullSkin, PongSkin

log = get_logger('loop')

FrameCallback = Callable[[float], None]


@dataclass
class TickResult:
    """Everything one tick did, for effects and tests."""

    physics: PhysicsResult
    scored: Optional[Side] = None
    winner: Optional[Side] = None

    @property
    def paddle_hit(self) -> Optional[Side]:
        return self.physics.hit


def simulate_tick(context: SimulationContext) -> TickResult:
    """Run one tick of the pipeline on a context.

    Raises:
        PhysicsInvariantError: if the simulation produced a non-finite value
    """
    physics = step_physics(context)
    scored = step_scoring(context)
    winner = evaluate_win(context)
    return TickResult(physics=physics, scored=scored, winner=winner)


class FrameScheduler:
    """Queue of callbacks to run on the next frame.

    Callbacks requested while a frame is running are deferred to the
    following frame, so a callback that reschedules itself runs once per
    frame.
    """

    def __init__(self):
        self._pending: List[FrameCallback] = []

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: FrameCallback) -> None:
        """Run ``callback(timestamp)`` on the next frame."""
        self._pending.append(callback)

    def cancel_all(self) -> None:
        self._pending.clear()

    def run_frame(self, timestamp: Optional[float] = None) -> int:
        """Run every callback queued before this call.

        Args:
            timestamp: Frame time in seconds (default: monotonic clock)

        Returns:
            Number of callbacks run
        """
        if timestamp is None:
            timestamp = time.monotonic()

        callbacks = self._pending
        self._pending = []
        for callback in callbacks:
            callback(timestamp)
        return len(callbacks)


class LoopDriver:
    """Runs the simulation one tick per frame while the match is PLAYING.

    Args:
        context: Simulation context to advance
        scheduler: Frame scheduler supplied by the host
        skin: Render/audio collaborator (NullSkin if omitted)
        on_fault: Called with the error when the simulation faults
    """

    def __init__(
        self,
        context: SimulationContext,
        scheduler: FrameScheduler,
        skin: Optional[PongSkin] = None,
        on_fault: Optional[Callable[[PhysicsInvariantError], None]] = None,
    ):
        self.context = context
        self.scheduler = scheduler
        self.skin = skin if skin is not None else NullSkin()
        self.on_fault = on_fault

        self.tick_count = 0
        self.last_frame_time: Optional[float] = None
        self.last_result: Optional[TickResult] = None
        self.fault: Optional[PhysicsInvariantError] = None
        self._frame_pending = False

    @property
    def frame_pending(self) -> bool:
        return self._frame_pending

    def start(self) -> bool:
        """Ask for the next frame if the match is PLAYING.

        Does nothing if a frame is already pending, so pausing and
        resuming within one frame never creates a second loop.

        Returns:
            True if a new frame was requested
        """
        if not self.context.state_machine.is_playing:
            return False
        if self._frame_pending:
            return False

        self._request_frame()
        return True

    def _request_frame(self) -> None:
        self._frame_pending = True
        self.scheduler.request_frame(self._on_frame)

    def _on_frame(self, timestamp: float) -> None:
        self._frame_pending = False

        if not self.context.state_machine.is_playing:
            log.trace("Frame skipped in %s", self.context.state.name)
            return

        try:
            result = simulate_tick(self.context)
        except PhysicsInvariantError as exc:
            self.fault = exc
            log.exception("Simulation fault on tick %d", self.tick_count, exc=exc)
            if self.on_fault is not None:
                self.on_fault(exc)
            return

        self.tick_count += 1
        self.last_frame_time = timestamp
        self.last_result = result
        log.trace("Tick %d: ball=%r", self.tick_count, self.context.ball)

        self._play_effects(result)
        self.skin.draw(self.context.snapshot())

        if self.context.state_machine.is_playing:
            self._request_frame()

    def _play_effects(self, result: TickResult) -> None:
        if result.paddle_hit is not None:
            self.skin.play_hit_sound()

        if result.winner is not None:
            self.skin.toggle_background_music(False)
            if self.context.player_won:
                self.skin.play_game_won_sound()
            else:
                self.skin.play_game_over_sound()
