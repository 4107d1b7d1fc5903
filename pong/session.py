"""
Game session.

Applies normalized input events to a simulation context and keeps the
loop driver in step with the state machine. Every operation returns a
bool; False means the request was not legal in the current state (or
carried an unknown difficulty) and nothing changed.
"""

from typing import Optional

from pong.context import SimulationContext, surface_size_ok
from pong.entities import PaddleDirection
from pong.game_state import GameEvent, GameState
from pong.input import InputCommand, InputEvent
from pong.logging import get_logger
from pong.loop import FrameScheduler, LoopDriver
from pong.skins.base import NullSkin, PongSkin

log = get_logger('session')


class GameSession:
    """Core facade used by the host.

    Args:
        context: Simulation context (a default one if omitted)
        scheduler: Frame scheduler driven by the host
        skin: Render/audio collaborator
    """

    def __init__(
        self,
        context: Optional[SimulationContext] = None,
        scheduler: Optional[FrameScheduler] = None,
        skin: Optional[PongSkin] = None,
    ):
        self.context = context if context is not None else SimulationContext()
        self.scheduler = scheduler if scheduler is not None else FrameScheduler()
        self.skin = skin if skin is not None else NullSkin()
        self.driver = LoopDriver(
            self.context,
            self.scheduler,
            skin=self.skin,
            on_fault=self._on_fault,
        )
        self.restart_count = 0

    @property
    def state(self) -> GameState:
        return self.context.state

    # =========================================================================
    # Event dispatch
    # =========================================================================

    def handle(self, event: InputEvent) -> bool:
        """Apply one input event."""
        command = event.command

        if command == InputCommand.START:
            return self.start()
        if command == InputCommand.PAUSE_TOGGLE:
            return self.toggle_pause()
        if command == InputCommand.MOVE_UP:
            return self.move(PaddleDirection.UP)
        if command == InputCommand.MOVE_DOWN:
            return self.move(PaddleDirection.DOWN)
        if command == InputCommand.STOP_MOVE:
            return self.move(PaddleDirection.NONE)
        if command == InputCommand.SET_DIFFICULTY:
            return self.set_difficulty(event.difficulty)
        if command == InputCommand.RESIZE:
            return self.resize(event.width, event.height)
        if command == InputCommand.RESTART:
            return self.restart()

        log.warning("Unhandled input command: %s", command)
        return False

    # =========================================================================
    # State transitions
    # =========================================================================

    def boot(self) -> bool:
        """Leave INIT for the start menu."""
        if self.state != GameState.INIT:
            return False
        return self.context.state_machine.transition(GameEvent.START)

    def start(self) -> bool:
        """Handle START.

        INIT goes to the menu, the menu starts a new match, a paused match
        resumes, and game over plays again.
        """
        state = self.state
        if state == GameState.INIT:
            return self.boot()
        if state == GameState.PAUSED:
            return self._resume_with(GameEvent.START)
        if state == GameState.GAME_OVER:
            return self.restart()
        if state != GameState.MENU:
            log.debug("START ignored in %s", state.name)
            return False

        self.context.new_match()
        if not self.context.state_machine.transition(GameEvent.START):
            return False

        log.info("Match started (difficulty=%s)", self.context.difficulty.value)
        self.driver.start()
        self.skin.toggle_background_music(True)
        return True

    def pause(self) -> bool:
        if not self.context.state_machine.transition(GameEvent.PAUSE):
            return False
        self.context.paddle_one.direction = PaddleDirection.NONE
        self.skin.toggle_background_music(False)
        log.info("Paused at %s", self.context.scores)
        return True

    def resume(self) -> bool:
        return self._resume_with(GameEvent.RESUME)

    def _resume_with(self, event: GameEvent) -> bool:
        if not self.context.state_machine.transition(event):
            return False
        self.driver.start()
        self.skin.toggle_background_music(True)
        log.info("Resumed")
        return True

    def toggle_pause(self) -> bool:
        """Pause a running match or resume a paused one."""
        if self.context.state_machine.is_playing:
            return self.pause()
        if self.context.state_machine.is_paused:
            return self.resume()
        return False

    def reset(self) -> bool:
        """Return to the menu from pause or game over."""
        if not self.context.state_machine.transition(GameEvent.RESET):
            return False
        self.skin.toggle_background_music(False)
        return True

    def restart(self) -> bool:
        """Reset to the menu and immediately start a fresh match."""
        if not self.reset():
            return False
        return self.start()

    # =========================================================================
    # Input and environment
    # =========================================================================

    def move(self, direction: PaddleDirection) -> bool:
        """Set the human paddle's direction. Ignored unless PLAYING."""
        if not self.context.state_machine.is_playing:
            return False
        self.context.paddle_one.direction = direction
        return True

    def set_difficulty(self, difficulty: Optional[str]) -> bool:
        """Select the difficulty for the next match.

        Rejected while a match is running or paused so the match keeps the
        difficulty it started with. Unknown identifiers are ignored.
        """
        if self.context.state_machine.match_in_progress:
            log.debug("Difficulty change ignored during a match")
            return False
        if difficulty is None or not self.context.set_difficulty(difficulty):
            log.debug("Unknown difficulty %r ignored", difficulty)
            return False
        log.info("Difficulty set to %s", self.context.difficulty.value)
        return True

    def resize(self, width: Optional[int], height: Optional[int]) -> bool:
        """Adopt a new surface size, pausing a running match first.

        Sizes below the minimum surface size are ignored.

        Returns:
            True if the size was applied
        """
        if width is None or height is None:
            return False
        if not surface_size_ok(width, height):
            log.warning("Resize to %dx%d ignored, surface too small", width, height)
            return False

        if self.context.state_machine.is_playing:
            self.pause()

        self.context.resize(width, height)
        log.info("Surface resized to %dx%d", width, height)
        self.skin.draw(self.context.snapshot())
        return True

    def _on_fault(self, exc: Exception) -> None:
        """Hard restart of the match after a simulation fault."""
        self.restart_count += 1
        log.error("Restarting match after fault: %s", exc)
        self.context.new_match()
        self.driver.start()
