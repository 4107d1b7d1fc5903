"""Game states, events and the state machine that gates them.

The state machine is the single source of truth for whether a match is
running. Boolean views such as ``is_playing`` are derived from it and are
never stored separately.

Transition table:

    INIT       START  -> MENU
    MENU       START  -> PLAYING
    PLAYING    PAUSE  -> PAUSED
    PLAYING    WIN    -> GAME_OVER
    PLAYING    LOSE   -> GAME_OVER
    PAUSED     START  -> PLAYING
    PAUSED     RESUME -> PLAYING
    PAUSED     RESET  -> MENU
    GAME_OVER  RESET  -> MENU

Any other (state, event) pair is rejected: ``transition`` returns False
and the state is left untouched.
"""
from enum import Enum
from typing import Dict, Optional

from pong.logging import get_logger

log = get_logger('game_state')


class GameState(Enum):
    """Standard game states."""
    INIT = "init"
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class GameEvent(Enum):
    """Events that drive state transitions."""
    START = "start"
    PAUSE = "pause"
    RESUME = "resume"
    RESET = "reset"
    WIN = "win"
    LOSE = "lose"


TRANSITIONS: Dict[GameState, Dict[GameEvent, GameState]] = {
    GameState.INIT: {
        GameEvent.START: GameState.MENU,
    },
    GameState.MENU: {
        GameEvent.START: GameState.PLAYING,
    },
    GameState.PLAYING: {
        GameEvent.PAUSE: GameState.PAUSED,
        GameEvent.WIN: GameState.GAME_OVER,
        GameEvent.LOSE: GameState.GAME_OVER,
    },
    GameState.PAUSED: {
        GameEvent.START: GameState.PLAYING,
        GameEvent.RESUME: GameState.PLAYING,
        GameEvent.RESET: GameState.MENU,
    },
    GameState.GAME_OVER: {
        GameEvent.RESET: GameState.MENU,
    },
}


def next_state(state: GameState, event: GameEvent) -> Optional[GameState]:
    """Pure lookup of the transition table.

    Returns:
        The target state, or None if the pair is not in the table
    """
    return TRANSITIONS.get(state, {}).get(event)


class GameStateMachine:
    """Finite-state controller for one match context.

    Examples:
        >>> machine = GameStateMachine()
        >>> machine.transition(GameEvent.START)
        True
        >>> machine.state
        <GameState.MENU: 'menu'>
        >>> machine.transition(GameEvent.PAUSE)
        False
    """

    def __init__(self, initial: GameState = GameState.INIT):
        self._state = initial

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state == GameState.PLAYING

    @property
    def is_paused(self) -> bool:
        return self._state == GameState.PAUSED

    @property
    def is_game_over(self) -> bool:
        return self._state == GameState.GAME_OVER

    @property
    def match_in_progress(self) -> bool:
        """True while a match is running or paused."""
        return self._state in (GameState.PLAYING, GameState.PAUSED)

    def can_transition(self, event: GameEvent) -> bool:
        """Check whether ``event`` is accepted in the current state."""
        return next_state(self._state, event) is not None

    def transition(self, event: GameEvent) -> bool:
        """Apply an event.

        Args:
            event: Event triggering the transition

        Returns:
            True if the state changed, False if the pair was rejected
        """
        target = next_state(self._state, event)
        if target is None:
            log.debug("Rejected %s in %s", event.name, self._state.name)
            return False

        log.debug("%s --%s--> %s", self._state.name, event.name, target.name)
        self._state = target
        return True

    def __repr__(self) -> str:
        return f"GameStateMachine(state={self._state.name})"
