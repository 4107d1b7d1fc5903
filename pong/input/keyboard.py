"""
Keyboard input source.

Converts pygame keyboard events into InputEvent models. The meaning of
Enter depends on the current game state: it starts a match from the
menu, toggles pause during a match and plays again after game over.

Keys:
    Enter / Space   start, pause/resume, play again
    Up / Down       move paddle one (release stops it)
    R               restart the match (pause and game-over screens)
    1 / 2 / 3       select normal / hard / extreme difficulty
"""

import time
from typing import Dict, List, Optional

import pygame

from pong.difficulty import Difficulty
from pong.game_state import GameState

from .input_event import InputCommand, InputEvent

DIFFICULTY_KEYS: Dict[int, Difficulty] = {
    pygame.K_1: Difficulty.NORMAL,
    pygame.K_2: Difficulty.HARD,
    pygame.K_3: Difficulty.EXTREME,
}

MOVE_KEYS: Dict[int, InputCommand] = {
    pygame.K_UP: InputCommand.MOVE_UP,
    pygame.K_DOWN: InputCommand.MOVE_DOWN,
}

CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)


class KeyboardInputSource:
    """Keyboard-based input source using pygame events.

    Examples:
        >>> source = KeyboardInputSource()
        >>> source.process(event, GameState.MENU)
        >>> events = source.poll_events()
    """

    def __init__(self):
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        """Get events collected since the last poll and clear the queue."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def process(self, event: pygame.event.Event, state: GameState) -> None:
        """Translate one pygame event, queueing the result if any."""
        translated = self.translate(event, state)
        if translated is not None:
            self._event_queue.append(translated)

    def translate(self, event: pygame.event.Event, state: GameState) -> Optional[InputEvent]:
        """Map a pygame event to an InputEvent for the given state.

        Returns:
            InputEvent, or None if the event means nothing in this state
        """
        now = time.monotonic()

        if event.type == pygame.KEYUP:
            if event.key in MOVE_KEYS:
                return InputEvent(command=InputCommand.STOP_MOVE, timestamp=now)
            return None

        if event.type != pygame.KEYDOWN:
            return None

        key = event.key

        if key in MOVE_KEYS:
            return InputEvent(command=MOVE_KEYS[key], timestamp=now)

        if key in CONFIRM_KEYS:
            if state in (GameState.PLAYING, GameState.PAUSED):
                return InputEvent(command=InputCommand.PAUSE_TOGGLE, timestamp=now)
            return InputEvent(command=InputCommand.START, timestamp=now)

        if key == pygame.K_r and state in (GameState.PAUSED, GameState.GAME_OVER):
            return InputEvent(command=InputCommand.RESTART, timestamp=now)

        if key in DIFFICULTY_KEYS:
            return InputEvent(
                command=InputCommand.SET_DIFFICULTY,
                difficulty=DIFFICULTY_KEYS[key].value,
                timestamp=now,
            )

        return None
