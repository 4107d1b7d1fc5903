"""
Input Event - A normalized command for the simulation core.

Keyboard, window and menu input are all converted to this common format
before reaching the session. Uses Pydantic for validation and immutability.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class InputCommand(str, Enum):
    """Command vocabulary understood by the session."""
    START = "start"
    PAUSE_TOGGLE = "pause_toggle"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    STOP_MOVE = "stop_move"
    SET_DIFFICULTY = "set_difficulty"
    RESIZE = "resize"
    RESTART = "restart"


class InputEvent(BaseModel):
    """Immutable input command.

    Attributes:
        command: What the player or window asked for
        timestamp: Time the event occurred (seconds, monotonic clock)
        difficulty: Difficulty identifier, required for SET_DIFFICULTY
        width: New surface width, required for RESIZE
        height: New surface height, required for RESIZE
    """
    command: InputCommand
    timestamp: float = 0.0
    difficulty: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None

    model_config = ConfigDict(frozen=True)

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v: float) -> float:
        """Validate timestamp is non-negative."""
        if v < 0:
            raise ValueError(f'Timestamp must be non-negative, got {v}')
        return v

    @field_validator('width', 'height')
    @classmethod
    def validate_dimension(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v <= 0:
            raise ValueError(f'Surface dimensions must be positive, got {v}')
        return v

    @model_validator(mode='after')
    def validate_payload(self) -> 'InputEvent':
        """Commands that carry a payload must have it."""
        if self.command == InputCommand.SET_DIFFICULTY and self.difficulty is None:
            raise ValueError('SET_DIFFICULTY requires a difficulty')
        if self.command == InputCommand.RESIZE and (self.width is None or self.height is None):
            raise ValueError('RESIZE requires width and height')
        return self

    def __str__(self) -> str:
        extra = ""
        if self.command == InputCommand.SET_DIFFICULTY:
            extra = f", difficulty={self.difficulty}"
        elif self.command == InputCommand.RESIZE:
            extra = f", size={self.width}x{self.height}"
        return f"InputEvent({self.command.value}{extra}, t={self.timestamp:.3f})"
