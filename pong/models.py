"""
Shared data models for Pong.

Pydantic models for the score pair and for the read-only snapshot that
renderers consume after each tick. All models are frozen.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from pong.game_state import GameState


class Side(str, Enum):
    """Which half of the court."""
    LEFT = "left"     # Paddle one, human
    RIGHT = "right"   # Paddle two, AI


class ScorePair(BaseModel):
    """Immutable score pair for one match.

    Attributes:
        left: Points scored by paddle one (non-negative)
        right: Points scored by paddle two (non-negative)

    Examples:
        >>> score = ScorePair()
        >>> score.with_point(Side.LEFT).left
        1
    """
    left: int = 0
    right: int = 0

    model_config = ConfigDict(frozen=True)

    @field_validator('left', 'right')
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate score values are non-negative."""
        if v < 0:
            raise ValueError(f'Score values must be non-negative, got {v}')
        return v

    def get(self, side: Side) -> int:
        return self.left if side is Side.LEFT else self.right

    def with_point(self, side: Side) -> 'ScorePair':
        """Return a new pair with exactly one point added to ``side``."""
        if side is Side.LEFT:
            return ScorePair(left=self.left + 1, right=self.right)
        return ScorePair(left=self.left, right=self.right + 1)

    def leader_at(self, target: int) -> Optional[Side]:
        """Side that has reached ``target`` points, if any."""
        if self.left >= target:
            return Side.LEFT
        if self.right >= target:
            return Side.RIGHT
        return None

    def __str__(self) -> str:
        return f"{self.left}-{self.right}"


class BallView(BaseModel):
    """Ball position and diameter as seen by a renderer."""
    x: float
    y: float
    size: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)


class PaddleView(BaseModel):
    """Paddle rectangle as seen by a renderer."""
    x: float
    y: float
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)


class GameSnapshot(BaseModel):
    """Read-only view of a simulation context after a tick.

    ``player_won`` is only set once the match has reached GAME_OVER.
    """
    surface_width: float = Field(..., gt=0)
    surface_height: float = Field(..., gt=0)
    ball: BallView
    paddle_one: PaddleView
    paddle_two: PaddleView
    scores: ScorePair
    state: GameState
    difficulty: str
    player_won: Optional[bool] = None

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def is_playing(self) -> bool:
        return self.state == GameState.PLAYING

    @computed_field
    @property
    def is_paused(self) -> bool:
        return self.state == GameState.PAUSED
