"""Configuration for Pong.

Contains screen dimensions, entity sizes, physics constants, difficulty
presets and colors. Display and match settings can be overridden from the
environment or a ``.env`` file next to the working directory.
"""
import os
from dataclasses import dataclass
from typing import Dict, Tuple

from dotenv import load_dotenv

load_dotenv()


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display settings
SCREEN_WIDTH: int = _get_int('PONG_SCREEN_WIDTH', 800)
SCREEN_HEIGHT: int = _get_int('PONG_SCREEN_HEIGHT', 600)
FPS: int = _get_int('PONG_FPS', 60)

# Match settings
SCORE_TO_WIN: int = _get_int('PONG_SCORE_TO_WIN', 10)
RESIZE_INTERVAL: float = _get_float('PONG_RESIZE_INTERVAL', 1.0)  # seconds

# Ball (units are pixels and pixels/tick)
BALL_SIZE: float = 20.0
BALL_SPEED_X: float = 8.0

# Paddles
PADDLE_WIDTH: float = 10.0
PADDLE_HEIGHT: float = 100.0
PADDLE_ONE_SPEED: float = 15.0
PADDLE_TWO_SPEED: float = 10.0

# Opponent speed is redrawn from [min, max) * difficulty factor
AI_SPEED_MIN: float = 10.0
AI_SPEED_MAX: float = 20.0

# Segmented paddle bounce
BOUNCE_SEGMENTS: int = 5
BOUNCE_MULTIPLIER: float = 5.0

# Smallest surface that fits a paddle vertically and both paddles plus a ball across
MIN_SURFACE_WIDTH: float = PADDLE_WIDTH * 4 + BALL_SIZE
MIN_SURFACE_HEIGHT: float = max(PADDLE_HEIGHT, BALL_SIZE)

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (0, 0, 0)
FOREGROUND_COLOR: Tuple[int, int, int] = (255, 255, 255)
LINE_COLOR: Tuple[int, int, int, int] = (255, 255, 255, 51)
SCORE_FONT_SIZE: int = 100
MENU_FONT_SIZE: int = 48


@dataclass(frozen=True)
class DifficultyPreset:
    """Difficulty configuration.

    The factor scales paddle bounce deflection and opponent speed;
    speed is the ball's initial vertical velocity.
    """

    name: str
    level: int
    ball_speed: float       # Initial vertical ball speed (pixels/tick)
    spawn_margin: float     # Ball spawns this far above the vertical center

    @property
    def factor(self) -> float:
        return 0.25 * self.level


DIFFICULTY_PRESETS: Dict[str, DifficultyPreset] = {
    'normal': DifficultyPreset(
        name='normal',
        level=1,
        ball_speed=2.0,
        spawn_margin=10.0,
    ),
    'hard': DifficultyPreset(
        name='hard',
        level=2,
        ball_speed=3.0,
        spawn_margin=20.0,
    ),
    'extreme': DifficultyPreset(
        name='extreme',
        level=3,
        ball_speed=4.0,
        spawn_margin=30.0,
    ),
}

DEFAULT_DIFFICULTY: str = 'normal'
