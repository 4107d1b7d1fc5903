"""Difficulty table.

Maps a difficulty identifier to the ball's initial vertical speed, its
vertical spawn position and the factor that scales bounce deflection and
opponent speed.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from pong.config import DIFFICULTY_PRESETS


class Difficulty(str, Enum):
    """Recognized difficulty identifiers."""
    NORMAL = "normal"
    HARD = "hard"
    EXTREME = "extreme"


@dataclass(frozen=True)
class DifficultySettings:
    """Resolved settings for one difficulty on a surface of known height."""

    speed: float
    offset_y: float
    factor: float


def parse_difficulty(value: Union[str, Difficulty, None]) -> Optional[Difficulty]:
    """Return the Difficulty for an identifier, or None if unrecognized."""
    if isinstance(value, Difficulty):
        return value
    if not isinstance(value, str):
        return None
    try:
        return Difficulty(value.strip().lower())
    except ValueError:
        return None


def settings_for(
    difficulty: Union[str, Difficulty],
    surface_height: float,
) -> Optional[DifficultySettings]:
    """Look up settings for a difficulty.

    Args:
        difficulty: Identifier ('normal', 'hard', 'extreme') or Difficulty
        surface_height: Current surface height, used for the spawn offset

    Returns:
        DifficultySettings, or None when the identifier is not recognized
    """
    parsed = parse_difficulty(difficulty)
    if parsed is None:
        return None

    preset = DIFFICULTY_PRESETS[parsed.value]
    return DifficultySettings(
        speed=preset.ball_speed,
        offset_y=surface_height / 2 - preset.spawn_margin,
        factor=preset.factor,
    )
