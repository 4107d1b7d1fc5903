"""Shared pytest fixtures for Pong tests."""
import os

# Headless pygame for skin, keyboard and app tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

from typing import List

import pytest

from pong import logging as pong_logging
from pong.ai import SpeedRandomizer
from pong.context import SimulationContext
from pong.game_state import GameState, GameStateMachine
from pong.loop import FrameScheduler
from pong.models import GameSnapshot
from pong.session import GameSession
from pong.skins.base import PongSkin


class FixedSpeedRandomizer(SpeedRandomizer):
    """Randomizer that always draws the same base speed."""

    def __init__(self, speed: float = 12.0):
        super().__init__(seed=0)
        self.speed = speed
        self.calls = 0

    def draw(self, factor: float) -> float:
        self.calls += 1
        return self.speed * factor


class RecordingSkin(PongSkin):
    """Skin that records every call instead of drawing."""

    def __init__(self):
        self.snapshots: List[GameSnapshot] = []
        self.sounds: List[str] = []
        self.music: List[bool] = []

    def draw(self, snapshot: GameSnapshot) -> None:
        self.snapshots.append(snapshot)

    def toggle_background_music(self, play: bool = True) -> None:
        self.music.append(play)

    def play_hit_sound(self) -> None:
        self.sounds.append('hit')

    def play_game_over_sound(self) -> None:
        self.sounds.append('game_over')

    def play_game_won_sound(self) -> None:
        self.sounds.append('game_won')


@pytest.fixture(autouse=True)
def quiet_logging():
    """Silence log output for a test, restore configuration after."""
    saved_default = pong_logging._config['default_level']
    saved_modules = dict(pong_logging._config['module_levels'])
    saved_stream = pong_logging._config['stream']
    pong_logging.disable_logging()
    yield
    pong_logging._config['default_level'] = saved_default
    pong_logging._config['module_levels'] = saved_modules
    pong_logging._config['stream'] = saved_stream


@pytest.fixture
def randomizer():
    return FixedSpeedRandomizer()


@pytest.fixture
def context(randomizer):
    """800x600 context at normal difficulty, still in INIT."""
    return SimulationContext(width=800, height=600, difficulty='normal', randomizer=randomizer)


@pytest.fixture
def playing_context(context):
    """Context forced straight into PLAYING."""
    context.state_machine = GameStateMachine(initial=GameState.PLAYING)
    return context


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def skin():
    return RecordingSkin()


@pytest.fixture
def session(context, scheduler, skin):
    return GameSession(context, scheduler, skin)
