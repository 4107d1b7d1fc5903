"""
Pygame host for Pong.

Owns the window, the clock and the frame scheduler, and turns pygame
events into InputEvents for the session. Window resizes go through a
ResizeThrottle so a drag produces at most one resize per interval.
"""

import time
from pathlib import Path
from typing import Optional

import pygame

from pong import config
from pong.ai import SpeedRandomizer
from pong.context import SimulationContext
from pong.input import InputCommand, InputEvent, ResizeThrottle
from pong.input.keyboard import KeyboardInputSource
from pong.logging import get_logger
from pong.loop import FrameScheduler
from pong.session import GameSession
from pong.skins import GeometricSkin

log = get_logger('app')


class PongApp:
    """Window, clock and event pump around a GameSession.

    Args:
        width: Initial window width
        height: Initial window height
        fps: Target frame rate
        difficulty: Initial difficulty identifier
        score_to_win: Points needed to end a match
        seed: Seed for the opponent speed randomizer
        fullscreen: Open a fullscreen window
        sounds_dir: Directory with sound assets (optional)
    """

    def __init__(
        self,
        width: int = config.SCREEN_WIDTH,
        height: int = config.SCREEN_HEIGHT,
        fps: int = config.FPS,
        difficulty: str = config.DEFAULT_DIFFICULTY,
        score_to_win: int = config.SCORE_TO_WIN,
        seed: Optional[int] = None,
        fullscreen: bool = False,
        sounds_dir: Optional[Path] = None,
    ):
        pygame.init()

        if fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            width, height = self.screen.get_size()
        else:
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Pong")

        self.clock = pygame.time.Clock()
        self.fps = fps
        self.running = False

        self.scheduler = FrameScheduler()
        self.skin = GeometricSkin(sounds_dir=sounds_dir)
        self.context = SimulationContext(
            width=width,
            height=height,
            difficulty=difficulty,
            score_to_win=score_to_win,
            randomizer=SpeedRandomizer(seed=seed),
        )
        self.session = GameSession(self.context, self.scheduler, self.skin)
        self.keyboard = KeyboardInputSource()
        self.resize_throttle = ResizeThrottle(config.RESIZE_INTERVAL)

    def handle_events(self) -> None:
        """Pump pygame events into the session.

        Each key is translated against the state left by the previous one,
        so two presses of Enter in one frame start and then pause.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
                return
            if event.type == pygame.VIDEORESIZE:
                self.resize_throttle.submit(event.w, event.h)
                continue
            self.keyboard.process(event, self.session.state)
            for input_event in self.keyboard.poll_events():
                log.debug("Input: %s", input_event)
                self.session.handle(input_event)

        size = self.resize_throttle.poll()
        if size is not None:
            self.session.handle(InputEvent(
                command=InputCommand.RESIZE,
                width=size[0],
                height=size[1],
                timestamp=time.monotonic(),
            ))

    def run_frame(self) -> None:
        """Handle input, advance the simulation and present one frame."""
        self.handle_events()
        if not self.running:
            return

        self.scheduler.run_frame(time.monotonic())

        # The loop driver draws while PLAYING; static screens are drawn here
        if not self.context.state_machine.is_playing:
            self.skin.draw(self.context.snapshot())

        pygame.display.flip()

    def run(self) -> None:
        """Run until the window is closed."""
        self.running = True
        self.session.boot()

        while self.running:
            self.clock.tick(self.fps)
            self.run_frame()

    def quit(self) -> None:
        pygame.quit()
