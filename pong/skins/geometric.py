"""Geometric skin - the classic white-on-black look.

Draws the ball as a circle, paddles as rectangles, a faint center line
and large score digits, plus simple text overlays for the menu, pause
and game-over screens. Sounds are loaded lazily from an optional
directory; anything missing is reported once and then skipped.
"""

from pathlib import Path
from typing import Dict, Optional, Set, Tuple

import pygame

from pong import config
from pong.game_state import GameState
from pong.logging import get_logger
from pong.models import GameSnapshot

from .base import PongSkin

log = get_logger('skin')

SOUND_FILES: Dict[str, str] = {
    'background': 'background.ogg',
    'hit': 'hit.wav',
    'game_over': 'game_over.wav',
    'game_won': 'game_won.wav',
}


class GeometricSkin(PongSkin):
    """Renders the game using simple shapes and pygame fonts.

    Args:
        screen: Surface to draw on (default: the current display surface)
        sounds_dir: Directory holding the files named in SOUND_FILES
    """

    NAME = "geometric"
    DESCRIPTION = "White shapes on black, classic arcade look"

    BALL_COLOR = config.FOREGROUND_COLOR
    PADDLE_COLOR = config.FOREGROUND_COLOR
    LINE_COLOR = config.LINE_COLOR
    TEXT_COLOR = config.FOREGROUND_COLOR
    OVERLAY_COLOR = (0, 0, 0, 170)

    def __init__(
        self,
        screen: Optional[pygame.Surface] = None,
        sounds_dir: Optional[Path] = None,
    ):
        self._screen = screen
        self._sounds_dir = Path(sounds_dir) if sounds_dir else None
        self._score_font: Optional[pygame.font.Font] = None
        self._menu_font: Optional[pygame.font.Font] = None
        self._small_font: Optional[pygame.font.Font] = None
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self._sounds_loaded = False
        self._warned: Set[str] = set()

    @property
    def screen(self) -> Optional[pygame.Surface]:
        return self._screen if self._screen is not None else pygame.display.get_surface()

    def _ensure_fonts(self) -> None:
        if self._score_font is None:
            pygame.font.init()
            self._score_font = pygame.font.Font(None, config.SCORE_FONT_SIZE)
            self._menu_font = pygame.font.Font(None, config.MENU_FONT_SIZE)
            self._small_font = pygame.font.Font(None, config.MENU_FONT_SIZE // 2)

    # =========================================================================
    # Rendering
    # =========================================================================

    def draw(self, snapshot: GameSnapshot) -> None:
        screen = self.screen
        if screen is None:
            self._warn_once('screen', "No display surface; frame not drawn")
            return

        self._ensure_fonts()
        screen.fill(config.BACKGROUND_COLOR)

        self._draw_court(screen, snapshot)

        if snapshot.state in (GameState.INIT, GameState.MENU):
            self._draw_overlay(screen, "PONG", [
                "Press Enter to start",
                f"Difficulty: {snapshot.difficulty}  (1/2/3 to change)",
            ])
        elif snapshot.state == GameState.PAUSED:
            self._draw_overlay(screen, "Paused", [
                "Enter to continue, R to restart",
            ])
        elif snapshot.state == GameState.GAME_OVER:
            if snapshot.player_won:
                title, hint = "You won!", "Enter to play again"
            else:
                title, hint = "Oh snap, you lost.", "Enter to try again"
            self._draw_overlay(screen, title, [hint])

    def _draw_court(self, screen: pygame.Surface, snapshot: GameSnapshot) -> None:
        width = int(snapshot.surface_width)
        height = int(snapshot.surface_height)

        # Scores first so the ball draws over them
        line_layer = pygame.Surface((width, height), pygame.SRCALPHA)
        for value, x_frac in ((snapshot.scores.left, 0.25), (snapshot.scores.right, 0.75)):
            text = self._score_font.render(str(value), True, self.LINE_COLOR)
            rect = text.get_rect(center=(int(width * x_frac), height // 2))
            line_layer.blit(text, rect)
        pygame.draw.line(line_layer, self.LINE_COLOR, (width // 2, 0), (width // 2, height))
        screen.blit(line_layer, (0, 0))

        ball = snapshot.ball
        pygame.draw.circle(
            screen,
            self.BALL_COLOR,
            (int(ball.x), int(ball.y)),
            max(1, int(ball.size / 2)),
        )

        for paddle in (snapshot.paddle_one, snapshot.paddle_two):
            pygame.draw.rect(
                screen,
                self.PADDLE_COLOR,
                (int(paddle.x), int(paddle.y), int(paddle.width), int(paddle.height)),
            )

    def _draw_overlay(self, screen: pygame.Surface, title: str, lines: list) -> None:
        size: Tuple[int, int] = screen.get_size()
        shade = pygame.Surface(size, pygame.SRCALPHA)
        shade.fill(self.OVERLAY_COLOR)
        screen.blit(shade, (0, 0))

        cx, cy = size[0] // 2, size[1] // 2
        title_surface = self._menu_font.render(title, True, self.TEXT_COLOR)
        screen.blit(title_surface, title_surface.get_rect(center=(cx, cy - 40)))

        for i, line in enumerate(lines):
            text = self._small_font.render(line, True, self.TEXT_COLOR)
            screen.blit(text, text.get_rect(center=(cx, cy + 10 + i * 30)))

    # =========================================================================
    # Audio
    # =========================================================================

    def _warn_once(self, key: str, msg: str, *args) -> None:
        if key not in self._warned:
            self._warned.add(key)
            log.warning(msg, *args)

    def _load_sounds(self) -> None:
        if self._sounds_loaded:
            return
        self._sounds_loaded = True

        if self._sounds_dir is None:
            return

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as exc:
            self._warn_once('mixer', "Audio unavailable: %s", exc)
            return

        for name, filename in SOUND_FILES.items():
            path = self._sounds_dir / filename
            if not path.exists():
                continue
            try:
                self._sounds[name] = pygame.mixer.Sound(str(path))
            except pygame.error as exc:
                self._warn_once(name, "Could not load sound %s: %s", path, exc)

    def _play(self, name: str, loops: int = 0) -> None:
        self._load_sounds()
        sound = self._sounds.get(name)
        if sound is None:
            self._warn_once(name, "%s sound is not defined", name)
            return
        sound.play(loops=loops)

    def toggle_background_music(self, play: bool = True) -> None:
        if play:
            self._play('background', loops=-1)
            return
        sound = self._sounds.get('background')
        if sound is not None:
            sound.stop()

    def play_hit_sound(self) -> None:
        self._play('hit')

    def play_game_over_sound(self) -> None:
        self._play('game_over')

    def play_game_won_sound(self) -> None:
        self._play('game_won')
