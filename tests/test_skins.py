"""
Tests for the skins, rendering to an off-screen surface.
"""

import io

import pygame
import pytest

from pong.game_state import GameState, GameStateMachine
from pong.logging import configure_logging
from pong.skins import GeometricSkin, NullSkin, PongSkin

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


@pytest.fixture
def surface():
    pygame.init()
    yield pygame.Surface((800, 600))
    pygame.quit()


class TestNullSkin:
    """Test the no-op skin."""

    def test_all_hooks_are_noops(self, context):
        skin = NullSkin()
        skin.draw(context.snapshot())
        skin.toggle_background_music(True)
        skin.play_hit_sound()
        skin.play_game_over_sound()
        skin.play_game_won_sound()

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            PongSkin()


class TestGeometricSkin:
    """Test drawing and the sound fallbacks."""

    def test_draws_court(self, surface, playing_context):
        skin = GeometricSkin(screen=surface)
        skin.draw(playing_context.snapshot())

        ball = playing_context.ball
        assert surface.get_at((int(ball.x), int(ball.y))) == WHITE
        assert surface.get_at((15, 300)) == WHITE
        assert surface.get_at((785, 300)) == WHITE
        assert surface.get_at((100, 100)) == BLACK

    @pytest.mark.parametrize("state", [
        GameState.MENU, GameState.PAUSED, GameState.GAME_OVER,
    ])
    def test_overlays_draw(self, surface, context, state):
        """Test each non-playing screen shades the court."""
        context.state_machine = GameStateMachine(initial=state)
        context.player_won = True
        skin = GeometricSkin(screen=surface)

        skin.draw(context.snapshot())

        assert surface.get_at((15, 300)) != WHITE

    def test_missing_sound_warns_once(self, surface):
        stream = io.StringIO()
        configure_logging(level='WARNING', stream=stream)
        skin = GeometricSkin(screen=surface)

        skin.play_hit_sound()
        skin.play_hit_sound()
        skin.play_game_won_sound()

        output = stream.getvalue()
        assert output.count("hit sound is not defined") == 1
        assert "game_won sound is not defined" in output

    def test_missing_sound_files(self, surface, tmp_path):
        """Test an empty sounds directory degrades to warnings."""
        stream = io.StringIO()
        configure_logging(level='WARNING', stream=stream)
        skin = GeometricSkin(screen=surface, sounds_dir=tmp_path)

        skin.toggle_background_music(True)
        skin.toggle_background_music(False)

        assert "background" in stream.getvalue()
