"""Tests for the command line parser."""

import pytest

from pong import config
from pong.main import build_parser


class TestParser:
    """Test argument defaults and validation."""

    def test_defaults_from_config(self):
        args = build_parser().parse_args([])
        assert args.width == config.SCREEN_WIDTH
        assert args.height == config.SCREEN_HEIGHT
        assert args.difficulty == config.DEFAULT_DIFFICULTY
        assert args.score_to_win == config.SCORE_TO_WIN
        assert args.seed is None
        assert not args.fullscreen

    def test_game_options(self):
        args = build_parser().parse_args(
            ['--difficulty', 'extreme', '--score-to-win', '3', '--seed', '42']
        )
        assert args.difficulty == 'extreme'
        assert args.score_to_win == 3
        assert args.seed == 42

    def test_unknown_difficulty_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(['--difficulty', 'insane'])
