"""
Tests for GameSession: input handling, match lifecycle and an end-to-end
run driven through the frame scheduler.
"""

import math

import pytest

from pong.entities import Ball, PaddleDirection
from pong.game_state import GameState
from pong.input import InputCommand, InputEvent
from pong.models import ScorePair


def _run_frames(scheduler, count, start=0.0):
    for i in range(count):
        scheduler.run_frame(start + i / 60)


class TestLifecycle:
    """Test menu, start, pause and reset."""

    def test_boot_goes_to_menu(self, session):
        assert session.boot()
        assert session.state == GameState.MENU
        assert session.boot() is False

    def test_start_from_init_only_boots(self, session, scheduler):
        assert session.start()
        assert session.state == GameState.MENU
        assert scheduler.pending_count == 0

    def test_start_match(self, session, scheduler, skin):
        session.boot()
        assert session.start()
        assert session.state == GameState.PLAYING
        assert scheduler.pending_count == 1
        assert skin.music == [True]

    def test_pause_and_resume(self, session, scheduler, skin):
        session.boot()
        session.start()
        session.move(PaddleDirection.UP)

        assert session.toggle_pause()
        assert session.state == GameState.PAUSED
        assert session.context.paddle_one.direction == PaddleDirection.NONE

        _run_frames(scheduler, 3)
        assert session.driver.tick_count == 0
        assert scheduler.pending_count == 0

        assert session.toggle_pause()
        assert session.state == GameState.PLAYING
        assert scheduler.pending_count == 1
        assert skin.music == [True, False, True]

    def test_pause_resume_within_one_frame(self, session, scheduler):
        """Test quick pause/resume does not start a second loop."""
        session.boot()
        session.start()
        session.pause()
        session.resume()

        assert scheduler.pending_count == 1
        scheduler.run_frame(0.0)
        assert session.driver.tick_count == 1
        assert scheduler.pending_count == 1

    def test_start_resumes_paused_match(self, session):
        session.boot()
        session.start()
        session.pause()
        assert session.start()
        assert session.state == GameState.PLAYING

    def test_reset_from_pause(self, session):
        session.boot()
        session.start()
        session.pause()
        assert session.reset()
        assert session.state == GameState.MENU

    def test_reset_rejected_while_playing(self, session):
        session.boot()
        session.start()
        assert session.reset() is False
        assert session.state == GameState.PLAYING

    def test_pause_rejected_in_menu(self, session):
        session.boot()
        assert session.pause() is False
        assert session.toggle_pause() is False
        assert session.state == GameState.MENU


class TestGameOver:
    """Test finishing and replaying a match."""

    def _finish(self, session, scheduler):
        session.boot()
        session.start()
        session.context.scores = ScorePair(left=9, right=0)
        session.context.ball = Ball(795, 300, 20, 8, 0)
        scheduler.run_frame(0.0)

    def test_match_ends(self, session, scheduler):
        self._finish(session, scheduler)
        assert session.state == GameState.GAME_OVER
        assert session.context.snapshot().player_won is True
        assert scheduler.pending_count == 0

    def test_start_after_game_over_plays_again(self, session, scheduler):
        self._finish(session, scheduler)

        assert session.start()

        assert session.state == GameState.PLAYING
        assert session.context.scores == ScorePair()
        assert session.context.player_won is None
        assert scheduler.pending_count == 1

    def test_restart_command(self, session, scheduler):
        self._finish(session, scheduler)
        assert session.handle(InputEvent(command=InputCommand.RESTART))
        assert session.state == GameState.PLAYING

    def test_restart_rejected_while_playing(self, session):
        session.boot()
        session.start()
        assert session.restart() is False


class TestInputHandling:
    """Test InputEvent dispatch."""

    def test_move_commands(self, session):
        session.boot()
        session.start()
        paddle = session.context.paddle_one

        session.handle(InputEvent(command=InputCommand.MOVE_UP))
        assert paddle.direction == PaddleDirection.UP
        session.handle(InputEvent(command=InputCommand.MOVE_DOWN))
        assert paddle.direction == PaddleDirection.DOWN
        session.handle(InputEvent(command=InputCommand.STOP_MOVE))
        assert paddle.direction == PaddleDirection.NONE

    def test_move_ignored_outside_match(self, session):
        session.boot()
        assert session.move(PaddleDirection.UP) is False
        assert session.context.paddle_one.direction == PaddleDirection.NONE

    def test_paddle_moves_on_tick(self, session, scheduler):
        session.boot()
        session.start()
        session.handle(InputEvent(command=InputCommand.MOVE_UP))
        scheduler.run_frame(0.0)
        assert session.context.paddle_one.y == 235

    def test_set_difficulty_in_menu(self, session):
        session.boot()
        event = InputEvent(command=InputCommand.SET_DIFFICULTY, difficulty='hard')
        assert session.handle(event)
        session.start()
        assert session.context.ball.vy == 3
        assert session.context.ball.y == 280

    def test_set_difficulty_rejected_mid_match(self, session):
        """Test a running match keeps its difficulty."""
        session.boot()
        session.start()
        assert session.set_difficulty('extreme') is False
        session.pause()
        assert session.set_difficulty('extreme') is False
        assert session.context.difficulty.value == 'normal'

    def test_unknown_difficulty_ignored(self, session):
        session.boot()
        assert session.set_difficulty('impossible') is False
        assert session.context.difficulty.value == 'normal'

    def test_resize_pauses_match(self, session, skin):
        session.boot()
        session.start()

        event = InputEvent(command=InputCommand.RESIZE, width=1024, height=768)
        assert session.handle(event)

        assert session.state == GameState.PAUSED
        assert session.context.surface_width == 1024
        assert session.context.ball.x == 512
        assert session.context.paddle_two.x == 1004
        assert skin.snapshots[-1].surface_height == 768

    def test_resize_in_menu_stays_in_menu(self, session):
        session.boot()
        assert session.resize(640, 480)
        assert session.state == GameState.MENU

    @pytest.mark.parametrize("width,height", [
        (None, 480), (640, 0), (-1, 480), (800, 80), (50, 600),
    ])
    def test_resize_rejects_bad_size(self, session, width, height):
        assert session.resize(width, height) is False
        assert session.context.surface_width == 800

    def test_too_small_resize_keeps_match_running(self, session):
        """Test an unusable size neither pauses nor resizes."""
        session.boot()
        session.start()
        event = InputEvent(command=InputCommand.RESIZE, width=800, height=80)
        assert session.handle(event) is False
        assert session.state == GameState.PLAYING
        assert session.context.surface_height == 600


class TestFaultRecovery:
    """Test the hard restart after a simulation fault."""

    def test_fault_restarts_match(self, session, scheduler):
        session.boot()
        session.start()
        session.context.scores = ScorePair(left=4, right=2)
        session.context.ball = Ball(400, 300, 20, math.nan, 0)

        scheduler.run_frame(0.0)

        assert session.driver.fault is not None
        assert session.restart_count == 1
        assert session.context.scores == ScorePair()
        assert session.context.ball.is_finite
        assert session.state == GameState.PLAYING
        assert scheduler.pending_count == 1

        scheduler.run_frame(0.016)
        assert session.driver.tick_count == 1


class TestEndToEnd:
    """Drive a whole opening through the scheduler."""

    def test_normal_opening(self, session, scheduler):
        """Test the opening serve and the opponent chasing it."""
        session.boot()
        session.handle(InputEvent(command=InputCommand.SET_DIFFICULTY, difficulty='normal'))
        session.handle(InputEvent(command=InputCommand.START))

        ctx = session.context
        assert (ctx.ball.x, ctx.ball.y) == (400, 290)
        assert (ctx.ball.vx, ctx.ball.vy) == (8, 2)

        paddle = ctx.paddle_two
        paddle.y = 0
        for i in range(30):
            before = paddle.y
            scheduler.run_frame(i / 60)
            step = paddle.y - before
            assert abs(step) <= paddle.speed
            if ctx.ball.y > before + paddle.height:
                assert step == paddle.speed
            elif ctx.ball.y < before:
                assert step == -min(paddle.speed, before)
            else:
                assert step == 0

        assert session.driver.tick_count == 30
        assert ctx.ball.vy == 2
        assert (ctx.ball.x, ctx.ball.y) == (640, 350)
        assert ctx.paddle_one.y == 250
        assert ctx.paddle_two.contains_y(ctx.ball.y)
        assert ctx.scores == ScorePair()

