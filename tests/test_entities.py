"""
Tests for the Ball and Paddle entities.
"""

import math

import pytest

from pong.entities import Ball, Paddle, PaddleDirection


class TestBall:
    """Test the immutable ball value."""

    def test_update_integrates_velocity(self):
        """Test one tick adds velocity to position."""
        ball = Ball(100, 200, 20, 8, -2)
        moved = ball.update()
        assert (moved.x, moved.y) == (108, 198)
        assert (moved.vx, moved.vy) == (8, -2)

    def test_operations_return_new_ball(self):
        """Test the original ball is never mutated."""
        ball = Ball(100, 200, 20, 8, 2)
        ball.update()
        ball.bounce_vertical()
        ball.set_position(0, 0)
        assert ball == Ball(100, 200, 20, 8, 2)

    def test_bounces_flip_one_component(self):
        ball = Ball(0, 0, 20, 8, 2)
        assert ball.bounce_horizontal().vx == -8
        assert ball.bounce_horizontal().vy == 2
        assert ball.bounce_vertical().vy == -2
        assert ball.bounce_vertical().vx == 8

    def test_size_must_be_positive(self):
        """Test a zero diameter is rejected."""
        with pytest.raises(ValueError):
            Ball(0, 0, 0)

    def test_is_finite(self):
        assert Ball(1, 2, 20, 3, 4).is_finite
        assert not Ball(1, 2, 20, math.nan, 4).is_finite
        assert not Ball(1, math.inf, 20, 3, 4).is_finite


class TestPaddle:
    """Test paddle movement and clamping."""

    @pytest.fixture
    def paddle(self):
        return Paddle(x=10, y=250, width=10, height=100, speed=15)

    def test_span(self, paddle):
        """Test top, bottom and center derive from y and height."""
        assert paddle.top == 250
        assert paddle.bottom == 350
        assert paddle.center_y == 300

    def test_contains_y_is_inclusive(self, paddle):
        assert paddle.contains_y(250)
        assert paddle.contains_y(350)
        assert not paddle.contains_y(249.9)
        assert not paddle.contains_y(350.1)

    def test_move_in_direction(self, paddle):
        """Test each direction moves one speed step."""
        paddle.direction = PaddleDirection.UP
        paddle.move_in_direction(600)
        assert paddle.y == 235

        paddle.direction = PaddleDirection.DOWN
        paddle.move_in_direction(600)
        assert paddle.y == 250

        paddle.direction = PaddleDirection.NONE
        paddle.move_in_direction(600)
        assert paddle.y == 250

    def test_clamped_at_top(self, paddle):
        """Test the paddle cannot leave through the top edge."""
        paddle.y = 5
        paddle.direction = PaddleDirection.UP
        paddle.move_in_direction(600)
        assert paddle.y == 0

    def test_clamped_at_bottom(self, paddle):
        """Test the paddle cannot leave through the bottom edge."""
        paddle.y = 495
        paddle.move(15, 600)
        assert paddle.y == 500

    def test_center_on_clears_direction(self, paddle):
        paddle.y = 0
        paddle.direction = PaddleDirection.DOWN
        paddle.center_on(400)
        assert paddle.y == 150
        assert paddle.direction == PaddleDirection.NONE

    def test_clamp_on_short_surface(self, paddle):
        """Test a surface shorter than the paddle pins it to the top."""
        paddle.clamp(80)
        assert paddle.y == 0
