"""Collision detection and response for Pong.

Handles ball-wall and ball-paddle collisions. All functions are pure
with respect to the ball (a new Ball is returned) so the simulation
order stays explicit in the caller.
"""

import math
from typing import Optional, Tuple, TYPE_CHECKING

from pong.config import BOUNCE_MULTIPLIER, BOUNCE_SEGMENTS
from pong.models import Side

if TYPE_CHECKING:
    from pong.entities import Ball, Paddle


def check_wall_collision(ball: 'Ball', surface_height: float) -> Tuple['Ball', bool]:
    """Reflect the ball off the top and bottom walls.

    The vertical velocity is negated and the position clamped to the
    wall so the ball cannot flip sign repeatedly while outside.

    Args:
        ball: Ball after integration
        surface_height: Surface height in pixels

    Returns:
        Tuple of (updated ball, True if a wall was hit)
    """
    radius = ball.radius

    if ball.y < radius:
        return ball.bounce_vertical().set_position(ball.x, radius), True

    if ball.y > surface_height - radius:
        return ball.bounce_vertical().set_position(ball.x, surface_height - radius), True

    return ball, False


def left_collision_plane(paddle_width: float, ball_size: float) -> float:
    """X coordinate the ball must cross to reach the left paddle.

    The left paddle is drawn one paddle width in from the edge, so its
    face sits at ``2 * paddle_width``; the ball's center reaches it half a
    diameter earlier.
    """
    return paddle_width * 2 + ball_size / 2


def right_collision_plane(surface_width: float, paddle_width: float, ball_size: float) -> float:
    """X coordinate the ball must cross to reach the right paddle."""
    return surface_width - paddle_width * 2 - ball_size / 2


def paddle_zone(
    ball: 'Ball',
    surface_width: float,
    paddle_width: float,
) -> Optional[Side]:
    """Which paddle, if any, the ball is close enough to be tested against.

    The zones are mutually exclusive: the ball is either left of the left
    plane, right of the right plane, or in open court. A ball that has
    already left the surface is not tested.
    """
    if ball.x < 0 or ball.x > surface_width:
        return None
    if ball.x < left_collision_plane(paddle_width, ball.size):
        return Side.LEFT
    if ball.x > right_collision_plane(surface_width, paddle_width, ball.size):
        return Side.RIGHT
    return None


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle', side: Side) -> bool:
    """Check if the ball hits a paddle it is in the zone of.

    Only returns True when the ball is travelling toward the paddle, so a
    ball that has just bounced is not caught a second time while it is
    still behind the plane.

    Args:
        ball: Ball to check
        paddle: Paddle on ``side``
        side: Which paddle this is

    Returns:
        True if ball hits paddle
    """
    moving_toward = ball.vx < 0 if side is Side.LEFT else ball.vx > 0
    if not moving_toward:
        return False
    return paddle.contains_y(ball.y)


def segment_index(paddle: 'Paddle', y: float, segments: int = BOUNCE_SEGMENTS) -> int:
    """Index of the equal-height paddle segment containing ``y``.

    Segments are half-open ``[start, end)``; a ball exactly on the bottom
    edge belongs to the last segment.
    """
    segment_height = paddle.height / segments
    index = int(math.floor((y - paddle.y) / segment_height))
    return max(0, min(segments - 1, index))


def segmented_bounce_velocity(
    paddle: 'Paddle',
    y: float,
    factor: float,
    segments: int = BOUNCE_SEGMENTS,
    multiplier: float = BOUNCE_MULTIPLIER,
) -> float:
    """Vertical velocity after a paddle hit at height ``y``.

    The center segment returns the ball flat; segments further from the
    center deflect it more strongly up (negative) or down (positive).

    Examples:
        A 100-unit paddle at factor 1 gives -10, -5, 0, 5, 10 from top
        to bottom.
    """
    index = segment_index(paddle, y, segments)
    return (index - segments // 2) * multiplier * factor


def resolve_paddle_collision(ball: 'Ball', paddle: 'Paddle', factor: float) -> 'Ball':
    """Bounce the ball off a paddle.

    Horizontal speed is preserved (only its sign flips); vertical velocity
    comes from the segmented bounce.
    """
    bounced = ball.bounce_horizontal()
    return bounced.set_velocity(bounced.vx, segmented_bounce_velocity(paddle, ball.y, factor))
