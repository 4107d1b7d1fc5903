"""Per-tick physics for a simulation context.

Applies the fixed order ball move -> wall clamp -> paddle moves ->
paddle test. Wall and paddle collisions are resolved independently, so
both can happen in the same tick.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from pong.ai import randomize_speed, track_ball
from pong.errors import PhysicsInvariantError
from pong.models import Side

from .collision import (
    check_paddle_collision,
    check_wall_collision,
    paddle_zone,
    resolve_paddle_collision,
)

if TYPE_CHECKING:
    from pong.context import SimulationContext


@dataclass
class PhysicsResult:
    """What happened during the physics phase of one tick."""

    wall_hit: bool = False
    tested: Optional[Side] = None   # Paddle the ball was tested against
    hit: Optional[Side] = None      # Paddle that returned the ball


def move_entities(context: 'SimulationContext') -> bool:
    """Integrate the ball, reflect it off walls and move both paddles.

    Returns:
        True if the ball bounced off the top or bottom wall
    """
    height = context.surface_height

    context.ball, wall_hit = check_wall_collision(context.ball.update(), height)

    context.paddle_one.move_in_direction(height)
    track_ball(context.paddle_two, context.ball, height)

    return wall_hit


def resolve_collisions(context: 'SimulationContext', result: PhysicsResult) -> None:
    """Test the ball against the paddle whose zone it is in.

    A hit flips the horizontal velocity and applies the segmented bounce.
    Whether the test hit or missed, the opponent's speed is redrawn.
    """
    side = paddle_zone(context.ball, context.surface_width, context.paddle_one.width)
    if side is None:
        return

    result.tested = side
    paddle = context.paddle_one if side is Side.LEFT else context.paddle_two
    factor = context.factor

    if check_paddle_collision(context.ball, paddle, side):
        context.ball = resolve_paddle_collision(context.ball, paddle, factor)
        result.hit = side

    randomize_speed(context.paddle_two, context.randomizer, factor)


def check_invariants(context: 'SimulationContext') -> None:
    """Raise PhysicsInvariantError if any simulated value is non-finite."""
    if not context.ball.is_finite:
        raise PhysicsInvariantError(f"Non-finite ball state: {context.ball!r}")
    for name, paddle in (('paddle_one', context.paddle_one), ('paddle_two', context.paddle_two)):
        if not paddle.is_finite:
            raise PhysicsInvariantError(f"Non-finite {name} state: {paddle!r}")


def step_physics(context: 'SimulationContext') -> PhysicsResult:
    """Run the physics and collision phases of one tick."""
    check_invariants(context)

    result = PhysicsResult()
    result.wall_hit = move_entities(context)
    resolve_collisions(context, result)

    check_invariants(context)
    return result
