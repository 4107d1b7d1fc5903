"""
Scoring and win evaluation.

A point is scored when the ball leaves the surface through the left or
right edge. The scorer is the side opposite the edge it left through.
After every point the ball is served again and the win condition is
checked; reaching ``score_to_win`` forces the match into GAME_OVER.

The winner is recorded at the scoring event that ended the match, so
``player_won`` always agrees with the final score.
"""

from typing import Optional, TYPE_CHECKING

from pong.game_state import GameEvent
from pong.logging import get_logger
from pong.models import Side

if TYPE_CHECKING:
    from pong.context import SimulationContext

log = get_logger('scoring')


def detect_score(context: 'SimulationContext') -> Optional[Side]:
    """Side that scores if the ball has left the surface, else None.

    Touching the paddle plane is not enough; the ball's center must be
    past the left or right boundary.
    """
    if context.ball.x > context.surface_width:
        return Side.LEFT
    if context.ball.x < 0:
        return Side.RIGHT
    return None


def award_point(context: 'SimulationContext', side: Side) -> None:
    """Add exactly one point to ``side`` and serve the ball again."""
    context.scores = context.scores.with_point(side)
    context.reset_ball()
    log.info("Point to %s (%s)", side.value, context.scores)


def evaluate_win(context: 'SimulationContext') -> Optional[Side]:
    """End the match if either side has reached the target score.

    Sends WIN when the human side reached the target and LOSE when the
    opponent did. The event is only accepted from PLAYING, so a match
    cannot be ended twice.

    Returns:
        The winning side if this call ended the match, else None
    """
    winner = context.scores.leader_at(context.score_to_win)
    if winner is None:
        return None

    event = GameEvent.WIN if winner is Side.LEFT else GameEvent.LOSE
    if not context.state_machine.transition(event):
        return None

    context.player_won = winner is Side.LEFT
    log.info("Match over: %s wins %s", winner.value, context.scores)
    return winner


def step_scoring(context: 'SimulationContext') -> Optional[Side]:
    """Run the scoring phase of one tick. Returns the side that scored."""
    side = detect_score(context)
    if side is not None:
        award_point(context, side)
    return side
