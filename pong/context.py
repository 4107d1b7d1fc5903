"""Simulation context.

One SimulationContext holds everything a match needs: surface size,
ball, paddles, scores, difficulty, the state machine and the opponent
speed randomizer. Components receive it explicitly; there is no
module-level game state.
"""
from typing import Optional, Union

from pong import config
from pong.ai import SpeedRandomizer
from pong.difficulty import Difficulty, DifficultySettings, parse_difficulty, settings_for
from pong.entities import Ball, Paddle
from pong.game_state import GameState, GameStateMachine
from pong.logging import get_logger
from pong.models import BallView, GameSnapshot, PaddleView, ScorePair

log = get_logger('context')


def surface_size_ok(width: float, height: float) -> bool:
    """True if the surface fits both paddles and the ball."""
    return width >= config.MIN_SURFACE_WIDTH and height >= config.MIN_SURFACE_HEIGHT


def check_surface_size(width: float, height: float) -> None:
    """Raise ValueError for a surface too small to play on."""
    if not surface_size_ok(width, height):
        raise ValueError(
            f"Surface must be at least {config.MIN_SURFACE_WIDTH:g}x"
            f"{config.MIN_SURFACE_HEIGHT:g}, got {width}x{height}"
        )


class SimulationContext:
    """Mutable state of one match, owned by the loop driver.

    Args:
        width: Surface width in pixels
        height: Surface height in pixels
        difficulty: Initial difficulty identifier
        score_to_win: Points needed to end the match
        randomizer: Opponent speed source (seedable for tests)
    """

    def __init__(
        self,
        width: float = config.SCREEN_WIDTH,
        height: float = config.SCREEN_HEIGHT,
        difficulty: Union[str, Difficulty] = config.DEFAULT_DIFFICULTY,
        score_to_win: int = config.SCORE_TO_WIN,
        randomizer: Optional[SpeedRandomizer] = None,
    ):
        check_surface_size(width, height)
        if score_to_win < 1:
            raise ValueError(f"score_to_win must be at least 1, got {score_to_win}")

        self.surface_width = float(width)
        self.surface_height = float(height)
        self.difficulty = parse_difficulty(difficulty) or Difficulty.NORMAL
        self.score_to_win = score_to_win
        self.randomizer = randomizer if randomizer is not None else SpeedRandomizer()
        self.state_machine = GameStateMachine()

        self.scores = ScorePair()
        self.player_won: Optional[bool] = None

        self.ball = Ball(
            self.surface_width / 2,
            self.surface_height / 2,
            config.BALL_SIZE,
        )
        self.paddle_one = Paddle(
            x=config.PADDLE_WIDTH,
            y=0.0,
            width=config.PADDLE_WIDTH,
            height=config.PADDLE_HEIGHT,
            speed=config.PADDLE_ONE_SPEED,
        )
        self.paddle_two = Paddle(
            x=self.surface_width - config.PADDLE_WIDTH * 2,
            y=0.0,
            width=config.PADDLE_WIDTH,
            height=config.PADDLE_HEIGHT,
            speed=config.PADDLE_TWO_SPEED,
        )
        self.init_ball()
        self.init_paddles()

    @property
    def state(self) -> GameState:
        return self.state_machine.state

    @property
    def settings(self) -> DifficultySettings:
        """Difficulty settings resolved for the current surface height."""
        return settings_for(self.difficulty, self.surface_height)

    @property
    def factor(self) -> float:
        return self.settings.factor

    def init_ball(self) -> None:
        """Place the ball for a new match.

        Spawns at the difficulty's vertical offset, heading toward the
        opponent with the difficulty's initial vertical speed.
        """
        settings = self.settings
        self.ball = Ball(
            self.surface_width / 2,
            settings.offset_y,
            self.ball.size,
            config.BALL_SPEED_X,
            settings.speed,
        )

    def init_paddles(self) -> None:
        """Center both paddles and restore the opponent's base speed."""
        self.paddle_one.center_on(self.surface_height)
        self.paddle_two.center_on(self.surface_height)
        self.paddle_two.speed = config.PADDLE_TWO_SPEED

    def reset_ball(self) -> None:
        """Serve again after a point.

        The ball returns to the center, its horizontal direction flips and
        its vertical speed is reinitialized from the difficulty table.
        """
        self.ball = Ball(
            self.surface_width / 2,
            self.surface_height / 2,
            self.ball.size,
            -self.ball.vx,
            self.settings.speed,
        )

    def new_match(self) -> None:
        """Clear scores and outcome and re-place every entity."""
        self.scores = ScorePair()
        self.player_won = None
        self.init_ball()
        self.init_paddles()
        log.debug("New match: difficulty=%s, score_to_win=%d",
                  self.difficulty.value, self.score_to_win)

    def set_difficulty(self, difficulty: Union[str, Difficulty]) -> bool:
        """Select a difficulty. Unrecognized identifiers are ignored.

        Returns:
            True if the difficulty was recognized and applied
        """
        parsed = parse_difficulty(difficulty)
        if parsed is None:
            return False
        self.difficulty = parsed
        return True

    def resize(self, width: float, height: float) -> None:
        """Adopt a new surface size.

        The ball is recentred, the right paddle is re-anchored to the new
        right edge and both paddles are clamped to the new height.

        Raises:
            ValueError: if the size is below the minimum surface size
        """
        check_surface_size(width, height)

        self.surface_width = float(width)
        self.surface_height = float(height)
        self.ball = self.ball.set_position(self.surface_width / 2, self.surface_height / 2)
        self.paddle_two.x = self.surface_width - self.paddle_two.width * 2
        self.paddle_one.clamp(self.surface_height)
        self.paddle_two.clamp(self.surface_height)

    def snapshot(self) -> GameSnapshot:
        """Build the read-only view renderers consume."""
        return GameSnapshot(
            surface_width=self.surface_width,
            surface_height=self.surface_height,
            ball=BallView(x=self.ball.x, y=self.ball.y, size=self.ball.size),
            paddle_one=PaddleView(
                x=self.paddle_one.x, y=self.paddle_one.y,
                width=self.paddle_one.width, height=self.paddle_one.height,
            ),
            paddle_two=PaddleView(
                x=self.paddle_two.x, y=self.paddle_two.y,
                width=self.paddle_two.width, height=self.paddle_two.height,
            ),
            scores=self.scores,
            state=self.state,
            difficulty=self.difficulty.value,
            player_won=self.player_won if self.state == GameState.GAME_OVER else None,
        )
