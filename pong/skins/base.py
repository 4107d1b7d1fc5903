"""Base class for Pong skins.

Skins handle ALL rendering and audio - the simulation only manages state
and tells the skin what happened.
"""

from abc import ABC, abstractmethod

from pong.models import GameSnapshot


class PongSkin(ABC):
    """Base class for game skins (visuals + audio).

    The loop driver hands the skin a snapshot after every tick and calls
    the sound hooks on game events. Every sound hook defaults to a no-op so
    a skin only implements what it can play.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    @abstractmethod
    def draw(self, snapshot: GameSnapshot) -> None:
        """Render one frame.

        Args:
            snapshot: Read-only view of the simulation
        """
        pass

    def toggle_background_music(self, play: bool = True) -> None:
        """Start or stop the looping background track."""
        pass

    def play_hit_sound(self) -> None:
        """Play sound when the ball hits a paddle."""
        pass

    def play_game_over_sound(self) -> None:
        """Play sound when the opponent wins the match."""
        pass

    def play_game_won_sound(self) -> None:
        """Play sound when the player wins the match."""
        pass


class NullSkin(PongSkin):
    """Skin that draws and plays nothing. Used when no skin is supplied."""

    NAME = "null"
    DESCRIPTION = "No rendering or audio"

    def draw(self, snapshot: GameSnapshot) -> None:
        pass
