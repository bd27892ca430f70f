"""
Base player interface for the game loop.
"""

from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for input sources.

    A player is polled once per tick and must never block: it returns the
    latest pending event, or None when nothing happened since the last poll.
    """

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return the next input event given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT", "QUIT", or None
        """
        raise NotImplementedError
