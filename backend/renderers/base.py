"""
Base renderer interface for the game loop.
"""

from domain.game_state import GameState, GameSummary


def status_line(state: GameState) -> str:
    """Score and speed as shown under the board."""
    return f"Score: {state.score} | Speed: {1000 // state.tick_interval} units/s"


class Renderer:
    """
    Base class/interface for output stages.

    render() is called once per tick, after the update, with a complete
    snapshot. show_game_over() is called once when the game has ended.
    """

    def render(self, state: GameState) -> None:
        raise NotImplementedError

    def show_game_over(self, summary: GameSummary) -> None:
        raise NotImplementedError
