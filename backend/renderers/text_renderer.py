"""
Plain text renderer - prints the board as ASCII, one frame per tick.
"""

import sys
from typing import Optional, TextIO

from domain.game_state import GameState, GameSummary
from .base import Renderer, status_line


class TextRenderer(Renderer):
    """
    Writes GameState.print_board() and the status line to a stream.

    Used for headless runs where curses is unavailable or unwanted.
    """

    def __init__(self, stream: Optional[TextIO] = None, show_frames: bool = True):
        self.stream = stream or sys.stdout
        self.show_frames = show_frames
        self.frames_rendered = 0

    def render(self, state: GameState) -> None:
        self.frames_rendered += 1
        if not self.show_frames:
            return
        self.stream.write(f"\nRound {state.round_number}\n")
        self.stream.write(state.print_board() + "\n")
        self.stream.write(status_line(state) + "\n")
        self.stream.flush()

    def show_game_over(self, summary: GameSummary) -> None:
        self.stream.write("\nGAME OVER!\n")
        if summary.won:
            self.stream.write("The snake filled the board!\n")
        self.stream.write(f"Final Score: {summary.final_score}\n")
        self.stream.flush()
