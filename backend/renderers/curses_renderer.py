"""
Curses renderer - draws the board inside the terminal.

Layout (board of width W and height H):
    row 0        top border
    rows 1..H    board rows, framed by '#' in columns 0 and W+1
    row H+1      bottom border
    row H+2      status line
"""

import curses
import logging

from domain.board import Board
from domain.game_state import GameState, GameSummary
from .base import Renderer, status_line

logger = logging.getLogger(__name__)

BORDER_CHAR = '#'
FOOD_CHAR = 'F'
HEAD_CHAR = '@'
BODY_CHAR = 'O'


class ColorPairs:
    """curses color pair ids"""

    BORDER = 1
    FOOD = 2
    HEAD = 3
    BODY = 4
    TEXT = 5
    ALERT = 6


class TerminalTooSmallError(RuntimeError):
    """The terminal cannot fit the board, its border and the status line."""


class CursesRenderer(Renderer):
    """Full redraw of the board every tick on a curses window."""

    def __init__(self, window, board: Board):
        self.window = window
        self.board = board

        self._check_size()

        self.use_colors = curses.has_colors()
        if self.use_colors:
            self._init_colors()
        try:
            curses.curs_set(0)
        except curses.error:
            # Some terminals cannot hide the cursor
            logger.debug("Cursor visibility not supported")

    def _init_colors(self) -> None:
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(ColorPairs.BORDER, curses.COLOR_WHITE, -1)
        curses.init_pair(ColorPairs.FOOD, curses.COLOR_GREEN, -1)
        curses.init_pair(ColorPairs.HEAD, curses.COLOR_YELLOW, -1)
        curses.init_pair(ColorPairs.BODY, curses.COLOR_CYAN, -1)
        curses.init_pair(ColorPairs.TEXT, curses.COLOR_WHITE, -1)
        curses.init_pair(ColorPairs.ALERT, curses.COLOR_RED, -1)

    def _attr(self, pair: int, bold: bool = False) -> int:
        if not self.use_colors:
            return curses.A_BOLD if bold else curses.A_NORMAL
        attr = curses.color_pair(pair)
        return attr | curses.A_BOLD if bold else attr

    def _draw_border(self) -> None:
        attr = self._attr(ColorPairs.BORDER)
        right = self.board.width + 1
        bottom = self.board.height + 1
        horizontal = BORDER_CHAR * (self.board.width + 2)
        self.window.addstr(0, 0, horizontal, attr)
        self.window.addstr(bottom, 0, horizontal, attr)
        for row in range(1, bottom):
            self.window.addstr(row, 0, BORDER_CHAR, attr)
            self.window.addstr(row, right, BORDER_CHAR, attr)

    def _draw_cell(self, position, char: str, attr: int) -> None:
        # +1 on both axes for the border
        x, y = position
        self.window.addstr(y + 1, x + 1, char, attr)

    def _check_size(self) -> None:
        rows, cols = self.window.getmaxyx()
        need_rows, need_cols = self.board.height + 3, self.board.width + 2
        if rows < need_rows or cols < need_cols:
            raise TerminalTooSmallError(
                f"Terminal too small: need at least {need_cols}x{need_rows}, got {cols}x{rows}"
            )

    def render(self, state: GameState) -> None:
        self.window.erase()
        try:
            self._draw_border()

            if state.food is not None:
                self._draw_cell(state.food.position, FOOD_CHAR, self._attr(ColorPairs.FOOD, bold=True))

            body_attr = self._attr(ColorPairs.BODY)
            for segment in state.snake.positions[1:]:
                self._draw_cell(segment, BODY_CHAR, body_attr)
            self._draw_cell(state.snake.head, HEAD_CHAR, self._attr(ColorPairs.HEAD, bold=True))

            self.window.addstr(self.board.height + 2, 0, status_line(state), self._attr(ColorPairs.TEXT))
        except curses.error as e:
            # The terminal was resized below the board size mid-game
            self._check_size()
            raise TerminalTooSmallError(f"Could not draw the board: {e}") from e
        self.window.refresh()

    def _centered(self, row: int, text: str, attr: int) -> None:
        col = max(0, (self.board.width + 2 - len(text)) // 2)
        self.window.addstr(row, col, text, attr)

    def show_game_over(self, summary: GameSummary) -> None:
        """Draw the final screen and wait for one key press."""
        self.window.erase()
        middle = self.board.height // 2
        title = "YOU WIN!" if summary.won else "GAME OVER!"
        try:
            self._centered(middle - 1, title, self._attr(ColorPairs.ALERT, bold=True))
            self._centered(middle + 1, f"Final Score: {summary.final_score}", self._attr(ColorPairs.HEAD, bold=True))
            self._centered(middle + 3, "Press any key to exit...", self._attr(ColorPairs.TEXT))
        except curses.error as e:
            self._check_size()
            raise TerminalTooSmallError(f"Could not draw the game over screen: {e}") from e
        self.window.refresh()

        self.window.nodelay(False)
        self.window.getch()
