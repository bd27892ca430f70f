"""
Keyboard player implementation - non-blocking curses key polling.
"""

import curses
import logging
from typing import Optional

from domain.constants import UP, DOWN, LEFT, RIGHT, QUIT
from domain.game_state import GameState
from .base import Player

logger = logging.getLogger(__name__)

ESCAPE_KEY = 27

KEY_BINDINGS = {
    curses.KEY_UP: UP, ord('w'): UP, ord('W'): UP,
    curses.KEY_DOWN: DOWN, ord('s'): DOWN, ord('S'): DOWN,
    curses.KEY_LEFT: LEFT, ord('a'): LEFT, ord('A'): LEFT,
    curses.KEY_RIGHT: RIGHT, ord('d'): RIGHT, ord('D'): RIGHT,
    ord('q'): QUIT, ord('Q'): QUIT, ESCAPE_KEY: QUIT,
}


class KeyboardPlayer(Player):
    """
    Reads arrow keys / WASD from a curses window.

    Every key pressed since the last poll is drained: the latest direction
    wins, and a quit key anywhere in the batch wins over directions.
    """

    def __init__(self, window):
        self.window = window
        self.window.nodelay(True)
        self.window.keypad(True)

    def get_move(self, game_state: GameState) -> Optional[str]:
        event = None
        while True:
            key = self.window.getch()
            if key == curses.ERR:
                break
            mapped = KEY_BINDINGS.get(key)
            if mapped is None:
                continue
            if mapped == QUIT:
                logger.debug("Quit key pressed")
                return QUIT
            event = mapped
        return event
