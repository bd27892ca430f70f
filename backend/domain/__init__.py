"""
Domain entities for the terminal snake game.

This module contains the core game entities that are independent of
terminal concerns (curses drawing, keyboard polling, etc.).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, QUIT, VALID_MOVES, VALID_EVENTS,
    OPPOSITE_DIRECTIONS, DIRECTION_DELTAS,
)
from .board import Board
from .food import Food
from .snake import Snake
from .game_state import GameState, GameSummary

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'QUIT', 'VALID_MOVES', 'VALID_EVENTS',
    'OPPOSITE_DIRECTIONS', 'DIRECTION_DELTAS',
    'Board',
    'Food',
    'Snake',
    'GameState',
    'GameSummary',
]
