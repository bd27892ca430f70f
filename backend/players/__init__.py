"""
Player implementations for the terminal snake.

This module contains the input-source abstraction and the implementations
that decide where the snake goes next.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer, parse_moves
from .registry import get_player_class, list_players, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
    'parse_moves',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
]
