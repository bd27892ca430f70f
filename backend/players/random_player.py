"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITE_DIRECTIONS
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    An autopilot for demo runs that picks a direction avoiding walls and
    its own body.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        snake_positions = game_state.snake_positions
        head_x, head_y = snake_positions[0]

        # Calculate all possible next positions
        possible_moves = {
            UP:    (head_x, head_y - 1),  # Up => y - 1 (row 0 is the top)
            DOWN:  (head_x, head_y + 1),
            LEFT:  (head_x - 1, head_y),
            RIGHT: (head_x + 1, head_y)
        }

        # Filter out moves that:
        # 1. Reverse through the neck (the engine would ignore them)
        # 2. Hit walls
        # 3. Hit own body, tail included
        valid_moves: List[str] = []
        for move, (new_x, new_y) in possible_moves.items():
            if move == OPPOSITE_DIRECTIONS[game_state.direction]:
                continue

            # Check wall collisions
            if not game_state.board.in_bounds((new_x, new_y)):
                continue

            # Check self collisions
            if (new_x, new_y) in snake_positions:
                continue

            valid_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(valid_moves)
