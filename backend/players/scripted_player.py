"""
Scripted player implementation - replays a fixed list of input events.
"""

from typing import Iterable, List, Optional

from domain.constants import UP, DOWN, LEFT, RIGHT, QUIT, VALID_EVENTS
from domain.game_state import GameState
from .base import Player

# Short forms accepted by parse_moves (e.g. "R,R,U,-,Q")
MOVE_ALIASES = {
    "U": UP,
    "D": DOWN,
    "L": LEFT,
    "R": RIGHT,
    "Q": QUIT,
    "-": None,
}


def parse_moves(raw: str) -> List[Optional[str]]:
    """
    Parse a comma separated move list.

    Tokens may be full names (UP, QUIT) or single letters (U, D, L, R, Q).
    A '-' stands for a tick with no input.
    """
    moves: List[Optional[str]] = []
    for token in raw.split(","):
        token = token.strip().upper()
        if not token:
            continue
        if token in MOVE_ALIASES:
            moves.append(MOVE_ALIASES[token])
        elif token in VALID_EVENTS:
            moves.append(token)
        else:
            raise ValueError(f"Unknown move '{token}'. Use UP, DOWN, LEFT, RIGHT, QUIT or U/D/L/R/Q/-")
    return moves


class ScriptedPlayer(Player):
    """
    Returns the given events one per poll, then None forever.
    """

    def __init__(self, moves: Iterable[Optional[str]]):
        self.moves: List[Optional[str]] = list(moves)
        for move in self.moves:
            if move is not None and move not in VALID_EVENTS:
                raise ValueError(f"Invalid scripted move: {move!r}")
        self.index = 0

    @property
    def exhausted(self) -> bool:
        return self.index >= len(self.moves)

    def get_move(self, game_state: GameState) -> Optional[str]:
        if self.exhausted:
            return None
        move = self.moves[self.index]
        self.index += 1
        return move
