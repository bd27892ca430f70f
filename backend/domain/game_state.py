"""
GameState entity - a snapshot of the game at a point in time.
"""

from dataclasses import dataclass, asdict, replace
from typing import Any, Dict, List, Optional, Tuple

from .board import Board
from .constants import BOARD_FULL, INITIAL_TICK_INTERVAL
from .food import Food
from .snake import Snake


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        board: the grid the game is played on
        snake: the snake, head first
        food: the current food item (None only once the board is full)
        direction: the direction the snake last moved in
        game_over: set once the game has ended; the snapshot is final from then on
        score: points collected so far
        tick_interval: milliseconds to wait between ticks
        round_number: how many ticks have been applied (0-based)
        death_reason: why the game ended ('wall', 'self', 'quit', 'board_full')
        foods_eaten: how many food items have been eaten
    """

    board: Board
    snake: Snake
    food: Optional[Food]
    direction: str
    game_over: bool = False
    score: int = 0
    tick_interval: int = INITIAL_TICK_INTERVAL
    round_number: int = 0
    death_reason: Optional[str] = None
    foods_eaten: int = 0

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def snake_positions(self) -> List[Tuple[int, int]]:
        return list(self.snake.positions)

    @property
    def food_position(self) -> Optional[Tuple[int, int]]:
        return self.food.position if self.food is not None else None

    @property
    def won(self) -> bool:
        return self.death_reason == BOARD_FULL

    def end(self, reason: str) -> "GameState":
        """Return this snapshot marked as finished, or itself if already over."""
        if self.game_over:
            return self
        return replace(self, game_over=True, death_reason=reason)

    def summary(self) -> "GameSummary":
        return GameSummary(
            final_score=self.score,
            final_tick_interval=self.tick_interval,
            rounds=self.round_number,
            snake_length=len(self.snake),
            death_reason=self.death_reason,
        )

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        O = snake body
        @ = snake head
        Row 0 is printed first (top of the screen), with x-axis labels
        (last digit of each column) at the bottom.
        """
        # Create empty board
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        # Place food
        if self.food is not None:
            board[self.food.y][self.food.x] = 'F'

        # Place snake body, head last so it is never hidden
        for x, y in self.snake.positions[1:]:
            if self.board.in_bounds((x, y)):
                board[y][x] = 'O'
        hx, hy = self.snake.head
        if self.board.in_bounds((hx, hy)):
            board[hy][hx] = '@'

        result = []
        for y in range(self.height):
            result.append(f"{y:2d} {''.join(board[y])}")

        result.append("   " + "".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState round={self.round_number}, head={self.snake.head}, "
            f"length={len(self.snake)}, food={self.food_position}, "
            f"score={self.score}, interval={self.tick_interval}, over={self.game_over}>"
        )


@dataclass(frozen=True)
class GameSummary:
    """Final result handed to the host shell once the game is over."""

    final_score: int
    final_tick_interval: int
    rounds: int = 0
    snake_length: int = 0
    death_reason: Optional[str] = None

    @property
    def won(self) -> bool:
        return self.death_reason == BOARD_FULL

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
