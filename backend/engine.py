"""
Movement and collision engine.

Pure state transitions for the snake game: every function takes a snapshot
and returns a new one, nothing here touches the terminal. The controller in
main.py is the only caller that sequences these steps.
"""

import logging
import random
from dataclasses import replace
from typing import Iterable, Optional, Tuple

from domain.board import Board
from domain.constants import (
    BOARD_FULL,
    BOARD_HEIGHT,
    BOARD_WIDTH,
    DEATH_SELF,
    DEATH_WALL,
    DIRECTION_DELTAS,
    INITIAL_DIRECTION,
    INITIAL_SNAKE_LENGTH,
    INITIAL_TICK_INTERVAL,
    MIN_TICK_INTERVAL,
    OPPOSITE_DIRECTIONS,
    SCORE_PER_FOOD,
    TICK_INTERVAL_STEP,
    VALID_MOVES,
)
from domain.food import Food
from domain.game_state import GameState
from domain.snake import Snake

logger = logging.getLogger(__name__)


def resolve_direction(current: str, requested: str) -> str:
    """
    Pick the direction the snake will actually move in.

    A request for the exact opposite of the current direction would drive the
    head straight into the neck, so it is ignored.
    """
    assert current in VALID_MOVES, f"invalid current direction: {current!r}"
    assert requested in VALID_MOVES, f"invalid requested direction: {requested!r}"
    if OPPOSITE_DIRECTIONS[current] == requested:
        return current
    return requested


def project_head(head: Tuple[int, int], direction: str) -> Tuple[int, int]:
    """Return the cell one unit away from head in the given direction."""
    dx, dy = DIRECTION_DELTAS[direction]
    return (head[0] + dx, head[1] + dy)


def detect_collision(board: Board, snake: Snake, new_head: Tuple[int, int]) -> Optional[str]:
    """
    Return the collision the new head would cause, or None.

    Checked against the body as it is *before* the move, tail included: the
    tail only leaves its cell once this check has passed.
    """
    if not board.in_bounds(new_head):
        return DEATH_WALL
    if new_head in snake:
        return DEATH_SELF
    return None


def next_tick_interval(interval: int) -> int:
    """Speed the game up by one step without going below the floor."""
    return max(MIN_TICK_INTERVAL, interval - TICK_INTERVAL_STEP)


def place_food(
    snake_body: Iterable[Tuple[int, int]],
    board: Board,
    rng: Optional[random.Random] = None,
) -> Optional[Tuple[int, int]]:
    """
    Return a random free cell for the next food item.

    Every cell not covered by the snake is equally likely. Returns None when
    the snake covers the whole board.
    """
    rng = rng or random
    occupied = set(snake_body)
    free_cells = [cell for cell in board.cells() if cell not in occupied]
    if not free_cells:
        return None
    return rng.choice(free_cells)


def new_game(board: Optional[Board] = None, rng: Optional[random.Random] = None) -> GameState:
    """
    Build the opening snapshot: a three segment snake centred on the board
    facing right, the first food item, no score and the starting speed.
    """
    board = board or Board(BOARD_WIDTH, BOARD_HEIGHT)
    snake = Snake.spawn(board.center, INITIAL_DIRECTION, INITIAL_SNAKE_LENGTH)
    for segment in snake:
        assert board.in_bounds(segment), f"board {board} too small for the starting snake"

    food_position = place_food(snake, board, rng)
    assert food_position is not None, f"board {board} has no room for food"

    state = GameState(
        board=board,
        snake=snake,
        food=Food(food_position),
        direction=INITIAL_DIRECTION,
        score=0,
        tick_interval=INITIAL_TICK_INTERVAL,
    )
    logger.debug(f"New game: {state!r}")
    return state


def step(state: GameState, requested_direction: str, rng: Optional[random.Random] = None) -> GameState:
    """
    Advance the game by one tick.

    1) Resolve the direction (reversal through the neck is ignored)
    2) Project the new head
    3) Wall / self collision ends the game; nothing else changes
    4) Food eaten: score, speed-up, grow and place the next food
       Otherwise: move, dropping the tail

    A finished game is returned unchanged.
    """
    if state.game_over:
        return state

    direction = resolve_direction(state.direction, requested_direction)
    new_head = project_head(state.snake.head, direction)

    collision = detect_collision(state.board, state.snake, new_head)
    if collision is not None:
        logger.info(f"Collision ({collision}) at {new_head} on round {state.round_number}, score {state.score}")
        return state.end(collision)

    if state.food is None or new_head != state.food.position:
        return replace(
            state,
            snake=state.snake.advance(new_head),
            direction=direction,
            round_number=state.round_number + 1,
        )

    snake = state.snake.advance(new_head, grow=True)
    score = state.score + SCORE_PER_FOOD
    tick_interval = next_tick_interval(state.tick_interval)
    logger.info(f"Food eaten at {new_head}: score {score}, length {len(snake)}, interval {tick_interval}ms")

    food_position = place_food(snake, state.board, rng)
    if food_position is None:
        logger.info(f"Board full after {state.round_number + 1} rounds, score {score}")
        return replace(
            state,
            snake=snake,
            food=None,
            direction=direction,
            score=score,
            tick_interval=tick_interval,
            round_number=state.round_number + 1,
            foods_eaten=state.foods_eaten + 1,
            game_over=True,
            death_reason=BOARD_FULL,
        )

    return replace(
        state,
        snake=snake,
        food=Food(food_position),
        direction=direction,
        score=score,
        tick_interval=tick_interval,
        round_number=state.round_number + 1,
        foods_eaten=state.foods_eaten + 1,
    )
