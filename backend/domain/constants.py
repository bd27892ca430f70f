"""
Game constants for the terminal snake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Input event that ends the game without another step
QUIT = "QUIT"
VALID_EVENTS = VALID_MOVES | {QUIT}

OPPOSITE_DIRECTIONS = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Row 0 is the top of the terminal, so UP => y - 1
DIRECTION_DELTAS = {
    UP:    (0, -1),
    DOWN:  (0, 1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
}

# Board settings
BOARD_WIDTH = 60
BOARD_HEIGHT = 20
INITIAL_SNAKE_LENGTH = 3
INITIAL_DIRECTION = RIGHT

# Speed and scoring (milliseconds / points)
INITIAL_TICK_INTERVAL = 150
TICK_INTERVAL_STEP = 5
MIN_TICK_INTERVAL = 50
SCORE_PER_FOOD = 10

# Controller phases
INITIALIZING = "initializing"
RUNNING = "running"
GAME_OVER = "game_over"

# Reasons a game can end
DEATH_WALL = "wall"
DEATH_SELF = "self"
DEATH_QUIT = "quit"
BOARD_FULL = "board_full"
ROUND_LIMIT = "round_limit"
