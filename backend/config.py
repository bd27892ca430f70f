"""
Configuration for the terminal snake.

Board size and speed progression are fixed game constants (kept in code, not
env vars). Only host concerns such as the random seed and where logs go can be
overridden from the environment or a .env file.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.constants import BOARD_HEIGHT, BOARD_WIDTH

# Interactive runs log here when no log file is configured
INTERACTIVE_LOG_FILE = "snake.log"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_PLAYER = "keyboard"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class GameConfig:
    width: int = BOARD_WIDTH
    height: int = BOARD_HEIGHT
    seed: Optional[int] = None
    player: str = DEFAULT_PLAYER
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"SNAKE_SEED must be an integer, got {raw!r}")


def load_config() -> GameConfig:
    """
    Build a GameConfig from SNAKE_* environment variables.

    Recognised variables:
        SNAKE_SEED: integer seed for food placement and the autopilot
        SNAKE_PLAYER: default input source ('keyboard', 'random', 'scripted')
        SNAKE_LOG_LEVEL: logging level name (default INFO)
        SNAKE_LOG_FILE: log file path; unset or empty logs to stderr
            in headless runs and to INTERACTIVE_LOG_FILE under curses
    """
    load_dotenv()

    log_file = os.getenv('SNAKE_LOG_FILE', '')
    return GameConfig(
        seed=_parse_seed(os.getenv('SNAKE_SEED')),
        player=os.getenv('SNAKE_PLAYER', DEFAULT_PLAYER).strip() or DEFAULT_PLAYER,
        log_level=os.getenv('SNAKE_LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL,
        log_file=log_file.strip() or None,
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL, log_file: Optional[str] = None) -> None:
    """
    Configure root logging.

    curses owns the terminal while a game is on screen, so interactive runs
    should pass a log_file; None logs to stderr.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    if log_file:
        logging.basicConfig(level=numeric_level, format=LOG_FORMAT, filename=log_file, force=True)
    else:
        logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)
