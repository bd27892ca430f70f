import argparse
import json
import logging
import random
import sys
import time
from typing import Callable, List, Optional

from config import INTERACTIVE_LOG_FILE, GameConfig, configure_logging, load_config
from domain.board import Board
from domain.constants import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    DEATH_QUIT,
    GAME_OVER,
    INITIALIZING,
    QUIT,
    ROUND_LIMIT,
    RUNNING,
    VALID_EVENTS,
)
from domain.game_state import GameState, GameSummary
from engine import new_game, step
from players import Player, get_player_class, list_players, parse_moves
from renderers import Renderer, TextRenderer

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Drives one game from start to finish:
      - Board
      - Input source (player)
      - Output stage (renderer)
      - Phase: initializing -> running -> game_over
      - Final summary

    Each tick polls the player, steps the engine, renders the new snapshot
    and sleeps for the current tick interval, strictly in that order.
    """

    def __init__(
        self,
        player: Player,
        renderer: Renderer,
        board: Optional[Board] = None,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], None] = time.sleep,
        max_rounds: Optional[int] = None,
    ):
        self.player = player
        self.renderer = renderer
        self.board = board or Board(BOARD_WIDTH, BOARD_HEIGHT)
        self.rng = rng or random.Random()
        self.sleep = sleep
        self.max_rounds = max_rounds

        self.phase = INITIALIZING
        self.state: Optional[GameState] = None
        self.summary: Optional[GameSummary] = None

    @property
    def game_over(self) -> bool:
        return self.phase == GAME_OVER

    def start(self) -> GameState:
        """Build the opening snapshot and draw the first frame."""
        assert self.phase == INITIALIZING, f"game already started (phase={self.phase})"
        self.state = new_game(self.board, self.rng)
        self.phase = RUNNING
        logger.info(f"Game started on {self.board}: snake at {self.state.snake_positions}, food at {self.state.food_position}")
        self.renderer.render(self.state)
        return self.state

    def run_tick(self) -> bool:
        """
        Execute one tick:
          1) Poll the player once (quit ends the game right away)
          2) Step the engine with the requested direction
          3) Render the new snapshot
          4) Sleep for the current tick interval

        Returns True while the game is still running.
        """
        if self.phase != RUNNING:
            return False

        event = self.player.get_move(self.state)
        assert event is None or event in VALID_EVENTS, f"invalid input event: {event!r}"

        if event == QUIT:
            logger.info(f"Quit requested on round {self.state.round_number}")
            self.state = self.state.end(DEATH_QUIT)
            self._finish()
            return False

        requested = event if event is not None else self.state.direction
        self.state = step(self.state, requested, self.rng)
        logger.debug(f"Tick {self.state.round_number}: {self.state!r}")

        self.renderer.render(self.state)

        if self.state.game_over:
            self._finish()
            return False

        if self.max_rounds is not None and self.state.round_number >= self.max_rounds:
            logger.info(f"Reached max rounds ({self.max_rounds})")
            self.state = self.state.end(ROUND_LIMIT)
            self._finish()
            return False

        self.sleep(self.state.tick_interval / 1000)
        return True

    def run(self) -> GameSummary:
        """Play until the game is over and return the final summary."""
        if self.phase == INITIALIZING:
            self.start()
        while self.run_tick():
            pass
        return self.summary

    def _finish(self) -> None:
        self.phase = GAME_OVER
        self.summary = self.state.summary()
        logger.info(
            f"Game Over ({self.summary.death_reason}): score {self.summary.final_score}, "
            f"rounds {self.summary.rounds}, length {self.summary.snake_length}"
        )
        self.renderer.show_game_over(self.summary)


# -------------------------------
# Host shell
# -------------------------------

def build_player(player_key: str, rng: random.Random, window=None, moves: Optional[List[Optional[str]]] = None) -> Player:
    """Instantiate the requested input source with what it needs."""
    player_class = get_player_class(player_key)
    key = (player_key or "keyboard").strip().lower()
    if moves is not None and key != "scripted":
        raise ValueError(f"--moves only applies to the scripted player, not {key!r}")
    if key == "keyboard":
        if window is None:
            raise ValueError("The keyboard player needs a terminal; use --player random or scripted with --headless")
        return player_class(window)
    if key == "scripted":
        return player_class(moves or [])
    return player_class(rng=rng)


def play_headless(
    config: GameConfig,
    player_key: str,
    moves: Optional[List[Optional[str]]] = None,
    max_rounds: Optional[int] = None,
    show_frames: bool = True,
    sleep: Callable[[float], None] = time.sleep,
) -> GameSummary:
    """Run a game that prints frames to stdout instead of using curses."""
    rng = random.Random(config.seed)
    game = SnakeGame(
        player=build_player(player_key, rng, moves=moves),
        renderer=TextRenderer(show_frames=show_frames),
        board=Board(config.width, config.height),
        rng=rng,
        sleep=sleep,
        max_rounds=max_rounds,
    )
    return game.run()


def play_in_terminal(
    config: GameConfig,
    player_key: str,
    moves: Optional[List[Optional[str]]] = None,
    max_rounds: Optional[int] = None,
) -> GameSummary:
    """Run a game on the curses screen; the terminal is restored afterwards."""
    import curses
    from renderers.curses_renderer import CursesRenderer

    def _play(stdscr) -> GameSummary:
        rng = random.Random(config.seed)
        board = Board(config.width, config.height)
        game = SnakeGame(
            player=build_player(player_key, rng, window=stdscr, moves=moves),
            renderer=CursesRenderer(stdscr, board),
            board=board,
            rng=rng,
            max_rounds=max_rounds,
        )
        return game.run()

    return curses.wrapper(_play)


def main(argv: Optional[List[str]] = None) -> int:
    try:
        config = load_config()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    player_help = "; ".join(f"{p['key']}: {p['description']}" for p in list_players())
    parser = argparse.ArgumentParser(
        description="Play snake in the terminal."
    )
    parser.add_argument("--player", type=str, default=config.player,
                        help=f"Input source ({player_help})")
    parser.add_argument("--moves", type=str, default=None,
                        help="Comma separated moves for the scripted player (e.g. 'U,U,L,-,Q')")
    parser.add_argument("--headless", action="store_true",
                        help="Print frames to stdout instead of drawing with curses")
    parser.add_argument("--quiet", action="store_true",
                        help="With --headless, only print the final result")
    parser.add_argument("--seed", type=int, default=config.seed,
                        help="Random seed for food placement and the autopilot")
    parser.add_argument("--max-rounds", type=int, default=None,
                        help="Stop after this many rounds")
    parser.add_argument("--log-level", type=str, default=config.log_level,
                        help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--log-file", type=str, default=config.log_file,
                        help=f"Log file path (headless runs default to stderr, interactive runs to {INTERACTIVE_LOG_FILE})")
    parser.add_argument("--json", action="store_true",
                        help="Print the final summary as JSON")

    args = parser.parse_args(argv)

    config.seed = args.seed
    config.player = args.player

    # curses owns the screen in interactive mode, so never log to stderr there
    log_file = args.log_file or (None if args.headless else INTERACTIVE_LOG_FILE)
    try:
        configure_logging(args.log_level, log_file)
    except ValueError as e:
        parser.error(str(e))

    try:
        moves = parse_moves(args.moves) if args.moves else None
        if args.headless:
            summary = play_headless(
                config,
                args.player,
                moves=moves,
                max_rounds=args.max_rounds,
                show_frames=not args.quiet,
            )
        else:
            summary = play_in_terminal(config, args.player, moves=moves, max_rounds=args.max_rounds)
    except (ValueError, RuntimeError) as e:
        logger.error(f"Could not run the game: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print(f"Final Score: {summary.final_score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
