"""
Tests for main.py - the game loop controller and the command line entry point.
"""

import json
import logging
import os
import random
import sys
from unittest.mock import MagicMock, Mock, call, patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import SnakeGame, build_player, main, play_headless
from config import INTERACTIVE_LOG_FILE, GameConfig
from domain import Board, GameState, GameSummary, UP, DOWN, LEFT, RIGHT, QUIT
from domain.constants import (
    DEATH_QUIT,
    DEATH_WALL,
    GAME_OVER,
    INITIALIZING,
    INITIAL_TICK_INTERVAL,
    MIN_TICK_INTERVAL,
    ROUND_LIMIT,
    RUNNING,
)
from players import RandomPlayer, ScriptedPlayer


def make_game(moves=(), board=None, seed=0, **kwargs):
    renderer = MagicMock()
    sleep = Mock()
    game = SnakeGame(
        player=ScriptedPlayer(moves),
        renderer=renderer,
        board=board or Board(60, 20),
        rng=random.Random(seed),
        sleep=sleep,
        **kwargs
    )
    return game, renderer, sleep


class TestSnakeGame:
    """Tests for the SnakeGame controller."""

    def test_initial_phase(self):
        game, renderer, _ = make_game()
        assert game.phase == INITIALIZING
        assert game.state is None
        assert game.summary is None
        renderer.render.assert_not_called()

    def test_start_builds_opening_state_and_renders(self):
        game, renderer, _ = make_game()
        state = game.start()

        assert game.phase == RUNNING
        assert state.snake_positions == [(30, 10), (29, 10), (28, 10)]
        assert state.direction == RIGHT
        assert state.score == 0
        assert state.tick_interval == INITIAL_TICK_INTERVAL
        assert state.food_position not in state.snake
        renderer.render.assert_called_once_with(state)

    def test_start_only_once(self):
        game, _, _ = make_game()
        game.start()
        with pytest.raises(AssertionError):
            game.start()

    def test_tick_polls_steps_renders_then_sleeps(self):
        game, renderer, sleep = make_game(moves=[UP])
        game.start()
        renderer.reset_mock()

        manager = Mock()
        manager.attach_mock(renderer.render, "render")
        manager.attach_mock(sleep, "sleep")

        assert game.run_tick() is True

        assert game.state.snake.head == (30, 9)
        assert game.state.direction == UP
        assert manager.mock_calls == [
            call.render(game.state),
            call.sleep(game.state.tick_interval / 1000),
        ]

    def test_no_input_keeps_current_direction(self):
        game, _, _ = make_game(moves=[None])
        game.start()
        game.run_tick()
        assert game.state.snake.head == (31, 10)
        assert game.state.direction == RIGHT

    def test_reverse_input_is_ignored(self):
        game, _, _ = make_game(moves=[LEFT])
        game.start()
        game.run_tick()
        assert game.state.snake.head == (31, 10)
        assert game.state.direction == RIGHT

    def test_quit_ends_before_update_and_render(self):
        game, renderer, sleep = make_game(moves=[QUIT])
        start_state = game.start()
        renderer.reset_mock()

        with patch('main.step') as mock_step:
            assert game.run_tick() is False
            mock_step.assert_not_called()

        renderer.render.assert_not_called()
        sleep.assert_not_called()
        assert game.phase == GAME_OVER
        assert game.game_over is True
        assert game.state.snake == start_state.snake
        assert game.summary == GameSummary(
            final_score=0,
            final_tick_interval=INITIAL_TICK_INTERVAL,
            rounds=0,
            snake_length=3,
            death_reason=DEATH_QUIT,
        )
        renderer.show_game_over.assert_called_once_with(game.summary)

    def test_run_until_wall(self):
        """With no input the snake runs right from x=30 into the wall at x=60."""
        game, renderer, sleep = make_game()
        summary = game.run()

        assert summary.death_reason == DEATH_WALL
        assert summary.rounds == 29
        assert game.state.snake.head == (59, 10)
        assert game.phase == GAME_OVER
        # One opening frame plus one per tick, including the fatal one
        assert renderer.render.call_count == 1 + 30
        assert sleep.call_count == 29
        for (seconds,), _ in sleep.call_args_list:
            assert MIN_TICK_INTERVAL / 1000 <= seconds <= INITIAL_TICK_INTERVAL / 1000
        renderer.show_game_over.assert_called_once_with(summary)

    def test_summary_reports_score_and_interval(self):
        game, _, _ = make_game()
        summary = game.run()
        assert summary.final_score == game.state.score
        assert summary.final_tick_interval == game.state.tick_interval
        assert summary.final_score % 10 == 0

    def test_game_over_is_terminal(self):
        game, renderer, sleep = make_game(moves=[QUIT])
        game.run()
        calls_before = (renderer.render.call_count, sleep.call_count)
        state_before = game.state

        assert game.run_tick() is False
        assert game.state is state_before
        assert (renderer.render.call_count, sleep.call_count) == calls_before

    def test_max_rounds(self):
        renderer = MagicMock()
        game = SnakeGame(
            player=RandomPlayer(random.Random(1)),
            renderer=renderer,
            rng=random.Random(1),
            sleep=Mock(),
            max_rounds=5,
        )
        summary = game.run()
        assert summary.death_reason == ROUND_LIMIT
        assert summary.rounds == 5

    def test_invalid_event_is_a_contract_failure(self):
        player = MagicMock()
        player.get_move.return_value = "JUMP"
        game = SnakeGame(player=player, renderer=MagicMock(), sleep=Mock())
        game.start()
        with pytest.raises(AssertionError):
            game.run_tick()

    def test_player_sees_current_snapshot(self):
        player = MagicMock()
        player.get_move.side_effect = [DOWN, QUIT]
        game = SnakeGame(player=player, renderer=MagicMock(), rng=random.Random(0), sleep=Mock())
        start_state = game.start()

        game.run()

        first_seen = player.get_move.call_args_list[0].args[0]
        second_seen = player.get_move.call_args_list[1].args[0]
        assert first_seen is start_state
        assert isinstance(second_seen, GameState)
        assert second_seen.snake.head == (30, 11)


class TestBuildPlayer:

    def test_keyboard_needs_window(self):
        with pytest.raises(ValueError):
            build_player("keyboard", random.Random(0))

    def test_scripted(self):
        player = build_player("scripted", random.Random(0), moves=[UP])
        assert isinstance(player, ScriptedPlayer)
        assert player.moves == [UP]

    def test_random(self):
        assert isinstance(build_player("random", random.Random(0)), RandomPlayer)

    @pytest.mark.parametrize("player_key", ["random", "keyboard"])
    def test_moves_rejected_for_other_players(self, player_key):
        with pytest.raises(ValueError, match="--moves"):
            build_player(player_key, random.Random(0), window=MagicMock(), moves=[UP])


class TestPlayHeadless:

    def test_scripted_quit(self, capsys):
        summary = play_headless(GameConfig(seed=3), "scripted", moves=[QUIT], sleep=Mock())
        assert summary.death_reason == DEATH_QUIT
        assert summary.final_score == 0
        output = capsys.readouterr().out
        assert "GAME OVER!" in output

    def test_seed_makes_games_repeatable(self):
        first = play_headless(GameConfig(seed=9), "random", max_rounds=50, show_frames=False, sleep=Mock())
        second = play_headless(GameConfig(seed=9), "random", max_rounds=50, show_frames=False, sleep=Mock())
        assert first == second


class TestMain:
    """Tests for the command line entry point."""

    @patch('config.load_dotenv')
    def test_headless_quit_prints_final_score(self, mock_load_dotenv, capsys, tmp_path):
        log_file = str(tmp_path / "snake.log")
        exit_code = main([
            "--headless", "--quiet", "--player", "scripted", "--moves", "Q",
            "--log-file", log_file,
        ])
        assert exit_code == 0
        assert "Final Score: 0" in capsys.readouterr().out

    @patch('config.load_dotenv')
    def test_json_summary(self, mock_load_dotenv, capsys, tmp_path):
        exit_code = main([
            "--headless", "--quiet", "--json", "--player", "scripted", "--moves", "Q",
            "--log-file", str(tmp_path / "snake.log"),
        ])
        assert exit_code == 0
        output = capsys.readouterr().out
        payload = json.loads(output[output.index("{"):])
        assert payload["final_score"] == 0
        assert payload["final_tick_interval"] == INITIAL_TICK_INTERVAL
        assert payload["death_reason"] == DEATH_QUIT

    @patch('config.load_dotenv')
    def test_keyboard_without_terminal_fails(self, mock_load_dotenv, capsys, tmp_path):
        exit_code = main([
            "--headless", "--player", "keyboard",
            "--log-file", str(tmp_path / "snake.log"),
        ])
        assert exit_code == 1
        assert "Error:" in capsys.readouterr().err

    @patch('config.load_dotenv')
    def test_bad_moves_fail(self, mock_load_dotenv, capsys, tmp_path):
        exit_code = main([
            "--headless", "--player", "scripted", "--moves", "U,JUMP",
            "--log-file", str(tmp_path / "snake.log"),
        ])
        assert exit_code == 1

    @patch('config.load_dotenv')
    @patch('main.play_in_terminal')
    def test_interactive_uses_terminal(self, mock_play, mock_load_dotenv, capsys, tmp_path):
        mock_play.return_value = GameSummary(final_score=30, final_tick_interval=135)
        exit_code = main(["--player", "keyboard", "--log-file", str(tmp_path / "snake.log")])
        assert exit_code == 0
        mock_play.assert_called_once()
        assert "Final Score: 30" in capsys.readouterr().out

    @patch('config.load_dotenv')
    def test_invalid_seed_in_environment_fails(self, mock_load_dotenv, monkeypatch, capsys):
        monkeypatch.setenv("SNAKE_SEED", "abc")
        exit_code = main(["--headless", "--player", "scripted", "--moves", "Q"])
        assert exit_code == 1
        assert "SNAKE_SEED" in capsys.readouterr().err

    @patch('config.load_dotenv')
    def test_moves_with_random_player_fails(self, mock_load_dotenv, capsys, tmp_path):
        exit_code = main([
            "--headless", "--player", "random", "--moves", "U,U",
            "--log-file", str(tmp_path / "snake.log"),
        ])
        assert exit_code == 1
        assert "--moves" in capsys.readouterr().err

    @patch('config.load_dotenv')
    def test_headless_logs_to_stderr_by_default(self, mock_load_dotenv, monkeypatch, tmp_path):
        monkeypatch.delenv("SNAKE_LOG_FILE", raising=False)
        monkeypatch.chdir(tmp_path)
        exit_code = main(["--headless", "--quiet", "--player", "scripted", "--moves", "Q"])
        assert exit_code == 0
        handlers = logging.getLogger().handlers
        assert handlers
        assert not any(isinstance(h, logging.FileHandler) for h in handlers)
        assert list(tmp_path.iterdir()) == []

    @patch('config.load_dotenv')
    @patch('main.play_in_terminal')
    def test_interactive_logs_to_file_by_default(self, mock_play, mock_load_dotenv, monkeypatch, tmp_path):
        monkeypatch.delenv("SNAKE_LOG_FILE", raising=False)
        monkeypatch.chdir(tmp_path)
        mock_play.return_value = GameSummary(final_score=0, final_tick_interval=INITIAL_TICK_INTERVAL)
        exit_code = main(["--player", "keyboard"])
        assert exit_code == 0
        file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert os.path.realpath(file_handlers[0].baseFilename) == os.path.realpath(tmp_path / INTERACTIVE_LOG_FILE)
        file_handlers[0].close()
