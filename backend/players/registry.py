"""
Registry for input sources.

Maps player keys (e.g., 'keyboard', 'random') to player classes. To add a new
input source, create a module with a Player subclass, add a loader here, and
add an entry to PLAYER_LOADERS and list_players().
"""

from typing import Callable, Dict, Optional, Type

from .base import Player


# Lazy imports so curses is only needed when the keyboard is actually used
def _get_keyboard_player() -> Type[Player]:
    from .keyboard_player import KeyboardPlayer
    return KeyboardPlayer


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


def _get_scripted_player() -> Type[Player]:
    from .scripted_player import ScriptedPlayer
    return ScriptedPlayer


# Registry: maps player key -> callable that returns the player class
PLAYER_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "keyboard": _get_keyboard_player,
    "random": _get_random_player,
    "scripted": _get_scripted_player,
}

# Canonical list of available player keys (for the CLI)
AVAILABLE_PLAYERS = list(PLAYER_LOADERS.keys())


def get_player_class(player_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        player_key: One of 'keyboard', 'random', 'scripted'. If None or empty,
            returns the keyboard player.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If player_key is not recognized.
    """
    if not player_key or player_key.strip() == "":
        player_key = "keyboard"

    player_key = player_key.strip().lower()

    if player_key not in PLAYER_LOADERS:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(
            f"Unknown player '{player_key}'. Available players: {available}"
        )

    return PLAYER_LOADERS[player_key]()


def list_players() -> list:
    """
    Return metadata about all available input sources.

    Returns:
        List of dicts with 'key' and 'description' for each player.
    """
    return [
        {"key": "keyboard", "description": "Arrow keys / WASD in the terminal, Q or Esc to quit"},
        {"key": "random", "description": "Autopilot that wanders while avoiding walls and itself"},
        {"key": "scripted", "description": "Replays a fixed move list given with --moves"},
    ]
