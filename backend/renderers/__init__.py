"""
Output stages for the terminal snake.

Renderers only ever see complete GameState snapshots; they never take part
in updating the game.
"""

from .base import Renderer, status_line
from .text_renderer import TextRenderer

__all__ = [
    'Renderer',
    'TextRenderer',
    'status_line',
]
