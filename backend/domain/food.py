"""
Food entity - the single item the snake is chasing.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Food:
    position: Tuple[int, int]

    @property
    def x(self) -> int:
        return self.position[0]

    @property
    def y(self) -> int:
        return self.position[1]
