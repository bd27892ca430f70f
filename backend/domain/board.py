"""
Board entity - the fixed grid the snake lives on.
"""

from typing import Iterator, Tuple


class Board:
    """
    A fixed-size rectangular grid.

    Attributes:
        width: number of columns (x runs 0..width-1)
        height: number of rows (y runs 0..height-1, row 0 at the top)
    """

    __slots__ = ("_width", "_height")

    def __init__(self, width: int, height: int):
        assert width > 0 and height > 0, f"board must be non-empty, got {width}x{height}"
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        return self._width * self._height

    @property
    def center(self) -> Tuple[int, int]:
        return (self._width // 2, self._height // 2)

    def in_bounds(self, position: Tuple[int, int]) -> bool:
        """Return True if the position lies on the board."""
        x, y = position
        return 0 <= x < self._width and 0 <= y < self._height

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield every cell, row by row from the top-left corner."""
        for y in range(self._height):
            for x in range(self._width):
                yield (x, y)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._width == other._width and self._height == other._height

    def __hash__(self):
        return hash((self._width, self._height))

    def __repr__(self):
        return f"<Board {self._width}x{self._height}>"
