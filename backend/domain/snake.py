"""
Snake entity for the game engine.
"""

from typing import Iterable, Iterator, Tuple

from .constants import DIRECTION_DELTAS, INITIAL_SNAKE_LENGTH, VALID_MOVES


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: tuple of (x, y) from head at index 0 to tail at the end

    A Snake never changes after construction; moving it produces a new one.
    """

    __slots__ = ("_positions",)

    def __init__(self, positions: Iterable[Tuple[int, int]]):
        self._positions = tuple(tuple(p) for p in positions)
        assert self._positions, "snake needs at least one segment"

    @classmethod
    def spawn(
        cls,
        head: Tuple[int, int],
        direction: str,
        length: int = INITIAL_SNAKE_LENGTH,
    ) -> "Snake":
        """Build a straight snake whose body trails behind the head."""
        assert direction in VALID_MOVES, f"invalid direction: {direction!r}"
        assert length >= INITIAL_SNAKE_LENGTH, f"snake must start with {INITIAL_SNAKE_LENGTH}+ segments"
        dx, dy = DIRECTION_DELTAS[direction]
        hx, hy = head
        return cls((hx - dx * i, hy - dy * i) for i in range(length))

    @property
    def positions(self) -> Tuple[Tuple[int, int], ...]:
        return self._positions

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self._positions[0]

    @property
    def neck(self) -> Tuple[int, int]:
        """Return the segment directly behind the head."""
        return self._positions[1]

    @property
    def tail(self) -> Tuple[int, int]:
        """Return the tail position (last element)."""
        return self._positions[-1]

    def advance(self, new_head: Tuple[int, int], grow: bool = False) -> "Snake":
        """
        Return the snake after its head moves to new_head.

        The tail is kept when growing, otherwise it is dropped so the length
        stays the same.
        """
        body = self._positions if grow else self._positions[:-1]
        return Snake((tuple(new_head),) + body)

    def __len__(self):
        return len(self._positions)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(self._positions)

    def __contains__(self, position) -> bool:
        return tuple(position) in self._positions

    def __eq__(self, other):
        if not isinstance(other, Snake):
            return NotImplemented
        return self._positions == other._positions

    def __hash__(self):
        return hash(self._positions)

    def __repr__(self):
        return f"<Snake head={self.head} length={len(self)}>"
