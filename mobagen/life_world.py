"""Double-buffered, wrap-around board of cells for the Game of Life."""

from __future__ import annotations

import random
from collections.abc import Iterator, Sequence

Point = tuple[int, int]


class World:
    """Square board whose edges wrap around, holding a current and a next buffer.

    Rules read the current buffer and write the next one; ``swap_buffers``
    then makes the next buffer current and copies it over the old one.
    """

    def __init__(self, side_size: int) -> None:
        self._buffers: list[list[bool]] = [[], []]
        self._current = 0
        self._side_size = 0
        self.resize(side_size)

    @property
    def side_size(self) -> int:
        """Number of cells along one side of the board."""
        return self._side_size

    def resize(self, side_size: int) -> None:
        """Clear the board and give it a new side size."""
        if side_size < 1:
            raise ValueError(f"side size must be positive, got {side_size}")
        cells = side_size * side_size
        self._current = 0
        self._side_size = side_size
        self._buffers = [[False] * cells, [False] * cells]

    def swap_buffers(self) -> None:
        """Make the next buffer current and copy it into the other buffer."""
        self._current ^= 1
        self._buffers[self._current ^ 1][:] = self._buffers[self._current]

    def _index(self, point: Sequence[int]) -> int:
        x, y = point
        side = self._side_size
        return (y % side) * side + x % side

    def get(self, point: Sequence[int]) -> bool:
        """State of a cell in the current buffer; coordinates wrap around."""
        return self._buffers[self._current][self._index(point)]

    def set_next(self, point: Sequence[int], value: bool) -> None:
        """Write a cell of the next buffer."""
        self._buffers[self._current ^ 1][self._index(point)] = bool(value)

    def set_current(self, point: Sequence[int], value: bool) -> None:
        """Write a cell of the current buffer."""
        self._buffers[self._current][self._index(point)] = bool(value)

    def randomize(self, rng: random.Random | None = None) -> None:
        """Fill both buffers with the same random cells."""
        rng = rng or random.Random()
        first = [rng.randint(0, 1) != 0 for _ in self._buffers[0]]
        self._buffers[0][:] = first
        self._buffers[1][:] = first

    def alive_cells(self) -> Iterator[Point]:
        """Yield the coordinates of every live cell in the current buffer."""
        side = self._side_size
        for index, alive in enumerate(self._buffers[self._current]):
            if alive:
                yield index % side, index // side