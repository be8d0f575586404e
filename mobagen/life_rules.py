"""Step rules for the Game of Life on square and hexagonal boards."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from enum import Enum
from typing import ClassVar

from .life_world import World


class TileSet(Enum):
    """Board layout a rule is meant to be drawn on."""

    NONE = 0
    SQUARE = 1
    HEXAGON = 2


def _advance(world: World, count: Callable[[World, Sequence[int]], int]) -> None:
    """Write the next generation into the world's next buffer."""
    side = world.side_size
    for x in range(side):
        for y in range(side):
            point = (x, y)
            neighbors = count(world, point)
            if neighbors < 2 or neighbors > 3:
                world.set_next(point, False)
            elif world.get(point):
                world.set_next(point, True)
            elif neighbors == 3:
                world.set_next(point, True)


class RuleBase(ABC):
    """A rule that computes the next generation of a world."""

    name: ClassVar[str]
    tile_set: ClassVar[TileSet] = TileSet.NONE

    @abstractmethod
    def step(self, world: World) -> None:
        """Fill the world's next buffer from its current one."""

    @abstractmethod
    def count_neighbors(self, world: World, point: Sequence[int]) -> int:
        """Number of live neighbours of a cell."""


class JohnConway(RuleBase):
    """Classic rule on a square board with eight neighbours per cell."""

    name = "JohnConway"
    tile_set = TileSet.SQUARE

    def step(self, world: World) -> None:
        _advance(world, self.count_neighbors)

    def count_neighbors(self, world: World, point: Sequence[int]) -> int:
        x, y = point
        return sum(
            world.get((x + dx, y + dy))
            for dx in (-1, 0, 1)
            for dy in (-1, 0, 1)
            if (dx, dy) != (0, 0)
        )


class HexagonGameOfLife(RuleBase):
    """Same survival rules on a board of offset rows, six neighbours per cell.

    A row is shifted right by half a cell when its distance from the middle
    row is odd, matching how the board is drawn.
    """

    name = "Hexagon"
    tile_set = TileSet.HEXAGON

    def step(self, world: World) -> None:
        _advance(world, self.count_neighbors)

    def count_neighbors(self, world: World, point: Sequence[int]) -> int:
        x, y = point
        side = world.side_size
        shifted = abs(y % side - side // 2) % 2 == 1
        columns = (0, 1) if shifted else (-1, 0)
        offsets = [(-1, 0), (1, 0)]
        offsets += [(dx, dy) for dy in (-1, 1) for dx in columns]
        return sum(world.get((x + dx, y + dy)) for dx, dy in offsets)