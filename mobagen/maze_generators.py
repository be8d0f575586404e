"""Step-by-step maze generators that carve passages into a maze world."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TYPE_CHECKING, ClassVar, NamedTuple

if TYPE_CHECKING:
    from .maze_world import World

Point = tuple[int, int]


class Color(NamedTuple):
    """RGBA colour of a maze cell."""

    r: int
    g: int
    b: int
    a: int = 255


DARK_GRAY = Color(64, 64, 64)
RED = Color(255, 0, 0)
BLACK = Color(0, 0, 0)

# north, east, south, west; north points towards smaller y.
_DIRECTIONS: tuple[Point, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


def _neighbors(world: World, point: Point) -> Iterator[Point]:
    """Cells next to a point that lie inside the maze."""
    half = world.size // 2
    x, y = point
    for dx, dy in _DIRECTIONS:
        nx, ny = x + dx, y + dy
        if -half <= nx <= half and -half <= ny <= half:
            yield nx, ny


def _carve(world: World, a: Point, b: Point) -> None:
    """Remove the wall between two adjacent cells."""
    dx, dy = b[0] - a[0], b[1] - a[1]
    if (dx, dy) == (1, 0):
        world.set_east(a, False)
    elif (dx, dy) == (-1, 0):
        world.set_west(a, False)
    elif (dx, dy) == (0, 1):
        world.set_south(a, False)
    elif (dx, dy) == (0, -1):
        world.set_north(a, False)
    else:
        raise ValueError(f"cells {a} and {b} are not adjacent")


def _cells(world: World) -> Iterator[Point]:
    """Every cell of the maze, row by row from the top."""
    half = world.size // 2
    for y in range(-half, half + 1):
        for x in range(-half, half + 1):
            yield x, y


class MazeGenerator(ABC):
    """A generator that advances a maze one move per ``step`` call."""

    name: ClassVar[str]

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    @abstractmethod
    def step(self, world: World) -> bool:
        """Make one move; return True if the world changed."""

    @abstractmethod
    def clear(self, world: World) -> None:
        """Forget all progress so generation can start over."""


class PrimExample(MazeGenerator):
    """Randomised Prim: grow the maze from a frontier of neighbouring cells."""

    name = "Prim"

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__(rng)
        self._to_be_visited: list[Point] = []
        self._initialized = False

    def step(self, world: World) -> bool:
        if not self._initialized:
            half = world.size // 2
            start = (self.rng.randint(-half, half), self.rng.randint(-half, half))
            world.set_node_color(start, BLACK)
            self._extend_frontier(world, start)
            self._initialized = True
            return True
        if not self._to_be_visited:
            return False
        cell = self._to_be_visited.pop(self.rng.randrange(len(self._to_be_visited)))
        visited = self._visited_neighbors(world, cell)
        if visited:
            _carve(world, cell, self.rng.choice(visited))
        world.set_node_color(cell, BLACK)
        self._extend_frontier(world, cell)
        return True

    def clear(self, world: World) -> None:
        self._to_be_visited.clear()
        self._initialized = False

    def _extend_frontier(self, world: World, cell: Point) -> None:
        for neighbor in self._visitables(world, cell):
            world.set_node_color(neighbor, RED)
            self._to_be_visited.append(neighbor)

    @staticmethod
    def _visitables(world: World, point: Point) -> list[Point]:
        return [p for p in _neighbors(world, point) if world.get_node_color(p) == DARK_GRAY]

    @staticmethod
    def _visited_neighbors(world: World, point: Point) -> list[Point]:
        return [p for p in _neighbors(world, point) if world.get_node_color(p) == BLACK]


class RecursiveBacktrackerExample(MazeGenerator):
    """Depth-first walk that backs up along its path when it gets stuck."""

    name = "Recursive Back-Tracker"

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__(rng)
        self._stack: list[Point] = []
        self._visited: set[Point] = set()

    def step(self, world: World) -> bool:
        if not self._stack:
            start = self.random_start_point(world)
            if start is None:
                return False
            self._visit(world, start)
            return True
        current = self._stack[-1]
        visitables = self._visitables(world, current)
        if not visitables:
            self._stack.pop()
            world.set_node_color(current, BLACK)
            return True
        following = self.rng.choice(visitables)
        _carve(world, current, following)
        self._visit(world, following)
        return True

    def clear(self, world: World) -> None:
        self._stack.clear()
        self._visited.clear()

    def random_start_point(self, world: World) -> Point | None:
        """First unvisited cell in row order, or None when all are visited."""
        return next((p for p in _cells(world) if p not in self._visited), None)

    def _visit(self, world: World, point: Point) -> None:
        self._visited.add(point)
        self._stack.append(point)
        world.set_node_color(point, RED)

    def _visitables(self, world: World, point: Point) -> list[Point]:
        return [p for p in _neighbors(world, point) if p not in self._visited]


class HuntAndKillExample(MazeGenerator):
    """Random walk until stuck, then hunt for an unvisited cell next to the maze."""

    name = "HuntAndKill"

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__(rng)
        self._stack: list[Point] = []
        self._visited: set[Point] = set()

    def step(self, world: World) -> bool:
        if not self._stack:
            start = self.random_start_point(world)
            if start is None:
                return False
            visited = self._visited_neighbors(world, start)
            if visited:
                _carve(world, start, self.rng.choice(visited))
            self._visit(world, start)
            return True
        current = self._stack[-1]
        visitables = self._visitables(world, current)
        if not visitables:
            for cell in self._stack:
                world.set_node_color(cell, BLACK)
            self._stack.clear()
            return True
        following = self.rng.choice(visitables)
        _carve(world, current, following)
        self._visit(world, following)
        return True

    def clear(self, world: World) -> None:
        self._stack.clear()
        self._visited.clear()

    def random_start_point(self, world: World) -> Point | None:
        """First unvisited cell beside the maze, else the first unvisited cell."""
        unvisited = [p for p in _cells(world) if p not in self._visited]
        hunted = next((p for p in unvisited if self._visited_neighbors(world, p)), None)
        if hunted is not None:
            return hunted
        return unvisited[0] if unvisited else None

    def _visit(self, world: World, point: Point) -> None:
        self._visited.add(point)
        self._stack.append(point)
        world.set_node_color(point, RED)

    def _visitables(self, world: World, point: Point) -> list[Point]:
        return [p for p in _neighbors(world, point) if p not in self._visited]

    def _visited_neighbors(self, world: World, point: Point) -> list[Point]:
        return [p for p in _neighbors(world, point) if p in self._visited]