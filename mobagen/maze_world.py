"""Maze board: shared wall storage, cell colours and the generation clock."""

from __future__ import annotations

import time
from collections.abc import Iterable, Sequence

from .maze_generators import (
    DARK_GRAY,
    Color,
    HuntAndKillExample,
    MazeGenerator,
    PrimExample,
    RecursiveBacktrackerExample,
)
from .maze_node import Node

MIN_SIDE_SIZE = 5
MAX_SIDE_SIZE = 29


class World:
    """Square maze of cells addressed from -size//2 to size//2 on each axis.

    Walls are stored once per grid vertex as a north and a west segment, so
    the east wall of a cell is the west wall of its right neighbour and the
    south wall is the north wall of the cell below.
    """

    def __init__(
        self, size: int = 11, generators: Iterable[MazeGenerator] | None = None
    ) -> None:
        if size < 1 or size % 2 == 0:
            raise ValueError(f"maze size must be a positive odd number, got {size}")
        self._side = size
        if generators is None:
            generators = (PrimExample(), RecursiveBacktrackerExample(), HuntAndKillExample())
        self.generators: list[MazeGenerator] = list(generators)
        if not self.generators:
            raise ValueError("at least one generator is required")
        self.generator_id = 0
        self.is_simulating = False
        self.time_between_ai_ticks = 0.0
        self.time_for_next_tick = 0.0
        self.move_duration = 0
        self.total_time = 0
        self._walls: list[bool] = []
        self._colors: list[Color] = []
        self.clear()

    @property
    def size(self) -> int:
        """Number of cells along one side."""
        return self._side

    @property
    def generator(self) -> MazeGenerator:
        """The generator currently in use."""
        return self.generators[self.generator_id]

    @property
    def _stride(self) -> int:
        return (self._side + 1) * 2

    def _cell(self, point: Sequence[int]) -> tuple[int, int]:
        x, y = point
        half = self._side // 2
        if not (-half <= x <= half and -half <= y <= half):
            raise IndexError(f"point {tuple(point)} lies outside the maze")
        return x + half, y + half

    def _wall_index(self, point: Sequence[int]) -> int:
        column, row = self._cell(point)
        return row * self._stride + column * 2

    def get_node(self, point: Sequence[int]) -> Node:
        return Node(
            north=self.get_north(point),
            east=self.get_east(point),
            south=self.get_south(point),
            west=self.get_west(point),
        )

    def get_north(self, point: Sequence[int]) -> bool:
        return self._walls[self._wall_index(point)]

    def get_east(self, point: Sequence[int]) -> bool:
        return self._walls[self._wall_index(point) + 3]

    def get_south(self, point: Sequence[int]) -> bool:
        return self._walls[self._wall_index(point) + self._stride]

    def get_west(self, point: Sequence[int]) -> bool:
        return self._walls[self._wall_index(point) + 1]

    def set_node(self, point: Sequence[int], node: Node) -> None:
        self.set_north(point, node.north)
        self.set_east(point, node.east)
        self.set_south(point, node.south)
        self.set_west(point, node.west)

    def set_north(self, point: Sequence[int], state: bool) -> None:
        self._walls[self._wall_index(point)] = bool(state)

    def set_east(self, point: Sequence[int], state: bool) -> None:
        self._walls[self._wall_index(point) + 3] = bool(state)

    def set_south(self, point: Sequence[int], state: bool) -> None:
        self._walls[self._wall_index(point) + self._stride] = bool(state)

    def set_west(self, point: Sequence[int], state: bool) -> None:
        self._walls[self._wall_index(point) + 1] = bool(state)

    def clear(self) -> None:
        """Stop, raise every wall, reset colours, generators and timers."""
        self.is_simulating = False
        side, stride = self._side, self._stride
        self._walls = [
            not (i % stride == stride - 2 or (i // stride == side and i % 2 == 1))
            for i in range(stride * (side + 1))
        ]
        self._colors = [DARK_GRAY] * (side * side)
        for generator in self.generators:
            generator.clear(self)
        self.total_time = 0
        self.move_duration = 0

    def step(self) -> bool:
        """Run one generator move, timing it in microseconds."""
        start = time.perf_counter_ns()
        changed = self.generator.step(self)
        if not changed:
            self.is_simulating = False
        self.move_duration = (time.perf_counter_ns() - start) // 1000
        self.total_time += self.move_duration
        return changed

    def update(self, delta_time: float) -> None:
        """Advance the tick timer and step when it runs out."""
        if not self.is_simulating:
            return
        self.time_for_next_tick -= delta_time
        if self.time_for_next_tick < 0:
            self.step()
            self.time_for_next_tick = self.time_between_ai_ticks

    def resize(self, size: int) -> int:
        """Snap a requested size to the form 4k+1 and clear if it changed."""
        if not MIN_SIDE_SIZE <= size <= MAX_SIDE_SIZE:
            raise ValueError(
                f"maze size must be between {MIN_SIDE_SIZE} and {MAX_SIDE_SIZE}, got {size}"
            )
        snapped = (size // 4) * 4 + 1
        if snapped != self._side:
            self._side = snapped
            self.clear()
        return self._side

    def select_generator(self, index: int) -> None:
        """Switch to another generator and clear the maze."""
        if not 0 <= index < len(self.generators):
            raise IndexError(f"no generator at index {index}")
        self.generator_id = index
        self.clear()

    def set_node_color(self, point: Sequence[int], color: Color) -> None:
        column, row = self._cell(point)
        self._colors[row * self._side + column] = Color(*color)

    def get_node_color(self, point: Sequence[int]) -> Color:
        column, row = self._cell(point)
        return self._colors[row * self._side + column]