"""Hide-and-seek on a square grid: walls, a player, an enemy and line of sight."""

from __future__ import annotations

import math
import random
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum

Point = tuple[int, int]

MIN_SIDE_SIZE = 5
MAX_SIDE_SIZE = 256


class SquareType(IntEnum):
    """What occupies a square of the grid."""

    EMPTY = 0
    WALL = 1
    PLAYER = 2
    ENEMY = 3


@dataclass
class Square:
    """One cell of the grid: its content and whether the player can see it."""

    visible: bool = False
    type: SquareType = SquareType.EMPTY


class Octant(Enum):
    """The eight slices around an origin, named by compass direction.

    Each maps a (depth, column) pair, with the column running from the axis
    towards the diagonal, to an offset in grid coordinates where y grows
    northwards.
    """

    NNE = (0, 1, 1, 0)
    ENE = (1, 0, 0, 1)
    ESE = (1, 0, 0, -1)
    SSE = (0, 1, -1, 0)
    SSW = (0, -1, -1, 0)
    WSW = (-1, 0, 0, -1)
    WNW = (-1, 0, 0, 1)
    NNW = (0, -1, 1, 0)

    def transform(self, depth: int, column: int) -> Point:
        """Grid offset of a cell at a depth and column within this octant."""
        xd, xc, yd, yc = self.value
        return xd * depth + xc * column, yd * depth + yc * column


@dataclass(frozen=True)
class Slope:
    """Range of slopes, each from 0 (axis) to 1 (diagonal), still in view."""

    min: float
    max: float


class Grid:
    """Rectangular grid of squares addressed by (column, line)."""

    def __init__(self, width: int, height: int) -> None:
        self._width = 0
        self._height = 0
        self._cells: list[list[Square]] = []
        self.resize(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def resize(self, width: int, height: int) -> None:
        """Change the size, keeping the squares that still fit."""
        if width < 0 or height < 0:
            raise ValueError(f"grid size cannot be negative, got {width}x{height}")
        cells = [[Square() for _ in range(width)] for _ in range(height)]
        for line, row in enumerate(self._cells[:height]):
            cells[line][: min(width, len(row))] = row[:width]
        self._cells = cells
        self._width = width
        self._height = height

    def __contains__(self, index: object) -> bool:
        try:
            x, y = index  # type: ignore[misc]
        except (TypeError, ValueError):
            return False
        return 0 <= x < self._width and 0 <= y < self._height

    def __getitem__(self, index: Sequence[int]) -> Square:
        if index not in self:
            raise IndexError(f"square {tuple(index)} lies outside the grid")
        x, y = index
        return self._cells[y][x]

    def __iter__(self) -> Iterator[tuple[Point, Square]]:
        """Every square with its index, line by line from line 0."""
        for line, row in enumerate(self._cells):
            for column, square in enumerate(row):
                yield (column, line), square


def shadow_cast_grid_recursive(
    grid: Grid,
    origin: Sequence[int],
    deepness: int,
    max_deepness: int,
    octant: Octant,
    slope_range: Slope,
) -> None:
    """Mark the squares of one octant that are visible from the origin.

    Rows are scanned outwards from ``deepness``; walls are revealed but block
    what lies behind them, splitting the slope range for the next rows.
    """
    if deepness > max_deepness:
        return
    if slope_range.min > slope_range.max or slope_range.min < 0 or slope_range.max > 1:
        return

    ox, oy = origin
    start = slope_range.min
    first = math.floor(deepness * slope_range.min + 0.5)
    last = math.ceil(deepness * slope_range.max - 0.5)
    previous_is_wall: bool | None = None

    for column in range(first, last + 1):
        dx, dy = octant.transform(deepness, column)
        point = (ox + dx, oy + dy)
        inside = point in grid
        is_wall = not inside or grid[point].type is SquareType.WALL
        symmetric = deepness * slope_range.min <= column <= deepness * slope_range.max
        if inside and (is_wall or symmetric):
            grid[point].visible = True
        edge = (2 * column - 1) / (2 * deepness)
        if previous_is_wall is True and not is_wall:
            start = edge
        if previous_is_wall is False and is_wall:
            shadow_cast_grid_recursive(
                grid, origin, deepness + 1, max_deepness, octant, Slope(start, edge)
            )
        previous_is_wall = is_wall

    if previous_is_wall is False:
        shadow_cast_grid_recursive(
            grid, origin, deepness + 1, max_deepness, octant, Slope(start, slope_range.max)
        )


class Manager:
    """Game state: the grid, editing by click and drag, enemy moves and sight."""

    def __init__(self, side_size: int = 17, rng: random.Random | None = None) -> None:
        if side_size < 2:
            raise ValueError(f"side size must be at least 2, got {side_size}")
        self.side_size = side_size
        self.rng = rng or random.Random()
        self.grid = Grid(side_size, side_size)
        self.enemy_tick_size = 0.5
        self.time_remaining = 0.5
        self.show_hidden_objects = True
        self.reset()

    @property
    def center(self) -> Point:
        half = self.side_size // 2
        return half, half

    def _find(self, kind: SquareType) -> Point | None:
        found = None
        for point, square in self.grid:
            if square.type is kind:
                found = point
        return found

    @property
    def player_position(self) -> Point | None:
        return self._find(SquareType.PLAYER)

    @property
    def enemy_position(self) -> Point | None:
        return self._find(SquareType.ENEMY)

    def reset(self) -> None:
        """Put the player in the centre and the enemy on a random other square."""
        self.grid.resize(self.side_size, self.side_size)
        player = self.player_position
        enemy = self.enemy_position
        if player is not None:
            self.grid[player].type = SquareType.EMPTY
        self.grid[self.center].type = SquareType.PLAYER
        if enemy is not None:
            self.grid[enemy].type = SquareType.EMPTY
        while True:
            spot = (
                self.rng.randint(0, self.side_size - 1),
                self.rng.randint(0, self.side_size - 1),
            )
            if spot != self.center:
                break
        self.grid[spot].type = SquareType.ENEMY

    def resize(self, side_size: int) -> int:
        """Snap a requested size to the form 4k+1 and reset if it changed."""
        if not MIN_SIDE_SIZE <= side_size <= MAX_SIDE_SIZE:
            raise ValueError(
                f"side size must be between {MIN_SIDE_SIZE} and {MAX_SIDE_SIZE}, got {side_size}"
            )
        snapped = (side_size // 4) * 4 + 1
        if snapped != self.side_size:
            self.side_size = snapped
            self.grid.resize(snapped, snapped)
            self.reset()
        return self.side_size

    def screen_space_to_grid_index(
        self, window_size: Sequence[int], position: Sequence[float]
    ) -> Point:
        """Square under a window point; line 0 is the bottom row."""
        width, height = window_size
        cell_size = min(width, height) / self.side_size
        center_x, center_y = float(width // 2), float(height // 2)
        x, y = position
        half = self.side_size / 2
        return (
            int((x - center_x) / cell_size + half),
            int(-((y - center_y) / cell_size) + half),
        )

    def click(self, index: Sequence[int]) -> bool:
        """Toggle a wall on an empty or wall square; return whether it changed."""
        if index not in self.grid:
            return False
        square = self.grid[index]
        if square.type is SquareType.WALL:
            square.type = SquareType.EMPTY
        elif square.type is SquareType.EMPTY:
            square.type = SquareType.WALL
        else:
            return False
        return True

    def drag(self, from_index: Sequence[int], to_index: Sequence[int]) -> bool:
        """Move a dragged player or enemy, or toggle walls along the drag."""
        if tuple(from_index) == tuple(to_index):
            return False
        if from_index not in self.grid or to_index not in self.grid:
            return False
        source = self.grid[from_index]
        target = self.grid[to_index]
        if source.type in (SquareType.PLAYER, SquareType.ENEMY) and target.type is SquareType.EMPTY:
            target.type = source.type
            source.type = SquareType.EMPTY
        elif target.type is SquareType.WALL:
            target.type = SquareType.EMPTY
        elif target.type is SquareType.EMPTY:
            target.type = SquareType.WALL
        else:
            return False
        return True

    def enemy_tick(self) -> bool:
        """Step the enemy one square towards the player if the way is empty."""
        enemy = self.enemy_position
        player = self.player_position
        if enemy is None or player is None:
            return False
        dx = player[0] - enemy[0]
        dy = player[1] - enemy[1]
        step_x = (int(math.copysign(1, dx)) if dx else 0, 0)
        step_y = (0, int(math.copysign(1, dy)) if dy else 0)
        steps = [step_x, step_y] if abs(dx) >= abs(dy) else [step_y, step_x]
        for sx, sy in steps:
            if (sx, sy) == (0, 0):
                continue
            target = (enemy[0] + sx, enemy[1] + sy)
            if target in self.grid and self.grid[target].type is SquareType.EMPTY:
                self.grid[target].type = SquareType.ENEMY
                self.grid[enemy].type = SquareType.EMPTY
                return True
        return False

    def shadow_cast(self) -> None:
        """Recompute which squares the player can see."""
        for _, square in self.grid:
            square.visible = False
        player = self.player_position
        if player is None:
            return
        self.grid[player].visible = True
        for octant in Octant:
            shadow_cast_grid_recursive(
                self.grid, player, 1, self.side_size, octant, Slope(0.0, 1.0)
            )

    def update(self, delta_time: float) -> None:
        """Advance the enemy clock, then refresh visibility."""
        self.time_remaining -= delta_time
        if self.time_remaining < 0:
            self.time_remaining += self.enemy_tick_size
            self.enemy_tick()
        self.shadow_cast()