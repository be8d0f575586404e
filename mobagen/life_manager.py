"""Simulation state for the Game of Life example: rules, timing and input."""

from __future__ import annotations

import random
from collections.abc import Sequence

from .life_rules import HexagonGameOfLife, JohnConway, RuleBase, TileSet
from .life_world import Point, World

MIN_SIDE_SIZE = 5
MAX_SIDE_SIZE = 256
_BOARD_FILL = 0.99


class Manager:
    """Owns the world, the available rules and the simulation clock."""

    def __init__(self, side_size: int = 13) -> None:
        self.side_size = side_size
        self.world = World(side_size)
        self.rules: list[RuleBase] = [HexagonGameOfLife(), JohnConway()]
        self.rule_id = 0
        self.is_simulating = False
        self.accumulated_time = 0.0
        self.time_between_steps = 0.2

    @property
    def rule(self) -> RuleBase:
        """The rule currently in use."""
        return self.rules[self.rule_id]

    @property
    def time_to_next_step(self) -> float:
        return self.time_between_steps - self.accumulated_time

    def step(self) -> None:
        """Advance the world by one generation."""
        self.rule.step(self.world)
        self.world.swap_buffers()

    def clear(self) -> None:
        """Stop the simulation and empty the board."""
        self.is_simulating = False
        self.world.resize(self.side_size)

    def update(self, delta_time: float) -> None:
        """Advance the clock, stepping once the step interval has passed."""
        if not self.is_simulating:
            return
        self.accumulated_time += delta_time
        if self.accumulated_time > self.time_between_steps:
            self.step()
            self.accumulated_time = 0.0

    def select_rule(self, index: int) -> None:
        """Switch to another rule and clear the board."""
        if not 0 <= index < len(self.rules):
            raise IndexError(f"no rule at index {index}")
        self.rule_id = index
        self.clear()

    def resize(self, side_size: int) -> int:
        """Snap a requested size to the form 4k+1 and resize if it changed."""
        if not MIN_SIDE_SIZE <= side_size <= MAX_SIDE_SIZE:
            raise ValueError(
                f"side size must be between {MIN_SIDE_SIZE} and {MAX_SIDE_SIZE}, got {side_size}"
            )
        snapped = (side_size // 4) * 4 + 1
        if snapped != self.side_size:
            self.side_size = snapped
            self.world.resize(snapped)
        return self.side_size

    def randomize(self, rng: random.Random | None = None) -> None:
        """Pause and fill the board randomly."""
        self.is_simulating = False
        self.world.randomize(rng)

    def toggle_cell(self, index: Sequence[int]) -> bool:
        """Flip a cell on the board; return False if it lies outside."""
        x, y = index
        if not (0 <= x < self.side_size and 0 <= y < self.side_size):
            return False
        self.world.set_current(index, not self.world.get(index))
        self.world.set_next(index, not self.world.get(index))
        return True

    def mouse_position_to_index(
        self, window_size: Sequence[int], mouse_position: Sequence[float]
    ) -> Point:
        """Cell of a square board under a point in window coordinates."""
        width, height = window_size
        center_x, center_y = width // 2, height // 2
        min_dimension = min(width, height) * _BOARD_FILL
        square_side = min_dimension / self.side_size
        mouse_x, mouse_y = mouse_position
        rel_x = ((mouse_x - center_x) * _BOARD_FILL + min_dimension / 2) / square_side
        rel_y = ((mouse_y - center_y) * _BOARD_FILL + min_dimension / 2) / square_side
        return int(rel_x), int(rel_y)

    def cell_under(
        self, window_size: Sequence[int], mouse_position: Sequence[float]
    ) -> Point:
        """Cell under a point, accounting for shifted rows on hexagonal boards."""
        index = self.mouse_position_to_index(window_size, mouse_position)
        if self.rule.tile_set is not TileSet.HEXAGON:
            return index
        square_side = min(window_size) * _BOARD_FILL / self.side_size
        if abs(index[1] - self.side_size // 2) % 2 == 1:
            mouse_x, mouse_y = mouse_position
            index = self.mouse_position_to_index(
                window_size, (mouse_x - square_side / 2, mouse_y)
            )
        return index