"""A boid: a particle steered by a set of flocking rules."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from .flock_particle import Particle
from .flock_rules import FlockingRule
from .maze_generators import Color

PURPLE = Color(128, 0, 128)


class Boid(Particle):
    """Particle that reacts to the boids within its detection radius.

    The world it belongs to must expose a ``boids`` sequence.
    """

    def __init__(self, world: Any) -> None:
        super().__init__()
        self.world = world
        self.detection_radius = 100.0
        self.rules: list[FlockingRule] = []
        self.draw_debug_radius = True
        self.draw_debug_rules = True
        self.circle_color = PURPLE

    def set_flocking_rules(self, rules: Iterable[FlockingRule]) -> None:
        """Replace this boid's rules with independent copies of the given ones."""
        self.rules = [rule.clone() for rule in rules]

    def compute_neighborhood(self) -> list[Boid]:
        """Other boids of the world no farther away than the detection radius."""
        radius_squared = self.detection_radius * self.detection_radius
        position = self.position
        return [
            other
            for other in self.world.boids
            if other is not self
            and position.distance_squared(position, other.position) <= radius_squared
        ]

    def _apply_rules(self, neighborhood: Sequence[Boid]) -> None:
        for rule in self.rules:
            self.apply_force(rule.compute_weighted_force(neighborhood, self))

    def update(self, delta_time: float) -> None:
        """Move, then gather the forces of every rule for the next frame."""
        super().update(delta_time)
        self._apply_rules(self.compute_neighborhood())