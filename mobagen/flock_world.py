"""The flocking simulation: boids, their shared rules and the window bounds."""

from __future__ import annotations

import random
from collections.abc import Sequence

from .flock_boid import Boid
from .flock_particle import Particle, Vector2
from .flock_rules import (
    RED,
    AlignmentRule,
    BoundedAreaRule,
    CohesionRule,
    FlockingRule,
    MouseInfluenceRule,
    SeparationRule,
    WindRule,
)
from .maze_generators import Color

_UNCAPPED_ACCELERATION = 10000.0
_INPUT_FORCE = 20.0


class World:
    """Holds the boids, the rule templates they copy and the simulation settings."""

    def __init__(
        self, window_size: Sequence[int] = (1280, 720), rng: random.Random | None = None
    ) -> None:
        width, height = window_size
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {tuple(window_size)}")
        self.window_size = (width, height)
        self.rng = rng or random.Random()

        self.nb_boids = 300
        self.has_constant_speed = False
        self.desired_speed = 120.0
        self.has_max_acceleration = False
        self.max_acceleration = 10.0
        self.detection_radius = 35.0

        self.show_radius = False
        self.show_rules = False
        self.show_acceleration = False

        self.mouse_position: Vector2 | None = None
        self.mouse_down = False
        self.input_arrow = Vector2.zero()

        self.boids_rules: list[FlockingRule] = []
        self.default_weights: list[float] = []
        self.boids: list[Boid] = []

    def start(self) -> None:
        """Create the rules and the initial flock."""
        self.initialize_rules()
        self.set_number_of_boids(self.nb_boids)
        self.apply_flocking_rules_to_all_boids()

    def initialize_rules(self) -> None:
        """Install the starting rules and remember their weights as defaults."""
        self.boids_rules = [
            SeparationRule(self, 25.0, 4.75),
            CohesionRule(self, 4.25),
            AlignmentRule(self, 2.9),
            MouseInfluenceRule(self, 2.0),
            BoundedAreaRule(self, 20, 8.0, False),
            WindRule(self, 1.0, 6.0, False),
        ]
        self.default_weights = [rule.weight for rule in self.boids_rules]

    def apply_flocking_rules_to_all_boids(self) -> None:
        """Give every boid fresh copies of the world's rules."""
        for boid in self.boids:
            boid.set_flocking_rules(self.boids_rules)

    def set_number_of_boids(self, number: int) -> None:
        """Add boids, or remove them from the end, until there are ``number``."""
        if number < 0:
            raise ValueError(f"number of boids cannot be negative, got {number}")
        self.nb_boids = number
        while len(self.boids) < number:
            self.boids.append(self.create_boid())
        del self.boids[number:]

    def randomize_boid(self, boid: Boid) -> None:
        """Put a boid somewhere in the window heading in a random direction."""
        width, height = self.window_size
        boid.position = Vector2(self.rng.uniform(0.0, width), self.rng.uniform(0.0, height))
        heading = Vector2.up().rotate(self.rng.uniform(0.0, 360.0))
        boid.set_velocity(heading * self.desired_speed)

    def randomize_all_boids(self) -> None:
        for boid in self.boids:
            self.randomize_boid(boid)

    def warp_particle_if_out_of_bounds(self, particle: Particle) -> None:
        """Wrap a particle that left the window around to the opposite side."""
        width, height = self.window_size
        x, y = particle.position
        if x < 0:
            x += width
        elif x > width:
            x -= width
        if y < 0:
            y += height
        elif y > height:
            y -= height
        position = Vector2(x, y)
        if position != particle.position:
            particle.position = position

    def create_boid(self) -> Boid:
        """A new boid configured with the world's current settings."""
        boid = Boid(self)
        boid.color = Color(*(self.rng.randint(31, 255) for _ in range(3)))
        self.randomize_boid(boid)
        boid.set_flocking_rules(self.boids_rules)
        boid.detection_radius = self.detection_radius
        boid.speed = self.desired_speed
        boid.has_constant_speed = self.has_constant_speed
        boid.max_acceleration = self._effective_max_acceleration()
        boid.draw_acceleration = self.show_acceleration
        boid.draw_debug_radius = self.show_radius
        boid.draw_debug_rules = self.show_rules
        return boid

    def restore_default_weights(self) -> None:
        """Put every rule back to its starting weight and share it with the boids."""
        for rule, weight in zip(self.boids_rules, self.default_weights):
            rule.weight = weight
        self.apply_flocking_rules_to_all_boids()

    def _effective_max_acceleration(self) -> float:
        return self.max_acceleration if self.has_max_acceleration else _UNCAPPED_ACCELERATION

    def set_detection_radius(self, radius: float) -> None:
        self.detection_radius = radius
        for boid in self.boids:
            boid.detection_radius = radius

    def set_desired_speed(self, speed: float) -> None:
        self.desired_speed = speed
        for boid in self.boids:
            boid.speed = speed

    def set_has_constant_speed(self, enabled: bool) -> None:
        self.has_constant_speed = enabled
        for boid in self.boids:
            boid.has_constant_speed = enabled

    def set_has_max_acceleration(self, enabled: bool) -> None:
        """Cap acceleration at ``max_acceleration``, or lift the cap."""
        self.has_max_acceleration = enabled
        for boid in self.boids:
            boid.max_acceleration = self._effective_max_acceleration()

    def set_max_acceleration(self, value: float) -> None:
        self.max_acceleration = value
        if self.has_max_acceleration:
            for boid in self.boids:
                boid.max_acceleration = value

    def update(self, delta_time: float) -> None:
        """One frame: steer the first boid by input, wrap positions, move boids."""
        if self.input_arrow != Vector2.zero() and self.boids:
            first = self.boids[0]
            first.apply_force(self.input_arrow * _INPUT_FORCE)
            first.draw_debug_radius = True
            first.circle_color = RED

        for boid in self.boids:
            self.warp_particle_if_out_of_bounds(boid)
        for boid in self.boids:
            boid.update(delta_time)