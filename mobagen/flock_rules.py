"""Steering rules that produce the forces acting on each boid.

Rules read from their world a ``window_size`` pair (width, height), and, for
the mouse rule, ``mouse_position`` (a Vector2, or None when the pointer is
outside the window) and ``mouse_down``.
"""

from __future__ import annotations

import copy
import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, ClassVar

from .flock_particle import Particle, Vector2
from .maze_generators import Color

YELLOW = Color(255, 255, 0)
CYAN = Color(0, 255, 255)
RED = Color(255, 0, 0)
LIGHT_RED = Color(255, 128, 128)
MAGENTA = Color(255, 0, 255)
WHITE = Color(255, 255, 255)

_MOUSE_FORCE = 25.0


class FlockingRule(ABC):
    """A weighted steering behaviour; the last computed force is cached."""

    name: ClassVar[str]
    explanation: ClassVar[str]
    base_weight_multiplier: ClassVar[float] = 1.0

    def __init__(
        self, world: Any, debug_color: Color, weight: float, is_enabled: bool = True
    ) -> None:
        self.world = world
        self.debug_color = debug_color
        self.weight = weight
        self.is_enabled = is_enabled
        self.force = Vector2.zero()

    @abstractmethod
    def compute_force(self, neighborhood: Sequence[Particle], boid: Particle) -> Vector2:
        """Raw force of this rule for one boid."""

    def compute_weighted_force(
        self, neighborhood: Sequence[Particle], boid: Particle
    ) -> Vector2:
        """Force scaled by weight and multiplier, or zero when disabled; cached."""
        if self.is_enabled:
            self.force = self.compute_force(neighborhood, boid) * (
                self.base_weight_multiplier * self.weight
            )
        else:
            self.force = Vector2.zero()
        return self.force

    def clone(self) -> FlockingRule:
        """Independent copy with the same settings."""
        return copy.copy(self)


class AlignmentRule(FlockingRule):
    """Steer toward the average heading of nearby boids."""

    name = "Alignment Rule"
    explanation = "Steer to move in the same direction that nearby boids."

    def __init__(self, world: Any, weight: float = 1.0, is_enabled: bool = True) -> None:
        super().__init__(world, YELLOW, weight, is_enabled)

    def compute_force(self, neighborhood: Sequence[Particle], boid: Particle) -> Vector2:
        if not neighborhood:
            return Vector2.zero()
        total = sum((b.velocity for b in neighborhood), Vector2.zero())
        return total / len(neighborhood) * self.weight


class CohesionRule(FlockingRule):
    """Steer toward the centre of mass of nearby boids."""

    name = "Cohesion Rule"
    explanation = "Steer to move toward center of mass of nearby boids."

    def __init__(self, world: Any, weight: float = 1.0, is_enabled: bool = True) -> None:
        super().__init__(world, CYAN, weight, is_enabled)

    def compute_force(self, neighborhood: Sequence[Particle], boid: Particle) -> Vector2:
        others = [b.position for b in neighborhood if b is not boid]
        if not others:
            return Vector2.zero()
        center = sum(others, Vector2.zero()) / len(others)
        return (center - boid.position).normalized() * self.weight


class SeparationRule(FlockingRule):
    """Steer away from boids closer than a desired distance."""

    name = "Separation Rule"
    explanation = "Steer to avoid collision with nearby boids."

    def __init__(
        self,
        world: Any,
        desired_separation: float = 20.0,
        weight: float = 1.0,
        is_enabled: bool = True,
    ) -> None:
        super().__init__(world, RED, weight, is_enabled)
        self.desired_minimal_distance = desired_separation

    def compute_force(self, neighborhood: Sequence[Particle], boid: Particle) -> Vector2:
        force = Vector2.zero()
        for other in neighborhood:
            if other is boid:
                continue
            offset = other.position - boid.position
            distance = offset.magnitude()
            if distance == 0 or distance > self.desired_minimal_distance:
                continue
            hat = offset / distance
            force = force + (hat * self.weight) / (distance * self.desired_minimal_distance)
        return force.normalized() * -self.weight


class MouseInfluenceRule(FlockingRule):
    """Steer toward, or away from, the mouse while its button is held."""

    name = "Mouse Click Influence"
    explanation = "Steer toward or away the mouse when clicked."
    base_weight_multiplier = 0.1

    def __init__(
        self,
        world: Any,
        weight: float = 1.0,
        is_repulsive: bool = False,
        is_enabled: bool = True,
    ) -> None:
        super().__init__(world, MAGENTA, weight, is_enabled)
        self.is_repulsive = is_repulsive

    def compute_force(self, neighborhood: Sequence[Particle], boid: Particle) -> Vector2:
        mouse = self.world.mouse_position
        if mouse is None or not self.world.mouse_down:
            return Vector2.zero()
        offset = mouse - boid.position
        distance = offset.magnitude()
        if distance == 0:
            return Vector2.zero()
        if self.is_repulsive:
            force = (offset / distance) * _MOUSE_FORCE * -_MOUSE_FORCE
        else:
            force = offset * _MOUSE_FORCE
        return force * self.weight


class BoundedAreaRule(FlockingRule):
    """Push boids back from the window borders."""

    name = "Bounded Windows"
    explanation = "Steer to avoid the window's borders."

    def __init__(
        self,
        world: Any,
        distance_from_border: int,
        weight: float = 1.0,
        is_enabled: bool = True,
    ) -> None:
        super().__init__(world, LIGHT_RED, weight, is_enabled)
        self.desired_distance = distance_from_border

    def compute_force(self, neighborhood: Sequence[Particle], boid: Particle) -> Vector2:
        width, height = self.world.window_size
        margin = float(self.desired_distance)
        if margin <= 0:
            return Vector2.zero()

        def push(coordinate: float, extent: float) -> float:
            if coordinate < margin:
                return (margin - coordinate) / margin
            if coordinate > extent - margin:
                return -(coordinate - (extent - margin)) / margin
            return 0.0

        return Vector2(push(boid.position.x, width), push(boid.position.y, height))


class WindRule(FlockingRule):
    """A constant force in one direction applied to every boid."""

    name = "Wind Force"
    explanation = "Apply a constant force to all boids."
    base_weight_multiplier = 0.5

    def __init__(
        self,
        world: Any,
        weight: float = 1.0,
        angle: float = 0.0,
        is_enabled: bool = True,
    ) -> None:
        super().__init__(world, WHITE, weight, is_enabled)
        self.wind_angle = angle

    def compute_force(self, neighborhood: Sequence[Particle], boid: Particle) -> Vector2:
        """Unit vector along the wind angle (radians), times the weight."""
        return Vector2(math.cos(self.wind_angle), math.sin(self.wind_angle)) * self.weight