"""Two-dimensional vectors and the steerable particle that boids are built on."""

from __future__ import annotations

import math
import random
from collections.abc import Iterator
from dataclasses import dataclass

from .maze_generators import Color


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector with the usual arithmetic."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def up(cls) -> Vector2:
        """Screen-space up, towards smaller y."""
        return cls(0.0, -1.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.magnitude()
        if length == 0:
            return Vector2.zero()
        return self / length

    def rotate(self, degrees: float) -> Vector2:
        """Vector rotated by an angle given in degrees."""
        angle = math.radians(degrees)
        cos, sin = math.cos(angle), math.sin(angle)
        return Vector2(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    @staticmethod
    def distance_squared(a: Vector2, b: Vector2) -> float:
        """Squared distance between two points."""
        dx, dy = a.x - b.x, a.y - b.y
        return dx * dx + dy * dy


def _random_color(low: int = 31, high: int = 255) -> Color:
    return Color(random.randint(low, high), random.randint(low, high), random.randint(low, high))


class Particle:
    """A point that accumulates forces and moves with a capped speed."""

    def __init__(self, size: float = 4.0, color: Color | None = None) -> None:
        self.circle_size = size
        self.color = color if color is not None else _random_color()
        self.has_constant_speed = False
        self.speed = 120.0
        self.max_acceleration = 10.0
        self.draw_acceleration = False
        self.position = Vector2.zero()
        self.rotation = Vector2.zero()
        self.scale = Vector2(2.0, 2.0)
        self.shape: tuple[Vector2, ...] = (
            Vector2(0, -2),
            Vector2(1, 1),
            Vector2(0, 0),
            Vector2(-1, 1),
        )
        self.acceleration = Vector2.zero()
        self.previous_acceleration = Vector2.zero()
        self._velocity = Vector2.zero()

    @property
    def velocity(self) -> Vector2:
        return self._velocity

    @velocity.setter
    def velocity(self, value: Vector2) -> None:
        self.set_velocity(value)

    def set_velocity(self, velocity: Vector2) -> None:
        """Set the velocity and turn the particle to face along it."""
        self._velocity = velocity
        self.rotation = velocity.normalized()

    def apply_force(self, force: Vector2) -> None:
        """Add a force to this frame's acceleration."""
        self.acceleration = self.acceleration + force

    def update(self, delta_time: float) -> None:
        """Integrate acceleration into velocity and velocity into position."""
        if self.acceleration.magnitude() > self.max_acceleration:
            self.acceleration = self.acceleration.normalized() * self.max_acceleration

        self.set_velocity(self._velocity + self.acceleration)
        self.previous_acceleration = self.acceleration
        self.acceleration = Vector2.zero()

        if self.has_constant_speed or self._velocity.magnitude() > self.speed:
            self.set_velocity(self._velocity.normalized() * self.speed)

        self.position = self.position + self._velocity * delta_time