import math

import pytest

from mobagen.flock_particle import Particle, Vector2
from mobagen.maze_generators import Color


def test_vector_magnitude_of_pythagorean_triple():
    assert Vector2(3, 4).magnitude() == pytest.approx(5)


def test_normalized_has_unit_length():
    v = Vector2(-7.5, 2.25).normalized()
    assert v.magnitude() == pytest.approx(1.0)


def test_normalized_zero_stays_zero():
    assert Vector2.zero().normalized() == Vector2.zero()


def test_rotate_quarter_turn():
    assert tuple(Vector2(1, 0).rotate(90)) == pytest.approx((0.0, 1.0), abs=1e-9)


def test_rotate_full_turn_is_identity():
    v = Vector2(2.5, -1.5)
    assert tuple(v.rotate(360)) == pytest.approx(tuple(v))


def test_rotate_keeps_length():
    v = Vector2(3, 4)
    assert v.rotate(37).magnitude() == pytest.approx(v.magnitude())


def test_distance_squared_is_symmetric_and_matches_magnitude():
    a, b = Vector2(1, 2), Vector2(-4, 7)
    assert Vector2.distance_squared(a, b) == pytest.approx(Vector2.distance_squared(b, a))
    assert Vector2.distance_squared(a, b) == pytest.approx((a - b).magnitude() ** 2)


def test_vector_arithmetic_round_trip():
    a, b = Vector2(1.5, -2), Vector2(3, 4)
    assert (a + b) - b == a
    assert (a * 4) / 4 == a
    assert -(-a) == a
    assert 2 * a == a * 2


def test_particle_uses_given_color():
    color = Color(10, 20, 30)
    assert Particle(color=color).color == color


def test_random_color_in_range():
    color = Particle().color
    assert all(31 <= c <= 255 for c in color[:3])


def test_apply_force_accumulates():
    p = Particle()
    p.apply_force(Vector2(1, 0))
    p.apply_force(Vector2(0, 2))
    assert p.acceleration == Vector2(1, 2)


def test_set_velocity_updates_rotation():
    p = Particle()
    p.set_velocity(Vector2(0, 5))
    assert p.velocity == Vector2(0, 5)
    assert tuple(p.rotation) == pytest.approx((0.0, 1.0))


def test_update_caps_acceleration():
    p = Particle()
    p.apply_force(Vector2(100, 0))
    p.update(0.0)
    assert p.velocity.magnitude() == pytest.approx(p.max_acceleration)
    assert p.acceleration == Vector2.zero()
    assert p.previous_acceleration.magnitude() == pytest.approx(p.max_acceleration)


def test_update_caps_speed():
    p = Particle()
    p.max_acceleration = 1e6
    p.apply_force(Vector2(0, 5000))
    p.update(0.0)
    assert p.velocity.magnitude() == pytest.approx(p.speed)


def test_constant_speed_rescales_slow_velocity():
    p = Particle()
    p.has_constant_speed = True
    p.set_velocity(Vector2(1, 0))
    p.update(0.0)
    assert p.velocity.magnitude() == pytest.approx(p.speed)


def test_update_moves_by_velocity_times_delta():
    p = Particle()
    p.position = Vector2(10, 10)
    p.set_velocity(Vector2(3, 4))
    p.update(0.5)
    expected = Vector2(10, 10) + p.velocity * 0.5
    assert tuple(p.position) == pytest.approx(tuple(expected))


def test_velocity_property_setter_turns_particle():
    p = Particle()
    p.velocity = Vector2(-2, 0)
    assert math.isclose(p.rotation.x, -1.0)