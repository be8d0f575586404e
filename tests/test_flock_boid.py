import pytest

from mobagen.flock_boid import Boid
from mobagen.flock_particle import Vector2
from mobagen.flock_rules import CohesionRule, WindRule


class _FakeWorld:
    def __init__(self):
        self.boids = []
        self.window_size = (800, 600)
        self.mouse_position = None
        self.mouse_down = False


def _boid_at(world, x, y):
    boid = Boid(world)
    boid.position = Vector2(x, y)
    world.boids.append(boid)
    return boid


def test_neighborhood_excludes_self_and_far_boids():
    world = _FakeWorld()
    center = _boid_at(world, 0, 0)
    near = _boid_at(world, 30, 40)
    far = _boid_at(world, 300, 0)
    center.detection_radius = 60.0
    neighbors = center.compute_neighborhood()
    assert neighbors == [near]
    assert far not in neighbors and center not in neighbors


def test_neighborhood_radius_is_inclusive():
    world = _FakeWorld()
    center = _boid_at(world, 0, 0)
    edge = _boid_at(world, 30, 40)
    center.detection_radius = 50.0
    assert center.compute_neighborhood() == [edge]


def test_default_detection_radius_from_source():
    world = _FakeWorld()
    boid = Boid(world)
    assert boid.detection_radius == 100.0


def test_set_flocking_rules_clones():
    world = _FakeWorld()
    boid = Boid(world)
    original = CohesionRule(world, 2.0)
    boid.set_flocking_rules([original])
    assert len(boid.rules) == 1
    assert boid.rules[0] is not original
    original.weight = 9.0
    assert boid.rules[0].weight == 2.0


def test_set_flocking_rules_replaces_previous():
    world = _FakeWorld()
    boid = Boid(world)
    boid.set_flocking_rules([CohesionRule(world), WindRule(world)])
    boid.set_flocking_rules([WindRule(world)])
    assert [type(r) for r in boid.rules] == [WindRule]


def test_update_applies_rule_forces_for_next_frame():
    world = _FakeWorld()
    boid = _boid_at(world, 100, 100)
    boid.set_flocking_rules([WindRule(world, 1.0, 0.0)])
    boid.update(1.0)
    # forces gathered this frame are not yet integrated
    assert boid.velocity == Vector2.zero()
    force = boid.rules[0].force
    assert boid.acceleration == force
    boid.update(1.0)
    assert boid.velocity == force
    assert boid.position == Vector2(100, 100) + force


@pytest.mark.parametrize("enabled", [True, False])
def test_disabled_rule_contributes_nothing(enabled):
    world = _FakeWorld()
    boid = _boid_at(world, 10, 10)
    boid.set_flocking_rules([WindRule(world, 1.0, 0.0, enabled)])
    boid.update(0.5)
    assert (boid.acceleration != Vector2.zero()) == enabled