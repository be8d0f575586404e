import random

import pytest

from mobagen.life_world import World


def test_new_world_is_empty():
    world = World(5)
    assert world.side_size == 5
    assert list(world.alive_cells()) == []


def test_set_current_is_visible():
    world = World(5)
    world.set_current((1, 3), True)
    assert world.get((1, 3)) is True
    assert set(world.alive_cells()) == {(1, 3)}


def test_coordinates_wrap_around():
    world = World(5)
    world.set_current((-1, 0), True)
    assert world.get((4, 0)) is True
    world.set_current((0, 0), True)
    assert world.get((5, 5)) is True
    assert world.get((0, -5)) is True


def test_set_next_visible_only_after_swap():
    world = World(4)
    world.set_next((2, 2), True)
    assert world.get((2, 2)) is False
    world.swap_buffers()
    assert world.get((2, 2)) is True


def test_swap_copies_new_current_into_other_buffer():
    world = World(4)
    world.set_next((1, 2), True)
    world.swap_buffers()
    world.swap_buffers()
    assert set(world.alive_cells()) == {(1, 2)}


def test_resize_clears_board():
    world = World(4)
    world.set_current((1, 1), True)
    world.resize(7)
    assert world.side_size == 7
    assert list(world.alive_cells()) == []


@pytest.mark.parametrize("size", [0, -3])
def test_resize_rejects_non_positive(size):
    with pytest.raises(ValueError):
        World(size)


def test_randomize_is_reproducible_and_fills_both_buffers():
    first = World(8)
    second = World(8)
    first.randomize(random.Random(42))
    second.randomize(random.Random(42))
    cells = set(first.alive_cells())
    assert cells == set(second.alive_cells())
    assert 0 < len(cells) < 64
    first.swap_buffers()
    assert set(first.alive_cells()) == cells