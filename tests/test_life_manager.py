import random

import pytest

from mobagen.life_manager import Manager
from mobagen.life_rules import TileSet


def _manager_with_blinker():
    manager = Manager()
    manager.select_rule(1)
    for cell in [(6, 5), (6, 6), (6, 7)]:
        assert manager.toggle_cell(cell)
    return manager


def test_defaults():
    manager = Manager()
    assert manager.side_size == 13
    assert manager.world.side_size == 13
    assert [rule.name for rule in manager.rules] == ["Hexagon", "JohnConway"]
    assert manager.rule.tile_set is TileSet.HEXAGON
    assert manager.is_simulating is False


def test_step_advances_blinker():
    manager = _manager_with_blinker()
    manager.step()
    assert set(manager.world.alive_cells()) == {(5, 6), (6, 6), (7, 6)}


def test_update_waits_for_interval():
    manager = _manager_with_blinker()
    manager.update(1.0)
    assert set(manager.world.alive_cells()) == {(6, 5), (6, 6), (6, 7)}
    manager.is_simulating = True
    manager.update(0.1)
    assert set(manager.world.alive_cells()) == {(6, 5), (6, 6), (6, 7)}
    manager.update(0.15)
    assert set(manager.world.alive_cells()) == {(5, 6), (6, 6), (7, 6)}
    assert manager.accumulated_time == 0.0


def test_select_rule_clears_and_pauses():
    manager = _manager_with_blinker()
    manager.is_simulating = True
    manager.select_rule(0)
    assert manager.rule.name == "Hexagon"
    assert manager.is_simulating is False
    assert list(manager.world.alive_cells()) == []


def test_select_rule_out_of_range():
    with pytest.raises(IndexError):
        Manager().select_rule(5)


@pytest.mark.parametrize("requested", [5, 6, 14, 100, 256])
def test_resize_snaps_to_four_k_plus_one(requested):
    manager = Manager()
    size = manager.resize(requested)
    assert size % 4 == 1
    assert requested - 3 <= size <= requested + 1
    assert manager.world.side_size == size


def test_resize_to_same_size_keeps_cells():
    manager = _manager_with_blinker()
    assert manager.resize(13) == 13
    assert len(list(manager.world.alive_cells())) == 3


@pytest.mark.parametrize("requested", [4, 257])
def test_resize_out_of_range(requested):
    with pytest.raises(ValueError):
        Manager().resize(requested)


def test_toggle_cell_flips_and_rejects_outside():
    manager = Manager()
    assert manager.toggle_cell((13, 0)) is False
    assert manager.toggle_cell((-1, 0)) is False
    assert list(manager.world.alive_cells()) == []
    manager.toggle_cell((2, 3))
    assert manager.world.get((2, 3)) is True
    manager.toggle_cell((2, 3))
    assert manager.world.get((2, 3)) is False


def test_randomize_pauses():
    manager = Manager()
    manager.is_simulating = True
    manager.randomize(random.Random(1))
    assert manager.is_simulating is False
    assert len(list(manager.world.alive_cells())) > 0


def test_window_center_maps_to_center_cell():
    manager = Manager()
    centre = (manager.side_size // 2, manager.side_size // 2)
    assert manager.mouse_position_to_index((800, 600), (400, 300)) == centre
    assert manager.cell_under((800, 600), (400, 300)) == centre


def test_mouse_index_grows_with_position():
    manager = Manager()
    left = manager.mouse_position_to_index((600, 600), (10, 300))
    right = manager.mouse_position_to_index((600, 600), (590, 300))
    assert left[0] == 0
    assert right[0] == manager.side_size - 1
    assert left[1] == right[1]


def test_hexagon_shifted_row_moves_left():
    manager = Manager()
    raw = manager.mouse_position_to_index((600, 600), (320, 250))
    assert abs(raw[1] - manager.side_size // 2) % 2 == 1
    picked = manager.cell_under((600, 600), (320, 250))
    assert picked[1] == raw[1]
    assert picked[0] <= raw[0]
    manager.select_rule(1)
    assert manager.cell_under((600, 600), (320, 250)) == raw