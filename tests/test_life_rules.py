import pytest

from mobagen.life_rules import HexagonGameOfLife, JohnConway, RuleBase, TileSet
from mobagen.life_world import World


def _world_with(size, cells):
    world = World(size)
    for cell in cells:
        world.set_current(cell, True)
        world.set_next(cell, True)
    return world


def _advance(rule, world):
    rule.step(world)
    world.swap_buffers()


def test_rule_metadata():
    conway = JohnConway()
    hexagon = HexagonGameOfLife()
    assert conway.name == "JohnConway"
    assert conway.tile_set is TileSet.SQUARE
    assert hexagon.name == "Hexagon"
    assert hexagon.tile_set is TileSet.HEXAGON
    assert TileSet(0) is TileSet.NONE


def test_rule_base_is_abstract():
    with pytest.raises(TypeError):
        RuleBase()


def test_conway_blinker_oscillates():
    vertical = {(2, 1), (2, 2), (2, 3)}
    horizontal = {(1, 2), (2, 2), (3, 2)}
    world = _world_with(5, vertical)
    rule = JohnConway()
    _advance(rule, world)
    assert set(world.alive_cells()) == horizontal
    _advance(rule, world)
    assert set(world.alive_cells()) == vertical


def test_conway_block_is_still_life():
    block = {(1, 1), (2, 1), (1, 2), (2, 2)}
    world = _world_with(6, block)
    _advance(JohnConway(), world)
    assert set(world.alive_cells()) == block


def test_conway_counts_eight_neighbours_on_full_board():
    world = World(6)
    for x in range(6):
        for y in range(6):
            world.set_current((x, y), True)
    rule = JohnConway()
    assert {rule.count_neighbors(world, (x, 3)) for x in range(6)} == {8}
    _advance(rule, world)
    assert list(world.alive_cells()) == []


def test_conway_count_wraps_edges():
    world = _world_with(5, {(4, 4)})
    assert JohnConway().count_neighbors(world, (0, 0)) == 1


def test_hexagon_single_cell_has_six_neighbours():
    world = _world_with(7, {(3, 3)})
    rule = HexagonGameOfLife()
    touched = [
        (x, y) for x in range(7) for y in range(7) if rule.count_neighbors(world, (x, y)) == 1
    ]
    assert len(touched) == 6
    assert (3, 3) not in touched
    assert rule.count_neighbors(world, (3, 3)) == 0


def test_hexagon_neighbourhood_is_symmetric():
    rule = HexagonGameOfLife()
    for centre in [(3, 3), (3, 2), (2, 4)]:
        world = _world_with(9, {centre})
        for x in range(1, 8):
            for y in range(1, 8):
                if (x, y) == centre or rule.count_neighbors(world, (x, y)) == 0:
                    continue
                reverse = _world_with(9, {(x, y)})
                assert rule.count_neighbors(reverse, centre) == 1


def test_hexagon_full_board_dies():
    world = World(7)
    for x in range(7):
        for y in range(7):
            world.set_current((x, y), True)
    rule = HexagonGameOfLife()
    assert rule.count_neighbors(world, (3, 3)) == 6
    _advance(rule, world)
    assert list(world.alive_cells()) == []


def test_hexagon_lonely_cell_dies():
    world = _world_with(7, {(3, 3)})
    _advance(HexagonGameOfLife(), world)
    assert list(world.alive_cells()) == []