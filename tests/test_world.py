import random

import pytest

from zappy.elements import DENSITY, ELEMENTS_QUANTITY, RESOURCES, Element
from zappy.world import (
    GameMap,
    Orientation,
    Position,
    compute_density,
    compute_next_position,
    compute_position,
    generate_map,
    shuffled_positions,
)


def _total_counts(game_map):
    totals = [0] * ELEMENTS_QUANTITY
    for x in range(game_map.width):
        for y in range(game_map.height):
            for i, count in enumerate(game_map.tile_counts(x, y)):
                totals[i] += count
    return totals


def test_shuffled_positions_is_permutation():
    positions = shuffled_positions(10, 12, random.Random(3))
    assert len(positions) == 120
    assert set(positions) == {Position(x, y) for x in range(10) for y in range(12)}


def test_shuffled_positions_deterministic_with_seed():
    first = shuffled_positions(10, 10, random.Random(7))
    second = shuffled_positions(10, 10, random.Random(7))
    assert len(first) == 100
    assert set(first) == {Position(x, y) for x in range(10) for y in range(10)}
    assert first == second


def test_new_map_has_empty_tiles():
    game_map = GameMap(10, 11)
    assert game_map.size == 110
    assert game_map.tile(9, 10) == []
    assert game_map.tile_counts(0, 0) == [0] * ELEMENTS_QUANTITY


def test_tile_counts_follow_tile_contents():
    game_map = GameMap(10, 10)
    game_map.tile(2, 3).extend([Element.FOOD, Element.FOOD, Element.THYSTAME])
    counts = game_map.tile_counts(2, 3)
    assert counts[Element.FOOD] == 2
    assert counts[Element.THYSTAME] == 1
    assert sum(counts) == len(game_map.tile(2, 3))


def test_compute_density_empty_map_is_zero():
    assert compute_density(GameMap(10, 10)) == [0.0] * ELEMENTS_QUANTITY


def test_compute_density_counts_per_tile():
    game_map = GameMap(10, 10)
    game_map.tile(0, 0).append(Element.SIBUR)
    density = compute_density(game_map)
    assert density[Element.SIBUR] == 1 / game_map.size
    assert sum(density) == density[Element.SIBUR]


def test_compute_density_zero_size_raises():
    with pytest.raises(ValueError):
        compute_density(GameMap(0, 10))


def test_compute_position_zero_offset_returns_same():
    pos = Position(3, 4)
    assert compute_position(pos, Orientation.NORTH, Position(10, 10), 0) == pos


def test_compute_position_north_wraps():
    assert compute_next_position(
        Position(0, 0), Orientation.NORTH, Position(10, 10)
    ) == Position(9, 0)


@pytest.mark.parametrize(
    "forward, backward",
    [
        (Orientation.NORTH, Orientation.SOUTH),
        (Orientation.EAST, Orientation.WEST),
    ],
)
def test_opposite_moves_cancel(forward, backward):
    size = Position(10, 12)
    start = Position(4, 7)
    for offset in range(1, 30):
        moved = compute_position(start, forward, size, offset)
        assert compute_position(moved, backward, size, offset) == start


@pytest.mark.parametrize("orientation", list(Orientation))
def test_full_lap_returns_to_start(orientation):
    size = Position(10, 10)
    start = Position(2, 5)
    assert compute_position(start, orientation, size, 10) == start


@pytest.mark.parametrize("orientation", list(Orientation))
def test_next_position_is_offset_one(orientation):
    size = Position(10, 13)
    pos = Position(9, 12)
    assert compute_next_position(pos, orientation, size) == compute_position(
        pos, orientation, size, 1
    )


def test_north_south_change_only_x_and_east_west_only_y():
    size = Position(10, 10)
    pos = Position(5, 5)
    assert compute_next_position(pos, Orientation.SOUTH, size).y == pos.y
    assert compute_next_position(pos, Orientation.EAST, size).x == pos.x


def test_generate_map_reaches_target_density():
    game_map = GameMap(10, 10)
    generate_map(game_map, random.Random(1))
    density = compute_density(game_map)
    for element in RESOURCES:
        assert abs(density[element] - DENSITY[element]) <= 1 / game_map.size


def test_generate_map_is_idempotent():
    game_map = GameMap(12, 10)
    generate_map(game_map, random.Random(2))
    before = _total_counts(game_map)
    generate_map(game_map, random.Random(5))
    assert _total_counts(game_map) == before


def test_generate_map_tops_up_depleted_map():
    game_map = GameMap(10, 10)
    generate_map(game_map, random.Random(4))
    full = _total_counts(game_map)
    for x in range(game_map.width):
        for y in range(game_map.height):
            game_map.tile(x, y).clear()
    generate_map(game_map, random.Random(9))
    assert _total_counts(game_map) == full


def test_generate_map_deterministic_with_seed():
    first = GameMap(10, 10)
    second = GameMap(10, 10)
    generate_map(first, random.Random(11))
    generate_map(second, random.Random(11))
    assert first.tiles == second.tiles


def test_generate_map_zero_size_does_nothing():
    game_map = GameMap(0, 10)
    generate_map(game_map, random.Random(1))
    assert game_map.tiles == []