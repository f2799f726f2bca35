"""The toroidal world map: positions, movement and resource generation."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum

from .elements import DENSITY, ELEMENTS_QUANTITY, RESOURCES, Element


@dataclass(frozen=True)
class Position:
    """A tile coordinate on the map."""

    x: int
    y: int


class Orientation(IntEnum):
    """Direction a player faces."""

    NORTH = 1
    EAST = 2
    SOUTH = 3
    WEST = 4


@dataclass
class GameMap:
    """A width by height grid whose tiles hold resource elements."""

    width: int
    height: int
    tiles: list[list[list[Element]]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if not self.tiles:
            self.tiles = [[[] for _ in range(self.height)] for _ in range(self.width)]

    @property
    def size(self) -> int:
        """Number of tiles on the map."""
        return self.width * self.height

    @property
    def dimensions(self) -> Position:
        """The map size as a position, for wrap-around arithmetic."""
        return Position(self.width, self.height)

    def tile(self, x: int, y: int) -> list[Element]:
        """Return the (mutable) list of elements lying on a tile."""
        return self.tiles[x][y]

    def tile_counts(self, x: int, y: int) -> list[int]:
        """Return how many of each resource lie on a tile, in protocol order."""
        counts = [0] * ELEMENTS_QUANTITY
        for element in self.tiles[x][y]:
            counts[element] += 1
        return counts


def shuffled_positions(
    width: int, height: int, rng: random.Random | None = None
) -> list[Position]:
    """Return every position of a width by height map in random order."""
    rng = rng or random.Random()
    positions = [Position(x, y) for x in range(width) for y in range(height)]
    rng.shuffle(positions)
    return positions


def compute_density(game_map: GameMap) -> list[float]:
    """Return the current amount of each resource per tile."""
    if game_map.size == 0:
        raise ValueError("cannot compute the density of an empty map")
    table = [0.0] * ELEMENTS_QUANTITY
    for column in game_map.tiles:
        for tile in column:
            for element in tile:
                table[element] += 1.0
    return [count / game_map.size for count in table]


_OFFSETS = {
    Orientation.NORTH: (-1, 0),
    Orientation.SOUTH: (1, 0),
    Orientation.EAST: (0, 1),
    Orientation.WEST: (0, -1),
}


def compute_position(
    pos: Position, orientation: Orientation, map_size: Position, offset: int
) -> Position:
    """Move ``offset`` tiles from ``pos`` in ``orientation``, wrapping around."""
    if offset == 0:
        return pos
    dx, dy = _OFFSETS.get(orientation, (0, 0))
    return Position(
        (pos.x + dx * offset) % map_size.x,
        (pos.y + dy * offset) % map_size.y,
    )


def compute_next_position(
    pos: Position, orientation: Orientation, map_size: Position
) -> Position:
    """Return the tile directly in front of ``pos``."""
    return compute_position(pos, orientation, map_size, 1)


def _element_targets(current: list[float], map_size: int) -> list[int]:
    targets = []
    for element in RESOURCES:
        target = int(DENSITY[element] * map_size + 0.5)
        present = int(current[element] * map_size + 0.5)
        targets.append(max(target - present, 0))
    return targets


def generate_map(game_map: GameMap, rng: random.Random | None = None) -> None:
    """Top the map up with resources until each reaches its target density.

    Elements are placed in turn, one of each kind that still needs placing,
    on successive tiles of a shuffled walk through the map.
    """
    if game_map.width == 0 or game_map.height == 0:
        return
    map_size = game_map.size
    positions = shuffled_positions(game_map.width, game_map.height, rng)
    targets = _element_targets(compute_density(game_map), map_size)
    placed = [0] * ELEMENTS_QUANTITY
    remaining = sum(targets)
    pos_idx = 0
    elem = 0
    while remaining > 0:
        if placed[elem] < targets[elem]:
            pos = positions[pos_idx]
            game_map.tiles[pos.x][pos.y].insert(0, Element(elem))
            placed[elem] += 1
            remaining -= 1
            pos_idx = (pos_idx + 1) % map_size
        elem = (elem + 1) % ELEMENTS_QUANTITY