"""World map directions and the tiles the map is built from."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Mapping, Optional


class Direction(enum.Enum):
    NONE = 0
    WEST = 1
    EAST = 2
    NORTH = 3
    SOUTH = 4


class OneWay(enum.Enum):
    """Direction restriction of a one-way tile."""

    BOTH_WAYS = 0
    NORTH_SOUTH_WAY = 1
    SOUTH_NORTH_WAY = 2
    EAST_WEST_WAY = 3
    WEST_EAST_WAY = 4


_REVERSE = {
    Direction.WEST: Direction.EAST,
    Direction.EAST: Direction.WEST,
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.NONE: Direction.NONE,
}

_NAMES = {
    Direction.WEST: "west",
    Direction.EAST: "east",
    Direction.NORTH: "north",
    Direction.SOUTH: "south",
}

_ONE_WAY_NAMES = {
    "north-south": OneWay.NORTH_SOUTH_WAY,
    "south-north": OneWay.SOUTH_NORTH_WAY,
    "east-west": OneWay.EAST_WEST_WAY,
    "west-east": OneWay.WEST_EAST_WAY,
}


def reverse_dir(direction: Direction) -> Direction:
    """The opposite direction; NONE stays NONE."""
    return _REVERSE[direction]


def direction_to_string(direction: Direction) -> str:
    return _NAMES.get(direction, "none")


def string_to_direction(text: str) -> Direction:
    """Parse a direction name; anything unknown is NONE."""
    for direction, name in _NAMES.items():
        if name == text:
            return direction
    return Direction.NONE


def parse_one_way(text: str) -> OneWay:
    """Parse a one-way spec such as ``north-south``; anything else allows both ways."""
    return _ONE_WAY_NAMES.get(text, OneWay.BOTH_WAYS)


@dataclass
class MapTile:
    """A world map tile: which sides Tux may leave by, and how he walks over it."""

    image: str = "<invalid>"
    north: bool = True
    east: bool = True
    south: bool = True
    west: bool = True
    one_way: OneWay = OneWay.BOTH_WAYS
    stop: bool = True
    auto_walk: bool = False


class MapTileManager:
    """World map tiles indexed by id."""

    def __init__(self, tiles: Optional[Mapping[int, MapTile]] = None) -> None:
        self.tiles: list[Optional[MapTile]] = []
        for tile_id, tile in (tiles or {}).items():
            self.add(tile_id, tile)

    def add(self, tile_id: int, tile: MapTile) -> None:
        """Store ``tile`` under ``tile_id``, replacing any earlier tile."""
        if tile_id < 0:
            raise ValueError(f"invalid tile id {tile_id}")
        if tile_id >= len(self.tiles):
            self.tiles.extend([None] * (tile_id + 1 - len(self.tiles)))
        self.tiles[tile_id] = tile

    def get(self, tile_id: int) -> MapTile:
        """The tile with ``tile_id``; raises LookupError when there is none."""
        if not 0 <= tile_id < len(self.tiles):
            raise IndexError(f"tile id {tile_id} out of range")
        tile = self.tiles[tile_id]
        if tile is None:
            raise LookupError(f"no tile with id {tile_id}")
        return tile