"""Level tiles, tile groups and the tile registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

DEFAULT_ANIM_SPEED = 25
TILESET_ID_FACTOR = 1000


@dataclass
class Tile:
    """A level tile and its gameplay properties."""

    id: int = -1
    solid: bool = False
    brick: bool = False
    ice: bool = False
    water: bool = False
    fullbox: bool = False
    distro: bool = False
    goal: bool = False
    data: int = 0
    next_tile: int = 0
    anim_speed: int = DEFAULT_ANIM_SPEED
    filenames: list[str] = field(default_factory=list)
    editor_filenames: list[str] = field(default_factory=list)

    def frame_index(self, frame_counter: int) -> Optional[int]:
        """Index of the image shown at ``frame_counter``, or None if there is none."""
        count = len(self.filenames)
        if count > 1:
            return ((frame_counter * 25) // self.anim_speed) % count
        if count == 1:
            return 0
        return None


@dataclass(frozen=True, order=True)
class TileGroup:
    """A named set of tile ids; groups compare by name only."""

    name: str
    tiles: tuple[int, ...] = field(default=(), compare=False)


class TileManager:
    """Tiles indexed by id, plus the tile groups known so far."""

    def __init__(self) -> None:
        self.tiles: list[Optional[Tile]] = []
        self._groups: dict[str, TileGroup] = {}

    def add(self, tile: Tile, tileset_offset: int = 0) -> None:
        """Store ``tile`` under its id shifted by the tileset offset."""
        index = tile.id + tileset_offset
        if index < 0:
            raise ValueError(f"invalid tile index {index}")
        if index >= len(self.tiles):
            self.tiles.extend([None] * (index + 1 - len(self.tiles)))
        self.tiles[index] = tile

    def get(self, tile_id: int) -> Optional[Tile]:
        """The tile with ``tile_id``; unknown ids fall back to tile 0."""
        if 0 <= tile_id < len(self.tiles):
            return self.tiles[tile_id]
        if not self.tiles:
            raise LookupError("no tiles loaded")
        return self.tiles[0]

    def add_group(self, group: TileGroup) -> None:
        """Register ``group`` unless one with the same name exists."""
        self._groups.setdefault(group.name, group)

    def groups(self) -> list[TileGroup]:
        """All groups, ordered by name."""
        return sorted(self._groups.values())

    def clear(self) -> None:
        """Forget all tiles; groups are kept."""
        self.tiles = []