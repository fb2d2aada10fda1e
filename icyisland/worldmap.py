"""The world map: its tile grid, level markers, and Tux walking over it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence, Union

from .maptiles import (
    Direction,
    MapTile,
    MapTileManager,
    OneWay,
    direction_to_string,
    reverse_dir,
)
from .timer import GameClock, Timer

TILE_SIZE = 32
DISPLAY_MAP_MESSAGE_TIME = 2800
WALK_SPEED = 20.0
DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 15
DEFAULT_START_X = 4
DEFAULT_START_Y = 5

_ONE_WAY_ALLOWED = {
    OneWay.NORTH_SOUTH_WAY: Direction.SOUTH,
    OneWay.SOUTH_NORTH_WAY: Direction.NORTH,
    OneWay.EAST_WEST_WAY: Direction.WEST,
    OneWay.WEST_EAST_WAY: Direction.EAST,
}

_EXITS = {
    Direction.WEST: ("west", "east"),
    Direction.EAST: ("east", "west"),
    Direction.NORTH: ("north", "south"),
    Direction.SOUTH: ("south", "north"),
}

_STEPS = {
    Direction.WEST: (-1, 0),
    Direction.EAST: (1, 0),
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.NONE: (0, 0),
}


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0


@dataclass
class MapLevel:
    """A marker on the world map: a level, a message spot or a teleporter."""

    x: int = 0
    y: int = 0
    name: str = ""
    title: str = ""
    solved: bool = False
    extro_filename: str = ""
    display_map_message: str = ""
    passive_message: bool = True
    teleport_dest_x: int = -1
    teleport_dest_y: int = -1
    teleport_message: str = ""
    invisible_teleporter: bool = False
    auto_path: bool = True
    apply_action_north: bool = True
    apply_action_east: bool = True
    apply_action_south: bool = True
    apply_action_west: bool = True
    north: bool = True
    east: bool = True
    south: bool = True
    west: bool = True


def _free_direction(tile: MapTile, back: Direction) -> Direction:
    """First open side of ``tile`` other than the one Tux came from."""
    for direction, side in (
        (Direction.NORTH, tile.north),
        (Direction.SOUTH, tile.south),
        (Direction.EAST, tile.east),
        (Direction.WEST, tile.west),
    ):
        if side and back is not direction:
            return direction
    return Direction.NONE


class WorldMap:
    """A grid of map tiles with level markers and Tux standing on it."""

    def __init__(
        self,
        tile_manager: MapTileManager,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        tilemap: Sequence[int] = (),
        levels: Iterable[MapLevel] = (),
        start_x: int = DEFAULT_START_X,
        start_y: int = DEFAULT_START_Y,
        name: str = "<no file>",
    ) -> None:
        self.tile_manager = tile_manager
        self.width = width
        self.height = height
        self.tilemap = list(tilemap)
        self.levels = list(levels)
        self.start_x = start_x
        self.start_y = start_y
        self.name = name
        self.passive_message = ""
        self.passive_message_timer = Timer(GameClock(), True)
        self.tux = Tux(self)

    def next_tile(self, pos: Point, direction: Direction) -> Point:
        dx, dy = _STEPS[direction]
        return Point(pos.x + dx, pos.y + dy)

    def _inside(self, pos: Point) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def path_ok(self, direction: Direction, pos: Point) -> Optional[Point]:
        """The tile reached by walking from ``pos`` in ``direction``, or None if blocked."""
        new_pos = self.next_tile(pos, direction)
        if not self._inside(new_pos):
            return None
        target = self.at(new_pos)
        if target.one_way is not OneWay.BOTH_WAYS:
            return new_pos if _ONE_WAY_ALLOWED[target.one_way] is direction else None
        if direction is Direction.NONE:
            raise ValueError("path_ok() can't work if direction is NONE")
        leave, enter = _EXITS[direction]
        if getattr(self.at(pos), leave) and getattr(target, enter):
            return new_pos
        return None

    def at(self, pos: Point) -> MapTile:
        if not self._inside(pos):
            raise IndexError(f"position ({pos.x}, {pos.y}) outside the map")
        return self.tile_manager.get(self.tilemap[self.width * pos.y + pos.x])

    def at_level(self) -> Optional[MapLevel]:
        """The level marker under Tux, if any."""
        pos = self.tux.tile_pos
        for level in self.levels:
            if level.x == pos.x and level.y == pos.y:
                return level
        return None

    def set_levels_as_solved(self) -> None:
        for level in self.levels:
            level.solved = True

    def camera_offset(self, screen_width: int, screen_height: int) -> Point:
        """Drawing offset that centres Tux without showing beyond the map."""
        tux_pos = self.tux.position()
        x = min(0, -tux_pos.x + screen_width // 2)
        y = min(0, -tux_pos.y + screen_height // 2)
        x = max(x, screen_width - self.width * TILE_SIZE)
        y = max(y, screen_height - self.height * TILE_SIZE)
        return Point(x, y)

    def auto_path_direction(self) -> Direction:
        """Direction Tux should walk on after solving the level he stands on."""
        return _free_direction(self.at(self.tux.tile_pos), self.tux.back_direction)

    def savegame_text(self, lives: int, score: int, distros: int, bonus: str) -> str:
        """The savegame file contents for the current map state."""
        solved = sum(1 for level in self.levels if level.solved)
        pos = self.tux.tile_pos
        parts = [
            "(supertux-savegame\n",
            "  (version 1)\n",
            f'  (title  "Icyisland - {solved}/{len(self.levels)}")\n',
            f"  (lives   {lives})\n",
            f"  (score   {score})\n",
            f"  (distros {distros})\n",
            f"  (tux (x {pos.x}) (y {pos.y})\n",
            f'       (back "{direction_to_string(self.tux.back_direction)}")\n',
            f'       (bonus "{bonus}"))\n',
            "  (levels\n",
        ]
        for level in self.levels:
            if level.solved and level.name:
                parts.append(f'     (level (name "{level.name}")\n')
                parts.append("            (solved #t))\n")
        parts.append("   )\n )\n\n;; EOF ;;\n")
        return "".join(parts)

    def apply_solved(
        self, solved_names: Union[Mapping[str, bool], Iterable[tuple[str, bool]]]
    ) -> None:
        """Set the solved state of levels by name, as read from a savegame."""
        states = dict(solved_names)
        for level in self.levels:
            if level.name in states:
                level.solved = bool(states[level.name])


class Tux:
    """Tux on the world map, walking from tile to tile."""

    def __init__(self, worldmap: WorldMap) -> None:
        self.worldmap = worldmap
        self.offset = 0.0
        self.moving = False
        self.tile_pos = Point(worldmap.start_x, worldmap.start_y)
        self.direction = Direction.NONE
        self.input_direction = Direction.NONE
        self.back_direction = Direction.NONE

    def set_direction(self, direction: Direction) -> None:
        self.input_direction = direction

    def is_moving(self) -> bool:
        return self.moving

    def position(self) -> Point:
        """Pixel position, between tiles while walking."""
        x = float(self.tile_pos.x * TILE_SIZE)
        y = float(self.tile_pos.y * TILE_SIZE)
        shift = self.offset - TILE_SIZE
        if self.direction is Direction.WEST:
            x -= shift
        elif self.direction is Direction.EAST:
            x += shift
        elif self.direction is Direction.NORTH:
            y -= shift
        elif self.direction is Direction.SOUTH:
            y += shift
        return Point(int(x), int(y))

    def stop(self) -> None:
        self.offset = 0.0
        self.direction = Direction.NONE
        self.moving = False

    def _walk(self, direction: Direction, target: Point) -> None:
        self.tile_pos = target
        self.moving = True
        self.direction = direction
        self.back_direction = reverse_dir(direction)

    def update(self, delta: float) -> None:
        worldmap = self.worldmap
        if not self.moving:
            if self.input_direction is Direction.NONE:
                return
            level = worldmap.at_level()
            target = None
            if level is None or level.solved or not level.name:
                target = worldmap.path_ok(self.input_direction, self.tile_pos)
            if target is not None:
                self._walk(self.input_direction, target)
            elif self.input_direction is self.back_direction:
                self._walk(
                    self.input_direction,
                    worldmap.next_tile(self.tile_pos, self.input_direction),
                )
            return

        self.offset += WALK_SPEED * delta
        if self.offset <= TILE_SIZE:
            return
        self.offset -= TILE_SIZE

        level = worldmap.at_level()
        if (
            level is not None
            and not level.name
            and level.display_map_message
            and level.passive_message
        ):
            if (
                (self.direction is Direction.NORTH and level.apply_action_south)
                or (self.direction is Direction.SOUTH and level.apply_action_north)
                or (self.direction is Direction.WEST and level.apply_action_east)
                or (self.direction is Direction.EAST and level.apply_action_west)
            ):
                worldmap.passive_message = level.display_map_message
                worldmap.passive_message_timer.start(DISPLAY_MAP_MESSAGE_TIME)

        tile = worldmap.at(self.tile_pos)
        if tile.stop or (
            level is not None and (level.name or level.teleport_dest_x != -1)
        ):
            self.stop()
            return

        if tile.auto_walk:
            turn = _free_direction(tile, self.back_direction)
            if turn is Direction.NONE:
                self.stop()
                return
            self.direction = turn
            self.back_direction = reverse_dir(turn)

        target = worldmap.path_ok(self.direction, self.tile_pos)
        if target is not None:
            self.tile_pos = target
        else:
            self.stop()