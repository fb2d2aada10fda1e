import pytest

from icyisland.maptiles import Direction, MapTile, MapTileManager, OneWay
from icyisland.worldmap import MapLevel, Point, Tux, WorldMap

STOP = 0
WALK = 1
ONE_WAY_SOUTH = 2
NO_WEST = 3
CORNER = 4


def _manager():
    return MapTileManager(
        {
            STOP: MapTile(),
            WALK: MapTile(stop=False),
            ONE_WAY_SOUTH: MapTile(one_way=OneWay.NORTH_SOUTH_WAY),
            NO_WEST: MapTile(west=False),
            CORNER: MapTile(stop=False, auto_walk=True, north=False, west=True, east=False, south=True),
        }
    )


def _map(width, height, tilemap, levels=(), start=(0, 0)):
    return WorldMap(_manager(), width, height, tilemap, levels, start[0], start[1], "test")


def test_next_tile_moves_one_step():
    wm = _map(3, 3, [STOP] * 9, start=(1, 1))
    p = Point(1, 1)
    assert wm.next_tile(p, Direction.WEST) == Point(0, 1)
    assert wm.next_tile(p, Direction.EAST) == Point(2, 1)
    assert wm.next_tile(p, Direction.NORTH) == Point(1, 0)
    assert wm.next_tile(p, Direction.SOUTH) == Point(1, 2)
    assert wm.next_tile(p, Direction.NONE) == p


def test_path_ok_outside_map_is_blocked():
    wm = _map(2, 1, [STOP, STOP])
    assert wm.path_ok(Direction.WEST, Point(0, 0)) is None
    assert wm.path_ok(Direction.EAST, Point(0, 0)) == Point(1, 0)


def test_path_ok_respects_tile_sides():
    wm = _map(2, 1, [STOP, NO_WEST])
    assert wm.path_ok(Direction.EAST, Point(0, 0)) is None
    assert wm.path_ok(Direction.WEST, Point(1, 0)) == Point(0, 0)


def test_path_ok_one_way_tile():
    wm = _map(1, 3, [STOP, ONE_WAY_SOUTH, STOP], start=(0, 0))
    assert wm.path_ok(Direction.SOUTH, Point(0, 0)) == Point(0, 1)
    assert wm.path_ok(Direction.NORTH, Point(0, 2)) is None


def test_path_ok_none_direction_raises():
    wm = _map(1, 1, [STOP])
    with pytest.raises(ValueError):
        wm.path_ok(Direction.NONE, Point(0, 0))


def test_at_outside_raises():
    wm = _map(2, 2, [STOP, WALK, STOP, STOP])
    assert wm.at(Point(1, 0)).stop is False
    with pytest.raises(IndexError):
        wm.at(Point(2, 0))


def test_at_level_and_set_solved():
    levels = [MapLevel(x=0, y=0, name="a.stl"), MapLevel(x=1, y=0, name="b.stl")]
    wm = _map(2, 1, [STOP, STOP], levels)
    assert wm.at_level() is levels[0]
    wm.set_levels_as_solved()
    assert all(level.solved for level in wm.levels)


def test_camera_offset_clamped_to_map():
    wm = _map(20, 15, [STOP] * 300)
    assert wm.camera_offset(320, 240) == Point(0, 0)
    wm.tux.tile_pos = Point(19, 14)
    offset = wm.camera_offset(320, 240)
    assert offset == Point(320 - 20 * 32, 240 - 15 * 32)


def test_tux_walks_to_next_tile_and_stops():
    wm = _map(3, 1, [STOP, STOP, STOP])
    tux = wm.tux
    tux.set_direction(Direction.EAST)
    tux.update(0)
    assert tux.is_moving()
    assert tux.tile_pos == Point(1, 0)
    assert tux.position() == Point(0, 0)
    assert tux.back_direction is Direction.WEST
    tux.update(2)
    assert not tux.is_moving()
    assert tux.position() == Point(32, 0)


def test_tux_keeps_walking_over_walkway():
    wm = _map(3, 1, [STOP, WALK, STOP])
    tux = wm.tux
    tux.set_direction(Direction.EAST)
    tux.update(0)
    tux.update(2)
    assert tux.tile_pos == Point(2, 0)
    assert tux.is_moving()
    tux.update(2)
    assert not tux.is_moving()
    assert tux.tile_pos == Point(2, 0)


def test_unsolved_level_blocks_except_going_back():
    levels = [MapLevel(x=0, y=0, name="a.stl")]
    wm = _map(2, 1, [STOP, STOP], levels)
    tux = wm.tux
    tux.set_direction(Direction.EAST)
    tux.update(0)
    assert not tux.is_moving()
    tux.back_direction = Direction.EAST
    tux.update(0)
    assert tux.is_moving()
    assert tux.tile_pos == Point(1, 0)


def test_auto_walk_turns_corner():
    wm = _map(2, 2, [STOP, CORNER, STOP, STOP])
    tux = wm.tux
    tux.set_direction(Direction.EAST)
    tux.update(0)
    tux.update(2)
    assert tux.tile_pos == Point(1, 1)
    assert tux.direction is Direction.SOUTH
    assert tux.back_direction is Direction.NORTH


def test_auto_path_direction_skips_back():
    wm = _map(1, 1, [STOP])
    wm.tux.back_direction = Direction.NORTH
    assert wm.auto_path_direction() is Direction.SOUTH
    wm.tux.back_direction = Direction.NONE
    assert wm.auto_path_direction() is Direction.NORTH


def test_passive_message_shown_when_walking_over():
    levels = [MapLevel(x=1, y=0, display_map_message="hello")]
    wm = _map(2, 1, [STOP, STOP], levels)
    wm.tux.set_direction(Direction.EAST)
    wm.tux.update(0)
    wm.tux.update(2)
    assert wm.passive_message == "hello"
    assert wm.passive_message_timer.period == 2800


def test_passive_message_ignored_for_disabled_side():
    levels = [MapLevel(x=1, y=0, display_map_message="hello", apply_action_west=False)]
    wm = _map(2, 1, [STOP, STOP], levels)
    wm.tux.set_direction(Direction.EAST)
    wm.tux.update(0)
    wm.tux.update(2)
    assert wm.passive_message == ""


def test_savegame_lists_solved_levels():
    levels = [MapLevel(x=0, y=0, name="a.stl"), MapLevel(x=1, y=0, name="b.stl")]
    wm = _map(2, 1, [STOP, STOP], levels)
    wm.apply_solved({"b.stl": True})
    text = wm.savegame_text(3, 1200, 7, "none")
    assert text.startswith("(supertux-savegame\n  (version 1)\n")
    assert '(title  "Icyisland - 1/2")' in text
    assert "(lives   3)" in text
    assert "(score   1200)" in text
    assert "(distros 7)" in text
    assert '(level (name "b.stl")' in text
    assert "a.stl" not in text
    assert text.endswith(";; EOF ;;\n")


def test_apply_solved_accepts_pairs_and_unsets():
    levels = [MapLevel(name="a.stl", solved=True), MapLevel(name="b.stl")]
    wm = _map(1, 1, [STOP], levels)
    wm.apply_solved([("a.stl", False), ("b.stl", True), ("zzz", True)])
    assert [level.solved for level in wm.levels] == [False, True]


def test_tux_starts_at_map_start():
    wm = _map(3, 3, [STOP] * 9, start=(2, 1))
    tux = Tux(wm)
    assert tux.tile_pos == Point(2, 1)
    assert tux.position() == Point(64, 32)