import pytest

from icyisland.tile import Tile, TileGroup, TileManager


def test_tile_defaults_match_source():
    tile = Tile()
    assert tile.id == -1
    assert tile.anim_speed == 25
    assert not tile.solid and not tile.goal
    assert tile.data == 0 and tile.next_tile == 0


def test_frame_index_without_images():
    assert Tile(id=1).frame_index(10) is None


def test_frame_index_single_image():
    tile = Tile(id=1, filenames=["a.png"])
    assert [tile.frame_index(n) for n in range(5)] == [0, 0, 0, 0, 0]


def test_frame_index_stays_in_range_and_starts_at_zero():
    tile = Tile(id=1, filenames=["a.png", "b.png", "c.png"], anim_speed=10)
    indices = [tile.frame_index(n) for n in range(50)]
    assert indices[0] == 0
    assert all(0 <= i < 3 for i in indices)
    assert set(indices) == {0, 1, 2}


def test_add_with_offset_and_get():
    manager = TileManager()
    tile = Tile(id=3)
    manager.add(tile, 1000)
    assert manager.get(1003) is tile
    assert len(manager.tiles) == 1004
    assert manager.get(5) is None


def test_get_unknown_returns_tile_zero():
    manager = TileManager()
    zero = Tile(id=0)
    manager.add(zero)
    manager.add(Tile(id=2))
    assert manager.get(99999) is zero
    assert manager.get(-1) is zero


def test_get_on_empty_manager_raises():
    with pytest.raises(LookupError):
        TileManager().get(0)


def test_add_replaces_existing_slot():
    manager = TileManager()
    first, second = Tile(id=4), Tile(id=4, solid=True)
    manager.add(first)
    manager.add(second)
    assert manager.get(4) is second


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        TileManager().add(Tile())


def test_groups_unique_by_name_and_sorted():
    manager = TileManager()
    manager.add_group(TileGroup("snow", (1, 2)))
    manager.add_group(TileGroup("block", (3,)))
    manager.add_group(TileGroup("snow", (9,)))
    groups = manager.groups()
    assert [g.name for g in groups] == ["block", "snow"]
    assert groups[1].tiles == (1, 2)


def test_group_ordering_ignores_tiles():
    assert TileGroup("a", (5,)) < TileGroup("b", (1,))
    assert TileGroup("x", (1,)) == TileGroup("x", (2,))


def test_clear_removes_tiles_keeps_groups():
    manager = TileManager()
    manager.add(Tile(id=0))
    manager.add_group(TileGroup("g"))
    manager.clear()
    with pytest.raises(LookupError):
        manager.get(0)
    assert [g.name for g in manager.groups()] == ["g"]