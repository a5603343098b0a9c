import random

import pytest

from splatdungeon.dungeon import Block, Dungeon, Room, TileColor, rand_int


@pytest.fixture
def dungeon():
    return Dungeon(20, 20)


def test_raw_block_and_color_values_drive_dungeon(dungeon):
    dungeon.place_block(Block(1), 2, 2)
    dungeon.place_block(Block(3), 5, 6)
    dungeon.place_block(Block(4), 7, 8)
    assert dungeon.get_block(2, 2) == Block.FLOOR
    assert dungeon.floor_positions == [(2, 2)]
    assert dungeon.spawn_point(TileColor(1)) == (5, 6)
    assert dungeon.spawn_point(TileColor(2)) == (7, 8)
    dungeon.colors[2][2] = TileColor(2)
    assert dungeon.winner() == TileColor.BLUE


def test_new_dungeon_is_empty(dungeon):
    assert all(b == Block.NONE for col in dungeon.blocks for b in col)
    assert dungeon.count(TileColor.WHITE) == 400
    assert dungeon.floor_positions == []


def test_rand_int_range_and_error():
    rng = random.Random(1)
    values = {rand_int(rng, 3, 8) for _ in range(500)}
    assert values == {3, 4, 5, 6, 7}
    with pytest.raises(ValueError):
        rand_int(rng, 5, 5)


def test_place_block_records_floor(dungeon):
    dungeon.place_block(Block.FLOOR, 2, 3)
    dungeon.place_block(Block.WALL, 4, 4)
    assert dungeon.get_block(2, 3) == Block.FLOOR
    assert dungeon.get_block(4, 4) == Block.WALL
    assert dungeon.floor_positions == [(2, 3)]


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (20, 0), (0, 20)])
def test_out_of_bounds_raises(dungeon, x, y):
    with pytest.raises(IndexError):
        dungeon.get_block(x, y)
    with pytest.raises(IndexError):
        dungeon.place_block(Block.FLOOR, x, y)


def test_block_position(dungeon):
    size = dungeon.block_size
    assert dungeon.block_position(3, 5) == (3 * size, 5 * size)


def test_stamp_room(dungeon):
    dungeon.stamp_room(Room(1, 1, 5, 4))
    assert dungeon.get_block(1, 1) == Block.WALL
    assert dungeon.get_block(5, 4) == Block.WALL
    assert dungeon.get_block(3, 2) == Block.FLOOR
    assert dungeon.get_block(6, 2) == Block.NONE
    assert len(dungeon.floor_positions) == 3 * 2


def test_room_move_to():
    room = Room(0, 10, 3, 3)
    room.move_to((5, 5))
    assert (room.pivot_x, room.pivot_y) == (1, 9)
    room = Room(5, 5, 3, 3)
    room.move_to((5, 5))
    assert (room.pivot_x, room.pivot_y) == (5, 5)


def test_room_in_bounds(dungeon):
    assert Room(0, 0, 5, 5).in_bounds(dungeon)
    assert not Room(-1, 0, 5, 5).in_bounds(dungeon)
    assert not Room(0, -1, 5, 5).in_bounds(dungeon)
    assert not Room(15, 0, 5, 5).in_bounds(dungeon)
    assert not Room(0, 15, 5, 5).in_bounds(dungeon)


def test_room_bad_overlap(dungeon):
    dungeon.stamp_room(Room(0, 0, 5, 5))
    assert Room(2, 2, 5, 5).bad_overlap(dungeon)
    # Only walls overlap: interior is still empty.
    assert not Room(4, 0, 5, 5).bad_overlap(dungeon)


def test_attempt_stamp_makes_doorway(dungeon):
    dungeon.stamp_room(Room(0, 0, 5, 5))
    assert dungeon.attempt_stamp(Room(4, 0, 5, 5))
    assert dungeon.get_block(4, 1) == Block.FLOOR
    assert dungeon.get_block(4, 2) == Block.WALL
    assert dungeon.get_block(6, 2) == Block.FLOOR
    assert dungeon.get_block(8, 2) == Block.WALL


def test_attempt_stamp_fails_without_contact(dungeon):
    dungeon.stamp_room(Room(0, 0, 5, 5))
    before = [col[:] for col in dungeon.blocks]
    assert not dungeon.attempt_stamp(Room(10, 10, 5, 5))
    assert dungeon.blocks == before


def test_attempt_stamp_at_edge_does_not_raise(dungeon):
    dungeon.stamp_room(Room(0, 0, 5, 5))
    assert not dungeon.attempt_stamp(Room(0, 0, 3, 3))


@pytest.mark.parametrize("seed", [0, 1, 7, 42, 12345])
def test_generate_places_one_spawn_each(seed):
    d = Dungeon(60, 33)
    d.generate(seed)
    flat = [b for col in d.blocks for b in col]
    assert flat.count(Block.RED_SPAWN) == 1
    assert flat.count(Block.BLUE_SPAWN) == 1
    assert flat.count(Block.FLOOR) > 0
    for x, y in d.floor_positions:
        assert 0 <= x < d.width and 0 <= y < d.height


@pytest.mark.parametrize("seed", [3, 99])
def test_generate_is_deterministic(seed):
    a = Dungeon(60, 33)
    b = Dungeon(60, 33)
    a.generate(seed)
    b.generate(seed)
    assert a.blocks == b.blocks


def test_generate_clears_colors():
    d = Dungeon(60, 33)
    d.generate(5)
    d.colors[0][0] = TileColor.RED
    d.generate(5)
    assert d.count(TileColor.RED) == 0


def test_spawn_point(dungeon):
    dungeon.place_block(Block.RED_SPAWN, 3, 4)
    dungeon.place_block(Block.BLUE_SPAWN, 7, 8)
    assert dungeon.spawn_point(TileColor.RED) == (3, 4)
    assert dungeon.spawn_point(TileColor.BLUE) == (7, 8)
    with pytest.raises(LookupError):
        dungeon.spawn_point(TileColor.WHITE)


def test_spawn_point_missing(dungeon):
    with pytest.raises(LookupError):
        dungeon.spawn_point(TileColor.RED)


def test_spawn_point_after_generate():
    d = Dungeon(60, 33)
    d.generate(11)
    x, y = d.spawn_point(TileColor.BLUE)
    assert d.get_block(x, y) == Block.BLUE_SPAWN


def test_count_and_winner(dungeon):
    assert dungeon.winner() == TileColor.WHITE
    dungeon.colors[1][1] = TileColor.RED
    dungeon.colors[1][2] = TileColor.RED
    dungeon.colors[2][2] = TileColor.BLUE
    assert dungeon.count(TileColor.RED) == 2
    assert dungeon.count(TileColor.BLUE) == 1
    assert dungeon.winner() == TileColor.RED
    dungeon.colors[3][3] = TileColor.BLUE
    assert dungeon.winner() == TileColor.WHITE
    dungeon.colors[4][4] = TileColor.BLUE
    assert dungeon.winner() == TileColor.BLUE


def test_add_player(dungeon):
    first, second = object(), object()
    dungeon.add_player(first)
    dungeon.add_player(second)
    assert dungeon.players == [first, second]