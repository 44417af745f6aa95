import pytest

from cubcaster.errors import (
    MSG_AFTER_MAP,
    MSG_MAP_BAD,
    MSG_MAP_CHAR,
    MSG_MULTIPLAYER,
    MSG_NO_PLAYER,
    CubError,
)
from cubcaster.geometry import Vec2
from cubcaster.mapparse import map_check_closed, parse_map, spawn_player

CLOSED = [
    "1111111\n",
    "1000001\n",
    "10N0001\n",
    "1000001\n",
    "1111111\n",
]


def _lines(rows):
    return [row + "\n" for row in rows]


def test_spawn_player_north():
    player = spawn_player(3, 2, "N")
    assert player.pos == Vec2(3.5, 2.5)
    assert player.dir == Vec2(0, -1)
    assert player.plane == Vec2(0.66, 0)


@pytest.mark.parametrize("heading", ["N", "S", "E", "W"])
def test_spawn_player_plane_perpendicular(heading):
    player = spawn_player(0, 0, heading)
    assert player.dir.x * player.plane.x + player.dir.y * player.plane.y == 0
    assert abs(player.dir.x) + abs(player.dir.y) == 1


def test_spawn_player_bad_heading():
    with pytest.raises(ValueError):
        spawn_player(1, 1, "X")


def test_parse_map_closed():
    grid, player = parse_map(CLOSED)
    assert grid == [row.rstrip("\n") for row in CLOSED][:2] + [
        "1000001",
        "1000001",
        "1111111",
    ]
    assert player.cell() == (2, 2)
    assert player.dir == Vec2(0, -1)


def test_parse_map_skips_leading_blank_lines():
    grid, player = parse_map(["\n", "\n"] + CLOSED)
    assert len(grid) == len(CLOSED)
    assert player.cell() == (2, 2)


def test_parse_map_blank_after_map():
    with pytest.raises(CubError) as info:
        parse_map(CLOSED[:3] + ["\n"] + CLOSED[3:])
    assert info.value.message == MSG_AFTER_MAP


def test_parse_map_trailing_blank_rejected():
    with pytest.raises(CubError) as info:
        parse_map(CLOSED + ["\n"])
    assert info.value.message == MSG_AFTER_MAP


def test_parse_map_invalid_char():
    with pytest.raises(CubError) as info:
        parse_map(_lines(["111", "1N1", "1X1", "111"]))
    assert info.value.message == MSG_MAP_CHAR


def test_parse_map_no_player():
    with pytest.raises(CubError) as info:
        parse_map(_lines(["111", "101", "111"]))
    assert info.value.message == MSG_NO_PLAYER


def test_parse_map_two_players():
    with pytest.raises(CubError) as info:
        parse_map(_lines(["1111", "1NS1", "1111"]))
    assert info.value.message == MSG_MULTIPLAYER


def test_parse_map_open_border():
    with pytest.raises(CubError) as info:
        parse_map(_lines(["1111", "1N00", "1111"]))
    assert info.value.message == MSG_MAP_BAD


def test_parse_map_hole_in_top_wall():
    with pytest.raises(CubError) as info:
        parse_map(_lines(["1101", "1N01", "1111"]))
    assert info.value.message == MSG_MAP_BAD


def test_parse_map_enclosed_space_allowed():
    grid, player = parse_map(_lines(["11111", "1 001", "1N001", "11111"]))
    assert grid[1] == "1 001"
    assert player.cell() == (1, 2)


def test_parse_map_space_leading_outside():
    with pytest.raises(CubError) as info:
        parse_map(_lines(["11111", "  001", "1N001", "11111"]))
    assert info.value.message == MSG_MAP_BAD


def test_parse_map_short_row_diagonal_leak():
    with pytest.raises(CubError) as info:
        parse_map(_lines(["1111", "1N01", "111"]))
    assert info.value.message == MSG_MAP_BAD


def test_parse_map_irregular_but_closed():
    rows = ["  1111", "111001", "1N0001", "111111"]
    grid, player = parse_map(_lines(rows))
    assert grid == ["  1111", "111001", "100001", "111111"]
    assert player.cell() == (1, 2)


def test_map_check_closed_leaves_grid_unchanged():
    grid = ["1111", "1001", "1001", "1111"]
    copy = list(grid)
    map_check_closed(grid, Vec2(1.5, 1.5))
    assert grid == copy


def test_map_check_closed_start_outside():
    with pytest.raises(CubError) as info:
        map_check_closed(["111", "101", "111"], Vec2(5.5, 1.5))
    assert info.value.message == MSG_MAP_BAD