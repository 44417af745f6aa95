import math
from dataclasses import replace

import pytest

from cubcaster.app import (
    ESCAPE,
    ROTATE_LEFT,
    ROTATE_RIGHT,
    Game,
    check_args,
    main,
)
from cubcaster.assets import TEXTURE_HEIGHT, TEXTURE_WIDTH, Assets, Texture
from cubcaster.colors import Color
from cubcaster.errors import MSG_ARG_EXTENSION, MSG_ARGS, MSG_MAP_OPEN, CubError
from cubcaster.loader import Scene
from cubcaster.mapparse import spawn_player
from cubcaster.minimap import MAP_W_COLOR
from cubcaster.movement import MOUSE_CENTER_X, Key, mouse_rotation_angle, rotate_player

GRID = [
    "11111",
    "10001",
    "10001",
    "10001",
    "11111",
]

CEILING = Color(1, 2, 3).pack()
FLOOR_COLOR = Color(4, 5, 6).pack()


def _texture():
    return Texture(TEXTURE_WIDTH, TEXTURE_HEIGHT, (0,) * (TEXTURE_WIDTH * TEXTURE_HEIGHT))


def _scene():
    tex = _texture()
    assets = Assets(north=tex, south=tex, east=tex, west=tex, ceiling=CEILING, floor=FLOOR_COLOR)
    return Scene(grid=list(GRID), player=spawn_player(2, 2, "N"), assets=assets)


def _game():
    return Game(_scene(), width=64, height=48)


@pytest.mark.parametrize("argv", [[], ["a.cub", "b.cub"]])
def test_check_args_wrong_count(argv):
    with pytest.raises(CubError) as info:
        check_args(argv)
    assert info.value.message == MSG_ARGS


@pytest.mark.parametrize("path", ["map.txt", ".cub", "mapcub", "map.cu"])
def test_check_args_bad_extension(path):
    with pytest.raises(CubError) as info:
        check_args([path])
    assert info.value.message == MSG_ARG_EXTENSION


def test_check_args_returns_path():
    assert check_args(["maps/x.cub"]) == "maps/x.cub"


def test_main_reports_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == f"Error\n{MSG_ARGS}\n"


def test_main_reports_missing_file(tmp_path, capsys):
    status = main([str(tmp_path / "missing.cub")])
    assert status == 1
    err = capsys.readouterr().err
    assert err.startswith("Error\n")
    assert MSG_MAP_OPEN in err


def test_tick_moves_forward():
    game = _game()
    assert game.tick({Key.W}, MOUSE_CENTER_X, 0.1) is True
    assert game.scene.player.pos.x == pytest.approx(2.5)
    assert game.scene.player.pos.y == pytest.approx(2.1)


def test_tick_forward_and_back_cancel():
    game = _game()
    game.tick({Key.W, Key.S}, MOUSE_CENTER_X, 0.1)
    assert game.scene.player.pos.x == pytest.approx(2.5)
    assert game.scene.player.pos.y == pytest.approx(2.5)


def test_tick_escape_stops():
    game = _game()
    assert game.tick({ESCAPE}, MOUSE_CENTER_X, 0.1) is False
    assert game.running is False


def test_tick_left_then_right_restores_direction():
    game = _game()
    original = game.scene.player.dir
    game.tick({ROTATE_LEFT}, MOUSE_CENTER_X, 0.3)
    turned = game.scene.player.dir
    assert math.hypot(turned.x, turned.y) == pytest.approx(1.0)
    assert turned.x != pytest.approx(original.x)
    game.tick({ROTATE_RIGHT}, MOUSE_CENTER_X, 0.3)
    assert game.scene.player.dir.x == pytest.approx(original.x, abs=1e-9)
    assert game.scene.player.dir.y == pytest.approx(original.y, abs=1e-9)


def test_tick_mouse_rotation_matches_rotate_player():
    game = _game()
    expected = replace(game.scene.player)
    rotate_player(expected, mouse_rotation_angle(MOUSE_CENTER_X + 10), 0.05)
    game.tick(set(), MOUSE_CENTER_X + 10, 0.05)
    assert game.scene.player.dir.x == pytest.approx(expected.dir.x)
    assert game.scene.player.dir.y == pytest.approx(expected.dir.y)
    assert game.scene.player.plane.x == pytest.approx(expected.plane.x)


def test_tick_draws_frame():
    game = _game()
    game.tick(set(), MOUSE_CENTER_X, 0.0)
    image = game.image
    assert image.get_pixel(0, 0) == MAP_W_COLOR
    assert image.get_pixel(63, 0) == CEILING
    assert image.get_pixel(63, 47) == FLOOR_COLOR


def test_tick_blocked_by_wall():
    game = _game()
    for _ in range(10):
        game.tick({Key.W}, MOUSE_CENTER_X, 0.1)
    pos = game.scene.player.pos
    assert GRID[int(pos.y)][int(pos.x)] == "0"
    assert pos.y >= 1.0