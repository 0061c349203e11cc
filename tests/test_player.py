import math

import pytest

from cubcaster.geometry import PI, SPEED, TILE
from cubcaster.player import PlayerState

GRID = ("11111", "10001", "10N01", "10001", "11111")
CENTER = 2.5 * TILE


@pytest.mark.parametrize(
    "direction, angle",
    [("E", 0.0), ("S", 0.5 * PI), ("W", PI), ("N", 1.5 * PI)],
)
def test_from_spawn_angles(direction, angle):
    player = PlayerState.from_spawn(10.0, 20.0, direction)
    assert player.angle == pytest.approx(angle)
    assert (player.x, player.y) == (10.0, 20.0)
    assert math.hypot(player.dx, player.dy) == pytest.approx(SPEED)


def test_from_spawn_east_step():
    player = PlayerState.from_spawn(0.0, 0.0, "E")
    assert player.dx == pytest.approx(SPEED)
    assert player.dy == pytest.approx(0.0)


def test_from_spawn_rejects_unknown():
    with pytest.raises(ValueError):
        PlayerState.from_spawn(0.0, 0.0, "X")


def test_rotate_left_then_right_restores_heading():
    player = PlayerState.from_spawn(CENTER, CENTER, "S")
    start = (player.angle, player.dx, player.dy)
    player.rotate("L")
    assert player.angle < start[0]
    player.rotate("R")
    assert player.angle == pytest.approx(start[0])
    assert player.dx == pytest.approx(start[1])
    assert player.dy == pytest.approx(start[2])


def test_rotate_left_wraps_below_zero():
    player = PlayerState.from_spawn(CENTER, CENTER, "E")
    player.rotate("L")
    assert 0 <= player.angle <= 2 * PI
    assert math.hypot(player.dx, player.dy) == pytest.approx(SPEED)


def test_rotate_rejects_unknown():
    with pytest.raises(ValueError):
        PlayerState.from_spawn(CENTER, CENTER, "E").rotate("U")


def test_move_forward_in_open_space():
    player = PlayerState.from_spawn(CENTER, CENTER, "E")
    assert player.move(GRID, "U") is True
    assert player.x == pytest.approx(CENTER + SPEED)
    assert player.y == pytest.approx(CENTER)


def test_move_forward_then_back_returns():
    player = PlayerState.from_spawn(CENTER, CENTER, "E")
    player.move(GRID, "U")
    player.move(GRID, "D")
    assert (player.x, player.y) == pytest.approx((CENTER, CENTER))


def test_move_blocked_by_wall():
    start_x = 4 * TILE - 26
    player = PlayerState.from_spawn(start_x, CENTER, "E")
    assert player.move(GRID, "U") is False
    assert (player.x, player.y) == (start_x, CENTER)


def test_move_rejects_unknown():
    with pytest.raises(ValueError):
        PlayerState.from_spawn(CENTER, CENTER, "E").move(GRID, "X")