import math

import numpy as np
import pytest

from wallcaster.world import (
    DEFAULT_CEILING,
    DEFAULT_FLOOR,
    FRAME_MS,
    Movement,
    Player,
    Ray,
    Texture,
    default_map,
    new_state,
    time_ms,
)


def _textures():
    tex = Texture(np.arange(12, dtype=np.uint32).reshape(3, 4))
    return {"north": tex, "south": tex, "east": tex, "west": tex}


def test_default_map_rows():
    grid = default_map()
    assert grid[0] == "1111111"
    assert grid[4] == "100N001"
    assert len(grid) == 6


def test_default_map_is_fresh_copy():
    a = default_map()
    a.append("x")
    assert len(default_map()) == 6


def test_texture_dimensions_and_pixel():
    tex = Texture(np.arange(12).reshape(3, 4))
    assert tex.width == 4
    assert tex.height == 3
    assert tex.pixel(1, 2) == int(tex.pixels[2, 1])


def test_texture_rejects_non_2d():
    with pytest.raises(ValueError):
        Texture(np.zeros(5))


def test_player_look_is_unit_vector():
    player = Player()
    player.set_angle(123.0)
    assert player.angle == 123.0
    assert math.hypot(player.look_x, player.look_y) == pytest.approx(1.0)


def test_player_angle_zero_looks_along_y():
    player = Player()
    player.set_angle(0.0)
    assert player.look_y == pytest.approx(1.0)
    assert player.look_x == pytest.approx(0.0)


def test_movement_defaults():
    mov = Movement()
    assert mov.dirty is True
    assert not any([mov.forward, mov.back, mov.left, mov.right,
                    mov.look_left, mov.look_right, mov.exit, mov.exit_main])


def test_ray_defaults_have_no_hit():
    ray = Ray()
    assert ray.hit is False
    assert ray.side == 0


def test_new_state_starting_values():
    before = time_ms()
    state = new_state(_textures())
    after = time_ms()
    assert state.player.x == 4.5
    assert state.player.y == 3.5
    assert state.player.angle == 300
    assert state.ceiling == DEFAULT_CEILING == 0x0000FF
    assert state.floor == DEFAULT_FLOOR == 0xFF0000
    assert before <= state.next_frame - FRAME_MS <= after
    assert state.grid == default_map()
    assert set(state.textures) == {"north", "south", "east", "west"}


def test_new_state_missing_texture():
    textures = _textures()
    del textures["west"]
    with pytest.raises(ValueError):
        new_state(textures)


def test_time_ms_advances():
    first = time_ms()
    second = time_ms()
    assert second >= first