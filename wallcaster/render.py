"""Texture selection, column drawing and whole-frame rendering."""

from __future__ import annotations

import math
import time

import numpy as np

from .motion import update_player
from .raycast import cast_column, prepare_camera
from .world import FRAME_MS, WIN_HEIGHT, WIN_WIDTH, GameState, Ray, Texture, time_ms

_ORIENTATION_TEXTURES = {1: "south", 2: "west", 3: "east"}


def new_framebuffer() -> np.ndarray:
    """Return a black (height, width) frame of 0xRRGGBB colours."""
    return np.zeros((WIN_HEIGHT, WIN_WIDTH), dtype=np.uint32)


def choose_texture(state: GameState, orientation: int) -> Texture:
    """Pick the wall texture for an orientation; north is the default."""
    return state.textures[_ORIENTATION_TEXTURES.get(orientation, "north")]


def texture_x(ray: Ray, texture: Texture) -> int:
    """Compute where the ray hit the wall and the texture column to sample."""
    if ray.side == 0:
        wall_x = ray.pos_y + ray.perp_wall_dist * ray.ray_dir_y
    else:
        wall_x = ray.pos_x + ray.perp_wall_dist * ray.ray_dir_x
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * float(texture.width))
    if (ray.side == 0 and ray.ray_dir_x > 0) or (ray.side == 1 and ray.ray_dir_y < 0):
        tex_x = texture.width - tex_x - 1
    ray.wall_x = wall_x
    ray.tex_x = tex_x
    return tex_x


def draw_column(
    buffer: np.ndarray,
    x: int,
    ray: Ray,
    texture: Texture,
    ceiling: int,
    floor: int,
) -> None:
    """Paint screen column x: ceiling, textured wall slice, then floor."""
    tex_x = texture_x(ray, texture)
    step = texture.height / ray.line_height
    tex_pos = (ray.draw_start - (WIN_HEIGHT >> 1) + (ray.line_height >> 1)) * step

    column = np.empty(WIN_HEIGHT, dtype=np.uint32)
    column[: ray.draw_start] = ceiling
    column[ray.draw_end + 1 :] = floor

    count = ray.draw_end - ray.draw_start + 1
    if count > 0:
        positions = np.cumsum(
            np.concatenate(([tex_pos], np.full(count, step, dtype=np.float64)))
        )[1:]
        rows = positions.astype(np.int64) & (texture.height - 1)
        column[ray.draw_start : ray.draw_end + 1] = texture.pixels[rows, tex_x]
    buffer[:, x] = column


def _wait_for_frame(state: GameState) -> None:
    remaining = state.next_frame - time_ms()
    if remaining > 0:
        time.sleep(remaining / 1000.0)
    state.next_frame += FRAME_MS


def render_frame(state: GameState, buffer: np.ndarray) -> bool:
    """Advance one frame and redraw the buffer if anything changed.

    Returns False once an exit has been requested, True otherwise.
    """
    mov = state.movement
    if mov.exit:
        mov.exit_main = True
        return False
    _wait_for_frame(state)
    update_player(state)
    prepare_camera(state)
    if mov.dirty:
        ray = state.ray
        for x in range(WIN_WIDTH):
            cast_column(ray, state.grid, x)
            texture = choose_texture(state, ray.orientation)
            draw_column(buffer, x, ray, texture, state.ceiling, state.floor)
    mov.dirty = False
    return True