"""Camera setup and DDA ray casting against the map grid."""

from __future__ import annotations

from typing import Sequence

from .world import WIN_HEIGHT, WIN_WIDTH, GameState, Ray

PLANE_SCALE = 0.66
WALL = "1"
ZERO_GUARD = 1e-30


def wall_direction(side: int, step_x: int, step_y: int) -> int:
    """Classify the wall face that was hit: 0..3 by side and step sign."""
    if side == 0:
        return 0 if step_x > 0 else 1
    return 2 if step_y > 0 else 3


def prepare_camera(state: GameState) -> None:
    """Copy the player's position and heading into the ray's camera."""
    ray = state.ray
    player = state.player
    ray.dir_x = player.look_x
    ray.dir_y = player.look_y
    ray.pos_x = player.x
    ray.pos_y = player.y
    ray.plane_x = ray.dir_y * PLANE_SCALE
    ray.plane_y = -ray.dir_x * PLANE_SCALE


def set_column(ray: Ray, x: int) -> None:
    """Aim the ray through screen column x and reset its map cell."""
    ray.camera_x = (2 * x / WIN_WIDTH - 1) * (WIN_WIDTH / WIN_HEIGHT)
    ray.ray_dir_x = ray.dir_x + ray.plane_x * ray.camera_x
    ray.ray_dir_y = ray.dir_y + ray.plane_y * ray.camera_x
    ray.map_x = int(ray.pos_x)
    ray.map_y = int(ray.pos_y)
    ray.hit = False
    ray.delta_dist_x = abs(1 / (ray.ray_dir_x + (ray.ray_dir_x == 0) * ZERO_GUARD))
    ray.delta_dist_y = abs(1 / (ray.ray_dir_y + (ray.ray_dir_y == 0) * ZERO_GUARD))


def init_steps(ray: Ray) -> None:
    """Set step directions and the distance to the first grid lines."""
    if ray.ray_dir_x < 0:
        ray.step_x = -1
        ray.side_dist_x = (ray.pos_x - ray.map_x) * ray.delta_dist_x
    else:
        ray.step_x = 1
        ray.side_dist_x = (ray.map_x + 1.0 - ray.pos_x) * ray.delta_dist_x
    if ray.ray_dir_y < 0:
        ray.step_y = -1
        ray.side_dist_y = (ray.pos_y - ray.map_y) * ray.delta_dist_y
    else:
        ray.step_y = 1
        ray.side_dist_y = (ray.map_y + 1.0 - ray.pos_y) * ray.delta_dist_y


def dda(ray: Ray, grid: Sequence[str]) -> None:
    """Walk the grid cell by cell until a wall is hit.

    Raises IndexError if the ray leaves the map without meeting a wall.
    """
    while not ray.hit:
        if ray.side_dist_x < ray.side_dist_y:
            ray.side_dist_x += ray.delta_dist_x
            ray.map_x += ray.step_x
            ray.side = 0
        else:
            ray.side_dist_y += ray.delta_dist_y
            ray.map_y += ray.step_y
            ray.side = 1
        if not (0 <= ray.map_x < len(grid) and 0 <= ray.map_y < len(grid[ray.map_x])):
            raise IndexError(f"ray left the map at ({ray.map_x}, {ray.map_y})")
        if grid[ray.map_x][ray.map_y] == WALL:
            ray.hit = True


def line_height(ray: Ray) -> None:
    """Compute the wall distance, on-screen slice and wall orientation."""
    if ray.side == 0:
        ray.perp_wall_dist = ray.side_dist_x - ray.delta_dist_x
    else:
        ray.perp_wall_dist = ray.side_dist_y - ray.delta_dist_y
    ray.line_height = int(WIN_HEIGHT / ray.perp_wall_dist)
    half = WIN_HEIGHT >> 1
    ray.draw_start = max(0, -(ray.line_height >> 1) + half)
    ray.draw_end = min(WIN_HEIGHT - 1, (ray.line_height >> 1) + half)
    ray.orientation = wall_direction(ray.side, ray.step_x, ray.step_y)


def cast_column(ray: Ray, grid: Sequence[str], x: int) -> None:
    """Cast the ray for screen column x and fill in the hit data."""
    set_column(ray, x)
    init_steps(ray)
    dda(ray, grid)
    line_height(ray)