"""Player rotation, movement and collision checks."""

from __future__ import annotations

from typing import Sequence

from .world import GameState

MOVE_STEP = 0.05
TURN_STEP = 2.5
COLLISION_MARGIN = 0.1
WALL = "1"


def add_angle(angle: float, delta: float) -> float:
    """Add delta degrees to angle, wrapping once into [0, 360)."""
    angle += delta
    if angle >= 360.0:
        angle -= 360.0
    elif angle < 0.0:
        angle += 360.0
    return angle


def is_free(grid: Sequence[str], x: float, y: float) -> bool:
    """True when the position and its diagonal margin corners are not walls."""
    probes = (
        (x - COLLISION_MARGIN, y - COLLISION_MARGIN),
        (x + COLLISION_MARGIN, y + COLLISION_MARGIN),
        (x, y),
    )
    return all(grid[int(px)][int(py)] != WALL for px, py in probes)


def rotate(state: GameState) -> None:
    """Turn the player according to the look flags."""
    mov = state.movement
    player = state.player
    if mov.look_left:
        mov.dirty = True
        player.set_angle(add_angle(player.angle, -TURN_STEP))
    if mov.look_right:
        mov.dirty = True
        player.set_angle(add_angle(player.angle, TURN_STEP))


def _try_move(state: GameState, dx: float, dy: float) -> None:
    state.movement.dirty = True
    player = state.player
    x, y = player.x + dx, player.y + dy
    if is_free(state.grid, x, y):
        player.x, player.y = x, y


def move_forward_back(state: GameState) -> None:
    """Step along the look vector; opposing keys cancel out."""
    mov = state.movement
    player = state.player
    dx, dy = player.look_x * MOVE_STEP, player.look_y * MOVE_STEP
    if mov.forward and not mov.back:
        _try_move(state, dx, dy)
    if mov.back and not mov.forward:
        _try_move(state, -dx, -dy)


def strafe(state: GameState) -> None:
    """Step along the camera plane; opposing keys cancel out."""
    mov = state.movement
    ray = state.ray
    dx, dy = ray.plane_x * MOVE_STEP, ray.plane_y * MOVE_STEP
    if mov.left and not mov.right:
        _try_move(state, -dx, -dy)
    if mov.right and not mov.left:
        _try_move(state, dx, dy)


def update_player(state: GameState) -> None:
    """Apply rotation, then forward/back, then sideways movement."""
    rotate(state)
    move_forward_back(state)
    strafe(state)