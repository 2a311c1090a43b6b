"""Keyboard handling: key presses and releases update movement flags."""

from __future__ import annotations

from enum import IntEnum

from .world import GameState


class Key(IntEnum):
    """Key codes understood by the game (X11 keysym values)."""

    ESCAPE = 65307
    W = 119
    A = 97
    S = 115
    D = 100
    LEFT = 65361
    RIGHT = 65363


class ExitRequested(Exception):
    """Raised when the player presses Escape."""


_FLAGS = {
    Key.W: "forward",
    Key.A: "left",
    Key.S: "back",
    Key.D: "right",
    Key.LEFT: "look_left",
    Key.RIGHT: "look_right",
}


def key_press(state: GameState, key: int) -> None:
    """Handle a key going down; Escape raises ExitRequested."""
    if key == Key.ESCAPE:
        raise ExitRequested()
    flag = _FLAGS.get(key)
    if flag is not None:
        setattr(state.movement, flag, True)


def key_release(state: GameState, key: int) -> None:
    """Handle a key going up; releasing Escape asks the loop to stop."""
    if key == Key.ESCAPE:
        state.movement.exit = True
        return
    flag = _FLAGS.get(key)
    if flag is not None:
        setattr(state.movement, flag, False)