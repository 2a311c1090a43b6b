"""Game state: map, player, input flags, ray scratch data and textures."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from typing import Mapping

import numpy as np

WIN_WIDTH = 1280
WIN_HEIGHT = 720
FRAME_MS = 17.0

DEFAULT_CEILING = 0x0000FF
DEFAULT_FLOOR = 0xFF0000

TEXTURE_NAMES = ("north", "south", "east", "west")

START_X = 4.5
START_Y = 3.5
START_ANGLE = 300.0


@dataclass
class Texture:
    """A wall texture stored as a (height, width) array of 0xRRGGBB colours."""

    pixels: np.ndarray

    def __post_init__(self) -> None:
        self.pixels = np.asarray(self.pixels, dtype=np.uint32)
        if self.pixels.ndim != 2 or 0 in self.pixels.shape:
            raise ValueError("texture pixels must be a non-empty 2-D array")

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column x, row y."""
        return int(self.pixels[y, x])


@dataclass
class Player:
    """Player position (map units) and viewing direction."""

    x: float = START_X
    y: float = START_Y
    angle: float = START_ANGLE
    look_x: float = 0.0
    look_y: float = 1.0

    def __post_init__(self) -> None:
        self.set_angle(self.angle)

    def set_angle(self, angle: float) -> None:
        """Set the heading in degrees and refresh the look vector."""
        self.angle = angle
        radians = math.radians(angle)
        self.look_y = math.cos(radians)
        self.look_x = math.sin(radians)


@dataclass
class Movement:
    """Input flags; ``dirty`` marks that the frame needs redrawing."""

    forward: bool = False
    back: bool = False
    left: bool = False
    right: bool = False
    look_left: bool = False
    look_right: bool = False
    dirty: bool = True
    exit: bool = False
    exit_main: bool = False


@dataclass
class Ray:
    """Camera and per-column ray state used by the caster."""

    dir_x: float = 0.0
    dir_y: float = 0.0
    pos_x: float = 0.0
    pos_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    camera_x: float = 0.0
    ray_dir_x: float = 0.0
    ray_dir_y: float = 0.0
    map_x: int = 0
    map_y: int = 0
    side_dist_x: float = 0.0
    side_dist_y: float = 0.0
    delta_dist_x: float = 0.0
    delta_dist_y: float = 0.0
    perp_wall_dist: float = 0.0
    step_x: int = 0
    step_y: int = 0
    hit: bool = False
    side: int = 0
    line_height: int = 0
    draw_start: int = 0
    draw_end: int = 0
    orientation: int = 0
    tex_x: int = 0
    wall_x: float = 0.0


@dataclass
class GameState:
    """Everything the game loop reads and updates."""

    grid: list[str]
    textures: dict[str, Texture]
    player: Player = field(default_factory=Player)
    movement: Movement = field(default_factory=Movement)
    ray: Ray = field(default_factory=Ray)
    ceiling: int = DEFAULT_CEILING
    floor: int = DEFAULT_FLOOR
    next_frame: float = 0.0


def default_map() -> list[str]:
    """Return the built-in map; rows are indexed by x, columns by y."""
    return [
        "1111111",
        "1010101",
        "1000001",
        "1000001",
        "100N001",
        "1111111",
    ]


def time_ms() -> float:
    """Wall-clock time in milliseconds."""
    return time.time() * 1000.0


def new_state(textures: Mapping[str, Texture]) -> GameState:
    """Build the starting state with the four wall textures."""
    missing = [name for name in TEXTURE_NAMES if name not in textures]
    if missing:
        raise ValueError(f"missing textures: {', '.join(missing)}")
    return GameState(
        grid=default_map(),
        textures={name: textures[name] for name in TEXTURE_NAMES},
        player=Player(START_X, START_Y, START_ANGLE),
        next_frame=time_ms() + FRAME_MS,
    )