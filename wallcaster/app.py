"""Window, texture loading and the main game loop."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

import numpy as np
import pygame

from .keys import ExitRequested, Key, key_press, key_release
from .render import new_framebuffer, render_frame
from .world import TEXTURE_NAMES, WIN_HEIGHT, WIN_WIDTH, GameState, Texture, new_state

TEXTURE_EXTENSIONS = (".xpm", ".png", ".bmp")
WINDOW_TITLE = "wallcaster"

_KEYSYMS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


def load_texture(path: str | Path) -> Texture:
    """Load an image file into a Texture of 0xRRGGBB colours."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"texture not found: {path}")
    try:
        surface = pygame.image.load(str(path))
        rgb = pygame.surfarray.array3d(surface).astype(np.uint32)
    except pygame.error as exc:
        raise ValueError(f"cannot load texture {path}: {exc}") from exc
    packed = (rgb[..., 0] << 16) | (rgb[..., 1] << 8) | rgb[..., 2]
    return Texture(packed.T)


def _find_texture(directory: Path, name: str) -> Path:
    for extension in TEXTURE_EXTENSIONS:
        candidate = directory / f"{name}{extension}"
        if candidate.is_file():
            return candidate
    raise FileNotFoundError(f"no {name} texture in {directory}")


def load_textures(directory: str | Path) -> dict[str, Texture]:
    """Load the north, south, east and west wall textures from a directory."""
    directory = Path(directory)
    return {name: load_texture(_find_texture(directory, name)) for name in TEXTURE_NAMES}


def _present(screen: pygame.Surface, buffer: np.ndarray) -> None:
    frame = buffer.T
    rgb = np.empty((WIN_WIDTH, WIN_HEIGHT, 3), dtype=np.uint8)
    rgb[..., 0] = (frame >> 16) & 0xFF
    rgb[..., 1] = (frame >> 8) & 0xFF
    rgb[..., 2] = frame & 0xFF
    pygame.surfarray.blit_array(screen, rgb)
    pygame.display.flip()


def _handle_event(state: GameState, event: pygame.event.Event) -> bool:
    """Dispatch one event; return False when the window was closed."""
    if event.type == pygame.QUIT:
        return False
    if event.type in (pygame.KEYDOWN, pygame.KEYUP):
        keysym = _KEYSYMS.get(event.key)
        if keysym is not None:
            if event.type == pygame.KEYDOWN:
                key_press(state, keysym)
            else:
                key_release(state, keysym)
    return True


def run(state: GameState) -> int:
    """Open the window and run the game loop until exit; return the exit code."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        buffer = new_framebuffer()
        while True:
            for event in pygame.event.get():
                if not _handle_event(state, event):
                    return 0
            if not render_frame(state, buffer):
                return 0
            _present(screen, buffer)
    except ExitRequested:
        return 0
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="wallcaster", description="Textured ray-casting maze.")
    parser.add_argument(
        "--textures",
        default=".",
        help="directory holding north, south, east and west textures",
    )
    args = parser.parse_args(argv)
    try:
        state = new_state(load_textures(args.textures))
        return run(state)
    except (FileNotFoundError, ValueError, pygame.error) as exc:
        print(f"Fatal error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())