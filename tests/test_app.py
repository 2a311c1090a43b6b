from pathlib import Path

import numpy as np
import pygame
import pytest

from wallcaster.app import load_texture, load_textures, main, run
from wallcaster.world import TEXTURE_NAMES, Texture, new_state

COLOURS = {
    (0, 0): 0x123456,
    (1, 0): 0xFF0000,
    (2, 0): 0x00FF00,
    (3, 0): 0x0000FF,
    (0, 1): 0xFFFFFF,
    (1, 1): 0x000000,
    (2, 1): 0xABCDEF,
    (3, 1): 0x010203,
}


def _write_bmp(path: Path) -> Path:
    surface = pygame.Surface((4, 2))
    for (x, y), colour in COLOURS.items():
        surface.set_at((x, y), ((colour >> 16) & 0xFF, (colour >> 8) & 0xFF, colour & 0xFF))
    pygame.image.save(surface, str(path))
    return path


@pytest.fixture
def texture_dir(tmp_path):
    for name in TEXTURE_NAMES:
        _write_bmp(tmp_path / f"{name}.bmp")
    return tmp_path


def test_load_texture_round_trip(tmp_path):
    texture = load_texture(_write_bmp(tmp_path / "wall.bmp"))
    assert texture.width == 4
    assert texture.height == 2
    for (x, y), colour in COLOURS.items():
        assert texture.pixel(x, y) == colour


def test_load_texture_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_texture(tmp_path / "absent.bmp")


def test_load_texture_rejects_garbage(tmp_path):
    bad = tmp_path / "bad.bmp"
    bad.write_bytes(b"this is not an image")
    with pytest.raises(ValueError):
        load_texture(bad)


def test_load_textures_all_four(texture_dir):
    textures = load_textures(texture_dir)
    assert sorted(textures) == sorted(TEXTURE_NAMES)
    for texture in textures.values():
        assert texture.pixel(2, 1) == COLOURS[(2, 1)]


def test_load_textures_missing_one(texture_dir):
    (texture_dir / "west.bmp").unlink()
    with pytest.raises(FileNotFoundError):
        load_textures(texture_dir)


def test_main_fails_without_textures(tmp_path):
    assert main(["--textures", str(tmp_path)]) == 1


def test_run_stops_when_exit_requested(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    plain = Texture(np.zeros((2, 2), dtype=np.uint32))
    state = new_state({name: plain for name in TEXTURE_NAMES})
    state.movement.exit = True
    assert run(state) == 0
    assert state.movement.exit_main is True