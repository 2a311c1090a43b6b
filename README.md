# wallcaster

A compact raycasting engine. It shows a first-person view of a small grid
world with textured walls, a flat-coloured ceiling (blue) and a flat-coloured
floor (red). You walk and turn with the keyboard. The loop aims for one frame
every 17 ms, which is about 60 frames per second. The view is only redrawn
after the player has moved or turned.

## Installation

```
pip install .
```

To run the tests as well, install the test extra:

```
pip install ".[test]"
pytest
```

## Running

```
wallcaster
wallcaster --textures path/to/textures
```

Before it opens the 1280×720 window, the program loads four wall textures
named `north`, `south`, `east` and `west`. It looks for them in the directory
given by `--textures`, or in the current directory when the option is left
out. For each name it tries the extensions `.xpm`, `.png` and `.bmp` in that
order. When a texture is missing or cannot be loaded, the program prints
`Fatal error: ...` to standard error and exits with status 1.

Texture rows are wrapped with a bit mask, so a texture should have a height
that is a power of two.

### Controls

| Key         | Action        |
|-------------|---------------|
| W           | move forward  |
| S           | move back     |
| A           | strafe left   |
| D           | strafe right  |
| Left arrow  | turn left     |
| Right arrow | turn right    |
| Escape      | quit          |

Each frame moves the player 0.05 map units and turns them 2.5 degrees. When
two opposing keys are held down, they cancel each other out. Before a move is
made, the position and two diagonal corners 0.1 units away from it are
checked, and the player cannot step into a wall. Closing the window also
quits.

## Using it as a library

The modules below can be used without opening a window:

- `wallcaster.world` holds the game state. It defines `Texture`, a 2-D array
  of `0xRRGGBB` colours with `width`, `height` and `pixel(x, y)`. It also
  defines `Player`, whose `set_angle(angle)` updates the look vector, and
  `Movement`, `Ray` and `GameState`. The functions are `default_map()`,
  `new_state(textures)` and `time_ms()`. `new_state` raises `ValueError`
  when one of the four textures is missing.
- `wallcaster.motion` handles turning, walking and collision checks through
  `add_angle`, `is_free`, `rotate`, `move_forward_back`, `strafe` and
  `update_player`.
- `wallcaster.keys` maps key codes onto movement flags. It provides the
  `Key` enum (X11 keysym values), `key_press`, `key_release` and
  `ExitRequested`. A press of Escape raises `ExitRequested`, and a release of
  Escape sets `Movement.exit`.
- `wallcaster.raycast` sets up the camera and casts one ray per screen
  column with DDA. Its functions are `prepare_camera`, `set_column`,
  `init_steps`, `dda`, `line_height`, `cast_column` and `wall_direction`.
  `dda` raises `IndexError` when a ray leaves the map without hitting a
  wall.
- `wallcaster.render` fills a 720×1280 `numpy` framebuffer through
  `new_framebuffer`, `choose_texture`, `texture_x`, `draw_column` and
  `render_frame`. `render_frame` returns `False` once an exit has been
  requested.
- `wallcaster.app` loads textures and runs the window loop with pygame,
  through `load_texture`, `load_textures`, `run` and `main`.

## What it does not do

The map is fixed and built in (see `default_map()`). No map or scene files
are read. The ceiling and floor colours and the player's starting position
and heading are fixed too. The world has no sprites, doors, enemies or
minimap.