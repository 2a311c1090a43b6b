"""A grid-based raycasting engine with textured walls and a pygame window."""

__version__ = "0.1.0"
__all__ = ["app", "keys", "motion", "raycast", "render", "world"]