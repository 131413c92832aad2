"""Game-engine core: vector and matrix maths, animation curves, sorting, events, configuration and asset loading."""

__version__ = "0.1.0"

__all__ = [
    "vector",
    "mat3",
    "mat4",
    "portable",
    "curves",
    "sort",
    "events",
    "config",
    "assets",
]