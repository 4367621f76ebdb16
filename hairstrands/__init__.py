"""Hair strand loading, vector math, particle arrays, line-strip meshes and camera matrices."""

__version__ = "0.1.0"