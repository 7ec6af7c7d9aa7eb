"""Vector, matrix and quaternion math, meshes, PPM images and a lit scene model."""

__version__ = "0.1.0"

__all__ = ["geometry", "matrix4", "ppm", "quat", "rigtform", "scene", "vec", "viewport"]