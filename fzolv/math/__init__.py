"""Numeric vector types."""

from .base import NumericVector
from .vec2 import SupportsXY, Vector2, Vector2f, Vector2i
from .vec3 import Vector3, Vector3f, Vector3i

__all__ = [
    "NumericVector",
    "SupportsXY",
    "Vector2",
    "Vector2f",
    "Vector2i",
    "Vector3",
    "Vector3f",
    "Vector3i",
]
