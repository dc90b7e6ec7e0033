"""Small generic vector-math utilities."""

from .math import Vector2, Vector2f, Vector2i, Vector3, Vector3f, Vector3i
from .numeric import NonNumericTypeError, is_numeric

__all__ = [
    "NonNumericTypeError",
    "Vector2",
    "Vector2f",
    "Vector2i",
    "Vector3",
    "Vector3f",
    "Vector3i",
    "is_numeric",
]

__version__ = "0.1.0"
