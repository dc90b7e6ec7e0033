"""3D vector placeholder.

Only construction, copy and move are defined. The element type is
constrained the same way as ``Vector2``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .base import NumericVector, T


@dataclass
class Vector3(NumericVector[T]):
    x: T = 0
    y: T = 0
    z: T = 0

    _components = ("x", "y", "z")


Vector3f = Vector3[float]
Vector3i = Vector3[int]
