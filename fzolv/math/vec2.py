"""Generic 2D vector over a numeric element type."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Protocol, TypeVar

import numpy as np

from fzolv.numeric import ceil_value, coerce, divide, floor_value, is_integral, is_numeric_value, round_half_away

from .base import NumericVector, T

logger = logging.getLogger(__name__)


class SupportsXY(Protocol):
    x: Any
    y: Any


U = TypeVar("U", bound=SupportsXY)


def _clamp_axis(value, low, high):
    return high if value > high else (low if value < low else value)


@dataclass
class Vector2(NumericVector[T]):
    """2D vector with mutable ``x`` and ``y`` components.

    Subscript the class to fix the element type (``Vector2[float]``,
    ``Vector2[int]``); the bare class keeps whatever numeric values it is given.
    Arithmetic operators return new vectors, the in-place operators and the
    mutators (``set``, ``normalize``, ``floor``, ``ceil``, ``round``) modify the
    vector and return it so calls can be chained.
    """

    x: T = 0
    y: T = 0

    _components = ("x", "y")

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0, 0)

    @classmethod
    def one(cls) -> "Vector2":
        return cls(1, 1)

    @classmethod
    def unit_x(cls) -> "Vector2":
        return cls(1, 0)

    @classmethod
    def unit_y(cls) -> "Vector2":
        return cls(0, 1)

    @classmethod
    def from_iterable(cls, values: Iterable) -> "Vector2":
        values = tuple(values)
        if len(values) != 2:
            raise ValueError(f"Expected 2 components, got {len(values)}.")
        return cls(*values)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Vector2":
        return cls.from_iterable(np.asarray(array).ravel().tolist())

    def set(self, x: T, y: T) -> "Vector2":
        self.x = x
        self.y = y
        return self

    def length_squared(self) -> T:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vector2":
        """Scale to unit length in place.

        A zero-length vector is left unchanged. Integral vectors truncate each
        component after the division, so most of them collapse toward zero.
        """
        length = self.length()
        if length == 0:
            logger.debug("normalize() on a zero-length vector, leaving it unchanged")
            return self
        self.x = self.x / length
        self.y = self.y / length
        return self

    def dot(self, other: "Vector2") -> T:
        """Dot product, ``|a| * |b| * cos(theta)``. Commutative."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> T:
        """Scalar 2D cross product, ``|a| * |b| * sin(theta)``.

        Positive when ``other`` lies counter-clockwise of this vector. Its
        absolute value is the area of the parallelogram the two span.
        Anti-commutative: ``a.cross(b) == -b.cross(a)``.
        """
        return self.x * other.y - self.y * other.x

    def distance_to_squared(self, other: "Vector2") -> T:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance_to(self, other: "Vector2") -> float:
        return math.sqrt(self.distance_to_squared(other))

    @classmethod
    def lerp(cls, start: "Vector2", end: "Vector2", amount: float) -> "Vector2":
        """Linear interpolation ``start + (end - start) * amount``, in float.

        ``amount`` is not clamped; values outside ``[0, 1]`` extrapolate.
        Integral classes return a ``Vector2[float]`` so the fractional part
        survives. That result never compares equal to a ``Vector2[int]``, so
        compare integral endpoints through ``to_tuple()``.
        """
        amount = float(amount)
        x = float(start.x) + (float(end.x) - float(start.x)) * amount
        y = float(start.y) + (float(end.y) - float(start.y)) * amount
        target = Vector2[float] if is_integral(cls.element_type) else cls
        return target(x, y)

    @staticmethod
    def clamp(value: U, low: U, high: U) -> U:
        """Clamp each component of ``value`` to ``[low, high]``.

        Works on anything with ``x`` and ``y`` attributes whose type can be
        rebuilt as ``type(value)(x, y)``. Bounds are not validated; the upper
        bound is tested first, so with ``low > high`` the result is still a
        vector but its components may come from either bound.
        """
        return type(value)(
            _clamp_axis(value.x, low.x, high.x),
            _clamp_axis(value.y, low.y, high.y),
        )

    # Rounding keeps the element type: floor(1.5) is 1.0 on a float vector.
    def floor(self) -> "Vector2":
        self.x = floor_value(self.x)
        self.y = floor_value(self.y)
        return self

    def ceil(self) -> "Vector2":
        self.x = ceil_value(self.x)
        self.y = ceil_value(self.y)
        return self

    def round(self) -> "Vector2":
        """Round each component to the nearest integer, ties away from zero.

        ``(1.5, 2.5)`` becomes ``(2.0, 3.0)`` and ``(-2.5, 0.4)`` becomes
        ``(-3.0, 0.0)``. This differs from the built-in ``round``, which sends
        ties to the even neighbour.
        """
        self.x = round_half_away(self.x)
        self.y = round_half_away(self.y)
        return self

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return type(self)(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return type(self)(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: T) -> "Vector2":
        if not is_numeric_value(scalar):
            return NotImplemented
        scalar = coerce(self.element_type, scalar)
        return type(self)(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: T) -> "Vector2":
        if not is_numeric_value(scalar):
            return NotImplemented
        scalar = coerce(self.element_type, scalar)
        return type(self)(divide(self.x, scalar), divide(self.y, scalar))

    def __iadd__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.set(self.x + other.x, self.y + other.y)

    def __isub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.set(self.x - other.x, self.y - other.y)

    def __imul__(self, scalar: T) -> "Vector2":
        if not is_numeric_value(scalar):
            return NotImplemented
        scalar = coerce(self.element_type, scalar)
        return self.set(self.x * scalar, self.y * scalar)

    def __itruediv__(self, scalar: T) -> "Vector2":
        if not is_numeric_value(scalar):
            return NotImplemented
        scalar = coerce(self.element_type, scalar)
        return self.set(divide(self.x, scalar), divide(self.y, scalar))

    def __iter__(self) -> Iterator[T]:
        yield self.x
        yield self.y

    def to_tuple(self) -> tuple[T, T]:
        return (self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array(self.to_tuple(), dtype=self.element_type)


Vector2f = Vector2[float]
Vector2i = Vector2[int]
