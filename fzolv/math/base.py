"""Shared machinery for the numeric vector types.

A vector class is specialized for an element type by subscripting it, the
same way a template is instantiated::

    Vector2[float](1.5, 2.0)
    Vector2[numpy.int32](3, 4)

The specialization is a cached subclass whose ``element_type`` converts every
component on assignment. Subscripting with a non-numeric type raises
``NonNumericTypeError`` before an instance can exist.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, ClassVar, Generic, TypeVar

from fzolv.numeric import NonNumericTypeError, coerce, is_numeric_value, require_numeric_type

logger = logging.getLogger(__name__)

T = TypeVar("T", int, float)
V = TypeVar("V", bound="NumericVector")


@lru_cache(maxsize=None)
def _specialize(base: type, element_type: type) -> type:
    name = f"{base.__name__}[{element_type.__name__}]"
    logger.debug("Specializing %s", name)
    return type(
        name,
        (base,),
        {
            "element_type": element_type,
            "__module__": base.__module__,
            "__qualname__": name,
        },
    )


class NumericVector(Generic[T]):
    """Base for fixed-size vectors whose components are numeric scalars."""

    element_type: ClassVar[type | None] = None
    _components: ClassVar[tuple[str, ...]] = ()

    def __class_getitem__(cls, item: Any):
        if isinstance(item, TypeVar):
            return super().__class_getitem__(item)
        if cls.element_type is not None:
            raise TypeError(f"{cls.__qualname__} is already specialized.")
        return _specialize(cls, require_numeric_type(item))

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._components:
            value = self._coerce(name, value)
        object.__setattr__(self, name, value)

    @classmethod
    def _coerce(cls, name: str, value: Any) -> Any:
        if not is_numeric_value(value):
            raise NonNumericTypeError(
                f"{cls.__qualname__}.{name} must be numeric, got {type(value).__name__}."
            )
        return coerce(cls.element_type, value)

    def _values(self) -> tuple:
        return tuple(getattr(self, name) for name in self._components)

    def _assign(self: V, values) -> V:
        for name, value in zip(self._components, values, strict=True):
            setattr(self, name, value)
        return self

    def copy(self: V) -> V:
        return type(self)(*self._values())

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def copy_from(self: V, other: V) -> V:
        """Copy assignment: overwrite every component with ``other``'s."""
        return self._assign(other._values())

    def take(self: V) -> V:
        """Move this vector's values into a new vector, leaving this one zeroed."""
        moved = self.copy()
        self._assign((0,) * len(self._components))
        return moved

    @classmethod
    def moved(cls: type[V], other: NumericVector) -> V:
        """Move construction: build from ``other`` and reset ``other`` to zero."""
        return cls(*other.take()._values())

    def move_from(self: V, other: V) -> V:
        """Move assignment. Moving a vector into itself leaves it untouched."""
        if other is not self:
            self._assign(other.take()._values())
        return self
