"""Numeric element-type predicate and scalar helpers shared by the vector types."""

from __future__ import annotations

import math
from typing import Any

import numpy as np

_INTEGRAL_TYPES = (int, np.integer)
_FLOATING_TYPES = (float, np.floating)
_BOOLEAN_TYPES = (bool, np.bool_)


class NonNumericTypeError(TypeError):
    """Raised when a vector is specialized or built with a non-numeric element."""


def is_integral(tp: Any) -> bool:
    """Return True for integer element types (``bool`` is not one)."""
    if not isinstance(tp, type) or issubclass(tp, _BOOLEAN_TYPES):
        return False
    return issubclass(tp, _INTEGRAL_TYPES)


def is_floating(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, _FLOATING_TYPES)


def is_numeric(tp: Any) -> bool:
    """Return True if ``tp`` is an integral or floating-point scalar type.

    Python ``int``/``float`` and the NumPy integer and floating scalar types
    qualify. ``bool``, ``complex``, ``Fraction``, ``Decimal`` and anything that
    is not a type do not.
    """
    return is_integral(tp) or is_floating(tp)


def is_numeric_value(value: Any) -> bool:
    return is_numeric(type(value))


def require_numeric_type(tp: Any) -> type:
    if not is_numeric(tp):
        name = getattr(tp, "__name__", repr(tp))
        raise NonNumericTypeError(f"Element type must be integral or floating-point, got {name}.")
    return tp


def coerce(element_type: type | None, value: Any) -> Any:
    """Convert ``value`` with the element type's own constructor.

    ``None`` means the caller is unspecialized and the value is kept as given.
    Integral element types truncate toward zero, as a C conversion does.
    """
    if element_type is None or type(value) is element_type:
        return value
    return element_type(value)


def divide(numerator: Any, denominator: Any) -> Any:
    """Divide two scalars, truncating toward zero when both are integral.

    Integral division by zero raises ``ZeroDivisionError`` for NumPy integer
    types too. Floating division follows the element type: ``float`` raises,
    NumPy floating types return ``inf``/``nan``.
    """
    if is_integral(type(numerator)) and is_integral(type(denominator)):
        num, den = int(numerator), int(denominator)
        quotient = abs(num) // abs(den)
        if (num < 0) != (den < 0):
            quotient = -quotient
        return type(numerator)(quotient)
    return numerator / denominator


def floor_value(value: Any) -> Any:
    if is_integral(type(value)) or not math.isfinite(value):
        return value
    return type(value)(math.floor(value))


def ceil_value(value: Any) -> Any:
    if is_integral(type(value)) or not math.isfinite(value):
        return value
    return type(value)(math.ceil(value))


def round_half_away(value: Any) -> Any:
    """Round to the nearest integer, ties away from zero.

    ``round_half_away(2.5) == 3.0`` and ``round_half_away(-2.5) == -3.0``,
    unlike the built-in ``round`` which rounds ties to even. The result keeps
    the type of ``value`` and the sign of zero.
    """
    if is_integral(type(value)) or not math.isfinite(value):
        return value
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return type(value)(math.copysign(whole, value))
