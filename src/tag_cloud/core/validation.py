"""Input validation with clear error messages for layout callers."""

from __future__ import annotations

import numbers
from typing import Any

from ..layout.geometry import Point, Size


def _as_int_pair(value: Any, kind: str) -> tuple[int, int]:
    """Unpack a 2-sequence of integers, rejecting floats and bools."""
    try:
        a, b = value
    except (TypeError, ValueError):
        raise TypeError(
            f"Expected a {kind} or a pair of integers, got {type(value).__name__}."
        ) from None
    for component in (a, b):
        if isinstance(component, bool) or not isinstance(component, numbers.Integral):
            raise TypeError(
                f"{kind} components must be integers, got {type(component).__name__}."
            )
    return int(a), int(b)


def validate_size(value: Any) -> Size:
    """Validate a rectangle size and return it as a Size.

    Accepts a Size or a (width, height) pair. Both dimensions must be
    non-negative; (0, 0) is allowed.
    """
    if isinstance(value, Size):
        width, height = _as_int_pair((value.width, value.height), "Size")
    else:
        width, height = _as_int_pair(value, "Size")
    if width < 0 or height < 0:
        raise ValueError(
            f"Rectangle width and height must be non-negative, got ({width}, {height})."
        )
    return Size(width, height)


def validate_point(value: Any) -> Point:
    """Validate a point and return it as a Point. Accepts a Point or an (x, y) pair."""
    if isinstance(value, Point):
        x, y = _as_int_pair((value.x, value.y), "Point")
    else:
        x, y = _as_int_pair(value, "Point")
    return Point(x, y)


def validate_positive(value: Any, name: str) -> float:
    """Validate that a numeric parameter is finite and strictly positive."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}.")
    value = float(value)
    if not value > 0 or value == float("inf"):
        raise ValueError(f"{name} must be a finite positive number, got {value}.")
    return value
