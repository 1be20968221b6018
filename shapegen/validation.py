"""Argument checks shared by every public builder."""

from __future__ import annotations

import math
import numbers

from shapegen.exceptions import InvalidParameterError


def check_real(name: str, value):
    """Reject non-numbers, bools and non-finite values."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(
            name, f"must be a real number, got {type(value).__name__}"
        )
    if not math.isfinite(value):
        raise InvalidParameterError(name, f"must be finite, got {value}")
    return value


def validate_size(name: str, value) -> float:
    """Validate a non-negative extent. Zero is allowed (degenerate mesh)."""
    value = check_real(name, value)
    if value < 0:
        raise InvalidParameterError(name, f"must be non-negative, got {value}")
    return float(value)


def validate_segments(name: str, value, minimum: int) -> int:
    """Truncate a segment count toward zero and check its lower bound."""
    value = int(check_real(name, value))
    if value < minimum:
        raise InvalidParameterError(
            name, f"must be >= {minimum} after truncation, got {value}"
        )
    return value


def plain_number(value):
    """Convert any real number to a built-in int or float.

    Integral values (including numpy integers) become ``int``, every other
    real (numpy floats, ``Fraction``) becomes ``float``.
    Anything else is returned unchanged.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        return float(value)
    return value
