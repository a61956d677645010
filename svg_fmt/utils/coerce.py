"""Numeric and text coercion, plus the single float-to-text rule. No model imports."""

from __future__ import annotations

import math
from functools import singledispatch

import numpy as np


@singledispatch
def to_f32(value: object) -> float:
    """Round any supported number to the nearest binary32 value.

    Accepts int (any width), float and numpy integer/floating scalars. The
    result is a Python float holding an exactly representable f32 value.
    Magnitudes beyond the f32 range become +inf or -inf.
    """
    raise TypeError(f"Expected a number, got {type(value).__name__}")


@to_f32.register
def _(value: bool) -> float:
    raise TypeError("Expected a number, got bool")


@to_f32.register
def _(value: int) -> float:
    try:
        as_float = float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    return _narrow(as_float)


@to_f32.register(float)
@to_f32.register(np.integer)
@to_f32.register(np.floating)
def _(value) -> float:
    return _narrow(value)


def _narrow(value) -> float:
    with np.errstate(over="ignore"):
        return float(np.float32(value))


@singledispatch
def to_text(value: object) -> str:
    """Copy any text-like value into a plain str."""
    raise TypeError(f"Expected text, got {type(value).__name__}")


@to_text.register
def _(value: str) -> str:
    return str(value)


@to_text.register(bytes)
@to_text.register(bytearray)
def _(value) -> str:
    return bytes(value).decode("utf-8")


def format_f32(value: float) -> str:
    """Shortest round-trip decimal for an f32, positional, trailing zeros trimmed.

    20.0 -> "20", 0.1 -> "0.1", 1e20 -> "100000000000000000000".
    """
    v = np.float32(value)
    if np.isnan(v):
        return "NaN"
    if np.isinf(v):
        return "inf" if v > 0 else "-inf"
    return np.format_float_positional(v, unique=True, trim="-")
