"""Clamped linear scaling of floating-point values."""

from __future__ import annotations

from beoutil.plc import norm_x, scale_x


def mae(value: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """Map ``value`` from [in_min, in_max] to [out_min, out_max], clamping outside.

    Raises ZeroDivisionError when ``in_min`` equals ``in_max``.
    """
    normalised = norm_x(in_min, value, in_max)
    result = scale_x(out_min, normalised, out_max)
    if normalised < 0.0:
        result = out_min
    if normalised > 1.0:
        result = out_max
    return result