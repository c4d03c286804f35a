"""Scaling of 10-bit analog readings with optional sensor fault detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

ADC_MAX = 1023.0


@dataclass(frozen=True)
class AiScale:
    """A scaled analog value and whether the raw reading signals a sensor fault."""

    fault: bool
    value: float


def _scale(raw: float, lo_lim: float, hi_lim: float) -> float:
    return ((raw / ADC_MAX) * (hi_lim - lo_lim)) + lo_lim


def fscale(
    raw: int,
    lo_lim: float,
    hi_lim: float,
    offset: float = 0.0,
    lo_def: Optional[int] = None,
    hi_def: Optional[int] = None,
) -> AiScale:
    """Scale a raw reading (0 to 1023) to [lo_lim, hi_lim], shifted by ``offset``.

    The result is marked as a fault when the raw reading lies below ``lo_def``
    or above ``hi_def``; a limit left as None is not checked.
    """
    fault = (lo_def is not None and raw < lo_def) or (hi_def is not None and raw > hi_def)
    return AiScale(fault=bool(fault), value=_scale(float(raw), lo_lim + offset, hi_lim + offset))