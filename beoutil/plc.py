"""PLC style helpers: a millisecond clock, normalisation, scaling and limiting."""

from __future__ import annotations

import time


def millis() -> int:
    """Return the milliseconds elapsed on a monotonic clock."""
    return time.monotonic_ns() // 1_000_000


def norm_x(minimum, value, maximum):
    """Normalise ``value`` from the range [minimum, maximum] to [0, 1].

    Raises ZeroDivisionError when the range is empty.
    """
    return (value - minimum) / (maximum - minimum)


def scale_x(minimum, value, maximum):
    """Scale a normalised ``value`` to the range [minimum, maximum]."""
    return (value * (maximum - minimum)) + minimum


def limit(minimum, value, maximum):
    """Constrain ``value`` between ``minimum`` and ``maximum``."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value