"""Edge detection on a boolean signal."""

from __future__ import annotations

from typing import Callable, Optional

Source = Callable[[], bool]


class Trigger:
    """Detects rising, falling and changing edges of a boolean signal.

    The signal is either passed to :meth:`analyse` or read from an attached
    source, a callable returning the current state.
    """

    def __init__(self, source: Optional[Source] = None) -> None:
        self._source = source
        self._previous = False
        self._falling = False
        self._rising = False
        self._changed = False

    def attach(self, source: Source) -> None:
        """Attach the callable the trigger reads when analysed without a value."""
        self._source = source

    def analyse(self, value: Optional[bool] = None) -> None:
        """Update the edge outputs from ``value`` or from the attached source."""
        if value is None:
            if self._source is None:
                raise ValueError("no source attached to the trigger")
            value = self._source()
        value = bool(value)
        self._changed = value != self._previous
        self._falling = value < self._previous
        self._rising = value > self._previous
        self._previous = value

    @property
    def falling(self) -> bool:
        """True when the last analysis saw a falling edge."""
        return self._falling

    @property
    def rising(self) -> bool:
        """True when the last analysis saw a rising edge."""
        return self._rising

    @property
    def changed(self) -> bool:
        """True when the last analysis saw any change of state."""
        return self._changed