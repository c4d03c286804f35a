"""System clocks and edges: square-wave clocks, pulses and first-scan bits."""

from __future__ import annotations

from typing import Callable

from beoutil.bitbool import BitBool
from beoutil.plc import millis

Clock = Callable[[], int]

_U32 = 0xFFFFFFFF

_CLOCK = 0
_PULSE = 1
_CLOCK_OLD = 2


class Fdelay:
    """A clock that toggles every half period, with a rising-edge pulse."""

    def __init__(self, period_ms: int, clock: Clock = millis) -> None:
        self._time = clock
        self._period = period_ms // 2
        self._last = clock()
        self._bits = BitBool(8)

    def clock_signal(self) -> bool:
        """Return the square-wave state, toggling it when half a period has passed."""
        if (self._time() - self._last) & _U32 >= self._period:
            self._last = self._time()
            self._bits.invert(_CLOCK)
        return self._bits[_CLOCK]

    def impulse(self) -> bool:
        """Return True once on each rising edge of the clock."""
        self.clock_signal()
        self._bits[_PULSE] = self._bits[_CLOCK] and not self._bits[_CLOCK_OLD]
        self._bits[_CLOCK_OLD] = self._bits[_CLOCK]
        return self._bits[_PULSE]


class Lsys:
    """System bits refreshed on each call to :meth:`main`.

    ``ft10hz``, ``ft2hz`` and ``ft1hz`` are pulses at those rates, ``cl1hz`` is
    a 1 Hz square wave, ``firstscan`` is True on the first call only,
    ``always_true`` and ``always_false`` are constant once set.
    """

    def __init__(self, clock: Clock = millis) -> None:
        self._d10hz = Fdelay(100, clock)
        self._d2hz = Fdelay(500, clock)
        self._d1hz = Fdelay(1000, clock)
        self.ft10hz = False
        self.ft2hz = False
        self.ft1hz = False
        self.cl1hz = False
        self.firstscan = False
        self.always_true = False
        self.always_false = False

    def main(self) -> None:
        """Refresh the system bits; call once per loop."""
        self.ft10hz = self._d10hz.impulse()
        self.ft2hz = self._d2hz.impulse()
        self.ft1hz = self._d1hz.impulse()
        self.cl1hz = self._d1hz.clock_signal()

        self.firstscan = not self.always_true
        if self.firstscan:
            self.always_true = True
        if self.always_false:
            self.always_false = False