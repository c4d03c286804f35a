"""Pulse-driven measurements: a flow meter and a directional encoder."""

from __future__ import annotations

from typing import Callable

from beoutil.plc import millis

Clock = Callable[[], int]

_U16 = 0xFFFF
_PERIOD_MS = 60_000
_TIMEOUT_MS = 1_000


def _to_i16(value: int) -> int:
    value &= _U16
    return value - 0x10000 if value & 0x8000 else value


class PulseCounter:
    """Volume and flow computed from a flow meter's pulses.

    ``pulse_weight`` is the number of pulses per litre per minute: one pulse
    counts for ``1 / (pulse_weight * 60)`` litres. Volume and flow are updated
    each time ``pulse_calc`` pulses have accumulated.
    """

    def __init__(self, pulse_weight: int = 23, pulse_calc: int = 10, clock: Clock = millis) -> None:
        self._clock = clock
        self._weight = 1.0 / (pulse_weight * 60.0)
        self._pulse_calc = pulse_calc
        self._count = 0
        self._last = 0
        self._volume = 0.0
        self._flow = 0.0

    def pulse(self) -> None:
        """Record one pulse from the sensor."""
        self._count = (self._count + 1) & _U16

    def main(self) -> None:
        """Update volume and flow; call once per loop.

        Raises ZeroDivisionError when a computation falls in the same
        millisecond as the previous one.
        """
        delta_t = (self._clock() - self._last) & _U16

        if self._count >= self._pulse_calc:
            volume = self._count * self._weight
            self._flow = volume * (_PERIOD_MS // delta_t)
            self._volume += volume
            self._count -= self._pulse_calc
            self._last = self._clock()

        if delta_t >= _TIMEOUT_MS:
            self._flow = 0.0

        if self._flow == 0:
            self._last = self._clock()

    @property
    def volume(self) -> float:
        """Total volume in litres."""
        return self._volume

    @property
    def flow(self) -> float:
        """Flow in litres per minute."""
        return self._flow


class Encoder:
    """Position and speed computed from an encoder's pulses and direction.

    Each pulse moves the position by ``pulse_weight`` turns, forwards or
    backwards. Position and speed are updated each time ``pulse_calc`` pulses
    have accumulated in one direction.
    """

    def __init__(self, pulse_weight: float = 0.11, pulse_calc: int = 33, clock: Clock = millis) -> None:
        self._clock = clock
        self._weight = pulse_weight
        self._pulse_calc = pulse_calc
        self._count = 0
        self._last = 0
        self._position = 0.0
        self._speed = 0.0

    def pulse(self, reverse: bool = False) -> None:
        """Record one pulse, backwards when ``reverse`` is set."""
        self._count = _to_i16(self._count + (-1 if reverse else 1))

    def main(self) -> None:
        """Update position and speed; call once per loop.

        Raises ZeroDivisionError when a computation falls in the same
        millisecond as the previous one.
        """
        delta_t = (self._clock() - self._last) & _U16

        if (abs(self._count) & _U16) >= self._pulse_calc:
            movement = self._count * self._weight
            self._speed = movement * (_PERIOD_MS // delta_t)
            self._position += movement
            step = self._pulse_calc if self._count < 0 else -self._pulse_calc
            self._count = _to_i16(self._count + step)
            self._last = self._clock()

        if delta_t >= _TIMEOUT_MS:
            self._speed = 0.0

        if self._speed == 0:
            self._last = self._clock()

    @property
    def position(self) -> float:
        """Position in turns."""
        return self._position

    @property
    def speed(self) -> int:
        """Speed in turns per minute, truncated to an integer."""
        return _to_i16(int(self._speed))

    @property
    def speed_abs(self) -> int:
        """Absolute speed in turns per minute."""
        return abs(self.speed)