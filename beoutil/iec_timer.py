"""IEC 61131 style durations and timers: TON, TOF and TP."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Callable, Union

from beoutil.plc import millis
from beoutil.trigger import Trigger

Clock = Callable[[], int]

_U32 = 0xFFFFFFFF
_U16 = 0xFFFF
_U8 = 0xFF


class TimeMultiplier(IntEnum):
    """Number of milliseconds in each time unit."""

    MILLISECONDS = 1
    SECONDS = 1_000
    MINUTES = 60_000
    HOURS = 3_600_000
    DAYS = 86_400_000


class Time:
    """A duration split into days, hours, minutes, seconds and milliseconds.

    Arithmetic works on the total in milliseconds and wraps at 32 bits.
    Equality and ordering look at days, hours, minutes and seconds only.
    """

    __slots__ = ("_ms", "_ss", "_mm", "_hh", "_d")

    def __init__(self, value: int = 0, multiplier: int = TimeMultiplier.MILLISECONDS) -> None:
        self.set(value, multiplier)

    @classmethod
    def from_dhms(cls, day: int, hour: int, minute: int = 0, second: int = 0) -> "Time":
        """Build a duration from its days, hours, minutes and seconds."""
        duration = cls()
        duration.set_dhms(day, hour, minute, second)
        return duration

    def copy(self) -> "Time":
        """Return an independent duration equal in every field."""
        duplicate = type(self)()
        duplicate._ms, duplicate._ss, duplicate._mm = self._ms, self._ss, self._mm
        duplicate._hh, duplicate._d = self._hh, self._d
        return duplicate

    def reset(self) -> None:
        """Set the duration to zero."""
        self.set(0)

    def set(self, value: int, multiplier: int = TimeMultiplier.MILLISECONDS) -> None:
        """Set the duration to ``value`` units of ``multiplier`` milliseconds."""
        total = (int(value) * int(multiplier)) & _U32
        self._ms = total % TimeMultiplier.SECONDS
        self._ss = (total // TimeMultiplier.SECONDS) % 60
        self._mm = (total // TimeMultiplier.MINUTES) % 60
        self._hh = (total // TimeMultiplier.HOURS) % 24
        self._d = (total // TimeMultiplier.DAYS) & _U8

    def set_dhms(self, day: int, hour: int, minute: int = 0, second: int = 0) -> None:
        """Set days, hours, minutes and seconds; milliseconds are kept."""
        self._d = int(day) & _U8
        self._hh = int(hour) & _U8
        self._mm = int(minute) & _U8
        self._ss = int(second) & _U8

    @property
    def millisecond(self) -> int:
        return self._ms

    @property
    def second(self) -> int:
        return self._ss

    @property
    def minute(self) -> int:
        return self._mm

    @property
    def hour(self) -> int:
        return self._hh

    @property
    def day(self) -> int:
        return self._d

    def to_string(self) -> str:
        """Render the largest non-zero units down to milliseconds; days are left out."""
        if self._hh:
            return f"{self._hh:02d}h {self._mm:02d}m {self._ss:02d}s {self._ms:03d}ms "
        if self._mm:
            return f"{self._mm:02d}m {self._ss:02d}s {self._ms:03d}ms "
        if self._ss:
            return f"{self._ss:02d}s {self._ms:03d}ms "
        if self._ms:
            return f"{self._ms:03d}ms "
        return ""

    def to_string_hms(self) -> str:
        """Render as HH:MM:SS."""
        return f"{self._hh:02d}:{self._mm:02d}:{self._ss:02d}"

    def total_millis(self) -> int:
        total = (
            self._d * TimeMultiplier.DAYS
            + self._hh * TimeMultiplier.HOURS
            + self._mm * TimeMultiplier.MINUTES
            + self._ss * TimeMultiplier.SECONDS
            + self._ms
        )
        return total & _U32

    def total_seconds(self) -> int:
        return (self.total_millis() // TimeMultiplier.SECONDS) & _U16

    def total_minutes(self) -> int:
        return (self.total_millis() // TimeMultiplier.MINUTES) & _U16

    def total_hours(self) -> int:
        return (self.total_millis() // TimeMultiplier.HOURS) & _U16

    def total_days(self) -> int:
        return (self.total_millis() // TimeMultiplier.DAYS) & _U8

    def __add__(self, other: object) -> "Time":
        if not isinstance(other, Time):
            return NotImplemented
        return Time(self.total_millis() + other.total_millis())

    def __sub__(self, other: object) -> "Time":
        if not isinstance(other, Time):
            return NotImplemented
        return Time(self.total_millis() - other.total_millis())

    def __mul__(self, factor: object) -> "Time":
        if not isinstance(factor, int):
            return NotImplemented
        return Time(self.total_millis() * factor)

    def __floordiv__(self, divisor: object) -> "Time":
        if not isinstance(divisor, int):
            return NotImplemented
        return Time(self.total_millis() // (divisor & _U32))

    def _fields(self) -> tuple:
        return (self._d, self._hh, self._mm, self._ss)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._fields() == other._fields()

    __hash__ = None  # mutable

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return (
            self._d <= other._d
            and self._hh <= other._hh
            and self._mm <= other._mm
            and self._ss < other._ss
        )

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return other < self

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return not self > other

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return not self < other

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"Time(day={self._d}, hour={self._hh}, minute={self._mm}, "
            f"second={self._ss}, millisecond={self._ms})"
        )


def _as_time(value: Union[Time, int]) -> Time:
    return value.copy() if isinstance(value, Time) else Time(value)


class _IecTimer(ABC):
    """Shared state of the IEC timers; outputs are refreshed when read."""

    def __init__(self, pt: Union[Time, int], in_: bool, clock: Clock) -> None:
        self.in_ = bool(in_)
        self.pt = pt
        self._clock = clock
        self._q = False
        self._start = clock()
        self._et = 0

    @property
    def pt(self) -> Time:
        """The preset duration."""
        return self._pt

    @pt.setter
    def pt(self, value: Union[Time, int]) -> None:
        self._pt = _as_time(value)

    def _elapsed(self) -> int:
        return (self._clock() - self._start) & _U32

    @abstractmethod
    def _main(self) -> None:
        """Evaluate the timer against the clock."""

    def _evaluate_q(self) -> bool:
        self._main()
        return self._q

    def _evaluate_et(self) -> Time:
        self._main()
        return Time(self._et)


class TON(_IecTimer):
    """On-delay timer: Q rises once IN has been true for PT."""

    def __init__(self, pt: Union[Time, int] = 0, in_: bool = False, clock: Clock = millis) -> None:
        super().__init__(pt, in_, clock)
        self._main()

    def _main(self) -> None:
        if not self.in_:
            self._q = False
            self._start = self._clock()
        elif not self._q:
            self._et = self._elapsed()
            if self._et >= self.pt.total_millis():
                self._q = True

    def q(self) -> bool:
        """Evaluate the timer and return its output."""
        return self._evaluate_q()

    def et(self) -> Time:
        """Evaluate the timer and return the elapsed time."""
        return self._evaluate_et()

    def return_q(self) -> bool:
        """Return the output as last evaluated, without evaluating again."""
        return self._q


class TOF(_IecTimer):
    """Off-delay timer: Q stays true for PT after IN falls."""

    def __init__(self, pt: Union[Time, int] = 0, in_: bool = False, clock: Clock = millis) -> None:
        super().__init__(pt, in_, clock)
        self._main()

    def _main(self) -> None:
        if self.in_:
            self._q = True
            self._start = self._clock()
        elif self._q:
            self._et = self._elapsed()
            if self._et >= self.pt.total_millis():
                self._q = False

    def q(self) -> bool:
        """Evaluate the timer and return its output."""
        return self._evaluate_q()

    def et(self) -> Time:
        """Evaluate the timer and return the elapsed time."""
        return self._evaluate_et()

    def return_q(self) -> bool:
        """Return the output as last evaluated, without evaluating again."""
        return self._q


class TP(_IecTimer):
    """Pulse timer: a rising edge of IN sets Q for exactly PT."""

    def __init__(self, pt: Union[Time, int] = 0, in_: bool = False, clock: Clock = millis) -> None:
        super().__init__(pt, in_, clock)
        self._trigger = Trigger()

    def _main(self) -> None:
        self._trigger.analyse(self.in_)
        if self._trigger.rising and not self._q:
            self._start = self._clock()
            self._q = True
        if self._q:
            self._et = self._elapsed()
            if self._et >= self.pt.total_millis():
                self._q = False

    def q(self) -> bool:
        """Evaluate the timer and return its output."""
        return self._evaluate_q()

    def et(self) -> Time:
        """Evaluate the timer and return the elapsed time."""
        return self._evaluate_et()

    def return_q(self) -> bool:
        """Return the output as last evaluated, without evaluating again."""
        return self._q