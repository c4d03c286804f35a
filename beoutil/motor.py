"""Motor control: operating modes, speed ramps and contactor logic."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

from beoutil.plc import limit, millis

Clock = Callable[[], int]

_U32 = 0xFFFFFFFF


class Mode(IntEnum):
    """Operating modes of a motor."""

    ARRET_FORCEE = 0
    MARCHE_AV_FORCEE = 1
    MARCHE_AR_FORCEE = 2
    MODE_AUTO = 3
    DEFAUT = 4


class MotorSpeed:
    """Moves the current set point one step towards the global one per ramp period."""

    def __init__(self, clock: Clock = millis) -> None:
        self._clock = clock
        self._disabled = False
        self._csg_atteinte = False
        self._last = 0

    def disable(self, disabled: bool) -> None:
        """Switch the ramp off: the current set point then follows the global one at once."""
        self._disabled = bool(disabled)

    @property
    def csg_atteinte(self) -> bool:
        """True when the last update found the set point reached."""
        return self._csg_atteinte

    def _restart(self) -> None:
        self._last = self._clock()

    def main(self, csg_globale: int, csg_actuelle: int, rampe: int) -> int:
        """Return the current set point after one update of the ramp.

        ``rampe`` is the time in milliseconds between two steps of one unit.
        """
        if self._disabled:
            csg_actuelle = csg_globale

        self._csg_atteinte = csg_actuelle == csg_globale
        if self._csg_atteinte:
            self._restart()
            return csg_actuelle

        if (self._clock() - self._last) & _U32 >= rampe:
            self._restart()
            csg_actuelle += 1 if csg_globale > csg_actuelle else -1
        return csg_actuelle


class Motor:
    """Command, mode and set-point state shared by the motor drivers.

    ``two_way`` tells whether the motor can run backwards; it decides whether
    :meth:`toggle` alternates forward and backward runs.
    """

    def __init__(
        self,
        mode: int,
        out_min: int,
        out_max: int,
        csg_min: int,
        csg_max: int,
        rampe_acc: int,
        two_way: bool = True,
    ) -> None:
        self.two_way = bool(two_way)
        self.pid_mode = False
        self._cmd_av = False
        self._cmd_ar = False
        self._mem_cmd = False
        self.km_av = False
        self.km_ar = False
        self._mode = mode
        self._mode_old = mode
        self._csg_auto = out_min
        self._csg_manu = out_min
        self.csg_globale = 0
        self.csg_actuelle = 0
        self.csg_min = max(csg_min, out_min)
        self.csg_max = min(csg_max, out_max)
        self.rampe = rampe_acc
        self.out_min = out_min
        self.out_max = out_max

    def toggle(self) -> None:
        """Step through forward, stop, backward, stop, forward, and so on."""
        if not self._cmd_av and not self._cmd_ar:
            self._cmd_av = not self._mem_cmd
            self._cmd_ar = self._mem_cmd
        elif self._cmd_av != self._cmd_ar:
            self._cmd_av = False
            self._cmd_ar = False
            self._mem_cmd = (not self._mem_cmd) and self.two_way

    def stop(self) -> None:
        """Stop at once, without deceleration."""
        self._cmd_av = False
        self._cmd_ar = False
        self.km_av = False
        self.km_ar = False

    def release(self) -> None:
        """Drop the run commands and let the motor decelerate."""
        self._cmd_av = False
        self._cmd_ar = False

    @property
    def stopped(self) -> bool:
        """True when neither contactor is engaged."""
        return not self.km_av and not self.km_ar

    @property
    def cmd_av(self) -> bool:
        """The forward run command."""
        return self._cmd_av

    @property
    def cmd_ar(self) -> bool:
        """The backward run command."""
        return self._cmd_ar

    def set_cmd_av(self, enable: bool) -> None:
        """Set the forward command; enabling it clears the backward command."""
        self._cmd_av = bool(enable)
        if enable:
            self._cmd_ar = False

    def set_cmd_ar(self, enable: bool) -> None:
        """Set the backward command; enabling it clears the forward command."""
        self._cmd_ar = bool(enable)
        if enable:
            self._cmd_av = False

    @property
    def mode(self) -> int:
        """The current operating mode."""
        return self._mode

    def set_mode(self, mode: int) -> None:
        """Change the operating mode; ignored while the motor is in fault."""
        if self._mode != mode and self._mode != Mode.DEFAUT:
            self._mode_old = self._mode
            self._mode = mode

    def rearm(self, condition: bool) -> bool:
        """Leave the fault mode when ``condition`` holds; return True when not in fault."""
        if self._mode == Mode.DEFAUT and condition:
            self._mode = self._mode_old
        return self._mode != Mode.DEFAUT

    @property
    def csg_auto(self) -> int:
        """The automatic-mode set point."""
        return self._csg_auto

    def set_csg_auto(self, csg: int) -> None:
        """Set the automatic-mode set point, bounded by the set-point range."""
        self._csg_auto = limit(self.csg_min, csg, self.csg_max)

    @property
    def csg_manu(self) -> int:
        """The manual-mode set point."""
        return self._csg_manu

    def set_csg_manu(self, csg: int) -> None:
        """Set the manual-mode set point, bounded by the output range."""
        self._csg_manu = limit(self.out_min, csg, self.out_max)

    def update_contactors(self) -> None:
        """Work out the forward and backward contactor states.

        A contactor latches while the current set point stays above the
        minimum, drops when the opposite command is given, and is forced on
        in the matching forced-run mode.
        """
        above_min = self.csg_actuelle > self.csg_min
        auto = self._mode == Mode.MODE_AUTO
        self.km_av = (
            (above_min and ((auto and self._cmd_av) or self.km_av)) and not self._cmd_ar
        ) or self._mode == Mode.MARCHE_AV_FORCEE
        self.km_ar = (
            (above_min and ((auto and self._cmd_ar) or self.km_ar)) and not self._cmd_av
        ) or self._mode == Mode.MARCHE_AR_FORCEE