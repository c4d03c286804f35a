"""PLC-style building blocks: triggers, IEC timers, bit arrays, scaling, motor logic and counters."""

__version__ = "0.1.0"

__all__ = [
    "analog",
    "bitbool",
    "counters",
    "iec_timer",
    "lcalc",
    "lsys",
    "motor",
    "plc",
    "trigger",
]