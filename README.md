# beoutil

Building blocks for scan-cycle control logic, in the style of a PLC
program. You call each block once per loop iteration and then read its
outputs.

## Contents

- `beoutil.plc` provides `millis()`, a monotonic millisecond clock. It also
  provides `norm_x`, `scale_x` and `limit`, which normalise, scale and clamp
  values.
- `beoutil.trigger` provides `Trigger`. It detects edges of a boolean signal.
  - You can pass the value to `analyse(value)`.
  - Or you can `attach()` a callable and call `analyse()` with no argument.
  - The results are read from the properties `rising`, `falling` and
    `changed`.
- `beoutil.iec_timer` provides the duration type `Time` and the timers that
  use it.
  - `Time` splits a duration into days, hours, minutes, seconds and
    milliseconds.
  - Units come from `TimeMultiplier`.
  - `Time.from_dhms` builds a duration from days, hours, minutes and seconds.
  - `to_string` and `to_string_hms` render a duration as text.
  - The `total_*` methods give the duration in a single unit.
  - Durations support `+`, `-`, `*` and `//`.
  - Comparisons look at days, hours, minutes and seconds only. Milliseconds
    are ignored.
  - The IEC timers are `TON` (on-delay), `TOF` (off-delay) and `TP` (pulse).
    Each has the attributes `in_` and `pt` and the methods `q()`, `et()` and
    `return_q()`.
- `beoutil.bitbool` provides `BitBool`, a fixed-size array of bits packed
  into a `bytearray`.
  - `Reverse` sets the bit and byte order.
  - Bits are read and written by indexing, `get`, `set`, `invert`,
    `invert_all` and `iterate`.
- `beoutil.lsys` provides `Fdelay` and `Lsys`.
  - `Fdelay` is a square-wave clock. Read it with `clock_signal()`, and get a
    rising-edge pulse from `impulse()`.
  - `Lsys` updates the system bits on each `main()` call: `ft10hz`, `ft2hz`,
    `ft1hz`, `cl1hz`, `firstscan`, `always_true` and `always_false`.
- `beoutil.lcalc` provides `mae`, which maps a value linearly from one range
  to another. The output is clamped to the target range.
- `beoutil.analog` provides `fscale`. It scales a raw 10-bit reading
  (0 to 1023) into an `AiScale(fault, value)`. The `lo_def` and `hi_def`
  limits are optional and set the sensor-fault flag.
- `beoutil.motor` provides `Mode`, `MotorSpeed` and `Motor`.
  - `MotorSpeed` is a ramp. It moves the current set point one unit per ramp
    period.
  - `Motor` holds the run commands (`set_cmd_av`, `set_cmd_ar`, `toggle`,
    `stop`, `release`).
  - It holds the operating mode (`set_mode`, `rearm`) and the bounded set
    points (`set_csg_auto`, `set_csg_manu`).
  - It holds the contactor logic (`update_contactors`, `km_av`, `km_ar`,
    `stopped`).
- `beoutil.counters` provides `PulseCounter` and `Encoder`.
  - `PulseCounter` computes `volume` and `flow` from flow-meter pulses.
  - `Encoder` computes `position`, `speed` and `speed_abs` from directional
    pulses.
  - Both record pulses with `pulse()` and update with `main()`.

## Clocks

Every time-dependent block accepts an optional `clock`, a callable that
returns milliseconds. If you leave it out, `beoutil.plc.millis` is used.
In tests and simulations you can pass your own clock to control time.

## Examples

```python
from beoutil.iec_timer import TON, Time, TimeMultiplier

now = [0]
timer = TON(Time(2, TimeMultiplier.SECONDS), clock=lambda: now[0])

timer.in_ = True
timer.q()        # False
now[0] = 2000
timer.q()        # True
```

```python
from beoutil.trigger import Trigger

edge = Trigger()
edge.analyse(True)
edge.rising      # True
edge.analyse(True)
edge.rising      # False
```

```python
from beoutil.lcalc import mae

mae(5.0, 0.0, 10.0, 0.0, 100.0)    # 50.0
mae(20.0, 0.0, 10.0, 0.0, 100.0)   # 100.0 (clamped)
```

## What it does not do

The package does no hardware input or output. It does not read pins, it does
not drive digital, PWM or servo outputs, and it does not talk to drives,
displays or radio and infrared receivers. You supply the inputs yourself:

- a raw reading to `fscale`;
- `pulse()` calls to the counters;
- commands and set points to `Motor`.

You then act on the outputs the blocks compute. `Motor` is the shared
command, mode and contactor logic only. There are no drivers for specific
kinds of motor.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```