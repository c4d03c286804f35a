import pytest

from beoutil.iec_timer import TOF, TON, TP, Time, TimeMultiplier


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.mark.parametrize("value", [0, 1, 999, 1000, 59_999, 3_600_000, 86_399_999, 4_000_000_000])
def test_total_millis_round_trip(value):
    assert Time(value).total_millis() == value


@pytest.mark.parametrize("value", [1, 61_001, 3_723_004, 90_061_001])
def test_components_rebuild_total(value):
    t = Time(value)
    rebuilt = (
        t.day * TimeMultiplier.DAYS
        + t.hour * TimeMultiplier.HOURS
        + t.minute * TimeMultiplier.MINUTES
        + t.second * TimeMultiplier.SECONDS
        + t.millisecond
    )
    assert rebuilt == value
    assert 0 <= t.millisecond < 1000 and t.second < 60 and t.minute < 60 and t.hour < 24


def test_multiplier_matches_milliseconds():
    assert Time(3, TimeMultiplier.SECONDS).total_millis() == Time(3000).total_millis()


def test_from_dhms_fields():
    t = Time.from_dhms(2, 5, 7, 9)
    assert (t.day, t.hour, t.minute, t.second, t.millisecond) == (2, 5, 7, 9, 0)


def test_from_dhms_equals_sum_of_units():
    expected = (
        Time(2, TimeMultiplier.DAYS)
        + Time(5, TimeMultiplier.HOURS)
        + Time(7, TimeMultiplier.MINUTES)
        + Time(9, TimeMultiplier.SECONDS)
    )
    t = Time.from_dhms(2, 5, 7, 9)
    assert t == expected
    assert t.total_millis() == expected.total_millis()


def test_unit_totals():
    assert Time(7, TimeMultiplier.SECONDS).total_seconds() == 7
    assert Time(3, TimeMultiplier.MINUTES).total_minutes() == 3
    assert Time(4, TimeMultiplier.HOURS).total_hours() == 4
    assert Time(2, TimeMultiplier.DAYS).total_days() == 2


def test_reset_and_set():
    t = Time.from_dhms(1, 2, 3, 4)
    t.reset()
    assert t.total_millis() == 0
    t.set(5, TimeMultiplier.MINUTES)
    assert t.total_minutes() == 5


def test_set_dhms_keeps_milliseconds():
    t = Time(250)
    t.set_dhms(0, 1, 2, 3)
    assert t.millisecond == 250
    assert (t.hour, t.minute, t.second) == (1, 2, 3)


def test_copy_is_independent():
    original = Time(1500)
    duplicate = original.copy()
    duplicate.reset()
    assert original.total_millis() == 1500
    assert duplicate.total_millis() == 0


def test_subtraction_wraps_at_32_bits():
    assert (Time(1) - Time(2)).total_millis() == 0xFFFFFFFF


def test_add_and_subtract_round_trip():
    a, b = Time(123_456), Time(7_890)
    assert ((a + b) - b).total_millis() == a.total_millis()


def test_multiply_and_divide():
    t = Time(1500)
    assert (t * 4).total_millis() == (t + t + t + t).total_millis()
    assert ((t * 4) // 4).total_millis() == t.total_millis()


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Time(1000) // 0


def test_add_non_time_raises():
    with pytest.raises(TypeError):
        Time(1000) + 5


def test_equality_ignores_milliseconds():
    assert Time(1000) == Time(1999)
    assert Time(1000) != Time(2000)


def test_ordering():
    one, two = Time(1, TimeMultiplier.SECONDS), Time(2, TimeMultiplier.SECONDS)
    assert one < two and not two < one
    assert two > one and not one > two
    assert one <= two and one <= Time(1000)
    assert two >= one and two >= Time(2000)


def test_ordering_compares_field_by_field():
    assert not Time.from_dhms(0, 0, 1, 0) < Time.from_dhms(0, 0, 2, 0)


def test_to_string_formats():
    assert Time(1500).to_string() == "01s 500ms "
    assert Time.from_dhms(0, 1, 2, 3).to_string() == "01h 02m 03s 000ms "
    assert Time().to_string() == ""
    assert str(Time(1500)) == Time(1500).to_string()


def test_to_string_hms():
    assert Time.from_dhms(0, 12, 34, 56).to_string_hms() == "12:34:56"


def test_ton_delays_rising_edge():
    clock = FakeClock()
    timer = TON(100, clock=clock)
    assert timer.q() is False
    timer.in_ = True
    assert timer.q() is False
    clock.advance(99)
    assert timer.q() is False
    clock.advance(1)
    assert timer.q() is True
    timer.in_ = False
    assert timer.q() is False


def test_ton_elapsed_time():
    clock = FakeClock()
    timer = TON(100, in_=True, clock=clock)
    clock.advance(40)
    assert timer.et().total_millis() == 40


def test_ton_restarts_after_input_drops():
    clock = FakeClock()
    timer = TON(100, clock=clock)
    timer.in_ = True
    timer.q()
    clock.advance(80)
    timer.in_ = False
    timer.q()
    timer.in_ = True
    clock.advance(80)
    assert timer.q() is False
    clock.advance(20)
    assert timer.q() is True


def test_ton_return_q_does_not_evaluate():
    clock = FakeClock()
    timer = TON(50, in_=True, clock=clock)
    clock.advance(60)
    assert timer.return_q() is False
    assert timer.q() is True
    assert timer.return_q() is True


def test_ton_accepts_time_preset_and_converts_int():
    clock = FakeClock()
    timer = TON(Time(2, TimeMultiplier.SECONDS), in_=True, clock=clock)
    clock.advance(1999)
    assert timer.q() is False
    clock.advance(1)
    assert timer.q() is True
    timer.pt = 50
    assert timer.pt.total_millis() == 50


def test_tof_holds_output_after_input_falls():
    clock = FakeClock()
    timer = TOF(100, clock=clock)
    assert timer.q() is False
    timer.in_ = True
    assert timer.q() is True
    timer.in_ = False
    clock.advance(99)
    assert timer.q() is True
    clock.advance(1)
    assert timer.q() is False


def test_tof_retrigger_restarts_hold():
    clock = FakeClock()
    timer = TOF(100, in_=True, clock=clock)
    timer.in_ = False
    clock.advance(90)
    assert timer.q() is True
    timer.in_ = True
    timer.q()
    timer.in_ = False
    clock.advance(90)
    assert timer.q() is True
    assert timer.et().total_millis() == 90


def test_tp_pulse_has_fixed_length():
    clock = FakeClock()
    timer = TP(100, clock=clock)
    timer.in_ = True
    assert timer.q() is True
    timer.in_ = False
    clock.advance(99)
    assert timer.q() is True
    clock.advance(1)
    assert timer.q() is False


def test_tp_ignores_edges_during_pulse():
    clock = FakeClock()
    timer = TP(100, clock=clock)
    timer.in_ = True
    timer.q()
    clock.advance(50)
    timer.in_ = False
    timer.q()
    timer.in_ = True
    timer.q()
    clock.advance(50)
    assert timer.q() is False


def test_tp_needs_new_rising_edge():
    clock = FakeClock()
    timer = TP(100, in_=True, clock=clock)
    assert timer.q() is True
    clock.advance(100)
    assert timer.q() is False
    clock.advance(10)
    assert timer.q() is False
    timer.in_ = False
    timer.q()
    timer.in_ = True
    assert timer.q() is True