#!filepath: tests/core_test/test_clock.py
from civiltime.core import durations
from civiltime.core.clock import FixedClock, SystemClock, get_default_clock, now, set_default_clock
from civiltime.core.types import Instant


def test_system_clock_advances():
    clock = SystemClock()
    t1 = clock.now()
    t2 = clock.now()
    assert t2 >= t1
    assert t1.epoch_ms > 1_600_000_000_000


def test_fixed_clock_and_advance():
    clock = FixedClock(Instant(0))
    assert now(clock) == Instant(0)
    clock.advance(durations.days(1))
    assert now(clock) == Instant(86_400_000)


def test_set_and_get_default():
    original = get_default_clock()
    set_default_clock(FixedClock(Instant(42)))
    try:
        assert now() == Instant(42)
    finally:
        set_default_clock(original)
