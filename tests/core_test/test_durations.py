#!filepath: tests/core_test/test_durations.py
import pytest

from civiltime.core import durations
from civiltime.core.types import Duration, Instant


def test_unit_constructors():
    assert durations.milliseconds(5) == Duration(5)
    assert durations.seconds(2) == Duration(2_000)
    assert durations.minutes(1) == Duration(60_000)
    assert durations.hours(1) == Duration(3_600_000)
    assert durations.days(1) == Duration(86_400_000)
    assert durations.weeks(1) == Duration(604_800_000)


def test_group_laws():
    a, b, c = Duration(5), Duration(-12), Duration(40)
    assert durations.add(a, durations.ZERO) == a
    assert durations.add(a, b) == durations.add(b, a)
    assert (a + b) + c == a + (b + c)
    assert a + (-a) == durations.ZERO
    assert durations.sub(a, b) == Duration(17)


def test_instant_arithmetic():
    i = Instant(1_000)
    assert durations.add_duration(i, durations.seconds(1)) == Instant(2_000)
    assert i - durations.seconds(2) == Instant(-1_000)
    assert Instant(5_000) - i == Duration(4_000)
    assert Instant(0) < Instant(1)


@pytest.mark.parametrize(
    "ms, text",
    [
        (0, "0 ms"),
        (999, "999 ms"),
        (1_500, "2 s"),
        (-90_000, "-2 min"),
        (5_400_000, "2 h"),
        (3 * 86_400_000, "3 d"),
        (-36 * 3_600_000, "-2 d"),
    ],
)
def test_humanize(ms, text):
    assert durations.humanize(Duration(ms)) == text
