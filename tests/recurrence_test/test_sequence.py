#!filepath: tests/recurrence_test/test_sequence.py
from itertools import islice

import pytest

from civiltime.core import durations
from civiltime.core.bijection import to_civil, to_epoch
from civiltime.core.types import CivilDateTime, Instant, ZonedValue
from civiltime.utils.errors import InvalidInputError
from civiltime.zone.resolution import resolve, wall_clock
from civiltime.zoned.functor import with_zone
from civiltime.recurrence.sequence import (
    CalendarStep,
    FixedStep,
    RecurrenceSequence,
    every,
    every_day,
    every_month,
    every_week,
    every_year,
    recur,
)


def _utc_origin(instant: Instant) -> ZonedValue:
    return ZonedValue(instant, resolve("UTC", instant), to_civil(instant))


# ================================================================
# 固定时长
# ================================================================
def test_fixed_daily_steps_are_exact(fixed_resolver):
    seq = RecurrenceSequence(_utc_origin(Instant(0)), every_day(), fixed_resolver)
    items = seq.take(1001)

    assert len(items) == 1001
    assert items[0].instant == Instant(0)
    for prev, cur in zip(items, items[1:]):
        assert cur.instant.epoch_ms - prev.instant.epoch_ms == 86_400_000


def test_fixed_step_payload_tracks_wall_clock():
    origin = _utc_origin(Instant(0))
    items = recur(origin, every_week()).take(3)
    assert [i.payload for i in items] == [
        CivilDateTime(1970, 1, 1),
        CivilDateTime(1970, 1, 8),
        CivilDateTime(1970, 1, 15),
    ]


def test_fixed_step_across_dst_keeps_duration():
    """
    Contract:
    固定 24h 步长跨过 spring-forward：instant 间隔不变，墙上时间 +1h
    """
    origin = with_zone("America/New_York", CivilDateTime(2023, 3, 11, 12))
    a, b = recur(origin, every(durations.hours(24))).take(2)

    assert b.instant.epoch_ms - a.instant.epoch_ms == 86_400_000
    assert b.payload == CivilDateTime(2023, 3, 12, 13)
    assert b.zone.is_dst is True


# ================================================================
# 日历步进
# ================================================================
def test_monthly_keeps_day_and_time():
    origin = with_zone("UTC", CivilDateTime(2023, 1, 15, 12, 0, 0, 0))
    items = recur(origin, every_month()).take(25)

    for k, item in enumerate(items):
        p = item.payload
        assert p.day == 15
        assert p.hour == 12
        assert p.month == k % 12 + 1
        assert p.year == 2023 + k // 12
        assert item.instant == to_epoch(p)


def test_monthly_derives_from_previous_element():
    """
    每个元素由前一个推出：1/31 → 2/28 → 3/28（不是 3/31）
    """
    origin = with_zone("UTC", CivilDateTime(2023, 1, 31))
    days = [v.payload.day for v in recur(origin, every_month()).take(3)]
    assert days == [31, 28, 28]


def test_calendar_daily_across_dst_keeps_wall_clock():
    origin = with_zone("America/New_York", CivilDateTime(2023, 3, 11, 12))
    a, b = recur(origin, CalendarStep("days", 1)).take(2)

    assert b.payload == CivilDateTime(2023, 3, 12, 12)
    assert wall_clock(b) == CivilDateTime(2023, 3, 12, 12)
    assert b.instant.epoch_ms - a.instant.epoch_ms == 23 * 3_600_000


def test_yearly_from_leap_day():
    origin = with_zone("UTC", CivilDateTime(2024, 2, 29, 8))
    items = recur(origin, every_year()).take(2)
    assert items[1].payload == CivilDateTime(2025, 2, 28, 8)


def test_unknown_calendar_unit_rejected():
    with pytest.raises(InvalidInputError):
        CalendarStep("fortnights", 1)


# ================================================================
# 可重启 / 无共享游标
# ================================================================
def test_sequence_is_restartable():
    seq = recur(_utc_origin(Instant(0)), every(durations.hours(1)))
    assert seq.take(5) == seq.take(5)


def test_independent_cursors():
    seq = recur(_utc_origin(Instant(0)), every(durations.minutes(1)))
    it1, it2 = iter(seq), iter(seq)

    next(it1)
    next(it1)
    first_of_2 = next(it2)
    third_of_1 = next(it1)

    assert first_of_2.instant == Instant(0)
    assert third_of_1.instant == Instant(120_000)


def test_long_run_does_not_grow_stack(fixed_resolver):
    seq = RecurrenceSequence(_utc_origin(Instant(0)), FixedStep(durations.seconds(1)), fixed_resolver)
    last = None
    for last in islice(seq, 20_000):
        pass
    assert last.instant == Instant(19_999_000)


def test_unknown_zone_origin_never_raises():
    origin = with_zone("Not/AZone", CivilDateTime(2023, 1, 1))
    items = recur(origin, every_day()).take(3)
    assert all(i.zone.identifier == "UTC" for i in items)
