#!filepath: tests/core_test/test_bijection.py
import random
from datetime import datetime, timedelta, timezone

import pytest

from civiltime.core.bijection import days_in_month, is_leap, to_civil, to_epoch
from civiltime.core.types import CivilDate, CivilDateTime, Instant

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "year, expected",
    [(2000, True), (1900, False), (2024, True), (2023, False), (0, True), (-4, True), (2100, False)],
)
def test_leap_year_law(year, expected):
    assert is_leap(year) is expected


def test_days_in_month_february():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert days_in_month(2023, 4) == 30
    assert days_in_month(2023, 12) == 31


def test_epoch_origin():
    assert to_epoch(CivilDateTime(1970, 1, 1)) == Instant(0)
    assert to_civil(Instant(0)) == CivilDateTime(1970, 1, 1, 0, 0, 0, 0)


def test_known_instants():
    assert to_epoch(CivilDateTime(2000, 1, 1)).epoch_ms == 946_684_800_000
    assert to_epoch(CivilDateTime(2024, 2, 29, 12, 30, 15, 250)).epoch_ms == 1_709_209_815_250


def test_before_1970():
    """1970 之前也要正确：-1ms 落在 1969-12-31 最后一毫秒"""
    assert to_civil(Instant(-1)) == CivilDateTime(1969, 12, 31, 23, 59, 59, 999)
    assert to_epoch(CivilDateTime(1969, 12, 31, 23, 59, 59, 999)) == Instant(-1)


def test_civil_date_is_midnight():
    assert to_epoch(CivilDate(2023, 5, 17)) == to_epoch(CivilDateTime(2023, 5, 17, 0, 0, 0, 0))


def test_matches_stdlib_datetime_in_supported_range():
    """
    Contract:
    在 datetime 可表示的范围内与 stdlib 逐字段一致
    """
    rng = random.Random(20240229)
    lo = int((datetime(1, 1, 2, tzinfo=timezone.utc) - UNIX_EPOCH).total_seconds() * 1000)
    hi = int((datetime(9999, 12, 30, tzinfo=timezone.utc) - UNIX_EPOCH).total_seconds() * 1000)

    for _ in range(2000):
        ms = rng.randint(lo, hi)
        ref = UNIX_EPOCH + timedelta(milliseconds=ms)
        got = to_civil(Instant(ms))
        assert (got.year, got.month, got.day) == (ref.year, ref.month, ref.day)
        assert (got.hour, got.minute, got.second, got.millisecond) == (
            ref.hour, ref.minute, ref.second, ref.microsecond // 1000,
        )


def test_round_trip_instants_over_full_integer_domain():
    rng = random.Random(7)
    samples = [0, -1, 1, 10**18, -(10**18)] + [rng.randint(-(10**17), 10**17) for _ in range(2000)]
    for ms in samples:
        assert to_epoch(to_civil(Instant(ms))) == Instant(ms)


def test_round_trip_civil_values():
    rng = random.Random(11)
    for _ in range(2000):
        year = rng.randint(-50_000, 50_000)
        month = rng.randint(1, 12)
        dt = CivilDateTime(
            year,
            month,
            rng.randint(1, days_in_month(year, month)),
            rng.randint(0, 23),
            rng.randint(0, 59),
            rng.randint(0, 59),
            rng.randint(0, 999),
        )
        assert to_civil(to_epoch(dt)) == dt


def test_leap_day_in_year_zero_and_negative_years():
    assert to_civil(to_epoch(CivilDate(0, 2, 29))) == CivilDateTime(0, 2, 29)
    assert to_civil(to_epoch(CivilDate(-400, 2, 29))) == CivilDateTime(-400, 2, 29)
    # -100 不是闰年：2 月 28 日的次日是 3 月 1 日
    nxt = Instant(to_epoch(CivilDate(-100, 2, 28)).epoch_ms + 86_400_000)
    assert to_civil(nxt) == CivilDateTime(-100, 3, 1)


def test_month_overflow_carries_into_year():
    assert to_epoch(CivilDate(2023, 13, 1)) == to_epoch(CivilDate(2024, 1, 1))
    assert to_epoch(CivilDate(2023, 0, 1)) == to_epoch(CivilDate(2022, 12, 1))
