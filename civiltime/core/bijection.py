# civiltime/core/bijection.py
"""
Epoch <-> Civil 双向换算（UTC，proleptic Gregorian）。

纯整数运算，不经过 datetime，因此对任意 int 都成立：
1970 年之前、公元前（year <= 0）、year > 9999 都可以。
"""
from __future__ import annotations

from typing import Union

from civiltime.core.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_400Y,
    EPOCH_SHIFT_DAYS,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    YEARS_PER_CYCLE,
)
from civiltime.core.types import CivilDate, CivilDateTime, Instant


def is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap(year):
        return 29
    return DAYS_IN_MONTH[month]


# ================================================================
# 日序号 <-> (y, m, d)
# 以 3 月为年首，闰日落在年末，400 年一个周期
# ================================================================
def days_from_civil(year: int, month: int, day: int) -> int:
    """
    1970-01-01 为第 0 天。month 越界时按进位处理（13 月 = 次年 1 月），
    day 越界时线性累加。
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1

    y = year - 1 if month <= 2 else year
    era = y // YEARS_PER_CYCLE
    yoe = y - era * YEARS_PER_CYCLE                      # [0, 399]
    mp = (month + 9) % 12                                # March = 0
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * DAYS_PER_400Y + doe - EPOCH_SHIFT_DAYS


def civil_from_days(days: int) -> tuple[int, int, int]:
    z = days + EPOCH_SHIFT_DAYS
    era = z // DAYS_PER_400Y
    doe = z - era * DAYS_PER_400Y                        # [0, 146096]
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)      # [0, 365]
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * YEARS_PER_CYCLE + (1 if month <= 2 else 0)
    return year, month, day


# ================================================================
# Instant <-> CivilDateTime
# ================================================================
def to_epoch(value: Union[CivilDateTime, CivilDate]) -> Instant:
    """CivilDate 视为当天 00:00:00.000"""
    days = days_from_civil(value.year, value.month, value.day)
    if isinstance(value, CivilDate):
        return Instant(days * MS_PER_DAY)

    ms = (
        days * MS_PER_DAY
        + value.hour * MS_PER_HOUR
        + value.minute * MS_PER_MINUTE
        + value.second * MS_PER_SECOND
        + value.millisecond
    )
    return Instant(ms)


def to_civil(instant: Instant) -> CivilDateTime:
    days, rem = divmod(instant.epoch_ms, MS_PER_DAY)
    hour, rem = divmod(rem, MS_PER_HOUR)
    minute, rem = divmod(rem, MS_PER_MINUTE)
    second, millisecond = divmod(rem, MS_PER_SECOND)

    year, month, day = civil_from_days(days)
    return CivilDateTime(year, month, day, hour, minute, second, millisecond)
