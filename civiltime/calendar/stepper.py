# civiltime/calendar/stepper.py
"""
CalendarStepper：对 CivilDate / CivilDateTime 做不会越界的日历加减。

- add_years / add_months：按字段走，日期夹到目标月最后一天（截断，不进位）
- add_days 及更细粒度：走 epoch 毫秒运算，自然跨月 / 跨年
- 输入是 CivilDate 返回 CivilDate，输入是 CivilDateTime 返回 CivilDateTime

所有函数都是全函数，合法输入永远不会产生非法日期。
"""
from __future__ import annotations

from dataclasses import replace
from typing import Optional, TypeVar, Union

from civiltime.core.bijection import days_from_civil, days_in_month, to_civil, to_epoch
from civiltime.core.constants import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND
from civiltime.core.types import CivilDate, CivilDateTime, Instant

C = TypeVar("C", CivilDate, CivilDateTime)

_week_starts_on: int = 1


def set_week_start(day: int) -> None:
    """start_of_week 未显式传 week_starts_on 时使用（1=Monday .. 7=Sunday）"""
    global _week_starts_on
    _week_starts_on = day


def get_week_start() -> int:
    return _week_starts_on


# ================================================================
# 字段运算
# ================================================================
def add_years(value: C, n: int) -> C:
    """
    只动 year 字段；2 月 29 日落到平年时夹到 28 日，与 add_months 一致。
    """
    year = value.year + n
    return replace(value, year=year, day=min(value.day, days_in_month(year, value.month)))


def add_months(value: C, n: int) -> C:
    total = value.year * 12 + (value.month - 1) + n
    year, month0 = divmod(total, 12)
    month = month0 + 1
    return replace(value, year=year, month=month, day=min(value.day, days_in_month(year, month)))


# ================================================================
# instant 运算
# ================================================================
def _shift_ms(value: C, delta_ms: int) -> C:
    civil = to_civil(Instant(to_epoch(value).epoch_ms + delta_ms))
    if isinstance(value, CivilDate):
        return civil.date()
    return civil


def add_days(value: C, n: int) -> C:
    return _shift_ms(value, n * MS_PER_DAY)


def add_hours(value: C, n: int) -> C:
    return _shift_ms(value, n * MS_PER_HOUR)


def add_minutes(value: C, n: int) -> C:
    return _shift_ms(value, n * MS_PER_MINUTE)


def add_seconds(value: C, n: int) -> C:
    return _shift_ms(value, n * MS_PER_SECOND)


def add_milliseconds(value: C, n: int) -> C:
    return _shift_ms(value, n)


# ================================================================
# 星期
# ================================================================
def _weekday_sunday_based(value: Union[CivilDate, CivilDateTime]) -> int:
    """0=Sunday .. 6=Saturday；1970-01-01 是星期四"""
    return (days_from_civil(value.year, value.month, value.day) + 4) % 7


def day_of_week(value: Union[CivilDate, CivilDateTime]) -> int:
    """1=Monday .. 7=Sunday"""
    d = _weekday_sunday_based(value)
    return 7 if d == 0 else d


def start_of_week(value: C, week_starts_on: Optional[int] = None) -> C:
    if week_starts_on is None:
        week_starts_on = _week_starts_on
    diff = (day_of_week(value) - week_starts_on + 7) % 7
    return add_days(value, -diff)


# ---------------------------------------------------------------
# unit 名 → 函数，供 recurrence 的 CalendarStep 查表
# ---------------------------------------------------------------
STEPPERS = {
    "years": add_years,
    "months": add_months,
    "days": add_days,
    "hours": add_hours,
    "minutes": add_minutes,
    "seconds": add_seconds,
    "milliseconds": add_milliseconds,
}
