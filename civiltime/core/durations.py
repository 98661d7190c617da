# civiltime/core/durations.py
from __future__ import annotations

from civiltime.core.constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    MS_PER_WEEK,
)
from civiltime.core.types import Duration, Instant

ZERO = Duration(0)


def milliseconds(n: int) -> Duration:
    return Duration(n)


def seconds(n: int) -> Duration:
    return Duration(n * MS_PER_SECOND)


def minutes(n: int) -> Duration:
    return Duration(n * MS_PER_MINUTE)


def hours(n: int) -> Duration:
    return Duration(n * MS_PER_HOUR)


def days(n: int) -> Duration:
    return Duration(n * MS_PER_DAY)


def weeks(n: int) -> Duration:
    return Duration(n * MS_PER_WEEK)


def add(d1: Duration, d2: Duration) -> Duration:
    return d1 + d2


def sub(d1: Duration, d2: Duration) -> Duration:
    return d1 - d2


def add_duration(instant: Instant, duration: Duration) -> Instant:
    return instant + duration


# (上限, 单位毫秒, 后缀)，按顺序取第一个 abs < 上限 的档位
_HUMANIZE_STEPS = (
    (MS_PER_SECOND, 1, "ms"),
    (MS_PER_MINUTE, MS_PER_SECOND, "s"),
    (MS_PER_HOUR, MS_PER_MINUTE, "min"),
    (MS_PER_DAY, MS_PER_HOUR, "h"),
)


def _round_half_up(value: int, unit: int) -> int:
    return (2 * value + unit) // (2 * unit)


def humanize(d: Duration) -> str:
    """
    粗粒度可读文本：

        humanize(Duration(1500))      -> "2 s"
        humanize(Duration(-90_000))   -> "-2 min"
        humanize(days(3))             -> "3 d"
    """
    abs_ms = abs(d.ms)
    sign = "-" if d.ms < 0 else ""

    for limit, unit, suffix in _HUMANIZE_STEPS:
        if abs_ms < limit:
            return f"{sign}{_round_half_up(abs_ms, unit)} {suffix}"

    return f"{sign}{_round_half_up(abs_ms, MS_PER_DAY)} d"
