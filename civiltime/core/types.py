# civiltime/core/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

A = TypeVar("A")


# ================================================================
# Instant / Duration
# ================================================================
@dataclass(frozen=True, order=True)
class Instant:
    """
    绝对时间点：UTC 纪元以来的整数毫秒。与时区无关。
    """

    epoch_ms: int

    def __add__(self, other: "Duration") -> "Instant":
        if isinstance(other, Duration):
            return Instant(self.epoch_ms + other.ms)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Instant):
            return Duration(self.epoch_ms - other.epoch_ms)
        if isinstance(other, Duration):
            return Instant(self.epoch_ms - other.ms)
        return NotImplemented


@dataclass(frozen=True, order=True)
class Duration:
    """
    有符号毫秒数。加法构成交换群，单位元 Duration(0)。
    """

    ms: int

    def __add__(self, other: "Duration") -> "Duration":
        if isinstance(other, Duration):
            return Duration(self.ms + other.ms)
        return NotImplemented

    def __sub__(self, other: "Duration") -> "Duration":
        if isinstance(other, Duration):
            return Duration(self.ms - other.ms)
        return NotImplemented

    def __neg__(self) -> "Duration":
        return Duration(-self.ms)


# ================================================================
# Civil values（构造时不校验合法性）
# ================================================================
@dataclass(frozen=True)
class CivilDate:
    year: int
    month: int   # 1..12
    day: int     # 1..days_in_month


@dataclass(frozen=True)
class CivilTime:
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0


@dataclass(frozen=True)
class CivilDateTime:
    """
    日历日期 + 墙上时间。本身不携带时区语义。
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    @classmethod
    def combine(cls, d: CivilDate, t: Optional[CivilTime] = None) -> "CivilDateTime":
        t = t or CivilTime()
        return cls(d.year, d.month, d.day, t.hour, t.minute, t.second, t.millisecond)

    def date(self) -> CivilDate:
        return CivilDate(self.year, self.month, self.day)

    def time(self) -> CivilTime:
        return CivilTime(self.hour, self.minute, self.second, self.millisecond)


# ================================================================
# Zone
# ================================================================
@dataclass(frozen=True)
class ZoneRecord:
    """
    针对某一个 instant 解析出来的时区信息，不是标识符的固定属性。
    """

    identifier: str
    offset_minutes: int          # east of UTC
    is_dst: bool
    abbreviation: Optional[str] = None


@dataclass(frozen=True)
class ZonedValue(Generic[A]):
    instant: Instant
    zone: ZoneRecord
    payload: A


@dataclass(frozen=True)
class Interval(Generic[A]):
    # 不要求 start <= end
    start: ZonedValue[A]
    end: ZonedValue[A]
