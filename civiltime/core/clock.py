# civiltime/core/clock.py
from __future__ import annotations

import time
from typing import Optional, Protocol

from civiltime.core.types import Duration, Instant


class Clock(Protocol):
    """可注入的当前时间来源"""

    def now(self) -> Instant:
        ...


class SystemClock:
    def now(self) -> Instant:
        return Instant(time.time_ns() // 1_000_000)


class FixedClock:
    """
    测试用：返回固定 instant

        clock = FixedClock(Instant(0))
        clock.advance(durations.days(1))
    """

    def __init__(self, fixed: Instant) -> None:
        self._fixed = fixed

    def now(self) -> Instant:
        return self._fixed

    def advance(self, d: Duration) -> None:
        self._fixed = self._fixed + d


_default_clock: Clock = SystemClock()


def set_default_clock(clock: Clock) -> None:
    global _default_clock
    _default_clock = clock


def get_default_clock() -> Clock:
    return _default_clock


def now(clock: Optional[Clock] = None) -> Instant:
    return (clock or _default_clock).now()
