# civiltime/recurrence/sequence.py
"""
RecurrenceSequence：从 origin 出发，反复应用 step 得到的无限惰性序列。

- 第 k 个元素 = step 作用 k 次于 origin
- 每个元素只由前一个元素推出（游标 O(1) 状态），不回溯 origin、不保留历史
- 每次 iter() 都是一个新的游标，从 origin 重新开始（可重启，无共享游标）
- 同一个游标被多个消费者并发推进时顺序不保证，需要调用方自己串行化
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from itertools import islice
from typing import Iterator, List, Optional

from civiltime.calendar.stepper import STEPPERS
from civiltime.core import durations
from civiltime.core.types import CivilDateTime, Duration, ZonedValue
from civiltime.utils.errors import InvalidInputError
from civiltime.zone.resolution import ZoneResolver, get_default_resolver, wall_clock


class StepRule(ABC):
    """
    StepRule (FROZEN)

    职责：
      - 由前一个元素推出下一个元素
      - zone 始终在新 instant 上重新解析
    """

    @abstractmethod
    def advance(
        self,
        prev: ZonedValue[CivilDateTime],
        zone_id: str,
        resolver: ZoneResolver,
    ) -> ZonedValue[CivilDateTime]:
        ...


@dataclass(frozen=True)
class FixedStep(StepRule):
    """
    固定时长作用于 instant；payload 取新 instant 的墙上读数
    """

    duration: Duration

    def advance(self, prev, zone_id, resolver):
        instant = prev.instant + self.duration
        value = ZonedValue(instant, resolver.resolve(zone_id, instant), prev.payload)
        return ZonedValue(instant, value.zone, wall_clock(value))


@dataclass(frozen=True)
class CalendarStep(StepRule):
    """
    日历步进作用于 payload（见 calendar.stepper），instant 由新 payload 在 zone 内重新推出
    """

    unit: str = "months"
    n: int = 1

    def __post_init__(self) -> None:
        if self.unit not in STEPPERS:
            raise InvalidInputError(
                f"Unknown calendar unit: {self.unit!r}, expected one of {sorted(STEPPERS)}"
            )

    def advance(self, prev, zone_id, resolver):
        payload = STEPPERS[self.unit](prev.payload, self.n)
        instant = resolver.local_to_instant(zone_id, payload)
        return ZonedValue(instant, resolver.resolve(zone_id, instant), payload)


class _RecurrenceCursor:
    """
    显式状态机：唯一的可变状态是 _current
    """

    def __init__(self, origin: ZonedValue[CivilDateTime], rule: StepRule, resolver: ZoneResolver):
        self._origin = origin
        self._rule = rule
        self._resolver = resolver
        self._zone_id = origin.zone.identifier
        self._current: Optional[ZonedValue[CivilDateTime]] = None

    def __iter__(self) -> "_RecurrenceCursor":
        return self

    def __next__(self) -> ZonedValue[CivilDateTime]:
        if self._current is None:
            self._current = self._origin
        else:
            self._current = self._rule.advance(self._current, self._zone_id, self._resolver)
        return self._current


@dataclass(frozen=True)
class RecurrenceSequence:
    origin: ZonedValue[CivilDateTime]
    rule: StepRule
    resolver: Optional[ZoneResolver] = None

    def __iter__(self) -> Iterator[ZonedValue[CivilDateTime]]:
        return _RecurrenceCursor(self.origin, self.rule, self.resolver or get_default_resolver())

    def take(self, n: int) -> List[ZonedValue[CivilDateTime]]:
        return list(islice(self, n))


def recur(
    origin: ZonedValue[CivilDateTime],
    rule: StepRule,
    resolver: Optional[ZoneResolver] = None,
) -> RecurrenceSequence:
    return RecurrenceSequence(origin, rule, resolver)


# ---------------------------------------------------------------
# 常用规则
# ---------------------------------------------------------------
def every(duration: Duration) -> StepRule:
    return FixedStep(duration)


def every_day() -> StepRule:
    return FixedStep(durations.days(1))


def every_week() -> StepRule:
    return FixedStep(durations.weeks(1))


def every_month(n: int = 1) -> StepRule:
    return CalendarStep("months", n)


def every_year(n: int = 1) -> StepRule:
    return CalendarStep("years", n)
