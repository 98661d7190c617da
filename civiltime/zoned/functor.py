# civiltime/zoned/functor.py
"""
ZonedValue[A] ≅ Instant × ZoneRecord × A

map_payload 只变换 payload，instant / zone 原样保留，且永不重新解析 zone：
  map_payload(id, v) == v
  map_payload(g ∘ f, v) == map_payload(g, map_payload(f, v))
"""
from __future__ import annotations

from typing import Callable, Optional, TypeVar

from civiltime.core.constants import MS_PER_MINUTE, UTC_ZONE_ID
from civiltime.core.types import CivilDateTime, Duration, Instant, Interval, ZonedValue, ZoneRecord
from civiltime.zone.resolution import ZoneResolver, get_default_resolver

A = TypeVar("A")
B = TypeVar("B")


def zoned(instant: Instant, zone: ZoneRecord, payload: A) -> ZonedValue[A]:
    return ZonedValue(instant, zone, payload)


def map_payload(f: Callable[[A], B], value: ZonedValue[A]) -> ZonedValue[B]:
    return ZonedValue(value.instant, value.zone, f(value.payload))


def interval(start: ZonedValue[A], end: ZonedValue[A]) -> Interval[A]:
    return Interval(start, end)


def duration_of(iv: Interval) -> Duration:
    """end - start，可以为负"""
    return Duration(iv.end.instant.epoch_ms - iv.start.instant.epoch_ms)


def with_zone(
    zone_id: str,
    civil: CivilDateTime,
    resolver: Optional[ZoneResolver] = None,
) -> ZonedValue[CivilDateTime]:
    """
    把 civil 当作 zone_id 里的墙上读数，构造 ZonedValue（payload = civil）
    """
    resolver = resolver or get_default_resolver()
    instant = resolver.local_to_instant(zone_id, civil)
    return ZonedValue(instant, resolver.resolve(zone_id, instant), civil)


def to_utc(value: ZonedValue[A], resolver: Optional[ZoneResolver] = None) -> ZonedValue[A]:
    return (resolver or get_default_resolver()).convert_zone(UTC_ZONE_ID, value)


def offset_of(value: ZonedValue) -> Duration:
    return Duration(value.zone.offset_minutes * MS_PER_MINUTE)
