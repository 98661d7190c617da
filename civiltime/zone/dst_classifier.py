# civiltime/zone/dst_classifier.py
"""
DST 判定（启发式）：

  - 取同一 UTC 年份的 1 月 1 日与 7 月 1 日作为参考点
  - 两者 offset 的最小值视为标准时（DST 总是比标准时更靠东，南北半球都成立）
  - offset(instant) > 标准时 即为 DST

假设一年内至多一对 DST 切换。
"""
from __future__ import annotations

from typing import Optional

from civiltime.core.bijection import to_civil, to_epoch
from civiltime.core.types import CivilDate, Instant
from civiltime.utils.errors import UnknownZoneError
from civiltime.zone.host_clock import HostCivilClock, get_default_host_clock
from civiltime.zone.offset_resolver import offset_minutes, warn_unknown_zone


def reference_instants(year: int) -> tuple[Instant, Instant]:
    return to_epoch(CivilDate(year, 1, 1)), to_epoch(CivilDate(year, 7, 1))


def standard_offset(clock: HostCivilClock, zone_id: str, year: int) -> int:
    winter, summer = reference_instants(year)
    return min(
        offset_minutes(clock, zone_id, winter),
        offset_minutes(clock, zone_id, summer),
    )


def is_dst_at(
    clock: HostCivilClock,
    zone_id: str,
    instant: Instant,
    standard: Optional[int] = None,
) -> bool:
    """
    严格版本。standard 可由调用方传入（缓存命中时），否则现算。
    """
    if standard is None:
        standard = standard_offset(clock, zone_id, to_civil(instant).year)
    return offset_minutes(clock, zone_id, instant) > standard


def classify_dst(zone_id: str, instant: Instant, clock: Optional[HostCivilClock] = None) -> bool:
    try:
        return is_dst_at(clock or get_default_host_clock(), zone_id, instant)
    except UnknownZoneError:
        warn_unknown_zone(zone_id)
        return False
