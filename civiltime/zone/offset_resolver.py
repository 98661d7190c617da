# civiltime/zone/offset_resolver.py
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from civiltime.core.bijection import to_epoch
from civiltime.core.constants import MS_PER_MINUTE
from civiltime.core.types import Instant
from civiltime.utils.errors import UnknownZoneError
from civiltime.utils.logger import logs
from civiltime.zone.host_clock import HostCivilClock, get_default_host_clock

# 告警去重的容量上限；超出后最久未出现的 zone_id 可能再次告警
WARN_CACHE_SIZE = 256


@lru_cache(maxsize=WARN_CACHE_SIZE)
def _warn_once(zone_id: str) -> None:
    logs.warning(f"[ZoneResolver] unknown zone={zone_id!r}, fallback to UTC")


def warn_unknown_zone(zone_id: str) -> None:
    """同一个 zone_id 只告警一次（有界）"""
    _warn_once(str(zone_id))


def offset_minutes(clock: HostCivilClock, zone_id: str, instant: Instant) -> int:
    """
    严格版本：zone 墙上读数与 UTC 读数各自走 to_epoch，差值取整到分钟。

    east of UTC 为正：New York 冬令时 = -300。

    Raises
    ------
    UnknownZoneError
    """
    local = to_epoch(clock.civil_time_in(zone_id, instant)).epoch_ms
    utc = to_epoch(clock.civil_time_in("UTC", instant)).epoch_ms
    # LMT 之类带秒的 offset，四舍五入到分钟
    return (local - utc + MS_PER_MINUTE // 2) // MS_PER_MINUTE


def resolve_offset(zone_id: str, instant: Instant, clock: Optional[HostCivilClock] = None) -> int:
    """
    fail-soft：不认识的 zone 返回 0，不抛异常
    """
    try:
        return offset_minutes(clock or get_default_host_clock(), zone_id, instant)
    except UnknownZoneError:
        warn_unknown_zone(zone_id)
        return 0
