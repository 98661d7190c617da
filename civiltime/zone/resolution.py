# civiltime/zone/resolution.py
from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Optional, TypeVar

from civiltime.core.bijection import to_civil, to_epoch
from civiltime.core.constants import MS_PER_DAY, MS_PER_MINUTE, UTC_ZONE_ID
from civiltime.core.types import CivilDateTime, Instant, ZonedValue, ZoneRecord
from civiltime.utils.errors import UnknownZoneError
from civiltime.utils.logger import logs
from civiltime.zone.dst_classifier import is_dst_at, standard_offset
from civiltime.zone.host_clock import HostCivilClock, get_default_host_clock
from civiltime.zone.offset_resolver import offset_minutes, warn_unknown_zone

A = TypeVar("A")

UTC_FALLBACK = ZoneRecord(UTC_ZONE_ID, 0, False, UTC_ZONE_ID)


class ZoneResolver:
    """
    ZoneRecord 解析入口：offset + DST + 缩写。

    - 不认识的 zone 一律回退到 UTC_FALLBACK，不抛异常
      （recurrence 流水线不能因为一个坏名字中断）
    - validate() 给需要提前拒绝的调用方用
    - 标准时 offset 按 (zone_id, UTC 年份) 做 LRU 缓存；
      offset 只在切换点变化，标准时基线一年内不变
    """

    def __init__(self, clock: Optional[HostCivilClock] = None, cache_size: int = 1024):
        self.clock = clock or get_default_host_clock()
        self.cache_size = cache_size
        self._standard: OrderedDict[tuple[str, int], int] = OrderedDict()
        self._lock = threading.Lock()
        logs.debug(f"[ZoneResolver] clock={type(self.clock).__name__} cache_size={cache_size}")

    # ---------------------------------------------------------
    # cache
    # ---------------------------------------------------------
    def _standard_offset(self, zone_id: str, year: int) -> int:
        key = (zone_id, year)
        with self._lock:
            if key in self._standard:
                self._standard.move_to_end(key)
                return self._standard[key]

        value = standard_offset(self.clock, zone_id, year)

        with self._lock:
            self._standard[key] = value
            self._standard.move_to_end(key)
            while len(self._standard) > self.cache_size:
                self._standard.popitem(last=False)
        return value

    def cache_clear(self) -> None:
        with self._lock:
            self._standard.clear()

    # ---------------------------------------------------------
    # resolution
    # ---------------------------------------------------------
    def offset(self, zone_id: str, instant: Instant) -> int:
        try:
            return offset_minutes(self.clock, zone_id, instant)
        except UnknownZoneError:
            warn_unknown_zone(zone_id)
            return 0

    def is_dst(self, zone_id: str, instant: Instant) -> bool:
        try:
            standard = self._standard_offset(zone_id, to_civil(instant).year)
            return is_dst_at(self.clock, zone_id, instant, standard)
        except UnknownZoneError:
            warn_unknown_zone(zone_id)
            return False

    def resolve(self, zone_id: str, instant: Instant) -> ZoneRecord:
        try:
            offset = offset_minutes(self.clock, zone_id, instant)
            standard = self._standard_offset(zone_id, to_civil(instant).year)
            abbreviation = self.clock.abbreviation_for(zone_id, instant)
        except UnknownZoneError:
            warn_unknown_zone(zone_id)
            return UTC_FALLBACK
        return ZoneRecord(zone_id, offset, offset > standard, abbreviation)

    def validate(self, zone_id: str) -> bool:
        return self.clock.is_recognized_zone(zone_id)

    # ---------------------------------------------------------
    # wall clock <-> instant
    # ---------------------------------------------------------
    def local_to_instant(self, zone_id: str, civil: CivilDateTime) -> Instant:
        """
        把 zone 内的墙上读数换成 instant。

        取 civil（按 UTC 看）前后各一天的 offset 作为候选，逐个复核：
          - 重叠区（秋季回拨）两个 instant 都合法，取较早的那个（同 fold=0）
          - gap（春季跳过）里不存在的读数按 gap 长度往后推
        与 zone 在 UTC 东侧还是西侧无关。
        """
        guess = to_epoch(civil).epoch_ms
        offsets = {
            self.offset(zone_id, Instant(guess - MS_PER_DAY)),
            self.offset(zone_id, Instant(guess + MS_PER_DAY)),
        }
        candidates = [guess - off * MS_PER_MINUTE for off in offsets]

        valid = [
            c for c in candidates
            if guess - self.offset(zone_id, Instant(c)) * MS_PER_MINUTE == c
        ]
        if valid:
            return Instant(min(valid))

        # gap
        return Instant(max(candidates))

    def convert_zone(self, new_zone_id: str, value: ZonedValue[A]) -> ZonedValue[A]:
        """
        instant 不变，只在同一 instant 上重新解析 zone（显示随之变化）
        """
        return ZonedValue(value.instant, self.resolve(new_zone_id, value.instant), value.payload)

    def retarget_local(self, new_zone_id: str, value: ZonedValue[A]) -> ZonedValue[A]:
        """
        墙上读数不变，换一个 zone 重新贴标签：instant 按新旧 offset 差平移。

        新 offset 在目标 instant 上解析，跨 DST 边界时也正确。
        """
        wall = wall_clock(value)
        instant = self.local_to_instant(new_zone_id, wall)
        return ZonedValue(instant, self.resolve(new_zone_id, instant), value.payload)


def wall_clock(value: ZonedValue) -> CivilDateTime:
    """value 所在 zone 的墙上读数（使用已解析的 offset，不重新解析）"""
    return to_civil(Instant(value.instant.epoch_ms + value.zone.offset_minutes * MS_PER_MINUTE))


# ================================================================
# 默认 resolver + 模块级快捷函数
# ================================================================
_default_resolver: Optional[ZoneResolver] = None


def get_default_resolver() -> ZoneResolver:
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = ZoneResolver()
    return _default_resolver


def set_default_resolver(resolver: Optional[ZoneResolver]) -> None:
    """None = 下次使用时按默认 HostCivilClock 重建"""
    global _default_resolver
    _default_resolver = resolver


def resolve(zone_id: str, instant: Instant) -> ZoneRecord:
    return get_default_resolver().resolve(zone_id, instant)


def validate(zone_id: str) -> bool:
    return get_default_resolver().validate(zone_id)


def convert_zone(new_zone_id: str, value: ZonedValue[A]) -> ZonedValue[A]:
    return get_default_resolver().convert_zone(new_zone_id, value)


def retarget_local(new_zone_id: str, value: ZonedValue[A]) -> ZonedValue[A]:
    return get_default_resolver().retarget_local(new_zone_id, value)


def local_to_instant(zone_id: str, civil: CivilDateTime) -> Instant:
    return get_default_resolver().local_to_instant(zone_id, civil)
