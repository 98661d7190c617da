# civiltime/zone/host_clock.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import FrozenSet, Mapping, Optional, Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from civiltime.core.bijection import to_civil, to_epoch
from civiltime.core.constants import DAYS_PER_400Y, MS_PER_DAY, MS_PER_MINUTE, UTC_ZONE_ID, YEARS_PER_CYCLE
from civiltime.core.types import CivilDate, CivilDateTime, Instant
from civiltime.utils.errors import UnknownZoneError
from civiltime.utils.logger import logs


class HostCivilClock(Protocol):
    """
    HostCivilClock Contract (Frozen)

    唯一职责：
      - 给定 zone_id + instant，报告该时区墙上时钟的读数
      - 判断 zone_id 是否可识别
      - 提供缩写（EST / CEST ...）

    内部不解析任何 transition 表，作为 oracle 使用。
    """

    def civil_time_in(self, zone_id: str, instant: Instant) -> CivilDateTime:
        """
        Raises
        ------
        UnknownZoneError
            zone_id 不可识别
        """
        ...

    def is_recognized_zone(self, zone_id: str) -> bool:
        ...

    def abbreviation_for(self, zone_id: str, instant: Instant) -> Optional[str]:
        ...


# ================================================================
# 生产实现：stdlib zoneinfo（系统 tzdb，缺失时回落到 tzdata 包）
# ================================================================
_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_CYCLE_MS = DAYS_PER_400Y * MS_PER_DAY

# datetime 只支持 1..9999 年，两端各留一年给 offset
_SAFE_LO_MS = to_epoch(CivilDate(2, 1, 1)).epoch_ms
_SAFE_HI_MS = to_epoch(CivilDate(9998, 1, 1)).epoch_ms


class ZoneInfoClock:
    """
    基于 zoneinfo 的 HostCivilClock。

    datetime 可表示范围之外的 instant 按整 400 年周期平移进来再平移回去；
    公历以 400 年为周期完全重复，所以读数的月/日/时分秒不变。
    """

    def _load(self, zone_id: str) -> ZoneInfo:
        if not isinstance(zone_id, str) or not zone_id:
            raise UnknownZoneError(str(zone_id))
        try:
            return ZoneInfo(zone_id)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise UnknownZoneError(zone_id) from e

    def _local(self, zone_id: str, instant: Instant) -> tuple[datetime, int]:
        tz = self._load(zone_id)

        ms = instant.epoch_ms
        cycles = 0
        if ms < _SAFE_LO_MS:
            cycles = -(-(_SAFE_LO_MS - ms) // _CYCLE_MS)
        elif ms >= _SAFE_HI_MS:
            cycles = -((ms - _SAFE_HI_MS) // _CYCLE_MS + 1)

        if cycles:
            logs.debug(f"[ZoneInfoClock] fold instant={ms} cycles={cycles}")
            ms += cycles * _CYCLE_MS

        local = (_UNIX_EPOCH + timedelta(milliseconds=ms)).astimezone(tz)
        return local, cycles

    def civil_time_in(self, zone_id: str, instant: Instant) -> CivilDateTime:
        local, cycles = self._local(zone_id, instant)
        return CivilDateTime(
            local.year - cycles * YEARS_PER_CYCLE,
            local.month,
            local.day,
            local.hour,
            local.minute,
            local.second,
            local.microsecond // 1000,
        )

    def is_recognized_zone(self, zone_id: str) -> bool:
        try:
            self._load(zone_id)
        except UnknownZoneError:
            return False
        return True

    def abbreviation_for(self, zone_id: str, instant: Instant) -> Optional[str]:
        local, _ = self._local(zone_id, instant)
        return local.tzname()


# ================================================================
# 测试替身：固定 offset 表（确定性，不依赖系统 tzdb）
# ================================================================
@dataclass(frozen=True)
class FixedZone:
    """
    standard_minutes: 标准时 offset（east of UTC）
    dst_minutes / dst_months: 可选，UTC 月份落在 dst_months 内时使用 dst_minutes
    """

    standard_minutes: int
    abbreviation: Optional[str] = None
    dst_minutes: Optional[int] = None
    dst_months: FrozenSet[int] = field(default_factory=frozenset)
    dst_abbreviation: Optional[str] = None


class FixedOffsetClock:
    """
    Usage:
        clock = FixedOffsetClock({
            "Test/Plus2": FixedZone(120, "P2"),
            "Test/North": FixedZone(-300, "NST", -240, frozenset(range(4, 11)), "NDT"),
        })
    """

    def __init__(self, zones: Mapping[str, FixedZone]):
        self._zones = {UTC_ZONE_ID: FixedZone(0, UTC_ZONE_ID), **zones}

    def _zone(self, zone_id: str) -> FixedZone:
        try:
            return self._zones[zone_id]
        except (KeyError, TypeError) as e:
            raise UnknownZoneError(str(zone_id)) from e

    def _in_dst(self, z: FixedZone, instant: Instant) -> bool:
        return z.dst_minutes is not None and to_civil(instant).month in z.dst_months

    def _offset(self, zone_id: str, instant: Instant) -> int:
        z = self._zone(zone_id)
        return z.dst_minutes if self._in_dst(z, instant) else z.standard_minutes

    def civil_time_in(self, zone_id: str, instant: Instant) -> CivilDateTime:
        return to_civil(Instant(instant.epoch_ms + self._offset(zone_id, instant) * MS_PER_MINUTE))

    def is_recognized_zone(self, zone_id: str) -> bool:
        return zone_id in self._zones

    def abbreviation_for(self, zone_id: str, instant: Instant) -> Optional[str]:
        z = self._zone(zone_id)
        if self._in_dst(z, instant):
            return z.dst_abbreviation
        return z.abbreviation


_default_host_clock: HostCivilClock = ZoneInfoClock()


def set_default_host_clock(clock: HostCivilClock) -> None:
    """替换默认 HostCivilClock（测试 / 自定义 tz 数据源）"""
    global _default_host_clock
    _default_host_clock = clock


def get_default_host_clock() -> HostCivilClock:
    return _default_host_clock
