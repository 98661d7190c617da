# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from civiltime.calendar.stepper import set_week_start
from civiltime.zone.host_clock import FixedOffsetClock, FixedZone
from civiltime.zone.resolution import ZoneResolver, set_default_resolver


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


@pytest.fixture(autouse=True)
def reset_defaults():
    """configure() 会改全局默认值，每个用例结束后复原"""
    yield
    set_default_resolver(None)
    set_week_start(1)


@pytest.fixture
def fixed_clock() -> FixedOffsetClock:
    """
    确定性时区表：
      Test/Plus2  : 固定 +02:00
      Test/North  : 标准 -05:00，4..10 月 DST -04:00（北半球）
      Test/South  : 标准 +10:00，10..12/1..3 月 DST +11:00（南半球）
    """
    return FixedOffsetClock({
        "Test/Plus2": FixedZone(120, "P2"),
        "Test/North": FixedZone(-300, "NST", -240, frozenset(range(4, 11)), "NDT"),
        "Test/South": FixedZone(600, "SST", 660, frozenset({10, 11, 12, 1, 2, 3}), "SDT"),
    })


@pytest.fixture
def fixed_resolver(fixed_clock) -> ZoneResolver:
    return ZoneResolver(clock=fixed_clock, cache_size=16)
