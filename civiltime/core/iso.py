# civiltime/core/iso.py
from __future__ import annotations

import re

from civiltime.core.bijection import days_in_month, to_civil, to_epoch
from civiltime.core.constants import MS_PER_MINUTE
from civiltime.core.types import CivilDateTime, Instant
from civiltime.utils.errors import InvalidInputError

_ISO_RE = re.compile(
    r"""
    ^(?P<year>[+-]\d{6}|\d{4})-(?P<month>\d{2})-(?P<day>\d{2})
    (?:
        [T\ ](?P<hour>\d{2}):(?P<minute>\d{2})
        (?::(?P<second>\d{2})(?:[.,](?P<fraction>\d{1,9}))?)?
        (?P<offset>Z|[+-]\d{2}:?\d{2})?
    )?$
    """,
    re.VERBOSE,
)


def _format_year(year: int) -> str:
    if 0 <= year <= 9999:
        return f"{year:04d}"
    sign = "-" if year < 0 else "+"
    return f"{sign}{abs(year):06d}"


def to_iso_string(instant: Instant) -> str:
    """
    YYYY-MM-DDTHH:mm:ss.sssZ，超出 0..9999 的年份用 ±YYYYYY 扩展格式
    """
    c = to_civil(instant)
    return (
        f"{_format_year(c.year)}-{c.month:02d}-{c.day:02d}"
        f"T{c.hour:02d}:{c.minute:02d}:{c.second:02d}.{c.millisecond:03d}Z"
    )


def _parse_offset_minutes(text: str) -> int:
    if text == "Z":
        return 0
    sign = -1 if text[0] == "-" else 1
    digits = text[1:].replace(":", "")
    hh, mm = int(digits[:2]), int(digits[2:])
    if hh > 23 or mm > 59:
        raise InvalidInputError(f"Invalid ISO offset: {text}")
    return sign * (hh * 60 + mm)


def parse_iso(text: str) -> Instant:
    """
    解析 ISO-8601 文本为 Instant。

    - 纯日期按 UTC 00:00 处理
    - 不带 offset 的日期时间也按 UTC 处理
    - 小数秒只保留到毫秒（截断）
    """
    m = _ISO_RE.match(text.strip())
    if m is None:
        raise InvalidInputError(f"Invalid ISO string: {text}")

    year = int(m["year"])
    month = int(m["month"])
    day = int(m["day"])
    hour = int(m["hour"] or 0)
    minute = int(m["minute"] or 0)
    second = int(m["second"] or 0)
    millisecond = int((m["fraction"] or "0").ljust(3, "0")[:3])

    if not 1 <= month <= 12 or not 1 <= day <= days_in_month(year, month):
        raise InvalidInputError(f"Invalid ISO date: {text}")
    if hour > 23 or minute > 59 or second > 59:
        raise InvalidInputError(f"Invalid ISO time: {text}")

    offset = _parse_offset_minutes(m["offset"]) if m["offset"] else 0
    local = to_epoch(CivilDateTime(year, month, day, hour, minute, second, millisecond))
    return Instant(local.epoch_ms - offset * MS_PER_MINUTE)
