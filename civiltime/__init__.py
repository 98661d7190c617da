#!filepath: civiltime/__init__.py

from .utils.logger import Logging, logs
from .utils.errors import CivilTimeError, InvalidInputError, UnknownZoneError
from .config.app_config import AppConfig

from .core.types import (
    CivilDate,
    CivilDateTime,
    CivilTime,
    Duration,
    Instant,
    Interval,
    ZonedValue,
    ZoneRecord,
)
from .core.bijection import days_in_month, is_leap, to_civil, to_epoch
from .core import durations
from .core.durations import add_duration, humanize
from .core.iso import parse_iso, to_iso_string
from .core.clock import FixedClock, SystemClock, now

from .calendar.stepper import (
    add_days,
    add_hours,
    add_milliseconds,
    add_minutes,
    add_months,
    add_seconds,
    add_years,
    day_of_week,
    start_of_week,
)

from .zone.host_clock import FixedOffsetClock, FixedZone, HostCivilClock, ZoneInfoClock
from .zone.offset_resolver import resolve_offset
from .zone.dst_classifier import classify_dst
from .zone.resolution import (
    UTC_FALLBACK,
    ZoneResolver,
    convert_zone,
    local_to_instant,
    resolve,
    retarget_local,
    validate,
    wall_clock,
)

from .zoned.functor import duration_of, interval, map_payload, offset_of, to_utc, with_zone, zoned
from .recurrence.sequence import (
    CalendarStep,
    FixedStep,
    RecurrenceSequence,
    every,
    every_day,
    every_month,
    every_week,
    every_year,
    recur,
)
from .bootstrap import configure

__all__ = [
    "logs", "Logging",
    "CivilTimeError", "InvalidInputError", "UnknownZoneError",
    "AppConfig", "configure",
    "Instant", "Duration", "CivilDate", "CivilTime", "CivilDateTime",
    "ZoneRecord", "ZonedValue", "Interval",
    "is_leap", "days_in_month", "to_epoch", "to_civil",
    "durations", "add_duration", "humanize",
    "parse_iso", "to_iso_string",
    "now", "SystemClock", "FixedClock",
    "add_years", "add_months", "add_days", "add_hours",
    "add_minutes", "add_seconds", "add_milliseconds",
    "day_of_week", "start_of_week",
    "HostCivilClock", "ZoneInfoClock", "FixedOffsetClock", "FixedZone",
    "resolve_offset", "classify_dst",
    "ZoneResolver", "UTC_FALLBACK",
    "resolve", "validate", "convert_zone", "retarget_local", "local_to_instant", "wall_clock",
    "zoned", "map_payload", "interval", "duration_of", "with_zone", "to_utc", "offset_of",
    "RecurrenceSequence", "FixedStep", "CalendarStep", "recur",
    "every", "every_day", "every_week", "every_month", "every_year",
]
