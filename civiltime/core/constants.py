# civiltime/core/constants.py
from __future__ import annotations

# 毫秒换算
MS_PER_SECOND: int = 1_000
MS_PER_MINUTE: int = 60 * MS_PER_SECOND
MS_PER_HOUR: int = 60 * MS_PER_MINUTE
MS_PER_DAY: int = 24 * MS_PER_HOUR  # 86_400_000
MS_PER_WEEK: int = 7 * MS_PER_DAY

# 平年每月天数，1-indexed
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # placeholder
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# 公历 400 年周期
DAYS_PER_400Y: int = 146_097
YEARS_PER_CYCLE: int = 400

# 1970-01-01 距 0000-03-01 的天数（以 3 月为年首的纪元换算）
EPOCH_SHIFT_DAYS: int = 719_468

UTC_ZONE_ID: str = "UTC"
