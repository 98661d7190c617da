#!filepath: civiltime/config/zone_config.py
from pydantic import BaseModel, Field


class ZoneConfig(BaseModel):
    week_starts_on: int = Field(default=1, ge=1, le=7)   # 1=Monday .. 7=Sunday
    cache_size: int = Field(default=1024, ge=1)          # 标准时基线 LRU 容量
