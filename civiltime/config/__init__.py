from .app_config import AppConfig
from .log_config import LogConfig
from .zone_config import ZoneConfig

__all__ = ["AppConfig", "LogConfig", "ZoneConfig"]
