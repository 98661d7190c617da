# civiltime/bootstrap.py
from typing import Optional

from civiltime.calendar.stepper import set_week_start
from civiltime.config.app_config import AppConfig
from civiltime.utils.logger import init_logging, logs
from civiltime.zone.resolution import ZoneResolver, set_default_resolver


def configure(cfg: Optional[AppConfig] = None) -> AppConfig:
    """
    应用配置：日志 sink、默认 ZoneResolver（缓存容量）、默认周起始日。
    cfg 为 None 时从 base.yml 加载。
    """
    cfg = cfg or AppConfig.load()

    init_logging(cfg.log)
    set_default_resolver(ZoneResolver(cache_size=cfg.zone.cache_size))
    set_week_start(cfg.zone.week_starts_on)

    logs.info(
        f"[civiltime] configured level={cfg.log.level} "
        f"cache_size={cfg.zone.cache_size} week_starts_on={cfg.zone.week_starts_on}"
    )
    return cfg
