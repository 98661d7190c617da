#!filepath: civiltime/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from civiltime.config.log_config import LogConfig
from civiltime.config.zone_config import ZoneConfig
from civiltime.utils.errors import InvalidInputError
from civiltime.utils.logger import logs


def package_root() -> str:
    """
    civiltime/config/app_config.py → civiltime/config → civiltime
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


# 环境变量 → (section, key)
_ENV_OVERRIDES = {
    "CIVILTIME_LOG_LEVEL": ("log", "level"),
    "CIVILTIME_LOG_DIR": ("log", "dir"),
}


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    zone: ZoneConfig = ZoneConfig()

    @classmethod
    @logs.catch("failed to load civiltime config")
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 civiltime/config/base.yml
        - .env 从当前工作目录读取（不存在则忽略）
        - 环境变量覆盖 YAML
        """
        load_dotenv(os.path.join(os.getcwd(), ".env"))

        if path is None:
            path = os.path.join(package_root(), "config", "base.yml")

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        for env_key, (section, key) in _ENV_OVERRIDES.items():
            value = os.getenv(env_key)
            if value:
                raw.setdefault(section, {})[key] = value

        try:
            return cls(**raw)
        except ValidationError as e:
            raise InvalidInputError(f"Invalid config {path}: {e}") from e
