#!filepath: phisched/config/app_config.py
import os
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from phisched.utils.errors import ConfigError
from .log_config import LogConfig
from .scheduler_config import ClockConfig, SchedulerConfig


def package_root() -> str:
    """
    返回包目录（基于当前文件位置推导）:
    phisched/config/app_config.py → phisched/config → phisched
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def default_config_path() -> str:
    return os.path.join(package_root(), "config", "base.yml")


# env → (section, key, cast)
_ENV_OVERRIDES = {
    "PHISCHED_LOG_LEVEL": ("log", "level", str),
    "PHISCHED_POLICY": ("scheduler", "policy", str),
    "PHISCHED_BASE": ("scheduler", "base", float),
    "PHISCHED_GRID_UNIT": ("scheduler", "grid_unit", float),
}


def _apply_env_overrides(raw: Dict[str, Any]) -> Dict[str, Any]:
    for env, (section, key, cast) in _ENV_OVERRIDES.items():
        value = os.getenv(env)
        if value is None or value.strip() == "":
            continue
        try:
            raw.setdefault(section, {})[key] = cast(value.strip())
        except ValueError as e:
            raise ConfigError(f"{env}={value!r} is not a valid {cast.__name__}") from e
    return raw


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    scheduler: SchedulerConfig = Field(default_factory=SchedulerConfig)
    clock: ClockConfig = Field(default_factory=ClockConfig)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 phisched/config/base.yml
        - 当前工作目录下的 .env 可覆盖 PHISCHED_* 变量
        """
        # 1) 先加载 .env（不覆盖已有环境变量）
        load_dotenv(os.path.join(os.getcwd(), ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise ConfigError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            try:
                raw = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config root must be a mapping: {path}")

        # 4) env 覆盖
        raw = _apply_env_overrides(raw)

        try:
            return cls(**raw)
        except ValidationError as e:
            raise ConfigError(f"Invalid config {path}:\n{e}") from e
