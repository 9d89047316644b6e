#!filepath: phisched/utils/logger.py
import os
import sys
from typing import Optional

from loguru import logger


class Logging:
    """
    phisched 日志模块
    ---------------------------------------
    - 默认输出到 stderr（库不应在 import 时写文件）
    - 指定 log_dir 后按日期切割文件
    - 支持日志保留周期
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
        self._configure()

    def _configure(self) -> None:
        """
        重置全局 logger，只保留本实例的 sink
        """
        logger.remove()

        if self.log_dir:
            logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
                enqueue=True,
                backtrace=True,
                diagnose=False,
            )
        else:
            logger.add(
                sys.stderr,
                level=self.level,
                format="{time:HH:mm:ss} | {level} | {message}",
            )

    @classmethod
    def from_config(cls, config) -> "Logging":
        """从 LogConfig 构造（替换全局 sink）"""
        return cls(
            log_dir=config.dir,
            rotation=config.rotation,
            retention=config.retention,
            log_level=config.level,
        )

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)


# 默认全局 logs（可被 Logging.from_config 替换 sink）
logs = Logging()
