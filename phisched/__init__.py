#!filepath: phisched/__init__.py

from .utils.logger import Logging, logs
from .utils.errors import (
    PhiSchedError,
    InvalidArgument,
    LengthMismatch,
    ClockUnavailable,
    ConfigError,
)
from .core.ratio import PHI, INV_PHI
from .core.types import OffsetPolicy, ScheduleEntry, SchedulePlan
from .core.interfaces import Clock
from .core.offsets import generate_offsets
from .core.grid import anchor_to_grid
from .core.scheduler import PhiScheduler, plan_series, schedule_series
from .clock.virtual import VirtualClock
from .config.app_config import AppConfig

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging",
    "PhiSchedError", "InvalidArgument", "LengthMismatch",
    "ClockUnavailable", "ConfigError",
    "PHI", "INV_PHI",
    "OffsetPolicy", "ScheduleEntry", "SchedulePlan",
    "Clock",
    "generate_offsets", "anchor_to_grid",
    "PhiScheduler", "plan_series", "schedule_series",
    "VirtualClock",
    "AppConfig",
]
