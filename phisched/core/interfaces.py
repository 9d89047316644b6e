#!filepath: phisched/core/interfaces.py
from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable

from phisched.utils.errors import ClockUnavailable

FireCallback = Callable[[], None]


@runtime_checkable
class Clock(Protocol):
    """
    Clock Contract (Frozen)

    外部时钟能力，phisched 只依赖以下两个方法：
      - now()                    : 当前绝对位置（clock 原生单位，例如 beat）
      - schedule_at(time, cb)    : 在绝对时间 time 触发一次 cb()

    可选：
      - is_ready() -> bool       : 返回 False 时视为 ClockUnavailable

    返回值（handle）由 clock 自行定义，取消等能力也由 clock 负责。
    """

    def now(self) -> float:
        ...

    def schedule_at(self, time: float, callback: FireCallback) -> Any:
        ...


def require_clock(clock: Any) -> Clock:
    """
    校验 clock 可用，否则抛 ClockUnavailable。

    Raises
    ------
    ClockUnavailable
        clock 为 None / 不满足 Clock contract / is_ready() 为 False
    """
    if clock is None:
        raise ClockUnavailable("no clock supplied")

    if not isinstance(clock, Clock):
        raise ClockUnavailable(
            f"{type(clock).__name__} does not provide now() and schedule_at()"
        )

    is_ready = getattr(clock, "is_ready", None)
    if callable(is_ready) and not is_ready():
        raise ClockUnavailable(f"{type(clock).__name__} is not ready")

    return clock
