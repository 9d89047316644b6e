#!filepath: phisched/core/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Hashable, Sequence, Tuple

# EventSpec: 有序的事件标识符（顺序决定幂次 k）
EventSpec = Sequence[Hashable]


class OffsetPolicy(str, Enum):
    """
    两种 golden-ratio offset 生成策略（保持两者，不合并）

    CUMULATIVE_INTERVALS : 间隔按 φ 增长，offset 为间隔累加
    DIRECT_POWERS        : offset 本身为 base·φ^k
    """

    CUMULATIVE_INTERVALS = "cumulative_intervals"
    DIRECT_POWERS = "direct_powers"


@dataclass(frozen=True)
class ScheduleEntry:
    time: float         # anchor + offset（clock 原生单位）
    identifier: Any


@dataclass(frozen=True)
class SchedulePlan:
    """
    SchedulePlan（纯数据，不触碰 clock）

    - anchor   : series 起点
    - entries  : 按时间严格递增
    """

    anchor: float
    base: float
    policy: OffsetPolicy
    offsets: Tuple[float, ...]
    entries: Tuple[ScheduleEntry, ...]

    @property
    def identifiers(self) -> Tuple[Any, ...]:
        return tuple(e.identifier for e in self.entries)

    @property
    def span(self) -> float:
        """最后一个事件距 anchor 的时长；空 plan 为 0."""
        return self.offsets[-1] if self.offsets else 0.0

    def __len__(self) -> int:
        return len(self.entries)
