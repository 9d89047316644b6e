from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, Field

from phisched.core.types import OffsetPolicy


class SchedulerConfig(BaseModel):
    """
    SchedulerConfig

    语义：
      - PhiScheduler 的默认参数
      - 单位均为 clock 原生单位（tick / beat）
    """

    # 一个 tick 的基础时长
    base: float = Field(1.0, gt=0)

    # offset 生成策略
    policy: OffsetPolicy = OffsetPolicy.CUMULATIVE_INTERVALS

    # 网格间距（4 = 4/4 拍的一小节）；None → 从 clock 当前位置开始
    grid_unit: Optional[Annotated[float, Field(gt=0)]] = 4.0


class ClockConfig(BaseModel):
    # VirtualClock 起始位置（dry run / CLI）
    start: float = 0.0
