#!filepath: phisched/core/grid.py
from __future__ import annotations

import math

from phisched.core.interfaces import require_clock
from phisched.core.offsets import require_positive

# 距网格点在此范围内视为“正好落在网格上”
_ON_GRID_TOL = 1e-12


def next_boundary(position: float, grid_unit: float) -> float:
    """
    严格大于 position 的下一个 grid_unit 整数倍。

    position 正好在网格上时前进到下一个点（保证 forward progress，
    不会调度到过去）。
    """
    grid_unit = require_positive("grid_unit", grid_unit)

    # 容差按格子大小缩放，且不小于 position 自身的浮点分辨率
    tol = max(_ON_GRID_TOL * grid_unit, 4 * math.ulp(position))

    k = math.floor(position / grid_unit) + 1
    anchor = k * grid_unit

    # 浮点除法可能把 12/4 算成 2.9999...，补一个格
    if anchor - position <= tol:
        k += 1
        anchor = k * grid_unit
    # 反方向：商被向上舍入时退一格
    elif anchor - grid_unit > position + tol:
        k -= 1
        anchor = k * grid_unit

    return anchor


def anchor_to_grid(grid_unit: float, clock) -> float:
    """
    读取 clock 当前位置，返回下一个网格边界（如下一小节）。

    Raises
    ------
    InvalidArgument
        grid_unit <= 0
    ClockUnavailable
        clock 不可用
    """
    grid_unit = require_positive("grid_unit", grid_unit)
    clock = require_clock(clock)
    return next_boundary(float(clock.now()), grid_unit)
