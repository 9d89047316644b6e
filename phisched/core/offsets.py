#!filepath: phisched/core/offsets.py
from __future__ import annotations

import math
from numbers import Integral, Real
from typing import List, Union

from phisched.core.ratio import PHI, phi_power
from phisched.core.types import OffsetPolicy
from phisched.utils.errors import InvalidArgument


_OVERFLOW_MSG = "base/count too large: offsets overflow float range"


def require_positive(name: str, value) -> float:
    """正的有限实数，否则 InvalidArgument（bool 不算数）。"""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgument(f"{name} must be a real number, got {value!r}")
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidArgument(f"{name} must be > 0, got {value!r}")
    return value


def resolve_policy(policy: Union[OffsetPolicy, str]) -> OffsetPolicy:
    try:
        return OffsetPolicy(policy)
    except ValueError:
        valid = ", ".join(p.value for p in OffsetPolicy)
        raise InvalidArgument(
            f"unknown offset policy {policy!r} (expected one of: {valid})"
        ) from None


def generate_offsets(
    base: float,
    count: int,
    policy: Union[OffsetPolicy, str] = OffsetPolicy.CUMULATIVE_INTERVALS,
) -> List[float]:
    """
    生成 count 个严格递增的 offset（相对 anchor）。

    CUMULATIVE_INTERVALS:
        dt = base, t = 0
        每步 dt *= φ, t += dt
        → base·(φ, φ+φ², φ+φ²+φ³, ...)，相邻间隔之比恒为 φ

    DIRECT_POWERS:
        第 k 个 offset = base·φ^k  (k = 1..count)

    Raises
    ------
    InvalidArgument
        base <= 0 / count <= 0 / 非法 policy / offset 超出 float 范围
    """
    base = require_positive("base", base)
    if isinstance(count, bool) or not isinstance(count, Integral):
        raise InvalidArgument(f"count must be an integer, got {count!r}")
    if count <= 0:
        raise InvalidArgument(f"count must be > 0, got {count!r}")
    policy = resolve_policy(policy)

    offsets: List[float] = []

    if policy is OffsetPolicy.CUMULATIVE_INTERVALS:
        dt = base
        t = 0.0
        for _ in range(count):
            dt *= PHI
            t += dt
            offsets.append(t)
    else:
        try:
            for k in range(1, count + 1):
                offsets.append(base * phi_power(k))
        except OverflowError:
            raise InvalidArgument(_OVERFLOW_MSG) from None

    # cumulative 分支溢出时静默变成 inf
    if not math.isfinite(offsets[-1]):
        raise InvalidArgument(_OVERFLOW_MSG)

    return offsets


def gaps(offsets: List[float]) -> List[float]:
    """相邻间隔，offset[0] 之前视为 0."""
    prev = 0.0
    out = []
    for t in offsets:
        out.append(t - prev)
        prev = t
    return out
