#!filepath: phisched/core/ratio.py
from __future__ import annotations

import math

PHI: float = (1.0 + math.sqrt(5.0)) / 2.0

# 1/φ == φ - 1, no second sqrt / division needed
INV_PHI: float = PHI - 1.0


def phi_power(k: int) -> float:
    """φ^k for integer k (negative k uses INV_PHI)."""
    if k >= 0:
        return PHI ** k
    return INV_PHI ** (-k)
