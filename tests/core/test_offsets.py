import math

import pytest

from phisched.core.offsets import gaps, generate_offsets
from phisched.core.ratio import INV_PHI, PHI, phi_power
from phisched.core.types import OffsetPolicy
from phisched.utils.errors import InvalidArgument

BASES = [0.25, 1.0, 1.5, 3.0, 100.0]
COUNTS = [1, 2, 3, 8, 20]


def test_phi_constant_and_inverse():
    assert PHI == pytest.approx(1.6180339887, abs=1e-10)
    # 1/φ == φ - 1
    assert INV_PHI == pytest.approx(1.0 / PHI, rel=1e-12)
    assert phi_power(-3) == pytest.approx(PHI ** -3, rel=1e-12)
    assert phi_power(0) == 1.0


def test_cumulative_intervals_scenario():
    """base=1, count=3 → φ, φ+φ², φ+φ²+φ³"""
    out = generate_offsets(1, 3, OffsetPolicy.CUMULATIVE_INTERVALS)

    assert out == pytest.approx([1.618034, 4.236068, 9.708204], abs=1e-6)


def test_direct_powers_scenario():
    """base=1, count=3 → φ, φ², φ³"""
    out = generate_offsets(1, 3, OffsetPolicy.DIRECT_POWERS)

    assert out == pytest.approx([1.618034, 2.618034, 4.236068], abs=1e-6)


@pytest.mark.parametrize("base", BASES)
@pytest.mark.parametrize("count", COUNTS)
def test_cumulative_gaps_grow_by_phi(base, count):
    """
    Contract:
    第 k 个间隔 = φ × 第 k-1 个间隔（offset[0] 之前为 0）
    """
    out = generate_offsets(base, count, "cumulative_intervals")
    g = gaps(out)

    assert len(out) == count
    assert g[0] == pytest.approx(base * PHI, rel=1e-9)
    for prev, cur in zip(g, g[1:]):
        assert cur == pytest.approx(prev * PHI, rel=1e-9)


@pytest.mark.parametrize("base", BASES)
@pytest.mark.parametrize("count", COUNTS)
def test_direct_powers_are_base_times_phi_power(base, count):
    out = generate_offsets(base, count, "direct_powers")

    for k, t in enumerate(out):
        assert t == pytest.approx(base * PHI ** (k + 1), rel=1e-9)


@pytest.mark.parametrize("policy", list(OffsetPolicy))
@pytest.mark.parametrize("base", BASES)
def test_offsets_strictly_increasing_and_positive(policy, base):
    out = generate_offsets(base, 15, policy)

    assert out[0] > 0
    assert all(b > a for a, b in zip(out, out[1:]))


def test_direct_power_gaps_do_not_keep_a_constant_ratio():
    out = generate_offsets(1.0, 4, OffsetPolicy.DIRECT_POWERS)
    g = gaps(out)

    assert all(b > a for a, b in zip(g[1:], g[2:]))
    # 第一个间隔是 φ，第二个是 φ²-φ = 1
    assert g[1] / g[0] != pytest.approx(PHI)


def test_default_policy_is_cumulative():
    assert generate_offsets(2.0, 4) == generate_offsets(
        2.0, 4, OffsetPolicy.CUMULATIVE_INTERVALS
    )


def test_generate_offsets_is_pure():
    assert generate_offsets(1.0, 5) == generate_offsets(1.0, 5)


@pytest.mark.parametrize("base", [0, -1, -0.5, math.inf, math.nan, True, "1"])
def test_invalid_base_rejected(base):
    with pytest.raises(InvalidArgument):
        generate_offsets(base, 3)


@pytest.mark.parametrize("count", [0, -3, 2.0, True, None])
def test_invalid_count_rejected(count):
    with pytest.raises(InvalidArgument):
        generate_offsets(1.0, count)


def test_unknown_policy_rejected():
    with pytest.raises(InvalidArgument, match="unknown offset policy"):
        generate_offsets(1.0, 3, "fibonacci")


def test_invalid_argument_is_value_error():
    """调用方可以按 ValueError 捕获"""
    with pytest.raises(ValueError):
        generate_offsets(-1.0, 3)


@pytest.mark.parametrize("policy", list(OffsetPolicy))
def test_offsets_beyond_float_range_rejected(policy):
    """φ^1500 超出 float 范围：报 InvalidArgument，不返回 inf 也不漏出 OverflowError"""
    with pytest.raises(InvalidArgument, match="overflow"):
        generate_offsets(1.0, 1500, policy)


@pytest.mark.parametrize("policy", list(OffsetPolicy))
def test_long_series_within_float_range_is_finite(policy):
    offsets = generate_offsets(1.0, 1000, policy)

    assert all(math.isfinite(t) for t in offsets)
    assert all(b > a for a, b in zip(offsets, offsets[1:]))
