"""
PhiScheduler

Translates N event identifiers into N absolute-time callback requests on an
external clock, spaced by the golden ratio.

Invariants:
- Offsets are strictly increasing, so submission order equals firing order.
- Every target time is computed up front as anchor + offset; a late firing
  never shifts later ones (no drift accumulation).
- All validation happens before the first registration. A failed call
  registers nothing.
- The scheduler never sleeps and keeps nothing after submission.

Time advancement and ordering across series belong to the clock.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, List, Optional, Sequence, Union

from phisched.core.grid import anchor_to_grid
from phisched.core.interfaces import require_clock
from phisched.core.offsets import generate_offsets, require_positive, resolve_policy
from phisched.core.types import EventSpec, OffsetPolicy, ScheduleEntry, SchedulePlan
from phisched.observability.instrumentation import Instrumentation, NoOpInstrumentation
from phisched.utils.errors import InvalidArgument, LengthMismatch
from phisched.utils.logger import logs

if TYPE_CHECKING:
    from phisched.config.scheduler_config import SchedulerConfig

OnFire = Callable[[Any], None]


def _bind(on_fire: OnFire, identifier: Any) -> Callable[[], None]:
    # 每个 callback 绑定自己的 identifier（避免闭包晚绑定）
    def _fire() -> None:
        on_fire(identifier)

    return _fire


def schedule_series(
    anchor: float,
    offsets: Sequence[float],
    identifiers: EventSpec,
    clock,
    on_fire: OnFire,
) -> List[ScheduleEntry]:
    """
    在 clock 上为每个 (offset, identifier) 注册 anchor + offset 的一次性回调。

    Returns
    -------
    List[ScheduleEntry]
        按提交顺序

    Raises
    ------
    LengthMismatch
        len(offsets) != len(identifiers)，此时不注册任何回调
    ClockUnavailable
        clock 不可用（注册前检查）
    """
    if len(offsets) != len(identifiers):
        raise LengthMismatch(len(offsets), len(identifiers))
    clock = require_clock(clock)
    if not callable(on_fire):
        raise InvalidArgument(f"on_fire must be callable, got {on_fire!r}")

    entries = [
        ScheduleEntry(time=float(anchor) + float(offset), identifier=identifier)
        for offset, identifier in zip(offsets, identifiers)
    ]

    for entry in entries:
        clock.schedule_at(entry.time, _bind(on_fire, entry.identifier))

    return entries


def plan_series(
    identifiers: EventSpec,
    clock,
    *,
    base: float,
    policy: Union[OffsetPolicy, str] = OffsetPolicy.CUMULATIVE_INTERVALS,
    grid_unit: Optional[float] = None,
) -> SchedulePlan:
    """
    纯计算：anchor + offsets → SchedulePlan（只读 clock，不注册）。

    grid_unit 为 None 时 series 从 clock 当前位置开始。
    """
    policy = resolve_policy(policy)
    offsets = generate_offsets(base, len(identifiers), policy)

    if grid_unit is None:
        anchor = float(require_clock(clock).now())
    else:
        anchor = anchor_to_grid(grid_unit, clock)

    entries = tuple(
        ScheduleEntry(time=anchor + offset, identifier=identifier)
        for offset, identifier in zip(offsets, identifiers)
    )
    return SchedulePlan(
        anchor=anchor,
        base=float(base),
        policy=policy,
        offsets=tuple(offsets),
        entries=entries,
    )


class PhiScheduler:
    """
    持有默认参数的薄封装：plan() 只算，run() 算 + 提交。
    """

    def __init__(
        self,
        base: float = 1.0,
        policy: Union[OffsetPolicy, str] = OffsetPolicy.CUMULATIVE_INTERVALS,
        grid_unit: Optional[float] = None,
        inst: Optional[Instrumentation] = None,
    ):
        self.base = require_positive("base", base)
        self.policy = resolve_policy(policy)
        self.grid_unit = None if grid_unit is None else require_positive("grid_unit", grid_unit)
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    @classmethod
    def from_config(
        cls, config: SchedulerConfig, inst: Optional[Instrumentation] = None
    ) -> "PhiScheduler":
        return cls(
            base=config.base,
            policy=config.policy,
            grid_unit=config.grid_unit,
            inst=inst,
        )

    def plan(self, identifiers: EventSpec, clock) -> SchedulePlan:
        with self.inst.timer("PhiScheduler.plan"):
            plan = plan_series(
                identifiers,
                clock,
                base=self.base,
                policy=self.policy,
                grid_unit=self.grid_unit,
            )
        logs.debug(
            f"[PhiScheduler] planned {len(plan)} events "
            f"anchor={plan.anchor:g} policy={plan.policy.value} "
            f"offsets={[round(o, 6) for o in plan.offsets]}"
        )
        return plan

    def run(self, identifiers: EventSpec, clock, on_fire: OnFire) -> SchedulePlan:
        """
        计算并提交整条 series，立即返回（不等待任何触发）。
        """
        plan = self.plan(identifiers, clock)

        with self.inst.timer("PhiScheduler.submit"):
            schedule_series(plan.anchor, plan.offsets, plan.identifiers, clock, on_fire)

        self.inst.metrics.incr("series.submitted")
        self.inst.metrics.incr("events.submitted", len(plan))
        self.inst.metrics.record("series.span", plan.span)

        logs.info(
            f"[PhiScheduler] submitted {len(plan)} events "
            f"from {plan.anchor:g} to {plan.anchor + plan.span:g} ({plan.policy.value})"
        )
        return plan

    def __repr__(self) -> str:
        return (
            f"PhiScheduler(base={self.base!r}, policy={self.policy.value!r}, "
            f"grid_unit={self.grid_unit!r})"
        )
