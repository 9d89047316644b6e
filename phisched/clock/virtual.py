#!filepath: phisched/clock/virtual.py
from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from phisched.utils.errors import ClockUnavailable, InvalidArgument
from phisched.utils.logger import logs


@dataclass(order=True)
class PendingCall:
    """
    clock 的注册 handle。按 (time, seq) 排序，同一时刻按注册顺序触发。
    """

    time: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class VirtualClock:
    """
    Deterministic virtual clock.

    - 只在 advance_to / advance_by / run_until_idle 时前进，从不 sleep
    - 到期回调按非递减时间顺序触发
    - 回调执行期间 now() 等于该回调的计划时间
    - 与 Clock contract 兼容（now / schedule_at / is_ready）
    """

    def __init__(self, start: float = 0.0):
        self._now = float(start)
        self._heap: List[PendingCall] = []
        self._seq = itertools.count()
        self._closed = False

    # --------------------------------------------------
    # Clock contract
    # --------------------------------------------------
    def now(self) -> float:
        return self._now

    def is_ready(self) -> bool:
        return not self._closed

    def schedule_at(self, time: float, callback: Callable[[], None]) -> PendingCall:
        if self._closed:
            raise ClockUnavailable("VirtualClock is closed")
        call = PendingCall(
            time=float(time),
            seq=next(self._seq),
            callback=callback,
        )
        heapq.heappush(self._heap, call)
        return call

    # --------------------------------------------------
    # Time advancement
    # --------------------------------------------------
    @property
    def pending(self) -> int:
        return sum(1 for c in self._heap if not c.cancelled)

    def next_time(self) -> Optional[float]:
        while self._heap and self._heap[0].cancelled:
            heapq.heappop(self._heap)
        return self._heap[0].time if self._heap else None

    def advance_to(self, time: float) -> int:
        """
        触发所有 time 之前（含）到期的回调，返回触发数量。

        Raises
        ------
        InvalidArgument
            time 早于当前位置
        """
        time = float(time)
        if time < self._now:
            raise InvalidArgument(
                f"cannot move VirtualClock backwards ({self._now} -> {time})"
            )

        fired = 0
        while self._heap and self._heap[0].time <= time:
            call = heapq.heappop(self._heap)
            if call.cancelled:
                continue
            # 过去注册的回调在当前位置触发，不倒退
            self._now = max(self._now, call.time)
            fired += 1
            call.callback()

        self._now = time
        if fired:
            logs.debug(f"[VirtualClock] fired {fired} call(s), now={self._now:g}")
        return fired

    def advance_by(self, delta: float) -> int:
        if delta < 0:
            raise InvalidArgument(f"delta must be >= 0, got {delta!r}")
        return self.advance_to(self._now + delta)

    def run_until_idle(self) -> int:
        """一直前进到没有待触发回调（回调中新注册的也会被执行）。"""
        fired = 0
        while True:
            t = self.next_time()
            if t is None:
                return fired
            fired += self.advance_to(max(t, self._now))

    def close(self) -> None:
        self._closed = True
        self._heap.clear()

    def __repr__(self) -> str:
        return f"VirtualClock(now={self._now:g}, pending={self.pending})"
