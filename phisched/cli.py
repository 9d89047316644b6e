#!filepath: phisched/cli.py
from pathlib import Path
from typing import List, Optional

import typer
from rich import print
from rich.table import Table

from phisched import __version__
from phisched.clock.virtual import VirtualClock
from phisched.config.app_config import AppConfig
from phisched.core.offsets import gaps, generate_offsets
from phisched.core.scheduler import PhiScheduler
from phisched.core.types import OffsetPolicy
from phisched.utils.errors import PhiSchedError
from phisched.utils.logger import Logging, logs

app = typer.Typer(help="phi-sched golden-ratio scheduling CLI", no_args_is_help=True)


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML config (default: phisched/config/base.yml)"
    ),
):
    try:
        cfg = AppConfig.load(str(config) if config is not None else None)
    except PhiSchedError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    if config is not None:
        Logging.from_config(cfg.log)
    ctx.obj = cfg


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def offsets(
    ctx: typer.Context,
    count: int = typer.Option(5, "--count", "-n", help="事件数量"),
    base: Optional[float] = typer.Option(None, help="基础时长（tick）"),
    policy: Optional[OffsetPolicy] = typer.Option(None, help="offset 生成策略"),
):
    """
    打印 offset 表（offset / gap / gap ratio），不涉及 clock
    """
    cfg: AppConfig = ctx.obj
    base = cfg.scheduler.base if base is None else base
    policy = cfg.scheduler.policy if policy is None else policy

    try:
        series = generate_offsets(base, count, policy)
    except PhiSchedError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    table = Table(title=f"{OffsetPolicy(policy).value} base={base:g}")
    table.add_column("k", justify="right")
    table.add_column("offset", justify="right")
    table.add_column("gap", justify="right")
    table.add_column("gap ratio", justify="right")

    prev_gap = None
    for k, (t, gap) in enumerate(zip(series, gaps(series)), start=1):
        ratio = "" if prev_gap is None else f"{gap / prev_gap:.6f}"
        table.add_row(str(k), f"{t:.6f}", f"{gap:.6f}", ratio)
        prev_gap = gap

    print(table)


@app.command()
def simulate(
    ctx: typer.Context,
    names: List[str] = typer.Argument(..., help="事件标识符（顺序即幂次）"),
    position: Optional[float] = typer.Option(None, help="VirtualClock 当前位置"),
    grid: Optional[float] = typer.Option(None, help="网格间距（默认取配置）"),
    no_grid: bool = typer.Option(False, "--no-grid", help="不对齐网格，从当前位置开始"),
    base: Optional[float] = typer.Option(None, help="基础时长（tick）"),
    policy: Optional[OffsetPolicy] = typer.Option(None, help="offset 生成策略"),
):
    """
    在 VirtualClock 上 dry-run 一条 series，并打印实际触发顺序
    """
    cfg: AppConfig = ctx.obj
    clock = VirtualClock(start=cfg.clock.start if position is None else position)

    grid_unit = None if no_grid else (cfg.scheduler.grid_unit if grid is None else grid)

    fired = []

    def on_fire(name):
        fired.append((clock.now(), name))

    try:
        scheduler = PhiScheduler(
            base=cfg.scheduler.base if base is None else base,
            policy=cfg.scheduler.policy if policy is None else policy,
            grid_unit=grid_unit,
        )
        plan = scheduler.run(names, clock, on_fire)
    except PhiSchedError as e:
        logs.error(f"[simulate] {e}")
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    clock.run_until_idle()

    table = Table(title=f"anchor={plan.anchor:g} ({plan.policy.value})")
    table.add_column("time", justify="right")
    table.add_column("offset", justify="right")
    table.add_column("event")
    for (t, name), offset in zip(fired, plan.offsets):
        table.add_row(f"{t:.6f}", f"{offset:.6f}", str(name))

    print(table)


if __name__ == "__main__":
    app()

# python -m phisched.cli simulate kick snare hat --position 10
