# logmerge/sinks/printer.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from time import perf_counter
from typing import Optional

from rich.console import Console
from rich.table import Table

from logmerge import logs
from logmerge.core.entry import LogEntry
from logmerge.core.interfaces import Printer
from logmerge.utils.errors import MergeError, OutOfOrderError


@dataclass(frozen=True)
class PrintStats:
    logs_printed: int
    time_taken: float
    logs_per_second: float


class ConsolePrinter(Printer):
    """
    ConsolePrinter

    职责：
      - 输出已排序的 entry
      - 校验全局 date 不回退（merge 本身不做这个断言）
      - done() 输出统计：条数 / 耗时 / 吞吐
    """

    def __init__(self, console: Optional[Console] = None, *, echo: bool = True) -> None:
        self.console = console or Console()
        self.echo = echo

        self.last: Optional[datetime] = None
        self.logs_printed = 0
        self.start_time: Optional[float] = None
        self.finished = False

    # --------------------------------------------------
    def print(self, entry: LogEntry) -> None:
        # 🔒 全局时间语义断言
        if self.last is not None and entry.date < self.last:
            raise OutOfOrderError(
                f"[ConsolePrinter] entries printed out of order: "
                f"{entry.date.isoformat()} < {self.last.isoformat()}"
            )

        self.last = entry.date
        self.logs_printed += 1
        if self.logs_printed == 1:
            self.start_time = perf_counter()

        if self.echo:
            self.console.print(
                f"{entry.date.isoformat()} {entry.msg}",
                markup=False,
                highlight=False,
            )

    # --------------------------------------------------
    def done(self) -> PrintStats:
        if self.finished:
            raise MergeError("[ConsolePrinter] done() called twice")
        self.finished = True

        time_taken = perf_counter() - self.start_time if self.start_time else 0.0
        rate = self.logs_printed / time_taken if time_taken > 0 else 0.0
        stats = PrintStats(
            logs_printed=self.logs_printed,
            time_taken=time_taken,
            logs_per_second=rate,
        )

        table = Table(title="Merge summary", show_header=False)
        table.add_row("Logs printed", str(stats.logs_printed))
        table.add_row("Time taken (s)", f"{stats.time_taken:.3f}")
        table.add_row("Logs/s", f"{stats.logs_per_second:.1f}")
        self.console.print(table)

        logs.info(
            f"[ConsolePrinter] done printed={stats.logs_printed} "
            f"time={stats.time_taken:.3f}s"
        )
        return stats
