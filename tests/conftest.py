# tests/conftest.py
from __future__ import annotations

import asyncio
from datetime import datetime, timedelta
from typing import Any, List, Optional, Sequence

import pytest
from loguru import logger

from logmerge.core.entry import DRAINED, LogEntry

T0 = datetime(2024, 1, 1)


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


def ts(seconds: float) -> datetime:
    return T0 + timedelta(seconds=seconds)


def entries(*seconds: float, tag: str = "") -> List[LogEntry]:
    return [LogEntry(date=ts(s), msg=f"{tag}{s}") for s in seconds]


# ============================================================
# Fake sources
# ============================================================
class ListSource:
    """
    同步 source：按顺序吐出给定 entry，之后返回 DRAINED。
    记录 pop 次数，以及 DRAINED 之后的多余 pop。
    fail_on: 第 N 次 pop（从 1 开始）抛出 RuntimeError
    """

    def __init__(self, items: Sequence[LogEntry], fail_on: Optional[int] = None):
        self._items = list(items)
        self.fail_on = fail_on
        self.pops = 0
        self.drained = False
        self.pops_after_drained = 0

    def _next(self):
        self.pops += 1
        if self.drained:
            self.pops_after_drained += 1
            return DRAINED
        if self.fail_on is not None and self.pops == self.fail_on:
            raise RuntimeError(f"source failed on pop {self.pops}")
        if not self._items:
            self.drained = True
            return DRAINED
        return self._items.pop(0)

    def pop(self):
        return self._next()


class AsyncListSource(ListSource):
    """
    异步 source：结果在调用时确定，delay 秒后 resolve。
    in_flight / max_in_flight 用来检查每个 source 同时只有一个 fetch。
    """

    def __init__(
        self,
        items: Sequence[LogEntry],
        delay: float = 0.0,
        fail_on: Optional[int] = None,
        hang_on: Optional[int] = None,
    ):
        super().__init__(items, fail_on=fail_on)
        self.delay = delay
        self.hang_on = hang_on
        self.in_flight = 0
        self.max_in_flight = 0
        self.cancelled = 0

    def pop_async(self):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        call = self.pops + 1
        return self._resolve(call)

    async def _resolve(self, call: int):
        try:
            if self.hang_on is not None and call == self.hang_on:
                await asyncio.sleep(3600)
            await asyncio.sleep(self.delay)
            return self._next()
        except asyncio.CancelledError:
            self.cancelled += 1
            raise
        finally:
            self.in_flight -= 1


# ============================================================
# Fake printer
# ============================================================
class RecordingPrinter:
    def __init__(self, fail_on: Optional[int] = None):
        self.events: List[Any] = []
        self.fail_on = fail_on

    def print(self, entry: LogEntry) -> None:
        if self.fail_on is not None and len(self.printed) + 1 == self.fail_on:
            raise IOError("sink write failed")
        self.events.append(("print", entry))

    def done(self) -> None:
        self.events.append(("done",))

    @property
    def printed(self) -> List[LogEntry]:
        return [e[1] for e in self.events if e[0] == "print"]

    @property
    def done_count(self) -> int:
        return sum(1 for e in self.events if e[0] == "done")


@pytest.fixture
def printer() -> RecordingPrinter:
    return RecordingPrinter()


@pytest.fixture
def make_entries():
    """
    Factory fixture: make_entries(1, 3, 5, tag="a") → msg "a1", "a3", "a5"，date = T0 + 秒数
    """
    return entries


@pytest.fixture
def make_source():
    return ListSource


@pytest.fixture
def make_async_source():
    return AsyncListSource


@pytest.fixture
def make_printer():
    return RecordingPrinter
