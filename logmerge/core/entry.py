# logmerge/core/entry.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, NamedTuple, Union


# -------------------------
# Entry
# -------------------------
@dataclass(frozen=True)
class LogEntry:
    """
    LogEntry（FROZEN）

    职责：
      - 一条带时间戳的日志
      - msg 对 merge 不透明，不检查、不修改
    """

    date: datetime
    msg: Any


# -------------------------
# Pull result
# -------------------------
class Drained(Enum):
    """Exhaustion marker returned by a source that has no further entries."""

    DRAINED = "drained"

    def __repr__(self) -> str:
        return "DRAINED"


DRAINED = Drained.DRAINED

# pop() / pop_async() 的返回值：LogEntry 或 DRAINED，不用 falsy 判断
PullResult = Union[LogEntry, Drained]


# -------------------------
# Ranked entry
# -------------------------
class RankedEntry(NamedTuple):
    """
    Heap item: (date, source_index, entry).

    Tuples compare field by field, so the heap key is ``(date, source_index)``
    and equal dates resolve to the lower source index. ``entry`` is never
    reached by the comparison because a source index is resident at most once.
    """

    date: datetime
    source_index: int
    entry: LogEntry

    @classmethod
    def of(cls, entry: LogEntry, source_index: int) -> "RankedEntry":
        return cls(entry.date, source_index, entry)
