# logmerge/core/frontier.py
from __future__ import annotations

import heapq
from typing import Iterable, List, Optional

from logmerge.core.entry import RankedEntry


class MergeFrontier:
    """
    MergeFrontier（FINAL）

    职责：
      - k-way merge 的工作集：每个未耗尽的 source 至多一条
      - 唯一的排序权威：(date, source_index) 最小堆
      - 不修改 entry

    初始化用 heapify（线性时间）而不是逐条 push。
    """

    __slots__ = ("_heap",)

    def __init__(self) -> None:
        self._heap: List[RankedEntry] = []

    # --------------------------------------------------
    @classmethod
    def from_entries(cls, ranked: Iterable[RankedEntry]) -> "MergeFrontier":
        frontier = cls()
        frontier._heap = list(ranked)
        heapq.heapify(frontier._heap)
        return frontier

    # --------------------------------------------------
    def push(self, ranked: RankedEntry) -> None:
        heapq.heappush(self._heap, ranked)

    def pop(self) -> RankedEntry:
        """Remove and return the earliest entry. Raises IndexError when empty."""
        return heapq.heappop(self._heap)

    def peek(self) -> Optional[RankedEntry]:
        return self._heap[0] if self._heap else None

    # --------------------------------------------------
    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"MergeFrontier(size={len(self._heap)})"
