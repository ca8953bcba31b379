# logmerge/merge/sync_merge.py
from __future__ import annotations

from typing import List, Sequence

from logmerge import logs
from logmerge.core.entry import DRAINED, RankedEntry
from logmerge.core.frontier import MergeFrontier
from logmerge.core.interfaces import LogSource, Printer


def sync_sorted_merge(log_sources: Sequence[LogSource], printer: Printer) -> None:
    """
    Blocking k-way merge.

    职责：
      - 每个 source 先 pop 一次，heapify 初始 frontier
      - 弹出最小 date → printer.print → 同一 source 再 pop 一次
      - frontier 为空后 printer.done()（恰好一次，最后一个动作）

    输入假设：
      - 单个 source 不会产出早于自己已产出 entry 的 date
      - pop() 立即返回 LogEntry 或 DRAINED

    pop() / print() 抛出的异常不捕获，直接向上传播，done() 不会被调用。
    """
    logs.info(f"[SyncSortedMerge] start sources={len(log_sources)}")

    # --------------------------------------------------
    # 初始化：每个 source 取第一个 entry
    # --------------------------------------------------
    ranked: List[RankedEntry] = []
    for index, log_source in enumerate(log_sources):
        log_entry = log_source.pop()
        if log_entry is DRAINED:
            logs.debug(f"[SyncSortedMerge] source {index} drained on first pop")
            continue

        ranked.append(RankedEntry.of(log_entry, index))

    frontier = MergeFrontier.from_entries(ranked)

    # --------------------------------------------------
    # 主循环：不断弹出最小 date
    # --------------------------------------------------
    printed = 0
    while frontier:
        _, index, log_entry = frontier.pop()
        printer.print(log_entry)
        printed += 1

        next_entry = log_sources[index].pop()
        if next_entry is DRAINED:
            logs.debug(f"[SyncSortedMerge] source {index} drained")
            continue

        frontier.push(RankedEntry.of(next_entry, index))

    logs.info(f"[SyncSortedMerge] complete printed={printed}")
    printer.done()
