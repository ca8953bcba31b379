# logmerge/merge/async_merge.py
from __future__ import annotations

import asyncio
from typing import Dict, List, Optional, Sequence

from logmerge import logs
from logmerge.core.entry import DRAINED, PullResult, RankedEntry
from logmerge.core.frontier import MergeFrontier
from logmerge.core.interfaces import AsyncLogSource, Printer
from logmerge.utils.errors import SourceFetchTimeout


async def async_sorted_merge(
    log_sources: Sequence[AsyncLogSource],
    printer: Printer,
    *,
    fetch_timeout: Optional[float] = None,
) -> None:
    """
    Pipelined k-way merge over sources whose pop is latency-bearing.

    Every active source index keeps exactly one fetch in flight: the next
    ``pop_async()`` is issued as soon as the previous result is consumed, so
    the latency of one source overlaps with the work on all the others.
    Emission order comes from the frontier, never from arrival order.

    Parameters
    ----------
    log_sources : Sequence[AsyncLogSource]
        ``pop_async()`` returns an awaitable resolving to a LogEntry or DRAINED.
    printer : Printer
        Receives ``print(entry)`` in ascending date order, then ``done()`` once.
    fetch_timeout : float, optional
        Upper bound in seconds for a single await on an in-flight fetch.
        ``None`` waits forever. Expiry raises SourceFetchTimeout.

    Any exception aborts the run without calling ``done()``; fetches still in
    flight are cancelled first.
    """
    logs.info(
        f"[AsyncSortedMerge] start sources={len(log_sources)} "
        f"fetch_timeout={fetch_timeout}"
    )

    # source index -> 尚未 await 的 fetch
    in_flight: Dict[int, asyncio.Future] = {}

    printed = 0
    try:
        for index, log_source in enumerate(log_sources):
            in_flight[index] = _issue(log_source)

        # --------------------------------------------------
        # 初始化：按 index 顺序 await，拿到 entry 后立刻发出下一次 fetch
        # --------------------------------------------------
        ranked: List[RankedEntry] = []
        for index in list(in_flight):
            log_entry = await _settle(in_flight, index, fetch_timeout)
            if log_entry is DRAINED:
                logs.debug(f"[AsyncSortedMerge] source {index} drained on first pop")
                continue

            ranked.append(RankedEntry.of(log_entry, index))
            in_flight[index] = _issue(log_sources[index])

        frontier = MergeFrontier.from_entries(ranked)

        # --------------------------------------------------
        # 主循环
        # --------------------------------------------------
        while frontier:
            _, index, log_entry = frontier.pop()
            printer.print(log_entry)
            printed += 1

            next_entry = await _settle(in_flight, index, fetch_timeout)
            if next_entry is DRAINED:
                logs.debug(f"[AsyncSortedMerge] source {index} drained")
                continue

            frontier.push(RankedEntry.of(next_entry, index))
            in_flight[index] = _issue(log_sources[index])

    except BaseException:
        logs.debug(
            f"[AsyncSortedMerge] aborted after printed={printed}, "
            f"cancelling {len(in_flight)} in-flight fetches"
        )
        for fetch in in_flight.values():
            _discard(fetch)
        raise

    logs.info(f"[AsyncSortedMerge] complete printed={printed}")
    printer.done()


def _issue(log_source: AsyncLogSource) -> asyncio.Future:
    return asyncio.ensure_future(log_source.pop_async())


def _discard(fetch: asyncio.Future) -> None:
    """Cancel a pending fetch; retrieve the error of one that already failed."""
    if not fetch.done():
        fetch.cancel()
    elif not fetch.cancelled():
        # 已失败的 fetch：取走异常，避免 "Task exception was never retrieved"
        fetch.exception()


async def _settle(
    in_flight: Dict[int, asyncio.Future],
    index: int,
    fetch_timeout: Optional[float],
) -> PullResult:
    """Await the outstanding fetch for ``index`` and drop it from ``in_flight``."""
    fetch = in_flight.pop(index)
    if fetch_timeout is None:
        return await fetch

    try:
        return await asyncio.wait_for(fetch, timeout=fetch_timeout)
    except asyncio.TimeoutError:
        raise SourceFetchTimeout(index, fetch_timeout) from None
