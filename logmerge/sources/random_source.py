# logmerge/sources/random_source.py
"""
Synthetic log sources for exercising the merge engines.

Each source starts 40-60 days in the past and walks forward in random
steps (up to 10 hours plus up to a minute) until it passes ``now``, at which
point it is drained for good. Entries from a single source are therefore
non-decreasing in date, which is the only thing the merge relies on.
"""
from __future__ import annotations

import asyncio
import random
from datetime import datetime, timedelta
from typing import Awaitable, List, Optional

from logmerge.core.entry import DRAINED, LogEntry, PullResult
from logmerge.core.interfaces import AsyncLogSource, LogSource

_ADJECTIVES = (
    "Adaptive", "Balanced", "Centralized", "Cross-platform", "Decentralized",
    "Distributed", "Enhanced", "Focused", "Horizontal", "Integrated",
    "Managed", "Multi-tiered", "Optimized", "Proactive", "Reactive",
    "Robust", "Streamlined", "Synergistic", "Universal", "Virtual",
)
_DESCRIPTORS = (
    "asynchronous", "bi-directional", "client-driven", "context-sensitive",
    "dynamic", "fault-tolerant", "global", "heuristic", "incremental",
    "local", "mission-critical", "modular", "real-time", "scalable",
    "stable", "systematic", "tangible", "transitional", "zero-defect",
)
_NOUNS = (
    "algorithm", "archive", "capability", "database", "encoding", "firmware",
    "framework", "hierarchy", "interface", "matrix", "middleware", "model",
    "moratorium", "paradigm", "pipeline", "protocol", "service-desk",
    "throughput", "toolset", "workforce",
)


class RandomLogSource(LogSource, AsyncLogSource):
    """
    RandomLogSource

    Attributes:
        drained: True once a generated date passed ``now``. Never reset.
        last: The most recently generated entry (also past ``now`` once drained).

    ``pop()`` and ``pop_async()`` draw entries from the same RNG, so two
    sources built with the same seed yield the same sequence regardless of
    which method is used. The async delay comes from a separate RNG.
    """

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        now: Optional[datetime] = None,
        max_delay_ms: int = 8,
    ) -> None:
        self._rng = rng or random.Random()
        self._delay_rng = random.Random(self._rng.random())
        self.now = now or datetime.now()
        self.max_delay_ms = max_delay_ms

        self.drained = False
        self.last = LogEntry(
            date=self.now - timedelta(days=self._rng.randint(40, 60)),
            msg=self._catch_phrase(),
        )

    # --------------------------------------------------
    def _catch_phrase(self) -> str:
        return " ".join(
            (
                self._rng.choice(_ADJECTIVES),
                self._rng.choice(_DESCRIPTORS),
                self._rng.choice(_NOUNS),
            )
        )

    def _next_entry(self) -> LogEntry:
        step = timedelta(
            hours=self._rng.randint(0, 10),
            milliseconds=self._rng.randint(0, 1000 * 60),
        )
        return LogEntry(date=self.last.date + step, msg=self._catch_phrase())

    def _advance(self) -> PullResult:
        if self.drained:
            return DRAINED

        self.last = self._next_entry()
        if self.last.date > self.now:
            self.drained = True
            return DRAINED
        return self.last

    # --------------------------------------------------
    def pop(self) -> PullResult:
        return self._advance()

    def pop_async(self) -> Awaitable[PullResult]:
        # 结果在调用时就确定，延迟只模拟网络/IO
        result = self._advance()
        delay_ms = self._delay_rng.randint(0, self.max_delay_ms)
        return self._deliver(result, delay_ms)

    @staticmethod
    async def _deliver(result: PullResult, delay_ms: int) -> PullResult:
        await asyncio.sleep(delay_ms / 1000)
        return result


def make_sources(
    count: int,
    *,
    seed: Optional[int] = None,
    now: Optional[datetime] = None,
    max_delay_ms: int = 8,
) -> List[RandomLogSource]:
    """
    Build ``count`` sources sharing one reference time.

    With a seed the whole list is reproducible: each source gets its own RNG
    seeded from a master RNG.
    """
    if count < 0:
        raise ValueError(f"[make_sources] count must be >= 0, got {count}")

    master = random.Random(seed)
    now = now or datetime.now()
    return [
        RandomLogSource(
            rng=random.Random(master.getrandbits(64)),
            now=now,
            max_delay_ms=max_delay_ms,
        )
        for _ in range(count)
    ]
