# tests/sources/test_random_source.py
from __future__ import annotations

import asyncio
import random
from datetime import datetime, timedelta

import pytest

from logmerge.core.entry import DRAINED, LogEntry
from logmerge.sources.random_source import RandomLogSource, make_sources

NOW = datetime(2024, 6, 1, 12, 0, 0)


def _drain(source):
    out = []
    while True:
        entry = source.pop()
        if entry is DRAINED:
            return out
        out.append(entry)


def test_first_entry_starts_40_to_60_days_back():
    source = RandomLogSource(rng=random.Random(3), now=NOW)

    age = NOW - source.last.date
    assert timedelta(days=40) <= age <= timedelta(days=60)
    assert source.drained is False


def test_entries_are_non_decreasing_and_before_now():
    source = RandomLogSource(rng=random.Random(5), now=NOW)

    out = _drain(source)

    assert out
    assert all(isinstance(e, LogEntry) for e in out)
    dates = [e.date for e in out]
    assert dates == sorted(dates)
    assert dates[-1] <= NOW
    # 步长上限：10 小时 + 1 分钟
    steps = [b - a for a, b in zip(dates, dates[1:])]
    assert max(steps) <= timedelta(hours=10, minutes=1)


def test_drained_is_permanent():
    source = RandomLogSource(rng=random.Random(8), now=NOW)
    _drain(source)

    assert source.drained is True
    assert source.pop() is DRAINED
    assert source.pop() is DRAINED


def test_pop_async_yields_the_same_sequence_as_pop():
    sync_source = RandomLogSource(rng=random.Random(11), now=NOW)
    async_source = RandomLogSource(rng=random.Random(11), now=NOW, max_delay_ms=1)

    async def drain_async():
        out = []
        while True:
            entry = await async_source.pop_async()
            if entry is DRAINED:
                return out
            out.append(entry)

    assert asyncio.run(drain_async()) == _drain(sync_source)


def test_make_sources_is_reproducible_with_seed():
    a = make_sources(4, seed=42, now=NOW)
    b = make_sources(4, seed=42, now=NOW)

    assert [_drain(s) for s in a] == [_drain(s) for s in b]
    assert len({s.last.msg for s in a}) > 1


def test_make_sources_shares_reference_time():
    sources = make_sources(3, seed=1, now=NOW, max_delay_ms=0)

    assert all(s.now == NOW for s in sources)
    assert all(s.max_delay_ms == 0 for s in sources)


def test_make_sources_zero_and_negative():
    assert make_sources(0) == []
    with pytest.raises(ValueError):
        make_sources(-1)
