from __future__ import annotations
from typing import Any, Awaitable

from logmerge.core.entry import LogEntry, PullResult


class LogSource:
    def pop(self) -> PullResult:
        raise NotImplementedError


class AsyncLogSource:
    def pop_async(self) -> Awaitable[PullResult]:
        raise NotImplementedError


class Printer:
    def print(self, entry: LogEntry) -> None:
        raise NotImplementedError

    def done(self) -> Any:
        raise NotImplementedError
