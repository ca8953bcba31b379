from .entry import DRAINED, Drained, LogEntry, PullResult, RankedEntry
from .frontier import MergeFrontier
from .interfaces import AsyncLogSource, LogSource, Printer

__all__ = [
    "DRAINED",
    "Drained",
    "LogEntry",
    "PullResult",
    "RankedEntry",
    "MergeFrontier",
    "AsyncLogSource",
    "LogSource",
    "Printer",
]
