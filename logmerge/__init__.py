#!filepath: logmerge/__init__.py

from .utils.logger import Logging, init_logging, logs
from .config.app_config import AppConfig

from .core.entry import DRAINED, LogEntry
from .merge.sync_merge import sync_sorted_merge
from .merge.async_merge import async_sorted_merge

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging", "init_logging",
    "AppConfig",
    "DRAINED", "LogEntry",
    "sync_sorted_merge", "async_sorted_merge",
]
