from .async_merge import async_sorted_merge
from .sync_merge import sync_sorted_merge

__all__ = ["async_sorted_merge", "sync_sorted_merge"]
