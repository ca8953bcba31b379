# logmerge/utils/errors.py
from __future__ import annotations


class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided config (source count, timeout, etc).
    Should NOT print traceback.
    """


class MergeError(RuntimeError):
    """Base class for errors raised by the merge package itself."""


class SourceFetchTimeout(MergeError):
    """A pipelined fetch stayed outstanding longer than ``fetch_timeout``."""

    def __init__(self, source_index: int, timeout: float) -> None:
        super().__init__(
            f"fetch for source {source_index} did not resolve within {timeout}s"
        )
        self.source_index = source_index
        self.timeout = timeout


class OutOfOrderError(MergeError):
    """A sink received an entry dated before the previous one."""
