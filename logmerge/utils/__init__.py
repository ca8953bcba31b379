#!filepath: logmerge/utils/__init__.py
from .errors import MergeError, OutOfOrderError, SourceFetchTimeout, UserInputError

__all__ = [
    "MergeError",
    "OutOfOrderError",
    "SourceFetchTimeout",
    "UserInputError",
]
