from ._entry import Entry
from ._exceptions import (
    BSCapacityExceededError,
    BSInvalidEntryError,
    BSNameExistsError,
)
from ._store import MemoryBlobStore, WriteOutcome
from ._typing import BSStats

__all__ = [
    "Entry",
    "MemoryBlobStore",
    "WriteOutcome",
    "BSCapacityExceededError",
    "BSNameExistsError",
    "BSInvalidEntryError",
    "BSStats",
]
__version__ = "0.1.0"
