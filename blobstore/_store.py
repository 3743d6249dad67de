from __future__ import annotations

import enum
import logging

from ._entry import Entry
from ._exceptions import (
    BSCapacityExceededError,
    BSInvalidEntryError,
    BSNameExistsError,
)
from ._lock import ReadWriteLock
from ._quota import CapacityLedger
from ._typing import BSStats

logger = logging.getLogger(__name__)


class WriteOutcome(enum.Enum):
    """Result of :meth:`MemoryBlobStore.try_write`."""

    ADMITTED = "admitted"
    REJECTED_CAPACITY = "rejected_capacity"
    DUPLICATE_NAME = "duplicate_name"
    INVALID_INPUT = "invalid_input"

    def __bool__(self) -> bool:
        return self is WriteOutcome.ADMITTED


class MemoryBlobStore:
    """A capacity-bounded table of :class:`Entry` objects keyed by name.

    ``used_size`` is always the sum of the held entries' sizes and never
    exceeds ``capacity``. A write that would overflow is a soft rejection
    (``False``); a duplicate name or a non-entry argument raises.

    All operations are safe to call from several threads. Mutations hold
    the table lock exclusively for the whole check-then-mutate sequence.
    """

    def __init__(self, capacity: int, lock_timeout: float | None = None) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(
                f"capacity must be an int, got {type(capacity).__name__}."
            )
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}.")
        if lock_timeout is not None and lock_timeout < 0:
            raise ValueError(
                f"lock_timeout must be None or non-negative, got {lock_timeout}."
            )
        self._ledger = CapacityLedger(capacity)
        self._lock = ReadWriteLock()
        self._lock_timeout: float | None = lock_timeout
        self._entries: dict[str, Entry] = {}

    # -- mutations --

    def write(self, entry: Entry) -> bool:
        """Admit *entry*; return ``False`` if it does not fit.

        Raises :class:`BSInvalidEntryError` for ``None`` or a non-entry and
        :class:`BSNameExistsError` if the name is already held.
        """
        if not isinstance(entry, Entry):
            raise BSInvalidEntryError(entry)
        with self._lock.writing(self._lock_timeout):
            if entry.name in self._entries:
                logger.debug("rejected duplicate entry name %r", entry.name)
                raise BSNameExistsError(entry.name)
            try:
                self._ledger.admit(entry.size)
            except BSCapacityExceededError as exc:
                logger.debug(
                    "rejected entry %r: size %d, %d available",
                    entry.name,
                    exc.requested,
                    exc.available,
                )
                return False
            try:
                self._entries[entry.name] = entry
            except BaseException:
                self._ledger.release(entry.size)
                raise
        logger.debug("admitted entry %r (size %d)", entry.name, entry.size)
        return True

    def try_write(self, entry: Entry | None) -> WriteOutcome:
        """Like :meth:`write`, but report every outcome as a :class:`WriteOutcome`."""
        try:
            admitted = self.write(entry)  # type: ignore[arg-type]
        except BSInvalidEntryError:
            return WriteOutcome.INVALID_INPUT
        except BSNameExistsError:
            return WriteOutcome.DUPLICATE_NAME
        if admitted:
            return WriteOutcome.ADMITTED
        return WriteOutcome.REJECTED_CAPACITY

    def delete(self, name: str) -> bool:
        with self._lock.writing(self._lock_timeout):
            entry = self._entries.pop(name, None)
            if entry is None:
                return False
            self._ledger.release(entry.size)
        logger.debug("deleted entry %r (size %d)", name, entry.size)
        return True

    def delete_all_files(self) -> None:
        with self._lock.writing(self._lock_timeout):
            count = len(self._entries)
            self._entries.clear()
            self._ledger.reset()
        logger.debug("cleared %d entries", count)

    # -- queries --

    def exists(self, name: str) -> bool:
        with self._lock.reading(self._lock_timeout):
            return name in self._entries

    is_exists = exists

    def get_file(self, name: str) -> Entry | None:
        with self._lock.reading(self._lock_timeout):
            return self._entries.get(name)

    def get_files(self) -> list[Entry]:
        with self._lock.reading(self._lock_timeout):
            return list(self._entries.values())

    def stats(self) -> BSStats:
        with self._lock.reading(self._lock_timeout):
            file_count = len(self._entries)
            capacity, used, free = self._ledger.snapshot()
        return BSStats(
            used_size=used,
            capacity=capacity,
            free_size=free,
            file_count=file_count,
        )

    @property
    def capacity(self) -> int:
        return self._ledger.capacity

    @property
    def used_size(self) -> int:
        with self._lock.reading(self._lock_timeout):
            return self._ledger.used

    @property
    def free_size(self) -> int:
        with self._lock.reading(self._lock_timeout):
            return self._ledger.free

    def __len__(self) -> int:
        with self._lock.reading(self._lock_timeout):
            return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.exists(name)

    def __repr__(self) -> str:
        with self._lock.reading(self._lock_timeout):
            capacity, used, _free = self._ledger.snapshot()
        return f"MemoryBlobStore(capacity={capacity}, used_size={used})"
