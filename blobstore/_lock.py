import threading
import time
from contextlib import contextmanager


def _deadline(timeout: float | None) -> float | None:
    if timeout is None:
        return None
    return time.monotonic() + max(0.0, timeout)


def _wait_budget(deadline: float | None) -> float | None:
    if deadline is None:
        return None
    return max(0.0, deadline - time.monotonic())


class ReadWriteLock:
    """Shared/exclusive lock guarding a store's entry table.

    Any number of readers may hold it together; a writer needs it alone.
    Readers are not held back by waiting writers, so a steady stream of
    readers can starve a writer. Pass ``timeout`` to bound the wait; on
    expiry ``BlockingIOError`` is raised.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers: int = 0
        self._writer: bool = False

    def _wait_until(self, ready, deadline: float | None, kind: str) -> None:
        while not ready():
            budget = _wait_budget(deadline)
            if budget == 0.0 or not self._cond.wait(timeout=budget):
                if ready():
                    return
                raise BlockingIOError(f"Could not acquire {kind} lock within timeout.")

    def acquire_read(self, timeout: float | None = None) -> None:
        deadline = _deadline(timeout)
        with self._cond:
            self._wait_until(lambda: not self._writer, deadline, "read")
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("release_read called without matching acquire_read")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self, timeout: float | None = None) -> None:
        deadline = _deadline(timeout)
        with self._cond:
            self._wait_until(
                lambda: not self._writer and self._readers == 0, deadline, "write"
            )
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write called without matching acquire_write")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def reading(self, timeout: float | None = None):
        self.acquire_read(timeout)
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def writing(self, timeout: float | None = None):
        self.acquire_write(timeout)
        try:
            yield
        finally:
            self.release_write()

    @property
    def is_locked(self) -> bool:
        with self._cond:
            return self._writer or self._readers > 0
