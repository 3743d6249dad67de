from ._exceptions import BSCapacityExceededError


class CapacityLedger:
    """Used/free bookkeeping for one store.

    Not locked: every call must happen while the owning store holds its
    table lock, write mode for ``admit``/``release``/``reset``.
    """

    __slots__ = ("_capacity", "_used")

    def __init__(self, capacity: int) -> None:
        self._capacity: int = capacity
        self._used: int = 0

    def admit(self, size: int) -> None:
        """Count *size* units as used, or raise :class:`BSCapacityExceededError`."""
        available = self._capacity - self._used
        if size > available:
            raise BSCapacityExceededError(requested=size, available=available)
        self._used += size

    def release(self, size: int) -> None:
        if size > self._used:
            raise RuntimeError(
                f"capacity ledger underflow: releasing {size} with {self._used} in use"
            )
        self._used -= size

    def reset(self) -> None:
        self._used = 0

    def snapshot(self) -> tuple[int, int, int]:
        """Return (capacity, used, free)."""
        return self._capacity, self._used, self._capacity - self._used

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def used(self) -> int:
        return self._used

    @property
    def free(self) -> int:
        return self._capacity - self._used
