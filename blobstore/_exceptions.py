class BSCapacityExceededError(OSError):
    """Raised when a reservation does not fit the remaining capacity. Subclass of OSError."""
    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Blob store capacity exceeded: requested {requested} units, "
            f"only {available} units available."
        )


class BSNameExistsError(FileExistsError):
    """Raised when writing an entry whose name is already held. Subclass of FileExistsError."""
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Entry name already exists: {name!r}")


class BSInvalidEntryError(TypeError):
    """Raised when write() receives None or a non-Entry object."""
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Expected an Entry instance, got {type(value).__name__}."
        )
