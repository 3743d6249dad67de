class Entry:
    """An immutable named text record.

    ``size`` is ``len(content) // 2`` and is the unit every store uses for
    capacity accounting, independent of the encoded byte length.
    """

    __slots__ = ("_name", "_content", "_size")

    def __init__(self, name: str, content: str) -> None:
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_content", content)
        object.__setattr__(self, "_size", len(content) // 2)

    def __setattr__(self, key: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def name(self) -> str:
        return self._name

    @property
    def content(self) -> str:
        return self._content

    @property
    def size(self) -> int:
        return self._size

    def get_filename(self) -> str:
        return self._name

    def get_size(self) -> int:
        return self._size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self._name == other._name and self._content == other._content

    def __hash__(self) -> int:
        return hash((self._name, self._content))

    def __repr__(self) -> str:
        return f"Entry(name={self._name!r}, size={self._size})"
