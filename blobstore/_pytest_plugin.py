"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["blobstore._pytest_plugin"]

This makes the ``blob_store`` fixture automatically available::

    def test_something(blob_store):
        assert blob_store.write(Entry("a.txt", "hello"))
"""

import pytest

from ._store import MemoryBlobStore


@pytest.fixture
def blob_store() -> MemoryBlobStore:
    """A :class:`MemoryBlobStore` fixture with a capacity of 1024 units.

    Provides an independent instance per test (function scope).
    """
    return MemoryBlobStore(capacity=1024)
