import pytest
from blobstore import MemoryBlobStore
from blobstore._pytest_plugin import blob_store  # noqa: F401


@pytest.fixture
def store() -> MemoryBlobStore:
    """Capacity-5 store, small enough that a nine-character entry nearly fills it."""
    return MemoryBlobStore(capacity=5)
