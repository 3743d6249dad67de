"""Bounded cache use case: fill a store, evict by hand, refill."""
from blobstore import Entry, MemoryBlobStore, WriteOutcome


def test_fill_until_full_then_make_room():
    store = MemoryBlobStore(capacity=20)
    admitted = []
    for i in range(10):
        entry = Entry(f"page-{i}", "x" * 8)
        if store.write(entry):
            admitted.append(entry.name)
    assert admitted == ["page-0", "page-1", "page-2", "page-3", "page-4"]
    assert store.free_size == 0

    # caller evicts the oldest admission to make room
    assert store.delete(admitted[0])
    assert store.write(Entry("page-5", "x" * 8))
    assert store.used_size == 20


def test_upsert_by_delete_then_write():
    store = MemoryBlobStore(capacity=10)
    assert store.try_write(Entry("cfg", "v1" * 2)) is WriteOutcome.ADMITTED
    assert store.try_write(Entry("cfg", "v2" * 3)) is WriteOutcome.DUPLICATE_NAME
    store.delete("cfg")
    assert store.try_write(Entry("cfg", "v2" * 3)) is WriteOutcome.ADMITTED
    assert store.get_file("cfg").content == "v2v2v2"
    assert store.used_size == 3
