def assert_stats_consistent(store):
    s = store.stats()
    assert set(s.keys()) == {"used_size", "capacity", "free_size", "file_count"}
    assert s["used_size"] >= 0
    assert s["capacity"] >= 0
    assert s["used_size"] <= s["capacity"]
    assert s["free_size"] == s["capacity"] - s["used_size"]
    assert s["file_count"] >= 0


def assert_accounting_exact(store):
    entries = store.get_files()
    assert store.used_size == sum(e.size for e in entries)
    assert len({e.name for e in entries}) == len(entries)
    assert store.used_size <= store.capacity
