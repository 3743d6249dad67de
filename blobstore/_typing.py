from typing import TypedDict


class BSStats(TypedDict):
    used_size: int
    capacity: int
    free_size: int
    file_count: int
