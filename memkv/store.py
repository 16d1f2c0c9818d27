import threading
from typing import Optional


class KeyValueStore:
    """In-memory mapping of string keys to string values.

    Every operation runs as a single critical section under one lock, so the
    observable order of effects is the order in which callers acquire it.
    Critical sections never await, which keeps the store usable from both
    event-loop handlers and plain threads.
    """

    def __init__(self):
        self._data = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def put(self, key: str, value: str) -> str:
        with self._lock:
            self._data[key] = value
            return value

    def delete(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.pop(key, None)

    def size(self) -> int:
        with self._lock:
            return len(self._data)
