from __future__ import annotations

import itertools
import threading
import time
import uuid


class UserIdGenerator:
    """Produces ids of the form ``user_<unix-nanos>_<instance>_<seq>``.

    The clock reading alone can repeat for calls landing in the same tick,
    so every id also carries a random per-generator tag and a sequence
    number drawn under a lock.
    """

    def __init__(self, prefix: str = "user"):
        self._prefix = prefix
        self._instance = uuid.uuid4().hex[:8]
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            seq = next(self._counter)
        return f"{self._prefix}_{time.time_ns()}_{self._instance}_{seq}"
