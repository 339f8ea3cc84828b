from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Mapping, Optional

UPDATABLE_FIELDS = ("name", "email")


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    created_at: str


class UserStore:
    """In-memory user records guarded by a single lock.

    Every operation runs inside one critical section, and records are frozen
    dataclasses, so callers never share mutable state with the store.
    Lookups on an unknown id return ``None`` (or ``False`` for ``remove``)
    instead of raising.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._users: Dict[str, User] = {}

    def insert(self, user: User) -> None:
        with self._lock:
            if user.id in self._users:
                raise ValueError(f"User id already exists: {user.id}")
            self._users[user.id] = user

    def get(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def list(self) -> List[User]:
        with self._lock:
            return list(self._users.values())

    def update(self, user_id: str, patch: Mapping[str, Any]) -> Optional[User]:
        """Overwrite ``name``/``email`` from ``patch``; ``None`` values are skipped."""
        changes = {key: patch[key] for key in UPDATABLE_FIELDS if patch.get(key) is not None}
        with self._lock:
            current = self._users.get(user_id)
            if current is None:
                return None
            updated = replace(current, **changes)
            self._users[user_id] = updated
            return updated

    def remove(self, user_id: str) -> bool:
        with self._lock:
            return self._users.pop(user_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def clear(self) -> None:
        with self._lock:
            self._users.clear()
