# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Group data access.
Encapsulates all read/write operations on the groups in-memory store.
NO business rules here — pure CRUD.
"""

import threading
from typing import Optional

from syncup.models.domain import Group


class GroupRepository:
    """In-memory group storage, indexed by id and by join code."""

    def __init__(self) -> None:
        self._store: dict[str, Group] = {}
        self._by_code: dict[str, str] = {}
        self._lock = threading.RLock()

    # ── Read ──

    def get_by_id(self, group_id: str) -> Optional[Group]:
        with self._lock:
            return self._store.get(group_id)

    def get_by_code(self, code: str) -> Optional[Group]:
        with self._lock:
            group_id = self._by_code.get(code)
            return self._store.get(group_id) if group_id else None

    def count(self) -> int:
        with self._lock:
            return len(self._store)

    # ── Write ──

    def save_new(self, group: Group) -> bool:
        """Insert a group unless its code is taken. Returns False on a clash."""
        with self._lock:
            if group.code in self._by_code:
                return False
            self.save(group)
            return True

    def save(self, group: Group) -> None:
        with self._lock:
            self._store[group.id] = group
            self._by_code[group.code] = group.id

    # ── Bulk / internal ──

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
            self._by_code.clear()
