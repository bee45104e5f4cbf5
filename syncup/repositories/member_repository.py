# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Member data access.
Members are never deleted; updates replace the stored value.
Handlers run on a threadpool, so every read copies under the lock.
"""

import threading
from typing import Optional

from syncup.models.domain import Member


class MemberRepository:
    """In-memory member storage."""

    def __init__(self) -> None:
        self._store: dict[str, Member] = {}
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """Held by callers that need several calls to act as one."""
        return self._lock

    # ── Read ──

    def get_by_id(self, member_id: str) -> Optional[Member]:
        with self._lock:
            return self._store.get(member_id)

    def get_by_group(self, group_id: str) -> list[Member]:
        """Members of a group, in join order."""
        with self._lock:
            members = list(self._store.values())
        return [m for m in members if m.group_id == group_id]

    def find_by_name(self, group_id: str, name: str) -> Optional[Member]:
        """Case-insensitive name lookup within a group."""
        wanted = name.lower()
        for member in self.get_by_group(group_id):
            if member.name.lower() == wanted:
                return member
        return None

    def count(self) -> int:
        with self._lock:
            return len(self._store)

    # ── Write ──

    def save(self, member: Member) -> None:
        with self._lock:
            self._store[member.id] = member

    # ── Bulk / internal ──

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
