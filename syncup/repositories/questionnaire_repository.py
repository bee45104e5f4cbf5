# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Questionnaire data access.
Zero or one questionnaire per member; saving replaces the previous one.
"""

import threading
from typing import Iterable, Optional

from syncup.models.domain import Questionnaire


class QuestionnaireRepository:
    """In-memory questionnaire storage keyed by member id."""

    def __init__(self) -> None:
        self._store: dict[str, Questionnaire] = {}
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    # ── Read ──

    def get_by_member(self, member_id: str) -> Optional[Questionnaire]:
        with self._lock:
            return self._store.get(member_id)

    def get_for_members(self, member_ids: Iterable[str]) -> dict[str, Questionnaire]:
        wanted = list(member_ids)
        with self._lock:
            return {mid: self._store[mid] for mid in wanted if mid in self._store}

    def count(self) -> int:
        with self._lock:
            return len(self._store)

    # ── Write ──

    def save(self, questionnaire: Questionnaire) -> Optional[Questionnaire]:
        """Store a questionnaire, returning the one it replaced (if any)."""
        with self._lock:
            previous = self._store.get(questionnaire.member_id)
            self._store[questionnaire.member_id] = questionnaire
            return previous

    # ── Bulk / internal ──

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
