# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Project configuration (dashboard links and contacts).
"""

import threading
from typing import Optional

from syncup.models.domain import ProjectConfig


class ProjectConfigRepository:
    """In-memory project config storage keyed by group id."""

    def __init__(self) -> None:
        self._store: dict[str, ProjectConfig] = {}
        self._lock = threading.RLock()

    def get_by_group(self, group_id: str) -> Optional[ProjectConfig]:
        with self._lock:
            return self._store.get(group_id)

    def save(self, config: ProjectConfig) -> None:
        with self._lock:
            self._store[config.group_id] = config

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
