# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Project dashboard — meeting links, contacts and the team roster.
"""

import uuid
from typing import Any

from syncup.core.config import settings
from syncup.core.logging import get_logger
from syncup.models.domain import Contact, Member, ProjectConfig
from syncup.repositories.group_repository import GroupRepository
from syncup.repositories.project_config_repository import ProjectConfigRepository
from syncup.services.roster import RosterReader

logger = get_logger(__name__)


class ProjectService:
    """Business logic for the post-kick-off project home."""

    def __init__(
        self,
        group_repo: GroupRepository,
        config_repo: ProjectConfigRepository,
        roster_reader: RosterReader,
    ) -> None:
        self._groups = group_repo
        self._configs = config_repo
        self._roster = roster_reader

    def get_dashboard(self, group_id: str) -> dict[str, Any]:
        """Raises KeyError if the group does not exist."""
        group = self._groups.get_by_id(group_id)
        if group is None:
            raise KeyError(f"No group found with id '{group_id}'")
        config = self._configs.get_by_group(group_id) or ProjectConfig(
            group_id=group_id, weekly_meeting_time=settings.DEFAULT_MEETING_TIME
        )
        return {
            "group": group,
            "config": config,
            "members": self._roster.snapshot(group_id),
        }

    def update_config(self, actor: Member, changes: dict[str, Any]) -> ProjectConfig:
        """Replace the group's config. Raises PermissionError."""
        if not actor.is_admin:
            raise PermissionError("Only the group admin can edit the project home")

        contacts = tuple(
            Contact(
                id=c.get("id") or str(uuid.uuid4()),
                name=c.get("name", ""),
                role=c.get("role", ""),
                email=c.get("email", ""),
            )
            for c in changes.get("contacts", [])
        )
        config = ProjectConfig(
            group_id=actor.group_id,
            contacts=contacts,
            meeting_link=changes.get("meeting_link", ""),
            drive_link=changes.get("drive_link", ""),
            task_board_link=changes.get("task_board_link", ""),
            weekly_meeting_time=changes.get("weekly_meeting_time", ""),
        )
        self._configs.save(config)
        logger.info(
            "Project config updated: contacts=%d", len(contacts),
            extra={"group_id": actor.group_id},
        )
        return config
