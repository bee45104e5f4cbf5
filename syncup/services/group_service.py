# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Group lifecycle — create, join, session resolution, finalize.
Coordinates repository writes with metrics, logging and session tokens.
"""

import secrets
import string
import uuid
from datetime import datetime, timezone
from typing import Any

from syncup.core.config import settings
from syncup.core.logging import get_logger
from syncup.core.security import create_session_token, decode_session_token
from syncup.metrics.prometheus import (
    GROUPS_CREATED,
    GROUPS_FINALIZED,
    MEMBERS_JOINED,
    SESSION_REJECTIONS,
)
from syncup.models.domain import (
    Group,
    Member,
    ProjectConfig,
    Session,
    finalize,
    with_meeting_time,
    with_role,
)
from syncup.repositories.group_repository import GroupRepository
from syncup.repositories.member_repository import MemberRepository
from syncup.repositories.project_config_repository import ProjectConfigRepository

logger = get_logger(__name__)

CODE_ALPHABET = string.ascii_uppercase + string.digits
MAX_CODE_ATTEMPTS = 20


class GroupService:
    """Business logic for groups, membership and sessions."""

    def __init__(
        self,
        group_repo: GroupRepository,
        member_repo: MemberRepository,
        config_repo: ProjectConfigRepository,
    ) -> None:
        self._groups = group_repo
        self._members = member_repo
        self._configs = config_repo

    # ── Commands ──

    def create_group(self, project_name: str, admin_name: str) -> dict[str, Any]:
        """Create a group; the creator becomes its admin member."""
        group_id = str(uuid.uuid4())
        group = self._insert_group(group_id, project_name)
        admin = Member(
            id=str(uuid.uuid4()),
            group_id=group.id,
            name=admin_name,
            is_admin=True,
        )
        self._members.save(admin)

        GROUPS_CREATED.inc()
        logger.info(
            "Group created: code=%s", group.code, extra={"group_id": group.id}
        )
        return {
            "token": create_session_token(admin, group),
            "member": admin,
            "group": group,
        }

    def join_group(self, code: str, name: str) -> dict[str, Any]:
        """
        Join a group by code. A name already used in the group (ignoring
        case) signs back in as that member. Raises KeyError on unknown code.
        """
        group = self._groups.get_by_code(code.strip().upper())
        if group is None:
            MEMBERS_JOINED.labels(outcome="unknown_code").inc()
            raise KeyError(f"No group found for code '{code}'")

        # find-or-create must not interleave with another join of the same name
        with self._members.lock:
            member = self._members.find_by_name(group.id, name)
            returning = member is not None
            if member is None:
                member = Member(id=str(uuid.uuid4()), group_id=group.id, name=name)
                self._members.save(member)

        if returning:
            MEMBERS_JOINED.labels(outcome="returning").inc()
            logger.info("Member signed back in",
                        extra={"group_id": group.id, "member_id": member.id})
        else:
            MEMBERS_JOINED.labels(outcome="joined").inc()
            logger.info("Member joined",
                        extra={"group_id": group.id, "member_id": member.id})

        return {
            "token": create_session_token(member, group),
            "member": member,
            "group": group,
        }

    def finalize_group(
        self,
        actor: Member,
        weekly_meeting_time: str,
        assigned_roles: dict[str, str],
    ) -> dict[str, Any]:
        """
        Lock in the meeting time and final roles.
        Raises PermissionError (not admin), KeyError, ValueError.
        """
        self._require_admin(actor)
        group = self.get_group(actor.group_id)
        meeting_time = weekly_meeting_time.strip()
        if not meeting_time:
            raise ValueError("Please specify a weekly meeting time.")

        group = finalize(group)
        self._groups.save(group)

        members: list[Member] = []
        for member in self._members.get_by_group(group.id):
            role = (assigned_roles.get(member.id) or "").strip()
            if role:
                member = with_role(member, role)
                self._members.save(member)
            members.append(member)

        unknown = set(assigned_roles) - {m.id for m in members}
        if unknown:
            logger.warning(
                "Ignoring roles for non-members: ids=%s", sorted(unknown),
                extra={"group_id": group.id},
            )

        config = self._configs.get_by_group(group.id)
        if config is None:
            config = ProjectConfig(group_id=group.id, weekly_meeting_time=meeting_time)
        else:
            config = with_meeting_time(config, meeting_time)
        self._configs.save(config)

        GROUPS_FINALIZED.inc()
        logger.info(
            "Group finalized: roles_assigned=%d",
            sum(1 for m in members if m.role),
            extra={"group_id": group.id},
        )
        return {
            "status": "finalized",
            "group": group,
            "members": members,
            "config": config,
        }

    # ── Queries ──

    def get_group(self, group_id: str) -> Group:
        group = self._groups.get_by_id(group_id)
        if group is None:
            raise KeyError(f"No group found with id '{group_id}'")
        return group

    def get_status(self, group_id: str) -> dict[str, Any]:
        """Join and submission progress of a group."""
        group = self.get_group(group_id)
        members = self._members.get_by_group(group_id)
        return {
            "group": group,
            "total_members": len(members),
            "submitted_count": sum(1 for m in members if m.has_submitted),
            "members": members,
        }

    def resolve_session(self, token: str) -> Session:
        """Turn a session token into a Session. Raises PermissionError."""
        payload = decode_session_token(token)
        if payload is None:
            SESSION_REJECTIONS.labels(reason="invalid_token").inc()
            raise PermissionError("Invalid or expired session")

        member = self._members.get_by_id(payload["sub"])
        group = self._groups.get_by_id(payload["group_id"])
        if member is None or group is None or member.group_id != group.id:
            SESSION_REJECTIONS.labels(reason="unknown_member").inc()
            raise PermissionError("Session no longer matches a group member")

        expires_at = None
        if "exp" in payload:
            expires_at = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
        return Session(member=member, group=group, expires_at=expires_at)

    # ── Helpers ──

    @staticmethod
    def _require_admin(actor: Member) -> None:
        if not actor.is_admin:
            raise PermissionError("Only the group admin can do this")

    def _insert_group(self, group_id: str, project_name: str) -> Group:
        """Store a group under a fresh random join code."""
        for _ in range(MAX_CODE_ATTEMPTS):
            code = "".join(
                secrets.choice(CODE_ALPHABET) for _ in range(settings.GROUP_CODE_LENGTH)
            )
            group = Group(id=group_id, code=code, project_name=project_name)
            if self._groups.save_new(group):
                return group
        raise RuntimeError("Could not generate a unique group code")
