# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire repositories and services.
"""

from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from syncup.metrics.prometheus import SESSION_REJECTIONS
from syncup.models.domain import Session
from syncup.repositories.group_repository import GroupRepository
from syncup.repositories.member_repository import MemberRepository
from syncup.repositories.questionnaire_repository import QuestionnaireRepository
from syncup.repositories.project_config_repository import ProjectConfigRepository
from syncup.services.alignment_service import AlignmentService
from syncup.services.group_service import GroupService
from syncup.services.project_service import ProjectService
from syncup.services.questionnaire_service import QuestionnaireService
from syncup.services.roster import RosterReader

# ── Singleton repository instances (in-memory stores) ──
_group_repo = GroupRepository()
_member_repo = MemberRepository()
_questionnaire_repo = QuestionnaireRepository()
_config_repo = ProjectConfigRepository()
_roster_reader = RosterReader(
    member_repo=_member_repo,
    questionnaire_repo=_questionnaire_repo,
)

# ── Service instances (with injected dependencies) ──
_group_service = GroupService(
    group_repo=_group_repo,
    member_repo=_member_repo,
    config_repo=_config_repo,
)
_questionnaire_service = QuestionnaireService(
    member_repo=_member_repo,
    questionnaire_repo=_questionnaire_repo,
)
_alignment_service = AlignmentService(roster_reader=_roster_reader)
_project_service = ProjectService(
    group_repo=_group_repo,
    config_repo=_config_repo,
    roster_reader=_roster_reader,
)

_bearer = HTTPBearer(auto_error=False)


# ── FastAPI dependency functions ──
def get_group_service() -> GroupService:
    return _group_service


def get_questionnaire_service() -> QuestionnaireService:
    return _questionnaire_service


def get_alignment_service() -> AlignmentService:
    return _alignment_service


def get_project_service() -> ProjectService:
    return _project_service


def get_group_repo() -> GroupRepository:
    return _group_repo


def get_member_repo() -> MemberRepository:
    return _member_repo


def get_questionnaire_repo() -> QuestionnaireRepository:
    return _questionnaire_repo


def get_config_repo() -> ProjectConfigRepository:
    return _config_repo


def get_current_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    service: GroupService = Depends(get_group_service),
) -> Session:
    """Resolve the bearer token into a Session, or 401."""
    if credentials is None or not credentials.credentials:
        SESSION_REJECTIONS.labels(reason="missing_token").inc()
        raise HTTPException(
            status_code=401,
            detail="Missing session token. Provide 'Authorization: Bearer <token>'.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return service.resolve_session(credentials.credentials)
    except PermissionError as e:
        raise HTTPException(
            status_code=401, detail=str(e), headers={"WWW-Authenticate": "Bearer"}
        )
