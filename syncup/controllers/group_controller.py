# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Group creation, joining, sessions, status and finalization.
Thin HTTP layer — delegates ALL logic to GroupService.
"""

from fastapi import APIRouter, Depends, HTTPException

from syncup.schemas.kickoff import (
    AuthResponse,
    FinalizeRequest,
    FinalizeResponse,
    GroupCreateRequest,
    GroupJoinRequest,
    GroupStatusResponse,
    SessionResponse,
)
from syncup.models.domain import Session
from syncup.services.group_service import GroupService
from syncup.core.dependencies import get_current_session, get_group_service

router = APIRouter(prefix="/api/v1", tags=["Groups"])


@router.post("/groups", status_code=201, response_model=AuthResponse)
def create_group(
    payload: GroupCreateRequest,
    service: GroupService = Depends(get_group_service),
):
    """Create a group; the caller becomes its admin."""
    return service.create_group(
        project_name=payload.project_name,
        admin_name=payload.admin_name,
    )


@router.post("/groups/join", response_model=AuthResponse)
def join_group(
    payload: GroupJoinRequest,
    service: GroupService = Depends(get_group_service),
):
    """Join a group by code, or sign back in under an existing name."""
    try:
        return service.join_group(code=payload.code, name=payload.name)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/session", response_model=SessionResponse)
def get_session(session: Session = Depends(get_current_session)):
    """Validate the caller's token and return the current member and group."""
    return {"member": session.member, "group": session.group}


@router.get("/group/status", response_model=GroupStatusResponse)
def get_group_status(
    session: Session = Depends(get_current_session),
    service: GroupService = Depends(get_group_service),
):
    """How many members joined and how many submitted the questionnaire."""
    try:
        return service.get_status(session.group.id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/group/finalize", response_model=FinalizeResponse)
def finalize_group(
    payload: FinalizeRequest,
    session: Session = Depends(get_current_session),
    service: GroupService = Depends(get_group_service),
):
    """Lock in the weekly meeting time and final roles (admin only)."""
    try:
        return service.finalize_group(
            actor=session.member,
            weekly_meeting_time=payload.weekly_meeting_time,
            assigned_roles=payload.assigned_roles,
        )
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
