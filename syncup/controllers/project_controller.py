# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Project dashboard and its editable configuration.
"""

from fastapi import APIRouter, Depends, HTTPException

from syncup.schemas.kickoff import DashboardResponse, ProjectConfigUpdateRequest
from syncup.models.domain import ProjectConfig, Session
from syncup.services.project_service import ProjectService
from syncup.core.dependencies import get_current_session, get_project_service

router = APIRouter(prefix="/api/v1", tags=["Project"])


@router.get("/group/dashboard", response_model=DashboardResponse)
def get_dashboard(
    session: Session = Depends(get_current_session),
    service: ProjectService = Depends(get_project_service),
):
    """Group, project links/contacts and team roster."""
    try:
        return service.get_dashboard(session.group.id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/group/config", response_model=ProjectConfig)
def update_config(
    payload: ProjectConfigUpdateRequest,
    session: Session = Depends(get_current_session),
    service: ProjectService = Depends(get_project_service),
):
    """Replace the project links and contacts (admin only)."""
    try:
        return service.update_config(session.member, payload.model_dump())
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
