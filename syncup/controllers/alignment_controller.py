# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Admin alignment review — availability heatmap and goal conflict.
"""

from fastapi import APIRouter, Depends, HTTPException

from syncup.schemas.kickoff import AlignmentResponse
from syncup.models.domain import Session
from syncup.services.alignment_service import AlignmentService
from syncup.core.dependencies import get_alignment_service, get_current_session

router = APIRouter(prefix="/api/v1", tags=["Alignment"])


@router.get("/group/alignment", response_model=AlignmentResponse)
def get_alignment(
    session: Session = Depends(get_current_session),
    service: AlignmentService = Depends(get_alignment_service),
):
    """Roster, 168-slot heatmap, display intensities and conflict signal."""
    try:
        return service.get_alignment(session.member)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
