# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Questionnaire submission and retrieval for the current member.
"""

from fastapi import APIRouter, Depends, HTTPException

from syncup.schemas.kickoff import QuestionnaireSubmitRequest
from syncup.models.domain import Questionnaire, Session
from syncup.services.questionnaire_service import QuestionnaireService
from syncup.core.dependencies import get_current_session, get_questionnaire_service

router = APIRouter(prefix="/api/v1", tags=["Questionnaire"])


@router.put("/questionnaire", response_model=Questionnaire)
def submit_questionnaire(
    payload: QuestionnaireSubmitRequest,
    session: Session = Depends(get_current_session),
    service: QuestionnaireService = Depends(get_questionnaire_service),
):
    """Submit (or resubmit) the caller's questionnaire."""
    try:
        return service.submit(session.member.id, payload.model_dump())
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/questionnaire", response_model=Questionnaire)
def get_questionnaire(
    session: Session = Depends(get_current_session),
    service: QuestionnaireService = Depends(get_questionnaire_service),
):
    """Return the caller's questionnaire."""
    try:
        return service.get(session.member.id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
