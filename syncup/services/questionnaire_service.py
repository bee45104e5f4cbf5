# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Questionnaire submission.
"""

import uuid
from typing import Any

from syncup.core.logging import get_logger
from syncup.metrics.prometheus import QUESTIONNAIRES_SUBMITTED
from syncup.models.domain import Questionnaire, mark_submitted
from syncup.repositories.member_repository import MemberRepository
from syncup.repositories.questionnaire_repository import QuestionnaireRepository

logger = get_logger(__name__)


class QuestionnaireService:
    """Stores a member's answers and flags the member as submitted."""

    def __init__(
        self,
        member_repo: MemberRepository,
        questionnaire_repo: QuestionnaireRepository,
    ) -> None:
        self._members = member_repo
        self._questionnaires = questionnaire_repo

    def submit(self, member_id: str, answers: dict[str, Any]) -> Questionnaire:
        """Replace the member's questionnaire. Raises KeyError."""
        questionnaire = Questionnaire(id=str(uuid.uuid4()), member_id=member_id, **answers)

        # lock order: members, then questionnaires
        with self._members.lock, self._questionnaires.lock:
            member = self._members.get_by_id(member_id)
            if member is None:
                raise KeyError(f"No member found with id '{member_id}'")
            previous = self._questionnaires.save(questionnaire)
            self._members.save(mark_submitted(member))

        QUESTIONNAIRES_SUBMITTED.inc()
        logger.info(
            "Questionnaire %s: slots=%d",
            "replaced" if previous else "submitted", len(questionnaire.availability),
            extra={"group_id": member.group_id, "member_id": member_id},
        )
        return questionnaire

    def get(self, member_id: str) -> Questionnaire:
        questionnaire = self._questionnaires.get_by_member(member_id)
        if questionnaire is None:
            raise KeyError(f"No questionnaire submitted by member '{member_id}'")
        return questionnaire
