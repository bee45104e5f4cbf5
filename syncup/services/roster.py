# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Roster snapshots — read a group's members with their questionnaires.
The alignment engine only ever sees the materialized list returned here.
"""

from syncup.models.domain import RosterEntry
from syncup.repositories.member_repository import MemberRepository
from syncup.repositories.questionnaire_repository import QuestionnaireRepository


class RosterReader:
    """Builds consistent roster snapshots from the member and questionnaire stores."""

    def __init__(
        self,
        member_repo: MemberRepository,
        questionnaire_repo: QuestionnaireRepository,
    ) -> None:
        self._members = member_repo
        self._questionnaires = questionnaire_repo

    def snapshot(self, group_id: str) -> list[RosterEntry]:
        """
        Members and their questionnaires read under both store locks, so a
        submission landing mid-read cannot pair a member with a stale answer.
        """
        # lock order: members, then questionnaires
        with self._members.lock, self._questionnaires.lock:
            members = self._members.get_by_group(group_id)
            answers = self._questionnaires.get_for_members(m.id for m in members)
        return [
            RosterEntry(member=m, questionnaire=answers.get(m.id))
            for m in members
        ]
