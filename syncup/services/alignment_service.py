# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Alignment review for the group admin.
Takes one roster snapshot and feeds it through the pure alignment engine.
"""

from typing import Any

from syncup.core.config import settings
from syncup.core.logging import get_logger
from syncup.metrics.prometheus import ALIGNMENT_COMPUTATIONS, ALIGNMENT_DURATION
from syncup.models.domain import DAY_NAMES, Member
from syncup.services.alignment import (
    best_slots,
    compute_conflict,
    compute_heatmap,
    describe_slot,
    intensity_map,
    slot_position,
)
from syncup.services.roster import RosterReader

logger = get_logger(__name__)


class AlignmentService:
    """Heatmap and goal-conflict analysis over a group's roster."""

    def __init__(self, roster_reader: RosterReader, suggestion_limit: int = 5) -> None:
        self._roster = roster_reader
        self._suggestion_limit = suggestion_limit

    def get_alignment(self, actor: Member) -> dict[str, Any]:
        """Admin-only. Raises PermissionError."""
        if not actor.is_admin:
            raise PermissionError("Only the group admin can review alignment")

        with ALIGNMENT_DURATION.time():
            roster = self._roster.snapshot(actor.group_id)
            total = len(roster)
            heatmap = compute_heatmap(roster)
            conflict = compute_conflict(roster, threshold=settings.CONFLICT_THRESHOLD)

        suggestions = []
        for slot in best_slots(heatmap, self._suggestion_limit):
            day, hour = slot_position(slot)
            suggestions.append({
                "slot": slot,
                "day": day,
                "hour": hour,
                "count": heatmap[slot],
                "label": describe_slot(slot, heatmap[slot], total),
            })

        ALIGNMENT_COMPUTATIONS.labels(conflict=str(conflict.has_conflict).lower()).inc()
        if conflict.has_conflict:
            logger.info(
                "Goal mismatch: min=%.1f, max=%.1f",
                conflict.min, conflict.max,
                extra={"group_id": actor.group_id},
            )
        if suggestions:
            top = suggestions[0]
            logger.debug(
                "Best overlap: %s %d:00 (%d/%d)",
                DAY_NAMES[top["day"]], top["hour"], top["count"], total,
                extra={"group_id": actor.group_id},
            )

        return {
            "members": roster,
            "total_members": total,
            "respondents": sum(1 for e in roster if e.questionnaire is not None),
            "heatmap": heatmap,
            "intensity": intensity_map(heatmap, total),
            "conflict": conflict,
            "suggested_slots": suggestions,
        }
