# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Alignment engine — pure computation, no side effects.

Turns a roster snapshot into an availability heatmap over the 168 hourly
slots of a week (slot = day * 24 + hour, Monday = 0) and a goal-conflict
signal over expectation levels (lower value = more ambitious).
No I/O, no metrics, no logging. Malformed entries degrade to "no signal".
"""

from typing import Iterable, Optional, Sequence

from syncup.models.domain import (
    DAY_NAMES,
    SCALE_EPSILON,
    SLOTS_PER_DAY,
    SLOTS_PER_WEEK,
    ConflictSignal,
    RosterEntry,
)

DEFAULT_CONFLICT_THRESHOLD = 1.4
MIN_INTENSITY = 0.2


def slot_id(day: int, hour: int) -> int:
    """Slot id for a day (0=Mon..6=Sun) and hour (0..23). Raises ValueError."""
    if not 0 <= day < len(DAY_NAMES):
        raise ValueError(f"day must be in [0, 6], got {day}")
    if not 0 <= hour < SLOTS_PER_DAY:
        raise ValueError(f"hour must be in [0, 23], got {hour}")
    return day * SLOTS_PER_DAY + hour


def slot_position(slot: int) -> tuple[int, int]:
    """Inverse of slot_id: (day, hour). Raises ValueError."""
    if not is_valid_slot(slot):
        raise ValueError(f"slot must be in [0, {SLOTS_PER_WEEK - 1}], got {slot}")
    return divmod(slot, SLOTS_PER_DAY)


def is_valid_slot(slot: int) -> bool:
    return isinstance(slot, int) and not isinstance(slot, bool) and 0 <= slot < SLOTS_PER_WEEK


def compute_heatmap(roster: Iterable[RosterEntry]) -> list[int]:
    """
    Count, per slot, how many members are available.

    Members without a questionnaire contribute nothing. Out-of-range slot
    ids are skipped and a repeated slot counts once per member.
    """
    heatmap = [0] * SLOTS_PER_WEEK
    for entry in roster:
        if entry.questionnaire is None:
            continue
        for slot in set(entry.questionnaire.availability):
            if is_valid_slot(slot):
                heatmap[slot] += 1
    return heatmap


def qualifying_expectations(roster: Iterable[RosterEntry]) -> list[float]:
    """Positive expectation levels of members who answered."""
    return [
        entry.questionnaire.expectation_level
        for entry in roster
        if entry.questionnaire is not None
        and entry.questionnaire.expectation_level is not None
        and entry.questionnaire.expectation_level > 0
    ]


def compute_conflict(
    roster: Iterable[RosterEntry],
    threshold: float = DEFAULT_CONFLICT_THRESHOLD,
) -> ConflictSignal:
    """
    Flag a goal mismatch when the spread between the most and least
    ambitious expectation levels reaches `threshold` (inclusive).
    """
    values = qualifying_expectations(roster)
    if not values:
        return ConflictSignal(has_conflict=False)
    low, high = min(values), max(values)
    if len(values) < 2:
        return ConflictSignal(has_conflict=False, min=low, max=high)
    # epsilon: 2.4 - 1.0 is 1.3999999999999999 in binary floating point
    return ConflictSignal(
        has_conflict=(high - low) >= threshold - SCALE_EPSILON,
        min=low,
        max=high,
    )


def slot_intensity(count: int, total: int) -> float:
    """Display weight in (0.2, 1.0] for an occupied slot, 0 otherwise."""
    if count <= 0 or total <= 0:
        return 0.0
    return MIN_INTENSITY + (count / total) * (1.0 - MIN_INTENSITY)


def intensity_map(heatmap: Sequence[int], total: int) -> list[float]:
    return [slot_intensity(count, total) for count in heatmap]


def describe_slot(slot: int, count: int, total: int) -> str:
    """Tooltip text, e.g. '2/3 available on Mon at 14:00'."""
    day, hour = slot_position(slot)
    return f"{count}/{total} available on {DAY_NAMES[day]} at {hour}:00"


def best_slots(heatmap: Sequence[int], limit: Optional[int] = 5) -> list[int]:
    """
    Occupied slots ordered by count (desc), then by slot id.
    ``limit=None`` returns all of them; a negative limit returns none.
    """
    ranked = sorted(
        (slot for slot, count in enumerate(heatmap) if count > 0),
        key=lambda slot: (-heatmap[slot], slot),
    )
    return ranked if limit is None else ranked[:max(limit, 0)]
