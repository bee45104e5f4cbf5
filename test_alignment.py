# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false

"""
Tests for the alignment engine and the domain scale/update helpers.
"""

import itertools
import random
import uuid

import pytest
from pydantic import ValidationError

from syncup.models.domain import (
    SLOTS_PER_WEEK,
    ExpectationLevel,
    Group,
    Member,
    ProjectConfig,
    Questionnaire,
    RosterEntry,
    finalize,
    mark_submitted,
    with_meeting_time,
    with_role,
)
from syncup.services.alignment import (
    best_slots,
    compute_conflict,
    compute_heatmap,
    describe_slot,
    intensity_map,
    is_valid_slot,
    qualifying_expectations,
    slot_id,
    slot_intensity,
    slot_position,
)


def make_entry(slots=(), level=0.0, answered=True, name="member"):
    member = Member(id=str(uuid.uuid4()), group_id="group-1", name=name)
    questionnaire = None
    if answered:
        questionnaire = Questionnaire(
            id=str(uuid.uuid4()),
            member_id=member.id,
            availability=tuple(slots),
            expectation_level=level,
        )
    return RosterEntry(member=member, questionnaire=questionnaire)


@pytest.fixture
def three_member_roster():
    return [
        make_entry(slots=(0, 1, 24), name="Ana"),
        make_entry(slots=(0, 24, 25), name="Ben"),
        make_entry(slots=(1,), name="Cleo"),
    ]


# ============================================
# Heatmap
# ============================================
class TestHeatmap:
    def test_empty_roster_is_all_zeros(self):
        assert compute_heatmap([]) == [0] * SLOTS_PER_WEEK

    def test_always_168_non_negative_entries(self, three_member_roster):
        heatmap = compute_heatmap(three_member_roster)
        assert len(heatmap) == 168
        assert all(count >= 0 for count in heatmap)

    def test_three_member_overlap(self, three_member_roster):
        heatmap = compute_heatmap(three_member_roster)
        assert heatmap[0] == 2
        assert heatmap[1] == 2
        assert heatmap[24] == 2
        assert heatmap[25] == 1
        assert sum(heatmap) == 7
        others = [c for i, c in enumerate(heatmap) if i not in (0, 1, 24, 25)]
        assert set(others) == {0}

    def test_out_of_range_slots_ignored(self):
        heatmap = compute_heatmap([make_entry(slots=(-1, 168, 500, 5))])
        assert heatmap[5] == 1
        assert sum(heatmap) == 1

    def test_repeated_slot_counts_once_per_member(self):
        heatmap = compute_heatmap([make_entry(slots=(3, 3, 3))])
        assert heatmap[3] == 1

    def test_member_without_questionnaire_contributes_nothing(self):
        roster = [make_entry(answered=False), make_entry(slots=(10,))]
        heatmap = compute_heatmap(roster)
        assert heatmap[10] == 1
        assert sum(heatmap) == 1

    def test_boundary_slots_counted(self):
        heatmap = compute_heatmap([make_entry(slots=(0, 167))])
        assert heatmap[0] == 1
        assert heatmap[167] == 1

    def test_order_independent(self, three_member_roster):
        expected = compute_heatmap(three_member_roster)
        for order in itertools.permutations(three_member_roster):
            assert compute_heatmap(list(order)) == expected

    def test_sum_matches_valid_selected_slots(self):
        rng = random.Random(42)
        roster = []
        expected_total = 0
        for i in range(25):
            slots = [rng.randint(-10, 180) for _ in range(rng.randint(0, 40))]
            answered = i % 7 != 0
            if answered:
                expected_total += len({s for s in slots if 0 <= s < 168})
            roster.append(make_entry(slots=slots, answered=answered))
        assert sum(compute_heatmap(roster)) == expected_total

    def test_idempotent(self, three_member_roster):
        first = compute_heatmap(three_member_roster)
        second = compute_heatmap(three_member_roster)
        assert first == second
        assert first is not second


# ============================================
# Conflict detection
# ============================================
class TestConflict:
    def test_empty_roster_no_conflict(self):
        signal = compute_conflict([])
        assert signal.has_conflict is False
        assert signal.min is None
        assert signal.max is None

    def test_single_opinion_no_conflict(self):
        signal = compute_conflict([make_entry(level=1.0)])
        assert signal.has_conflict is False
        assert signal.min == 1.0
        assert signal.max == 1.0

    def test_zero_level_is_no_opinion(self):
        roster = [make_entry(level=0.0), make_entry(level=4.0)]
        assert qualifying_expectations(roster) == [4.0]
        assert compute_conflict(roster).has_conflict is False

    def test_gap_below_threshold(self):
        roster = [make_entry(level=1.0), make_entry(level=2.3)]
        assert compute_conflict(roster).has_conflict is False

    def test_gap_above_threshold(self):
        roster = [make_entry(level=1.0), make_entry(level=2.7)]
        assert compute_conflict(roster).has_conflict is True

    def test_gap_exactly_at_threshold_is_conflict(self):
        roster = [make_entry(level=1.0), make_entry(level=2.4)]
        assert compute_conflict(roster).has_conflict is True

    def test_missing_questionnaire_excluded(self):
        roster = [
            make_entry(level=1.0),
            make_entry(level=4.0),
            make_entry(answered=False),
        ]
        signal = compute_conflict(roster)
        assert signal.has_conflict is True
        assert signal.min == 1.0
        assert signal.max == 4.0

    def test_min_is_most_ambitious(self):
        roster = [make_entry(level=3.3), make_entry(level=1.7), make_entry(level=2.0)]
        signal = compute_conflict(roster)
        assert signal.min == 1.7
        assert signal.max == 3.3
        assert signal.has_conflict is True

    @pytest.mark.parametrize(
        "low,high",
        list(itertools.combinations(ExpectationLevel.steps(), 2)),
    )
    def test_canonical_step_pairs(self, low, high):
        roster = [make_entry(level=low.value), make_entry(level=high.value)]
        expected = round(high.value - low.value, 1) >= 1.4
        assert compute_conflict(roster).has_conflict is expected

    def test_custom_threshold(self):
        roster = [make_entry(level=1.0), make_entry(level=2.0)]
        assert compute_conflict(roster, threshold=1.0).has_conflict is True
        assert compute_conflict(roster, threshold=1.3).has_conflict is False

    def test_idempotent(self):
        roster = [make_entry(level=1.0), make_entry(level=3.7)]
        assert compute_conflict(roster) == compute_conflict(roster)


# ============================================
# Intensity
# ============================================
class TestIntensity:
    def test_zero_count_is_zero(self):
        assert slot_intensity(0, 5) == 0.0

    def test_zero_total_is_zero(self):
        assert slot_intensity(3, 0) == 0.0

    def test_full_overlap_is_one(self):
        assert slot_intensity(4, 4) == pytest.approx(1.0)

    def test_partial_overlap(self):
        assert slot_intensity(1, 4) == pytest.approx(0.4)

    def test_single_member_floor_above_minimum(self):
        assert 0.2 < slot_intensity(1, 100) <= 1.0

    def test_map_with_no_members(self):
        assert intensity_map([0] * 168, 0) == [0.0] * 168

    def test_map_uses_roster_size(self, three_member_roster):
        heatmap = compute_heatmap(three_member_roster)
        intensities = intensity_map(heatmap, 3)
        assert intensities[0] == pytest.approx(0.2 + (2 / 3) * 0.8)
        assert intensities[25] == pytest.approx(0.2 + (1 / 3) * 0.8)
        assert intensities[100] == 0.0


# ============================================
# Slot helpers
# ============================================
class TestSlots:
    def test_slot_id(self):
        assert slot_id(0, 0) == 0
        assert slot_id(1, 0) == 24
        assert slot_id(6, 23) == 167

    @pytest.mark.parametrize("day,hour", [(-1, 0), (7, 0), (0, 24), (0, -1)])
    def test_slot_id_out_of_range(self, day, hour):
        with pytest.raises(ValueError):
            slot_id(day, hour)

    def test_slot_position_inverts_slot_id(self):
        assert slot_position(25) == (1, 1)
        assert slot_position(167) == (6, 23)

    def test_slot_position_out_of_range(self):
        with pytest.raises(ValueError):
            slot_position(168)

    def test_is_valid_slot(self):
        assert is_valid_slot(0)
        assert is_valid_slot(167)
        assert not is_valid_slot(-1)
        assert not is_valid_slot(168)
        assert not is_valid_slot(True)

    def test_describe_slot(self):
        assert describe_slot(14, 2, 3) == "2/3 available on Mon at 14:00"
        assert describe_slot(slot_id(4, 9), 1, 5) == "1/5 available on Fri at 9:00"

    def test_best_slots_order(self):
        heatmap = [0] * 168
        heatmap[30] = 2
        heatmap[10] = 3
        heatmap[5] = 2
        assert best_slots(heatmap) == [10, 5, 30]
        assert best_slots(heatmap, limit=1) == [10]
        assert best_slots([0] * 168) == []

    def test_best_slots_limit_edges(self):
        heatmap = [0] * 168
        heatmap[10] = 3
        heatmap[5] = 2
        assert best_slots(heatmap, limit=None) == [10, 5]
        assert best_slots(heatmap, limit=0) == []
        assert best_slots(heatmap, limit=-1) == []


# ============================================
# Domain scale & immutable updates
# ============================================
class TestExpectationLevel:
    def test_ten_steps_ordered_most_ambitious_first(self):
        values = [level.value for level in ExpectationLevel.steps()]
        assert values == [1.0, 1.3, 1.7, 2.0, 2.3, 2.7, 3.0, 3.3, 3.7, 4.0]

    def test_from_value_matches_with_epsilon(self):
        assert ExpectationLevel.from_value(2.3) is ExpectationLevel.GOOD_MINUS
        assert ExpectationLevel.from_value(1.0 + 0.3) is ExpectationLevel.VERY_GOOD_MINUS

    def test_from_value_rejects_off_scale(self):
        with pytest.raises(ValueError):
            ExpectationLevel.from_value(2.4)

    def test_ambition_rank(self):
        assert ExpectationLevel.VERY_GOOD.ambition_rank == 0
        assert ExpectationLevel.SUFFICIENT.ambition_rank == 9

    def test_label(self):
        assert ExpectationLevel.GOOD.label == "2.0"


class TestImmutableUpdates:
    def test_with_role_returns_new_member(self):
        member = Member(id="m1", group_id="g1", name="Ana")
        updated = with_role(member, "Scrum Master")
        assert updated.role == "Scrum Master"
        assert member.role is None
        assert updated.name == "Ana"

    def test_mark_submitted_keeps_other_fields(self):
        member = Member(id="m1", group_id="g1", name="Ana", role="Dev")
        updated = mark_submitted(member)
        assert updated.has_submitted is True
        assert updated.role == "Dev"

    def test_finalize_group(self):
        group = Group(id="g1", code="ABC123", project_name="Compiler")
        assert finalize(group).is_finalized is True
        assert group.is_finalized is False

    def test_with_meeting_time(self):
        config = ProjectConfig(group_id="g1", meeting_link="https://zoom.example/x")
        updated = with_meeting_time(config, "Mondays 2pm")
        assert updated.weekly_meeting_time == "Mondays 2pm"
        assert updated.meeting_link == "https://zoom.example/x"

    def test_models_are_frozen(self):
        member = Member(id="m1", group_id="g1", name="Ana")
        with pytest.raises(ValidationError):
            member.role = "Dev"
