# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas — API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from syncup.core.config import settings
from syncup.models.domain import (
    SLOTS_PER_WEEK,
    ConflictSignal,
    ExpectationLevel,
    Group,
    Member,
    ProjectConfig,
    RosterEntry,
    Skill,
)


# ── Group / Session Schemas ──

class GroupCreateRequest(BaseModel):
    project_name: str = Field(..., min_length=1, max_length=255, description="Project name")
    admin_name: str = Field(..., min_length=1, max_length=255, description="Creator's display name")

    @field_validator("project_name", "admin_name")
    @classmethod
    def strip_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class GroupJoinRequest(BaseModel):
    code: str = Field(..., min_length=1, description="Group join code")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")

    @field_validator("code")
    @classmethod
    def normalise_code(cls, v: str) -> str:
        v = v.strip().upper()
        if len(v) > settings.GROUP_CODE_LENGTH:
            raise ValueError(
                f"must be at most {settings.GROUP_CODE_LENGTH} characters"
            )
        return v

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class AuthResponse(BaseModel):
    token: str
    member: Member
    group: Group


class SessionResponse(BaseModel):
    member: Member
    group: Group


# ── Questionnaire Schemas ──

class QuestionnaireSubmitRequest(BaseModel):
    expectation_level: float = Field(..., description="Target grade, 1.0 (best) to 4.0 (pass)")
    grade_vs_learning: int = Field(default=3, ge=1, le=5)
    project_experience: int = Field(default=3, ge=1, le=5)
    weekly_hours: int = Field(..., ge=0, le=168, description="Hours per week committed")
    prior_experience_takeaway: str = Field(default="", max_length=5000)
    course_motivation: str = Field(default="", max_length=5000)
    skills: list[Skill] = Field(default_factory=list, max_length=50)
    preferred_role: Optional[str] = Field(default=None, max_length=100)
    meeting_frequency: str = Field(default="1x / week", max_length=50)
    project_methodology: str = Field(default="Flexible", max_length=50)
    availability: list[int] = Field(
        default_factory=list,
        description="Selected slot ids, day * 24 + hour (Monday = 0)",
    )

    @field_validator("expectation_level")
    @classmethod
    def on_grade_scale(cls, v: float) -> float:
        return ExpectationLevel.from_value(v).value

    @field_validator("availability")
    @classmethod
    def valid_slots(cls, v: list[int]) -> list[int]:
        out_of_range = [s for s in v if not 0 <= s < SLOTS_PER_WEEK]
        if out_of_range:
            raise ValueError(
                f"slot ids must be in [0, {SLOTS_PER_WEEK - 1}]: {out_of_range}"
            )
        if len(set(v)) != len(v):
            raise ValueError("slot ids must be distinct")
        return sorted(v)

    @field_validator("preferred_role")
    @classmethod
    def blank_role_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


# ── Alignment / Admin Schemas ──

class SlotSuggestion(BaseModel):
    slot: int
    day: int
    hour: int
    count: int
    label: str


class AlignmentResponse(BaseModel):
    members: list[RosterEntry]
    total_members: int
    respondents: int
    heatmap: list[int]
    intensity: list[float]
    conflict: ConflictSignal
    suggested_slots: list[SlotSuggestion]


class GroupStatusResponse(BaseModel):
    group: Group
    total_members: int
    submitted_count: int
    members: list[Member]


class FinalizeRequest(BaseModel):
    weekly_meeting_time: str = Field(..., max_length=255, examples=["Mondays 2pm"])
    assigned_roles: dict[str, str] = Field(
        default_factory=dict, description="member id -> final role"
    )


class FinalizeResponse(BaseModel):
    status: str
    group: Group
    members: list[Member]
    config: ProjectConfig


# ── Dashboard Schemas ──

class ContactIn(BaseModel):
    id: Optional[str] = None
    name: str = Field(default="", max_length=255)
    role: str = Field(default="", max_length=255)
    email: str = Field(default="", max_length=255)


class ProjectConfigUpdateRequest(BaseModel):
    contacts: list[ContactIn] = Field(default_factory=list, max_length=50)
    meeting_link: str = Field(default="", max_length=2000)
    drive_link: str = Field(default="", max_length=2000)
    task_board_link: str = Field(default="", max_length=2000)
    weekly_meeting_time: str = Field(default="", max_length=255)


class DashboardResponse(BaseModel):
    group: Group
    config: ProjectConfig
    members: list[RosterEntry]
