# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.

All models are frozen. Partial updates go through the module-level
update functions, which return a new value and keep every other field.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

SLOTS_PER_DAY = 24
DAYS_PER_WEEK = 7
SLOTS_PER_WEEK = SLOTS_PER_DAY * DAYS_PER_WEEK  # 168
DAY_NAMES: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

SCALE_EPSILON = 1e-9


class ExpectationLevel(float, Enum):
    """
    German grade scale used for a member's expectation.

    Ordered by numeric value: 1.0 is the most ambitious outcome, 4.0 the
    least ambitious (a pass). A LOWER value means HIGHER ambition.
    """

    VERY_GOOD = 1.0
    VERY_GOOD_MINUS = 1.3
    GOOD_PLUS = 1.7
    GOOD = 2.0
    GOOD_MINUS = 2.3
    SATISFACTORY_PLUS = 2.7
    SATISFACTORY = 3.0
    SATISFACTORY_MINUS = 3.3
    SUFFICIENT_PLUS = 3.7
    SUFFICIENT = 4.0

    @classmethod
    def steps(cls) -> list["ExpectationLevel"]:
        """Canonical steps, most ambitious first."""
        return sorted(cls, key=lambda level: level.value)

    @classmethod
    def from_value(cls, value: float) -> "ExpectationLevel":
        """Match a raw float to its canonical step. Raises ValueError."""
        for level in cls:
            if abs(level.value - value) < SCALE_EPSILON:
                return level
        raise ValueError(
            f"expectation level {value} is not one of "
            f"{[level.value for level in cls.steps()]}"
        )

    @property
    def ambition_rank(self) -> int:
        """0 for the most ambitious step, 9 for the least."""
        return self.steps().index(self)

    @property
    def label(self) -> str:
        return f"{self.value:.1f}"


class SkillLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    EXPERT = "Expert"


class Skill(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=100)
    level: SkillLevel = SkillLevel.INTERMEDIATE


class Group(BaseModel):
    """A project group members join with a short code."""
    model_config = ConfigDict(frozen=True)

    id: str
    code: str
    project_name: str
    is_finalized: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Member(BaseModel):
    """A single group member."""
    model_config = ConfigDict(frozen=True)

    id: str
    group_id: str
    name: str
    is_admin: bool = False
    has_submitted: bool = False
    role: Optional[str] = None


class Questionnaire(BaseModel):
    """
    A member's kick-off answers.

    Values are kept as submitted: the alignment engine decides what to
    ignore (out-of-range slots, a zero expectation level).
    """
    model_config = ConfigDict(frozen=True)

    id: str
    member_id: str
    expectation_level: float = 0.0
    grade_vs_learning: int = 3
    project_experience: int = 3
    weekly_hours: int = 0
    prior_experience_takeaway: str = ""
    course_motivation: str = ""
    skills: tuple[Skill, ...] = ()
    preferred_role: Optional[str] = None
    meeting_frequency: str = "1x / week"
    project_methodology: str = "Flexible"
    availability: tuple[int, ...] = ()
    submitted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class RosterEntry(BaseModel):
    """A member paired with its questionnaire, if one was submitted."""
    model_config = ConfigDict(frozen=True)

    member: Member
    questionnaire: Optional[Questionnaire] = None


class Contact(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    role: str = ""
    email: str = ""


class ProjectConfig(BaseModel):
    """Links and contacts shown on the project dashboard."""
    model_config = ConfigDict(frozen=True)

    group_id: str
    contacts: tuple[Contact, ...] = ()
    meeting_link: str = ""
    drive_link: str = ""
    task_board_link: str = ""
    weekly_meeting_time: str = ""


class ConflictSignal(BaseModel):
    """Spread between the most and least ambitious expectation levels."""
    model_config = ConfigDict(frozen=True)

    has_conflict: bool = False
    min: Optional[float] = None
    max: Optional[float] = None


class Session(BaseModel):
    """An authenticated member acting within its group."""
    model_config = ConfigDict(frozen=True)

    member: Member
    group: Group
    expires_at: Optional[datetime] = None


# ── Immutable updates ──

def with_role(member: Member, role: Optional[str]) -> Member:
    return member.model_copy(update={"role": role})


def mark_submitted(member: Member) -> Member:
    return member.model_copy(update={"has_submitted": True})


def finalize(group: Group) -> Group:
    return group.model_copy(update={"is_finalized": True})


def with_meeting_time(config: ProjectConfig, weekly_meeting_time: str) -> ProjectConfig:
    return config.model_copy(update={"weekly_meeting_time": weekly_meeting_time})
