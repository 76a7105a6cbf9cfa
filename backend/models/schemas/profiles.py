"""Learner and mentor profiles consumed by the match engine."""

from datetime import time
from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, Field, field_validator

ProficiencyLevel = Annotated[int, Field(ge=1, le=5)]


class DayOfWeek(str, Enum):
    monday = "monday"
    tuesday = "tuesday"
    wednesday = "wednesday"
    thursday = "thursday"
    friday = "friday"
    saturday = "saturday"
    sunday = "sunday"


class LearningStyle(str, Enum):
    """Known style tags. Profiles carry plain strings so unknown tags survive validation."""
    visual = "visual"
    hands_on = "hands-on"
    theoretical = "theoretical"
    collaborative = "collaborative"


class AvailabilitySlot(BaseModel):
    """A weekly time window. Slots whose end is not after their start never overlap."""
    day_of_week: DayOfWeek
    start_time: time
    end_time: time

    model_config = {"frozen": True}

    @field_validator("day_of_week", mode="before")
    @classmethod
    def _normalize_day(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    def overlaps(self, other: "AvailabilitySlot") -> bool:
        if self.day_of_week != other.day_of_week:
            return False
        if self.end_time <= self.start_time or other.end_time <= other.start_time:
            return False
        return self.start_time < other.end_time and self.end_time > other.start_time


class LearnerProfile(BaseModel):
    """A learner looking for a mentor. Only `id` and `learning_skills` are expected."""
    id: str
    display_name: Optional[str] = None
    learning_skills: dict[str, ProficiencyLevel] = {}
    experience_level: Optional[ProficiencyLevel] = None  # 1=beginner, 5=expert
    availability: list[AvailabilitySlot] = []
    learning_style: Optional[str] = None
    preferred_industry: Optional[str] = None
    timezone: Optional[str] = None


class MentorCandidate(BaseModel):
    """A mentor as hydrated by the profile store, skills and slots included."""
    id: str
    display_name: Optional[str] = None
    teaching_skills: dict[str, ProficiencyLevel] = {}
    experience_years: Optional[float] = Field(default=None, ge=0)
    availability: list[AvailabilitySlot] = []
    teaching_style: Optional[str] = None
    industry: Optional[str] = None
    timezone: Optional[str] = None
    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    total_sessions: int = Field(default=0, ge=0)
    is_available: bool = True
