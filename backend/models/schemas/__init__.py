"""Pydantic contracts shared by the match engine, the recorder and the API."""

from models.schemas.profiles import (
    AvailabilitySlot,
    DayOfWeek,
    LearnerProfile,
    LearningStyle,
    MentorCandidate,
)
from models.schemas.matching_config import CRITERION_NAMES, MatchingConfig, WeightingVector
from models.schemas.match_result import MatchRecord, MatchResult, SubScores

__all__ = [
    "AvailabilitySlot",
    "DayOfWeek",
    "LearnerProfile",
    "LearningStyle",
    "MentorCandidate",
    "CRITERION_NAMES",
    "MatchingConfig",
    "WeightingVector",
    "MatchRecord",
    "MatchResult",
    "SubScores",
]
