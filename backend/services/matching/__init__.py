"""Mentor matching: criteria, ranking engine and match recorder."""

from services.matching.engine import CandidateScore, MatchEngine, get_engine
from services.matching.errors import LearnerNotFoundError, MatchingError, PersistenceFailure
from services.matching.recorder import (
    InMemoryMatchRecorder,
    JsonlMatchRecorder,
    MatchRecorder,
    get_recorder,
)

__all__ = [
    "CandidateScore",
    "MatchEngine",
    "get_engine",
    "LearnerNotFoundError",
    "MatchingError",
    "PersistenceFailure",
    "InMemoryMatchRecorder",
    "JsonlMatchRecorder",
    "MatchRecorder",
    "get_recorder",
]
