"""Engine output: per-criterion sub-scores and the ranked match result."""

from datetime import datetime

from pydantic import BaseModel, Field


class SubScores(BaseModel):
    """The seven criterion scores for one (learner, mentor) pair, each 0.0-1.0."""
    skills: float = Field(ge=0.0, le=1.0)
    experience: float = Field(ge=0.0, le=1.0)
    availability: float = Field(ge=0.0, le=1.0)
    rating: float = Field(ge=0.0, le=1.0)
    learning_style: float = Field(ge=0.0, le=1.0)
    industry: float = Field(ge=0.0, le=1.0)
    location: float = Field(ge=0.0, le=1.0)

    model_config = {"frozen": True}


class MatchResult(BaseModel):
    """A mentor that cleared the threshold. Immutable once built."""
    mentor_id: str
    score: float = Field(ge=0.0, le=1.0)
    reasons: tuple[str, ...] = ()
    sub_scores: SubScores
    created_at: datetime

    model_config = {"frozen": True}


class MatchRecord(BaseModel):
    """One analytics row handed to the match recorder."""
    learner_id: str
    mentor_id: str
    score: float
    reasons: list[str] = []
    created_at: datetime
