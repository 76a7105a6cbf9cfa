from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from models.schemas.match_result import SubScores


class MentorMatch(BaseModel):
    mentor_id: str
    display_name: Optional[str] = None
    score: float
    reasons: list[str] = []
    sub_scores: SubScores
    rating: float = 0.0
    total_sessions: int = 0
    created_at: datetime


class MatchResponse(BaseModel):
    learner_id: str
    total: int = 0
    matches: list[MentorMatch] = []
    weights_used: dict[str, float] = {}
