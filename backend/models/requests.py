from pydantic import BaseModel, Field

from models.schemas.profiles import LearnerProfile, MentorCandidate


class MatchRequest(BaseModel):
    learner: LearnerProfile
    candidates: list[MentorCandidate] = Field(default=[], max_length=5000, description="Pre-fetched mentor pool")
    limit: int = Field(default=10, ge=0, description="Clamped to the configured maximum")
