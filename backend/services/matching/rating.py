"""Rating criterion: normalized mentor rating, neutral until enough sessions."""

from typing import Any

from models.schemas.profiles import LearnerProfile, MentorCandidate
from services.matching.base import NEUTRAL_SCORE, BaseCriterion

MAX_RATING = 5.0


class RatingCriterion(BaseCriterion):
    name = "rating"

    def score(self, learner: LearnerProfile, mentor: MentorCandidate, **kwargs: Any) -> float:
        if mentor.total_sessions < self.config.min_rated_sessions:
            return NEUTRAL_SCORE
        return min(1.0, mentor.rating / MAX_RATING)
