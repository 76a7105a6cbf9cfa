"""Industry criterion: learner's preferred industry against the mentor's."""

from typing import Any

from models.schemas.profiles import LearnerProfile, MentorCandidate
from services.matching.base import NEUTRAL_SCORE, BaseCriterion

SAME_INDUSTRY_SCORE = 1.0
OTHER_INDUSTRY_SCORE = 0.3


class IndustryCriterion(BaseCriterion):
    name = "industry"

    def score(self, learner: LearnerProfile, mentor: MentorCandidate, **kwargs: Any) -> float:
        wanted = (learner.preferred_industry or "").strip().lower()
        offered = (mentor.industry or "").strip().lower()
        if not wanted or not offered:
            return NEUTRAL_SCORE
        return SAME_INDUSTRY_SCORE if wanted == offered else OTHER_INDUSTRY_SCORE
