"""Experience criterion: mentor seniority relative to the learner's level."""

import logging
import math
from typing import Any

from models.schemas.profiles import LearnerProfile, MentorCandidate
from services.matching.base import NEUTRAL_SCORE, BaseCriterion

logger = logging.getLogger(__name__)

IDEAL_GAP_SCORE = 1.0
STRETCH_GAP_SCORE = 0.8  # one level past the ideal window
PEER_SCORE = 0.6
MISMATCH_SCORE = 0.3


def years_to_level(years: float) -> int:
    """Map years of experience onto the 1-5 experience scale (two years per level)."""
    return min(5, max(1, math.floor(years / 2) + 1))


class ExperienceCriterion(BaseCriterion):
    name = "experience"

    def score(self, learner: LearnerProfile, mentor: MentorCandidate, **kwargs: Any) -> float:
        if learner.experience_level is None or mentor.experience_years is None:
            logger.debug("Experience unknown for learner %s or mentor %s", learner.id, mentor.id)
            return NEUTRAL_SCORE

        gap = years_to_level(mentor.experience_years) - learner.experience_level
        return self.score_gap(gap)

    def score_gap(self, gap: int) -> float:
        cfg = self.config
        if cfg.ideal_gap_min <= gap <= cfg.ideal_gap_max:
            return IDEAL_GAP_SCORE
        if gap == cfg.ideal_gap_max + 1:
            return STRETCH_GAP_SCORE
        if gap == 0:
            return PEER_SCORE
        return MISMATCH_SCORE
