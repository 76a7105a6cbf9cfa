"""Skills criterion: learner "learning" skills against mentor "teaching" skills.

Per shared skill:
    mentor level above learner          -> 1.0
    same level, both at advanced level  -> 0.7
    otherwise                           -> 0.3
Skills the mentor does not teach contribute nothing. The sum is divided by
the learner's skill count.
"""

import logging
from typing import Any

from models.schemas.profiles import LearnerProfile, MentorCandidate
from services.matching.base import BaseCriterion

logger = logging.getLogger(__name__)

# Absence of skills data is not the same as incompatibility
NO_SKILLS_SCORE = 0.1

MENTOR_AHEAD_CREDIT = 1.0
ADVANCED_PEER_CREDIT = 0.7
SHARED_SKILL_CREDIT = 0.3


class SkillsCriterion(BaseCriterion):
    name = "skills"

    def score(self, learner: LearnerProfile, mentor: MentorCandidate, **kwargs: Any) -> float:
        learning = learner.learning_skills
        teaching = mentor.teaching_skills
        if not learning or not teaching:
            logger.debug("Skills missing for learner %s or mentor %s", learner.id, mentor.id)
            return NO_SKILLS_SCORE

        total = 0.0
        for skill_id, learner_level in learning.items():
            mentor_level = teaching.get(skill_id)
            if mentor_level is None:
                continue
            total += self._skill_credit(learner_level, mentor_level)

        return min(1.0, total / len(learning))

    def _skill_credit(self, learner_level: int, mentor_level: int) -> float:
        if mentor_level > learner_level:
            return MENTOR_AHEAD_CREDIT
        if mentor_level == learner_level and mentor_level >= self.config.advanced_level:
            return ADVANCED_PEER_CREDIT
        return SHARED_SKILL_CREDIT
