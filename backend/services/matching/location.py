"""Location criterion: distance between learner and mentor UTC offsets."""

import logging
from datetime import datetime
from typing import Any, Optional

from models.schemas.profiles import LearnerProfile, MentorCandidate
from services.matching.base import NEUTRAL_SCORE, BaseCriterion
from services.matching.timezones import TimezoneResolution, resolve_utc_offset

logger = logging.getLogger(__name__)

# (max hours apart, score), checked in order
OFFSET_BANDS: list[tuple[float, float]] = [
    (3.0, 1.0),
    (6.0, 0.8),
    (9.0, 0.6),
]
FAR_SCORE = 0.3


def offset_distance_score(hours_apart: float) -> float:
    for limit, band_score in OFFSET_BANDS:
        if hours_apart <= limit:
            return band_score
    return FAR_SCORE


class LocationCriterion(BaseCriterion):
    name = "location"

    def score(self, learner: LearnerProfile, mentor: MentorCandidate, **kwargs: Any) -> float:
        if not learner.timezone or not mentor.timezone:
            return NEUTRAL_SCORE

        at: Optional[datetime] = kwargs.get("at")
        learner_tz = resolve_utc_offset(learner.timezone, at)
        mentor_tz = resolve_utc_offset(mentor.timezone, at)

        for role, owner_id, res in (("learner", learner.id, learner_tz), ("mentor", mentor.id, mentor_tz)):
            if not res.resolved:
                self._log_unresolved(role, owner_id, res)
                return NEUTRAL_SCORE

        return offset_distance_score(abs(learner_tz.offset_hours - mentor_tz.offset_hours))

    @staticmethod
    def _log_unresolved(role: str, owner_id: str, res: TimezoneResolution) -> None:
        logger.warning(
            "Timezone %r for %s %s not resolved (%s), using neutral score",
            res.identifier, role, owner_id, res.error,
        )
