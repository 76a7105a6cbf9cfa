"""Availability criterion: share of learner slots covered by the mentor's week."""

import logging
from typing import Any

from models.schemas.profiles import AvailabilitySlot, LearnerProfile, MentorCandidate
from services.matching.base import NEUTRAL_SCORE, BaseCriterion

logger = logging.getLogger(__name__)


def slots_overlap(a: AvailabilitySlot, b: AvailabilitySlot) -> bool:
    """Same weekday and intersecting open time ranges."""
    return a.overlaps(b)


def count_covered_slots(
    learner_slots: list[AvailabilitySlot],
    mentor_slots: list[AvailabilitySlot],
) -> int:
    """Number of learner slots that overlap at least one mentor slot."""
    return sum(
        1 for slot in learner_slots
        if any(slots_overlap(slot, other) for other in mentor_slots)
    )


class AvailabilityCriterion(BaseCriterion):
    name = "availability"

    def score(self, learner: LearnerProfile, mentor: MentorCandidate, **kwargs: Any) -> float:
        if not learner.availability or not mentor.availability:
            logger.debug("Availability not set for learner %s or mentor %s", learner.id, mentor.id)
            return NEUTRAL_SCORE

        covered = count_covered_slots(learner.availability, mentor.availability)
        return covered / len(learner.availability)
