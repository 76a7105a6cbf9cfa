"""Abstract base class for all matching criteria."""

import math
from abc import ABC, abstractmethod
from typing import Any

from models.schemas.matching_config import MatchingConfig
from models.schemas.profiles import LearnerProfile, MentorCandidate

NEUTRAL_SCORE = 0.5


def clamp_unit(value: float) -> float:
    """Clamp to [0, 1]. NaN collapses to 0."""
    if math.isnan(value):
        return 0.0
    return max(0.0, min(1.0, value))


class BaseCriterion(ABC):
    """Base class for one compatibility criterion.

    Subclasses must implement:
        - name: identifier used in criteria_registry and the weighting vector
        - score(learner, mentor, **kwargs): raw compatibility for one pair

    Missing or unusable profile data must resolve to a neutral score inside
    score(); criteria never raise for a validated pair of profiles.
    """

    name: str = ""

    def __init__(self, config: MatchingConfig | None = None) -> None:
        self.config = config or MatchingConfig()

    @abstractmethod
    def score(self, learner: LearnerProfile, mentor: MentorCandidate, **kwargs: Any) -> float:
        """Compatibility of one pair, nominally within [0, 1]."""

    def evaluate(self, learner: LearnerProfile, mentor: MentorCandidate, **kwargs: Any) -> float:
        """Score and clamp to [0, 1]."""
        return clamp_unit(float(self.score(learner, mentor, **kwargs)))
