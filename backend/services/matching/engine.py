"""Match engine: scores, filters and ranks mentors for one learner.

Flow:
    learner + candidates (pre-hydrated by the profile store)
      ├─ for each available candidate:
      │     7 criteria → SubScores → weighted sum, clamped → overall
      │     overall <= min_score → dropped
      │     build_reasons(SubScores) → reasons
      ├─ barrier: every candidate scored
      ├─ sort by (score desc, rating desc, sessions desc, mentor id asc)
      └─ first `limit` → list[MatchResult]

Scoring one pair touches no shared state and does no I/O.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Optional

from models.schemas.match_result import MatchResult, SubScores
from models.schemas.matching_config import MatchingConfig, WeightingVector
from models.schemas.profiles import LearnerProfile, MentorCandidate
from services.matching.base import clamp_unit
from services.matching.criteria_registry import build_criteria
from services.matching.errors import LearnerNotFoundError
from services.matching.reasons import build_reasons

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CandidateScore:
    mentor: MentorCandidate
    sub_scores: SubScores
    score: float


def ranking_key(candidate: CandidateScore) -> tuple:
    """Total order for results; identical inputs always rank identically."""
    mentor = candidate.mentor
    return (-candidate.score, -mentor.rating, -mentor.total_sessions, mentor.id)


class MatchEngine:
    def __init__(self, config: Optional[MatchingConfig] = None) -> None:
        self.config = config or MatchingConfig()
        self._criteria = build_criteria(self.config)

    @property
    def weights(self) -> WeightingVector:
        return self.config.weights

    def score_candidate(
        self,
        learner: LearnerProfile,
        mentor: MentorCandidate,
        at: Optional[datetime] = None,
    ) -> CandidateScore:
        """Compute the seven sub-scores and the weighted overall for one pair."""
        at = at or datetime.now(timezone.utc)
        values = {
            name: criterion.evaluate(learner, mentor, at=at)
            for name, criterion in self._criteria.items()
        }
        weights = self.weights.as_dict()
        overall = clamp_unit(sum(weights[name] * value for name, value in values.items()))
        return CandidateScore(mentor=mentor, sub_scores=SubScores(**values), score=overall)

    def find_matches(
        self,
        learner: Optional[LearnerProfile],
        candidates: Iterable[MentorCandidate],
        limit: int = 10,
        at: Optional[datetime] = None,
    ) -> list[MatchResult]:
        """Ranked mentors whose overall score exceeds the configured threshold.

        Raises LearnerNotFoundError if `learner` is None. An empty or fully
        filtered pool is a normal outcome and returns [].
        """
        if learner is None:
            raise LearnerNotFoundError()
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")

        at = at or datetime.now(timezone.utc)
        scored: list[CandidateScore] = []
        n_scored = 0
        for mentor in candidates:
            if not mentor.is_available:
                logger.debug("Skipping unavailable mentor %s", mentor.id)
                continue
            n_scored += 1
            candidate = self.score_candidate(learner, mentor, at=at)
            if candidate.score > self.config.min_score:
                scored.append(candidate)

        scored.sort(key=ranking_key)
        top = scored[:limit]

        logger.info(
            "Matched learner %s: %d scored, %d above threshold, %d returned",
            learner.id, n_scored, len(scored), len(top),
        )
        return [self._to_result(candidate, at) for candidate in top]

    def _to_result(self, candidate: CandidateScore, at: datetime) -> MatchResult:
        reasons = build_reasons(candidate.sub_scores, candidate.mentor, self.config)
        return MatchResult(
            mentor_id=candidate.mentor.id,
            score=candidate.score,
            reasons=tuple(reasons),
            sub_scores=candidate.sub_scores,
            created_at=at,
        )


_engine: MatchEngine | None = None


def get_engine() -> MatchEngine:
    """Process-wide engine built from settings on first access."""
    global _engine
    if _engine is None:
        from config import settings
        _engine = MatchEngine(settings.matching)
    return _engine


def reset_engine() -> None:
    """Drop the cached engine. Useful for testing."""
    global _engine
    _engine = None
