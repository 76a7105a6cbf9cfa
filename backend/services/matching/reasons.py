"""Human-readable justifications derived from already-computed sub-scores."""

from models.schemas.match_result import SubScores
from models.schemas.matching_config import MatchingConfig
from models.schemas.profiles import MentorCandidate

EXCELLENT_SKILLS = "excellent skills alignment"
GOOD_SKILLS = "good skills match"
IDEAL_EXPERIENCE = "ideal experience gap"
STRONG_SCHEDULE = "strong schedule overlap"
HIGHLY_RATED = "highly rated mentor"
IDEAL_STYLE = "ideal teaching-style match"


def build_reasons(
    sub_scores: SubScores,
    mentor: MentorCandidate,
    config: MatchingConfig,
) -> list[str]:
    """Ordered reason strings. Reads scores only; never rescores."""
    reasons: list[str] = []

    if sub_scores.skills > 0.7:
        reasons.append(EXCELLENT_SKILLS)
    elif sub_scores.skills > 0.5:
        reasons.append(GOOD_SKILLS)

    if sub_scores.experience > 0.8:
        reasons.append(IDEAL_EXPERIENCE)

    if sub_scores.availability > 0.7:
        reasons.append(STRONG_SCHEDULE)

    # Raw rating, independent of the session-count neutral rule
    if mentor.rating >= config.highly_rated_threshold:
        reasons.append(HIGHLY_RATED)

    if sub_scores.learning_style >= 1.0:
        reasons.append(IDEAL_STYLE)

    return reasons
