"""Learning/teaching style criterion backed by a fixed compatibility matrix."""

from typing import Any, Optional

from models.schemas.profiles import LearnerProfile, LearningStyle, MentorCandidate
from services.matching.base import NEUTRAL_SCORE, BaseCriterion

_V = LearningStyle.visual.value
_H = LearningStyle.hands_on.value
_T = LearningStyle.theoretical.value
_C = LearningStyle.collaborative.value

# learner style -> mentor style -> compatibility
STYLE_COMPATIBILITY: dict[str, dict[str, float]] = {
    _V: {_V: 1.0, _H: 0.8, _T: 0.6, _C: 0.7},
    _H: {_H: 1.0, _V: 0.8, _C: 0.9, _T: 0.5},
    _T: {_T: 1.0, _V: 0.6, _H: 0.5, _C: 0.7},
    _C: {_C: 1.0, _H: 0.9, _V: 0.7, _T: 0.7},
}


def normalize_style(style: Optional[str]) -> str:
    return (style or "").strip().lower()


def style_compatibility(learner_style: Optional[str], mentor_style: Optional[str]) -> float:
    """Matrix lookup; unknown or missing styles are neutral."""
    row = STYLE_COMPATIBILITY.get(normalize_style(learner_style))
    if row is None:
        return NEUTRAL_SCORE
    return row.get(normalize_style(mentor_style), NEUTRAL_SCORE)


class StyleCriterion(BaseCriterion):
    name = "learning_style"

    def score(self, learner: LearnerProfile, mentor: MentorCandidate, **kwargs: Any) -> float:
        return style_compatibility(learner.learning_style, mentor.teaching_style)
