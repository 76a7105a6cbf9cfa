"""Weighting vector and tunable thresholds for the match engine."""

import math

from pydantic import BaseModel, Field, model_validator

WEIGHT_SUM_TOLERANCE = 1e-6

CRITERION_NAMES = (
    "skills",
    "experience",
    "availability",
    "rating",
    "learning_style",
    "industry",
    "location",
)


class WeightingVector(BaseModel):
    """Contribution of each criterion to the overall score. Must sum to 1.0."""
    skills: float = Field(default=0.35, ge=0.0)
    experience: float = Field(default=0.20, ge=0.0)
    availability: float = Field(default=0.15, ge=0.0)
    rating: float = Field(default=0.10, ge=0.0)
    learning_style: float = Field(default=0.10, ge=0.0)
    industry: float = Field(default=0.05, ge=0.0)
    location: float = Field(default=0.05, ge=0.0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_sum(self) -> "WeightingVector":
        total = sum(self.as_dict().values())
        if not math.isclose(total, 1.0, abs_tol=WEIGHT_SUM_TOLERANCE):
            raise ValueError(f"Criterion weights must sum to 1.0, got {total:.6f}")
        return self

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in CRITERION_NAMES}


class MatchingConfig(BaseModel):
    """Everything an operator can retune without touching the scoring code.

    `min_score` and the ideal experience gap window are carried over from the
    legacy matcher as defaults; they have never been validated against outcomes.
    """
    weights: WeightingVector = WeightingVector()
    min_score: float = Field(default=0.3, ge=0.0, le=1.0)
    ideal_gap_min: int = 1
    ideal_gap_max: int = 2
    advanced_level: int = Field(default=3, ge=1, le=5)
    min_rated_sessions: int = Field(default=5, ge=0)
    highly_rated_threshold: float = Field(default=4.5, ge=0.0, le=5.0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_gap_window(self) -> "MatchingConfig":
        if self.ideal_gap_min > self.ideal_gap_max:
            raise ValueError(
                f"ideal_gap_min ({self.ideal_gap_min}) must not exceed ideal_gap_max ({self.ideal_gap_max})"
            )
        return self
