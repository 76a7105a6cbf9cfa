"""Criterion registry for the match engine.

Same factory shape as the pipeline model registry, but criteria carry the
engine's MatchingConfig, so instances are built per engine rather than cached
globally.
"""

import logging

from models.schemas.matching_config import CRITERION_NAMES, MatchingConfig
from services.matching.base import BaseCriterion

logger = logging.getLogger(__name__)


def create_criterion(name: str, config: MatchingConfig) -> BaseCriterion:
    """Factory: create a criterion service by name with deferred imports."""
    if name == "skills":
        from services.matching.skills import SkillsCriterion
        return SkillsCriterion(config)
    elif name == "experience":
        from services.matching.experience import ExperienceCriterion
        return ExperienceCriterion(config)
    elif name == "availability":
        from services.matching.availability import AvailabilityCriterion
        return AvailabilityCriterion(config)
    elif name == "rating":
        from services.matching.rating import RatingCriterion
        return RatingCriterion(config)
    elif name == "learning_style":
        from services.matching.style import StyleCriterion
        return StyleCriterion(config)
    elif name == "industry":
        from services.matching.industry import IndustryCriterion
        return IndustryCriterion(config)
    elif name == "location":
        from services.matching.location import LocationCriterion
        return LocationCriterion(config)
    else:
        raise ValueError(f"Unknown criterion: {name}")


def build_criteria(config: MatchingConfig) -> dict[str, BaseCriterion]:
    """All seven criteria, keyed by weighting-vector name."""
    criteria = {name: create_criterion(name, config) for name in CRITERION_NAMES}
    logger.debug("Built %d matching criteria", len(criteria))
    return criteria
