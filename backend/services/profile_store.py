"""Profile supply for the match engine.

Repositories return fully hydrated profiles (skills and availability
included) so the engine never queries per candidate.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Optional

from models.schemas.profiles import LearnerProfile, MentorCandidate

logger = logging.getLogger(__name__)


class ProfileRepository(ABC):
    @abstractmethod
    def get_learner(self, learner_id: str) -> Optional[LearnerProfile]:
        """Return the learner, or None if unknown."""

    @abstractmethod
    def list_mentors(self) -> list[MentorCandidate]:
        """All known mentors, available or not."""

    def list_eligible_mentors(self) -> list[MentorCandidate]:
        return [m for m in self.list_mentors() if m.is_available]


class InMemoryProfileRepository(ProfileRepository):
    def __init__(
        self,
        learners: Iterable[LearnerProfile] = (),
        mentors: Iterable[MentorCandidate] = (),
    ) -> None:
        self._learners = {learner.id: learner for learner in learners}
        self._mentors = list(mentors)

    def get_learner(self, learner_id: str) -> Optional[LearnerProfile]:
        return self._learners.get(learner_id)

    def list_mentors(self) -> list[MentorCandidate]:
        return list(self._mentors)


class JsonProfileRepository(InMemoryProfileRepository):
    """Loads `{"learners": [...], "mentors": [...]}` once at construction."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        with open(self.path, encoding="utf-8") as f:
            raw = json.load(f)
        learners = [LearnerProfile.model_validate(doc) for doc in raw.get("learners", [])]
        mentors = [MentorCandidate.model_validate(doc) for doc in raw.get("mentors", [])]
        super().__init__(learners, mentors)
        logger.info("Loaded %d learners and %d mentors from %s", len(learners), len(mentors), self.path)


_repository: ProfileRepository | None = None


def get_repository() -> ProfileRepository:
    """Repository built from settings.profiles_path; empty if the file is missing."""
    global _repository
    if _repository is None:
        from config import settings
        path = Path(settings.profiles_path) if settings.profiles_path else None
        if path is not None and path.exists():
            _repository = JsonProfileRepository(path)
        else:
            logger.warning("Profiles file %s not found - starting with an empty repository", path)
            _repository = InMemoryProfileRepository()
    return _repository


def set_repository(repository: ProfileRepository | None) -> None:
    """Replace the process-wide repository (None resets to settings-based default)."""
    global _repository
    _repository = repository
