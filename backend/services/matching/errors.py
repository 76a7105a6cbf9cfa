"""Exceptions raised by the match engine and its recorder."""


class MatchingError(Exception):
    """Base class for match engine failures."""


class LearnerNotFoundError(MatchingError, LookupError):
    """The learner profile to match against does not exist."""

    def __init__(self, learner_id: str | None = None) -> None:
        self.learner_id = learner_id
        if learner_id is None:
            super().__init__("Learner not found")
        else:
            super().__init__(f"Learner not found: {learner_id}")


class PersistenceFailure(MatchingError):
    """The match recorder could not store an outcome."""
