"""Shared test configuration, pytest markers and profile factories."""

from datetime import datetime, timezone

import pytest

from models.schemas.profiles import AvailabilitySlot, LearnerProfile, MentorCandidate

# Winter instant: no DST in effect for the northern-hemisphere zones used in tests
FIXED_AT = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the FastAPI app through TestClient"
    )


def slot(day: str, start: str, end: str) -> AvailabilitySlot:
    return AvailabilitySlot(day_of_week=day, start_time=start, end_time=end)


@pytest.fixture
def fixed_at() -> datetime:
    return FIXED_AT


@pytest.fixture
def make_learner():
    def _make(**overrides) -> LearnerProfile:
        fields = {"id": "learner-1", "learning_skills": {"python": 2}}
        fields.update(overrides)
        return LearnerProfile(**fields)
    return _make


@pytest.fixture
def make_mentor():
    def _make(**overrides) -> MentorCandidate:
        fields = {"id": "mentor-1", "teaching_skills": {"python": 4}}
        fields.update(overrides)
        return MentorCandidate(**fields)
    return _make


@pytest.fixture
def make_slot():
    return slot
