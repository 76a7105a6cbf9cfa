"""Tests for timezone resolution and the location criterion."""

import logging
from datetime import datetime, timezone

import pytest

from services.matching.base import NEUTRAL_SCORE
from services.matching.location import LocationCriterion, offset_distance_score
from services.matching.timezones import resolve_utc_offset

WINTER = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)
SUMMER = datetime(2026, 7, 15, 12, 0, tzinfo=timezone.utc)


class TestResolveUtcOffset:
    @pytest.mark.parametrize(
        "identifier,hours",
        [
            ("UTC", 0.0),
            ("gmt", 0.0),
            ("Z", 0.0),
            ("+05:30", 5.5),
            ("-0800", -8.0),
            ("UTC+2", 2.0),
            ("GMT-03:00", -3.0),
            ("Asia/Tokyo", 9.0),
            ("America/New_York", -5.0),
        ],
    )
    def test_resolves(self, identifier, hours):
        res = resolve_utc_offset(identifier, WINTER)
        assert res.resolved
        assert res.offset_hours == pytest.approx(hours)

    def test_dst_follows_reference_instant(self):
        assert resolve_utc_offset("Europe/Berlin", WINTER).offset_hours == pytest.approx(1.0)
        assert resolve_utc_offset("Europe/Berlin", SUMMER).offset_hours == pytest.approx(2.0)

    def test_naive_instant_treated_as_utc(self):
        naive = datetime(2026, 1, 15, 12, 0)
        assert resolve_utc_offset("Asia/Kolkata", naive).offset_hours == pytest.approx(5.5)

    @pytest.mark.parametrize("identifier", ["", None, "   "])
    def test_unset(self, identifier):
        res = resolve_utc_offset(identifier, WINTER)
        assert not res.resolved
        assert res.error == "unset"

    @pytest.mark.parametrize(
        "identifier",
        [
            "Mars/Olympus_Mons", "not a zone", "+15:00", "+05:75", "../etc/passwd",
            "America", "Etc", "A" * 300,
        ],
    )
    def test_unresolvable_never_raises(self, identifier):
        res = resolve_utc_offset(identifier, WINTER)
        assert not res.resolved
        assert res.error


@pytest.mark.parametrize(
    "hours,expected",
    [(0, 1.0), (3, 1.0), (3.5, 0.8), (6, 0.8), (9, 0.6), (9.5, 0.3), (14, 0.3)],
)
def test_offset_distance_bands(hours, expected):
    assert offset_distance_score(hours) == expected


class TestLocationCriterion:
    def setup_method(self):
        self.criterion = LocationCriterion()

    def test_same_timezone(self, make_learner, make_mentor):
        learner = make_learner(timezone="Europe/London")
        mentor = make_mentor(timezone="Europe/London")
        assert self.criterion.evaluate(learner, mentor, at=WINTER) == 1.0

    def test_far_apart(self, make_learner, make_mentor):
        learner = make_learner(timezone="UTC")
        mentor = make_mentor(timezone="Pacific/Kiritimati")  # +14
        assert self.criterion.evaluate(learner, mentor, at=WINTER) == 0.3

    def test_nine_hours(self, make_learner, make_mentor):
        learner = make_learner(timezone="UTC")
        mentor = make_mentor(timezone="Asia/Tokyo")
        assert self.criterion.evaluate(learner, mentor, at=WINTER) == 0.6

    def test_missing_timezone_is_neutral(self, make_learner, make_mentor):
        assert self.criterion.evaluate(make_learner(), make_mentor(timezone="UTC"), at=WINTER) == NEUTRAL_SCORE

    def test_unresolved_timezone_is_neutral_and_logged(self, make_learner, make_mentor, caplog):
        learner = make_learner(timezone="Atlantis/Capital")
        mentor = make_mentor(timezone="UTC")
        with caplog.at_level(logging.WARNING, logger="services.matching.location"):
            score = self.criterion.evaluate(learner, mentor, at=WINTER)
        assert score == NEUTRAL_SCORE
        assert "Atlantis/Capital" in caplog.text

    def test_defaults_to_current_instant(self, make_learner, make_mentor):
        learner = make_learner(timezone="+01:00")
        mentor = make_mentor(timezone="+02:00")
        assert self.criterion.evaluate(learner, mentor) == 1.0
