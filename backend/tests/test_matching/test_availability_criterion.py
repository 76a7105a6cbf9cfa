"""Tests for the availability criterion and slot overlap."""

import pytest

from services.matching.availability import AvailabilityCriterion, count_covered_slots, slots_overlap
from services.matching.base import NEUTRAL_SCORE


class TestSlotOverlap:
    def test_intersecting_ranges(self, make_slot):
        assert slots_overlap(make_slot("monday", "09:00", "11:00"), make_slot("monday", "10:00", "12:00"))

    def test_contained_range(self, make_slot):
        assert slots_overlap(make_slot("monday", "09:00", "17:00"), make_slot("monday", "12:00", "13:00"))

    def test_touching_ranges_do_not_overlap(self, make_slot):
        assert not slots_overlap(make_slot("monday", "09:00", "10:00"), make_slot("monday", "10:00", "11:00"))

    def test_different_days(self, make_slot):
        assert not slots_overlap(make_slot("monday", "09:00", "11:00"), make_slot("tuesday", "09:00", "11:00"))

    def test_day_is_case_insensitive(self, make_slot):
        assert slots_overlap(make_slot("Friday", "09:00", "11:00"), make_slot("FRIDAY", "10:00", "12:00"))

    def test_inverted_slot_never_overlaps(self, make_slot):
        assert not slots_overlap(make_slot("monday", "12:00", "09:00"), make_slot("monday", "08:00", "13:00"))


class TestAvailabilityCriterion:
    def setup_method(self):
        self.criterion = AvailabilityCriterion()

    def test_partial_coverage(self, make_learner, make_mentor, make_slot):
        learner = make_learner(availability=[
            make_slot("monday", "18:00", "20:00"),
            make_slot("wednesday", "18:00", "20:00"),
        ])
        mentor = make_mentor(availability=[
            make_slot("monday", "19:00", "21:00"),
            make_slot("thursday", "18:00", "20:00"),
        ])
        assert self.criterion.evaluate(learner, mentor) == pytest.approx(0.5)

    def test_one_mentor_slot_covers_many(self, make_learner, make_mentor, make_slot):
        learner = make_learner(availability=[
            make_slot("saturday", "09:00", "10:00"),
            make_slot("saturday", "14:00", "15:00"),
        ])
        mentor = make_mentor(availability=[make_slot("saturday", "08:00", "18:00")])
        assert count_covered_slots(learner.availability, mentor.availability) == 2
        assert self.criterion.evaluate(learner, mentor) == 1.0

    def test_no_overlap_is_zero_not_neutral(self, make_learner, make_mentor, make_slot):
        learner = make_learner(availability=[make_slot("monday", "09:00", "10:00")])
        mentor = make_mentor(availability=[make_slot("sunday", "09:00", "10:00")])
        assert self.criterion.evaluate(learner, mentor) == 0.0

    def test_missing_learner_slots_is_neutral(self, make_learner, make_mentor, make_slot):
        mentor = make_mentor(availability=[make_slot("sunday", "09:00", "10:00")])
        assert self.criterion.evaluate(make_learner(), mentor) == NEUTRAL_SCORE

    def test_missing_mentor_slots_is_neutral(self, make_learner, make_mentor, make_slot):
        learner = make_learner(availability=[make_slot("monday", "09:00", "10:00")])
        assert self.criterion.evaluate(learner, make_mentor()) == NEUTRAL_SCORE
