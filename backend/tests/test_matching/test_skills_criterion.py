"""Tests for the skills criterion."""

import pytest

from models.schemas.matching_config import MatchingConfig
from services.matching.skills import NO_SKILLS_SCORE, SkillsCriterion


class TestSkillsCriterion:
    def setup_method(self):
        self.criterion = SkillsCriterion()

    def test_mentor_ahead_on_every_skill(self, make_learner, make_mentor):
        learner = make_learner(learning_skills={"python": 2, "sql": 1})
        mentor = make_mentor(teaching_skills={"python": 4, "sql": 3})
        assert self.criterion.evaluate(learner, mentor) == 1.0

    def test_advanced_peer_level(self, make_learner, make_mentor):
        learner = make_learner(learning_skills={"python": 3})
        mentor = make_mentor(teaching_skills={"python": 3})
        assert self.criterion.evaluate(learner, mentor) == pytest.approx(0.7)

    def test_beginner_peer_level_gets_shared_credit(self, make_learner, make_mentor):
        learner = make_learner(learning_skills={"python": 2})
        mentor = make_mentor(teaching_skills={"python": 2})
        assert self.criterion.evaluate(learner, mentor) == pytest.approx(0.3)

    def test_mentor_behind_gets_shared_credit(self, make_learner, make_mentor):
        learner = make_learner(learning_skills={"python": 4})
        mentor = make_mentor(teaching_skills={"python": 2})
        assert self.criterion.evaluate(learner, mentor) == pytest.approx(0.3)

    def test_missing_skills_dilute_score(self, make_learner, make_mentor):
        learner = make_learner(learning_skills={"python": 1, "go": 1, "rust": 1, "sql": 1})
        mentor = make_mentor(teaching_skills={"python": 5})
        assert self.criterion.evaluate(learner, mentor) == pytest.approx(0.25)

    def test_no_shared_skills_is_zero(self, make_learner, make_mentor):
        learner = make_learner(learning_skills={"go": 1})
        mentor = make_mentor(teaching_skills={"python": 5})
        assert self.criterion.evaluate(learner, mentor) == 0.0

    def test_empty_learner_skills_is_low_neutral(self, make_learner, make_mentor):
        learner = make_learner(learning_skills={})
        assert self.criterion.evaluate(learner, make_mentor()) == NO_SKILLS_SCORE

    def test_empty_mentor_skills_is_low_neutral(self, make_learner, make_mentor):
        mentor = make_mentor(teaching_skills={})
        assert self.criterion.evaluate(make_learner(), mentor) == NO_SKILLS_SCORE

    def test_advanced_level_is_configurable(self, make_learner, make_mentor):
        criterion = SkillsCriterion(MatchingConfig(advanced_level=4))
        learner = make_learner(learning_skills={"python": 3})
        mentor = make_mentor(teaching_skills={"python": 3})
        assert criterion.evaluate(learner, mentor) == pytest.approx(0.3)
