"""
Unit tests for mastery interpretation helpers and settings.
"""

import pytest

from learnsphere.config import Settings
from learnsphere.core.engine import LearnSphereEngine
from learnsphere.core.mastery import MasteryLevel, is_mastered, mastered_skills
from learnsphere.core.models import LearnerMode, LearnerProfile, SkillState


class TestMasteryLevel:
    @pytest.mark.parametrize(
        "score, level",
        [
            (0.0, MasteryLevel.NOT_STARTED),
            (0.15, MasteryLevel.NOVICE),
            (0.4, MasteryLevel.DEVELOPING),
            (0.75, MasteryLevel.PROFICIENT),
            (0.9, MasteryLevel.MASTERED),
        ],
    )
    def test_from_score(self, score, level):
        assert MasteryLevel.from_score(score) == level

    def test_display_name(self):
        assert MasteryLevel.NOT_STARTED.display_name == "Not Started"


class TestThreshold:
    def test_is_mastered_uses_universe_threshold(self, universe):
        assert is_mastered(SkillState(skill_id="s1", mastery_score=0.8), universe) is True
        assert is_mastered(SkillState(skill_id="s1", mastery_score=0.79), universe) is False
        assert is_mastered(None, universe) is False

    def test_mastered_skills(self, universe):
        profile = LearnerProfile(
            learner_id="l1",
            skill_states={
                "s1": SkillState(skill_id="s1", mastery_score=0.95),
                "s2": SkillState(skill_id="s2", mastery_score=0.2),
            },
        )

        assert mastered_skills(profile, universe) == ["s1"]

    def test_engine_never_gates_on_threshold(self, engine, make_event):
        learner = engine.apply_assessment_event(make_event())

        assert learner.skill_states["s1"].mastery_score < engine.get_universe("u1").mastery_threshold
        assert len(learner.timeline) == 1


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LEARNSPHERE_DEFAULT_MODE", raising=False)
        monkeypatch.delenv("LEARNSPHERE_LOG_LEVEL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.default_mode == LearnerMode.ASSESSMENT

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("LEARNSPHERE_DEFAULT_MODE", "sandbox")

        assert Settings(_env_file=None).default_mode == LearnerMode.SANDBOX

    def test_engine_falls_back_to_settings(self, monkeypatch):
        from learnsphere import config

        monkeypatch.setattr(config, "get_settings", lambda: Settings(_env_file=None, default_mode="sandbox"))

        assert LearnSphereEngine().default_mode == LearnerMode.SANDBOX
