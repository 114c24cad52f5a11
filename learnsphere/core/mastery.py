"""
Mastery interpretation helpers.

The engine computes mastery scores but never gates on them. These helpers
are for consumers of mastery (gating logic, reports) that need to turn a
score into a decision using a universe's ``mastery_threshold``.
"""

from __future__ import annotations

from enum import Enum

from learnsphere.core.models import LearnerProfile, SkillState, Universe


class MasteryLevel(str, Enum):
    """
    Mastery level categorization.

    Aligned with learning science research on skill acquisition stages.
    """

    NOT_STARTED = "not_started"  # 0%
    NOVICE = "novice"  # 1-39%
    DEVELOPING = "developing"  # 40-69%
    PROFICIENT = "proficient"  # 70-89%
    MASTERED = "mastered"  # 90-100%

    @classmethod
    def from_score(cls, score: float) -> MasteryLevel:
        """
        Convert a 0-1 mastery score to a level.

        Args:
            score: Mastery score between 0 and 1

        Returns:
            Corresponding MasteryLevel
        """
        if score <= 0:
            return cls.NOT_STARTED
        elif score < 0.4:
            return cls.NOVICE
        elif score < 0.7:
            return cls.DEVELOPING
        elif score < 0.9:
            return cls.PROFICIENT
        else:
            return cls.MASTERED

    @property
    def display_name(self) -> str:
        """Human-readable name."""
        return self.value.replace("_", " ").title()


def is_mastered(state: SkillState | None, universe: Universe) -> bool:
    """Check a skill state against the universe's mastery threshold."""
    if state is None:
        return False
    return state.mastery_score >= universe.mastery_threshold


def mastered_skills(profile: LearnerProfile, universe: Universe) -> list[str]:
    """Skill ids (in first-touched order) at or above the mastery threshold."""
    return [
        skill_id
        for skill_id, state in profile.skill_states.items()
        if is_mastered(state, universe)
    ]
