"""
Core Module - mastery engine, data model and channel sequencing.

Components:
- channels: RVKA channel ordering and the next-channel rule
- models: Universe, signals, events, skill state, learner profile
- transition: the pure skill-state transition function
- engine: LearnSphereEngine, the gated write path into learner state
- mastery: threshold and level helpers for consumers of mastery scores

Design Principle:
Only ``transition`` computes mastery. Everything else is bookkeeping
around it.
"""

from learnsphere.core.channels import (
    RVKA_ORDER,
    SignalChannel,
    channel_cycle,
    select_next_channel,
)
from learnsphere.core.engine import LearnSphereEngine
from learnsphere.core.errors import (
    ChannelContractViolation,
    LearnSphereError,
    UnregisteredUniverse,
)
from learnsphere.core.mastery import MasteryLevel, is_mastered, mastered_skills
from learnsphere.core.models import (
    AssessmentEvent,
    DifficultyArc,
    EngineState,
    LearnerMode,
    LearnerProfile,
    SignalEnvelope,
    SkillEdge,
    SkillGraph,
    SkillNode,
    SkillState,
    TimelineEntry,
    Universe,
)
from learnsphere.core.transition import clamp, decay_factor, transition_skill_state

__all__ = [
    # Engine
    "LearnSphereEngine",
    # Channels
    "RVKA_ORDER",
    "SignalChannel",
    "channel_cycle",
    "select_next_channel",
    # Errors
    "LearnSphereError",
    "ChannelContractViolation",
    "UnregisteredUniverse",
    # Models
    "AssessmentEvent",
    "DifficultyArc",
    "EngineState",
    "LearnerMode",
    "LearnerProfile",
    "SignalEnvelope",
    "SkillEdge",
    "SkillGraph",
    "SkillNode",
    "SkillState",
    "TimelineEntry",
    "Universe",
    # Transition
    "clamp",
    "decay_factor",
    "transition_skill_state",
    # Mastery
    "MasteryLevel",
    "is_mastered",
    "mastered_skills",
]
