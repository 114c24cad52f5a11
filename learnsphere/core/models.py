"""
LearnSphere data model.

Two families of records live here:

- Boundary records supplied by external collaborators (curriculum
  authoring, signal producers). These are frozen pydantic models so their
  shape is validated once, at construction, and never changes afterwards.
  They accept the camelCase keys used by curriculum tooling JSON.
- Engine-owned records (skill state, learner profile, engine state). These
  are plain dataclasses mutated only by the engine.

The skill graph is carried as validated but opaque data: node, edge and arc
references are not resolved or checked by the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from learnsphere.core.channels import SignalChannel


class LearnerMode(str, Enum):
    """Learner mode. Sandbox events are accepted but change nothing."""

    ASSESSMENT = "assessment"
    SANDBOX = "sandbox"


# =============================================================================
# Boundary Records
# =============================================================================


class _BoundaryModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class SkillNode(_BoundaryModel):
    """An atomic competency inside a universe."""

    id: str
    label: str
    universe_id: str
    base_difficulty: float


class SkillEdge(_BoundaryModel):
    """Directed dependency between two skills."""

    from_skill: str = Field(alias="from")
    to_skill: str = Field(alias="to")
    dependency_weight: float


class DifficultyArc(_BoundaryModel):
    """Per-skill difficulty level and complexity weight."""

    skill_id: str
    level: int
    complexity_weight: float


class SkillGraph(_BoundaryModel):
    nodes: list[SkillNode] = Field(default_factory=list)
    edges: list[SkillEdge] = Field(default_factory=list)
    arcs: list[DifficultyArc] = Field(default_factory=list)


class Universe(_BoundaryModel):
    """
    A curriculum namespace.

    ``mastery_threshold`` is a policy value for consumers of mastery
    (gating, dashboards); the engine itself never enforces it.
    """

    id: str
    label: str
    skill_graph: SkillGraph = Field(default_factory=SkillGraph)
    mastery_threshold: float


class SignalEnvelope(_BoundaryModel):
    """
    One observed performance signal.

    ``observed_at`` is an epoch timestamp in milliseconds. ``value``,
    ``reasoning_quality`` and ``transfer_evidence`` are expected in [0, 1]
    but are not range-checked: the transition clamps whatever arrives.
    """

    channel: SignalChannel
    observed_at: float
    value: float
    reasoning_quality: float
    transfer_evidence: float
    misconception_tag: str | None = None


class AssessmentEvent(_BoundaryModel):
    """Unit of input to the engine. Only its effects are stored."""

    learner_id: str
    universe_id: str
    skill_id: str
    expected_next_channel: SignalChannel
    signal: SignalEnvelope


# =============================================================================
# Engine-owned Records
# =============================================================================


@dataclass
class SkillState:
    """
    Mastery state for one (learner, skill) pair.

    Every float except ``last_updated_at`` stays within [0, 1].
    ``last_updated_at`` of 0 means the skill has never been updated.
    """

    skill_id: str
    stability: float = 0.0
    transfer: float = 0.0
    momentum: float = 0.0
    reasoning_quality: float = 0.0
    recency_weight: float = 0.0
    fragility: float = 1.0  # No evidence yet = maximal fragility
    misconception_counts: dict[str, int] = field(default_factory=dict)
    last_updated_at: float = 0
    mastery_score: float = 0.0

    @classmethod
    def empty(cls, skill_id: str) -> SkillState:
        """Default state used for the first signal on a skill."""
        return cls(skill_id=skill_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "skill_id": self.skill_id,
            "stability": self.stability,
            "transfer": self.transfer,
            "momentum": self.momentum,
            "reasoning_quality": self.reasoning_quality,
            "recency_weight": self.recency_weight,
            "fragility": self.fragility,
            "misconception_counts": dict(self.misconception_counts),
            "last_updated_at": self.last_updated_at,
            "mastery_score": self.mastery_score,
        }


@dataclass
class TimelineEntry:
    """One applied event, in application order."""

    skill_id: str
    timestamp: float
    mastery_score: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "skill_id": self.skill_id,
            "timestamp": self.timestamp,
            "mastery_score": self.mastery_score,
        }


@dataclass
class LearnerProfile:
    """A learner, their mode, per-skill states and append-only timeline."""

    learner_id: str
    mode: LearnerMode = LearnerMode.ASSESSMENT
    skill_states: dict[str, SkillState] = field(default_factory=dict)
    timeline: list[TimelineEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "learner_id": self.learner_id,
            "mode": self.mode.value,
            "skill_states": {
                skill_id: state.to_dict() for skill_id, state in self.skill_states.items()
            },
            "timeline": [entry.to_dict() for entry in self.timeline],
        }


@dataclass
class EngineState:
    """Registered universes and known learners of one engine instance."""

    universes: dict[str, Universe] = field(default_factory=dict)
    learners: dict[str, LearnerProfile] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-serializable view (snake_case keys)."""
        return {
            "universes": {
                universe_id: universe.model_dump(mode="json")
                for universe_id, universe in self.universes.items()
            },
            "learners": {
                learner_id: profile.to_dict() for learner_id, profile in self.learners.items()
            },
        }
