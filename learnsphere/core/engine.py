"""
LearnSphere Engine.

Owns the registry of universes and learners for one engine instance and
gates every write to learner state:

    Received -> ModeCheck -> ChannelCheck -> UniverseCheck -> Transition -> Persist

Sandbox learners short-circuit at ModeCheck. Both checks fail before any
state is looked up or created, so a rejected event never leaves partial
changes behind.

Engines share nothing: each instance holds its own EngineState. The engine
performs no locking; a hosting layer that submits events concurrently must
serialize calls per learner id.
"""

from __future__ import annotations

import copy

from loguru import logger

from learnsphere.core.channels import SignalChannel, select_next_channel
from learnsphere.core.errors import ChannelContractViolation, UnregisteredUniverse
from learnsphere.core.models import (
    AssessmentEvent,
    EngineState,
    LearnerMode,
    LearnerProfile,
    SkillState,
    TimelineEntry,
    Universe,
)
from learnsphere.core.transition import transition_skill_state


class LearnSphereEngine:
    """
    Deterministic, in-memory mastery engine.

    Ownership of returned data:
    - ``get_learner`` and ``apply_assessment_event`` return the LIVE profile;
      later engine calls mutate it.
    - ``get_learner_view``, ``skill_state`` and ``snapshot`` return detached
      copies that are safe to keep and mutate.
    """

    def __init__(self, default_mode: LearnerMode | None = None):
        """
        Initialize an empty engine.

        Args:
            default_mode: Mode for learners created without an explicit mode
                (defaults to the configured ``default_mode``, normally assessment)
        """
        if default_mode is None:
            from learnsphere.config import get_settings

            default_mode = get_settings().default_mode
        self.default_mode = LearnerMode(default_mode)
        self._state = EngineState()

    # =========================================================================
    # Registry
    # =========================================================================

    def register_universe(self, universe: Universe) -> None:
        """Register a universe, replacing any previous one with the same id."""
        replaced = universe.id in self._state.universes
        self._state.universes[universe.id] = universe
        logger.debug(
            f"{'Replaced' if replaced else 'Registered'} universe {universe.id} "
            f"({len(universe.skill_graph.nodes)} skills)"
        )

    def get_universe(self, universe_id: str) -> Universe | None:
        """Return a registered universe, or None."""
        return self._state.universes.get(universe_id)

    @property
    def universe_ids(self) -> list[str]:
        return list(self._state.universes)

    @property
    def learner_ids(self) -> list[str]:
        return list(self._state.learners)

    # =========================================================================
    # Learners
    # =========================================================================

    def ensure_learner(self, learner_id: str, mode: LearnerMode | None = None) -> None:
        """
        Create a learner if absent. Existing learners are never reset, and
        ``mode`` is ignored for them.
        """
        if learner_id in self._state.learners:
            return
        mode = LearnerMode(mode) if mode is not None else self.default_mode
        self._state.learners[learner_id] = LearnerProfile(learner_id=learner_id, mode=mode)
        logger.debug(f"Created learner {learner_id} in {mode.value} mode")

    def set_mode(self, learner_id: str, mode: LearnerMode) -> None:
        """Switch a learner's mode; affects only future events."""
        self.ensure_learner(learner_id)
        self._state.learners[learner_id].mode = LearnerMode(mode)
        logger.debug(f"Learner {learner_id} switched to {LearnerMode(mode).value} mode")

    def get_learner(self, learner_id: str) -> LearnerProfile:
        """Return the live profile, creating the learner if needed."""
        self.ensure_learner(learner_id)
        return self._state.learners[learner_id]

    def get_learner_view(self, learner_id: str) -> LearnerProfile:
        """Return a detached copy of one learner, creating the learner if needed."""
        return copy.deepcopy(self.get_learner(learner_id))

    def skill_state(self, learner_id: str, skill_id: str) -> SkillState | None:
        """
        Return a detached copy of a learner's skill state.

        Unlike ``get_learner`` this never creates anything: unknown learners
        and untouched skills both return None.
        """
        profile = self._state.learners.get(learner_id)
        if profile is None or skill_id not in profile.skill_states:
            return None
        return copy.deepcopy(profile.skill_states[skill_id])

    # =========================================================================
    # Channels
    # =========================================================================

    def select_next_channel(self, previous: SignalChannel | str | None = None) -> SignalChannel:
        """Select the next lawful channel according to strict RVKA ordering."""
        return select_next_channel(previous)

    # =========================================================================
    # Events
    # =========================================================================

    def apply_assessment_event(self, event: AssessmentEvent) -> LearnerProfile:
        """
        Apply an assessment event. In sandbox mode, state is not mutated.

        Args:
            event: The event to apply

        Returns:
            The live learner profile

        Raises:
            ChannelContractViolation: Signal channel differs from the declared
                expected channel (assessment mode only)
            UnregisteredUniverse: The event's universe was never registered
        """
        learner = self.get_learner(event.learner_id)
        if learner.mode == LearnerMode.SANDBOX:
            logger.debug(f"Sandbox learner {event.learner_id}: event on {event.skill_id} ignored")
            return learner

        if event.signal.channel != event.expected_next_channel:
            logger.warning(
                f"Rejected event for {event.learner_id}/{event.skill_id}: "
                f"expected {event.expected_next_channel.value}, got {event.signal.channel.value}"
            )
            raise ChannelContractViolation(event.expected_next_channel, event.signal.channel)

        if event.universe_id not in self._state.universes:
            logger.warning(
                f"Rejected event for {event.learner_id}/{event.skill_id}: "
                f"universe {event.universe_id} is not registered"
            )
            raise UnregisteredUniverse(event.universe_id)

        previous = learner.skill_states.get(event.skill_id) or SkillState.empty(event.skill_id)
        next_state = transition_skill_state(previous, event.signal)

        learner.skill_states[event.skill_id] = next_state
        learner.timeline.append(
            TimelineEntry(
                skill_id=event.skill_id,
                timestamp=event.signal.observed_at,
                mastery_score=next_state.mastery_score,
            )
        )

        logger.debug(
            f"Applied {event.signal.channel.value} signal to {event.learner_id}/{event.skill_id}: "
            f"mastery {previous.mastery_score:.3f} -> {next_state.mastery_score:.3f}"
        )
        return learner

    # =========================================================================
    # Snapshots
    # =========================================================================

    def snapshot(self) -> EngineState:
        """Return a deep copy of the entire engine state."""
        return copy.deepcopy(self._state)
