"""
Skill-state transition function.

Maps (previous skill state, new signal) to the next skill state. This is the
only place numeric mastery is computed. The coefficients below shape every
learner's mastery trajectory; changing any of them changes observable
results.

Pipeline:
    1. Decay: staleness of the previous state, floored at 0.5
    2. Exponential blending of recency, stability, transfer, reasoning
    3. Momentum from the raw stability delta, remapped to [0, 1]
    4. Misconception counts and the pressure they exert
    5. Fragility, penalized by misconception pressure
    6. Mastery score
"""

from __future__ import annotations

from collections.abc import Mapping

from learnsphere.core.models import SignalEnvelope, SkillState

MS_PER_DAY = 1000 * 60 * 60 * 24

# Decay
DECAY_PER_DAY = 0.03
DECAY_FLOOR = 0.5

# Misconceptions
MISCONCEPTION_STEP = 0.03
MISCONCEPTION_TAG_CAP = 0.25
MISCONCEPTION_FRAGILITY_WEIGHT = 0.2


def clamp(n: float, lo: float = 0.0, hi: float = 1.0) -> float:
    """Clamp ``n`` into [lo, hi]."""
    return max(lo, min(hi, n))


def elapsed_days(last_updated_at: float, observed_at: float) -> float:
    """
    Days between two millisecond timestamps.

    A never-updated state (``last_updated_at`` of 0) has no elapsed time.
    Time regressions count as zero elapsed days.
    """
    if not last_updated_at:
        return 0.0
    return max(0.0, (observed_at - last_updated_at) / MS_PER_DAY)


def decay_factor(last_updated_at: float, observed_at: float) -> float:
    """Weight applied to previous-state terms; never below ``DECAY_FLOOR``."""
    days = elapsed_days(last_updated_at, observed_at)
    return clamp(1 - days * DECAY_PER_DAY, DECAY_FLOOR, 1)


def misconception_pressure(counts: Mapping[str, int]) -> float:
    """Sum of per-tag contributions, each capped at ``MISCONCEPTION_TAG_CAP``."""
    pressure = 0.0
    for count in counts.values():
        pressure += min(MISCONCEPTION_TAG_CAP, count * MISCONCEPTION_STEP)
    return pressure


def transition_skill_state(previous: SkillState, signal: SignalEnvelope) -> SkillState:
    """
    Compute the next skill state from the previous one and a new signal.

    Pure and deterministic: ``previous`` is not modified.

    Args:
        previous: Current state for the skill (``SkillState.empty`` if none)
        signal: The newly observed signal

    Returns:
        A new SkillState with every bounded field clamped to [0, 1] and
        ``last_updated_at`` set to ``signal.observed_at``.
    """
    decay = decay_factor(previous.last_updated_at, signal.observed_at)

    # Every signal pulses recency toward 1, independent of signal quality.
    recency_weight = clamp(0.7 * previous.recency_weight * decay + 0.3 * 1)
    stability = clamp(0.65 * previous.stability * decay + 0.35 * signal.value)
    transfer = clamp(0.7 * previous.transfer * decay + 0.3 * signal.transfer_evidence)
    reasoning_quality = clamp(
        0.6 * previous.reasoning_quality * decay + 0.4 * signal.reasoning_quality
    )

    # Raw delta may be negative; remap [-1, 1] onto [0, 1] before blending.
    momentum_delta = signal.value - previous.stability
    momentum = clamp(0.75 * previous.momentum * decay + 0.25 * ((momentum_delta + 1) / 2))

    misconception_counts = dict(previous.misconception_counts)
    if signal.misconception_tag:
        tag = signal.misconception_tag
        misconception_counts[tag] = misconception_counts.get(tag, 0) + 1
    pressure = misconception_pressure(misconception_counts)

    fragility = clamp(1 - (0.5 * stability + 0.2 * transfer + 0.3 * reasoning_quality))
    penalized_fragility = clamp(fragility + pressure * MISCONCEPTION_FRAGILITY_WEIGHT)

    mastery_score = clamp(
        0.28 * stability
        + 0.22 * transfer
        + 0.18 * momentum
        + 0.2 * reasoning_quality
        + 0.12 * recency_weight
        - 0.18 * penalized_fragility
    )

    return SkillState(
        skill_id=previous.skill_id,
        stability=stability,
        transfer=transfer,
        momentum=momentum,
        reasoning_quality=reasoning_quality,
        recency_weight=recency_weight,
        fragility=penalized_fragility,
        misconception_counts=misconception_counts,
        last_updated_at=signal.observed_at,
        mastery_score=mastery_score,
    )
