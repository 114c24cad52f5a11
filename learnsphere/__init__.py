"""
LearnSphere - deterministic skill-mastery engine.

Computes a learner's evolving mastery of the skills in a curriculum graph
from a stream of performance signals, delivered in strict RVKA channel
rotation (reading, visual, kinesthetic, auditory).

Usage:
    from learnsphere import create_engine

    engine = create_engine()
    engine.register_universe(universe)
    channel = engine.select_next_channel()
    engine.apply_assessment_event(event)
"""

from learnsphere.core import *  # noqa: F403
from learnsphere.core import __all__ as _core_all
from learnsphere.core.engine import LearnSphereEngine
from learnsphere.core.models import LearnerMode

__version__ = "0.1.0"


def create_engine(default_mode: LearnerMode | None = None) -> LearnSphereEngine:
    """Create a new, fully independent engine."""
    return LearnSphereEngine(default_mode=default_mode)


__all__ = [*_core_all, "create_engine", "__version__"]
