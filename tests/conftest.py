"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from learnsphere.core.engine import LearnSphereEngine  # noqa: E402
from learnsphere.core.models import (  # noqa: E402
    AssessmentEvent,
    LearnerMode,
    SignalEnvelope,
    Universe,
)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def universe_data():
    """Universe u1 as curriculum tooling would emit it (camelCase JSON)."""
    return {
        "id": "u1",
        "label": "Fractions",
        "masteryThreshold": 0.8,
        "skillGraph": {
            "nodes": [
                {"id": "s1", "label": "Equivalent fractions", "universeId": "u1", "baseDifficulty": 0.3},
                {"id": "s2", "label": "Adding fractions", "universeId": "u1", "baseDifficulty": 0.5},
            ],
            "edges": [{"from": "s1", "to": "s2", "dependencyWeight": 0.7}],
            "arcs": [
                {"skillId": "s1", "level": 1, "complexityWeight": 0.4},
                {"skillId": "s2", "level": 2, "complexityWeight": 0.6},
            ],
        },
    }


@pytest.fixture
def universe(universe_data):
    return Universe.model_validate(universe_data)


@pytest.fixture
def engine(universe):
    """Engine with u1 registered and an explicit assessment default."""
    eng = LearnSphereEngine(default_mode=LearnerMode.ASSESSMENT)
    eng.register_universe(universe)
    return eng


@pytest.fixture
def make_event():
    """Factory for assessment events; the signal channel defaults to the expected one."""

    def _make(
        channel="reading",
        expected=None,
        *,
        learner_id="l1",
        universe_id="u1",
        skill_id="s1",
        value=0.9,
        reasoning_quality=0.8,
        transfer_evidence=0.7,
        observed_at=1000,
        misconception_tag=None,
    ):
        return AssessmentEvent(
            learner_id=learner_id,
            universe_id=universe_id,
            skill_id=skill_id,
            expected_next_channel=expected or channel,
            signal=SignalEnvelope(
                channel=channel,
                observed_at=observed_at,
                value=value,
                reasoning_quality=reasoning_quality,
                transfer_evidence=transfer_evidence,
                misconception_tag=misconception_tag,
            ),
        )

    return _make
