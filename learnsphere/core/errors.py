"""
Engine errors.

Both failures abort ``apply_assessment_event`` before any state is touched.
Each carries its data as attributes and a stable ``kind`` tag so callers can
branch programmatically instead of parsing messages.
"""

from __future__ import annotations

from learnsphere.core.channels import SignalChannel


class LearnSphereError(Exception):
    """Base class for engine errors."""

    kind: str = "learnsphere_error"


class ChannelContractViolation(LearnSphereError):
    """A signal arrived on a channel other than the one declared as expected."""

    kind = "channel_contract_violation"

    def __init__(self, expected: SignalChannel, actual: SignalChannel):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"RVKA contract violation: expected {SignalChannel(expected).value}, "
            f"got {SignalChannel(actual).value}"
        )


class UnregisteredUniverse(LearnSphereError):
    """An event referenced a universe id that was never registered."""

    kind = "unregistered_universe"

    def __init__(self, universe_id: str):
        self.universe_id = universe_id
        super().__init__(f"Universe {universe_id} is not registered")
