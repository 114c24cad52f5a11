"""
Channel Sequencer.

Learners receive performance signals through four modalities, and the
engine only accepts them in the fixed RVKA rotation:

    reading -> visual -> kinesthetic -> auditory -> (reading)

The sequencer is a pure lookup. The engine never derives the expected
channel itself; callers ask the sequencer and declare the answer on the
event they submit.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum


class SignalChannel(str, Enum):
    """Sensory/cognitive modality a signal was delivered through."""

    READING = "reading"
    VISUAL = "visual"
    KINESTHETIC = "kinesthetic"
    AUDITORY = "auditory"


RVKA_ORDER: tuple[SignalChannel, ...] = (
    SignalChannel.READING,
    SignalChannel.VISUAL,
    SignalChannel.KINESTHETIC,
    SignalChannel.AUDITORY,
)


def _coerce(channel: SignalChannel | str | None) -> SignalChannel | None:
    if isinstance(channel, SignalChannel):
        return channel
    try:
        return SignalChannel(channel)
    except (ValueError, TypeError):
        return None


def select_next_channel(previous: SignalChannel | str | None = None) -> SignalChannel:
    """
    Select the next lawful channel according to strict RVKA ordering.

    Args:
        previous: Channel of the last submitted signal, or None when the
            learner has not submitted anything yet.

    Returns:
        The first channel when ``previous`` is missing, unknown or the last
        channel of the rotation; otherwise the channel that follows it.
    """
    if not previous:
        return RVKA_ORDER[0]

    channel = _coerce(previous)
    if channel is None:
        return RVKA_ORDER[0]

    index = RVKA_ORDER.index(channel)
    if index == len(RVKA_ORDER) - 1:
        return RVKA_ORDER[0]
    return RVKA_ORDER[index + 1]


def channel_cycle(start: SignalChannel | str | None = None) -> Iterator[SignalChannel]:
    """Yield the infinite lawful channel sequence following ``start``."""
    current = start
    while True:
        current = select_next_channel(current)
        yield current
