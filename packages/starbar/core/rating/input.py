"""Input controller - turns an interaction into the next rating.

Stateless: the current rating is passed in and the candidate is returned.
Every candidate is clamped to ``[0, star_count]``; a candidate equal to the
current rating is reported as no change so boundary presses never notify.
"""

from __future__ import annotations

import logging

from starbar.core.rating.enums import KeyCommand
from starbar.core.rating.events import Click, InteractionEvent, KeyPress
from starbar.core.rating.models import InteractionPolicy
from starbar.core.utils.math import clamp

logger = logging.getLogger(__name__)


def _candidate_for(current: float, event: InteractionEvent) -> float:
    if isinstance(event, Click):
        return float(event.star_index)

    if isinstance(event, KeyPress):
        if event.command is KeyCommand.INCREMENT:
            return current + 1
        if event.command is KeyCommand.DECREMENT:
            return current - 1
        if event.command is KeyCommand.RESET:
            return 0.0
        if event.command is KeyCommand.SET_DIGIT:
            return float(event.digit)  # type: ignore[arg-type]

    raise TypeError(f"Unsupported interaction event: {event!r}")


def compute_next_rating(
    current: float,
    event: InteractionEvent,
    star_count: int,
    policy: InteractionPolicy | None = None,
) -> float | None:
    """Compute the rating an interaction leads to.

    Args:
        current: Current rating
        event: Click or KeyPress
        star_count: Effective number of stars (upper clamp bound)
        policy: Disabled/read-only guard, None for an interactive widget

    Returns:
        The new rating, or None when the interaction changes nothing

    Example:
        >>> compute_next_rating(3, KeyPress(KeyCommand.SET_DIGIT, 9), star_count=6)
        6.0
        >>> compute_next_rating(5, KeyPress(KeyCommand.INCREMENT), star_count=5) is None
        True
    """
    if policy is not None and policy.locked:
        logger.debug("Ignoring %s: widget is disabled or read-only", event)
        return None

    candidate = clamp(_candidate_for(current, event), 0.0, float(star_count))

    if candidate == current:
        logger.debug("Ignoring %s: rating stays at %s", event, current)
        return None

    logger.debug("Interaction %s: %s -> %s", event, current, candidate)
    return candidate
