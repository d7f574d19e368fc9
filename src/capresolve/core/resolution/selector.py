"""Selector & Conflict Detector."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    """Outcome of picking the most common unit from a tally.

    Attributes:
        resolved_unit: The unit with the highest count, or None for an empty
            tally. Among tied units the first one in tally order wins.
        conflicts: Every unit tied at the highest count, in tally order, when
            there are two or more of them; otherwise None.
    """

    resolved_unit: str | None = None
    conflicts: tuple[str, ...] | None = None


def select(tally: Mapping[str, int]) -> Selection:
    """Choose the unit with the most occurrences and report ties.

    Args:
        tally: Occurrence counts keyed by unit identifier.

    Returns:
        A ``Selection``. Ties still yield a resolved unit; the tie is
        surfaced through ``conflicts`` for the caller to judge.
    """
    resolved: str | None = None
    best = 0
    for unit, count in tally.items():
        if resolved is None or count > best:
            resolved, best = unit, count

    if resolved is None:
        return Selection()

    tied = tuple(unit for unit, count in tally.items() if count == best)
    if len(tied) > 1:
        logger.info("Conflicting units at %d occurrence(s): %s", best, list(tied))
        return Selection(resolved, tied)
    return Selection(resolved)
