"""Adapter interface and implementations for collision resolution."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Sequence

from layoutflo.placer._geometry import overlaps
from layoutflo.placer.models import Box

logger = logging.getLogger(__name__)


class BaseResolver(ABC):
    """Abstract interface for moving a candidate box clear of committed boxes.

    Swap implementations to change the resolution rule without touching the placer.
    """

    @abstractmethod
    def resolve(self, candidate: Box, placed: Sequence[Box], padding: float) -> Box:
        """Return the resolved candidate.  Must never touch *placed*."""
        ...


def _forward_pass(candidate: Box, placed: Sequence[Box], padding: float) -> tuple[Box, int]:
    """One scan over *placed* in commit order, pushing *candidate* down on each hit."""
    moves = 0
    for i, existing in enumerate(placed):
        if overlaps(candidate, existing, padding):
            new_y = existing.bottom + padding
            logger.debug(
                "displacing %r: y %.4g -> %.4g (collides with #%d)",
                candidate.payload, candidate.y, new_y, i,
            )
            candidate = candidate.moved_to(y=new_y)
            moves += 1
    return candidate, moves


class SinglePassResolver(BaseResolver):
    """Greedy forward scan: each collision pushes the box flush below the neighbour.

    Boxes already passed are not re-checked after a later displacement, so a
    cascade can leave the candidate overlapping an earlier neighbour.  Use
    ``audit.find_overlaps`` to surface those, or ``SettlingResolver`` to
    remove them.
    """

    def resolve(self, candidate: Box, placed: Sequence[Box], padding: float) -> Box:
        resolved, _ = _forward_pass(candidate, placed, padding)
        return resolved


class SettlingResolver(BaseResolver):
    """Repeat the forward scan until a full pass makes no displacement.

    Every displacement strictly increases ``y`` and lands on one of at most
    ``len(placed)`` bottom edges, so the loop always terminates.
    """

    def resolve(self, candidate: Box, placed: Sequence[Box], padding: float) -> Box:
        passes = 0
        while True:
            candidate, moves = _forward_pass(candidate, placed, padding)
            passes += 1
            if moves == 0:
                break
        if passes > 2:
            logger.debug("settled %r after %d passes", candidate.payload, passes)
        return candidate
