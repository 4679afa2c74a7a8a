"""Core data structures for the placer."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any

from layoutflo.placer.errors import InvalidDimension


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle with a top-left corner and an opaque payload.

    Units are whatever the caller uses (inches, pixels, ...) as long as they
    are consistent across one placer.
    """

    x: float
    y: float
    w: float
    h: float
    payload: Any = None

    def __post_init__(self) -> None:
        for name in ("w", "h"):
            value = getattr(self, name)
            if not (value > 0 and math.isfinite(value)):
                raise InvalidDimension(
                    f"box {name} must be a finite number > 0, got {value!r} for {self.payload!r}"
                )

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def moved_to(self, x: float | None = None, y: float | None = None) -> Box:
        """Return a copy at a new position; size and payload are kept."""
        return replace(
            self,
            x=self.x if x is None else x,
            y=self.y if y is None else y,
        )

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.w, self.h)

    def to_dict(self) -> dict:
        return {
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
            "payload": self.payload,
        }


@dataclass(frozen=True)
class CanvasBounds:
    width: float
    height: float

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}
