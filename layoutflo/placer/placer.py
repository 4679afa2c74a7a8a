"""Placer: incremental, order-dependent placement of boxes on a canvas."""

from __future__ import annotations

import json
import logging
import math
import threading
from typing import Any, Iterator

from layoutflo.placer import audit
from layoutflo.placer._geometry import DEFAULT_PADDING, clamp_to_canvas
from layoutflo.placer.config import PlacerConfig
from layoutflo.placer.errors import InvalidConfiguration
from layoutflo.placer.models import Box, CanvasBounds
from layoutflo.placer.resolver import BaseResolver, SettlingResolver, SinglePassResolver
from layoutflo.placer.sizing import BaseSizeEstimator, HeuristicTextSizer

logger = logging.getLogger(__name__)


def _check_config(padding: float, canvas_bounds: CanvasBounds | None) -> None:
    if not math.isfinite(padding) or padding < 0:
        raise InvalidConfiguration(f"padding must be a finite number >= 0, got {padding!r}")
    if canvas_bounds is not None:
        for name, value in (("width", canvas_bounds.width), ("height", canvas_bounds.height)):
            if not math.isfinite(value) or value <= 0:
                raise InvalidConfiguration(
                    f"canvas {name} must be a finite number > 0, got {value!r}"
                )


class Placer:
    """Owns one placement pass: an ordered history of committed boxes.

    Each ``place()`` call checks the new box against every committed box in
    commit order and pushes it down past each collision.  Committed boxes are
    never moved again; placement order decides the outcome.

    Quick start
    -----------
    >>> placer = Placer(padding=0.25)
    >>> placer.place("Title", 0.5, 0.25, 12.0, 1.0)
    Box(x=0.5, y=0.25, w=12.0, h=1.0, payload='Title')
    >>> placer.place("Body", 0.5, 1.0, 12.0, 4.0).y
    1.5

    Adapter pattern
    ---------------
    Pass a custom ``BaseResolver`` to change how collisions are resolved, or
    a ``BaseSizeEstimator`` to change how ``place_text()`` sizes text.

    A placer is safe to share between threads (each ``place`` is one locked
    step), but the usual pattern is one placer per pass, owned by one caller.
    """

    def __init__(
        self,
        padding: float = DEFAULT_PADDING,
        canvas_bounds: CanvasBounds | None = None,
        *,
        resolver: BaseResolver | None = None,
        sizer: BaseSizeEstimator | None = None,
        clamp_to_canvas: bool = True,
    ) -> None:
        """
        Args:
            padding:         Minimum clear gap between boxes (canvas units).
            canvas_bounds:   Canvas size.  None disables clamping entirely.
            resolver:        Collision strategy.  Defaults to SinglePassResolver.
            sizer:           Text size estimator used by ``place_text``.
                             Defaults to HeuristicTextSizer (inches).
            clamp_to_canvas: Pull preferred corners inside ``canvas_bounds``.
        """
        _check_config(padding, canvas_bounds)
        self.padding = padding
        self.canvas_bounds = canvas_bounds
        self.clamp_to_canvas = clamp_to_canvas
        self.resolver = resolver if resolver is not None else SinglePassResolver()
        self.sizer = sizer if sizer is not None else HeuristicTextSizer()
        self._placed: list[Box] = []
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: PlacerConfig, **kwargs: Any) -> Placer:
        """Build a placer from a :class:`PlacerConfig`.

        Extra keyword arguments (``sizer``, ``resolver``) are forwarded.
        """
        if config.settle:
            kwargs.setdefault("resolver", SettlingResolver())
        return cls(
            padding=config.padding,
            canvas_bounds=config.canvas,
            clamp_to_canvas=config.clamp_to_canvas,
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    @property
    def placed(self) -> tuple[Box, ...]:
        """Committed boxes in commit order."""
        return tuple(self._placed)

    def __len__(self) -> int:
        return len(self._placed)

    def __iter__(self) -> Iterator[Box]:
        return iter(self.placed)

    def place(self, text: Any, preferred_x: float, preferred_y: float, w: float, h: float) -> Box:
        """Commit a box near its preferred position and return where it landed.

        Raises InvalidDimension (without touching the history) when *w* or *h*
        is not a positive finite number.
        """
        candidate = Box(preferred_x, preferred_y, w, h, payload=text)
        if self.clamp_to_canvas and self.canvas_bounds is not None:
            x, y = clamp_to_canvas(preferred_x, preferred_y, w, h, self.canvas_bounds)
            candidate = candidate.moved_to(x=x, y=y)

        with self._lock:
            resolved = self.resolver.resolve(candidate, tuple(self._placed), self.padding)
            self._placed.append(resolved)

        if self.canvas_bounds is not None and resolved.bottom > self.canvas_bounds.height:
            logger.debug(
                "%r ends at y=%.4g, past canvas height %.4g",
                text, resolved.bottom, self.canvas_bounds.height,
            )
        return resolved

    def place_text(
        self,
        text: str,
        preferred_x: float,
        preferred_y: float,
        max_width: float | None = None,
    ) -> Box:
        """Size *text* with the placer's estimator, then ``place()`` it."""
        w, h = self.sizer.estimate(text, max_width)
        return self.place(text, preferred_x, preferred_y, w, h)

    def clear(self) -> None:
        """Drop the history and start a fresh placement pass."""
        with self._lock:
            n = len(self._placed)
            self._placed.clear()
        logger.debug("cleared %d placed boxes", n)

    # ------------------------------------------------------------------
    # Review helpers
    # ------------------------------------------------------------------

    def overlapping_pairs(self) -> list[tuple[int, int]]:
        """Index pairs in the history that still overlap (cascade leftovers)."""
        return audit.find_overlaps(self.placed, self.padding)

    def out_of_bounds(self) -> list[int]:
        """Indices of boxes extending past the canvas; empty when unbounded."""
        if self.canvas_bounds is None:
            return []
        return audit.out_of_bounds(self.placed, self.canvas_bounds)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    def to_records(self) -> list[dict]:
        """Serialise the history to a list of plain dicts."""
        return [b.to_dict() for b in self._placed]

    def to_json(self, indent: int = 2) -> str:
        """Serialise the history to a formatted JSON string.

        Payloads must be JSON-serialisable.
        """
        return json.dumps(self.to_records(), indent=indent)

    def to_dataframe(self):
        """Convert the history to a pandas DataFrame.

        Requires pandas to be installed (``pip install pandas``).
        """
        import pandas as pd  # type: ignore[import]

        return pd.DataFrame(self.to_records(), columns=["x", "y", "w", "h", "payload"])


# ----------------------------------------------------------------------
# Functional API
# ----------------------------------------------------------------------


def create_placer(
    padding: float = DEFAULT_PADDING,
    canvas_bounds: CanvasBounds | tuple[float, float] | None = None,
    **kwargs: Any,
) -> Placer:
    """Create a fresh placer.  *canvas_bounds* may be a ``(width, height)`` tuple."""
    if canvas_bounds is not None and not isinstance(canvas_bounds, CanvasBounds):
        canvas_bounds = CanvasBounds(*canvas_bounds)
    return Placer(padding, canvas_bounds, **kwargs)


def place(placer: Placer, text: Any, preferred_x: float, preferred_y: float, w: float, h: float) -> Box:
    """Commit one box on *placer*; see :meth:`Placer.place`."""
    return placer.place(text, preferred_x, preferred_y, w, h)


def clear(placer: Placer) -> None:
    """Start a fresh placement pass on *placer*."""
    placer.clear()
