"""Size estimators that turn a text payload into a (w, h) box size.

The placer never measures text itself; callers inject one of these (or
their own ``BaseSizeEstimator``) and call ``Placer.place_text``.
"""

from __future__ import annotations

import textwrap
from abc import ABC, abstractmethod

POINTS_PER_INCH = 72.0


class BaseSizeEstimator(ABC):
    """Abstract interface for estimating the box a piece of text needs."""

    @abstractmethod
    def estimate(self, text: str, max_width: float | None = None) -> tuple[float, float]:
        """Return ``(w, h)`` in canvas units.  Both must be positive."""
        ...


class FixedSizeEstimator(BaseSizeEstimator):
    """Every payload gets the same box.  Handy for grids of cards or icons."""

    def __init__(self, w: float, h: float) -> None:
        self.w = w
        self.h = h

    def estimate(self, text: str, max_width: float | None = None) -> tuple[float, float]:
        return (self.w if max_width is None else min(self.w, max_width), self.h)


class HeuristicTextSizer(BaseSizeEstimator):
    """Average-glyph estimate: fixed character width, fixed line height.

    Good enough for slide titles and bullet blocks set in a proportional
    sans-serif face; it over-estimates narrow text and under-estimates
    all-caps.
    """

    def __init__(
        self,
        font_size_pt: float = 18.0,
        char_width_ratio: float = 0.55,
        line_spacing: float = 1.2,
        units_per_inch: float = 1.0,
    ) -> None:
        """
        Args:
            font_size_pt:     Font size in points.
            char_width_ratio: Average glyph advance as a fraction of the em size.
            line_spacing:     Line height as a multiple of the font size.
            units_per_inch:   Canvas units per inch (1 for inches, the DPI for pixels).
        """
        self.font_size_pt = font_size_pt
        self.char_width_ratio = char_width_ratio
        self.line_spacing = line_spacing
        self.units_per_inch = units_per_inch

    @property
    def char_width(self) -> float:
        return self.font_size_pt / POINTS_PER_INCH * self.char_width_ratio * self.units_per_inch

    @property
    def line_height(self) -> float:
        return self.font_size_pt / POINTS_PER_INCH * self.line_spacing * self.units_per_inch

    def wrap(self, text: str, max_width: float | None = None) -> list[str]:
        """Split *text* into the lines it would occupy within *max_width*."""
        paragraphs = text.splitlines() or [""]
        if max_width is None:
            return paragraphs
        max_chars = max(1, int(max_width // self.char_width))
        lines: list[str] = []
        for para in paragraphs:
            lines.extend(textwrap.wrap(para, max_chars) or [""])
        return lines

    def estimate(self, text: str, max_width: float | None = None) -> tuple[float, float]:
        lines = self.wrap(text, max_width)
        widest = max(1, max(len(line) for line in lines))
        w = widest * self.char_width
        if max_width is not None:
            w = min(w, max_width)
        return (w, len(lines) * self.line_height)
