"""Placer configuration dataclass and factory functions."""

from dataclasses import dataclass
from typing import Optional

from layoutflo.placer.models import CanvasBounds


@dataclass
class PlacerConfig:
    # Minimum clear gap between two boxes (canvas units)
    padding: float = 0.1

    # Canvas; None means unbounded (no clamping)
    canvas_width: Optional[float] = None
    canvas_height: Optional[float] = None

    # Pull preferred corners inside the canvas before resolving collisions
    clamp_to_canvas: bool = True

    # Repeat the forward scan until no collision remains (slower, stronger)
    settle: bool = False

    @property
    def canvas(self) -> Optional[CanvasBounds]:
        if self.canvas_width is None or self.canvas_height is None:
            return None
        return CanvasBounds(self.canvas_width, self.canvas_height)


def _scaled(width_in: float, height_in: float, dpi: Optional[int]) -> PlacerConfig:
    if dpi is None:
        return PlacerConfig(padding=0.1, canvas_width=width_in, canvas_height=height_in)
    return PlacerConfig(
        padding=0.1 * dpi,
        canvas_width=round(width_in * dpi),
        canvas_height=round(height_in * dpi),
    )


def make_slide_config(dpi: Optional[int] = None) -> PlacerConfig:
    """Return a PlacerConfig for a 16:9 slide (13.333" × 7.5").

    Units are inches by default.  Pass *dpi* to get the same slide in
    pixels, e.g. dpi=96 gives a 1280×720 canvas with 9.6 px padding.
    """
    return _scaled(13.333, 7.5, dpi)


def make_page_config(dpi: Optional[int] = None) -> PlacerConfig:
    """Return a PlacerConfig for an A4 portrait page (8.27" × 11.69").

    dpi=300 gives the usual 2481×3507 px canvas.
    """
    return _scaled(8.27, 11.69, dpi)
