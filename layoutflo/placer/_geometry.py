"""Pure box geometry shared across modules."""

from typing import Optional, Tuple

from layoutflo.placer.models import Box, CanvasBounds

DEFAULT_PADDING = 0.1


def overlaps(a: Box, b: Box, padding: float = DEFAULT_PADDING) -> bool:
    """Return True if *a* and *b* are closer than *padding* on both axes.

    Boxes exactly *padding* apart count as separated, so a box pushed to
    ``e.bottom + padding`` no longer overlaps ``e``.
    """
    return not (
        a.right + padding <= b.x
        or b.right + padding <= a.x
        or a.bottom + padding <= b.y
        or b.bottom + padding <= a.y
    )


def clamp_to_canvas(
    x: float, y: float, w: float, h: float, canvas: Optional[CanvasBounds]
) -> Tuple[float, float]:
    """Pull a top-left corner inside the canvas.

    A box larger than the canvas on an axis is pinned at 0 on that axis.
    """
    if canvas is None:
        return x, y
    x = max(0.0, min(x, canvas.width - w))
    y = max(0.0, min(y, canvas.height - h))
    return x, y
