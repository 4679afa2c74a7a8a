"""Vectorised layout checks for reviewing a finished placement pass."""

from typing import List, Sequence, Tuple

import numpy as np

from layoutflo.placer.models import Box, CanvasBounds


def _as_array(boxes: Sequence[Box]) -> np.ndarray:
    if len(boxes) == 0:
        return np.zeros((0, 4), dtype=float)
    return np.array([b.as_tuple() for b in boxes], dtype=float)


def overlap_matrix(boxes: Sequence[Box], padding: float = 0.1) -> np.ndarray:
    """Return an (n, n) bool matrix; ``m[i, j]`` is ``overlaps(boxes[i], boxes[j])``.

    The diagonal is False.
    """
    arr = _as_array(boxes)
    x, y = arr[:, 0], arr[:, 1]
    right = x + arr[:, 2]
    bottom = y + arr[:, 3]
    separated = (
        (right[:, None] + padding <= x[None, :])
        | (right[None, :] + padding <= x[:, None])
        | (bottom[:, None] + padding <= y[None, :])
        | (bottom[None, :] + padding <= y[:, None])
    )
    m = ~separated
    np.fill_diagonal(m, False)
    return m


def find_overlaps(boxes: Sequence[Box], padding: float = 0.1) -> List[Tuple[int, int]]:
    """Return ``(i, j)`` index pairs (i < j) of boxes that still overlap."""
    m = overlap_matrix(boxes, padding)
    ii, jj = np.nonzero(np.triu(m, k=1))
    return [(int(i), int(j)) for i, j in zip(ii, jj)]


def out_of_bounds(boxes: Sequence[Box], canvas: CanvasBounds) -> List[int]:
    """Return indices of boxes that extend past any canvas edge."""
    arr = _as_array(boxes)
    x, y = arr[:, 0], arr[:, 1]
    outside = (
        (x < 0)
        | (y < 0)
        | (x + arr[:, 2] > canvas.width)
        | (y + arr[:, 3] > canvas.height)
    )
    return [int(i) for i in np.flatnonzero(outside)]
