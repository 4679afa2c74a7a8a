"""Matplotlib-based preview of a placement pass.

All public helpers accept a sequence of ``Box`` objects (or a ``Placer``)
and return a ``matplotlib.figure.Figure`` so the caller can save, show, or
embed the result in a notebook.  This is a review aid for spotting cascades
and canvas overflow, not a document renderer.

Typical usage::

    from layoutflo.placer.viz import plot_layout

    fig = plot_layout(placer)
    fig = plot_layout(boxes, canvas=CanvasBounds(13.333, 7.5), padding=0.1)
"""

from __future__ import annotations

from typing import Sequence, Union

import matplotlib.patches as mpatches
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from layoutflo.placer.audit import find_overlaps
from layoutflo.placer.models import Box, CanvasBounds
from layoutflo.placer.placer import Placer

# ── colour palette ──────────────────────────────────────────────────────────
BOX_COLOR: str = "deepskyblue"
OVERLAP_COLOR: str = "red"
CANVAS_COLOR: str = "dimgray"

LayoutLike = Union[Placer, Sequence[Box]]


def _unpack(
    layout: LayoutLike,
    canvas: CanvasBounds | None,
    padding: float | None,
) -> tuple[Sequence[Box], CanvasBounds | None, float | None]:
    if isinstance(layout, Placer):
        return (
            layout.placed,
            canvas if canvas is not None else layout.canvas_bounds,
            padding if padding is not None else layout.padding,
        )
    return layout, canvas, padding


# ── internal helpers ────────────────────────────────────────────────────────


def _draw_box(ax: plt.Axes, box: Box, index: int, color: str, max_label_len: int) -> None:
    """Draw one box outline with an ``#index payload`` caption."""
    ax.add_patch(
        mpatches.Rectangle(
            (box.x, box.y),
            box.w,
            box.h,
            linewidth=1.5,
            edgecolor=color,
            facecolor=color,
            alpha=0.25,
        )
    )
    label = "" if box.payload is None else str(box.payload)
    if len(label) > max_label_len:
        label = label[:max_label_len] + "…"
    ax.text(
        box.x,
        box.y,
        f"#{index} {label}".rstrip(),
        color="black",
        fontsize=7,
        verticalalignment="top",
        clip_on=True,
    )


def _set_limits(ax: plt.Axes, boxes: Sequence[Box], canvas: CanvasBounds | None) -> None:
    right = max([b.right for b in boxes] + [canvas.width if canvas else 1.0])
    bottom = max([b.bottom for b in boxes] + [canvas.height if canvas else 1.0])
    left = min([b.x for b in boxes] + [0.0])
    top = min([b.y for b in boxes] + [0.0])
    ax.set_xlim(left, right)
    # Layout coordinates grow downward
    ax.set_ylim(bottom, top)
    ax.set_aspect("equal")


# ── public API ──────────────────────────────────────────────────────────────


def plot_layout(
    layout: LayoutLike,
    *,
    canvas: CanvasBounds | None = None,
    padding: float | None = None,
    ax: plt.Axes | None = None,
    figsize: tuple[float, float] = (10, 6),
    max_label_len: int = 30,
    title: str | None = None,
) -> Figure:
    """Draw every box, the canvas outline, and any boxes that still overlap.

    Parameters
    ----------
    layout:
        A ``Placer`` (its history, canvas and padding are used) or a
        sequence of ``Box`` objects.
    canvas:
        Canvas to outline.  Overrides the placer's canvas.
    padding:
        Padding for the overlap check.  When *None* and *layout* is a plain
        sequence, overlaps are not highlighted.
    ax:
        Existing matplotlib axes to draw on.  A new figure is created when
        *None* (default).
    figsize:
        Figure size when creating a new figure.
    max_label_len:
        Truncate payload captions longer than this.
    title:
        Optional title.  Auto-generated when *None*.

    Returns
    -------
    matplotlib.figure.Figure
    """
    boxes, canvas, padding = _unpack(layout, canvas, padding)
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=figsize)
    else:
        fig = ax.get_figure()

    flagged: set[int] = set()
    if padding is not None:
        for i, j in find_overlaps(boxes, padding):
            flagged.update((i, j))

    if canvas is not None:
        ax.add_patch(
            mpatches.Rectangle(
                (0, 0),
                canvas.width,
                canvas.height,
                linewidth=2,
                edgecolor=CANVAS_COLOR,
                facecolor="none",
                linestyle="--",
            )
        )

    for i, box in enumerate(boxes):
        color = OVERLAP_COLOR if i in flagged else BOX_COLOR
        _draw_box(ax, box, i, color, max_label_len)

    _set_limits(ax, boxes, canvas)
    if title is None:
        title = f"{len(boxes)} boxes"
        if flagged:
            title += f", {len(flagged)} overlapping (red)"
    ax.set_title(title)
    fig.tight_layout()
    return fig
