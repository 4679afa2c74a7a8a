"""Visualisation helpers for layoutflo-placer.

Quick access::

    from layoutflo.placer.viz import plot_layout
"""

from layoutflo.placer.viz.layout import plot_layout

__all__ = [
    "plot_layout",
]
