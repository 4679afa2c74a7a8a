"""layoutflo.placer — greedy incremental placement of boxes on a canvas.

Quick start
-----------
>>> from layoutflo.placer import create_placer
>>> placer = create_placer(padding=0.1, canvas_bounds=(13.333, 7.5))
>>> title = placer.place("Title", 0.5, 0.4, 12.0, 1.0)
>>> body = placer.place("Body", 0.5, 1.0, 12.0, 4.0)   # pushed below the title

Custom adapters
---------------
>>> from layoutflo.placer import Placer, SettlingResolver, HeuristicTextSizer
>>> placer = Placer(padding=0.1, resolver=SettlingResolver(),
...                 sizer=HeuristicTextSizer(font_size_pt=24))
"""

from layoutflo.placer._geometry import DEFAULT_PADDING, overlaps
from layoutflo.placer.config import PlacerConfig, make_page_config, make_slide_config
from layoutflo.placer.errors import InvalidConfiguration, InvalidDimension, LayoutError
from layoutflo.placer.models import Box, CanvasBounds
from layoutflo.placer.placer import Placer, clear, create_placer, place
from layoutflo.placer.resolver import BaseResolver, SettlingResolver, SinglePassResolver
from layoutflo.placer.sizing import (
    BaseSizeEstimator,
    FixedSizeEstimator,
    HeuristicTextSizer,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Placer
    "Placer",
    "create_placer",
    "place",
    "clear",
    "overlaps",
    "DEFAULT_PADDING",
    # Data models
    "Box",
    "CanvasBounds",
    # Configuration
    "PlacerConfig",
    "make_slide_config",
    "make_page_config",
    # Errors
    "LayoutError",
    "InvalidConfiguration",
    "InvalidDimension",
    # Resolution adapters
    "BaseResolver",
    "SinglePassResolver",
    "SettlingResolver",
    # Sizing adapters
    "BaseSizeEstimator",
    "FixedSizeEstimator",
    "HeuristicTextSizer",
]
