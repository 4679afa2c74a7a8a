"""Exceptions raised by the placer."""


class LayoutError(ValueError):
    """Base class for all placer errors."""


class InvalidConfiguration(LayoutError):
    """Placer setup is unusable (negative padding, empty canvas, ...)."""


class InvalidDimension(LayoutError):
    """A placement request carried a non-positive width or height."""
