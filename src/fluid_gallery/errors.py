"""Exception types raised by the fluid gallery layout engine."""


class FluidGalleryError(Exception):
    """Base class for all layout engine errors."""


class InvalidArgumentError(FluidGalleryError, ValueError):
    """A value passed to the engine is outside what it accepts."""


class DivisionUndefinedError(FluidGalleryError, ZeroDivisionError):
    """A ratio was requested against a zero total."""


class IdentityMismatchError(FluidGalleryError, LookupError):
    """An extracted group holds items its parent group does not."""
