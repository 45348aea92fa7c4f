"""Exception types for the location resolution core."""


class ZonemapError(Exception):
    """Base class for errors raised by zonemap."""


class GazetteerError(ZonemapError):
    """Reference data could not be loaded or violates an index invariant."""


class InvalidTargetError(ZonemapError, ValueError):
    """A viewport target is missing coordinates or has out-of-range values."""
