"""Exceptions raised by subtitle entries and tracks."""


class SubtrackError(Exception):
    """Base class for all subtrack errors."""


class InvalidRange(SubtrackError, ValueError):
    """Start/end times would violate 0 <= start < end."""


class IndexOutOfRange(SubtrackError, IndexError):
    """Track position outside the valid range."""


class InvalidLineSelector(SubtrackError, ValueError):
    """Line selector is not one of the LineSelector members."""
