"""Subtitle cues, ordered tracks and SubRip rendering."""

from .errors import IndexOutOfRange, InvalidLineSelector, InvalidRange, SubtrackError
from .models import LineSelector, TimedEntry
from .track import EntryTrack, SynchronizedTrack

__all__ = [
    "EntryTrack",
    "IndexOutOfRange",
    "InvalidLineSelector",
    "InvalidRange",
    "LineSelector",
    "SubtrackError",
    "SynchronizedTrack",
    "TimedEntry",
]

__version__ = "0.1.0"
