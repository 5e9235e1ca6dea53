"""Ordered subtitle tracks."""

import logging
import threading
from collections.abc import Iterable, Iterator

from .errors import IndexOutOfRange
from .models import TimedEntry
from .srt import track_to_srt

logger = logging.getLogger(__name__)


def _check_entries(entries: Iterable[TimedEntry]) -> list[TimedEntry]:
    checked = list(entries)
    for entry in checked:
        if not isinstance(entry, TimedEntry):
            raise TypeError(f"Expected TimedEntry, got {type(entry).__name__}")
    return checked


class EntryTrack:
    """An ordered sequence of subtitle entries.

    Order is display and serialization order; nothing keeps entries sorted by
    start time. Position ``i`` renders as cue number ``i + 1``, so numbering
    is always contiguous no matter how the track was built.
    """

    def __init__(self, *entries: TimedEntry):
        self._entries: list[TimedEntry] = _check_entries(entries)

    @classmethod
    def from_entries(cls, entries: Iterable[TimedEntry]) -> "EntryTrack":
        return cls(*entries)

    def append(self, entry: TimedEntry) -> None:
        self._entries.extend(_check_entries([entry]))

    def insert_at(self, index: int, *entries: TimedEntry) -> None:
        """Insert one or more entries starting at ``index``.

        Entries before ``index`` keep their positions; the new entries take
        ``index`` onwards in the given order and everything that was at
        ``index`` or later moves up by the number inserted. ``index`` equal
        to the track length appends.

        Inserting near the front of a large track shifts the whole tail and
        costs time proportional to the track length.

        Raises:
            IndexOutOfRange: If ``index`` is negative or greater than the length
        """
        if index < 0 or index > len(self._entries):
            raise IndexOutOfRange(
                f"Index {index} out of range for track of length {len(self._entries)}"
            )
        new_entries = _check_entries(entries)
        self._entries[index:index] = new_entries
        logger.debug("Inserted %d entries at %d", len(new_entries), index)

    def remove_at(self, index: int) -> TimedEntry:
        """Remove and return the entry at ``index``; later cues renumber."""
        if index < 0 or index >= len(self._entries):
            raise IndexOutOfRange(
                f"Index {index} out of range for track of length {len(self._entries)}"
            )
        return self._entries.pop(index)

    def entries(self) -> tuple[TimedEntry, ...]:
        return tuple(self._entries)

    def index_at(self, time_ms: int) -> int | None:
        """Return the position of the first entry active at ``time_ms``."""
        for index, entry in enumerate(self._entries):
            if entry.contains(time_ms):
                return index
        return None

    def active_at(self, time_ms: int) -> TimedEntry | None:
        """Return the first entry whose range contains ``time_ms``, if any.

        Entries are scanned in track order, so with overlapping cues the one
        placed earlier in the track wins.
        """
        index = self.index_at(time_ms)
        return None if index is None else self._entries[index]

    def total_duration(self) -> int:
        """Latest end time across all entries, 0 for an empty track."""
        return max((entry.end_ms for entry in self._entries), default=0)

    def render(self) -> str:
        return track_to_srt(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TimedEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> TimedEntry:
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EntryTrack):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"EntryTrack({len(self._entries)} entries)"

    def __str__(self) -> str:
        return self.render()


class SynchronizedTrack:
    """Lock-guarded access to an EntryTrack shared between threads.

    Every operation holds one re-entrant lock, and iteration walks a snapshot
    taken under the lock, so a reader never sees a half-applied insert.
    """

    def __init__(self, track: EntryTrack | None = None):
        self._track = track if track is not None else EntryTrack()
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def append(self, entry: TimedEntry) -> None:
        with self._lock:
            self._track.append(entry)

    def insert_at(self, index: int, *entries: TimedEntry) -> None:
        with self._lock:
            self._track.insert_at(index, *entries)

    def remove_at(self, index: int) -> TimedEntry:
        with self._lock:
            return self._track.remove_at(index)

    def active_at(self, time_ms: int) -> TimedEntry | None:
        with self._lock:
            return self._track.active_at(time_ms)

    def index_at(self, time_ms: int) -> int | None:
        with self._lock:
            return self._track.index_at(time_ms)

    def render(self) -> str:
        with self._lock:
            return self._track.render()

    def entries(self) -> tuple[TimedEntry, ...]:
        with self._lock:
            return self._track.entries()

    def __len__(self) -> int:
        with self._lock:
            return len(self._track)

    def __iter__(self) -> Iterator[TimedEntry]:
        return iter(self.entries())

    def __getitem__(self, index: int) -> TimedEntry:
        with self._lock:
            return self._track[index]

    def total_duration(self) -> int:
        with self._lock:
            return self._track.total_duration()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SynchronizedTrack):
            other = EntryTrack.from_entries(other.entries())
        if not isinstance(other, EntryTrack):
            return NotImplemented
        with self._lock:
            return self._track == other

    __hash__ = None  # type: ignore[assignment]
