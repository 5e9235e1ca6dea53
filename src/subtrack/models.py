"""Data models for subtrack."""

from collections.abc import Iterable
from enum import Enum

from .errors import InvalidLineSelector, InvalidRange


class LineSelector(Enum):
    """Addressable line positions within a cue."""

    FIRST = 0
    SECOND = 1


def _as_lines(lines: str | Iterable[str]) -> tuple[str, ...]:
    if isinstance(lines, str):
        return (lines,)
    return tuple(lines)


class TimedEntry:
    """A single subtitle cue: a time range in milliseconds and its text lines.

    Times are offsets from the start of the track. The range is half-open and
    always satisfies ``0 <= start_ms < end_ms``; the setters re-check it
    against the current value of the other bound and leave the entry
    untouched when the check fails.
    """

    __slots__ = ("_start_ms", "_end_ms", "_lines")

    def __init__(self, start_ms: int, end_ms: int, lines: str | Iterable[str]):
        if start_ms == end_ms:
            raise InvalidRange(
                f"Start and end times cannot be equal ({start_ms} ms)"
            )
        if start_ms < 0:
            raise InvalidRange(f"Start time cannot be negative ({start_ms} ms)")
        if start_ms > end_ms:
            raise InvalidRange(
                f"Start time ({start_ms} ms) cannot be greater than end time ({end_ms} ms)"
            )

        self._start_ms = start_ms
        self._end_ms = end_ms
        self._lines = _as_lines(lines)

    @property
    def start_ms(self) -> int:
        return self._start_ms

    @property
    def end_ms(self) -> int:
        return self._end_ms

    @property
    def lines(self) -> tuple[str, ...]:
        return self._lines

    @property
    def text(self) -> str:
        """Lines joined for on-screen display."""
        return "\n".join(self._lines)

    def set_start(self, start_ms: int) -> None:
        """Move the start time.

        Raises:
            InvalidRange: If the new start is negative or not before the current end
        """
        if not 0 <= start_ms < self._end_ms:
            raise InvalidRange(
                f"Start time must be in [0, {self._end_ms}) ms, got {start_ms}"
            )
        self._start_ms = start_ms

    def set_end(self, end_ms: int) -> None:
        """Move the end time.

        Raises:
            InvalidRange: If the new end is not after the current start
        """
        if end_ms <= self._start_ms:
            raise InvalidRange(
                f"End time must be greater than {self._start_ms} ms, got {end_ms}"
            )
        self._end_ms = end_ms

    def set_lines(self, lines: str | Iterable[str]) -> None:
        """Replace every line, including changing how many there are."""
        self._lines = _as_lines(lines)

    def set_line_at(self, selector: LineSelector, text: str) -> None:
        """Replace the single line picked by ``selector``.

        Raises:
            InvalidLineSelector: If ``selector`` is not a LineSelector member,
                or the entry has no line at that position
        """
        if not isinstance(selector, LineSelector):
            raise InvalidLineSelector(
                f"Invalid line selector {selector!r}: choose from {[s.name for s in LineSelector]}"
            )
        position = selector.value
        if position >= len(self._lines):
            raise InvalidLineSelector(
                f"Entry has {len(self._lines)} line(s), cannot replace {selector.name} line"
            )
        lines = list(self._lines)
        lines[position] = text
        self._lines = tuple(lines)

    def duration(self) -> int:
        """Return end minus start in milliseconds, always positive."""
        return self._end_ms - self._start_ms

    def contains(self, time_ms: int) -> bool:
        """Check whether ``time_ms`` falls in ``[start_ms, end_ms)``."""
        return self._start_ms <= time_ms < self._end_ms

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimedEntry):
            return NotImplemented
        return (
            self._start_ms == other._start_ms
            and self._end_ms == other._end_ms
            and self._lines == other._lines
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TimedEntry(start_ms={self._start_ms}, end_ms={self._end_ms}, lines={list(self._lines)!r})"
