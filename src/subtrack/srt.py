"""SRT subtitle text generation."""

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from .models import TimedEntry

logger = logging.getLogger(__name__)

_TIMESTAMP = re.compile(r"^\s*(\d{2,}):(\d{2}):(\d{2})[,.](\d{3})\s*$")


def format_timestamp(ms: int) -> str:
    """Format a millisecond offset as an SRT timestamp (HH:MM:SS,mmm).

    Hours are zero-padded to two digits; longer hour values are printed in full.
    """
    hours = ms // 3_600_000
    ms %= 3_600_000
    minutes = ms // 60_000
    ms %= 60_000
    seconds = ms // 1000
    millis = ms % 1000
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{millis:03d}"


def parse_timestamp(timestamp: str) -> int:
    """Parse an SRT timestamp to milliseconds.

    Args:
        timestamp: SRT timestamp format "HH:MM:SS,mmm" ("." also accepted)

    Returns:
        Offset in milliseconds
    """
    match = _TIMESTAMP.match(timestamp)
    if not match:
        raise ValueError(f"Invalid timestamp format: {timestamp}")

    hours, minutes, seconds, millis = (int(g) for g in match.groups())
    if minutes > 59 or seconds > 59:
        raise ValueError(f"Invalid timestamp format: {timestamp}")
    return hours * 3_600_000 + minutes * 60_000 + seconds * 1000 + millis


def entry_to_srt_block(number: int, entry: TimedEntry) -> str:
    """Convert one entry to an SRT block, including the trailing blank line.

    Args:
        number: Cue number shown above the timing line
        entry: The entry to render

    Returns:
        SRT block text
    """
    start_ts = format_timestamp(entry.start_ms)
    end_ts = format_timestamp(entry.end_ms)
    parts = [str(number), f"{start_ts} --> {end_ts}", *entry.lines, ""]
    return "\n".join(parts) + "\n"


def track_to_srt(entries: Iterable[TimedEntry]) -> str:
    """Convert entries to SRT format string.

    Cue numbers are assigned from the position in ``entries``, starting at 1.

    Args:
        entries: Entries in display order

    Returns:
        SRT formatted string
    """
    return "".join(
        entry_to_srt_block(number, entry) for number, entry in enumerate(entries, start=1)
    )


def write_srt(
    entries: Iterable[TimedEntry],
    path: str | Path,
    encoding: str = "utf-8",
    newline: str = "\n",
) -> Path:
    """Write entries to an SRT file.

    Args:
        entries: Entries in display order
        path: Output file path
        encoding: Text encoding of the file
        newline: Line terminator written for every line

    Returns:
        Resolved path of the written file
    """
    content = track_to_srt(entries)
    if newline != "\n":
        content = content.replace("\n", newline)

    out_path = Path(path).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding=encoding, newline="") as f:
        f.write(content)
    logger.debug("Wrote %d characters to %s", len(content), out_path)
    return out_path
