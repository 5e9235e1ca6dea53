"""Tests for SRT rendering helpers."""

import pytest

from subtrack import TimedEntry
from subtrack.srt import (
    entry_to_srt_block,
    format_timestamp,
    parse_timestamp,
    track_to_srt,
    write_srt,
)


class TestFormatTimestamp:
    """Tests for format_timestamp."""

    @pytest.mark.parametrize(
        "ms,expected",
        [
            (0, "00:00:00,000"),
            (1000, "00:00:01,000"),
            (61_001, "00:01:01,001"),
            (5_445_999, "01:30:45,999"),
            (359_999_999, "99:59:59,999"),
        ],
    )
    def test_format(self, ms, expected):
        """Test standard decomposition with zero padding."""
        assert format_timestamp(ms) == expected

    def test_hours_beyond_two_digits(self):
        """Test 100+ hours print every digit."""
        assert format_timestamp(100 * 3_600_000) == "100:00:00,000"


class TestParseTimestamp:
    """Tests for parse_timestamp."""

    def test_parse(self):
        """Test comma and dot separators."""
        assert parse_timestamp("01:30:45,999") == 5_445_999
        assert parse_timestamp("00:00:01.500") == 1500
        assert parse_timestamp("100:00:00,000") == 360_000_000

    @pytest.mark.parametrize("value", ["", "1:2:3", "00:00:01", "00:61:00,000", "abc"])
    def test_parse_invalid(self, value):
        """Test malformed timestamps raise ValueError."""
        with pytest.raises(ValueError, match="Invalid timestamp"):
            parse_timestamp(value)


class TestBlocks:
    """Tests for block and track rendering."""

    def test_entry_block(self):
        """Test a single block ends with a blank line."""
        block = entry_to_srt_block(7, TimedEntry(1000, 3000, ["Hello", "There"]))
        assert block == "7\n00:00:01,000 --> 00:00:03,000\nHello\nThere\n\n"

    def test_track_to_srt_numbers_from_one(self):
        """Test numbering comes from position."""
        text = track_to_srt([TimedEntry(0, 1, ["a"]), TimedEntry(1, 2, ["b"])])
        assert text.startswith("1\n00:00:00,000 --> 00:00:00,001\na\n\n2\n")


class TestWriteSrt:
    """Tests for write_srt."""

    def test_write(self, tmp_path, hello_world_track, hello_world_srt):
        """Test the file holds the rendered track."""
        path = write_srt(hello_world_track, tmp_path / "out" / "movie.srt")
        assert path.read_bytes() == hello_world_srt.encode("utf-8")

    def test_write_crlf(self, tmp_path, hello_world_track, hello_world_srt):
        """Test CRLF line endings."""
        path = write_srt(hello_world_track, tmp_path / "movie.srt", newline="\r\n")
        assert path.read_bytes() == hello_world_srt.replace("\n", "\r\n").encode("utf-8")
