"""Pytest configuration and fixtures."""

import json

import pytest

from subtrack import EntryTrack, TimedEntry


@pytest.fixture
def hello_world_track():
    """Two-cue track used by the rendering tests."""
    return EntryTrack(
        TimedEntry(1000, 3000, ["Hello"]),
        TimedEntry(4000, 6000, ["World", "Line2"]),
    )


@pytest.fixture
def three_entry_track():
    """Track of three single-line cues labelled a, b, c."""
    return EntryTrack(
        TimedEntry(0, 1000, ["a"]),
        TimedEntry(1000, 2000, ["b"]),
        TimedEntry(2000, 3000, ["c"]),
    )


@pytest.fixture
def hello_world_srt():
    """Expected SRT rendering of hello_world_track."""
    return (
        "1\n"
        "00:00:01,000 --> 00:00:03,000\n"
        "Hello\n"
        "\n"
        "2\n"
        "00:00:04,000 --> 00:00:06,000\n"
        "World\n"
        "Line2\n"
        "\n"
    )


@pytest.fixture
def cue_sheet_file(tmp_path):
    """JSON cue sheet mixing millisecond and timestamp times."""
    path = tmp_path / "cues.json"
    path.write_text(
        json.dumps(
            {
                "cues": [
                    {"start": 1000, "end": 3000, "lines": ["Hello"]},
                    {
                        "start": "00:00:04,000",
                        "end": "00:00:06,000",
                        "lines": ["World", "Line2"],
                    },
                ]
            }
        ),
        encoding="utf-8",
    )
    return path
