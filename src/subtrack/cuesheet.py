"""JSON cue sheets describing a track to build."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from .models import TimedEntry
from .srt import parse_timestamp
from .track import EntryTrack


class CueSpec(BaseModel):
    """One cue as written in a cue sheet.

    ``start`` and ``end`` are milliseconds or SRT timestamps ("00:00:01,000").
    """

    start: int
    end: int
    lines: list[str] = Field(min_length=1)

    @field_validator("start", "end", mode="before")
    @classmethod
    def _parse_time(cls, value):
        if isinstance(value, str) and ":" in value:
            return parse_timestamp(value)
        return value

    @field_validator("lines", mode="before")
    @classmethod
    def _split_text(cls, value):
        # "lines": "Hello\nWorld" is shorthand for ["Hello", "World"]
        if isinstance(value, str):
            return value.split("\n")
        return value

    def to_entry(self) -> TimedEntry:
        return TimedEntry(self.start, self.end, self.lines)


class CueSheet(BaseModel):
    """A cue sheet: cues in the order they appear in the track."""

    cues: list[CueSpec] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_list(cls, data):
        if isinstance(data, list):
            return {"cues": data}
        return data

    def to_track(self) -> EntryTrack:
        """Build a track from the cues.

        Raises:
            InvalidRange: If a cue has an invalid start/end pair
        """
        return EntryTrack.from_entries(cue.to_entry() for cue in self.cues)


def load_cue_sheet(path: str | Path, encoding: str = "utf-8") -> CueSheet:
    """Read and validate a JSON cue sheet.

    Args:
        path: Path to the JSON file
        encoding: Text encoding of the file

    Returns:
        Validated CueSheet
    """
    path = Path(path)
    content = path.read_text(encoding=encoding)
    return CueSheet.model_validate_json(content)
