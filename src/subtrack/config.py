"""Configuration management via environment variables."""

import codecs
import os
from dataclasses import dataclass

from dotenv import load_dotenv

LINE_ENDINGS = {"lf": "\n", "crlf": "\r\n"}


def _known_encoding(name: str) -> bool:
    try:
        codecs.lookup(name)
    except LookupError:
        return False
    return True


@dataclass
class Config:
    """Application configuration loaded from environment."""

    encoding: str = "utf-8"
    line_ending: str = "lf"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Unknown encodings and line endings fall back to the defaults.
        """
        load_dotenv()
        encoding = os.getenv("SUBTRACK_ENCODING", "utf-8").strip()
        if not encoding or not _known_encoding(encoding):
            encoding = "utf-8"
        line_ending = os.getenv("SUBTRACK_LINE_ENDING", "lf").strip().lower()
        if line_ending not in LINE_ENDINGS:
            line_ending = "lf"
        return cls(
            encoding=encoding,
            line_ending=line_ending,
            log_level=os.getenv("SUBTRACK_LOG_LEVEL", "WARNING").upper(),
        )

    @property
    def newline(self) -> str:
        """Line terminator for written SRT files."""
        return LINE_ENDINGS[self.line_ending]
