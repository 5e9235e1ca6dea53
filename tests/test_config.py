"""Tests for environment configuration."""

from subtrack.config import Config


class TestConfig:
    """Tests for Config.from_env."""

    def test_defaults(self, monkeypatch, tmp_path):
        """Test defaults when nothing is set."""
        monkeypatch.chdir(tmp_path)
        for name in ("SUBTRACK_ENCODING", "SUBTRACK_LINE_ENDING", "SUBTRACK_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        config = Config.from_env()
        assert config.encoding == "utf-8"
        assert config.newline == "\n"
        assert config.log_level == "WARNING"

    def test_from_env(self, monkeypatch):
        """Test values are read from the environment."""
        monkeypatch.setenv("SUBTRACK_ENCODING", "utf-16")
        monkeypatch.setenv("SUBTRACK_LINE_ENDING", "CRLF")
        monkeypatch.setenv("SUBTRACK_LOG_LEVEL", "debug")

        config = Config.from_env()
        assert config.encoding == "utf-16"
        assert config.line_ending == "crlf"
        assert config.newline == "\r\n"
        assert config.log_level == "DEBUG"

    def test_unknown_line_ending_falls_back(self, monkeypatch):
        """Test unknown line endings fall back to LF."""
        monkeypatch.setenv("SUBTRACK_LINE_ENDING", "cr")
        assert Config.from_env().newline == "\n"

    def test_unknown_encoding_falls_back(self, monkeypatch):
        """Test unknown codec names fall back to UTF-8."""
        monkeypatch.setenv("SUBTRACK_ENCODING", "nope")
        assert Config.from_env().encoding == "utf-8"
