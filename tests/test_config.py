"""Tests for loading and saving the settings file"""

import json
import tempfile
from pathlib import Path

from vivboard.config import Settings


class TestSettings:
    """Tests for Settings.load_from_file and Settings.save_to_file"""

    def test_missing_file_returns_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            loaded = Settings.load_from_file(Path(tmpdir) / "config.json")

        assert loaded.ARCHIVE_EXTENSION == "viv"
        assert loaded.ARCHIVE_FILTER_NAME == "Viv Board"

    def test_save_and_load(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "config.json"
            original = Settings(
                TEMP_MEDIA_DIR_PATH=Path(tmpdir) / "staging",
                SESSION_LOCK_TIMEOUT=1.5,
            )

            original.save_to_file(path)
            loaded = Settings.load_from_file(path)

        assert loaded.TEMP_MEDIA_DIR_PATH == Path(tmpdir) / "staging"
        assert loaded.SESSION_LOCK_TIMEOUT == 1.5

    def test_malformed_file_returns_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.json"
            _ = path.write_text("{not json", encoding="utf-8")

            loaded = Settings.load_from_file(path)

        assert loaded.SESSION_LOCK_TIMEOUT == Settings().SESSION_LOCK_TIMEOUT

    def test_invalid_value_returns_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.json"
            _ = path.write_text(
                json.dumps({"SESSION_LOCK_TIMEOUT": "forever"}), encoding="utf-8"
            )

            loaded = Settings.load_from_file(path)

        assert loaded.SESSION_LOCK_TIMEOUT == Settings().SESSION_LOCK_TIMEOUT

    def test_unknown_console_level_returns_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.json"
            _ = path.write_text(
                json.dumps({"CONSOLE_LOG_LEVEL": "LOUD"}), encoding="utf-8"
            )

            loaded = Settings.load_from_file(path)

        assert loaded.CONSOLE_LOG_LEVEL == "INFO"
