"""
Tests for settings loading and logging configuration.
"""
import json
import logging

import pytest

from src.utils import paths
from src.utils.message import Log, ColorFormatter, purge_old_logs
from src.utils.settings import Settings, DEFAULT_SETTINGS, apply_logging_settings


@pytest.fixture(autouse=True)
def restore_logging():
    """Put Log back to its default configuration after each test."""
    yield
    Log.disable_file_logging()
    Log.set_console_logging(True)
    Log.set_level("INFO")


# =============================================================================
# Settings Tests
# =============================================================================

class TestSettings:
    """Tests for the JSON-backed Settings."""

    def test_missing_file_uses_defaults_without_writing(self, tmp_path):
        settings_file = tmp_path / "settings.json"

        settings = Settings(settings_file)

        assert settings.settings == DEFAULT_SETTINGS
        assert not settings_file.exists()

    def test_saved_values_override_defaults(self, tmp_path):
        settings_file = tmp_path / "settings.json"
        settings_file.write_text(json.dumps({"log_level": "DEBUG"}), encoding="utf-8")

        settings = Settings(settings_file)

        assert settings.get("log_level") == "DEBUG"
        assert settings.get("console_logging") is True

    def test_corrupt_file_falls_back_to_defaults(self, tmp_path):
        settings_file = tmp_path / "settings.json"
        settings_file.write_text("{not json", encoding="utf-8")

        settings = Settings(settings_file)

        assert settings.settings == DEFAULT_SETTINGS

    def test_non_object_file_falls_back_to_defaults(self, tmp_path):
        settings_file = tmp_path / "settings.json"
        settings_file.write_text("[1, 2]", encoding="utf-8")

        assert Settings(settings_file).settings == DEFAULT_SETTINGS

    def test_set_persists(self, tmp_path):
        settings_file = tmp_path / "nested" / "settings.json"
        settings = Settings(settings_file)

        settings.set("log_level", "WARNING")

        assert Settings(settings_file).get("log_level") == "WARNING"

    def test_get_default(self, tmp_path):
        settings = Settings(tmp_path / "settings.json")
        assert settings.get("unknown", 42) == 42

    def test_settings_path_env_override(self, tmp_path, monkeypatch):
        target = tmp_path / "custom.json"
        monkeypatch.setenv(paths.SETTINGS_FILE_ENV, str(target))

        assert paths.get_settings_path() == target
        assert Settings().settings_file == str(target)


# =============================================================================
# Logging Configuration Tests
# =============================================================================

class TestApplyLoggingSettings:
    """Tests for pushing settings into Log."""

    def test_level_is_applied(self, tmp_path):
        settings = Settings(tmp_path / "settings.json")
        settings.settings["log_level"] = "DEBUG"

        apply_logging_settings(settings)

        assert Log.get_logger().level == logging.DEBUG

    def test_file_logging_writes_log_file(self, tmp_path):
        log_folder = tmp_path / "logs"
        settings = Settings(tmp_path / "settings.json")
        settings.settings.update({"file_logging": True, "log_folder": str(log_folder)})

        apply_logging_settings(settings)
        Log.info("hello from the region registry")
        Log.disable_file_logging()

        log_files = list(log_folder.glob("regions_*.log"))
        assert len(log_files) == 1
        assert "hello from the region registry" in log_files[0].read_text(encoding="utf-8")

    def test_console_logging_can_be_disabled(self, tmp_path):
        settings = Settings(tmp_path / "settings.json")
        settings.settings["console_logging"] = False

        apply_logging_settings(settings)

        stream_handlers = [
            h for h in Log.get_logger().handlers
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        ]
        assert stream_handlers == []


class TestLogHelpers:
    """Tests for log formatting and purging."""

    def test_purge_old_logs_keeps_newest(self, tmp_path):
        for stamp in ["2024-01-01_000000", "2024-01-02_000000", "2024-01-03_000000"]:
            (tmp_path / f"regions_{stamp}.log").write_text("", encoding="utf-8")
        (tmp_path / "other.txt").write_text("", encoding="utf-8")

        purge_old_logs(str(tmp_path), keep=2)

        remaining = sorted(p.name for p in tmp_path.iterdir())
        assert remaining == ["other.txt", "regions_2024-01-02_000000.log", "regions_2024-01-03_000000.log"]

    def test_color_formatter_leaves_record_untouched(self):
        record = logging.makeLogRecord({"msg": "x", "levelno": logging.INFO, "levelname": "INFO"})

        formatted = ColorFormatter(fmt="%(levelname)s %(message)s").format(record)

        assert "INFO" in formatted
        assert record.levelname == "INFO"
