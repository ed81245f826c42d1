# tests/test_config.py
import json

import pytest
import structlog
from pydantic import ValidationError

from dictionaries.shared.config import AppEnv, AssetSourceKind, Settings
from dictionaries.shared.logging_config import configure_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("ASSET_SOURCE", "ASSET_DIR", "STRICT_SCHEMA", "LOG_FORMAT"):
            monkeypatch.delenv(f"DICTIONARIES_{var}", raising=False)

        s = Settings(_env_file=None)
        assert s.ASSET_SOURCE is AssetSourceKind.PACKAGE
        assert s.ASSET_PACKAGE == "dictionaries.data"
        assert s.ASSET_DIR is None
        assert s.STRICT_SCHEMA is False
        assert s.APP_ENV is AppEnv.DEVELOPMENT

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DICTIONARIES_ASSET_SOURCE", "directory")
        monkeypatch.setenv("DICTIONARIES_ASSET_DIR", str(tmp_path))
        monkeypatch.setenv("DICTIONARIES_STRICT_SCHEMA", "true")
        monkeypatch.setenv("DICTIONARIES_APP_ENV", "testing")

        s = Settings(_env_file=None)
        assert s.ASSET_SOURCE is AssetSourceKind.DIRECTORY
        assert s.ASSET_DIR == str(tmp_path)
        assert s.STRICT_SCHEMA is True
        assert s.APP_ENV is AppEnv.TESTING

    def test_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("DICTIONARIES_LOG_LEVEL", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("DICTIONARIES_LOG_LEVEL=DEBUG\nUNRELATED=1\n", encoding="utf-8")

        s = Settings(_env_file=str(env_file))
        assert s.LOG_LEVEL == "DEBUG"

    def test_log_settings_are_normalized(self):
        s = Settings(_env_file=None, LOG_LEVEL=" debug ", LOG_FORMAT="JSON")
        assert s.LOG_LEVEL == "DEBUG"
        assert s.LOG_FORMAT == "json"

    def test_unknown_log_format_rejected(self, monkeypatch):
        monkeypatch.setenv("DICTIONARIES_LOG_FORMAT", "xml")

        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None)
        assert "LOG_FORMAT" in str(exc_info.value)


class TestLogging:
    def test_json_output_goes_to_stderr(self, capsys):
        configure_logging(level="INFO", fmt="json")
        structlog.get_logger("tests").info("dictionary_event", asset="periods")

        captured = capsys.readouterr()
        assert captured.out == ""
        entry = json.loads(captured.err.strip().splitlines()[-1])
        assert entry["event"] == "dictionary_event"
        assert entry["asset"] == "periods"
        assert entry["level"] == "info"
        assert entry["app"] == "strength-dictionaries"
        assert "timestamp" in entry

    def test_level_filtering(self, capsys):
        configure_logging(level="WARNING", fmt="json")
        log = structlog.get_logger("tests")
        log.info("hidden")
        log.warning("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err

    def test_unknown_level_falls_back_to_info(self, capsys):
        configure_logging(level="LOUD", fmt="json")
        log = structlog.get_logger("tests")
        log.debug("too_quiet")
        log.info("loud_enough")

        err = capsys.readouterr().err
        assert "too_quiet" not in err
        assert "loud_enough" in err
