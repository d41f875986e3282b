"""Unit tests — Settings.load, get_settings, override_settings."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
import structlog

from logroll.config import DEFAULT_TRIGGER_LIMIT, Settings, get_settings, override_settings, setup_logging
from logroll.exceptions import ConfigurationError
from logroll.triggers.models import CompoundTriggerConfig, SizeTriggerConfig


@pytest.mark.unit
class TestSettingsLoad:
    def test_load_defaults_when_no_files(self) -> None:
        with patch.object(Path, "exists", return_value=False):
            settings = Settings.load()
        assert settings.logging.level == "info"
        assert isinstance(settings.trigger, CompoundTriggerConfig)
        assert settings.trigger.limit == 10 * 1024 * 1024
        assert settings.trigger.date is False

    def test_load_trigger_from_config_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("trigger:\n  kind: compound\n  limit: 10 mb\n  date: true\n")

        settings = Settings.load(config_file=config_file)
        assert isinstance(settings.trigger, CompoundTriggerConfig)
        assert settings.trigger.limit == 10 * 1024**2
        assert settings.trigger.date is True

    def test_load_size_trigger(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("trigger:\n  kind: size\n  limit: 512 KiB\n")

        settings = Settings.load(config_file=config_file)
        assert isinstance(settings.trigger, SizeTriggerConfig)
        assert settings.trigger.limit == 512 * 1024

    def test_unknown_trigger_field_rejected(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("trigger:\n  kind: compound\n  limit: 10\n  roll_hourly: true\n")

        with pytest.raises(ConfigurationError, match="Settings validation failed"):
            Settings.load(config_file=config_file)

    def test_bad_limit_rejected(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("trigger:\n  kind: compound\n  limit: ten megs\n")

        with pytest.raises(ConfigurationError) as exc_info:
            Settings.load(config_file=config_file)
        assert exc_info.value.context["validation_errors"]

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("trigger: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Cannot read config file"):
            Settings.load(config_file=config_file)

    def test_non_mapping_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- just\n- a list\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            Settings.load(config_file=config_file)

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        settings = Settings.load(config_file=config_file)
        assert settings.logging.format == "console"

    def test_logging_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOGROLL_LOGGING__LEVEL", "debug")
        with patch.object(Path, "exists", return_value=False):
            settings = Settings.load()
        assert settings.logging.level == "debug"

    def test_trigger_date_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOGROLL_TRIGGER__DATE", "true")
        with patch.object(Path, "exists", return_value=False):
            settings = Settings.load()
        assert isinstance(settings.trigger, CompoundTriggerConfig)
        assert settings.trigger.date is True
        assert settings.trigger.limit == DEFAULT_TRIGGER_LIMIT

    def test_trigger_limit_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOGROLL_TRIGGER__LIMIT", "1 mb")
        with patch.object(Path, "exists", return_value=False):
            settings = Settings.load()
        assert isinstance(settings.trigger, CompoundTriggerConfig)
        assert settings.trigger.limit == 1024**2
        assert settings.trigger.date is False

    def test_trigger_env_and_file_combine(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("trigger:\n  limit: 2 kb\n")
        monkeypatch.setenv("LOGROLL_TRIGGER__DATE", "true")

        settings = Settings.load(config_file=config_file)
        assert isinstance(settings.trigger, CompoundTriggerConfig)
        assert settings.trigger.limit == 2048
        assert settings.trigger.date is True

    def test_partial_file_block_keeps_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("trigger:\n  date: true\n")

        settings = Settings.load(config_file=config_file)
        assert isinstance(settings.trigger, CompoundTriggerConfig)
        assert settings.trigger.limit == DEFAULT_TRIGGER_LIMIT
        assert settings.trigger.date is True


@pytest.mark.unit
class TestGetSettings:
    def test_get_settings_returns_settings_instance(self) -> None:
        import logroll.config as cfg_module

        original = cfg_module._settings
        try:
            cfg_module._settings = None
            with patch.object(Path, "exists", return_value=False):
                settings = get_settings()
            assert isinstance(settings, Settings)
        finally:
            cfg_module._settings = original

    def test_get_settings_returns_cached_instance(self) -> None:
        import logroll.config as cfg_module

        original = cfg_module._settings
        try:
            mock_settings = Settings()
            cfg_module._settings = mock_settings
            assert get_settings() is mock_settings
        finally:
            cfg_module._settings = original


@pytest.mark.unit
class TestOverrideSettings:
    def test_override_sets_singleton(self) -> None:
        import logroll.config as cfg_module

        original = cfg_module._settings
        try:
            custom = Settings(trigger={"kind": "size", "limit": 1})
            override_settings(custom)
            assert get_settings() is custom
            assert get_settings().trigger.limit == 1
        finally:
            cfg_module._settings = original


@pytest.mark.unit
class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def _restore_logging(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        structlog.reset_defaults()
        root.handlers = handlers
        root.setLevel(level)

    def test_applies_logging_config(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logroll.log"
        settings = Settings(logging={"level": "warning", "format": "json", "file": str(log_file)})

        assert setup_logging(settings) is settings
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert any(
            isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_file
            for h in root.handlers
        )

    def test_defaults_to_singleton(self) -> None:
        import logroll.config as cfg_module

        original = cfg_module._settings
        try:
            override_settings(Settings(logging={"level": "error"}))
            setup_logging()
            assert logging.getLogger().level == logging.ERROR
        finally:
            cfg_module._settings = original
