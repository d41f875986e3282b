"""logroll — Application configuration.

Configuration is loaded from (in order of increasing priority):
    1. Built-in defaults (this file)
    2. Environment variables prefixed with LOGROLL_
    3. System config: /etc/logroll/config.yaml
    4. User config:   ~/.logroll/config.yaml
    5. An explicit config file passed to ``Settings.load()``

Example ``config.yaml``::

    logging:
      level: info
      format: json
    trigger:
      kind: compound
      limit: 10 mb
      date: true

All settings are immutable after load.  Call ``Settings.load()`` once at
logger setup and pass the instance to whatever builds the appenders.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from logroll.exceptions import ConfigurationError
from logroll.logging import configure_logging
from logroll.triggers.models import CompoundTriggerConfig, TriggerConfig, TriggerKind

DEFAULT_TRIGGER_LIMIT = 10 * 1024 * 1024


class LoggingConfig(BaseModel):
    level: Literal["debug", "info", "warning", "error", "critical"] = "info"
    format: Literal["json", "console"] = "console"
    file: Path | None = None


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LOGROLL_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    trigger: TriggerConfig = Field(
        default_factory=lambda: CompoundTriggerConfig(limit=DEFAULT_TRIGGER_LIMIT),
        description="Rollover trigger for the active log file.",
    )

    @field_validator("trigger", mode="before")
    @classmethod
    def fill_trigger_defaults(cls, v: object) -> object:
        """Let partial blocks (e.g. ``LOGROLL_TRIGGER__DATE=true``) keep the defaults."""
        if isinstance(v, dict):
            return {"kind": TriggerKind.COMPOUND.value, "limit": DEFAULT_TRIGGER_LIMIT, **v}
        return v

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Settings":
        """Load settings from YAML files + environment variables.

        Raises:
            ConfigurationError: a config file is unreadable or a value is invalid.
        """
        data: dict[str, object] = {}

        candidates = [
            Path("/etc/logroll/config.yaml"),
            Path.home() / ".logroll" / "config.yaml",
        ]
        if config_file:
            candidates.append(config_file)

        for path in candidates:
            if path.exists():
                import yaml  # lazy import — only needed when a file exists

                try:
                    with path.open() as f:
                        loaded = yaml.safe_load(f) or {}
                except (OSError, yaml.YAMLError) as exc:
                    raise ConfigurationError(
                        f"Cannot read config file '{path}': {exc}",
                        context={"path": str(path)},
                    ) from exc
                if not isinstance(loaded, dict):
                    raise ConfigurationError(
                        f"Config file '{path}' must contain a mapping at the top level",
                        context={"path": str(path)},
                    )
                data.update(loaded)

        try:
            return cls(**data)
        except ValidationError as exc:
            errors = exc.errors(include_url=False)
            messages = "; ".join(e.get("msg", "") for e in errors)
            raise ConfigurationError(
                f"Settings validation failed: {messages}",
                context={"validation_errors": errors},
            ) from exc


# Module-level singleton — replaced by ``Settings.load()`` at startup.
_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def override_settings(settings: Settings) -> None:
    """Replace the module-level singleton. Used in tests."""
    global _settings
    _settings = settings


def setup_logging(settings: Settings | None = None) -> Settings:
    """Configure logging from *settings* (default: the loaded singleton).

    Call once when the owning appenders are built.  Returns the settings
    that were applied.
    """
    if settings is None:
        settings = get_settings()
    configure_logging(
        level=settings.logging.level,
        format=settings.logging.format,
        log_file=str(settings.logging.file) if settings.logging.file else None,
    )
    return settings
