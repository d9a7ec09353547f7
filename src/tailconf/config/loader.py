"""Configuration loading from programmatic and environment sources."""

import os
import logging
from pathlib import Path
from dataclasses import fields, replace
from typing import Any, Dict, Mapping, Optional

from tailconf.config.settings import (
    Settings, DistributionSettings, SupportSettings,
    TableSettings, LoggingSettings, LogLevel, Interpolation,
    reference_settings,
)
from tailconf.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_LOG_LEVEL = "TAILCONF_LOG_LEVEL"
ENV_LOG_DIR = "TAILCONF_LOG_DIR"
ENV_QUIET = "TAILCONF_QUIET"

_SECTIONS = {
    "distribution": DistributionSettings,
    "support": SupportSettings,
    "table": TableSettings,
    "logging": LoggingSettings,
}

def _check_keys(section: str, values: Mapping[str, Any]) -> None:
    allowed = {f.name for f in fields(_SECTIONS[section])}
    for key in values:
        if key not in allowed:
            raise ConfigurationError(
                f"Unknown setting '{key}'",
                config_field=f"{section}.{key}"
            ).add_suggestion(f"Use one of: {sorted(allowed)}")

def _to_enum(enum_cls, value, config_field: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower() if enum_cls is Interpolation else str(value).upper())
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid value {value!r}",
            config_field=config_field
        ).add_suggestion(f"Use one of: {[m.value for m in enum_cls]}") from e

class ConfigurationLoader:
    """Loads configuration from mappings, the environment and system defaults."""

    def load_defaults(self) -> Settings:
        """Load default configuration settings."""
        return reference_settings()

    def load_from_mapping(self, data: Optional[Mapping[str, Any]]) -> Settings:
        """
        Load configuration from a nested mapping.

        Sections are ``distribution``, ``support``, ``table`` and ``logging``.
        Missing sections keep their defaults, except ``support`` which is
        centred on the configured distribution when absent.
        """
        data = dict(data or {})
        try:
            for section in data:
                if section not in _SECTIONS:
                    raise ConfigurationError(
                        f"Unknown configuration section '{section}'",
                        config_field=section
                    ).add_suggestion(f"Use one of: {sorted(_SECTIONS)}")

            for section, values in data.items():
                _check_keys(section, values)

            distribution = DistributionSettings(**data.get("distribution", {}))

            if "support" in data:
                support = SupportSettings(**data["support"])
            else:
                support = SupportSettings.around(distribution)

            table_updates: Dict[str, Any] = dict(data.get("table", {}))
            if "interpolation" in table_updates:
                table_updates["interpolation"] = _to_enum(
                    Interpolation, table_updates["interpolation"], "table.interpolation"
                )
            table = TableSettings(**table_updates)

            logging_updates: Dict[str, Any] = dict(data.get("logging", {}))
            if "level" in logging_updates:
                logging_updates["level"] = _to_enum(
                    LogLevel, logging_updates["level"], "logging.level"
                )
            if logging_updates.get("log_dir"):
                logging_updates["log_dir"] = Path(logging_updates["log_dir"])

            logger.debug("Loaded settings from mapping sections: %s", sorted(data))
            return Settings(
                distribution=distribution,
                support=support,
                table=table,
                logging=LoggingSettings(**logging_updates),
            )

        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"Failed to load configuration from mapping: {str(e)}"
            ) from e

    def load_logging_from_env(
        self,
        environ: Optional[Mapping[str, str]] = None,
        base: Optional[LoggingSettings] = None,
    ) -> LoggingSettings:
        """Load logging settings from TAILCONF_* environment variables."""
        environ = os.environ if environ is None else environ
        settings = base or LoggingSettings()

        updates: Dict[str, Any] = {}
        if environ.get(ENV_LOG_LEVEL):
            updates['level'] = _to_enum(LogLevel, environ[ENV_LOG_LEVEL], "logging.level")
        if environ.get(ENV_LOG_DIR):
            updates['log_dir'] = Path(environ[ENV_LOG_DIR])
        if environ.get(ENV_QUIET):
            updates['quiet_console'] = environ[ENV_QUIET].lower() in ("1", "true", "yes")

        return replace(settings, **updates)

def configure(data: Optional[Mapping[str, Any]] = None) -> Settings:
    """Main entry point to build validated settings."""
    loader = ConfigurationLoader()
    settings = loader.load_from_mapping(data) if data else loader.load_defaults()
    settings.validate()
    return settings
