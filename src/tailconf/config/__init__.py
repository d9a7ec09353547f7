"""Configuration settings and loaders."""

from .settings import (
    Settings,
    DistributionSettings,
    SupportSettings,
    TableSettings,
    LoggingSettings,
    LogLevel,
    Interpolation,
    reference_settings,
)
from .loader import ConfigurationLoader, configure

__all__ = [
    "Settings",
    "DistributionSettings",
    "SupportSettings",
    "TableSettings",
    "LoggingSettings",
    "LogLevel",
    "Interpolation",
    "reference_settings",
    "ConfigurationLoader",
    "configure",
]
