"""Core configuration settings for tailconf."""

import math
import logging
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field
from enum import Enum

from tailconf.domain.exceptions import ConfigurationError
from tailconf.numeric.exponential import EXP_ACCURACY

logger = logging.getLogger(__name__)

REFERENCE_MEAN = 0.043
REFERENCE_STDEV = 0.026
SUPPORT_WIDTH_STDEVS = 6.0
REFERENCE_POINTS = 10000

class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

class Interpolation(Enum):
    """How a query inside a bucket reads the CDF table."""
    NONE = "none"
    LINEAR = "linear"

def _is_real(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)

@dataclass(frozen=True)
class DistributionSettings:
    """Parameters of the modelled normal distribution."""
    mean: float = REFERENCE_MEAN
    stdev: float = REFERENCE_STDEV

    def validate(self) -> None:
        """Validate distribution parameters."""
        if not _is_real(self.mean):
            raise ConfigurationError(
                f"mean must be a finite number, got {self.mean!r}",
                config_field="distribution.mean"
            )

        if not _is_real(self.stdev) or self.stdev <= 0:
            raise ConfigurationError(
                f"stdev must be a positive finite number, got {self.stdev!r}",
                config_field="distribution.stdev"
            ).add_suggestion("Use the standard deviation of the distribution, not its variance")

@dataclass(frozen=True)
class SupportSettings:
    """Bounded interval over which the CDF table is integrated."""
    lower: float = REFERENCE_MEAN - SUPPORT_WIDTH_STDEVS * REFERENCE_STDEV
    upper: float = REFERENCE_MEAN + SUPPORT_WIDTH_STDEVS * REFERENCE_STDEV

    @classmethod
    def around(
        cls,
        distribution: DistributionSettings,
        width: float = SUPPORT_WIDTH_STDEVS,
    ) -> "SupportSettings":
        """Support spanning ``width`` standard deviations either side of the mean."""
        return cls(
            lower=distribution.mean - width * distribution.stdev,
            upper=distribution.mean + width * distribution.stdev,
        )

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def validate(self) -> None:
        """Validate support limits."""
        for name in ("lower", "upper"):
            value = getattr(self, name)
            if not _is_real(value):
                raise ConfigurationError(
                    f"{name} must be a finite number, got {value!r}",
                    config_field=f"support.{name}"
                )

        if self.lower >= self.upper:
            raise ConfigurationError(
                f"lower ({self.lower}) must be less than upper ({self.upper})",
                config_field="support"
            ).add_suggestion("Use SupportSettings.around() to centre the support on the mean")

@dataclass(frozen=True)
class TableSettings:
    """Resolution and accuracy of the CDF table."""
    points: int = REFERENCE_POINTS
    exp_accuracy: float = EXP_ACCURACY
    interpolation: Interpolation = Interpolation.NONE

    def validate(self) -> None:
        """Validate table settings."""
        if not isinstance(self.points, int) or isinstance(self.points, bool) or self.points < 1:
            raise ConfigurationError(
                f"points must be a positive integer, got {self.points!r}",
                config_field="table.points"
            )

        if not _is_real(self.exp_accuracy) or not 0 < self.exp_accuracy < 1:
            raise ConfigurationError(
                f"exp_accuracy must lie in (0, 1), got {self.exp_accuracy!r}",
                config_field="table.exp_accuracy"
            )

        if not isinstance(self.interpolation, Interpolation):
            raise ConfigurationError(
                f"Invalid interpolation: {self.interpolation!r}",
                config_field="table.interpolation"
            ).add_suggestion(f"Use one of: {[i.value for i in Interpolation]}")

@dataclass(frozen=True)
class LoggingSettings:
    """Logging configuration."""
    level: LogLevel = LogLevel.WARNING
    log_dir: Optional[Path] = None
    console_output: bool = True
    quiet_console: bool = False

    def validate(self) -> None:
        """Validate logging settings."""
        if not isinstance(self.level, LogLevel):
            raise ConfigurationError(
                f"Invalid log level: {self.level!r}",
                config_field="logging.level"
            ).add_suggestion(f"Use one of: {[lvl.value for lvl in LogLevel]}")

        if self.log_dir and self.log_dir.exists() and not self.log_dir.is_dir():
            raise ConfigurationError(
                f"Log path is not a directory: {self.log_dir}",
                config_field="logging.log_dir"
            ).add_suggestion("Point TAILCONF_LOG_DIR at a directory")

@dataclass(frozen=True)
class Settings:
    """Main configuration settings for tailconf."""

    distribution: DistributionSettings = field(default_factory=DistributionSettings)
    support: SupportSettings = field(default_factory=SupportSettings)
    table: TableSettings = field(default_factory=TableSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def validate(self) -> None:
        """Validate all configuration settings."""
        try:
            self.distribution.validate()
            self.support.validate()
            self.table.validate()
            self.logging.validate()
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"Configuration validation failed: {str(e)}"
            ) from e

        # Cross-validation
        if not self.support.lower < self.distribution.mean < self.support.upper:
            logger.warning(
                "Mean %s lies outside the support [%s, %s]; confidence will be 0 at the mean",
                self.distribution.mean, self.support.lower, self.support.upper,
            )

    def to_dict(self) -> dict:
        """Convert settings to dictionary for debugging."""
        return {
            'distribution': {
                'mean': self.distribution.mean,
                'stdev': self.distribution.stdev,
            },
            'support': {
                'lower': self.support.lower,
                'upper': self.support.upper,
            },
            'table': {
                'points': self.table.points,
                'exp_accuracy': self.table.exp_accuracy,
                'interpolation': self.table.interpolation.value,
            },
            'logging': {
                'level': self.logging.level.value,
                'log_dir': str(self.logging.log_dir) if self.logging.log_dir else None,
                'console_output': self.logging.console_output,
                'quiet_console': self.logging.quiet_console,
            },
        }

def reference_settings() -> Settings:
    """Reference configuration: mean 0.043, stdev 0.026, support mean +/- 6 stdev, 10000 points."""
    distribution = DistributionSettings()
    return Settings(
        distribution=distribution,
        support=SupportSettings.around(distribution),
        table=TableSettings(),
    )
