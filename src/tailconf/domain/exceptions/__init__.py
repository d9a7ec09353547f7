"""Custom exceptions for the tailconf package."""

# Base exceptions
from .base import (
    TailconfError,
    ConfigurationError,
)

# Table exceptions
from .table import TableBuildError

# Validation exceptions
from .validation import (
    ValidationError,
    InputParseError,
)

__all__ = [
    # Base
    "TailconfError",
    "ConfigurationError",

    # Table
    "TableBuildError",

    # Validation
    "ValidationError",
    "InputParseError",
]
