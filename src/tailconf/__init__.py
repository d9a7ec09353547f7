"""Two-sided confidence levels from a precomputed normal CDF table."""

from tailconf.scoring import ConfidenceTable, confidence, get_reference_table
from tailconf.config.settings import Settings, reference_settings

__version__ = "0.1.0"

__all__ = [
    "ConfidenceTable",
    "Settings",
    "confidence",
    "get_reference_table",
    "reference_settings",
]
