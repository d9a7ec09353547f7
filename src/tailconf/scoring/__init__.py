"""Confidence tables and queries."""

from .table import ConfidenceTable, clamp01, integrate_cdf
from .models import TableStats
from .reference import confidence, get_reference_table

__all__ = [
    "ConfidenceTable",
    "TableStats",
    "clamp01",
    "integrate_cdf",
    "confidence",
    "get_reference_table",
]
