"""Build-once reference table and the module-level ``confidence`` query."""

import logging
import threading
from typing import Optional

from tailconf.config.settings import reference_settings

from .table import ConfidenceTable

logger = logging.getLogger(__name__)

_reference_table: Optional[ConfidenceTable] = None
_lock = threading.Lock()

def get_reference_table() -> ConfidenceTable:
    """Return the reference table, building it on first use."""
    global _reference_table
    table = _reference_table
    if table is None:
        with _lock:
            if _reference_table is None:
                logger.debug("Building reference confidence table")
                _reference_table = ConfidenceTable.build(reference_settings())
            table = _reference_table
    return table

def confidence(x: float) -> float:
    """Two-sided confidence of ``x`` under the reference distribution."""
    return get_reference_table().evaluate(x)
