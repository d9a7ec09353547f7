import logging

import pytest

from tailconf.config.settings import (
    DistributionSettings,
    Settings,
    SupportSettings,
    TableSettings,
)
from tailconf.scoring.reference import get_reference_table
from tailconf.scoring.table import ConfidenceTable



@pytest.fixture(scope="session")
def reference_table() -> ConfidenceTable:
    return get_reference_table()


@pytest.fixture(scope="session")
def standard_normal_table() -> ConfidenceTable:
    distribution = DistributionSettings(mean=0.0, stdev=1.0)
    return ConfidenceTable.build(Settings(
        distribution=distribution,
        support=SupportSettings.around(distribution),
        table=TableSettings(points=2000),
    ))


@pytest.fixture(autouse=True)
def reset_tailconf_loggers():
    """Undo handlers and propagation changes made by setup_logging."""
    yield
    for name in ("tailconf", "tailconf.summary"):
        log = logging.getLogger(name)
        for handler in list(log.handlers):
            log.removeHandler(handler)
            handler.close()
        log.propagate = True
        log.setLevel(logging.NOTSET)
