"""CDF table construction exceptions."""

from typing import Optional
from .base import TailconfError

class TableBuildError(TailconfError):
    """Raised when a CDF table cannot be built into a usable state."""

    def __init__(
        self,
        message: str,
        *,
        index: Optional[int] = None,
        points: Optional[int] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        if index is not None:
            self.add_context('index', index)
        if points is not None:
            self.add_context('points', points)

        self.add_suggestion("Check that stdev is not vanishingly small")
        self.add_suggestion("Narrow the support or lower the point count")

    def _get_default_error_code(self) -> str:
        return "TABLE_BUILD_FAILED"
