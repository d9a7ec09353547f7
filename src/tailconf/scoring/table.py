"""Discretized normal CDF and the two-sided confidence lookup."""

import logging
import math
from typing import Callable, Optional

import numpy as np

from tailconf.config.settings import Interpolation, Settings, reference_settings
from tailconf.domain.exceptions import TableBuildError
from tailconf.numeric.density import NormalDensity
from tailconf.utils.timing import section_timer, timeit

from .models import TableStats

logger = logging.getLogger(__name__)

# Total mass further than this from 1 means the support cuts off real tail mass.
MASS_TOLERANCE = 1e-3

def clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))

@timeit(logger, name="integrate_cdf")
def integrate_cdf(f: Callable[[float], float], lower: float, upper: float, points: int) -> np.ndarray:
    """
    Cumulative composite trapezoid rule of ``f`` over ``[lower, upper]``.

    Returns ``points + 1`` values where entry ``i`` approximates the integral
    from ``lower`` to ``lower + i * delta``. Single left-to-right pass.
    """
    delta = (upper - lower) / points
    cdf = np.zeros(points + 1, dtype=np.float64)

    f_i = f(lower)
    running = f_i / 2
    for i in range(1, points + 1):
        f_i = f(lower + delta * i)
        cdf[i] = delta * (running + f_i / 2)
        running += f_i
    return cdf

class ConfidenceTable:
    """
    Precomputed CDF of a normal distribution over a bounded support.

    The table is built once in the constructor and never changes afterwards,
    so ``evaluate`` can be called from any number of threads without locking.
    """

    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or reference_settings()
        settings.validate()

        self._settings = settings
        self._lower = float(settings.support.lower)
        self._upper = float(settings.support.upper)
        self._points = settings.table.points
        self._delta = (self._upper - self._lower) / self._points
        self._linear = settings.table.interpolation is Interpolation.LINEAR
        self._density = NormalDensity.from_settings(
            settings.distribution, accuracy=settings.table.exp_accuracy
        )

        with section_timer(f"cdf table ({self._points} points)", logger):
            cdf = integrate_cdf(self._density, self._lower, self._upper, self._points)

        bad = np.flatnonzero(~np.isfinite(cdf))
        if bad.size:
            raise TableBuildError(
                f"CDF table contains non-finite values starting at index {int(bad[0])}",
                index=int(bad[0]),
                points=self._points,
            ).add_context('stdev', settings.distribution.stdev)

        cdf.flags.writeable = False
        self._cdf = cdf

        total = float(cdf[-1])
        if abs(total - 1.0) > MASS_TOLERANCE:
            logger.warning(
                "Support [%s, %s] holds %.6f of the probability mass; "
                "confidence near the edges will be biased",
                self._lower, self._upper, total,
            )
        logger.debug(
            "Built CDF table: points=%d delta=%.6g total_mass=%.9f",
            self._points, self._delta, total,
        )

    @classmethod
    def build(cls, settings: Optional[Settings] = None) -> "ConfidenceTable":
        """Build a table from validated settings (reference settings when omitted)."""
        return cls(settings)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def lower(self) -> float:
        return self._lower

    @property
    def upper(self) -> float:
        return self._upper

    @property
    def delta(self) -> float:
        return self._delta

    @property
    def points(self) -> int:
        return self._points

    @property
    def cdf(self) -> np.ndarray:
        """Read-only view of the ``points + 1`` CDF values."""
        return self._cdf

    @property
    def total_mass(self) -> float:
        return float(self._cdf[-1])

    def _bucket(self, x: float) -> int:
        # rounding can put x just below upper into bucket `points`
        return min(int((x - self._lower) / self._delta), self._points - 1)

    def lower_tail(self, x: float) -> float:
        """One-sided CDF at ``x`` as read from the table. NaN gives NaN."""
        if math.isnan(x):
            return math.nan
        if x <= self._lower:
            return 0.0
        if x >= self._upper:
            return self.total_mass

        i = self._bucket(x)
        value = float(self._cdf[i])
        if self._linear:
            t = (x - self._lower) / self._delta - i
            value += t * (float(self._cdf[i + 1]) - value)
        return value

    def evaluate(self, x: float) -> float:
        """
        Two-sided confidence ``P(|X - mean| >= |x - mean|)``.

        Points at or beyond the support limits, and NaN, get exactly ``0.0``.
        """
        if not self._lower < x < self._upper:
            return 0.0

        c = self.lower_tail(x)
        return clamp01(2 * min(c, 1 - c))

    __call__ = evaluate

    def stats(self) -> TableStats:
        return TableStats(
            points=self._points,
            lower=self._lower,
            upper=self._upper,
            delta=self._delta,
            total_mass=self.total_mass,
            interpolation=self._settings.table.interpolation.value,
        )

    def __repr__(self) -> str:
        return (
            f"ConfidenceTable(mean={self._density.mean}, stdev={self._density.stdev}, "
            f"lower={self._lower}, upper={self._upper}, points={self._points})"
        )
