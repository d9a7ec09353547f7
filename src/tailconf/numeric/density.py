"""Normal probability density built on the series exponential."""

from dataclasses import dataclass

from .exponential import EXP_ACCURACY, exp_approx

ROOT_2PI = 2.50662827463


def density(x: float, mean: float, stdev: float, accuracy: float = EXP_ACCURACY) -> float:
    """Evaluate the Normal(mean, stdev) density at ``x``. ``stdev`` must be positive."""
    z = (x - mean) / stdev
    return (1.0 / (stdev * ROOT_2PI)) * exp_approx(-0.5 * z * z, accuracy)


@dataclass(frozen=True)
class NormalDensity:
    """Density with its parameters bound, callable as ``f(x)``."""
    mean: float
    stdev: float
    accuracy: float = EXP_ACCURACY

    @classmethod
    def from_settings(cls, distribution, accuracy: float = EXP_ACCURACY) -> "NormalDensity":
        return cls(mean=distribution.mean, stdev=distribution.stdev, accuracy=accuracy)

    @property
    def peak(self) -> float:
        """Density value at the mean."""
        return 1.0 / (self.stdev * ROOT_2PI)

    def __call__(self, x: float) -> float:
        return density(x, self.mean, self.stdev, self.accuracy)
