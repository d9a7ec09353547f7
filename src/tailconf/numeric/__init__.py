"""Numeric primitives: series exponential and normal density."""

from .exponential import EXP_ACCURACY, exp_approx, int_pow
from .density import NormalDensity, density

__all__ = [
    "EXP_ACCURACY",
    "exp_approx",
    "int_pow",
    "NormalDensity",
    "density",
]
