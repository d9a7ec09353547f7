"""Data models for confidence tables."""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict, Any

@dataclass(frozen=True)
class TableStats:
    points: int          # number of subintervals
    lower: float
    upper: float
    delta: float         # bucket width
    total_mass: float    # cdf[points], ~1 for a wide enough support
    interpolation: str   # "none" | "linear"

    @property
    def missing_mass(self) -> float:
        """Mass the support does not cover (negative when the series overshoots)."""
        return 1.0 - self.total_mass

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
