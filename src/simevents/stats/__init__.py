"""Statistics collection classes."""

from simevents.stats.mean import Mean
from simevents.stats.variance import Variance

__all__ = [
    "Mean",
    "Variance",
]
