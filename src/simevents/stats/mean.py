"""
Running mean.

Values are folded in one at a time; nothing is stored per sample.
"""

from __future__ import annotations

import math


class Mean:
    """Running count, sum, min, max and mean of a sample."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Forget every sample."""
        self._max: float = -math.inf
        self._min: float = math.inf
        self._sum: float = 0.0
        self._mean: float = 0.0
        self._number: int = 0

    def set_value(self, value: float) -> None:
        """Add a sample value."""
        if value > self._max:
            self._max = value
        if value < self._min:
            self._min = value
        self._sum += value
        self._number += 1
        self._mean = self._sum / self._number

    def __iadd__(self, value: float) -> Mean:
        self.set_value(value)
        return self

    @property
    def number_of_samples(self) -> int:
        return self._number

    @property
    def min(self) -> float:
        """Smallest value seen (``inf`` when empty)."""
        return self._min

    @property
    def max(self) -> float:
        """Largest value seen (``-inf`` when empty)."""
        return self._max

    @property
    def sum(self) -> float:
        return self._sum

    @property
    def mean(self) -> float:
        return self._mean

    def __str__(self) -> str:
        lines = [
            f"Number of samples : {self.number_of_samples}",
            f"Minimum           : {self.min}",
            f"Maximum           : {self.max}",
            f"Sum               : {self.sum}",
            f"Mean              : {self.mean}",
        ]
        return "\n".join(lines)
