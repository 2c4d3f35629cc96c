"""Running variance."""

from __future__ import annotations

import math

from simevents.stats.mean import Mean


class Variance(Mean):
    """
    Running variance calculation.

    Extends Mean with sample variance and standard deviation.
    """

    def reset(self) -> None:
        super().reset()
        self._sum_sq: float = 0.0

    def set_value(self, value: float) -> None:
        super().set_value(value)
        self._sum_sq += value * value

    @property
    def variance(self) -> float:
        """
        Sample variance.

        Uses n-1 denominator (Bessel's correction); 0.0 below two samples.
        """
        if self._number < 2:
            return 0.0
        var = (self._sum_sq - (self._sum * self._sum) / self._number) / (self._number - 1)
        # Rounding can push a zero variance slightly negative.
        return max(var, 0.0)

    @property
    def std_dev(self) -> float:
        return math.sqrt(self.variance)

    def __str__(self) -> str:
        lines = [
            f"Variance          : {self.variance}",
            f"Standard Deviation: {self.std_dev}",
            super().__str__(),
        ]
        return "\n".join(lines)
