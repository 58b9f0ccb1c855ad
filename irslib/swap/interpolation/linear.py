"""
Log-linear discount factor interpolation on zero rate pillars.
"""
import math
from typing import Sequence

import numpy as np

from .base import Interpolator


class LogLinearZeroInterpolator(Interpolator):
    """Linear interpolation of log discount factors, parameterised by zero rates.

    Zero rates are continuously compounded. Outside the pillar range the
    nearest pillar's zero rate is used, so extrapolation is flat in zero rate.
    """

    def __init__(self, pillars: Sequence[float], zero_rates: Sequence[float]):
        super().__init__(pillars, zero_rates)
        self.log_dfs = -self.values * self.pillars

    def _inside(self, t: float) -> bool:
        return self.pillars[0] < t < self.pillars[-1]

    def interpolate(self, t: float) -> float:
        """Zero rate at time t."""
        if t <= self.pillars[0]:
            return float(self.values[0])
        if t >= self.pillars[-1]:
            return float(self.values[-1])
        return float(-np.interp(t, self.pillars, self.log_dfs) / t)

    def interpolate_discount_factor(self, t: float) -> float:
        if t <= 0:
            return 1.0
        return math.exp(-self.interpolate(t) * t)

    def parameter_weights(self, t: float) -> np.ndarray:
        # z(t) = ((1 - w) t1 z1 + w t2 z2) / t between pillars t1 < t < t2
        weights = np.zeros(self.size)
        if not self._inside(t):
            weights[0 if t <= self.pillars[0] else -1] = 1.0
            return weights

        upper = int(np.searchsorted(self.pillars, t))
        lower = upper - 1
        t1, t2 = self.pillars[lower], self.pillars[upper]
        w = (t - t1) / (t2 - t1)
        weights[lower] = (1.0 - w) * t1 / t
        weights[upper] = w * t2 / t
        return weights
