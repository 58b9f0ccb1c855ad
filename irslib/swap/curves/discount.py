"""
Discount curve defined by continuously compounded zero rates at pillar times.
"""
import logging
import math
from datetime import date, datetime
from typing import List, Union

import numpy as np

from irslib.swap.conventions.daycount import DayCountConvention
from irslib.swap.interpolation import LogLinearZeroInterpolator

from .base import BaseCurve

logger = logging.getLogger(__name__)


class ZeroRateCurve(BaseCurve):
    """
    Zero rate curve with log-linear discount factor interpolation.

    Used both for discounting (one curve per currency) and for projecting
    index rates, where the discount factors act as pseudo-discount factors
    of the index. The curve parameters are the pillar zero rates.
    """

    def __init__(self,
                 reference_date: date,
                 pillar_times: List[float],
                 zero_rates: List[float],
                 name: str = "",
                 time_day_count: Union[str, DayCountConvention] = "ACT/365F"):
        """
        Initialize zero rate curve.

        Args:
            reference_date: Curve valuation date
            pillar_times: Pillar times in years from reference date
            zero_rates: Continuously compounded zero rates at pillar times
            name: Curve name
            time_day_count: Day count used to turn dates into curve times
        """
        super().__init__(reference_date, name, time_day_count)

        if len(pillar_times) != len(zero_rates):
            raise ValueError("Pillar times and zero rates must have same length")
        if len(pillar_times) < 1:
            raise ValueError("Need at least 1 pillar point")
        if any(t <= 0 for t in pillar_times):
            raise ValueError("Pillar times must be positive")

        self.interpolator = LogLinearZeroInterpolator(pillar_times, zero_rates)
        self.pillar_times = list(self.interpolator.pillars)
        self.zero_rates = list(self.interpolator.values)

        dfs = [math.exp(-z * t) for z, t in zip(self.zero_rates, self.pillar_times, strict=True)]
        for i in range(1, len(dfs)):
            increase = dfs[i] - dfs[i - 1]
            if increase > 1e-6:
                logger.warning(
                    "Discount factors increasing at pillar %s of curve %s (increase = %.8f)",
                    i,
                    name,
                    increase,
                )

    @classmethod
    def from_discount_factors(cls,
                              reference_date: date,
                              pillar_times: List[float],
                              discount_factors: List[float],
                              name: str = "",
                              time_day_count: Union[str, DayCountConvention] = "ACT/365F") -> "ZeroRateCurve":
        """Build a curve from discount factors at pillar times."""
        for i, df in enumerate(discount_factors):
            if df <= 0:
                raise ValueError(f"Discount factor at pillar {i} must be positive: {df}")
        zero_rates = [-math.log(df) / t for t, df in zip(pillar_times, discount_factors, strict=True)]
        return cls(reference_date, pillar_times, zero_rates, name, time_day_count)

    @classmethod
    def flat(cls, reference_date: date, rate: float, name: str = "") -> "ZeroRateCurve":
        """Build a curve with the same zero rate at every time."""
        return cls(reference_date, [1.0], [rate], name)

    @property
    def parameter_count(self) -> int:
        return self.interpolator.size

    def df(self, t: Union[datetime, date, float]) -> float:
        """Get discount factor at time t."""
        return self.interpolator.interpolate_discount_factor(self.year_fraction(t))

    def zero(self, t: Union[datetime, date, float]) -> float:
        """Get continuously compounded zero rate at time t."""
        return self.interpolator.interpolate(self.year_fraction(t))

    def zero_rate_parameter_sensitivity(self, t: Union[datetime, date, float]) -> np.ndarray:
        """Derivative of the zero rate at t with respect to each pillar zero rate."""
        return self.interpolator.parameter_weights(self.year_fraction(t))
