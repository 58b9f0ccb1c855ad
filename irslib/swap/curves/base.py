"""
Curve protocol consumed by pricing environments, and a shared base class.

Curves measure time in years from their reference date. Dates are turned into
times with the curve's own day count; plain numbers are taken as times.
"""

import math
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Protocol, Union

import numpy as np

from irslib.swap.conventions.daycount import DayCountConvention, get_day_count_convention

CurveTime = Union[datetime, date, float]


class Curve(Protocol):
    """What a pricing environment needs from a discount or index curve."""

    name: str
    reference_date: date

    def df(self, t: CurveTime) -> float:
        ...

    def zero(self, t: CurveTime) -> float:
        ...

    def year_fraction(self, t: CurveTime) -> float:
        ...

    def zero_rate_parameter_sensitivity(self, t: CurveTime) -> np.ndarray:
        """d zero(t) / d parameter_i for every curve parameter."""
        ...


class BaseCurve(ABC):
    """Reference date, name and time measure shared by concrete curves.

    Args:
        reference_date: Date at which curve time is zero; must match the
            valuation date of any environment holding the curve
        name: Identifies the curve in parameter sensitivities
        time_day_count: Day count name or instance used for curve time
    """

    def __init__(
        self,
        reference_date: date,
        name: str = "",
        time_day_count: Union[str, DayCountConvention] = "ACT/365F",
    ):
        self.reference_date = reference_date
        self.name = name
        self.time_day_count = (
            time_day_count
            if isinstance(time_day_count, DayCountConvention)
            else get_day_count_convention(time_day_count)
        )

    def year_fraction(self, t: CurveTime) -> float:
        if isinstance(t, (int, float)):
            return float(t)
        return self.time_day_count.year_fraction(self.reference_date, t)

    @abstractmethod
    def df(self, t: CurveTime) -> float:
        pass

    def zero(self, t: CurveTime) -> float:
        """Continuously compounded zero rate implied by df; 0 at or before the reference date."""
        time = self.year_fraction(t)
        if time <= 0:
            return 0.0
        discount_factor = self.df(t)
        if discount_factor <= 0:
            raise ValueError(f"Curve {self.name} has non-positive discount factor {discount_factor} at {t}")
        return -math.log(discount_factor) / time

    def __str__(self) -> str:
        if not self.name:
            return type(self).__name__
        return f"{type(self).__name__}({self.name})"
