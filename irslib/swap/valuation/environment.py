"""
Protocol for the market data environment used by pricers.

A pricing environment answers every market data question a pricer may ask
about an expanded swap leg: discount factors, FX rates, index rates, their
sensitivities, historical fixings and time measurement. Pricers depend only on
this protocol, so curve and index implementations can change without touching
pricing formulas.

Implementations must be free of side effects so that one environment can be
shared between threads. Any query may raise
:class:`~irslib.swap.errors.UnsupportedQueryError` when the environment has no
data to answer it; callers treat that as fatal for the computation at hand.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol, runtime_checkable

import pandas as pd

from irslib.swap.conventions.currency import Currency
from irslib.swap.conventions.indices import FxIndex, IborIndex, Index, OvernightIndex
from irslib.swap.valuation.sensitivity import (
    CurveParameterSensitivity,
    PointSensitivities,
    PointSensitivityBuilder,
)


@runtime_checkable
class PricingEnvironment(Protocol):
    """Protocol for market data queries made during valuation."""

    @property
    def valuation_date(self) -> date:
        """The date on which values are computed."""
        ...

    def time_series(self, index: Index) -> pd.Series:
        """Historical fixings of an index, as floats indexed by fixing date."""
        ...

    def fx_rate(self, base_currency: Currency, counter_currency: Currency) -> float:
        """Units of counter currency per unit of base currency; 1.0 when equal."""
        ...

    def discount_factor(self, currency: Currency, date: date) -> float:
        """Discount factor from the valuation date to ``date`` in ``currency``."""
        ...

    def discount_factor_zero_rate_sensitivity(self, currency: Currency, date: date) -> PointSensitivityBuilder:
        """Sensitivity of the discount factor to the zero rate at ``date``."""
        ...

    def fx_index_rate(self, index: FxIndex, base_currency: Currency, fixing_date: date) -> float:
        """FX index rate expressed as units of the other currency per unit of ``base_currency``."""
        ...

    def fx_index_rate_sensitivity(
        self, index: FxIndex, base_currency: Currency, fixing_date: date
    ) -> PointSensitivityBuilder:
        ...

    def ibor_index_rate(self, index: IborIndex, fixing_date: date) -> float:
        """Historic or forward rate of an Ibor index."""
        ...

    def ibor_index_rate_sensitivity(self, index: IborIndex, fixing_date: date) -> PointSensitivityBuilder:
        ...

    def overnight_index_rate(self, index: OvernightIndex, fixing_date: date) -> float:
        """Historic or forward rate of an overnight index for a single fixing date."""
        ...

    def overnight_index_rate_sensitivity(self, index: OvernightIndex, fixing_date: date) -> PointSensitivityBuilder:
        ...

    def overnight_index_rate_period(self, index: OvernightIndex, start_date: date, end_date: date) -> float:
        """Forward rate of an overnight index over a future period."""
        ...

    def overnight_index_rate_period_sensitivity(
        self, index: OvernightIndex, start_date: date, end_date: date
    ) -> PointSensitivityBuilder:
        ...

    def parameter_sensitivity(self, point_sensitivities: PointSensitivities) -> CurveParameterSensitivity:
        """Project point sensitivities onto the parameters of the underlying curves."""
        ...

    def relative_time(self, date: date) -> float:
        """Year fraction from the valuation date to ``date``; negative in the past."""
        ...
