"""Pricing environment test double with a single fixed FX rate.

Useful for testing pricing formulas that only need currency conversion, without
building any curves. Every query other than :meth:`fx_rate` raises
:class:`UnsupportedQueryError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import pandas as pd

from irslib.swap.conventions.currency import Currency
from irslib.swap.conventions.indices import FxIndex, IborIndex, Index, OvernightIndex
from irslib.swap.errors import UnsupportedQueryError
from irslib.swap.valuation.sensitivity import (
    CurveParameterSensitivity,
    PointSensitivities,
    PointSensitivityBuilder,
)

DEFAULT_RATE = 1.6


def _unsupported(query: str) -> UnsupportedQueryError:
    return UnsupportedQueryError(f"FixedFxPricingEnvironment does not support {query}")


@dataclass(frozen=True)
class FixedFxPricingEnvironment:
    """Answers every FX rate query between two different currencies with ``rate``."""

    rate: float = DEFAULT_RATE

    @property
    def valuation_date(self) -> date:
        raise _unsupported("valuation_date")

    def time_series(self, index: Index) -> pd.Series:
        raise _unsupported("time_series")

    def fx_rate(self, base_currency: Currency, counter_currency: Currency) -> float:
        return 1.0 if base_currency == counter_currency else self.rate

    def discount_factor(self, currency: Currency, date: date) -> float:
        raise _unsupported("discount_factor")

    def discount_factor_zero_rate_sensitivity(self, currency: Currency, date: date) -> PointSensitivityBuilder:
        raise _unsupported("discount_factor_zero_rate_sensitivity")

    def fx_index_rate(self, index: FxIndex, base_currency: Currency, fixing_date: date) -> float:
        raise _unsupported("fx_index_rate")

    def fx_index_rate_sensitivity(
        self, index: FxIndex, base_currency: Currency, fixing_date: date
    ) -> PointSensitivityBuilder:
        raise _unsupported("fx_index_rate_sensitivity")

    def ibor_index_rate(self, index: IborIndex, fixing_date: date) -> float:
        raise _unsupported("ibor_index_rate")

    def ibor_index_rate_sensitivity(self, index: IborIndex, fixing_date: date) -> PointSensitivityBuilder:
        raise _unsupported("ibor_index_rate_sensitivity")

    def overnight_index_rate(self, index: OvernightIndex, fixing_date: date) -> float:
        raise _unsupported("overnight_index_rate")

    def overnight_index_rate_sensitivity(self, index: OvernightIndex, fixing_date: date) -> PointSensitivityBuilder:
        raise _unsupported("overnight_index_rate_sensitivity")

    def overnight_index_rate_period(self, index: OvernightIndex, start_date: date, end_date: date) -> float:
        raise _unsupported("overnight_index_rate_period")

    def overnight_index_rate_period_sensitivity(
        self, index: OvernightIndex, start_date: date, end_date: date
    ) -> PointSensitivityBuilder:
        raise _unsupported("overnight_index_rate_period_sensitivity")

    def parameter_sensitivity(self, point_sensitivities: PointSensitivities) -> CurveParameterSensitivity:
        raise _unsupported("parameter_sensitivity")

    def relative_time(self, date: date) -> float:
        raise _unsupported("relative_time")
