"""
Pricing environment backed by zero rate curves, FX rates and fixing history.

The environment is a snapshot at a single valuation date:
- Discount curves, keyed by currency
- Index curves used to project Ibor and overnight rates, keyed by index
- FX rates, keyed by (base, counter) currency pair
- Historical fixings as pandas Series, keyed by index

Curves must share the environment's valuation date as their reference date.
Inputs are copied on construction and the config is frozen, so the snapshot
cannot change afterwards.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Dict, Mapping, Optional, Tuple

import numpy as np
import pandas as pd

from irslib.swap.conventions.currency import Currency
from irslib.swap.conventions.daycount import get_day_count_convention
from irslib.swap.conventions.indices import FxIndex, IborIndex, Index, OvernightIndex
from irslib.swap.curves.base import Curve
from irslib.swap.errors import UnsupportedQueryError, ValidationError
from irslib.swap.schedule.adjustments import adjust_date, apply_end_of_month_rule
from irslib.swap.valuation.sensitivity import (
    CurveParameterSensitivity,
    FxIndexSensitivity,
    IborRateSensitivity,
    OvernightRateSensitivity,
    PointSensitivities,
    PointSensitivity,
    PointSensitivityBuilder,
    ZeroRateSensitivity,
)

logger = logging.getLogger(__name__)

CurrencyPair = Tuple[Currency, Currency]


@dataclass(frozen=True)
class EnvironmentConfig:
    """Configuration knobs for :class:`MarketPricingEnvironment`."""

    # Day count used by relative_time
    time_day_count: str = "ACT/365F"
    # Currency used to cross two FX rates when no direct or inverse quote exists
    triangulation_currency: Optional[Currency] = None


class MarketPricingEnvironment:
    """Curve-based implementation of :class:`PricingEnvironment`."""

    def __init__(
        self,
        valuation_date: date,
        discount_curves: Mapping[Currency, Curve] | None = None,
        index_curves: Mapping[Index, Curve] | None = None,
        fx_rates: Mapping[CurrencyPair, float] | None = None,
        time_series: Mapping[Index, pd.Series] | None = None,
        config: EnvironmentConfig | None = None,
    ) -> None:
        self._valuation_date = valuation_date
        self._config = config or EnvironmentConfig()
        self._time_day_count = get_day_count_convention(self._config.time_day_count)

        self._discount_curves: Dict[Currency, Curve] = dict(discount_curves or {})
        self._index_curves: Dict[Index, Curve] = dict(index_curves or {})
        for curve in [*self._discount_curves.values(), *self._index_curves.values()]:
            if curve.reference_date != valuation_date:
                raise ValidationError(
                    f"Curve {curve.name} has reference date {curve.reference_date}, "
                    f"expected valuation date {valuation_date}"
                )

        self._fx_rates: Dict[CurrencyPair, float] = {}
        for (base, counter), rate in (fx_rates or {}).items():
            if base == counter:
                raise ValidationError(f"FX rate must be between different currencies: {base}/{counter}")
            if rate <= 0:
                raise ValidationError(f"FX rate {base}/{counter} must be positive: {rate}")
            self._fx_rates[(base, counter)] = float(rate)

        self._time_series: Dict[Index, pd.Series] = {
            index: _normalize_series(series) for index, series in (time_series or {}).items()
        }

    @property
    def valuation_date(self) -> date:
        return self._valuation_date

    @property
    def config(self) -> EnvironmentConfig:
        return self._config

    # ------------------------------------------------------------------
    # Fixings and FX
    # ------------------------------------------------------------------
    def time_series(self, index: Index) -> pd.Series:
        if index not in self._time_series:
            raise UnsupportedQueryError(f"No time series available for index {index}")
        return self._time_series[index].copy()

    def fx_rate(self, base_currency: Currency, counter_currency: Currency) -> float:
        if base_currency == counter_currency:
            return 1.0
        rate = self._quoted_fx_rate(base_currency, counter_currency)
        if rate is not None:
            return rate

        cross = self._config.triangulation_currency
        if cross is not None and cross not in (base_currency, counter_currency):
            base_cross = self._quoted_fx_rate(base_currency, cross)
            cross_counter = self._quoted_fx_rate(cross, counter_currency)
            if base_cross is not None and cross_counter is not None:
                logger.debug("Triangulating %s/%s through %s", base_currency, counter_currency, cross)
                return base_cross * cross_counter

        raise UnsupportedQueryError(f"No FX rate available for {base_currency}/{counter_currency}")

    def _quoted_fx_rate(self, base_currency: Currency, counter_currency: Currency) -> Optional[float]:
        if (base_currency, counter_currency) in self._fx_rates:
            return self._fx_rates[(base_currency, counter_currency)]
        if (counter_currency, base_currency) in self._fx_rates:
            return 1.0 / self._fx_rates[(counter_currency, base_currency)]
        return None

    # ------------------------------------------------------------------
    # Discounting
    # ------------------------------------------------------------------
    def discount_factor(self, currency: Currency, date: date) -> float:
        return self._discount_curve(currency).df(date)

    def discount_factor_zero_rate_sensitivity(self, currency: Currency, date: date) -> PointSensitivityBuilder:
        curve = self._discount_curve(currency)
        t = curve.year_fraction(date)
        if t <= 0:
            return PointSensitivityBuilder.none()
        return PointSensitivityBuilder.of(ZeroRateSensitivity(currency, date, -t * curve.df(date)))

    # ------------------------------------------------------------------
    # Index rates
    # ------------------------------------------------------------------
    def ibor_index_rate(self, index: IborIndex, fixing_date: date) -> float:
        fixed = self._fixing(index, fixing_date)
        if fixed is not None:
            return fixed
        start, end, year_fraction = self._ibor_period(index, fixing_date)
        return self._forward_rate(index, start, end, year_fraction)

    def ibor_index_rate_sensitivity(self, index: IborIndex, fixing_date: date) -> PointSensitivityBuilder:
        if self._fixing(index, fixing_date) is not None:
            return PointSensitivityBuilder.none()
        return PointSensitivityBuilder.of(IborRateSensitivity(index, fixing_date, index.currency))

    def overnight_index_rate(self, index: OvernightIndex, fixing_date: date) -> float:
        fixed = self._fixing(index, fixing_date)
        if fixed is not None:
            return fixed
        end = index.calendar_obj.add_business_days(fixing_date, 1)
        return self._forward_rate(index, fixing_date, end, index.day_count_convention.year_fraction(fixing_date, end))

    def overnight_index_rate_sensitivity(self, index: OvernightIndex, fixing_date: date) -> PointSensitivityBuilder:
        if self._fixing(index, fixing_date) is not None:
            return PointSensitivityBuilder.none()
        end = index.calendar_obj.add_business_days(fixing_date, 1)
        return PointSensitivityBuilder.of(OvernightRateSensitivity(index, fixing_date, end, index.currency))

    def overnight_index_rate_period(self, index: OvernightIndex, start_date: date, end_date: date) -> float:
        self._check_forward_period(index, start_date, end_date)
        year_fraction = index.day_count_convention.year_fraction(start_date, end_date)
        return self._forward_rate(index, start_date, end_date, year_fraction)

    def overnight_index_rate_period_sensitivity(
        self, index: OvernightIndex, start_date: date, end_date: date
    ) -> PointSensitivityBuilder:
        self._check_forward_period(index, start_date, end_date)
        return PointSensitivityBuilder.of(OvernightRateSensitivity(index, start_date, end_date, index.currency))

    def fx_index_rate(self, index: FxIndex, base_currency: Currency, fixing_date: date) -> float:
        if not index.contains(base_currency):
            raise ValidationError(f"Currency {base_currency} is not part of FX index {index}")
        fixed = self._fixing(index, fixing_date)
        if fixed is not None:
            return fixed if base_currency == index.base else 1.0 / fixed
        return self._fx_forward(index, base_currency, fixing_date)

    def fx_index_rate_sensitivity(
        self, index: FxIndex, base_currency: Currency, fixing_date: date
    ) -> PointSensitivityBuilder:
        if not index.contains(base_currency):
            raise ValidationError(f"Currency {base_currency} is not part of FX index {index}")
        if self._fixing(index, fixing_date) is not None:
            return PointSensitivityBuilder.none()
        return PointSensitivityBuilder.of(
            FxIndexSensitivity(index, base_currency, fixing_date, index.other(base_currency))
        )

    # ------------------------------------------------------------------
    # Sensitivities and time
    # ------------------------------------------------------------------
    def parameter_sensitivity(self, point_sensitivities: PointSensitivities) -> CurveParameterSensitivity:
        result = CurveParameterSensitivity.empty()
        for point in point_sensitivities:
            result = result.combined_with(self._point_parameter_sensitivity(point))
        return result

    def relative_time(self, date: date) -> float:
        return self._time_day_count.year_fraction(self._valuation_date, date)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _discount_curve(self, currency: Currency) -> Curve:
        if currency not in self._discount_curves:
            raise UnsupportedQueryError(f"No discount curve available for {currency}")
        return self._discount_curves[currency]

    def _index_curve(self, index: Index) -> Curve:
        if index not in self._index_curves:
            raise UnsupportedQueryError(f"No forward curve available for index {index}")
        return self._index_curves[index]

    def _fixing(self, index: Index, fixing_date: date) -> Optional[float]:
        """Historic fixing, or None when the rate has to be projected."""
        if fixing_date > self._valuation_date:
            return None
        series = self._time_series.get(index)
        value = None
        if series is not None:
            value = series.get(pd.Timestamp(fixing_date))
        if value is None or pd.isna(value):
            if fixing_date < self._valuation_date:
                raise UnsupportedQueryError(f"No fixing available for {index} on {fixing_date}")
            logger.debug("No fixing for %s on valuation date, projecting from curve", index)
            return None
        return float(value)

    def _check_forward_period(self, index: OvernightIndex, start_date: date, end_date: date) -> None:
        if start_date < self._valuation_date:
            raise UnsupportedQueryError(
                f"Cannot project {index} over a period starting {start_date} before valuation date "
                f"{self._valuation_date}"
            )
        if end_date <= start_date:
            raise ValidationError(f"Period end date {end_date} must be after start date {start_date}")

    def _ibor_period(self, index: IborIndex, fixing_date: date) -> Tuple[date, date, float]:
        calendar = index.calendar_obj
        start = calendar.add_business_days(fixing_date, index.effective_lag_days)
        end = adjust_date(
            apply_end_of_month_rule(start, index.tenor_months, False), index.convention, calendar
        )
        return start, end, index.day_count_convention.year_fraction(start, end)

    def _forward_rate(self, index: Index, start: date, end: date, year_fraction: float) -> float:
        curve = self._index_curve(index)
        return (curve.df(start) / curve.df(end) - 1.0) / year_fraction

    def _fx_maturity(self, index: FxIndex, fixing_date: date) -> date:
        return index.calendar_obj.add_business_days(fixing_date, index.settlement_lag_days)

    def _fx_forward(self, index: FxIndex, base_currency: Currency, fixing_date: date) -> float:
        counter_currency = index.other(base_currency)
        maturity = self._fx_maturity(index, fixing_date)
        spot = self.fx_rate(base_currency, counter_currency)
        return (
            spot
            * self.discount_factor(base_currency, maturity)
            / self.discount_factor(counter_currency, maturity)
        )

    def _point_parameter_sensitivity(self, point: PointSensitivity) -> CurveParameterSensitivity:
        if isinstance(point, ZeroRateSensitivity):
            curve = self._discount_curve(point.currency)
            values = point.sensitivity * curve.zero_rate_parameter_sensitivity(point.maturity_date)
            return CurveParameterSensitivity.of(curve.name, point.currency, values)

        if isinstance(point, IborRateSensitivity):
            start, end, year_fraction = self._ibor_period(point.index, point.fixing_date)
            return self._forward_parameter_sensitivity(
                point.index, start, end, year_fraction, point.sensitivity
            )

        if isinstance(point, OvernightRateSensitivity):
            year_fraction = point.index.day_count_convention.year_fraction(point.fixing_date, point.end_date)
            return self._forward_parameter_sensitivity(
                point.index, point.fixing_date, point.end_date, year_fraction, point.sensitivity
            )

        if isinstance(point, FxIndexSensitivity):
            # F = spot * P_ref(m) / P_other(m), so dF/dz_ref = -t F and dF/dz_other = t F
            maturity = self._fx_maturity(point.index, point.fixing_date)
            forward = self._fx_forward(point.index, point.reference_currency, point.fixing_date)
            ref_curve = self._discount_curve(point.reference_currency)
            other_curve = self._discount_curve(point.currency)
            ref_values = (
                -ref_curve.year_fraction(maturity) * forward * point.sensitivity
                * ref_curve.zero_rate_parameter_sensitivity(maturity)
            )
            other_values = (
                other_curve.year_fraction(maturity) * forward * point.sensitivity
                * other_curve.zero_rate_parameter_sensitivity(maturity)
            )
            return CurveParameterSensitivity.of(
                ref_curve.name, point.reference_currency, ref_values
            ).combined_with(CurveParameterSensitivity.of(other_curve.name, point.currency, other_values))

        raise UnsupportedQueryError(f"Unsupported point sensitivity type: {type(point).__name__}")

    def _forward_parameter_sensitivity(
        self, index: Index, start: date, end: date, year_fraction: float, sensitivity: float
    ) -> CurveParameterSensitivity:
        # F = (P(s) / P(e) - 1) / yf with P(t) = exp(-z(t) t)
        curve = self._index_curve(index)
        t_start = curve.year_fraction(start)
        t_end = curve.year_fraction(end)
        ratio = curve.df(start) / curve.df(end)
        d_start = -t_start * ratio / year_fraction
        d_end = t_end * ratio / year_fraction
        values: np.ndarray = sensitivity * (
            d_start * curve.zero_rate_parameter_sensitivity(start)
            + d_end * curve.zero_rate_parameter_sensitivity(end)
        )
        return CurveParameterSensitivity.of(curve.name, index.currency, values)

    def __repr__(self) -> str:
        return (
            f"MarketPricingEnvironment(valuation_date={self._valuation_date}, "
            f"discount_curves={[str(c) for c in self._discount_curves]}, "
            f"index_curves={[str(i) for i in self._index_curves]})"
        )


def _normalize_series(series: pd.Series | Mapping[date, float]) -> pd.Series:
    normalized = pd.Series(series, dtype=float)
    normalized.index = pd.to_datetime(normalized.index)
    normalized = normalized.sort_index()
    if normalized.index.has_duplicates:
        raise ValidationError("Time series must not contain duplicate fixing dates")
    if not all(math.isfinite(v) for v in normalized.dropna()):
        raise ValidationError("Time series values must be finite")
    return normalized
