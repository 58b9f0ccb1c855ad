"""
conftest.py - Shared pytest fixtures for irslib tests

Provides:
- Quarterly EUR payment periods
- Zero rate curves for discounting and index projection
- A curve-based pricing environment valued on 15 January 2024
"""

from datetime import date
from typing import List

import pytest

from irslib.swap.conventions import EUR, EUR_ESTR, EUR_EURIBOR_3M, EUR_USD_ECB, USD
from irslib.swap.curves import ZeroRateCurve
from irslib.swap.instruments import RatePaymentPeriod
from irslib.swap.valuation import MarketPricingEnvironment
from tests.factories import QUARTER_DATES, VALUATION_DATE, flat_curve, make_periods


@pytest.fixture
def quarterly_periods() -> List[RatePaymentPeriod]:
    """Three quarterly EUR periods with a constant notional."""
    return make_periods(QUARTER_DATES)


@pytest.fixture
def eur_curve() -> ZeroRateCurve:
    return ZeroRateCurve(VALUATION_DATE, [0.5, 1.0, 2.0, 5.0], [0.030, 0.032, 0.035, 0.037], name="EUR-DSC")


@pytest.fixture
def usd_curve() -> ZeroRateCurve:
    return flat_curve(0.045, "USD-DSC")


@pytest.fixture
def euribor_curve() -> ZeroRateCurve:
    return ZeroRateCurve(VALUATION_DATE, [0.25, 1.0, 3.0], [0.038, 0.036, 0.033], name="EUR-EURIBOR-3M")


@pytest.fixture
def estr_curve() -> ZeroRateCurve:
    return flat_curve(0.039, "EUR-ESTR")


@pytest.fixture
def market_env(eur_curve, usd_curve, euribor_curve, estr_curve) -> MarketPricingEnvironment:
    """EUR and USD discounting, EURIBOR 3M and ESTR projection, EUR/USD at 1.10."""
    return MarketPricingEnvironment(
        valuation_date=VALUATION_DATE,
        discount_curves={EUR: eur_curve, USD: usd_curve},
        index_curves={EUR_EURIBOR_3M: euribor_curve, EUR_ESTR: estr_curve},
        fx_rates={(EUR, USD): 1.10},
        time_series={
            EUR_EURIBOR_3M: {date(2024, 1, 10): 0.0391, date(2024, 1, 11): 0.0392},
            EUR_USD_ECB: {date(2024, 1, 11): 1.0950},
        },
    )
