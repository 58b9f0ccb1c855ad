"""Tests for currencies, rate observations, accrual periods and payment periods."""

from datetime import date

import pytest

from irslib.swap.conventions import (
    EUR,
    EUR_ESTR,
    EUR_EURIBOR_3M,
    EUR_USD_ECB,
    GBP,
    USD,
    WEEKEND_ONLY,
    BusinessDayConvention,
    Currency,
    CurrencyAmount,
)
from irslib.swap.errors import ValidationError
from irslib.swap.instruments import (
    FixedRateObservation,
    FxReset,
    IborRateObservation,
    OvernightCompoundedRateObservation,
    RateAccrualPeriod,
    RatePaymentPeriod,
)
from irslib.swap.schedule import BusinessDayAdjustment

from .factories import make_period


# =============================================================================
# Currency
# =============================================================================

def test_currency_parsing():
    assert Currency.of(" eur ") == EUR
    assert str(USD) == "USD"
    assert sorted([USD, EUR, GBP]) == [EUR, GBP, USD]


@pytest.mark.parametrize("code", ["EU", "EURO", "eur", "E1R", ""])
def test_currency_rejects_invalid_codes(code):
    with pytest.raises(ValidationError):
        Currency(code)


def test_currency_amount_arithmetic():
    a = CurrencyAmount(EUR, 100.0)
    b = CurrencyAmount(EUR, 40.0)
    assert a.minus(b) == CurrencyAmount(EUR, 60.0)
    assert a.plus(b) == CurrencyAmount(EUR, 140.0)
    assert a.negated() == CurrencyAmount(EUR, -100.0)
    assert a.multiplied_by(0.5) == CurrencyAmount(EUR, 50.0)


def test_currency_amount_mismatch():
    with pytest.raises(ValidationError, match="Currency mismatch"):
        CurrencyAmount(EUR, 1.0).plus(CurrencyAmount(USD, 1.0))


# =============================================================================
# Observations and accrual periods
# =============================================================================

def test_overnight_observation_validation():
    with pytest.raises(ValidationError):
        OvernightCompoundedRateObservation(EUR_ESTR, date(2024, 4, 15), date(2024, 1, 15))
    with pytest.raises(ValidationError):
        OvernightCompoundedRateObservation(EUR_ESTR, date(2024, 1, 15), date(2024, 4, 15), rate_cutoff_days=-1)


def test_accrual_period_defaults_unadjusted_dates():
    accrual = RateAccrualPeriod(
        start_date=date(2024, 1, 15),
        end_date=date(2024, 4, 15),
        year_fraction=0.25,
        rate_observation=IborRateObservation(EUR_EURIBOR_3M, date(2024, 1, 11)),
    )
    assert accrual.unadjusted_start_date == date(2024, 1, 15)
    assert accrual.unadjusted_end_date == date(2024, 4, 15)
    assert accrual.gearing == 1.0
    assert accrual.spread == 0.0


def test_accrual_period_rejects_inverted_dates():
    with pytest.raises(ValidationError, match="must be after start date"):
        RateAccrualPeriod(date(2024, 4, 15), date(2024, 1, 15), 0.25, FixedRateObservation(0.01))


def test_accrual_period_rejects_negative_year_fraction():
    with pytest.raises(ValidationError):
        RateAccrualPeriod(date(2024, 1, 15), date(2024, 4, 15), -0.25, FixedRateObservation(0.01))


# =============================================================================
# Payment periods
# =============================================================================

def test_payment_period_dates_span_accruals():
    accruals = [
        RateAccrualPeriod(date(2024, 1, 15), date(2024, 4, 15), 0.25, FixedRateObservation(0.01)),
        RateAccrualPeriod(date(2024, 4, 15), date(2024, 7, 15), 0.25, FixedRateObservation(0.01)),
    ]
    period = RatePaymentPeriod(date(2024, 7, 17), accruals, EUR, 5_000_000.0)
    assert period.start_date == date(2024, 1, 15)
    assert period.end_date == date(2024, 7, 15)
    assert period.accrual_periods == tuple(accruals)
    assert period.notional_amount == CurrencyAmount(EUR, 5_000_000.0)


def test_payment_period_requires_accruals():
    with pytest.raises(ValidationError, match="at least one accrual period"):
        RatePaymentPeriod(date(2024, 4, 15), [], EUR, 1_000_000.0)


def test_fx_reset_notional_is_in_reference_currency():
    fx_reset = FxReset(EUR_USD_ECB, EUR, date(2024, 1, 11))
    period = make_period(date(2024, 1, 15), date(2024, 4, 15), 2_000_000.0, USD, fx_reset=fx_reset)
    assert period.notional_amount == CurrencyAmount(EUR, 2_000_000.0)
    assert period.currency == USD


def test_fx_reset_reference_must_differ_from_payment_currency():
    fx_reset = FxReset(EUR_USD_ECB, USD, date(2024, 1, 11))
    with pytest.raises(ValidationError, match="must differ"):
        make_period(date(2024, 1, 15), date(2024, 4, 15), currency=USD, fx_reset=fx_reset)


def test_fx_reset_index_must_contain_payment_currency():
    fx_reset = FxReset(EUR_USD_ECB, EUR, date(2024, 1, 11))
    with pytest.raises(ValidationError, match="does not contain"):
        make_period(date(2024, 1, 15), date(2024, 4, 15), currency=GBP, fx_reset=fx_reset)


def test_fx_reset_reference_must_be_in_index():
    with pytest.raises(ValidationError):
        FxReset(EUR_USD_ECB, GBP, date(2024, 1, 11))


def test_adjust_payment_date_returns_new_period():
    # Saturday 15 June 2024
    period = make_period(date(2024, 3, 15), date(2024, 6, 14), payment_date=date(2024, 6, 15))
    adjusted = period.adjust_payment_date(
        BusinessDayAdjustment.of(BusinessDayConvention.FOLLOWING, WEEKEND_ONLY)
    )

    assert adjusted.payment_date == date(2024, 6, 17)
    assert adjusted.accrual_periods == period.accrual_periods
    assert adjusted.notional == period.notional
    assert period.payment_date == date(2024, 6, 15)
