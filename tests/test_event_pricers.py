"""Tests for pricing of payment events against a pricing environment."""

from dataclasses import dataclass
from datetime import date

import numpy as np
import pytest

from irslib.swap.conventions import EUR, EUR_USD_ECB, GBP, USD, Currency, CurrencyAmount
from irslib.swap.errors import UnsupportedQueryError
from irslib.swap.instruments import FeePayment, FxResetNotionalExchange, NotionalExchange, RatePeriodSwapLeg
from irslib.swap.valuation import (
    FixedFxPricingEnvironment,
    FxIndexSensitivity,
    MarketPricingEnvironment,
    ZeroRateSensitivity,
    convert_amount,
    events_present_value,
    future_value,
    present_value,
    present_value_sensitivity,
)

from .factories import QUARTER_DATES, VALUATION_DATE, make_periods

PAYMENT_DATE = date(2024, 7, 15)
FIXING_DATE = date(2024, 7, 11)


@dataclass(frozen=True)
class CouponEvent:
    payment_date: date
    currency: Currency

    def adjust_payment_date(self, adjustment):
        return self


def _fx_reset_exchange(notional=1_000_000.0):
    return FxResetNotionalExchange(PAYMENT_DATE, EUR, notional, EUR_USD_ECB, FIXING_DATE)


def test_notional_exchange_value(market_env, eur_curve):
    event = NotionalExchange.of(PAYMENT_DATE, CurrencyAmount(EUR, 1_000_000.0))
    assert future_value(event, market_env) == 1_000_000.0
    assert present_value(event, market_env) == pytest.approx(1_000_000.0 * eur_curve.df(PAYMENT_DATE))


def test_fee_value(market_env, usd_curve):
    fee = FeePayment(PAYMENT_DATE, CurrencyAmount(USD, -2_500.0))
    assert present_value(fee, market_env) == pytest.approx(-2_500.0 * usd_curve.df(PAYMENT_DATE))


def test_past_events_are_worth_nothing(market_env):
    event = NotionalExchange.of(date(2024, 1, 12), CurrencyAmount(EUR, 1_000_000.0))
    assert future_value(event, market_env) == 0.0
    assert present_value(event, market_env) == 0.0
    assert len(present_value_sensitivity(event, market_env).build()) == 0


def test_event_on_valuation_date_is_not_discounted(market_env):
    event = NotionalExchange.of(VALUATION_DATE, CurrencyAmount(EUR, -1_000_000.0))
    assert present_value(event, market_env) == -1_000_000.0


def test_fx_reset_exchange_value(market_env, usd_curve):
    event = _fx_reset_exchange()
    rate = market_env.fx_index_rate(EUR_USD_ECB, EUR, FIXING_DATE)

    assert future_value(event, market_env) == pytest.approx(1_000_000.0 * rate)
    assert present_value(event, market_env) == pytest.approx(1_000_000.0 * rate * usd_curve.df(PAYMENT_DATE))


def test_fx_reset_exchange_point_sensitivity(market_env, usd_curve):
    event = _fx_reset_exchange()
    df = usd_curve.df(PAYMENT_DATE)
    t = usd_curve.year_fraction(PAYMENT_DATE)
    fv = future_value(event, market_env)

    points = list(present_value_sensitivity(event, market_env).build())

    assert points == [
        ZeroRateSensitivity(USD, PAYMENT_DATE, pytest.approx(-t * df * fv)),
        FxIndexSensitivity(EUR_USD_ECB, EUR, FIXING_DATE, USD, pytest.approx(1_000_000.0 * df)),
    ]


def test_fx_reset_exchange_parameter_sensitivity_matches_bumping(market_env, eur_curve, usd_curve):
    event = _fx_reset_exchange()
    sensitivity = market_env.parameter_sensitivity(present_value_sensitivity(event, market_env).build())

    def pv(eur, usd):
        env = MarketPricingEnvironment(
            VALUATION_DATE, discount_curves={EUR: eur, USD: usd}, fx_rates={(EUR, USD): 1.10}
        )
        return present_value(event, env)

    eps = 1e-6
    for curve, name, currency in [(eur_curve, "EUR-DSC", EUR), (usd_curve, "USD-DSC", USD)]:
        expected = []
        for i in range(curve.parameter_count):
            up = list(curve.zero_rates)
            down = list(curve.zero_rates)
            up[i] += eps
            down[i] -= eps
            bumped = [type(curve)(VALUATION_DATE, curve.pillar_times, rates, name=name) for rates in (up, down)]
            if currency == EUR:
                values = [pv(c, usd_curve) for c in bumped]
            else:
                values = [pv(eur_curve, c) for c in bumped]
            expected.append((values[0] - values[1]) / (2 * eps))
        np.testing.assert_allclose(sensitivity.get(name, currency), expected, rtol=1e-6, atol=1e-6)


def test_unsupported_event_type(market_env):
    with pytest.raises(TypeError, match="CouponEvent"):
        future_value(CouponEvent(PAYMENT_DATE, EUR), market_env)


def test_events_present_value_of_expanded_leg(market_env, eur_curve):
    fee = FeePayment(date(2024, 1, 15), CurrencyAmount(EUR, -10_000.0))
    leg = RatePeriodSwapLeg(make_periods(QUARTER_DATES), [fee], initial_exchange=True, final_exchange=True)

    total = events_present_value(leg.expand(), market_env)

    expected = -1_000_000.0 + 1_000_000.0 * eur_curve.df(QUARTER_DATES[-1]) - 10_000.0
    assert total.currency == EUR
    assert total.amount == pytest.approx(expected)


def test_events_need_an_environment_with_a_valuation_date():
    event = NotionalExchange.of(PAYMENT_DATE, CurrencyAmount(EUR, 1.0))
    with pytest.raises(UnsupportedQueryError):
        present_value(event, FixedFxPricingEnvironment())


def test_convert_amount_with_fixed_fx():
    env = FixedFxPricingEnvironment()
    assert convert_amount(CurrencyAmount(USD, 100.0), GBP, env) == CurrencyAmount(GBP, pytest.approx(160.0))
    same = CurrencyAmount(USD, 100.0)
    assert convert_amount(same, USD, env) is same


def test_convert_amount_with_market_rates(market_env):
    converted = convert_amount(CurrencyAmount(USD, 110.0), EUR, market_env)
    assert converted.currency == EUR
    assert converted.amount == pytest.approx(100.0)


def test_market_environment_without_discount_curve():
    env = MarketPricingEnvironment(VALUATION_DATE)
    event = FeePayment(PAYMENT_DATE, CurrencyAmount(EUR, 1.0))
    with pytest.raises(UnsupportedQueryError):
        present_value(event, env)
