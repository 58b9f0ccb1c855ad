"""Tests for derivation of notional exchange events from exchange flags."""

from datetime import date

import pytest

from irslib.swap.conventions import EUR, EUR_USD_ECB, USD, CurrencyAmount
from irslib.swap.errors import ValidationError
from irslib.swap.instruments import FxResetNotionalExchange, NotionalExchange, create_notional_events

from .factories import QUARTER_DATES, make_periods

START, FIRST_BOUNDARY, SECOND_BOUNDARY, END = QUARTER_DATES
FIXINGS = [date(2024, 1, 11), date(2024, 4, 11), date(2024, 7, 11)]


def _events(periods, initial=True, intermediate=True, final=True):
    return create_notional_events(periods, periods[0].start_date, periods[-1].end_date, initial, intermediate, final)


def test_all_flags_constant_notional():
    events = _events(make_periods(QUARTER_DATES))

    assert events == [
        NotionalExchange(START, CurrencyAmount(EUR, -1_000_000.0)),
        NotionalExchange(FIRST_BOUNDARY, CurrencyAmount(EUR, 0.0)),
        NotionalExchange(SECOND_BOUNDARY, CurrencyAmount(EUR, 0.0)),
        NotionalExchange(END, CurrencyAmount(EUR, 1_000_000.0)),
    ]


def test_amortizing_notional_exchanges_differences():
    periods = make_periods(QUARTER_DATES, notionals=[3_000_000.0, 2_000_000.0, 1_000_000.0])
    events = _events(periods)

    amounts = [e.payment_amount.amount for e in events]
    assert amounts == [-3_000_000.0, 1_000_000.0, 1_000_000.0, 1_000_000.0]
    assert sum(amounts) == 0.0


def test_accreting_notional_pays_increase():
    periods = make_periods(QUARTER_DATES[:3], notionals=[1_000_000.0, 1_500_000.0])
    events = _events(periods, initial=False, final=False)
    assert events == [NotionalExchange(FIRST_BOUNDARY, CurrencyAmount(EUR, -500_000.0))]


def test_intermediate_uses_payment_date_of_ending_period(quarterly_periods):
    first = quarterly_periods[0]
    shifted = type(first)(
        payment_date=date(2024, 4, 17),
        accrual_periods=first.accrual_periods,
        currency=first.currency,
        notional=first.notional,
    )
    events = _events([shifted, *quarterly_periods[1:]], initial=False, final=False)
    assert [e.payment_date for e in events] == [date(2024, 4, 17), SECOND_BOUNDARY]


@pytest.mark.parametrize(
    "initial, intermediate, final, expected_dates",
    [
        (False, False, False, []),
        (True, False, False, [START]),
        (False, False, True, [END]),
        (True, False, True, [START, END]),
        (False, True, False, [FIRST_BOUNDARY, SECOND_BOUNDARY]),
    ],
)
def test_flags_select_exchanges(quarterly_periods, initial, intermediate, final, expected_dates):
    events = _events(quarterly_periods, initial, intermediate, final)
    assert [e.payment_date for e in events] == expected_dates


def test_single_period_has_no_intermediate_exchange():
    periods = make_periods(QUARTER_DATES[:2])
    events = _events(periods)
    assert [e.payment_amount.amount for e in events] == [-1_000_000.0, 1_000_000.0]


def test_exchange_dates_come_from_arguments(quarterly_periods):
    events = create_notional_events(
        quarterly_periods, date(2024, 1, 16), date(2024, 10, 15), True, False, True
    )
    assert [e.payment_date for e in events] == [date(2024, 1, 16), date(2024, 10, 15)]


def test_empty_periods_rejected():
    with pytest.raises(ValidationError):
        create_notional_events([], START, END, True, True, True)


# =============================================================================
# FX reset periods
# =============================================================================

def test_fx_reset_single_period_ignores_initial_and_final_flags():
    periods = make_periods(QUARTER_DATES[:2], currency=USD, fx_reset_fixings=FIXINGS[:1])
    assert _events(periods, initial=True, intermediate=False, final=True) == []


def test_fx_reset_single_period_exchanges_both_edges():
    periods = make_periods(QUARTER_DATES[:2], currency=USD, fx_reset_fixings=FIXINGS[:1])
    events = _events(periods, initial=False, intermediate=True, final=False)

    assert events == [
        FxResetNotionalExchange(START, EUR, -1_000_000.0, EUR_USD_ECB, FIXINGS[0]),
        FxResetNotionalExchange(FIRST_BOUNDARY, EUR, 1_000_000.0, EUR_USD_ECB, FIXINGS[0]),
    ]
    assert all(e.currency == USD for e in events)


def test_fx_reset_every_boundary_exchanges_both_sides():
    periods = make_periods(QUARTER_DATES, currency=USD, fx_reset_fixings=FIXINGS)
    events = _events(periods, initial=False, intermediate=True, final=False)

    assert all(isinstance(e, FxResetNotionalExchange) for e in events)
    assert [e.payment_date for e in events] == [
        START,
        FIRST_BOUNDARY,
        FIRST_BOUNDARY,
        SECOND_BOUNDARY,
        SECOND_BOUNDARY,
        END,
    ]
    assert [e.notional for e in events] == [-1e6, 1e6, -1e6, 1e6, -1e6, 1e6]
    assert [e.fixing_date for e in events] == [
        FIXINGS[0],
        FIXINGS[0],
        FIXINGS[1],
        FIXINGS[1],
        FIXINGS[2],
        FIXINGS[2],
    ]


def test_fx_reset_edges_override_initial_and_final_flags():
    periods = make_periods(QUARTER_DATES, currency=USD, fx_reset_fixings=FIXINGS)
    events = _events(periods, initial=True, intermediate=True, final=True)

    assert events == [
        FxResetNotionalExchange(START, EUR, -1_000_000.0, EUR_USD_ECB, FIXINGS[0]),
        FxResetNotionalExchange(FIRST_BOUNDARY, EUR, 1_000_000.0, EUR_USD_ECB, FIXINGS[0]),
        FxResetNotionalExchange(FIRST_BOUNDARY, EUR, -1_000_000.0, EUR_USD_ECB, FIXINGS[1]),
        FxResetNotionalExchange(SECOND_BOUNDARY, EUR, 1_000_000.0, EUR_USD_ECB, FIXINGS[1]),
        FxResetNotionalExchange(SECOND_BOUNDARY, EUR, -1_000_000.0, EUR_USD_ECB, FIXINGS[2]),
        FxResetNotionalExchange(END, EUR, 1_000_000.0, EUR_USD_ECB, FIXINGS[2]),
    ]
    assert not any(isinstance(e, NotionalExchange) for e in events)


def test_fx_reset_first_period_only_overrides_initial_flag():
    periods = make_periods(QUARTER_DATES, currency=USD, fx_reset_fixings=[FIXINGS[0], None, None])
    events = _events(periods, initial=True, intermediate=True, final=True)

    assert events == [
        FxResetNotionalExchange(START, EUR, -1_000_000.0, EUR_USD_ECB, FIXINGS[0]),
        FxResetNotionalExchange(FIRST_BOUNDARY, EUR, 1_000_000.0, EUR_USD_ECB, FIXINGS[0]),
        NotionalExchange(FIRST_BOUNDARY, CurrencyAmount(USD, -1_000_000.0)),
        NotionalExchange(SECOND_BOUNDARY, CurrencyAmount(USD, 0.0)),
        NotionalExchange(END, CurrencyAmount(USD, 1_000_000.0)),
    ]


def test_mixed_boundaries_use_edge_exchanges():
    periods = make_periods(QUARTER_DATES, currency=USD, fx_reset_fixings=[None, FIXINGS[1], None])
    events = _events(periods)

    assert [type(e) for e in events] == [
        NotionalExchange,
        NotionalExchange,
        FxResetNotionalExchange,
        FxResetNotionalExchange,
        NotionalExchange,
        NotionalExchange,
    ]
    assert events[0] == NotionalExchange(START, CurrencyAmount(USD, -1_000_000.0))
    assert events[1] == NotionalExchange(FIRST_BOUNDARY, CurrencyAmount(USD, 1_000_000.0))
    assert events[2] == FxResetNotionalExchange(FIRST_BOUNDARY, EUR, -1_000_000.0, EUR_USD_ECB, FIXINGS[1])
    assert events[3] == FxResetNotionalExchange(SECOND_BOUNDARY, EUR, 1_000_000.0, EUR_USD_ECB, FIXINGS[1])
    assert events[4] == NotionalExchange(SECOND_BOUNDARY, CurrencyAmount(USD, -1_000_000.0))
    assert events[5] == NotionalExchange(END, CurrencyAmount(USD, 1_000_000.0))
