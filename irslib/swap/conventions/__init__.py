"""
Market conventions: currencies, calendars, day counts and rate indices.
"""

from .calendars import TARGET, UK, USNY, WEEKEND_ONLY, Calendar, get_calendar
from .currency import CHF, EUR, GBP, JPY, USD, Currency, CurrencyAmount
from .daycount import ACT_360, ACT_365F, ACT_ACT, THIRTY_360E, DayCountConvention, get_day_count_convention
from .indices import (
    EUR_ESTR,
    EUR_EURIBOR_3M,
    EUR_EURIBOR_6M,
    EUR_USD_ECB,
    GBP_SONIA,
    GBP_USD_WM,
    USD_SOFR,
    FxIndex,
    IborIndex,
    Index,
    OvernightIndex,
)
from .types import BusinessDayConvention, CalendarType, CompoundingMethod

__all__ = [
    # Calendars
    "Calendar",
    "get_calendar",
    "TARGET",
    "UK",
    "USNY",
    "WEEKEND_ONLY",
    # Currency
    "Currency",
    "CurrencyAmount",
    "EUR",
    "USD",
    "GBP",
    "JPY",
    "CHF",
    # Day counts
    "DayCountConvention",
    "get_day_count_convention",
    "ACT_360",
    "ACT_365F",
    "ACT_ACT",
    "THIRTY_360E",
    # Indices
    "Index",
    "IborIndex",
    "OvernightIndex",
    "FxIndex",
    "EUR_EURIBOR_3M",
    "EUR_EURIBOR_6M",
    "EUR_ESTR",
    "USD_SOFR",
    "GBP_SONIA",
    "EUR_USD_ECB",
    "GBP_USD_WM",
    # Enums
    "BusinessDayConvention",
    "CalendarType",
    "CompoundingMethod",
]
