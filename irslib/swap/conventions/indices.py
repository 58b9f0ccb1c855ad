"""
Rate indices referenced by rate observations, FX resets and pricing environments.
"""

from dataclasses import dataclass

from irslib.swap.conventions.calendars import Calendar, get_calendar
from irslib.swap.conventions.currency import EUR, GBP, USD, Currency
from irslib.swap.conventions.daycount import DayCountConvention, get_day_count_convention
from irslib.swap.conventions.types import BusinessDayConvention, CalendarType
from irslib.swap.errors import ValidationError


@dataclass(frozen=True)
class IborIndex:
    """Term rate index such as EURIBOR 3M."""

    name: str
    currency: Currency
    tenor_months: int
    day_count: str
    calendar: CalendarType
    effective_lag_days: int = 2
    convention: BusinessDayConvention = BusinessDayConvention.MODIFIED_FOLLOWING

    @property
    def day_count_convention(self) -> DayCountConvention:
        return get_day_count_convention(self.day_count)

    @property
    def calendar_obj(self) -> Calendar:
        return get_calendar(self.calendar.value)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class OvernightIndex:
    """Overnight rate index such as ESTR or SOFR."""

    name: str
    currency: Currency
    day_count: str
    calendar: CalendarType

    @property
    def day_count_convention(self) -> DayCountConvention:
        return get_day_count_convention(self.day_count)

    @property
    def calendar_obj(self) -> Calendar:
        return get_calendar(self.calendar.value)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class FxIndex:
    """FX fixing index, quoted as units of counter currency per unit of base."""

    name: str
    base: Currency
    counter: Currency
    calendar: CalendarType
    settlement_lag_days: int = 2

    def __post_init__(self):
        if self.base == self.counter:
            raise ValidationError(f"FX index {self.name} must have two different currencies")

    @property
    def calendar_obj(self) -> Calendar:
        return get_calendar(self.calendar.value)

    def contains(self, currency: Currency) -> bool:
        return currency in (self.base, self.counter)

    def other(self, currency: Currency) -> Currency:
        """Return the currency of the pair that is not ``currency``."""
        if currency == self.base:
            return self.counter
        if currency == self.counter:
            return self.base
        raise ValidationError(f"Currency {currency} is not part of FX index {self.name}")

    def __str__(self) -> str:
        return self.name


Index = IborIndex | OvernightIndex | FxIndex


# Predefined indices
EUR_EURIBOR_3M = IborIndex(
    name="EUR-EURIBOR-3M",
    currency=EUR,
    tenor_months=3,
    day_count="ACT/360",
    calendar=CalendarType.TARGET,
)

EUR_EURIBOR_6M = IborIndex(
    name="EUR-EURIBOR-6M",
    currency=EUR,
    tenor_months=6,
    day_count="ACT/360",
    calendar=CalendarType.TARGET,
)

EUR_ESTR = OvernightIndex(
    name="EUR-ESTR",
    currency=EUR,
    day_count="ACT/360",
    calendar=CalendarType.TARGET,
)

USD_SOFR = OvernightIndex(
    name="USD-SOFR",
    currency=USD,
    day_count="ACT/360",
    calendar=CalendarType.USNY,
)

GBP_SONIA = OvernightIndex(
    name="GBP-SONIA",
    currency=GBP,
    day_count="ACT/365F",
    calendar=CalendarType.UK,
)

EUR_USD_ECB = FxIndex(
    name="EUR/USD-ECB",
    base=EUR,
    counter=USD,
    calendar=CalendarType.TARGET,
)

GBP_USD_WM = FxIndex(
    name="GBP/USD-WM",
    base=GBP,
    counter=USD,
    calendar=CalendarType.UK,
)
