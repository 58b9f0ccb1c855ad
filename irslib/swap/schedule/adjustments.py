"""
Date adjustment functions and the business day adjustment rule.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Protocol, Union

from irslib.swap.conventions.calendars import Calendar
from irslib.swap.conventions.types import BusinessDayConvention
from irslib.swap.errors import ValidationError

_FORWARD = (BusinessDayConvention.FOLLOWING, BusinessDayConvention.MODIFIED_FOLLOWING)
_MODIFIED = (BusinessDayConvention.MODIFIED_FOLLOWING, BusinessDayConvention.MODIFIED_PRECEDING)


def _roll(dt: date, calendar: Calendar, step: timedelta) -> date:
    while not calendar.is_business_day(dt):
        dt += step
    return dt


def adjust_date(
    dt: Union[date, datetime], convention: BusinessDayConvention, calendar: Optional[Calendar]
) -> date:
    """Apply business day adjustment to a date.

    Modified conventions roll the other way when the first roll leaves the month.
    """
    if isinstance(dt, datetime):
        dt = dt.date()

    if convention == BusinessDayConvention.NO_ADJUSTMENT:
        return dt

    if calendar is None:
        raise ValueError(f"Business day convention {convention.value} requires a calendar")

    step = timedelta(days=1 if convention in _FORWARD else -1)
    adjusted = _roll(dt, calendar, step)
    if convention in _MODIFIED and adjusted.month != dt.month:
        adjusted = _roll(dt, calendar, -step)
    return adjusted


def is_end_of_month(dt: Union[date, datetime]) -> bool:
    if isinstance(dt, datetime):
        dt = dt.date()
    return dt == get_month_end(dt.year, dt.month)


def get_month_end(year: int, month: int) -> date:
    """Last calendar day of the month."""
    first_of_next = date(year + month // 12, month % 12 + 1, 1)
    return first_of_next - timedelta(days=1)


def apply_end_of_month_rule(
    dt: Union[date, datetime], months_to_add: int, apply_eom_rule: bool = True
) -> date:
    """Shift a date by whole months.

    A month-end start stays on month end when ``apply_eom_rule`` is set. Days
    past the end of the target month are clipped to its last day.
    """
    if isinstance(dt, datetime):
        dt = dt.date()

    year_shift, month_index = divmod(dt.month - 1 + months_to_add, 12)
    year, month = dt.year + year_shift, month_index + 1
    month_end = get_month_end(year, month)

    if apply_eom_rule and is_end_of_month(dt):
        return month_end
    return date(year, month, min(dt.day, month_end.day))


class DateAdjuster(Protocol):
    """Anything that maps a date onto a valid payment date."""

    def adjust(self, dt: date) -> date:
        ...


@dataclass(frozen=True)
class BusinessDayAdjustment:
    """A business day convention paired with the calendar it rolls against.

    The rule is applied to period, exchange and event payment dates when a swap
    leg is expanded. ``NO_ADJUSTMENT`` leaves every date untouched and needs no
    calendar.
    """

    convention: BusinessDayConvention
    calendar: Optional[Calendar] = None

    def __post_init__(self):
        if self.convention != BusinessDayConvention.NO_ADJUSTMENT and self.calendar is None:
            raise ValidationError(
                f"Business day convention {self.convention.value} requires a calendar"
            )

    @classmethod
    def of(cls, convention: BusinessDayConvention, calendar: Calendar) -> "BusinessDayAdjustment":
        return cls(convention, calendar)

    def adjust(self, dt: date) -> date:
        """Roll ``dt`` onto a business day according to the convention."""
        return adjust_date(dt, self.convention, self.calendar)

    def __str__(self) -> str:
        if self.calendar is None:
            return self.convention.value
        return f"{self.convention.value} using {self.calendar.name}"


NO_ADJUSTMENT = BusinessDayAdjustment(BusinessDayConvention.NO_ADJUSTMENT)
