"""
QuantLib-backed holiday calendars.

Calendars are looked up by name through :func:`get_calendar`. Instances are
shared and compare equal by name, so adjustment rules holding them keep value
semantics.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Union

import QuantLib as ql


def to_ql_date(dt: Union[date, datetime]) -> ql.Date:
    """Convert a Python date or datetime to a QuantLib date."""
    if isinstance(dt, datetime):
        dt = dt.date()
    return ql.Date(dt.day, dt.month, dt.year)


@dataclass(frozen=True)
class Calendar:
    """A named set of business days."""

    name: str
    ql_calendar: ql.Calendar = field(compare=False, repr=False)

    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        return self.ql_calendar.isBusinessDay(to_ql_date(dt))

    def add_business_days(self, start_date: Union[date, datetime], days: int) -> date:
        """Move by ``days`` business days; negative values move backwards."""
        moved = self.ql_calendar.advance(to_ql_date(start_date), days, ql.Days)
        return date(moved.year(), moved.month(), moved.dayOfMonth())


# TARGET2 settlement days
TARGET = Calendar("TARGET", ql.TARGET())
# London settlement days
UK = Calendar("UK", ql.UnitedKingdom(ql.UnitedKingdom.Settlement))
# US settlement days, used for USD payments
USNY = Calendar("USNY", ql.UnitedStates(ql.UnitedStates.Settlement))
WEEKEND_ONLY = Calendar("WEEKEND", ql.WeekendsOnly())

CALENDARS: Dict[str, Calendar] = {
    "TARGET": TARGET,
    "EUR": TARGET,
    "UK": UK,
    "GBLO": UK,
    "USNY": USNY,
    "WEEKEND": WEEKEND_ONLY,
}


def get_calendar(name: str) -> Calendar:
    """Get a calendar by name or alias, e.g. "TARGET", "GBLO", "USNY" or "WEEKEND"."""
    key = name.upper()
    if key not in CALENDARS:
        raise ValueError(f"Unknown calendar: {name}. Available: {list(CALENDARS)}")
    return CALENDARS[key]
