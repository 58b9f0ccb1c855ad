"""
Day count conventions for accrual year fractions and curve time.

Arithmetic is delegated to QuantLib day counters. Conventions are shared
instances looked up by name through :func:`get_day_count_convention`.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Union

import QuantLib as ql

from irslib.swap.conventions.calendars import to_ql_date


@dataclass(frozen=True)
class DayCountConvention:
    """A named QuantLib day counter.

    Two conventions are equal when their names are equal.
    """

    name: str
    ql_day_counter: ql.DayCounter = field(compare=False, repr=False)

    def year_fraction(self, start: Union[date, datetime], end: Union[date, datetime]) -> float:
        """Year fraction from start to end; negative when end precedes start."""
        return self.ql_day_counter.yearFraction(to_ql_date(start), to_ql_date(end))

    def __str__(self) -> str:
        return self.name


# Ibor, EUR and USD overnight legs
ACT_360 = DayCountConvention("ACT/360", ql.Actual360())
# GBP legs and curve time
ACT_365F = DayCountConvention("ACT/365F", ql.Actual365Fixed())
# EUR fixed legs
THIRTY_360E = DayCountConvention("30E/360", ql.Thirty360(ql.Thirty360.European))
ACT_ACT = DayCountConvention("ACT/ACT ISDA", ql.ActualActual(ql.ActualActual.ISDA))

_ALIASES: Dict[DayCountConvention, tuple] = {
    ACT_360: ("ACTUAL/360",),
    ACT_365F: ("ACT/365", "ACTUAL/365F"),
    THIRTY_360E: ("30/360E", "EUROBOND"),
    ACT_ACT: ("ACT/ACT", "ACTUAL/ACTUAL"),
}

DAY_COUNT_CONVENTIONS: Dict[str, DayCountConvention] = {}
for _convention, _aliases in _ALIASES.items():
    for _name in (_convention.name, *_aliases):
        DAY_COUNT_CONVENTIONS[_name] = _convention


def get_day_count_convention(name: str) -> DayCountConvention:
    """Look up a day count by name or alias, ignoring case.

    Raises:
        ValueError: If the name is not registered
    """
    key = name.strip().upper()
    if key not in DAY_COUNT_CONVENTIONS:
        raise ValueError(
            f"Unknown day count convention: {name}. Available: {sorted(DAY_COUNT_CONVENTIONS)}"
        )
    return DAY_COUNT_CONVENTIONS[key]
