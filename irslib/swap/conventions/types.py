"""
Basic types and enums used across the swap model.
"""

from enum import Enum


class BusinessDayConvention(Enum):
    """Business day adjustment rules."""

    NO_ADJUSTMENT = "NO_ADJUSTMENT"
    FOLLOWING = "FOLLOWING"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    PRECEDING = "PRECEDING"
    MODIFIED_PRECEDING = "MODIFIED_PRECEDING"


class CalendarType(Enum):
    """Predefined calendars."""

    TARGET = "TARGET"
    USNY = "USNY"
    UK = "UK"
    WEEKEND = "WEEKEND"


class CompoundingMethod(Enum):
    """How accrual periods within one payment period combine."""

    NONE = "NONE"
    STRAIGHT = "STRAIGHT"
    FLAT = "FLAT"
    SPREAD_EXCLUSIVE = "SPREAD_EXCLUSIVE"
