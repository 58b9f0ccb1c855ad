"""
Business day adjustment of payment dates.
"""

# Re-export types from conventions
from irslib.swap.conventions.types import BusinessDayConvention

from .adjustments import (
    NO_ADJUSTMENT,
    BusinessDayAdjustment,
    DateAdjuster,
    adjust_date,
    apply_end_of_month_rule,
    get_month_end,
    is_end_of_month,
)

__all__ = [
    "BusinessDayConvention",
    "BusinessDayAdjustment",
    "DateAdjuster",
    "NO_ADJUSTMENT",
    "adjust_date",
    "apply_end_of_month_rule",
    "get_month_end",
    "is_end_of_month",
]
