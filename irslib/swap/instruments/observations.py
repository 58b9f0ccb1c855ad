"""
Rate observations attached to accrual periods.

Observations describe *what* rate a period accrues at; they carry no pricing
logic and the swap leg expansion passes them through untouched.
"""

from dataclasses import dataclass
from datetime import date

from irslib.swap.conventions.indices import IborIndex, OvernightIndex
from irslib.swap.errors import ValidationError


@dataclass(frozen=True)
class FixedRateObservation:
    """A rate agreed at trade inception."""

    rate: float


@dataclass(frozen=True)
class IborRateObservation:
    """A term rate fixing of an Ibor index on a single date."""

    index: IborIndex
    fixing_date: date


@dataclass(frozen=True)
class OvernightCompoundedRateObservation:
    """Daily overnight fixings compounded over [start_date, end_date).

    Attributes:
        index: Overnight index being compounded
        start_date: First fixing date of the period
        end_date: End of the compounding period
        rate_cutoff_days: Number of days before the end at which the rate is frozen
    """

    index: OvernightIndex
    start_date: date
    end_date: date
    rate_cutoff_days: int = 0

    def __post_init__(self):
        if self.end_date <= self.start_date:
            raise ValidationError(
                f"Overnight observation end date {self.end_date} must be after start date {self.start_date}"
            )
        if self.rate_cutoff_days < 0:
            raise ValidationError(f"Rate cutoff days must not be negative: {self.rate_cutoff_days}")


RateObservation = FixedRateObservation | IborRateObservation | OvernightCompoundedRateObservation
