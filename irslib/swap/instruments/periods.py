"""
Accrual and payment periods of a swap leg.

Period dates are expected to be adjusted to valid business days already; the
only date a swap leg may still move is the payment date.
"""

import dataclasses
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from irslib.swap.conventions.currency import Currency, CurrencyAmount
from irslib.swap.conventions.indices import FxIndex
from irslib.swap.conventions.types import CompoundingMethod
from irslib.swap.errors import ValidationError
from irslib.swap.instruments.observations import RateObservation
from irslib.swap.schedule.adjustments import DateAdjuster


@dataclass(frozen=True)
class RateAccrualPeriod:
    """A date range over which interest accrues at an observed rate.

    Attributes:
        start_date: Adjusted accrual start date
        end_date: Adjusted accrual end date
        year_fraction: Day count fraction for the period
        rate_observation: How the rate for this period is determined
        unadjusted_start_date: Start date before business day adjustment (defaults to start_date)
        unadjusted_end_date: End date before business day adjustment (defaults to end_date)
        gearing: Multiplier applied to the observed rate
        spread: Spread added to the geared rate
    """

    start_date: date
    end_date: date
    year_fraction: float
    rate_observation: RateObservation
    unadjusted_start_date: Optional[date] = None
    unadjusted_end_date: Optional[date] = None
    gearing: float = 1.0
    spread: float = 0.0

    def __post_init__(self):
        if self.end_date <= self.start_date:
            raise ValidationError(
                f"Accrual end date {self.end_date} must be after start date {self.start_date}"
            )
        if self.year_fraction < 0:
            raise ValidationError(f"Year fraction must not be negative: {self.year_fraction}")
        if self.unadjusted_start_date is None:
            object.__setattr__(self, "unadjusted_start_date", self.start_date)
        if self.unadjusted_end_date is None:
            object.__setattr__(self, "unadjusted_end_date", self.end_date)


@dataclass(frozen=True)
class FxReset:
    """Redenomination of the notional through an FX fixing.

    The notional of the period is expressed in ``reference_currency`` and
    converted into the payment currency at the rate fixed on ``fixing_date``.
    """

    index: FxIndex
    reference_currency: Currency
    fixing_date: date

    def __post_init__(self):
        if not self.index.contains(self.reference_currency):
            raise ValidationError(
                f"Reference currency {self.reference_currency} must be one of the currencies of {self.index}"
            )


@dataclass(frozen=True)
class RatePaymentPeriod:
    """One payment made up of one or more accrual periods.

    When more than one accrual period is present, ``compounding_method``
    describes how they combine.
    """

    payment_date: date
    accrual_periods: Sequence[RateAccrualPeriod]
    currency: Currency
    notional: float
    fx_reset: Optional[FxReset] = None
    compounding_method: CompoundingMethod = field(default=CompoundingMethod.NONE)

    def __post_init__(self):
        if self.accrual_periods is None or len(self.accrual_periods) == 0:
            raise ValidationError("Payment period must have at least one accrual period")
        object.__setattr__(self, "accrual_periods", tuple(self.accrual_periods))
        if self.fx_reset is not None:
            if self.fx_reset.reference_currency == self.currency:
                raise ValidationError(
                    f"FX reset reference currency {self.currency} must differ from the payment currency"
                )
            if not self.fx_reset.index.contains(self.currency):
                raise ValidationError(
                    f"FX reset index {self.fx_reset.index} does not contain payment currency {self.currency}"
                )

    @property
    def start_date(self) -> date:
        return self.accrual_periods[0].start_date

    @property
    def end_date(self) -> date:
        return self.accrual_periods[-1].end_date

    @property
    def notional_amount(self) -> CurrencyAmount:
        """Notional as an amount, in the FX reset reference currency when one applies."""
        if self.fx_reset is not None:
            return CurrencyAmount(self.fx_reset.reference_currency, self.notional)
        return CurrencyAmount(self.currency, self.notional)

    def adjust_payment_date(self, adjustment: DateAdjuster) -> "RatePaymentPeriod":
        """Return a copy with the payment date rolled by ``adjustment``."""
        return dataclasses.replace(self, payment_date=adjustment.adjust(self.payment_date))
