"""
Single-date payment events of a swap leg: notional exchanges and fees.
"""

import dataclasses
from dataclasses import dataclass
from datetime import date
from typing import Protocol, runtime_checkable

from irslib.swap.conventions.currency import Currency, CurrencyAmount
from irslib.swap.conventions.indices import FxIndex
from irslib.swap.errors import ValidationError
from irslib.swap.schedule.adjustments import DateAdjuster


@runtime_checkable
class PaymentEvent(Protocol):
    """Protocol for a cashflow paid on a single date."""

    @property
    def currency(self) -> Currency:
        ...

    @property
    def payment_date(self) -> date:
        ...

    def adjust_payment_date(self, adjustment: DateAdjuster) -> "PaymentEvent":
        """Return a copy with the payment date rolled by ``adjustment``."""
        ...


@dataclass(frozen=True)
class NotionalExchange:
    """Transfer of a known notional amount. Positive amounts are received."""

    payment_date: date
    payment_amount: CurrencyAmount

    @classmethod
    def of(cls, payment_date: date, payment_amount: CurrencyAmount) -> "NotionalExchange":
        return cls(payment_date, payment_amount)

    @property
    def currency(self) -> Currency:
        return self.payment_amount.currency

    def adjust_payment_date(self, adjustment: DateAdjuster) -> "NotionalExchange":
        return dataclasses.replace(self, payment_date=adjustment.adjust(self.payment_date))


@dataclass(frozen=True)
class FxResetNotionalExchange:
    """Transfer of a notional fixed in a reference currency and paid in the other.

    The amount paid is ``notional`` converted at the ``index`` fixing taken on
    ``fixing_date``. Positive notionals are received.
    """

    payment_date: date
    reference_currency: Currency
    notional: float
    index: FxIndex
    fixing_date: date

    def __post_init__(self):
        if not self.index.contains(self.reference_currency):
            raise ValidationError(
                f"Reference currency {self.reference_currency} must be one of the currencies of {self.index}"
            )

    @property
    def currency(self) -> Currency:
        return self.index.other(self.reference_currency)

    @property
    def notional_amount(self) -> CurrencyAmount:
        return CurrencyAmount(self.reference_currency, self.notional)

    def adjust_payment_date(self, adjustment: DateAdjuster) -> "FxResetNotionalExchange":
        return dataclasses.replace(self, payment_date=adjustment.adjust(self.payment_date))


@dataclass(frozen=True)
class FeePayment:
    """An ad-hoc fee, such as an upfront or amendment fee."""

    payment_date: date
    payment_amount: CurrencyAmount

    @property
    def currency(self) -> Currency:
        return self.payment_amount.currency

    def adjust_payment_date(self, adjustment: DateAdjuster) -> "FeePayment":
        return dataclasses.replace(self, payment_date=adjustment.adjust(self.payment_date))
