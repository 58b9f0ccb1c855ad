"""
Swap legs defined by explicit payment and accrual periods, and their expansion.

A :class:`RatePeriodSwapLeg` holds the whole structure of a leg: its payment
periods (each made of one or more accrual periods), flags controlling implicit
notional exchanges, explicit payment events such as fees, and the business day
adjustment applied to every payment date. Calling :meth:`RatePeriodSwapLeg.expand`
resolves that definition into an :class:`ExpandedSwapLeg`, which is what pricers
consume.

Accrual dates are expected to be valid business days already; only payment
dates are adjusted during expansion.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import (
    Callable,
    Iterable,
    List,
    Optional,
    Protocol,
    Sequence,
    Set,
    Tuple,
    TypeVar,
    runtime_checkable,
)

from irslib.swap.conventions.currency import Currency
from irslib.swap.errors import ExpansionError, ValidationError
from irslib.swap.instruments.events import PaymentEvent
from irslib.swap.instruments.notional import create_notional_events, exchanges_at_edge
from irslib.swap.instruments.periods import RatePaymentPeriod
from irslib.swap.schedule.adjustments import NO_ADJUSTMENT, DateAdjuster

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


@runtime_checkable
class SwapLeg(Protocol):
    """Protocol for one leg of a swap."""

    @property
    def start_date(self) -> date:
        ...

    @property
    def end_date(self) -> date:
        ...

    @property
    def currency(self) -> Currency:
        ...

    def expand(self) -> "ExpandedSwapLeg":
        ...


def _single_currency(
    payment_periods: Iterable[RatePaymentPeriod], payment_events: Iterable[PaymentEvent]
) -> Currency:
    currencies: Set[Currency] = {p.currency for p in payment_periods}
    currencies.update(e.currency for e in payment_events)
    if len(currencies) != 1:
        found = sorted(c.code for c in currencies)
        raise ValidationError(
            f"Swap leg must have a single currency, multiple currencies found: {found}"
        )
    return next(iter(currencies))


@dataclass(frozen=True)
class ExpandedSwapLeg:
    """A swap leg resolved into payment periods and payment events.

    Payment events hold the derived notional exchanges first, followed by the
    explicit events of the source leg in their original order. Events are not
    sorted by date.
    """

    payment_periods: Sequence[RatePaymentPeriod]
    payment_events: Sequence[PaymentEvent] = ()
    currency: Currency = field(init=False, compare=False)

    def __post_init__(self):
        periods = tuple(self.payment_periods)
        if not periods:
            raise ValidationError("Expanded swap leg must have at least one payment period")
        if self.payment_events is None:
            raise ValidationError("Payment events must not be None")
        events = tuple(self.payment_events)
        object.__setattr__(self, "payment_periods", periods)
        object.__setattr__(self, "payment_events", events)
        object.__setattr__(self, "currency", _single_currency(periods, events))

    @property
    def start_date(self) -> date:
        return self.payment_periods[0].start_date

    @property
    def end_date(self) -> date:
        return self.payment_periods[-1].end_date

    def expand(self) -> "ExpandedSwapLeg":
        return self


@dataclass(frozen=True)
class RatePeriodSwapLeg:
    """A rate swap leg defined using payment and accrual periods.

    Attributes:
        payment_periods: Payment periods forming the leg, in chronological order.
            Periods are independent and may overlap.
        payment_events: Additional single-date events such as fees. Notional
            exchanges may also be given here instead of through the flags.
            Required, but may be empty.
        initial_exchange: Exchange the notional on the leg start date. Ignored
            when the first period has an FX reset.
        intermediate_exchange: Exchange notional differences between periods.
            For FX reset periods this also controls the exchanges at the start
            and end of the leg.
        final_exchange: Exchange the notional on the leg end date. Ignored when
            the last period has an FX reset.
        payment_business_day_adjustment: Applied to period, exchange and event
            payment dates. Defaults to no adjustment.
        currency: Derived from the periods and events at construction.

    Raises:
        ValidationError: If there are no payment periods, payment events is
            None, or the periods and events do not share exactly one currency.
    """

    payment_periods: Sequence[RatePaymentPeriod]
    payment_events: Sequence[PaymentEvent]
    initial_exchange: bool = False
    intermediate_exchange: bool = False
    final_exchange: bool = False
    payment_business_day_adjustment: Optional[DateAdjuster] = None
    currency: Currency = field(init=False, compare=False)

    def __post_init__(self):
        if self.payment_periods is None:
            raise ValidationError("Payment periods must not be None")
        periods = tuple(self.payment_periods)
        if not periods:
            raise ValidationError("Swap leg must have at least one payment period")
        if self.payment_events is None:
            raise ValidationError("Payment events must not be None")
        events = tuple(self.payment_events)

        object.__setattr__(self, "payment_periods", periods)
        object.__setattr__(self, "payment_events", events)
        if self.payment_business_day_adjustment is None:
            object.__setattr__(self, "payment_business_day_adjustment", NO_ADJUSTMENT)
        object.__setattr__(self, "currency", _single_currency(periods, events))

    @staticmethod
    def builder() -> "SwapLegBuilder":
        return SwapLegBuilder()

    def to_builder(self) -> "SwapLegBuilder":
        """Return a builder pre-populated with this leg's fields."""
        builder = SwapLegBuilder()
        builder.set_payment_periods(self.payment_periods)
        builder.set_exchanges(self.initial_exchange, self.intermediate_exchange, self.final_exchange)
        builder.set_payment_events(self.payment_events)
        builder.set_payment_business_day_adjustment(self.payment_business_day_adjustment)
        return builder

    @property
    def start_date(self) -> date:
        """First accrual date of the leg, often known as the effective date."""
        return self.payment_periods[0].start_date

    @property
    def end_date(self) -> date:
        """Last accrual date of the leg, often known as the maturity date."""
        return self.payment_periods[-1].end_date

    def expand(self) -> ExpandedSwapLeg:
        """Resolve the leg into adjusted payment periods and payment events.

        Returns:
            A new expanded leg; this leg is left unchanged.

        Raises:
            ExpansionError: If the payment business day adjustment fails for any
                period, exchange or event date.
        """
        adjustment = self.payment_business_day_adjustment

        adjusted_periods = [
            self._adjust(period.adjust_payment_date, adjustment, f"payment period {i}")
            for i, period in enumerate(self.payment_periods)
        ]
        # edge dates are only adjusted when an exchange lands on them
        initial_exchange_date = self.start_date
        if exchanges_at_edge(self.payment_periods[0], self.initial_exchange, self.intermediate_exchange):
            initial_exchange_date = self._adjust(adjustment.adjust, self.start_date, "initial exchange date")
        final_exchange_date = self.end_date
        if exchanges_at_edge(self.payment_periods[-1], self.final_exchange, self.intermediate_exchange):
            final_exchange_date = self._adjust(adjustment.adjust, self.end_date, "final exchange date")
        notional_events = create_notional_events(
            adjusted_periods,
            initial_exchange_date,
            final_exchange_date,
            self.initial_exchange,
            self.intermediate_exchange,
            self.final_exchange,
        )
        adjusted_events = [
            self._adjust(event.adjust_payment_date, adjustment, f"payment event {i}")
            for i, event in enumerate(self.payment_events)
        ]

        logger.debug(
            "Expanded %s swap leg: %s payment periods, %s notional exchanges, %s payment events",
            self.currency,
            len(adjusted_periods),
            len(notional_events),
            len(adjusted_events),
        )
        return ExpandedSwapLeg(
            payment_periods=adjusted_periods,
            payment_events=[*notional_events, *adjusted_events],
        )

    def _adjust(self, operation: Callable[[T], R], value: T, description: str) -> R:
        try:
            return operation(value)
        except Exception as exc:
            raise ExpansionError(
                f"Unable to adjust {description} using {self.payment_business_day_adjustment}: {exc}"
            ) from exc


class SwapLegBuilder:
    """Incremental construction of a :class:`RatePeriodSwapLeg`.

    Nothing is validated until :meth:`build`.
    """

    def __init__(self):
        self._payment_periods: List[RatePaymentPeriod] = []
        self._payment_events: Optional[List[PaymentEvent]] = []
        self._initial_exchange = False
        self._intermediate_exchange = False
        self._final_exchange = False
        self._adjustment: Optional[DateAdjuster] = None

    # ------------------------------------------------------------------
    # Periods
    # ------------------------------------------------------------------
    def set_payment_periods(self, periods: Sequence[RatePaymentPeriod]) -> None:
        self._payment_periods = list(periods)

    def add_payment_period(self, period: RatePaymentPeriod) -> None:
        self._payment_periods.append(period)

    # ------------------------------------------------------------------
    # Exchanges and events
    # ------------------------------------------------------------------
    def set_exchanges(self, initial: bool, intermediate: bool, final: bool) -> None:
        self._initial_exchange = initial
        self._intermediate_exchange = intermediate
        self._final_exchange = final

    def set_payment_events(self, events: Optional[Sequence[PaymentEvent]]) -> None:
        self._payment_events = None if events is None else list(events)

    def add_payment_event(self, event: PaymentEvent) -> None:
        if self._payment_events is None:
            self._payment_events = []
        self._payment_events.append(event)

    def set_payment_business_day_adjustment(self, adjustment: Optional[DateAdjuster]) -> None:
        self._adjustment = adjustment

    def build(self) -> RatePeriodSwapLeg:
        return RatePeriodSwapLeg(
            payment_periods=tuple(self._payment_periods),
            payment_events=None if self._payment_events is None else tuple(self._payment_events),
            initial_exchange=self._initial_exchange,
            intermediate_exchange=self._intermediate_exchange,
            final_exchange=self._final_exchange,
            payment_business_day_adjustment=self._adjustment,
        )


@dataclass(frozen=True)
class Swap:
    """A swap made of one or more legs."""

    legs: Tuple[SwapLeg, ...]

    def __post_init__(self):
        legs = tuple(self.legs)
        if not legs:
            raise ValidationError("Swap must have at least one leg")
        object.__setattr__(self, "legs", legs)

    @classmethod
    def of(cls, *legs: SwapLeg) -> "Swap":
        return cls(legs)

    @property
    def start_date(self) -> date:
        return min(leg.start_date for leg in self.legs)

    @property
    def end_date(self) -> date:
        return max(leg.end_date for leg in self.legs)

    def is_cross_currency(self) -> bool:
        return len({leg.currency for leg in self.legs}) > 1

    def get_legs(self, currency: Currency) -> List[SwapLeg]:
        """Return the legs paying in ``currency``, in swap order."""
        return [leg for leg in self.legs if leg.currency == currency]

    def expand(self) -> "Swap":
        """Return a swap whose legs are all expanded."""
        return Swap(tuple(leg.expand() for leg in self.legs))
