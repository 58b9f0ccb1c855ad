"""
Derivation of implicit notional exchange events from payment periods.

A swap leg only stores three flags saying whether the notional is exchanged at
the start, at intermediate boundaries and at the end. This module turns those
flags into explicit events when the leg is expanded.

Sign convention: positive amounts are received. The initial exchange is the
negated notional, the final exchange is the notional, and an intermediate
exchange is the difference between the notional ending and the notional
starting at that boundary.

Periods carrying an FX reset are handled differently. Their notional is fixed
in a reference currency, so exchanges on either edge of such a period are
:class:`FxResetNotionalExchange` events that fix on the period's FX reset.
Those events are controlled by ``intermediate_exchange`` alone; the
``initial_exchange`` and ``final_exchange`` flags are ignored for an FX reset
period's edges.
"""

from datetime import date
from typing import List, Sequence

from irslib.swap.errors import ValidationError
from irslib.swap.instruments.events import FxResetNotionalExchange, NotionalExchange, PaymentEvent
from irslib.swap.instruments.periods import RatePaymentPeriod


def create_notional_events(
    payment_periods: Sequence[RatePaymentPeriod],
    initial_exchange_date: date,
    final_exchange_date: date,
    initial_exchange: bool,
    intermediate_exchange: bool,
    final_exchange: bool,
) -> List[PaymentEvent]:
    """Create the notional exchange events implied by the exchange flags.

    Args:
        payment_periods: Payment periods with adjusted payment dates, in order
        initial_exchange_date: Date of the exchange at the start edge of the leg
        final_exchange_date: Date of the exchange at the end edge of the leg
        initial_exchange: Exchange the notional at the start of the leg
        intermediate_exchange: Exchange notional changes between periods, and
            every edge of an FX reset period
        final_exchange: Exchange the notional at the end of the leg

    Returns:
        Events ordered by edge: start edge, internal boundaries left to right,
        end edge. No deduplication is performed.
    """
    if not payment_periods:
        raise ValidationError("At least one payment period is required to create notional events")

    events: List[PaymentEvent] = []
    first = payment_periods[0]
    last = payment_periods[-1]

    # start edge
    if exchanges_at_edge(first, initial_exchange, intermediate_exchange):
        events.append(_edge_exchange(initial_exchange_date, first, starting=True))

    # internal boundaries
    if intermediate_exchange:
        for ending, starting in zip(payment_periods[:-1], payment_periods[1:]):
            boundary_date = ending.payment_date
            if ending.fx_reset is None and starting.fx_reset is None:
                amount = ending.notional_amount.minus(starting.notional_amount)
                events.append(NotionalExchange.of(boundary_date, amount))
            else:
                events.append(_edge_exchange(boundary_date, ending, starting=False))
                events.append(_edge_exchange(boundary_date, starting, starting=True))

    # end edge
    if exchanges_at_edge(last, final_exchange, intermediate_exchange):
        events.append(_edge_exchange(final_exchange_date, last, starting=False))

    return events


def exchanges_at_edge(period: RatePaymentPeriod, edge_exchange: bool, intermediate_exchange: bool) -> bool:
    """Whether a leg edge bounded by ``period`` carries a notional exchange.

    FX reset periods exchange at their edges only with intermediate exchange;
    plain periods follow the initial or final flag of that edge.
    """
    if period.fx_reset is not None:
        return intermediate_exchange
    return edge_exchange


def _edge_exchange(payment_date: date, period: RatePaymentPeriod, starting: bool) -> PaymentEvent:
    # notional paid out when the period starts, received back when it ends
    sign = -1.0 if starting else 1.0
    fx_reset = period.fx_reset
    if fx_reset is None:
        return NotionalExchange.of(payment_date, period.notional_amount.multiplied_by(sign))
    return FxResetNotionalExchange(
        payment_date=payment_date,
        reference_currency=fx_reset.reference_currency,
        notional=sign * period.notional,
        index=fx_reset.index,
        fixing_date=fx_reset.fixing_date,
    )
