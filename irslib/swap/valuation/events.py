"""Pricing of single-date payment events.

Values are in the event currency. Events paid before the valuation date are
worth zero.
"""

from irslib.swap.conventions.currency import Currency, CurrencyAmount
from irslib.swap.instruments.events import (
    FeePayment,
    FxResetNotionalExchange,
    NotionalExchange,
    PaymentEvent,
)
from irslib.swap.instruments.swap import ExpandedSwapLeg

from .environment import PricingEnvironment
from .sensitivity import PointSensitivityBuilder


def future_value(event: PaymentEvent, env: PricingEnvironment) -> float:
    """Undiscounted amount paid by the event.

    Args:
        event: Notional exchange, FX reset notional exchange or fee
        env: Environment providing FX index rates for FX reset exchanges

    Returns:
        Amount in the event currency; positive amounts are received

    Raises:
        UnsupportedQueryError: If the environment cannot provide a required rate
        TypeError: If the event type is not supported
    """
    if event.payment_date < env.valuation_date:
        return 0.0
    if isinstance(event, (NotionalExchange, FeePayment)):
        return event.payment_amount.amount
    if isinstance(event, FxResetNotionalExchange):
        rate = env.fx_index_rate(event.index, event.reference_currency, event.fixing_date)
        return event.notional * rate
    raise TypeError(f"Unsupported payment event type: {type(event).__name__}")


def present_value(event: PaymentEvent, env: PricingEnvironment) -> float:
    """Future value discounted from the payment date to the valuation date."""
    if event.payment_date < env.valuation_date:
        return 0.0
    return future_value(event, env) * env.discount_factor(event.currency, event.payment_date)


def present_value_sensitivity(event: PaymentEvent, env: PricingEnvironment) -> PointSensitivityBuilder:
    """Point sensitivity of :func:`present_value` to discounting and FX fixings."""
    if event.payment_date < env.valuation_date:
        return PointSensitivityBuilder.none()

    df_sensitivity = env.discount_factor_zero_rate_sensitivity(event.currency, event.payment_date)
    fv = future_value(event, env)
    sensitivity = df_sensitivity.multiplied_by(fv)

    if isinstance(event, FxResetNotionalExchange):
        df = env.discount_factor(event.currency, event.payment_date)
        fx_sensitivity = env.fx_index_rate_sensitivity(event.index, event.reference_currency, event.fixing_date)
        sensitivity = sensitivity.combined_with(fx_sensitivity.multiplied_by(event.notional * df))
    return sensitivity


def events_present_value(leg: ExpandedSwapLeg, env: PricingEnvironment) -> CurrencyAmount:
    """Total present value of all payment events of an expanded leg."""
    total = sum(present_value(event, env) for event in leg.payment_events)
    return CurrencyAmount(leg.currency, total)


def convert_amount(amount: CurrencyAmount, currency: Currency, env: PricingEnvironment) -> CurrencyAmount:
    """Convert an amount into ``currency`` at the environment's FX rate."""
    if amount.currency == currency:
        return amount
    return CurrencyAmount(currency, amount.amount * env.fx_rate(amount.currency, currency))
