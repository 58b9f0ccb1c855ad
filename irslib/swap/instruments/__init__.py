"""
Swap leg instruments: rate observations, periods, payment events and legs.
"""

from .events import FeePayment, FxResetNotionalExchange, NotionalExchange, PaymentEvent
from .notional import create_notional_events, exchanges_at_edge
from .observations import (
    FixedRateObservation,
    IborRateObservation,
    OvernightCompoundedRateObservation,
    RateObservation,
)
from .periods import FxReset, RateAccrualPeriod, RatePaymentPeriod
from .swap import ExpandedSwapLeg, RatePeriodSwapLeg, Swap, SwapLeg, SwapLegBuilder

__all__ = [
    # Observations
    "RateObservation",
    "FixedRateObservation",
    "IborRateObservation",
    "OvernightCompoundedRateObservation",
    # Periods
    "RateAccrualPeriod",
    "RatePaymentPeriod",
    "FxReset",
    # Events
    "PaymentEvent",
    "NotionalExchange",
    "FxResetNotionalExchange",
    "FeePayment",
    "create_notional_events",
    "exchanges_at_edge",
    # Legs
    "SwapLeg",
    "RatePeriodSwapLeg",
    "SwapLegBuilder",
    "ExpandedSwapLeg",
    "Swap",
]
