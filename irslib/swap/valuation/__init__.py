"""Valuation context for expanded swap legs.

This package provides:
- The PricingEnvironment protocol queried by pricers
- A curve-based environment and a fixed-FX test double
- Point and curve parameter sensitivities
- Pricing of notional exchanges and fees
"""

from .environment import PricingEnvironment
from .events import (
    convert_amount,
    events_present_value,
    future_value,
    present_value,
    present_value_sensitivity,
)
from .market import EnvironmentConfig, MarketPricingEnvironment
from .sensitivity import (
    CurveParameterSensitivity,
    FxIndexSensitivity,
    IborRateSensitivity,
    OvernightRateSensitivity,
    PointSensitivities,
    PointSensitivity,
    PointSensitivityBuilder,
    ZeroRateSensitivity,
)
from .testing import FixedFxPricingEnvironment

__all__ = [
    # Environments
    "PricingEnvironment",
    "MarketPricingEnvironment",
    "EnvironmentConfig",
    "FixedFxPricingEnvironment",
    # Sensitivities
    "PointSensitivity",
    "ZeroRateSensitivity",
    "IborRateSensitivity",
    "OvernightRateSensitivity",
    "FxIndexSensitivity",
    "PointSensitivities",
    "PointSensitivityBuilder",
    "CurveParameterSensitivity",
    # Event pricing
    "future_value",
    "present_value",
    "present_value_sensitivity",
    "events_present_value",
    "convert_amount",
]
