"""Interest Rate Swap Leg Model.

This package models swap legs as explicit payment and accrual periods,
expands them into resolved payment periods and notional exchange events, and
defines the pricing environment that pricers query during valuation.

Key modules:
- instruments: Rate observations, periods, payment events and swap legs
- valuation: Pricing environment protocol, environments and sensitivities
- schedule: Business day adjustment of payment dates
- conventions: Currencies, calendars, day counts and indices
- curves: Zero rate curves used by the market environment
- interpolation: Curve interpolation
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Main modules are imported via subpackages
    "instruments",
    "valuation",
    "schedule",
    "conventions",
    "curves",
    "interpolation",
    "errors",
]
