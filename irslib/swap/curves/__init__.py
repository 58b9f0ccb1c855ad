"""
Curves package.

Curves are external collaborators of the pricing environment: they answer
discount factor and zero rate queries and expose their zero rate sensitivity
to their own parameters.
"""

from .base import BaseCurve, Curve
from .discount import ZeroRateCurve

__all__ = [
    "Curve",
    "BaseCurve",
    "ZeroRateCurve",
]
