"""
Interpolation methods for yield curves.
"""

from .base import Interpolator
from .linear import LogLinearZeroInterpolator

__all__ = [
    'Interpolator',
    'LogLinearZeroInterpolator',
]
