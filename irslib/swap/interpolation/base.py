"""
Interpolator base class.

Interpolators hold pillar times and values as sorted numpy arrays. Besides the
interpolated value they expose its derivative with respect to each pillar
value, which curves use to map point sensitivities onto their parameters.
"""
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np


class Interpolator(ABC):
    """Interpolation over (pillar, value) pairs given in any order."""

    def __init__(self, pillars: Sequence[float], values: Sequence[float]):
        if len(pillars) != len(values):
            raise ValueError(f"Got {len(pillars)} pillars but {len(values)} values")
        if len(pillars) == 0:
            raise ValueError("Need at least 1 point for interpolation")

        order = np.argsort(np.asarray(pillars, dtype=float), kind="stable")
        self.pillars = np.asarray(pillars, dtype=float)[order]
        self.values = np.asarray(values, dtype=float)[order]
        if np.any(np.diff(self.pillars) == 0):
            raise ValueError(f"Duplicate pillars not allowed: {self.pillars.tolist()}")

    @property
    def size(self) -> int:
        return len(self.pillars)

    @abstractmethod
    def interpolate(self, t: float) -> float:
        pass

    @abstractmethod
    def parameter_weights(self, t: float) -> np.ndarray:
        """d interpolate(t) / d values[i] for each pillar i."""
        pass
