"""Sensitivities returned by pricing environments.

Point sensitivities record the derivative of a value with respect to a single
market quantity (a zero rate at a date, an index fixing, an FX fixing).
Environments return them wrapped in a :class:`PointSensitivityBuilder` so that
pricers can scale and combine them before building the final
:class:`PointSensitivities`. A pricing environment then projects point
sensitivities onto its curve parameters, giving a
:class:`CurveParameterSensitivity`.
"""

import dataclasses
from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple

import numpy as np

from irslib.swap.conventions.currency import Currency
from irslib.swap.conventions.indices import FxIndex, IborIndex, OvernightIndex
from irslib.swap.errors import ValidationError


class PointSensitivity:
    """Common behaviour of the point sensitivity value types."""

    sensitivity: float

    def with_sensitivity(self, value: float) -> "PointSensitivity":
        return dataclasses.replace(self, sensitivity=value)

    def multiplied_by(self, factor: float) -> "PointSensitivity":
        return self.with_sensitivity(self.sensitivity * factor)

    def key(self) -> tuple:
        """Identity of the sensitivity point, ignoring its value."""
        values = tuple(
            getattr(self, f.name) for f in dataclasses.fields(self) if f.name != "sensitivity"
        )
        return (type(self).__name__, *values)


@dataclass(frozen=True)
class ZeroRateSensitivity(PointSensitivity):
    """Sensitivity to the continuously compounded zero rate of a discount curve."""

    currency: Currency
    maturity_date: date
    sensitivity: float = 1.0


@dataclass(frozen=True)
class IborRateSensitivity(PointSensitivity):
    """Sensitivity to an Ibor index fixing."""

    index: IborIndex
    fixing_date: date
    currency: Currency
    sensitivity: float = 1.0


@dataclass(frozen=True)
class OvernightRateSensitivity(PointSensitivity):
    """Sensitivity to an overnight rate projected over [fixing_date, end_date)."""

    index: OvernightIndex
    fixing_date: date
    end_date: date
    currency: Currency
    sensitivity: float = 1.0


@dataclass(frozen=True)
class FxIndexSensitivity(PointSensitivity):
    """Sensitivity to an FX index fixing, expressed per unit of ``reference_currency``."""

    index: FxIndex
    reference_currency: Currency
    fixing_date: date
    currency: Currency
    sensitivity: float = 1.0


@dataclass(frozen=True)
class PointSensitivities:
    """An immutable collection of point sensitivities."""

    sensitivities: Tuple[PointSensitivity, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "sensitivities", tuple(self.sensitivities))

    @classmethod
    def empty(cls) -> "PointSensitivities":
        return cls(())

    @classmethod
    def of(cls, *points: PointSensitivity) -> "PointSensitivities":
        return cls(points)

    def __iter__(self) -> Iterator[PointSensitivity]:
        return iter(self.sensitivities)

    def __len__(self) -> int:
        return len(self.sensitivities)

    def combined_with(self, other: "PointSensitivities") -> "PointSensitivities":
        return PointSensitivities(self.sensitivities + other.sensitivities)

    def multiplied_by(self, factor: float) -> "PointSensitivities":
        return PointSensitivities(tuple(p.multiplied_by(factor) for p in self.sensitivities))

    def normalized(self) -> "PointSensitivities":
        """Merge points with the same key, keeping first-seen order."""
        merged: Dict[tuple, PointSensitivity] = {}
        for point in self.sensitivities:
            key = point.key()
            if key in merged:
                existing = merged[key]
                merged[key] = existing.with_sensitivity(existing.sensitivity + point.sensitivity)
            else:
                merged[key] = point
        return PointSensitivities(tuple(merged.values()))


@dataclass(frozen=True)
class PointSensitivityBuilder:
    """Point sensitivities under construction.

    Environments return builders from their sensitivity queries; pricers scale
    and combine them, then call :meth:`build`.
    """

    points: Tuple[PointSensitivity, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "points", tuple(self.points))

    @classmethod
    def none(cls) -> "PointSensitivityBuilder":
        return cls(())

    @classmethod
    def of(cls, *points: PointSensitivity) -> "PointSensitivityBuilder":
        return cls(points)

    def multiplied_by(self, factor: float) -> "PointSensitivityBuilder":
        return PointSensitivityBuilder(tuple(p.multiplied_by(factor) for p in self.points))

    def combined_with(self, other: "PointSensitivityBuilder") -> "PointSensitivityBuilder":
        return PointSensitivityBuilder(self.points + other.points)

    def build(self) -> PointSensitivities:
        return PointSensitivities(self.points).normalized()


CurveKey = Tuple[str, Currency]


class CurveParameterSensitivity:
    """Sensitivity to curve parameters, one numpy array per (curve name, currency).

    Instances are treated as immutable: every operation returns a new object
    and arrays are copied on the way in and out.
    """

    def __init__(self, sensitivities: Mapping[CurveKey, Iterable[float]] | None = None):
        self._sensitivities: Dict[CurveKey, np.ndarray] = {
            key: np.array(values, dtype=float) for key, values in (sensitivities or {}).items()
        }

    @classmethod
    def empty(cls) -> "CurveParameterSensitivity":
        return cls()

    @classmethod
    def of(cls, curve_name: str, currency: Currency, values: Iterable[float]) -> "CurveParameterSensitivity":
        return cls({(curve_name, currency): values})

    def keys(self) -> List[CurveKey]:
        return list(self._sensitivities)

    def size(self) -> int:
        return len(self._sensitivities)

    def get(self, curve_name: str, currency: Currency) -> np.ndarray:
        """Return the sensitivity array for a curve; raises KeyError if absent."""
        return self._sensitivities[(curve_name, currency)].copy()

    def combined_with(self, other: "CurveParameterSensitivity") -> "CurveParameterSensitivity":
        """Add two sensitivities, summing arrays for curves present in both."""
        combined = {key: values.copy() for key, values in self._sensitivities.items()}
        for key, values in other._sensitivities.items():
            if key in combined:
                if combined[key].shape != values.shape:
                    raise ValidationError(
                        f"Cannot combine sensitivities of different sizes for curve {key[0]}: "
                        f"{combined[key].shape[0]} and {values.shape[0]}"
                    )
                combined[key] = combined[key] + values
            else:
                combined[key] = values.copy()
        return CurveParameterSensitivity(combined)

    def multiplied_by(self, factor: float) -> "CurveParameterSensitivity":
        return CurveParameterSensitivity(
            {key: values * factor for key, values in self._sensitivities.items()}
        )

    def total(self) -> float:
        """Sum of all parameter sensitivities across all curves."""
        return float(sum(values.sum() for values in self._sensitivities.values()))

    def equal_with_tolerance(self, other: "CurveParameterSensitivity", tolerance: float) -> bool:
        if set(self._sensitivities) != set(other._sensitivities):
            return False
        return all(
            self._sensitivities[key].shape == other._sensitivities[key].shape
            and np.allclose(self._sensitivities[key], other._sensitivities[key], rtol=0.0, atol=tolerance)
            for key in self._sensitivities
        )

    def __repr__(self) -> str:
        entries = ", ".join(
            f"{name}/{currency}: {values.tolist()}" for (name, currency), values in self._sensitivities.items()
        )
        return f"CurveParameterSensitivity({entries})"
