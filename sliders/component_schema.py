from __future__ import annotations

from dataclasses import dataclass

from .numeric import ratio


@dataclass(frozen=True)
class Bounds:
    """Closed numeric range of legal slider values."""

    lower: float
    upper: float

    def __post_init__(self) -> None:
        if self.lower > self.upper:
            raise ValueError("Bounds lower must be <= upper")

    @property
    def span(self) -> float:
        return self.upper - self.lower

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper

    def normalize(self, value: float) -> float:
        """Position of `value` in the range mapped into 0...1.

        Zero-span bounds divide by zero; hosts must configure a positive span.
        """

        return ratio(value - self.lower, self.span)

    def denormalize(self, fraction: float) -> float:
        return self.lower + self.span * fraction


@dataclass(frozen=True)
class DragPoint:
    x: float
    y: float


@dataclass(frozen=True)
class TrackGeometry:
    """Pixel size of the interactive region, recomputed by the host per layout pass."""

    width: float
    height: float = 44.0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("TrackGeometry width/height must be >= 0")


def as_bounds(raw: object) -> Bounds:
    """Coerce a `Bounds` or a 2-item `(lower, upper)` sequence into `Bounds`."""

    if isinstance(raw, Bounds):
        return raw
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ValueError("bounds must be a Bounds or a (lower, upper) pair")
    lower, upper = raw
    if not is_number(lower) or not is_number(upper):
        raise ValueError("bounds values must be numbers")
    return Bounds(float(lower), float(upper))


def is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
