from __future__ import annotations

import math
from typing import Literal

import numpy as np


StepMode = Literal["truncate", "nearest", "floor"]

STEP_MODES: tuple[StepMode, ...] = ("truncate", "nearest", "floor")

# Fraction of a step by which a value may fall short of a multiple and still snap to it.
STEP_TOLERANCE = 1e-9


def clamp(x: float, lo: float, hi: float) -> float:
    """Bound `x` to the closed range `[lo, hi]`; `lo <= hi` is the caller's job."""

    if x < lo:
        return lo
    if x > hi:
        return hi
    return x


def ratio(numerator: float, denominator: float) -> float:
    """Float division with IEEE results (nan/inf) instead of ZeroDivisionError.

    Degenerate geometry (zero span, zero track width) is left to the host, so the
    gesture math keeps producing plain float results rather than raising.
    """

    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def snap_to_step(value: float, step: float, mode: StepMode = "truncate") -> float:
    """Remove the remainder of `value` with respect to `step`.

    `truncate` drops the truncating remainder so results move toward zero
    (23 -> 20, -23 -> -20). `nearest` drops the IEEE remainder (23 -> 25) and
    `floor` always moves down (-23 -> -25).
    """

    if not math.isfinite(value):
        return value
    if mode == "nearest":
        return value - math.remainder(value, step)
    # pixel round trips leave exact multiples a hair off, which must not cost a step
    quotient = value / step
    if mode == "truncate":
        if quotient >= 0:
            return math.floor(quotient + STEP_TOLERANCE) * step
        return math.ceil(quotient - STEP_TOLERANCE) * step
    if mode == "floor":
        return math.floor(quotient + STEP_TOLERANCE) * step
    raise ValueError(f"Unknown step mode: {mode}")


def step_grid(lower: float, upper: float, step: float) -> np.ndarray:
    """Step multiples lying inside `[lower, upper]`, ascending."""

    first = math.ceil(lower / step)
    last = math.floor(upper / step)
    if last < first:
        return np.empty(0, dtype=np.float64)
    return np.arange(first, last + 1, dtype=np.float64) * step
