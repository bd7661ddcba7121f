from __future__ import annotations

import math
import unittest

from sliders.component_schema import Bounds, as_bounds
from sliders.numeric import clamp, ratio, snap_to_step, step_grid


class ClampTests(unittest.TestCase):
    def test_clamp_bounds_and_passthrough(self) -> None:
        self.assertEqual(clamp(-3.0, 0.0, 10.0), 0.0)
        self.assertEqual(clamp(12.5, 0.0, 10.0), 10.0)
        self.assertEqual(clamp(4.25, 0.0, 10.0), 4.25)

    def test_clamp_stays_in_range_and_is_idempotent(self) -> None:
        ranges = [(0.0, 0.0), (-5.0, 5.0), (1.0, 100.0), (-1e9, -1e3)]
        samples = [-1e12, -7.5, -0.0, 0.0, 0.5, 3.0, 99.9, 1e12]
        for lo, hi in ranges:
            for x in samples:
                once = clamp(x, lo, hi)
                self.assertTrue(lo <= once <= hi)
                self.assertEqual(clamp(once, lo, hi), once)


class NumericHelperTests(unittest.TestCase):
    def test_ratio_returns_ieee_results_for_zero_denominator(self) -> None:
        self.assertEqual(ratio(3.0, 2.0), 1.5)
        self.assertTrue(math.isinf(ratio(1.0, 0.0)))
        self.assertTrue(math.isnan(ratio(0.0, 0.0)))

    def test_snap_to_step_modes(self) -> None:
        self.assertEqual(snap_to_step(23.0, 5.0), 20.0)
        self.assertEqual(snap_to_step(-23.0, 5.0), -20.0)
        self.assertEqual(snap_to_step(23.0, 5.0, "nearest"), 25.0)
        self.assertEqual(snap_to_step(-23.0, 5.0, "floor"), -25.0)
        self.assertEqual(snap_to_step(20.0, 5.0), 20.0)

    def test_snap_to_step_keeps_values_just_below_a_multiple(self) -> None:
        self.assertEqual(snap_to_step(0.49999999999999994, 0.1), 0.5)
        self.assertEqual(snap_to_step(-0.49999999999999994, 0.1), -0.5)
        self.assertEqual(snap_to_step(0.49999999999999994, 0.1, "floor"), 0.5)

    def test_snap_to_step_passes_non_finite_values_through(self) -> None:
        self.assertTrue(math.isnan(snap_to_step(float("nan"), 5.0)))
        self.assertEqual(snap_to_step(float("inf"), 5.0), float("inf"))

    def test_snap_to_step_rejects_unknown_mode(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown step mode"):
            snap_to_step(1.0, 1.0, "round")  # type: ignore[arg-type]

    def test_step_grid(self) -> None:
        grid = step_grid(0.0, 100.0, 5.0)
        self.assertEqual(len(grid), 21)
        self.assertEqual(grid[0], 0.0)
        self.assertEqual(grid[-1], 100.0)
        self.assertEqual(step_grid(1.0, 9.0, 5.0).tolist(), [5.0])
        self.assertEqual(step_grid(1.0, 4.0, 5.0).size, 0)


class BoundsTests(unittest.TestCase):
    def test_bounds_rejects_inverted_range(self) -> None:
        with self.assertRaisesRegex(ValueError, "lower must be <= upper"):
            Bounds(5.0, 1.0)

    def test_normalize_and_denormalize(self) -> None:
        bounds = Bounds(10.0, 70.0)
        self.assertEqual(bounds.span, 60.0)
        self.assertEqual(bounds.normalize(40.0), 0.5)
        self.assertEqual(bounds.denormalize(0.5), 40.0)
        self.assertTrue(bounds.contains(70.0))
        self.assertFalse(bounds.contains(70.5))

    def test_zero_span_normalize_is_nan(self) -> None:
        self.assertTrue(math.isnan(Bounds(3.0, 3.0).normalize(3.0)))

    def test_as_bounds_accepts_pairs(self) -> None:
        self.assertEqual(as_bounds([1, 2]), Bounds(1.0, 2.0))
        self.assertEqual(as_bounds(Bounds(0.0, 1.0)), Bounds(0.0, 1.0))
        with self.assertRaises(ValueError):
            as_bounds((1.0, 2.0, 3.0))
        with self.assertRaises(ValueError):
            as_bounds(("a", 2.0))


if __name__ == "__main__":
    unittest.main()
