import math
import unittest

from widgets.geometry import (
    compute_radius,
    indicator_dot_radius,
    indicator_ring_radius,
    label_ring_radius,
    position_for_index,
)


class TestComputeRadius(unittest.TestCase):
    def test_uses_shorter_side(self):
        self.assertEqual(compute_radius(200, 100), 40.0)
        self.assertEqual(compute_radius(100, 200), 40.0)

    def test_square(self):
        self.assertEqual(compute_radius(300, 300), 120.0)

    def test_zero_size(self):
        self.assertEqual(compute_radius(0, 0), 0.0)
        self.assertEqual(compute_radius(500, 0), 0.0)

    def test_formula(self):
        for w, h in [(1, 1), (37, 91), (640, 480), (1920, 1080)]:
            self.assertAlmostEqual(compute_radius(w, h), 0.8 * min(w, h) / 2.0)


class TestPositionForIndex(unittest.TestCase):
    def test_first_position_at_start_angle(self):
        x, y = position_for_index(0, 100.0, 0.0, 0.0)
        self.assertAlmostEqual(x, 100.0 * math.cos(9 * math.pi / 8))
        self.assertAlmostEqual(y, 100.0 * math.sin(9 * math.pi / 8))

    def test_first_position_has_negative_x_and_y(self):
        x, y = position_for_index(0, 50.0, 0.0, 0.0)
        self.assertLess(x, 0)
        self.assertLess(y, 0)

    def test_positions_step_by_45_degrees(self):
        for ordinal in range(4):
            x, y = position_for_index(ordinal, 10.0, 0.0, 0.0)
            angle = 9 * math.pi / 8 + ordinal * math.pi / 4
            self.assertAlmostEqual(x, 10.0 * math.cos(angle))
            self.assertAlmostEqual(y, 10.0 * math.sin(angle))

    def test_offsets_by_center(self):
        x0, y0 = position_for_index(2, 80.0, 0.0, 0.0)
        x, y = position_for_index(2, 80.0, 150.0, 100.0)
        self.assertAlmostEqual(x, x0 + 150.0)
        self.assertAlmostEqual(y, y0 + 100.0)

    def test_positions_lie_on_ring(self):
        for ordinal in range(4):
            x, y = position_for_index(ordinal, 42.0, 10.0, 20.0)
            self.assertAlmostEqual(math.hypot(x - 10.0, y - 20.0), 42.0)

    def test_zero_radius_returns_center(self):
        self.assertEqual(position_for_index(3, 0.0, 7.0, 9.0), (7.0, 9.0))

    def test_out_of_range_ordinal_raises(self):
        with self.assertRaises(ValueError):
            position_for_index(4, 10.0, 0.0, 0.0)
        with self.assertRaises(ValueError):
            position_for_index(-1, 10.0, 0.0, 0.0)


class TestRings(unittest.TestCase):
    def test_indicator_ring_is_inside(self):
        self.assertEqual(indicator_ring_radius(120.0), 85.0)

    def test_label_ring_is_outside(self):
        self.assertEqual(label_ring_radius(120.0), 150.0)

    def test_indicator_dot_radius(self):
        self.assertEqual(indicator_dot_radius(120.0), 10.0)


if __name__ == "__main__":
    unittest.main()
