"""Tests for geometry: Point, cubic_bezier, heading and random samplers."""
import math
import re

import numpy as np
import pytest

from geometry import Point, cubic_bezier, heading, random_color, random_point


class TestPoint:
    def test_defaults_to_origin(self) -> None:
        assert Point() == Point(0, 0)

    def test_is_a_value(self) -> None:
        assert Point(1.5, 2.0) == Point(1.5, 2.0)


class TestCubicBezier:
    P0 = Point(256, 175)
    C0 = Point(-40.5, 900.25)
    C1 = Point(12.0, -3.0)
    P3 = Point(77.7, 414)

    def test_starts_at_first_point(self) -> None:
        assert cubic_bezier(self.P0, self.C0, self.C1, self.P3, 0) == self.P0

    def test_ends_at_last_point(self) -> None:
        assert cubic_bezier(self.P0, self.C0, self.C1, self.P3, 1) == self.P3

    def test_straight_line_midpoint(self) -> None:
        a, b = Point(0, 0), Point(30, 60)
        mid = cubic_bezier(a, Point(10, 20), Point(20, 40), b, 0.5)
        assert mid.x == pytest.approx(15)
        assert mid.y == pytest.approx(30)


class TestHeading:
    def test_moving_right(self) -> None:
        assert heading(Point(0, 0), Point(1, 0)) == pytest.approx(math.pi / 2)

    def test_moving_down(self) -> None:
        assert heading(Point(0, 0), Point(0, 5)) == pytest.approx(math.pi)

    def test_zero_move_uses_fallback(self) -> None:
        assert heading(Point(3, 3), Point(3, 3)) == 0.0
        assert heading(Point(3, 3), Point(3, 3), fallback=1.25) == 1.25


class TestRandomSamplers:
    def test_point_inside_viewport(self, rng) -> None:
        for _ in range(100):
            p = random_point(rng, 512, 350)
            assert 0 <= p.x < 512
            assert 0 <= p.y < 350

    def test_color_is_always_six_digits(self, rng) -> None:
        pattern = re.compile(r"^#[0-9a-f]{6}$")
        for _ in range(500):
            assert pattern.match(random_color(rng))

    def test_small_color_values_are_padded(self) -> None:
        class LowRng:
            def integers(self, low, high):
                return 0x00ab

        assert random_color(LowRng()) == "#0000ab"

    def test_seeded_colors_repeat(self) -> None:
        a = [random_color(np.random.default_rng(7)) for _ in range(3)]
        assert a[0] == a[1] == a[2]
