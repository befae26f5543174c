"""Tests for the planar helpers: angle wrapping and point conversion."""

import math

import pytest

from robinson._constants import TAU
from robinson.model.geometry import (
    direction,
    distance,
    lerp,
    midpoint,
    normalise_angle,
    polar_point,
    shoelace_area,
)


class TestNormaliseAngle:
    def test_in_range_unchanged(self):
        assert normalise_angle(1.25) == 1.25

    def test_full_turn_wraps_to_zero(self):
        assert normalise_angle(TAU) == 0.0

    def test_above_range_wraps(self):
        assert normalise_angle(TAU + 1.0) == pytest.approx(1.0)

    def test_negative_wraps(self):
        assert normalise_angle(-math.pi / 2) == pytest.approx(1.5 * math.pi)

    def test_many_turns_wrap(self):
        assert normalise_angle(7 * TAU + 0.5) == pytest.approx(0.5)

    def test_tiny_negative_stays_below_tau(self):
        wrapped = normalise_angle(-1e-17)
        assert 0.0 <= wrapped < TAU

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_raises(self, bad):
        with pytest.raises(ValueError, match="finite"):
            normalise_angle(bad)


class TestPointConversion:
    def test_polar_point_y_grows_downward(self):
        x, y = polar_point((0.0, 0.0), 1.0, math.pi / 2)
        assert x == pytest.approx(0.0, abs=1e-12)
        assert y == pytest.approx(-1.0)

    def test_direction_along_x(self):
        assert direction((1.0, 1.0), (5.0, 1.0)) == 0.0

    def test_direction_screen_up_is_quarter_turn(self):
        assert direction((0.0, 0.0), (0.0, -3.0)) == pytest.approx(math.pi / 2)

    @pytest.mark.parametrize("theta", [0.3, 2.0, 4.5, 6.0])
    def test_direction_inverts_polar_point(self, theta):
        origin = (10.0, -4.0)
        assert direction(origin, polar_point(origin, 7.0, theta)) == pytest.approx(theta)

    def test_distance(self):
        assert distance((0.0, 0.0), (3.0, 4.0)) == 5.0

    def test_lerp_and_midpoint(self):
        assert lerp((0.0, 0.0), (10.0, 20.0), 0.25) == (2.5, 5.0)
        assert midpoint((0.0, 2.0), (4.0, 6.0)) == (2.0, 4.0)


class TestShoelaceArea:
    def test_right_triangle(self):
        assert shoelace_area([(0.0, 0.0), (4.0, 0.0), (0.0, 3.0)]) == 6.0

    def test_orientation_independent(self):
        pts = [(0.0, 0.0), (4.0, 0.0), (0.0, 3.0)]
        assert shoelace_area(pts[::-1]) == shoelace_area(pts)

    def test_unit_square(self):
        square = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
        assert shoelace_area(square) == 1.0
