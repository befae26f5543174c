"""Tests for TriangleType and the angle lookups."""

import math

import pytest

from robinson.model.triangle_type import TriangleType, base_angle, vertex_angle


class TestAngles:
    @pytest.mark.parametrize("kind", list(TriangleType))
    def test_angle_sum_is_pi(self, kind):
        assert vertex_angle(kind) + 2 * base_angle(kind) == pytest.approx(
            math.pi, abs=1e-9,
        )

    def test_thin_angles(self):
        assert math.degrees(vertex_angle(TriangleType.THIN_LEFT)) == pytest.approx(36.0)
        assert math.degrees(base_angle(TriangleType.THIN_RIGHT)) == pytest.approx(72.0)

    def test_thick_angles(self):
        assert math.degrees(vertex_angle(TriangleType.THICK_LEFT)) == pytest.approx(108.0)
        assert math.degrees(base_angle(TriangleType.THICK_RIGHT)) == pytest.approx(36.0)

    def test_thin_apex_smaller_than_thick(self):
        assert vertex_angle(TriangleType.THIN_LEFT) < vertex_angle(TriangleType.THICK_LEFT)

    def test_chirality_does_not_change_angles(self):
        assert vertex_angle(TriangleType.THIN_LEFT) == vertex_angle(TriangleType.THIN_RIGHT)
        assert base_angle(TriangleType.THICK_LEFT) == base_angle(TriangleType.THICK_RIGHT)

    def test_only_two_angle_classes(self):
        pairs = {(vertex_angle(t), base_angle(t)) for t in TriangleType}
        assert len(pairs) == 2

    def test_string_value_accepted(self):
        assert vertex_angle("thick_left") == vertex_angle(TriangleType.THICK_LEFT)

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError, match="unknown triangle type"):
            vertex_angle("kite")


class TestTriangleType:
    def test_values(self):
        assert TriangleType("thin_left") is TriangleType.THIN_LEFT
        assert TriangleType.THICK_RIGHT == "thick_right"

    def test_shape_flags(self):
        assert TriangleType.THIN_RIGHT.is_thin
        assert not TriangleType.THIN_RIGHT.is_thick
        assert TriangleType.THICK_LEFT.is_thick
        assert not TriangleType.THICK_LEFT.is_thin

    def test_chirality_flags(self):
        assert TriangleType.THIN_LEFT.is_left
        assert TriangleType.THICK_LEFT.is_left
        assert not TriangleType.THIN_RIGHT.is_left
        assert not TriangleType.THICK_RIGHT.is_left

    @pytest.mark.parametrize("kind", list(TriangleType))
    def test_mirror_keeps_shape_and_flips_chirality(self, kind):
        mirrored = kind.mirror()
        assert mirrored.is_thin == kind.is_thin
        assert mirrored.is_left != kind.is_left
        assert mirrored.mirror() is kind
