import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from circumpolar.domain import geometry


class TestToUnitVector:
    @pytest.mark.parametrize(
        "lat, lon, expected",
        [
            (0.0, 0.0, [1.0, 0.0, 0.0]),
            (0.0, 90.0, [0.0, 1.0, 0.0]),
            (0.0, 180.0, [-1.0, 0.0, 0.0]),
            (0.0, -90.0, [0.0, -1.0, 0.0]),
            (90.0, 0.0, [0.0, 0.0, 1.0]),
            (-90.0, 45.0, [0.0, 0.0, -1.0]),
        ],
    )
    def test_cardinal_points(self, lat, lon, expected):
        assert_allclose(geometry.to_unit_vector(lat, lon), expected, atol=1e-15)

    @pytest.mark.parametrize(
        "lat, lon", [(51.5, -0.1), (-33.9, 151.2), (89.999, 179.999), (123.0, 400.0)]
    )
    def test_vector_has_unit_length(self, lat, lon):
        vector = geometry.to_unit_vector(lat, lon)
        assert np.linalg.norm(vector) == pytest.approx(1.0, abs=1e-15)

    def test_antimeridian_representations_match(self):
        """Longitudes 180 and -180 are the same point."""
        assert_allclose(
            geometry.to_unit_vector(10.0, 180.0),
            geometry.to_unit_vector(10.0, -180.0),
            atol=1e-15,
        )


class TestAngleBetween:
    def test_orthogonal_vectors(self):
        angle = geometry.angle_between(np.array([1.0, 0, 0]), np.array([0, 1.0, 0]))
        assert angle == pytest.approx(math.pi / 2)

    def test_same_vector(self):
        v = geometry.to_unit_vector(12.3, 45.6)
        assert geometry.angle_between(v, v) == 0.0

    def test_antipodal_vectors(self):
        a = geometry.to_unit_vector(10.0, 20.0)
        b = geometry.to_unit_vector(-10.0, -160.0)
        assert geometry.angle_between(a, b) == pytest.approx(math.pi)

    def test_zero_vector_gives_zero(self):
        assert geometry.angle_between(np.zeros(3), np.array([0, 0, 1.0])) == 0.0

    def test_tiny_separation_is_resolved(self):
        """atan2 keeps precision where arccos(dot) would round to zero."""
        a = geometry.to_unit_vector(0.0, 0.0)
        b = geometry.to_unit_vector(0.0, 1e-7)
        assert geometry.angle_between(a, b) == pytest.approx(
            math.radians(1e-7), rel=1e-6
        )


class TestTurnAngle:
    pole = geometry.to_unit_vector(90.0, 0.0)
    origin = geometry.to_unit_vector(0.0, 0.0)

    def test_left_turn_is_positive(self):
        east = geometry.to_unit_vector(0.0, 90.0)
        assert geometry.turn_angle(self.pole, self.origin, east) == pytest.approx(90.0)

    def test_right_turn_is_negative(self):
        west = geometry.to_unit_vector(0.0, -90.0)
        assert geometry.turn_angle(self.pole, self.origin, west) == pytest.approx(-90.0)

    def test_straight_on_is_zero(self):
        south = geometry.to_unit_vector(-45.0, 0.0)
        assert geometry.turn_angle(self.pole, self.origin, south) == pytest.approx(
            0.0, abs=1e-12
        )

    def test_reversal_is_plus_180(self):
        """Going back the way we came is +180, never -180."""
        angle = geometry.turn_angle(self.pole, self.origin, self.pole)
        assert angle > 0
        assert angle == pytest.approx(180.0)

    @pytest.mark.parametrize("lat, lon", [(10, 20), (-30, -100), (60, 170), (-5, 1)])
    def test_range(self, lat, lon):
        target = geometry.to_unit_vector(lat, lon)
        angle = geometry.turn_angle(self.pole, self.origin, target)
        assert -180.0 < angle <= 180.0
