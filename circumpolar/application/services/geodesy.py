import math
from collections.abc import Sequence

from circumpolar.domain.constants import (
    COINCIDENT_TOLERANCE,
    DEGENERATE_BEARING,
    FROM_NORTH_POLE_BEARING,
    FROM_SOUTH_POLE_BEARING,
)
from circumpolar.domain.exceptions import CoordinatesRequiredException
from circumpolar.domain.geometry import angle_between, turn_angle
from circumpolar.domain.models.coordinates import NORTH_POLE, Coordinate
from circumpolar.domain.models.results import DistanceResult
from circumpolar.domain.models.units import Angle, Degrees, Distance, Radians
from circumpolar.logging_config import get_logger

logger = get_logger(__name__)


class GeodesyEngine:
    """
    Great-circle distances and initial bearings on a sphere.

    All angular math runs on the coordinates' unit-sphere vectors, so no
    degree/radian round trips accumulate error near the poles or the
    antimeridian. The engine holds no state; the radius is passed per call.
    """

    @staticmethod
    def angular_distance(reference: Coordinate, target: Coordinate) -> Radians:
        """
        Calculates the angular separation (in radians) between two coordinates.
        """
        return Radians(angle_between(reference.point, target.point))

    def compute_distance(
        self, reference: Coordinate, target: Coordinate, radius: float
    ) -> Distance:
        """
        Calculates the great-circle distance between two coordinates
        in the unit of the given radius.
        """
        return Distance(self.angular_distance(reference, target) * radius)

    def compute_bearing(self, reference: Coordinate, target: Coordinate) -> Angle:
        """
        Calculate the initial bearing (forward azimuth) from reference to target.

        The turn angle at the reference point, going from the direction of the
        true north pole to the direction of the target, is flipped and rotated
        by 180° so that 0° points north and angles grow clockwise.

        From a pole every direction is due south (north pole, 180°) or due
        north (south pole, 0°), so those bearings do not depend on the target.

        Returns:
            Angle: Initial bearing in decimal degrees, in [0, 360).
            DEGENERATE_BEARING when target coincides with reference.
        """
        if self.angular_distance(reference, target) <= COINCIDENT_TOLERANCE:
            return Angle(Degrees(DEGENERATE_BEARING))

        pole_distance = self.angular_distance(NORTH_POLE, reference)
        if pole_distance <= COINCIDENT_TOLERANCE:
            return Angle(Degrees(FROM_NORTH_POLE_BEARING))
        if pole_distance >= math.pi - COINCIDENT_TOLERANCE:
            return Angle(Degrees(FROM_SOUTH_POLE_BEARING))

        turn = turn_angle(NORTH_POLE.point, reference.point, target.point)
        bearing = -(turn - 180.0) % 360.0

        return Angle(Degrees(bearing))

    def compute_all(
        self, coordinates: Sequence[Coordinate], radius: float
    ) -> list[DistanceResult]:
        """
        Compute distance and bearing from the first coordinate to every
        coordinate, in input order. The first result is the reference itself,
        with zero distance and no heading.

        Raises:
            CoordinatesRequiredException: If no coordinates are given.
        """
        if not coordinates:
            raise CoordinatesRequiredException(
                "At least one coordinate is required to compute distances"
            )

        reference = coordinates[0]
        results = [DistanceResult(index=0, coordinate=reference, distance=Distance(0.0))]

        for index, target in enumerate(coordinates[1:], start=1):
            results.append(
                DistanceResult(
                    index=index,
                    coordinate=target,
                    distance=self.compute_distance(reference, target, radius),
                    heading=self.compute_bearing(reference, target),
                )
            )

        logger.debug(
            f"Computed {len(results) - 1} target(s) from "
            f"{reference.lat:.6f}, {reference.lon:.6f} with radius {radius}"
        )
        return results
