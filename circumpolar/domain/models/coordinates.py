from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from circumpolar.domain.constants import NORTH_POLE_LAT, NORTH_POLE_LON
from circumpolar.domain.geometry import to_unit_vector
from .units import DistanceUnit


@dataclass(frozen=True, slots=True)
class Coordinate:
    """
    A single geographic point.

    Latitude and longitude are in decimal degrees, negative for S and W.
    The unit-sphere vector is derived once at construction and is read-only,
    so it always matches lat/lon. Ranges are not checked here.
    """

    lat: float
    lon: float
    point: NDArray[np.float64] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        point = to_unit_vector(self.lat, self.lon)
        point.flags.writeable = False
        object.__setattr__(self, "point", point)

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lon": self.lon}


NORTH_POLE = Coordinate(NORTH_POLE_LAT, NORTH_POLE_LON)


@dataclass(frozen=True, slots=True)
class SphereParameters:
    """Radius of the sphere and the unit it is expressed in."""

    radius: float = DistanceUnit.NAUTICAL_MILES.earth_radius
    unit: DistanceUnit = DistanceUnit.NAUTICAL_MILES

    @classmethod
    def for_unit(
        cls, unit: DistanceUnit, radius: float | None = None
    ) -> "SphereParameters":
        """
        Build parameters for a unit, using Earth's mean radius in that unit
        unless an explicit radius is given.
        """
        if radius is None:
            radius = unit.earth_radius
        return cls(radius=radius, unit=unit)


@dataclass(frozen=True, slots=True)
class CalculationSettings:
    """
    Options for one invocation, built at the command-line boundary.

    sphere: radius and unit label for distances
    output_json: render a JSON list instead of text columns
    use_declination: query magnetic declination for the reference point
    strict: reject latitudes/longitudes outside their geographic ranges
    """

    sphere: SphereParameters = field(default_factory=SphereParameters)
    output_json: bool = False
    use_declination: bool = True
    strict: bool = False
