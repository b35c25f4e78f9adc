from dataclasses import dataclass, field
from typing import Any

from .coordinates import Coordinate, SphereParameters
from .units import Angle, Degrees, Distance


@dataclass(frozen=True, slots=True)
class DistanceResult:
    """
    Distance and initial heading from the reference point to one coordinate.

    index: position in the input order, 0 being the reference itself
    distance: great-circle distance in the sphere's unit
    heading: degrees clockwise from true north, None for the reference row
    """

    index: int
    coordinate: Coordinate
    distance: Distance
    heading: Angle | None = None

    @property
    def is_reference(self) -> bool:
        return self.index == 0

    def magnetic_heading(self, declination: Angle | None) -> Angle | None:
        """
        Heading relative to magnetic north, given an east-positive declination.
        """
        if self.heading is None or declination is None:
            return None
        return Angle(Degrees((self.heading - declination) % 360.0))

    def to_dict(self, declination: Angle | None = None) -> dict[str, Any]:
        data: dict[str, Any] = {
            "index": self.index,
            "coord": self.coordinate.to_dict(),
            "distance": self.distance,
        }
        if self.heading is not None:
            data["heading"] = self.heading
            magnetic = self.magnetic_heading(declination)
            if magnetic is not None:
                data["magnetic_heading"] = magnetic
        return data


@dataclass(slots=True)
class CalculationReport:
    """Everything the output layer needs for one invocation."""

    reference: Coordinate
    sphere: SphereParameters
    results: list[DistanceResult] = field(default_factory=list)
    declination: Angle | None = None

    @property
    def targets(self) -> list[DistanceResult]:
        return [r for r in self.results if not r.is_reference]
