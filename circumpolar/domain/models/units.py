# circumpolar/domain/models/units.py
"""
Type-safe unit definitions for distance and bearing calculations.

This module uses NewType to create distinct types for different units,
helping catch unit mix-ups (degrees vs radians) at type-checking time.

Usage:
    from circumpolar.domain.models.units import Angle, Degrees

    def to_bearing(turn: Degrees) -> Angle:
        return Angle(Degrees(-(turn - 180.0) % 360.0))
"""

from enum import Enum
from typing import NewType

from circumpolar.domain.constants import (
    EARTH_RADIUS_KM,
    EARTH_RADIUS_MI,
    EARTH_RADIUS_NM,
)

# Base physical units
Degrees = NewType("Degrees", float)  # Angle in degrees
Radians = NewType("Radians", float)  # Angle in radians

# Semantic types (domain-specific meanings)
Angle = NewType("Angle", Degrees)  # Bearing, heading or declination
Distance = NewType("Distance", float)  # Surface distance in the sphere's unit


class DistanceUnit(str, Enum):
    """Distance units selectable from the command line."""

    NAUTICAL_MILES = "NM"
    KILOMETERS = "km"
    STATUTE_MILES = "mi"

    def __str__(self) -> str:
        return self.value

    @property
    def earth_radius(self) -> float:
        """Earth's mean radius expressed in this unit."""
        return _EARTH_RADII[self]


_EARTH_RADII: dict[DistanceUnit, float] = {
    DistanceUnit.NAUTICAL_MILES: EARTH_RADIUS_NM,
    DistanceUnit.KILOMETERS: EARTH_RADIUS_KM,
    DistanceUnit.STATUTE_MILES: EARTH_RADIUS_MI,
}
