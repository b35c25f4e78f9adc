# circumpolar/domain/models/__init__.py
from .units import Angle, Degrees, Distance, DistanceUnit, Radians
from .coordinates import (
    NORTH_POLE,
    CalculationSettings,
    Coordinate,
    SphereParameters,
)
from .results import CalculationReport, DistanceResult

__all__ = [
    "Angle",
    "Degrees",
    "Distance",
    "DistanceUnit",
    "Radians",
    "NORTH_POLE",
    "CalculationSettings",
    "Coordinate",
    "SphereParameters",
    "CalculationReport",
    "DistanceResult",
]
