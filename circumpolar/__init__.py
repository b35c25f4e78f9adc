"""Great-circle distance and heading calculator."""

from circumpolar.application.services.geodesy import GeodesyEngine
from circumpolar.domain.models.coordinates import Coordinate

__all__ = ["GeodesyEngine", "Coordinate"]
