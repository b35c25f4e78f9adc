"""Input validation utilities for distance and bearing calculations."""

import math

from circumpolar.domain.models.coordinates import Coordinate


class ValidationError(ValueError):
    """Raised when validation fails."""

    pass


def validate_finite(value: float, name: str = "value") -> None:
    """Reject NaN and infinite values.

    Args:
        value: Number to check
        name: Name for error messages

    Raises:
        ValidationError: If the value is not a finite number
    """
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be a finite number, got {value}")


def validate_coordinates(coord: Coordinate) -> None:
    """Validate geographic coordinates.

    Args:
        coord: Coordinate to validate

    Raises:
        ValidationError: If coordinates are out of valid range
    """
    if not isinstance(coord, Coordinate):
        raise ValidationError(f"Expected Coordinate, got {type(coord)}")

    if not -90 <= coord.lat <= 90:
        raise ValidationError(
            f"Invalid latitude {coord.lat}°. Must be in range [-90, 90]"
        )

    if not -180 <= coord.lon <= 180:
        raise ValidationError(
            f"Invalid longitude {coord.lon}°. Must be in range [-180, 180]"
        )


def validate_radius(radius: float) -> None:
    """Validate the sphere radius.

    Raises:
        ValidationError: If radius is not a positive finite number
    """
    if not isinstance(radius, (int, float)):
        raise ValidationError(f"Radius must be numeric, got {type(radius)}")

    validate_finite(radius, "Radius")

    if radius <= 0:
        raise ValidationError(f"Radius must be positive, got {radius}")
