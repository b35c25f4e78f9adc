import numpy as np
from numpy.typing import NDArray


def to_unit_vector(lat: float, lon: float) -> NDArray[np.float64]:
    """Convert geographic coordinates to a point on the unit sphere.

    Args:
        lat: Latitude in decimal degrees.
        lon: Longitude in decimal degrees.

    Returns:
        A numpy array [x, y, z] with x towards (0, 0), y towards (0, 90)
        and z towards the north pole.
    """
    phi = np.deg2rad(lat)
    lam = np.deg2rad(lon)
    cos_phi = np.cos(phi)

    return np.array(
        [cos_phi * np.cos(lam), cos_phi * np.sin(lam), np.sin(phi)],
        dtype=np.float64,
    )


def angle_between(
    vector_a: NDArray[np.float64], vector_b: NDArray[np.float64]
) -> float:
    """
    Calculate the angle between two vectors in radians, in [0, pi].

    Uses atan2 of the cross and dot products, which stays accurate for
    nearly parallel and nearly antipodal vectors where arccos does not.
    A zero vector yields 0.
    """
    cross_norm = np.linalg.norm(np.cross(vector_a, vector_b))
    dot = np.dot(vector_a, vector_b)

    return float(np.arctan2(cross_norm, dot))


def turn_angle(
    point_a: NDArray[np.float64],
    point_b: NDArray[np.float64],
    point_c: NDArray[np.float64],
) -> float:
    """
    Calculate the signed turn angle at point_b along the path a -> b -> c.

    The magnitude is the angle between the great-circle planes through
    (a, b) and (b, c). The sign is positive when the three points turn
    counterclockwise as seen from outside the sphere.

    Args:
        point_a: Unit vector the path comes from.
        point_b: Unit vector of the vertex.
        point_c: Unit vector the path goes to.

    Returns:
        The turn angle in degrees, in the range (-180, 180].
    """
    plane_ab = np.cross(point_a, point_b)
    plane_bc = np.cross(point_b, point_c)

    angle = np.rad2deg(angle_between(plane_ab, plane_bc))

    # c . (a x b) is the orientation determinant of (a, b, c)
    if np.dot(point_c, plane_ab) < 0 and angle < 180.0:
        angle = -angle

    return float(angle)
