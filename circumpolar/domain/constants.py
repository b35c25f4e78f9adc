"""Constants used across the application."""

# Physical constants
EARTH_RADIUS_KM = 6371.0088  # IUGG mean radius in kilometers
KM_PER_NAUTICAL_MILE = 1.852
KM_PER_STATUTE_MILE = 1.609344

EARTH_RADIUS_NM = EARTH_RADIUS_KM / KM_PER_NAUTICAL_MILE
EARTH_RADIUS_MI = EARTH_RADIUS_KM / KM_PER_STATUTE_MILE

# True north pole, the reference direction for bearings
NORTH_POLE_LAT = 90.0
NORTH_POLE_LON = 0.0

# Bearing reported when the target coincides with the reference point
DEGENERATE_BEARING = 180.0
# Bearings from a pole to any other point
FROM_NORTH_POLE_BEARING = 180.0
FROM_SOUTH_POLE_BEARING = 0.0
# Angular separation (radians) below which two points are treated as one
COINCIDENT_TOLERANCE = 1e-12

# NOAA geomagnetic calculator
DECLINATION_API_URL = (
    "https://www.ngdc.noaa.gov/geomag-web/calculators/calculateDeclination"
)
DECLINATION_MODEL = "WMM"
DECLINATION_RESULT_FORMAT = "json"
DECLINATION_TIMEOUT = 10.0  # seconds
DECLINATION_CONNECT_TIMEOUT = 5.0  # seconds
