class CircumpolarException(Exception):
    """
    Base exception for all circumpolar errors.
    """


class CoordinatesRequiredException(CircumpolarException):
    """
    Raised when a calculation is requested without any coordinates.
    """


class APIException(CircumpolarException):
    """
    Raised when declination data cannot be retrieved.
    """


class InvalidResponseException(APIException):
    """
    Raised when the declination API returns malformed or empty data.
    Do NOT retry - indicates data quality issue.
    """
