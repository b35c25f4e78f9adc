import math
import re
from collections.abc import Sequence

from circumpolar.domain.models.coordinates import Coordinate
from circumpolar.domain.validators import (
    ValidationError,
    validate_coordinates,
    validate_finite,
)

_DECIMAL = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
_HEMISPHERE = r"[NSEWСВЮЗ]"

_DECIMAL_RE = re.compile(
    rf"^(?P<value>{_DECIMAL})\s*°?\s*(?P<hemisphere>{_HEMISPHERE})?$", re.IGNORECASE
)
_DMS_RE = re.compile(
    r"^(?P<degrees>[+-]?\d+)\s*[°:\s]\s*"
    r"(?P<minutes>\d+(?:\.\d+)?)\s*(?:['′:]|\s)?\s*"
    r"(?:(?P<seconds>\d+(?:\.\d+)?)\s*(?:\"|″|'')?)?\s*"
    rf"(?P<hemisphere>{_HEMISPHERE})?$",
    re.IGNORECASE,
)


class CoordinateParser:
    """
    Parses geographical coordinates given as command-line tokens.
    Each token is one latitude or longitude value, in decimal degrees or
    degrees-minutes-seconds (DMS), with an optional hemisphere letter.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict
        self.hemisphere_multipliers = {
            "N": 1,
            "С": 1,
            "E": 1,
            "В": 1,
            "S": -1,
            "Ю": -1,
            "W": -1,
            "З": -1,
        }

    def _dms_to_dd(self, d: float, m: float, s: float) -> float:
        """Converts degrees, minutes, seconds to decimal degrees."""
        sign = math.copysign(1.0, d)
        return sign * (abs(d) + m / 60.0 + s / 3600.0)

    def _apply_hemisphere(self, value: float, hemisphere: str | None) -> float:
        if hemisphere and value >= 0:
            value *= self.hemisphere_multipliers[hemisphere.upper()]
        return value

    def parse_component(self, token: str) -> float:
        """
        Parses a single latitude or longitude value.

        Raises:
            ValueError: If the token is not a finite coordinate value.
        """
        text = token.strip()
        # Decimal comma, e.g. "55,36"
        text = re.sub(r"(?<=\d),(?=\d)", ".", text)

        match = _DECIMAL_RE.match(text)
        if match:
            value = self._apply_hemisphere(
                float(match.group("value")), match.group("hemisphere")
            )
        else:
            match = _DMS_RE.match(text)
            if not match:
                raise ValueError(f"Cannot parse coordinate value: {token!r}")

            d = float(match.group("degrees"))
            m = float(match.group("minutes"))
            s = float(match.group("seconds") or 0.0)
            if not (0 <= m < 60 and 0 <= s < 60):
                raise ValueError(
                    f"Invalid DMS coordinate {token!r}: minutes or seconds out of range"
                )
            value = self._apply_hemisphere(
                self._dms_to_dd(d, m, s), match.group("hemisphere")
            )

        try:
            validate_finite(value, "Coordinate value")
        except ValidationError as e:
            raise ValueError(f"Cannot parse coordinate value {token!r}: {e}") from e

        return value

    def parse_pairs(self, tokens: Sequence[str]) -> list[Coordinate]:
        """
        Parses a flat sequence of tokens (lat, lon, lat, lon, ...) into
        a list of Coordinate objects.
        """
        values = [self.parse_component(token) for token in tokens]

        if len(values) % 2 != 0:
            raise ValueError(
                f"Found an odd number of coordinate values: {len(values)}"
            )

        coords_list = [
            Coordinate(lat=values[i], lon=values[i + 1])
            for i in range(0, len(values), 2)
        ]

        if self.strict:
            for coord in coords_list:
                validate_coordinates(coord)

        return coords_list
