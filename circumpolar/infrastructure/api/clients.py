import json
import re
import xml.dom.minidom
from datetime import datetime
from typing import Any, cast
from xml.parsers.expat import ExpatError

from httpx import AsyncClient, QueryParams, Response, Timeout

from circumpolar.domain.constants import (
    DECLINATION_CONNECT_TIMEOUT,
    DECLINATION_MODEL,
    DECLINATION_RESULT_FORMAT,
    DECLINATION_TIMEOUT,
)
from circumpolar.domain.exceptions import APIException, InvalidResponseException
from circumpolar.domain.interfaces import BaseDeclinationsApiClient
from circumpolar.domain.models.coordinates import Coordinate
from circumpolar.domain.models.units import Angle, Degrees
from circumpolar.logging_config import get_logger

logger = get_logger(__name__)


class AsyncMagDeclinationApiClient(BaseDeclinationsApiClient):
    """
    Client for the NOAA geomagnetic declination calculator.

    One request per call, no retries. The timeout bounds the whole request.
    """

    def __init__(
        self,
        api_url: str,
        api_key: str = "",
        result_format: str = DECLINATION_RESULT_FORMAT,
        timeout: float = DECLINATION_TIMEOUT,
        model: str = DECLINATION_MODEL,
    ):
        super().__init__(api_url, api_key)
        if result_format not in ("json", "xml"):
            raise ValueError(
                f"Unsupported declination result format: {result_format!r}"
            )
        self.result_format = result_format
        self.timeout = timeout
        self.model = model

    @staticmethod
    def _parse_json(content: bytes) -> Angle:
        """
        Get the declination of the first result record.
        """
        try:
            data: Any = json.loads(content)
            declination = float(data["result"][0]["declination"])
        except json.JSONDecodeError as e:
            raise InvalidResponseException(f"Malformed JSON response: {e}") from e
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise InvalidResponseException(
                f"No declination in response: {type(e).__name__}: {e}"
            ) from e

        return Angle(Degrees(declination))

    @staticmethod
    def _parse_xml(content: bytes) -> Angle:
        """
        Process XML file to get only declination info
        """

        def get_text(nodelist: list[xml.dom.minidom.Node]) -> str:
            rc = []
            for node in nodelist:
                if node.nodeType == node.TEXT_NODE:
                    if node.nodeValue is not None:
                        rc.append(node.nodeValue)
            return "".join(rc)

        try:
            dom = xml.dom.minidom.parseString(content)
        except ExpatError as e:
            raise InvalidResponseException(f"Malformed XML response: {e}") from e

        elements = dom.getElementsByTagName("declination")
        if not elements:
            raise InvalidResponseException("No declination in response")

        my_string = get_text(
            cast(list[xml.dom.minidom.Node], elements[0].childNodes)
        )
        # At this point the string still contains some formatting, this removes it
        numbers = re.findall(r"[-+]?(?:\d*\.\d+|\d+)", my_string)
        if not numbers:
            raise InvalidResponseException(
                f"Cannot read declination from {my_string.strip()!r}"
            )
        return Angle(Degrees(float(numbers[0])))

    def _build_params(self, coordinate: Coordinate) -> QueryParams:
        params: dict[str, Any] = {
            "lat1": coordinate.lat,
            "lon1": coordinate.lon,
            "model": self.model,
            "magneticComponent": "d",
            "resultFormat": self.result_format,
            "startMonth": datetime.now().month,
        }
        if self.api_key:
            params["key"] = self.api_key
        return QueryParams(params)

    @staticmethod
    def _raise_for_status(response: Response) -> None:
        if response.is_success:
            return

        try:
            error_data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            error_data = {"message": response.text}
        if not isinstance(error_data, dict):
            error_data = {"message": str(error_data)}

        raise APIException(
            f"{response.status_code} - {': '.join(str(v) for v in error_data.values())}"
        )

    async def declination_api_request(self, coordinate: Coordinate) -> Angle:
        """Magnet Declination API request with httpx"""

        # Configure timeout with connect and read timeouts
        timeout_config = Timeout(
            self.timeout, connect=min(DECLINATION_CONNECT_TIMEOUT, self.timeout)
        )

        async with AsyncClient(timeout=timeout_config, follow_redirects=True) as client:
            request = client.build_request(
                "GET", self.api_url, params=self._build_params(coordinate)
            )
            logger.info(f"HTTP Request: {request.method} {request.url}")
            response = await client.send(request)
            logger.info(f"HTTP Response: {response.status_code}")

            self._raise_for_status(response)

            content = await response.aread()
            if self.result_format == "xml":
                return self._parse_xml(content)
            return self._parse_json(content)

    async def fetch_declination(self, coordinate: Coordinate) -> Angle:
        """
        Retrieves the magnetic declination at the given coordinate.
        """
        logger.info("Retrieving magnet declination data...")
        declination = await self.declination_api_request(coordinate)
        logger.debug(f"Declination at {coordinate.lat}, {coordinate.lon}: {declination}")
        return declination
