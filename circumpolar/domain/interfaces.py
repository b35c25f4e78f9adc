from abc import ABC, abstractmethod
from typing import Protocol

from circumpolar.domain.models.coordinates import Coordinate
from circumpolar.domain.models.results import CalculationReport
from circumpolar.domain.models.units import Angle


class BaseDeclinationsApiClient(ABC):
    def __init__(self, api_url: str, api_key: str = ""):
        self.api_url = api_url
        self.api_key = api_key

    @abstractmethod
    async def fetch_declination(self, coordinate: Coordinate) -> Angle:
        """
        Fetch the magnetic declination (east-positive degrees) at a coordinate.
        Raises APIException when the value cannot be retrieved.
        """
        pass


class OutputFormatter(Protocol):
    """Protocol for output formatting strategies"""

    def format_result(self, report: CalculationReport) -> str | None:
        """Render a calculation report"""
        ...
