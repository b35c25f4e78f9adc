"""Orchestration service (coordinates workflow with dependency injection)"""

from collections.abc import Sequence
from typing import Optional

import httpx

from circumpolar.application.services.geodesy import GeodesyEngine
from circumpolar.domain.exceptions import APIException
from circumpolar.domain.interfaces import BaseDeclinationsApiClient, OutputFormatter
from circumpolar.domain.models.coordinates import CalculationSettings, Coordinate
from circumpolar.domain.models.results import CalculationReport
from circumpolar.domain.models.units import Angle
from circumpolar.logging_config import get_logger

logger = get_logger(__name__)


class DeclinationService:
    """
    Looks up magnetic declination and degrades to "no value" on failure.
    """

    def __init__(self, declinations_api_client: BaseDeclinationsApiClient):
        self.declinations_api_client = declinations_api_client

    async def lookup(self, coordinate: Coordinate) -> Angle | None:
        """
        Fetch the declination once. Any API or network failure is logged and
        returned as None so distances and bearings are still reported.
        """
        try:
            return await self.declinations_api_client.fetch_declination(coordinate)
        except (APIException, httpx.HTTPError) as e:
            logger.warning(
                f"Magnetic declination unavailable: {type(e).__name__}: {e}"
            )
            return None


class OrchestrationService:
    """
    Coordinates the complete calculation workflow.

    Uses dependency injection to decouple components and enable testing.
    All I/O dependencies (declination lookup, formatters) are injected.
    """

    def __init__(
        self,
        engine: GeodesyEngine,
        declination_service: Optional[DeclinationService] = None,
        output_formatter: Optional[OutputFormatter] = None,
    ):
        """
        Initialize orchestration service with injected dependencies.

        Args:
            engine: Distance and bearing calculator
            declination_service: Optional magnetic declination lookup
            output_formatter: Optional formatter for the report
        """
        self.engine = engine
        self.declination_service = declination_service
        self.output_formatter = output_formatter

    async def process(
        self,
        coordinates: Sequence[Coordinate],
        settings: CalculationSettings,
    ) -> CalculationReport:
        """
        Execute complete calculation workflow.

        Steps:
        1. Compute distances and bearings from the first coordinate
        2. Look up magnetic declination at the reference (if enabled)
        3. Format output (if formatter provided)

        Returns:
            CalculationReport: Complete result (pure data)
        """
        sphere = settings.sphere
        results = self.engine.compute_all(coordinates, sphere.radius)

        declination: Angle | None = None
        if settings.use_declination and self.declination_service:
            declination = await self.declination_service.lookup(coordinates[0])

        report = CalculationReport(
            reference=coordinates[0],
            sphere=sphere,
            results=results,
            declination=declination,
        )

        if self.output_formatter:
            output = self.output_formatter.format_result(report)
            if output is not None:
                print(output)

        return report
