from unittest.mock import MagicMock

import httpx
import pytest

from circumpolar.application.orchestration import (
    DeclinationService,
    OrchestrationService,
)
from circumpolar.application.services.geodesy import GeodesyEngine
from circumpolar.domain.exceptions import InvalidResponseException
from circumpolar.domain.models.coordinates import (
    CalculationSettings,
    Coordinate,
    SphereParameters,
)
from circumpolar.domain.models.units import DistanceUnit
from tests.mocks import FailingMagDeclinationApiClient, MockMagDeclinationApiClient

COORDINATES = [Coordinate(51.5, -0.1), Coordinate(40.7, -74.0), Coordinate(48.85, 2.35)]


@pytest.fixture
def km_settings():
    return CalculationSettings(
        sphere=SphereParameters.for_unit(DistanceUnit.KILOMETERS)
    )


class TestDeclinationService:
    @pytest.mark.asyncio
    async def test_returns_declination(self):
        client = MockMagDeclinationApiClient(declination=-1.5)
        assert await DeclinationService(client).lookup(COORDINATES[0]) == -1.5
        assert client.calls == [COORDINATES[0]]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            InvalidResponseException("No declination in response"),
            httpx.ConnectError("connection refused"),
            httpx.ReadTimeout("timed out"),
        ],
    )
    async def test_failure_degrades_to_none(self, error, caplog):
        client = FailingMagDeclinationApiClient(error)
        assert await DeclinationService(client).lookup(COORDINATES[0]) is None
        assert client.calls == 1
        assert "Magnetic declination unavailable" in caplog.text


class TestOrchestrationService:
    @pytest.mark.asyncio
    async def test_process_builds_report(self, km_settings):
        client = MockMagDeclinationApiClient(declination=2.0)
        orchestrator = OrchestrationService(
            engine=GeodesyEngine(), declination_service=DeclinationService(client)
        )

        report = await orchestrator.process(COORDINATES, km_settings)

        assert report.reference == COORDINATES[0]
        assert report.sphere.unit is DistanceUnit.KILOMETERS
        assert report.declination == 2.0
        assert [r.index for r in report.results] == [0, 1, 2]
        assert report.results[1].distance == pytest.approx(5570.0, rel=0.01)
        # Declination is looked up once, for the reference only
        assert client.calls == [COORDINATES[0]]

    @pytest.mark.asyncio
    async def test_declination_does_not_change_results(self, km_settings):
        with_declination = await OrchestrationService(
            GeodesyEngine(), DeclinationService(MockMagDeclinationApiClient(15.0))
        ).process(COORDINATES, km_settings)
        without = await OrchestrationService(GeodesyEngine()).process(
            COORDINATES, km_settings
        )

        assert [(r.distance, r.heading) for r in with_declination.results] == [
            (r.distance, r.heading) for r in without.results
        ]
        assert without.declination is None

    @pytest.mark.asyncio
    async def test_declination_disabled(self, km_settings):
        client = MockMagDeclinationApiClient(declination=2.0)
        settings = CalculationSettings(sphere=km_settings.sphere, use_declination=False)

        report = await OrchestrationService(
            GeodesyEngine(), DeclinationService(client)
        ).process(COORDINATES, settings)

        assert report.declination is None
        assert client.calls == []

    @pytest.mark.asyncio
    async def test_failed_lookup_still_reports(self, km_settings):
        client = FailingMagDeclinationApiClient()
        report = await OrchestrationService(
            GeodesyEngine(), DeclinationService(client)
        ).process(COORDINATES, km_settings)

        assert report.declination is None
        assert len(report.results) == 3

    @pytest.mark.asyncio
    async def test_formatter_output_is_printed(self, km_settings, capsys):
        formatter = MagicMock()
        formatter.format_result.return_value = "[]"

        report = await OrchestrationService(
            GeodesyEngine(), output_formatter=formatter
        ).process(COORDINATES, km_settings)

        formatter.format_result.assert_called_once_with(report)
        assert capsys.readouterr().out == "[]\n"
