import argparse
import asyncio
import sys

from environs import Env

from circumpolar.logging_config import get_logger, setup_logging
from circumpolar.application.orchestration import (
    DeclinationService,
    OrchestrationService,
)
from circumpolar.application.services.geodesy import GeodesyEngine
from circumpolar.application.services.user_input_parser import CoordinateParser
from circumpolar.domain.constants import (
    DECLINATION_API_URL,
    DECLINATION_RESULT_FORMAT,
    DECLINATION_TIMEOUT,
)
from circumpolar.domain.exceptions import CircumpolarException
from circumpolar.domain.interfaces import OutputFormatter
from circumpolar.domain.models.coordinates import (
    CalculationSettings,
    SphereParameters,
)
from circumpolar.domain.models.units import DistanceUnit
from circumpolar.domain.validators import validate_radius
from circumpolar.infrastructure.api.clients import AsyncMagDeclinationApiClient
from circumpolar.infrastructure.output.formatters import (
    ConsoleOutputFormatter,
    JSONOutputFormatter,
)

logger = get_logger(__name__)

USAGE = """
circumpolar latA lonA latX lonX [latY lonY latZ lonZ...]
    where lat/lon values are decimal with negative S and W values"""

# Options that take a value
_VALUE_OPTIONS = ("--radius",)


class AppDependencies:
    """Container for application dependencies."""

    def __init__(self, env: Env):
        self.engine = GeodesyEngine()
        self.declinations_api_client = AsyncMagDeclinationApiClient(
            env.str("DECLINATION_API_URL", DECLINATION_API_URL),
            env.str("DECLINATION_API_KEY", ""),
            result_format=env.str(
                "DECLINATION_RESULT_FORMAT", DECLINATION_RESULT_FORMAT
            ).lower(),
            timeout=env.float("DECLINATION_TIMEOUT", DECLINATION_TIMEOUT),
        )


def get_output_formatter(output_json: bool) -> OutputFormatter:
    """Factory for creating output formatters."""
    if output_json:
        return JSONOutputFormatter()
    return ConsoleOutputFormatter()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="circumpolar",
        description="Great-circle distances and headings from the first coordinate to the others",
        allow_abbrev=False,
    )
    parser.add_argument(
        "coordinates",
        nargs="*",
        metavar="LAT LON",
        help="Coordinate pairs; the first pair is the reference point",
    )
    parser.add_argument(
        "--json",
        dest="output_json",
        action="store_true",
        help="Output results as JSON",
    )
    units = parser.add_mutually_exclusive_group()
    units.add_argument(
        "--kilo",
        action="store_true",
        help="Output station distances in kilometers",
    )
    units.add_argument(
        "--mile",
        action="store_true",
        help="Output station distances in statute miles",
    )
    parser.add_argument(
        "--radius",
        type=float,
        default=None,
        help="Assign the sphere's radius to this value instead of Earth's mean radius in the selected unit",
    )
    parser.add_argument(
        "--home",
        action="store_true",
        help="Stay home. Don't query NOAA for declination",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject latitudes outside [-90, 90] and longitudes outside [-180, 180]",
    )
    return parser


def _is_coordinate_value(token: str) -> bool:
    try:
        CoordinateParser().parse_component(token)
    except ValueError:
        return False
    return True


def parse_arguments(
    parser: argparse.ArgumentParser, argv: list[str] | None = None
) -> argparse.Namespace:
    """
    Parse command line flags, keeping every coordinate token positional.

    argparse only recognizes plain negative numbers as values, so signed
    DMS ("-33:52:10") and exponent ("-1e1") tokens would be taken for
    unknown options. Tokens are split here instead: anything starting with
    "-" that is not a coordinate value is an option, everything else is a
    coordinate in input order.
    """
    if argv is None:
        argv = sys.argv[1:]

    options: list[str] = []
    coordinates: list[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token == "--":
            coordinates.extend(tokens)
        elif token.startswith("-") and not _is_coordinate_value(token):
            if token in _VALUE_OPTIONS:
                value = next(tokens, None)
                # "--radius=VALUE" keeps signed values attached to the flag
                options.append(token if value is None else f"{token}={value}")
            else:
                options.append(token)
        else:
            coordinates.append(token)

    args = parser.parse_args(options)
    args.coordinates = coordinates
    return args


def build_settings(args: argparse.Namespace) -> CalculationSettings:
    """
    Translate command line flags into calculation settings.
    An explicit radius always wins over the unit's default radius;
    the unit label follows --kilo/--mile either way.
    """
    if args.kilo:
        unit = DistanceUnit.KILOMETERS
    elif args.mile:
        unit = DistanceUnit.STATUTE_MILES
    else:
        unit = DistanceUnit.NAUTICAL_MILES

    if args.radius is not None:
        validate_radius(args.radius)

    return CalculationSettings(
        sphere=SphereParameters.for_unit(unit, args.radius),
        output_json=args.output_json,
        use_declination=not args.home,
        strict=args.strict,
    )


async def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parse_arguments(parser, argv)

    # Load environment variables as early as possible within main()
    env = Env()
    env.read_env(".env")

    setup_logging(env)

    # Did they pass ANYTHING?
    if len(args.coordinates) < 4:
        print(USAGE)
        parser.print_usage()
        return 1

    try:
        settings = build_settings(args)
        coordinates = CoordinateParser(strict=settings.strict).parse_pairs(
            args.coordinates
        )
        deps = AppDependencies(env)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    declination_service = (
        DeclinationService(deps.declinations_api_client)
        if settings.use_declination
        else None
    )
    orchestrator = OrchestrationService(
        engine=deps.engine,
        declination_service=declination_service,
        output_formatter=get_output_formatter(settings.output_json),
    )

    try:
        await orchestrator.process(coordinates, settings)
    except CircumpolarException as e:
        logger.error(f"Calculation failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
