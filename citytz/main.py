"""Command line entry point."""

import argparse
import json
import sys
from typing import List, Optional

from citytz.config import settings
from citytz.data.loader import CityDataError
from citytz.directory import CityDirectory
from citytz.utils.logger import setup_logger

logger = setup_logger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subcommand per lookup."""
    parser = argparse.ArgumentParser(description="City timezone lookups")
    parser.add_argument(
        "--cities-file",
        type=str,
        default=None,
        help="Cities JSON file (default: bundled dataset)",
    )
    parser.add_argument(
        "--local-timezone",
        type=str,
        default=None,
        help=f"Timezone treated as local (default: {settings.local_timezone})",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, help_text in (
        ("exists", "Check whether a city exists"),
        ("info", "Show all data for a city"),
        ("timezone", "Show the timezone of a city"),
        ("utc", "Show the UTC offset of a city"),
        ("coords", "Show the coordinates of a city"),
        ("now", "Show the current time in a city"),
        ("compare", "Compare local time with the time in a city"),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument("city", help="City name (case-insensitive)")

    subparsers.add_parser("list", help="List all city names")

    country = subparsers.add_parser("country", help="List the cities of a country")
    country.add_argument("code", help="Two-letter country code")

    near = subparsers.add_parser("near", help="Find a city by coordinates")
    near.add_argument("lat", type=float)
    near.add_argument("lng", type=float)
    near.add_argument(
        "--tolerance",
        type=float,
        default=settings.coordinate_tolerance,
        help="Allowed difference per axis in degrees (default: %(default)s)",
    )

    convert = subparsers.add_parser("convert", help="Convert the current time between cities")
    convert.add_argument("source", help="Source city")
    convert.add_argument("destination", help="Destination city")
    convert.add_argument(
        "--format",
        dest="fmt",
        default=settings.default_time_format,
        help="PHP-style (Y-m-d H:i:s) or strftime pattern (default: %(default)s)",
    )

    return parser


def _emit(value) -> int:
    if value is None:
        return EXIT_NOT_FOUND
    if isinstance(value, (dict, list)):
        print(json.dumps(value, ensure_ascii=False, indent=2))
    else:
        print(value)
    return EXIT_OK


def run(directory: CityDirectory, args: argparse.Namespace) -> int:
    """Execute a parsed command against a directory."""
    command = args.command

    if command == "exists":
        found = directory.exists(args.city)
        print("yes" if found else "no")
        return EXIT_OK if found else EXIT_NOT_FOUND
    if command == "list":
        return _emit(directory.all_city_names())
    if command == "info":
        return _emit(directory.all_data(args.city))
    if command == "timezone":
        return _emit(directory.timezone_of(args.city))
    if command == "utc":
        return _emit(directory.utc_offset_of(args.city))
    if command == "coords":
        coordinates = directory.lat_lng_of(args.city)
        return _emit(coordinates.to_dict() if coordinates else None)
    if command == "country":
        names = directory.cities_by_country(args.code)
        return _emit(names if names else None)
    if command == "near":
        record = directory.find_by_coordinates(args.lat, args.lng, args.tolerance)
        return _emit(record.to_dict() if record else None)
    if command == "now":
        timestamp = directory.current_time_in_city(args.city)
        return _emit(timestamp.isoformat() if timestamp is not None else None)
    if command == "convert":
        return _emit(directory.convert_time(args.source, args.destination, args.fmt))
    if command == "compare":
        result = directory.compare_local_and_city_time(args.city)
        return _emit(result.to_dict() if result else None)

    raise ValueError(f"Unknown command: {command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main function."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "near" and args.tolerance < 0:
        parser.error("--tolerance must not be negative")

    try:
        directory = CityDirectory(
            cities_file=args.cities_file,
            local_timezone=args.local_timezone,
        )
    except CityDataError as e:
        logger.error(f"Could not load cities: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 2

    status = run(directory, args)
    if status == EXIT_NOT_FOUND:
        logger.info(f"No result for command '{args.command}'")
    return status


if __name__ == "__main__":
    sys.exit(main())
