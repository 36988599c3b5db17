"""City directory: lookups over the cities dataset and timezone arithmetic."""

from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

import pandas as pd
import pytz

from citytz.config import settings
from citytz.data.loader import CityDataError, build_records, load_cities
from citytz.data.models import (
    CityRecord,
    ComparisonResult,
    Coordinates,
    TimeDifference,
)
from citytz.utils.date_format import format_datetime
from citytz.utils.logger import setup_logger

logger = setup_logger(__name__)

DATETIME_STRING_FORMAT = "Y-m-d H:i:s"


def utcnow() -> pd.Timestamp:
    """Current instant as an aware UTC timestamp."""
    return pd.Timestamp.now(tz=pytz.utc)


def _get_zone(name: str) -> pytz.BaseTzInfo:
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError as e:
        raise CityDataError(f"Unknown timezone: {name}") from e


class CityDirectory:
    """Read-only directory of cities loaded once at construction."""

    def __init__(
        self,
        cities_file: Union[str, Path, None] = None,
        local_timezone: Optional[str] = None,
        records: Optional[Tuple[CityRecord, ...]] = None,
    ):
        """
        Initialize the directory.

        Args:
            cities_file: Dataset path, defaults to the configured or bundled file
            local_timezone: IANA zone used as local time in comparisons
            records: Already parsed records, skips reading any file

        Raises:
            CityDataError: If the dataset cannot be loaded or the local
                timezone is unknown
        """
        self.local_timezone = local_timezone or settings.local_timezone
        self._local_zone = _get_zone(self.local_timezone)

        if records is None:
            records = load_cities(cities_file or settings.cities_file)
        self._records = tuple(records)

    @classmethod
    def from_records(
        cls, entries: Iterable[Any], local_timezone: Optional[str] = None
    ) -> "CityDirectory":
        """Build a directory from CityRecords or raw dataset dicts."""
        return cls(local_timezone=local_timezone, records=build_records(entries))

    @property
    def records(self) -> Tuple[CityRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CityRecord]:
        return iter(self._records)

    # Lookups

    def exists(self, name: str) -> bool:
        """Check if a city exists in the dataset."""
        return any(record.matches_name(name) for record in self._records)

    def all_city_names(self) -> List[str]:
        """All city names in dataset order, duplicates included."""
        return [record.name for record in self._records]

    def find_by_name(self, name: str) -> Optional[CityRecord]:
        """First city whose name matches case-insensitively."""
        for record in self._records:
            if record.matches_name(name):
                return record
        logger.debug(f"City not found: {name}")
        return None

    def all_data(self, name: str) -> Optional[Dict[str, Any]]:
        record = self.find_by_name(name)
        return record.to_dict() if record else None

    def timezone_of(self, name: str) -> Optional[str]:
        record = self.find_by_name(name)
        return record.timezone if record else None

    def utc_offset_of(self, name: str) -> Optional[str]:
        record = self.find_by_name(name)
        return record.utc if record else None

    def lat_lng_of(self, name: str) -> Optional[Coordinates]:
        record = self.find_by_name(name)
        return record.coordinates if record else None

    def cities_by_country(self, code: str) -> List[str]:
        """Names of the cities in a country, matched case-insensitively."""
        return [record.name for record in self._records if record.matches_country(code)]

    def find_by_coordinates(
        self, lat: float, lng: float, tolerance: Optional[float] = None
    ) -> Optional[CityRecord]:
        """
        First city inside the box ``lat ± tolerance, lng ± tolerance``.

        Each axis is compared on its own; this is not a distance search.

        Args:
            lat: Latitude in decimal degrees
            lng: Longitude in decimal degrees
            tolerance: Allowed difference per axis, defaults to 0.1

        Returns:
            Matching city, or None
        """
        if tolerance is None:
            tolerance = settings.coordinate_tolerance
        if tolerance < 0:
            raise ValueError(f"Invalid tolerance: {tolerance}")

        for record in self._records:
            if record.within(lat, lng, tolerance):
                return record
        logger.debug(f"No city within {tolerance} of ({lat}, {lng})")
        return None

    # Time

    def current_time_in_city(self, name: str) -> Optional[pd.Timestamp]:
        """Current time in the city's timezone, or None if the city is unknown."""
        timezone = self.timezone_of(name)
        if timezone is None:
            return None
        return utcnow().tz_convert(pytz.timezone(timezone))

    def convert_time(
        self, source_city: str, destination_city: str, fmt: Optional[str] = None
    ) -> Optional[str]:
        """
        Convert the current time in one city to another city's timezone.

        The converted moment is always "now"; no arbitrary timestamp is taken.

        Args:
            source_city: Name of the source city
            destination_city: Name of the destination city
            fmt: PHP-style or strftime pattern for the result

        Returns:
            Formatted destination time, or None if either city is unknown
        """
        source_timezone = self.timezone_of(source_city)
        destination_timezone = self.timezone_of(destination_city)
        if source_timezone is None or destination_timezone is None:
            return None

        source_time = utcnow().tz_convert(pytz.timezone(source_timezone))
        destination_time = source_time.tz_convert(pytz.timezone(destination_timezone))

        if fmt is None:
            fmt = settings.default_time_format
        return format_datetime(destination_time, fmt)

    def compare_local_and_city_time(self, name: str) -> Optional[ComparisonResult]:
        """
        Compare local time with the time in a city.

        Both sides are rendered from the same instant; the difference is the
        magnitude between the two wall-clock readings at second resolution.
        """
        city_timezone = self.timezone_of(name)
        if city_timezone is None:
            return None

        now = utcnow().floor("s")
        local_time = now.tz_convert(self._local_zone)
        city_time = now.tz_convert(pytz.timezone(city_timezone))

        diff = abs(local_time.tz_localize(None) - city_time.tz_localize(None))
        components = diff.components

        return ComparisonResult(
            local_timezone=self.local_timezone,
            local_datetime=format_datetime(local_time, DATETIME_STRING_FORMAT),
            city_timezone=city_timezone,
            city_datetime=format_datetime(city_time, DATETIME_STRING_FORMAT),
            time_difference=TimeDifference(
                hours=components.days * 24 + components.hours,
                minutes=components.minutes,
                seconds=components.seconds,
            ),
        )


_directory: Optional[CityDirectory] = None


def get_directory() -> CityDirectory:
    """Process-wide directory built from the settings on first use."""
    global _directory
    if _directory is None:
        _directory = CityDirectory()
    return _directory
