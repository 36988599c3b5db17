"""Data models for cities, coordinates and time comparisons."""

from dataclasses import asdict, dataclass
from typing import Any, Dict

import pytz


@dataclass(frozen=True)
class CityRecord:
    """City metadata as stored in the dataset."""

    name: str
    country: str
    timezone: str
    utc: str
    lat: float
    lng: float

    def __post_init__(self):
        """Validate city data."""
        if not -90 <= self.lat <= 90:
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not -180 <= self.lng <= 180:
            raise ValueError(f"Invalid longitude: {self.lng}")
        try:
            pytz.timezone(self.timezone)
        except pytz.UnknownTimeZoneError:
            raise ValueError(f"Unknown timezone: {self.timezone}") from None

    def matches_name(self, name: str) -> bool:
        return self.name.lower() == name.lower()

    def matches_country(self, code: str) -> bool:
        return self.country.upper() == code.upper()

    def within(self, lat: float, lng: float, tolerance: float) -> bool:
        """Per-axis box match around (lat, lng)."""
        return abs(self.lat - lat) <= tolerance and abs(self.lng - lng) <= tolerance

    @property
    def coordinates(self) -> "Coordinates":
        return Coordinates(lat=self.lat, lng=self.lng)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Coordinates:
    """Latitude/longitude pair."""

    lat: float
    lng: float

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class TimeDifference:
    """Non-negative wall-clock difference; whole days are counted in hours."""

    hours: int
    minutes: int
    seconds: int

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class ComparisonResult:
    """Local time next to a city's time for the same instant."""

    local_timezone: str
    local_datetime: str
    city_timezone: str
    city_datetime: str
    time_difference: TimeDifference

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
