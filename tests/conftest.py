"""Pytest configuration and fixtures."""

import json

import pandas as pd
import pytest

from citytz.data.models import CityRecord
from citytz.directory import CityDirectory


SAMPLE_CITIES = [
    {"name": "Andorra la Vella", "country": "AD", "timezone": "Europe/Andorra", "utc": "+01:00", "lat": 42.50779, "lng": 1.52109},
    {"name": "Escaldes-Engordany", "country": "AD", "timezone": "Europe/Andorra", "utc": "+01:00", "lat": 42.50729, "lng": 1.53414},
    {"name": "Los Angeles", "country": "US", "timezone": "America/Los_Angeles", "utc": "-08:00", "lat": 34.05223, "lng": -118.24368},
    {"name": "London", "country": "GB", "timezone": "Europe/London", "utc": "+00:00", "lat": 51.50853, "lng": -0.12574},
    {"name": "Semarang", "country": "ID", "timezone": "Asia/Jakarta", "utc": "+07:00", "lat": -6.9932, "lng": 110.4203},
    {"name": "Kathmandu", "country": "NP", "timezone": "Asia/Kathmandu", "utc": "+05:45", "lat": 27.70169, "lng": 85.3206},
    {"name": "San Jose", "country": "US", "timezone": "America/Los_Angeles", "utc": "-08:00", "lat": 37.33939, "lng": -121.89496},
    {"name": "San Jose", "country": "CR", "timezone": "America/Costa_Rica", "utc": "-06:00", "lat": 9.93333, "lng": -84.08333},
    {"name": "Honolulu", "country": "us", "timezone": "Pacific/Honolulu", "utc": "-10:00", "lat": 21.30694, "lng": -157.85833},
    {"name": "Kiritimati", "country": "KI", "timezone": "Pacific/Kiritimati", "utc": "+14:00", "lat": 1.87094, "lng": -157.36298},
]

# 2024-01-15 is a Monday, outside daylight saving time in the northern hemisphere.
WINTER_NOON_UTC = pd.Timestamp("2024-01-15 12:00:00", tz="UTC")
SUMMER_NOON_UTC = pd.Timestamp("2024-07-01 12:00:00", tz="UTC")


@pytest.fixture
def sample_entries():
    """Raw dataset entries."""
    return [dict(entry) for entry in SAMPLE_CITIES]


@pytest.fixture
def sample_record():
    """Sample city for testing."""
    return CityRecord(
        name="Semarang",
        country="ID",
        timezone="Asia/Jakarta",
        utc="+07:00",
        lat=-6.9932,
        lng=110.4203,
    )


@pytest.fixture
def cities_file(tmp_path, sample_entries):
    """Sample dataset written to a temporary JSON file."""
    path = tmp_path / "cities.json"
    path.write_text(json.dumps(sample_entries), encoding="utf-8")
    return path


@pytest.fixture
def directory(cities_file):
    """Directory over the sample dataset with UTC as local time."""
    return CityDirectory(cities_file=cities_file, local_timezone="UTC")


@pytest.fixture(scope="session")
def bundled_directory():
    """Directory over the dataset shipped with the package."""
    return CityDirectory(local_timezone="UTC")


@pytest.fixture
def winter_noon():
    return WINTER_NOON_UTC


@pytest.fixture
def summer_noon():
    return SUMMER_NOON_UTC
