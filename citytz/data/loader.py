"""Loading the bundled cities dataset."""

import json
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple, Union

from citytz.data.models import CityRecord
from citytz.utils.logger import setup_logger

logger = setup_logger(__name__)

BUNDLED_CITIES_FILE = Path(__file__).resolve().parent / "cities.json"

REQUIRED_FIELDS = ("name", "country", "timezone", "utc", "lat", "lng")


class CityDataError(RuntimeError):
    """Raised when the cities dataset is missing or cannot be parsed."""


def parse_record(raw: Any, position: int = 0) -> Optional[CityRecord]:
    """
    Build a CityRecord from one raw dataset entry.

    Malformed entries are logged and skipped.

    Args:
        raw: Decoded JSON object, or a CityRecord which is kept as is
        position: Index of the entry in the file, used in log messages

    Returns:
        CityRecord, or None if the entry is malformed
    """
    if isinstance(raw, CityRecord):
        return raw

    if not isinstance(raw, dict):
        logger.warning(f"Skipping city entry #{position}: not an object")
        return None

    missing = [field for field in REQUIRED_FIELDS if raw.get(field) is None]
    if missing:
        logger.warning(f"Skipping city entry #{position}: missing {', '.join(missing)}")
        return None

    try:
        return CityRecord(
            name=str(raw["name"]),
            country=str(raw["country"]),
            timezone=str(raw["timezone"]),
            utc=str(raw["utc"]),
            lat=float(raw["lat"]),
            lng=float(raw["lng"]),
        )
    except (TypeError, ValueError) as e:
        logger.warning(f"Skipping city entry #{position} ({raw['name']}): {e}")
        return None


def build_records(entries: Iterable[Any]) -> Tuple[CityRecord, ...]:
    """Parse raw entries in order, dropping malformed ones."""
    records: List[CityRecord] = []
    for position, raw in enumerate(entries):
        record = parse_record(raw, position)
        if record is not None:
            records.append(record)
    return tuple(records)


def load_cities(path: Union[str, Path, None] = None) -> Tuple[CityRecord, ...]:
    """
    Load city records from a JSON file.

    Args:
        path: Dataset location, defaults to the file bundled with the package

    Returns:
        Records in file order

    Raises:
        CityDataError: If the file is missing, unreadable, not a JSON array,
            or holds entries of which none are valid
    """
    path = Path(path) if path else BUNDLED_CITIES_FILE

    if not path.is_file():
        logger.error(f"Cities data file not found: {path}")
        raise CityDataError(f"Cities data file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            entries = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Error reading cities data from {path}: {e}")
        raise CityDataError(f"Cities data file could not be parsed: {path}") from e

    if not isinstance(entries, list):
        logger.error(f"Cities data in {path} is not a JSON array")
        raise CityDataError(f"Cities data must be a JSON array: {path}")

    records = build_records(entries)
    if entries and not records:
        raise CityDataError(f"No valid city records in {path}")

    skipped = len(entries) - len(records)
    if skipped:
        logger.warning(f"Skipped {skipped} malformed city entries in {path}")
    logger.info(f"Loaded {len(records)} cities from {path}")

    return records
