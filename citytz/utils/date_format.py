"""Date formatting with PHP/Carbon-style patterns.

Patterns such as ``"Y-m-d H:i:s"`` use one letter per date component, a
backslash escapes the following character and every other character is copied
verbatim. Patterns containing an unescaped ``%`` are handed to ``strftime``/``strptime``
unchanged, so callers can use either convention.
"""

import calendar
from datetime import datetime, timedelta
from typing import Callable, Dict

DAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)

DEFAULT_FORMAT = "Y-m-d H:i:s"


def _offset(value: datetime) -> timedelta:
    return value.utcoffset() or timedelta(0)


def _format_offset(value: datetime, colon: bool) -> str:
    total = int(_offset(value).total_seconds())
    sign = "-" if total < 0 else "+"
    hours, remainder = divmod(abs(total), 3600)
    separator = ":" if colon else ""
    return f"{sign}{hours:02d}{separator}{remainder // 60:02d}"


def zone_name(value: datetime) -> str:
    """IANA identifier of an aware datetime, falling back to its abbreviation."""
    tz = value.tzinfo
    if tz is None:
        return "UTC"
    return getattr(tz, "zone", None) or getattr(tz, "key", None) or value.tzname() or "UTC"


def _ordinal_suffix(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def _twelve_hour(value: datetime) -> int:
    return value.hour % 12 or 12


_RENDERERS: Dict[str, Callable[[datetime], str]] = {
    # Day
    "d": lambda v: f"{v.day:02d}",
    "D": lambda v: DAY_NAMES[v.weekday()][:3],
    "j": lambda v: str(v.day),
    "l": lambda v: DAY_NAMES[v.weekday()],
    "N": lambda v: str(v.isoweekday()),
    "S": lambda v: _ordinal_suffix(v.day),
    "w": lambda v: str(v.isoweekday() % 7),
    "z": lambda v: str(v.timetuple().tm_yday - 1),
    # Week
    "W": lambda v: f"{v.isocalendar()[1]:02d}",
    # Month
    "F": lambda v: MONTH_NAMES[v.month - 1],
    "m": lambda v: f"{v.month:02d}",
    "M": lambda v: MONTH_NAMES[v.month - 1][:3],
    "n": lambda v: str(v.month),
    "t": lambda v: str(calendar.monthrange(v.year, v.month)[1]),
    # Year
    "L": lambda v: "1" if calendar.isleap(v.year) else "0",
    "o": lambda v: str(v.isocalendar()[0]),
    "Y": lambda v: f"{v.year:04d}",
    "y": lambda v: f"{v.year % 100:02d}",
    # Time
    "a": lambda v: "am" if v.hour < 12 else "pm",
    "A": lambda v: "AM" if v.hour < 12 else "PM",
    "g": lambda v: str(_twelve_hour(v)),
    "G": lambda v: str(v.hour),
    "h": lambda v: f"{_twelve_hour(v):02d}",
    "H": lambda v: f"{v.hour:02d}",
    "i": lambda v: f"{v.minute:02d}",
    "s": lambda v: f"{v.second:02d}",
    "u": lambda v: f"{v.microsecond:06d}",
    "v": lambda v: f"{v.microsecond // 1000:03d}",
    # Timezone
    "e": zone_name,
    "I": lambda v: "1" if v.dst() else "0",
    "O": lambda v: _format_offset(v, colon=False),
    "P": lambda v: _format_offset(v, colon=True),
    "p": lambda v: "Z" if not _offset(v) else _format_offset(v, colon=True),
    "T": lambda v: v.tzname() or "UTC",
    "Z": lambda v: str(int(_offset(v).total_seconds())),
    # Full date/time
    "c": lambda v: format_datetime(v, "Y-m-d\\TH:i:sP"),
    "r": lambda v: format_datetime(v, "D, d M Y H:i:s O"),
    "U": lambda v: str(int(v.timestamp())),
}

# strptime directives for the characters that can be read back unambiguously.
_PARSE_DIRECTIVES = {
    "d": "%d",
    "D": "%a",
    "j": "%d",
    "l": "%A",
    "N": "%u",
    "w": "%w",
    "F": "%B",
    "m": "%m",
    "M": "%b",
    "n": "%m",
    "Y": "%Y",
    "y": "%y",
    "a": "%p",
    "A": "%p",
    "g": "%I",
    "G": "%H",
    "h": "%I",
    "H": "%H",
    "i": "%M",
    "s": "%S",
    "u": "%f",
    "O": "%z",
    "P": "%z",
    "p": "%z",
    "c": "%Y-%m-%dT%H:%M:%S%z",
    "r": "%a, %d %b %Y %H:%M:%S %z",
}


def is_strftime_pattern(fmt: str) -> bool:
    """True when the pattern holds a % that is not escaped with a backslash."""
    escaped = False
    for char in fmt:
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == "%":
            return True
    return False


def format_datetime(value: datetime, fmt: str = DEFAULT_FORMAT) -> str:
    """
    Render a datetime (or pandas Timestamp) with a date pattern.

    Args:
        value: Datetime to render, aware datetimes render their own offset
        fmt: PHP-style pattern, or a strftime pattern when it contains ``%``

    Returns:
        Formatted string
    """
    if is_strftime_pattern(fmt):
        return value.strftime(fmt)

    parts = []
    escaped = False
    for char in fmt:
        if escaped:
            parts.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in _RENDERERS:
            parts.append(_RENDERERS[char](value))
        else:
            parts.append(char)
    return "".join(parts)


def to_strftime(fmt: str) -> str:
    """
    Translate a PHP-style pattern into the equivalent strptime pattern.

    Raises:
        ValueError: If the pattern uses a character that cannot be parsed back
    """
    parts = []
    escaped = False
    for char in fmt:
        if escaped:
            parts.append("%%" if char == "%" else char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in _PARSE_DIRECTIVES:
            parts.append(_PARSE_DIRECTIVES[char])
        elif char in _RENDERERS:
            raise ValueError(f"Format character '{char}' cannot be parsed")
        else:
            parts.append("%%" if char == "%" else char)
    return "".join(parts)


def parse_datetime(text: str, fmt: str = DEFAULT_FORMAT) -> datetime:
    """Parse text produced by ``format_datetime`` with the same pattern."""
    if is_strftime_pattern(fmt):
        return datetime.strptime(text, fmt)
    return datetime.strptime(text, to_strftime(fmt))
