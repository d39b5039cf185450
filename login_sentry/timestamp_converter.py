"""
Timestamp conversion for syslog-style log entries.

Syslog timestamps look like "Jun 10 03:32:36" and carry no year, so the
caller supplies one. The result is a count of seconds since the Unix epoch
(computed in UTC), which makes the difference of two ordinals the exact
number of elapsed seconds.
"""

import calendar
import re
from datetime import datetime

DEFAULT_YEAR = datetime.now().year

# "<Month> <Day> <HH:MM:SS>" with a 1-2 digit day and zero-padded time
TIMESTAMP_PATTERN = re.compile(
    r"^(?P<month>[A-Za-z]{3,9})\s+(?P<day>\d{1,2})\s+(?P<time>\d{2}:\d{2}:\d{2})$"
)


MONTHS = {
    name.lower(): number
    for number, (abbr, full) in enumerate([
        ("Jan", "January"), ("Feb", "February"), ("Mar", "March"),
        ("Apr", "April"), ("May", "May"), ("Jun", "June"),
        ("Jul", "July"), ("Aug", "August"), ("Sep", "September"),
        ("Oct", "October"), ("Nov", "November"), ("Dec", "December"),
    ], start=1)
    for name in (abbr, full)
}


class TimestampError(ValueError):
    """Raised when a timestamp does not match the syslog timestamp grammar."""


def _parse(year: int, month: str, day: str, time: str) -> datetime:
    # Syslog month names are English regardless of the host locale
    month_number = MONTHS.get(month.lower())
    if month_number is None:
        raise ValueError(f"unknown month {month!r}")
    hour, minute, second = (int(part) for part in time.split(":"))
    return datetime(year, month_number, int(day), hour, minute, second)


def to_ordinal(timestamp: str, year: int = DEFAULT_YEAR) -> int:
    """
    Convert a timestamp of the form "Jun 10 03:32:36" to seconds since epoch.

    Args:
        timestamp: "Month Day HH:MM:SS"; the month may be abbreviated or full.
        year: year assumed for the timestamp, since syslog omits it.

    Returns:
        int: seconds elapsed since 1970-01-01 00:00:00 UTC

    Raises:
        TimestampError: if the timestamp cannot be parsed
    """
    if not isinstance(timestamp, str):
        raise TimestampError(f"Timestamp must be a string, got {type(timestamp).__name__}")

    match = TIMESTAMP_PATTERN.match(timestamp.strip())
    if not match:
        raise TimestampError(f"Unrecognized timestamp: {timestamp!r}")

    try:
        parsed = _parse(year, match.group('month'), match.group('day'), match.group('time'))
    except ValueError:
        raise TimestampError(f"Invalid timestamp for year {year}: {timestamp!r}")

    return calendar.timegm(parsed.timetuple())
