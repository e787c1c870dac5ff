"""Date formats used in HTTP headers."""

import re
from datetime import datetime, timedelta, timezone
from typing import Protocol

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Fixed English names; strftime/strptime would follow the process locale
WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

_RFC1123_PATTERN = re.compile(
    r"^(?P<weekday>[A-Za-z]{3}), (?P<day>[0-9]{2}) (?P<month>[A-Za-z]{3}) "
    r"(?P<year>[0-9]{4}) "
    r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2}) GMT\Z"
)


class DateCodec(Protocol):
    """Protocol for converting datetimes to and from header strings."""

    def to_string(self, value: datetime) -> str:
        """Format a datetime for a header value."""
        ...

    def to_datetime(self, text: str) -> datetime:
        """Parse a header value. Raises ValueError if malformed."""
        ...


def to_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are taken as UTC.

    Instants that fall outside datetime's range once shifted to UTC are
    clamped to datetime.min or datetime.max.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    try:
        return value.astimezone(timezone.utc)
    except OverflowError:
        offset = value.utcoffset() or timedelta(0)
        bound = datetime.min if offset > timedelta(0) else datetime.max
        return bound.replace(tzinfo=timezone.utc)


class RFC1123DateCodec:
    """RFC 1123 dates, e.g. "Sun, 06 Nov 1994 08:49:37 GMT".

    Parsing is strict: two-digit day, GMT only, English names.
    """

    def to_string(self, value: datetime) -> str:
        value = to_utc(value)
        weekday = WEEKDAYS[value.weekday()]
        month = MONTHS[value.month - 1]
        return (
            f"{weekday}, {value.day:02d} {month} {value.year:04d} "
            f"{value.hour:02d}:{value.minute:02d}:{value.second:02d} GMT"
        )

    def to_datetime(self, text: str) -> datetime:
        match = _RFC1123_PATTERN.match(text.strip())
        if match is None:
            msg = f"Not an RFC 1123 date: {text!r}"
            raise ValueError(msg)
        if match["weekday"].title() not in WEEKDAYS:
            msg = f"Unknown weekday in date: {text!r}"
            raise ValueError(msg)
        month = match["month"].title()
        if month not in MONTHS:
            msg = f"Unknown month in date: {text!r}"
            raise ValueError(msg)
        # datetime() rejects out-of-range fields with ValueError
        return datetime(
            int(match["year"]),
            MONTHS.index(month) + 1,
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            tzinfo=timezone.utc,
        )
