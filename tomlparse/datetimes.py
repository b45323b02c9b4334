"""
RFC 3339 date and time values as used by TOML.

Four forms are recognized:

    1979-05-27T07:32:00Z          offset date-time  -> aware datetime
    1979-05-27T07:32:00.999999    local date-time   -> naive datetime
    1979-05-27                    local date        -> date
    07:32:00                      local time        -> time

The 'T' separator may also be a lowercase 't' or a single space.
"""

import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Union

_DATE = r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
_TIME = (
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
)
_OFFSET = r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})"

DATETIME_RE = re.compile(rf"^{_DATE}(?:[Tt ]{_TIME}{_OFFSET}?)?$")
TIME_RE = re.compile(rf"^{_TIME}$")

DateTimeValue = Union[datetime, date, time]


def parse_datetime(text: str) -> Optional[DateTimeValue]:
    """Parse a TOML date/time token, or return None if it isn't one.

    Tokens that look right but hold impossible fields (month 13,
    hour 25, offset +24:00) also return None.
    """
    match = DATETIME_RE.match(text)
    if match:
        try:
            return _build_datetime(match)
        except ValueError:
            return None

    match = TIME_RE.match(text)
    if match:
        try:
            return _build_time(match)
        except ValueError:
            return None

    return None


def _build_datetime(match) -> DateTimeValue:
    day = date(int(match["year"]), int(match["month"]), int(match["day"]))
    if match["hour"] is None:
        return day

    clock = _build_time(match)
    tzinfo = _build_offset(match["offset"])
    return datetime.combine(day, clock).replace(tzinfo=tzinfo)


def _build_time(match) -> time:
    # Sub-microsecond digits are truncated
    fraction = match["fraction"] or ""
    microsecond = int(fraction[:6].ljust(6, "0"))
    return time(
        int(match["hour"]),
        int(match["minute"]),
        int(match["second"]),
        microsecond,
    )


def _build_offset(offset: Optional[str]) -> Optional[timezone]:
    if offset is None:
        return None
    if offset in ("Z", "z"):
        return timezone.utc

    sign = -1 if offset[0] == "-" else 1
    hours, minutes = int(offset[1:3]), int(offset[4:6])
    if minutes >= 60:
        raise ValueError(f"invalid UTC offset: {offset}")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))
