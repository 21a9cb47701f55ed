"""
Time formatting helpers.

Renders instants in the RFC 822 layout with a numeric zone
(``02 Jan 06 15:04 -0700``) and parses them back. Month names are always
English so the output does not depend on the process locale.
"""

import re
from datetime import datetime, timedelta, timezone

RFC822Z_FORMAT: str = "%d %b %y %H:%M %z"

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_RFC822Z_RE = re.compile(
    r"^(?P<day>\d{2}) (?P<month>[A-Z][a-z]{2}) (?P<year>\d{2}) "
    r"(?P<hour>\d{2}):(?P<minute>\d{2}) (?P<sign>[+-])(?P<oh>\d{2})(?P<om>\d{2})$"
)


def now() -> datetime:
    """Return the current wall-clock time in the local zone."""
    return datetime.now().astimezone()


def format_time(moment: datetime) -> str:
    """
    Render an aware datetime as ``DD Mon YY HH:MM +ZZZZ``.

    Raises:
        ValueError: if ``moment`` carries no UTC offset.
    """
    offset = moment.utcoffset()
    if offset is None:
        raise ValueError("cannot format a naive datetime: no UTC offset")

    # sub-minute offsets truncate toward zero; the sign follows the truncated value
    seconds = int(offset.total_seconds())
    minutes = abs(seconds) // 60
    sign = "-" if seconds < 0 and minutes else "+"
    hours, mins = divmod(minutes, 60)

    return (
        f"{moment.day:02d} {MONTHS[moment.month - 1]} {moment.year % 100:02d} "
        f"{moment.hour:02d}:{moment.minute:02d} {sign}{hours:02d}{mins:02d}"
    )


def current_time() -> str:
    """Current time in the fixed RFC 822 (numeric zone) format."""
    return format_time(now())


def parse_time(text: str) -> datetime:
    """
    Parse a ``DD Mon YY HH:MM +ZZZZ`` string back into an aware datetime.

    Two-digit years follow the strptime convention: 69-99 map to 19xx,
    00-68 to 20xx.

    Raises:
        ValueError: if the text does not match the layout or names an
        impossible date, time or offset.
    """
    match = _RFC822Z_RE.match(text)
    if match is None:
        raise ValueError(f"time data {text!r} does not match format {RFC822Z_FORMAT!r}")

    parts = match.groupdict()
    if parts["month"] not in MONTHS:
        raise ValueError(f"unknown month abbreviation: {parts['month']!r}")

    offset_hours, offset_minutes = int(parts["oh"]), int(parts["om"])
    if offset_hours > 23 or offset_minutes > 59:
        raise ValueError(f"invalid UTC offset in {text!r}")
    offset = timedelta(hours=offset_hours, minutes=offset_minutes)
    if parts["sign"] == "-":
        offset = -offset

    year = int(parts["year"])
    year += 1900 if year >= 69 else 2000

    # datetime() validates day-of-month, hour and minute ranges
    return datetime(
        year,
        MONTHS.index(parts["month"]) + 1,
        int(parts["day"]),
        int(parts["hour"]),
        int(parts["minute"]),
        tzinfo=timezone(offset),
    )
