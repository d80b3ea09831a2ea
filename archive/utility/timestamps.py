# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from datetime import datetime, timezone

# Lowest possible sort key, used for posts whose date cannot be parsed
EARLIEST = datetime.min.replace(tzinfo=timezone.utc)

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

def format_timestamp(moment: datetime) -> str:
    """Render a datetime as `YYYY-MM-DDTHH:MM:SS.mmmZ` in UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"

def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO-8601 date or date-time string.

    Returns None when the value is missing or unparseable. Naive values are
    treated as UTC so that every result can be compared with every other.
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed

def sort_key(value: str | None) -> datetime:
    return parse_timestamp(value) or EARLIEST

def display_date(value: str | None) -> str:
    """Short display form of a post date, e.g. `May 1, 2024`."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return "Invalid Date"
    try:
        parsed = parsed.astimezone(timezone.utc)
    except OverflowError:
        pass
    return f"{MONTHS[parsed.month - 1]} {parsed.day}, {parsed.year}"
