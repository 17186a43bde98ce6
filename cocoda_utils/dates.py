"""Localized date formatting."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Any

from babel import Locale, UnknownLocaleError, default_locale
from babel.dates import format_skeleton

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en_US"
# year numeric, month abbreviated, day numeric
DATE_SKELETON = "yMMMd"
# two-digit hour, minute and second
TIME_SKELETON = "Hms"


def host_locale() -> Locale:
    """Return the best available locale for the current process."""
    name = default_locale("LC_TIME") or DEFAULT_LOCALE
    try:
        return Locale.parse(name)
    except (UnknownLocaleError, ValueError):
        logger.debug("Unknown host locale %r, using %s", name, DEFAULT_LOCALE)
        return Locale.parse(DEFAULT_LOCALE)


def parse_date(value: Any) -> datetime | None:
    """Parse a date-like value into an aware local datetime, or ``None``.

    Accepts ``datetime``/``date`` objects, ISO 8601 strings and numbers
    (milliseconds since the Unix epoch). Naive values are taken as local
    time. Values that cannot be represented in local time yield ``None``.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)):
        try:
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    try:
        return parsed.astimezone()
    except (OverflowError, OSError, ValueError):
        return None


def date_to_string(value: Any, only_date: bool = False) -> str:
    """Convert a date-like value into a string formatted for the host locale.

    Returns ``"?"`` if ``value`` cannot be parsed.
    """
    parsed = parse_date(value)
    if parsed is None:
        logger.debug("Could not parse date value %r", value)
        return "?"

    locale = host_locale()
    text = format_skeleton(DATE_SKELETON, parsed, tzinfo=parsed.tzinfo, locale=locale)
    if only_date:
        return text
    return f"{text}, {format_skeleton(TIME_SKELETON, parsed, tzinfo=parsed.tzinfo, locale=locale)}"
