"""
Defensive date parsing and locale-aware formatting.

**Conceptual**: Dates arrive from APIs and forms in many shapes: datetime
objects, epoch milliseconds, ISO strings with stray whitespace, or garbage.
parse_valid_date() is the single gate that turns any of these into a
timezone-aware datetime, or None. Every formatter in this module goes through
it, so none of them ever raises on bad input.

**Conventions**:
  - Numbers are Unix epoch *milliseconds*.
  - Naive datetimes and offset-less strings are local wall time.
  - ISO output is always UTC with millisecond precision and a "Z" suffix,
    e.g. "2025-10-15T12:30:00.000Z".

Locale-aware output is produced with Babel (CLDR data) using a 24-hour clock.
"""

import logging
import math
import warnings
from datetime import date, datetime, timezone
from typing import Literal, Optional, Union

import pandas as pd
from babel import Locale, UnknownLocaleError
from babel.dates import format_date, format_skeleton, get_datetime_format

from frontkit.config.settings import get_settings
from frontkit.utils.time import to_local_wall_time

logger = logging.getLogger(__name__)

DateSource = Union[datetime, date, str, int, float, None]

DateFormatUnit = Literal[
    "fullDateTime",
    "date",
    "year",
    "yearMonth",
    "monthDay",
    "hoursMinutesSeconds",
    "camStyle",
]

NOT_AVAILABLE = "N/A"
FALLBACK_LOCALE = "en"

# CLDR skeletons per unit; time skeletons use H (0-23) so there is never an AM/PM marker
_DATE_SKELETONS = {
    "date": "yMMMd",
    "year": "y",
    "yearMonth": "yMMMM",
    "monthDay": "MMMMd",
}


def _ensure_aware(moment: datetime) -> datetime:
    return moment if moment.tzinfo is not None else moment.astimezone()


def parse_valid_date(value: DateSource) -> Optional[datetime]:
    """
    Interpret value as a date, returning None when that is not possible.

    Args:
        value: datetime, date, epoch milliseconds (int/float), or a date string.
               Strings are trimmed and parsed with pandas.to_datetime.

    Returns:
        Timezone-aware datetime, or None for unsupported types, empty strings,
        invalid calendar dates ("2025-02-30"), NaN/inf and out-of-range values.
    """
    if isinstance(value, datetime):
        return _ensure_aware(value)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day).astimezone()

    # bool is an int subclass but never a timestamp
    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            # pandas warns when it falls back to dateutil for free-form strings
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", UserWarning)
                parsed = pd.to_datetime(text, errors="coerce")
        except (ValueError, TypeError, OverflowError):
            return None
        if pd.isna(parsed):
            return None
        return _ensure_aware(parsed.to_pydatetime())

    return None


def to_iso_string(moment: datetime) -> str:
    """
    Render a datetime as a UTC ISO-8601 string with milliseconds.

    Naive datetimes are treated as local wall time.

    Example:
        >>> to_iso_string(datetime(2025, 10, 15, 12, 30, tzinfo=timezone.utc))
        '2025-10-15T12:30:00.000Z'
    """
    utc = _ensure_aware(moment).astimezone(timezone.utc)
    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}"
        f".{utc.microsecond // 1000:03d}Z"
    )


def _resolve_locale(locale: Optional[str]) -> Locale:
    tag = locale or get_settings().formatting.default_locale
    try:
        return Locale.parse(tag.replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError):
        logger.debug("Unknown locale %r, falling back to %s", tag, FALLBACK_LOCALE)
        return Locale.parse(FALLBACK_LOCALE)


def _format_time(local: datetime, no_seconds: bool, babel_locale: Locale) -> str:
    return format_skeleton("Hm" if no_seconds else "Hms", local, locale=babel_locale)


def format_utc_date_to_local_date_string(
    source: DateSource,
    unit: DateFormatUnit,
    locale: Optional[str] = None,
    no_seconds: bool = False,
    return_empty_instead_of_na: bool = False,
) -> str:
    """
    Format a date as a localized string in the host's local timezone.

    Args:
        source: Anything parse_valid_date() accepts.
        unit: Which fields to show (examples for locale "en"):
              - "fullDateTime": Feb 25, 2026, 16:32:10
              - "date": Feb 25, 2026
              - "year": 2026
              - "yearMonth": February 2026
              - "monthDay": February 25
              - "hoursMinutesSeconds": 16:32:10
              - "camStyle": 25-02-2026 16:32:10 (fixed, not localized)
              Any other value falls back to a long date (February 25, 2026).
        locale: Locale tag ("en", "en-US", "bg_BG"). Defaults to the
                configured default locale; unknown tags fall back to "en".
        no_seconds: Omit seconds in time-bearing units (except camStyle).
        return_empty_instead_of_na: Return "" instead of "N/A" for bad input.

    Returns:
        Formatted string, or the "N/A"/"" sentinel when source is not a date.
    """
    parsed = parse_valid_date(source)
    if parsed is None:
        return "" if return_empty_instead_of_na else NOT_AVAILABLE

    local = to_local_wall_time(parsed)

    if unit == "camStyle":
        return (
            f"{local.day:02d}-{local.month:02d}-{local.year} "
            f"{local.hour:02d}:{local.minute:02d}:{local.second:02d}"
        )

    babel_locale = _resolve_locale(locale)

    if unit == "fullDateTime":
        date_part = format_skeleton(_DATE_SKELETONS["date"], local, locale=babel_locale)
        time_part = _format_time(local, no_seconds, babel_locale)
        pattern = get_datetime_format("medium", locale=babel_locale)
        return str(pattern).replace("{1}", date_part).replace("{0}", time_part)

    if unit == "hoursMinutesSeconds":
        return _format_time(local, no_seconds, babel_locale)

    skeleton = _DATE_SKELETONS.get(unit)
    if skeleton is None:
        return format_date(local, format="long", locale=babel_locale)
    return format_skeleton(skeleton, local, locale=babel_locale)


def get_utc_start_of_local_day(source: DateSource) -> Optional[str]:
    """
    Return UTC midnight of the source's *local* calendar day as ISO-8601.

    Useful for storing a user-perceived day as a stable key regardless of the
    viewer's UTC offset.

    Example:
        >>> # User in New York enters 2025-10-14 23:01 local time
        >>> get_utc_start_of_local_day(datetime(2025, 10, 14, 23, 1))
        '2025-10-14T00:00:00.000Z'
    """
    parsed = parse_valid_date(source)
    if parsed is None:
        return None

    local = to_local_wall_time(parsed)
    return to_iso_string(datetime(local.year, local.month, local.day, tzinfo=timezone.utc))


def get_local_to_utc_string(source: DateSource) -> Optional[str]:
    """Return the UTC ISO-8601 string for source, or None if it is not a date."""
    parsed = parse_valid_date(source)
    return to_iso_string(parsed) if parsed is not None else None
