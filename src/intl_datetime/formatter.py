"""Locale-Aware Date and Time Formatting.

This module formats ``datetime`` values with CLDR conventions supplied by
Babel, at one of five verbosity levels per part:

- Dates: none, short, medium, long, full
- Times: none, short, medium, long, full

The locale decides language and layout. The timezone is always taken from
the value being formatted, so the same instant renders a different wall
clock for a ``America/New_York`` value than for a ``UTC`` one.

Usage:
    from intl_datetime.formatter import DateTimeFormatter

    formatter = DateTimeFormatter("en_US")
    formatter.format_date(value, "short")              # "1/1/70"
    formatter.format_datetime(value, "medium", "short")  # "Jan 1, 1970, 12:00 AM"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Any

from babel import Locale
from babel.dates import format_date as babel_format_date
from babel.dates import format_datetime as babel_format_datetime
from babel.dates import format_time as babel_format_time
from babel.dates import get_datetime_format

from intl_datetime.exceptions import UnknownFormatError
from intl_datetime.protocols import (
    DEFAULT_DATE_VERBOSITY,
    DEFAULT_TIME_VERBOSITY,
    SUPPORTED_FORMATS,
    Verbosity,
)

logger = logging.getLogger(__name__)

# ICU renders this when both parts are NONE.
FALLBACK_PATTERN = "yyyyMMdd hh:mm a"


# ==============================================================================
# Timezone Helpers
# ==============================================================================

def extract_timezone(value: datetime) -> tzinfo:
    """Get the timezone attached to a value.

    Naive datetimes are treated as UTC.

    Args:
        value: Datetime to inspect

    Returns:
        The value's tzinfo
    """
    if not isinstance(value, datetime):
        raise TypeError(
            f"Expected a datetime instance, got {type(value).__name__}"
        )
    return value.tzinfo if value.tzinfo is not None else timezone.utc


def timezone_name(tz: tzinfo) -> str:
    """Get the identifier of a timezone (e.g. "UTC", "Europe/Berlin")."""
    # zoneinfo exposes ``key``, pytz exposes ``zone``
    for attr in ("key", "zone"):
        name = getattr(tz, attr, None)
        if name:
            return name
    return tz.tzname(None) or "UTC"


def to_babel_identifier(locale: str) -> str:
    """Normalize a locale tag to Babel's underscore form ("en-US" -> "en_US")."""
    return locale.replace("-", "_")


# ==============================================================================
# Engine Binding
# ==============================================================================

@dataclass(frozen=True)
class IntlDateFormatter:
    """A formatter bound to (locale, date verbosity, time verbosity, timezone).

    Built for a single call and thrown away afterwards.

    Attributes:
        locale: Locale identifier
        date_verbosity: Verbosity of the date part
        time_verbosity: Verbosity of the time part
        tz: Timezone used to compute the wall clock
    """
    locale: str
    date_verbosity: Verbosity
    time_verbosity: Verbosity
    tz: tzinfo

    @property
    def timezone(self) -> str:
        return timezone_name(self.tz)

    def format(self, value: datetime) -> str:
        """Render a value according to the bound settings."""
        babel_locale = Locale.parse(to_babel_identifier(self.locale))
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        local = value.astimezone(self.tz)

        date_style = self.date_verbosity
        time_style = self.time_verbosity

        if date_style.is_none and time_style.is_none:
            return babel_format_datetime(
                local, FALLBACK_PATTERN, tzinfo=self.tz, locale=babel_locale
            )
        if time_style.is_none:
            return babel_format_date(local, date_style.value, locale=babel_locale)
        if date_style.is_none:
            return babel_format_time(
                local, time_style.value, tzinfo=self.tz, locale=babel_locale
            )

        # The date style picks the glue pattern, as in ICU
        date_part = babel_format_date(local, date_style.value, locale=babel_locale)
        time_part = babel_format_time(
            local, time_style.value, tzinfo=self.tz, locale=babel_locale
        )
        return (
            get_datetime_format(date_style.value, locale=babel_locale)
            .replace("'", "")
            .replace("{0}", time_part)
            .replace("{1}", date_part)
        )


# ==============================================================================
# Formatter Service
# ==============================================================================

class DateTimeFormatter:
    """Locale-aware date/time formatter.

    Holds a locale and renders ``datetime`` values at caller-selected
    verbosity. Instances are immutable and safe to share between threads.

    Example:
        formatter = DateTimeFormatter("de_DE")

        formatter.format_date(value, "medium")   # "01.01.1970"
        formatter.format_time(value, "short")    # "00:00"
        formatter.format_date(value, "bogus")    # raises UnknownFormatError
    """

    def __init__(self, locale: str) -> None:
        """Initialize the formatter.

        Args:
            locale: Locale to use, e.g. "en_US" or "en-US".
        """
        self._locale = locale

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def supported_formats(self) -> tuple[str, ...]:
        """Accepted verbosity names, in table order."""
        return tuple(SUPPORTED_FORMATS)

    def __repr__(self) -> str:
        return f"DateTimeFormatter(locale={self._locale!r})"

    def format(self, value: datetime) -> str:
        """Format the date and time of a value using the default verbosity.

        Args:
            value: Datetime to format

        Returns:
            Formatted string
        """
        formatter = self._create_formatter(
            extract_timezone(value),
            DEFAULT_DATE_VERBOSITY,
            DEFAULT_TIME_VERBOSITY,
        )
        return formatter.format(value)

    def format_date(self, value: datetime, desired_format: str) -> str:
        """Format the date of a value.

        Args:
            value: Datetime to format
            desired_format: Date verbosity name

        Returns:
            Formatted date string

        Raises:
            UnknownFormatError: If ``desired_format`` is not supported.
        """
        date_type = self._resolve(desired_format)
        tz = extract_timezone(value)
        formatter = self._create_formatter(tz, date_type, Verbosity.NONE)
        return formatter.format(value)

    def format_time(self, value: datetime, desired_format: str) -> str:
        """Format the time of a value.

        Args:
            value: Datetime to format
            desired_format: Time verbosity name

        Returns:
            Formatted time string

        Raises:
            UnknownFormatError: If ``desired_format`` is not supported.
        """
        time_type = self._resolve(desired_format)
        tz = extract_timezone(value)
        formatter = self._create_formatter(tz, Verbosity.NONE, time_type)
        return formatter.format(value)

    def format_datetime(
        self,
        value: datetime,
        desired_date_format: str,
        desired_time_format: str,
    ) -> str:
        """Format the date and the time of a value.

        The date name is validated before the time name.

        Args:
            value: Datetime to format
            desired_date_format: Date verbosity name
            desired_time_format: Time verbosity name

        Returns:
            Formatted date/time string

        Raises:
            UnknownFormatError: If either name is not supported.
        """
        date_type = self._resolve(desired_date_format)
        time_type = self._resolve(desired_time_format)
        tz = extract_timezone(value)
        formatter = self._create_formatter(tz, date_type, time_type)
        return formatter.format(value)

    def _resolve(self, desired_format: Any) -> Verbosity:
        """Look up a verbosity name in the supported table."""
        # Enum members hash by member name, not by value
        if isinstance(desired_format, Verbosity):
            return desired_format
        verbosity = SUPPORTED_FORMATS.get(desired_format)
        if verbosity is None:
            logger.debug(f"Rejected unknown format {desired_format!r}")
            raise UnknownFormatError(desired_format, SUPPORTED_FORMATS)
        return verbosity

    def _create_formatter(
        self,
        tz: tzinfo,
        date_type: Verbosity,
        time_type: Verbosity,
    ) -> IntlDateFormatter:
        formatter = IntlDateFormatter(self._locale, date_type, time_type, tz)
        logger.debug(
            f"Created formatter locale={self._locale} date={date_type.value} "
            f"time={time_type.value} timezone={formatter.timezone}"
        )
        return formatter


# ==============================================================================
# Convenience Functions
# ==============================================================================

def format_date(
    value: datetime,
    locale: str,
    desired_format: str = "medium",
) -> str:
    """Format the date of a value for a locale.

    Example:
        format_date(value, "en_US", "short")  # "1/1/70"
    """
    return DateTimeFormatter(locale).format_date(value, desired_format)


def format_time(
    value: datetime,
    locale: str,
    desired_format: str = "medium",
) -> str:
    """Format the time of a value for a locale."""
    return DateTimeFormatter(locale).format_time(value, desired_format)


def format_datetime(
    value: datetime,
    locale: str,
    desired_date_format: str = DEFAULT_DATE_VERBOSITY.value,
    desired_time_format: str = DEFAULT_TIME_VERBOSITY.value,
) -> str:
    """Format the date and time of a value for a locale."""
    return DateTimeFormatter(locale).format_datetime(
        value, desired_date_format, desired_time_format
    )
