"""Verbosity levels and the formatter interface.

This module defines the closed set of verbosity levels understood by the
formatter and the protocol every formatter implementation follows.

Verbosity levels:
- NONE: omit the part entirely
- SHORT: 1/1/70 / 12:00 AM
- MEDIUM: Jan 1, 1970 / 12:00:00 AM
- LONG: January 1, 1970 / 12:00:00 AM UTC
- FULL: Thursday, January 1, 1970 / 12:00:00 AM Coordinated Universal Time
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Protocol, runtime_checkable


# ==============================================================================
# Enums and Type Definitions
# ==============================================================================

class Verbosity(str, Enum):
    """Date/time formatting verbosity.

    Values are the canonical names accepted by the formatter methods.
    """
    NONE = "none"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    FULL = "full"

    @property
    def icu_code(self) -> int:
        """ICU ``UDateFormatStyle`` number for this level."""
        return _ICU_CODES[self]

    @property
    def is_none(self) -> bool:
        return self is Verbosity.NONE


_ICU_CODES: dict[Verbosity, int] = {
    Verbosity.NONE: -1,
    Verbosity.SHORT: 3,
    Verbosity.MEDIUM: 2,
    Verbosity.LONG: 1,
    Verbosity.FULL: 0,
}

# Lookup table of accepted names, in declaration order.
SUPPORTED_FORMATS: Mapping[str, Verbosity] = MappingProxyType({
    "none": Verbosity.NONE,
    "short": Verbosity.SHORT,
    "medium": Verbosity.MEDIUM,
    "long": Verbosity.LONG,
    "full": Verbosity.FULL,
})

# Used by ``format()`` when the caller supplies no verbosity.
DEFAULT_DATE_VERBOSITY = Verbosity.FULL
DEFAULT_TIME_VERBOSITY = Verbosity.FULL


# ==============================================================================
# Protocols (Interfaces)
# ==============================================================================

@runtime_checkable
class DateTimeFormatterProtocol(Protocol):
    """Protocol for locale-aware date/time formatting."""

    @property
    def locale(self) -> str:
        """Locale used for formatting."""
        ...

    def format(self, value: datetime) -> str:
        """Format the date and time of a value using the default verbosity.

        Args:
            value: Datetime to format

        Returns:
            Formatted string
        """
        ...

    def format_date(self, value: datetime, desired_format: str) -> str:
        """Format the date of a value.

        Args:
            value: Datetime to format
            desired_format: Date verbosity name

        Returns:
            Formatted date string
        """
        ...

    def format_time(self, value: datetime, desired_format: str) -> str:
        """Format the time of a value.

        Args:
            value: Datetime to format
            desired_format: Time verbosity name

        Returns:
            Formatted time string
        """
        ...

    def format_datetime(
        self,
        value: datetime,
        desired_date_format: str,
        desired_time_format: str,
    ) -> str:
        """Format the date and the time of a value.

        Args:
            value: Datetime to format
            desired_date_format: Date verbosity name
            desired_time_format: Time verbosity name

        Returns:
            Formatted date/time string
        """
        ...
