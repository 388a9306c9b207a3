"""intl_datetime - Locale-aware date and time formatting powered by Babel."""

from intl_datetime.config import FormatterSettings, load_settings
from intl_datetime.exceptions import ConfigError, DateTimeFormatError, UnknownFormatError
from intl_datetime.formatter import (
    DateTimeFormatter,
    IntlDateFormatter,
    extract_timezone,
    format_date,
    format_datetime,
    format_time,
)
from intl_datetime.protocols import (
    DEFAULT_DATE_VERBOSITY,
    DEFAULT_TIME_VERBOSITY,
    SUPPORTED_FORMATS,
    DateTimeFormatterProtocol,
    Verbosity,
)

__version__ = "0.1.0"

__all__ = [
    # Formatting
    "DateTimeFormatter",
    "DateTimeFormatterProtocol",
    "IntlDateFormatter",
    "Verbosity",
    "SUPPORTED_FORMATS",
    "DEFAULT_DATE_VERBOSITY",
    "DEFAULT_TIME_VERBOSITY",
    "extract_timezone",
    "format_date",
    "format_time",
    "format_datetime",
    # Errors
    "DateTimeFormatError",
    "UnknownFormatError",
    "ConfigError",
    # Configuration
    "FormatterSettings",
    "load_settings",
]
