"""Exceptions raised by intl_datetime."""

from __future__ import annotations

from typing import Any, Iterable


class DateTimeFormatError(Exception):
    """Base error for intl_datetime."""

    pass


class UnknownFormatError(DateTimeFormatError, ValueError):
    """An unsupported verbosity name was requested.

    Attributes:
        value: The rejected name.
        supported: Accepted names, in table order.
    """

    def __init__(self, value: Any, supported: Iterable[str]) -> None:
        self.value = value
        self.supported = tuple(supported)
        super().__init__(
            f'The desired format "{value}" is invalid. '
            f"It must be one of the following: {', '.join(self.supported)}"
        )


class ConfigError(DateTimeFormatError):
    """Configuration could not be loaded or is invalid."""

    pass
