"""Configuration for intl_datetime.

Settings are merged from these sources, lowest priority first:

    FormatterSettings defaults
         |
         +---> config file (JSON, TOML, YAML)
         |
         +---> environment variables (INTL_DATETIME_*)
         |
         v
    FormatterSettings

Usage:
    >>> from intl_datetime.config import load_settings
    >>>
    >>> settings = load_settings("intl_datetime.toml")
    >>> settings.locale
    'de_DE'
"""

from __future__ import annotations

import json
import logging
import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

from intl_datetime.exceptions import ConfigError
from intl_datetime.protocols import (
    DEFAULT_DATE_VERBOSITY,
    DEFAULT_TIME_VERBOSITY,
    SUPPORTED_FORMATS,
)

logger = logging.getLogger(__name__)

ENV_PREFIX = "INTL_DATETIME_"
SECTION = "intl_datetime"


@dataclass(frozen=True)
class FormatterSettings:
    """Settings used by the command line front end.

    Attributes:
        locale: Locale used when none is given.
        date_format: Date verbosity name used when none is given.
        time_format: Time verbosity name used when none is given.
        log_level: Logging level name.
    """

    locale: str = "en_US"
    date_format: str = DEFAULT_DATE_VERBOSITY.value
    time_format: str = DEFAULT_TIME_VERBOSITY.value
    log_level: str = "WARNING"

    def validate(self) -> None:
        """Check value types, format names and log level.

        Raises:
            ConfigError: If any value is invalid.
        """
        errors = []
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str) or not value:
                errors.append(f"{f.name}={value!r} (expected a non-empty string)")
        if errors:
            raise ConfigError(f"Invalid configuration: {'; '.join(errors)}")

        for name in ("date_format", "time_format"):
            value = getattr(self, name)
            if value not in SUPPORTED_FORMATS:
                errors.append(
                    f"{name}={value!r} (expected one of: {', '.join(SUPPORTED_FORMATS)})"
                )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            errors.append(f"log_level={self.log_level!r}")
        if errors:
            raise ConfigError(f"Invalid configuration: {'; '.join(errors)}")

    def merge(self, values: Mapping[str, Any]) -> "FormatterSettings":
        """Return a copy with known keys from ``values`` applied."""
        known = {f.name for f in fields(self)}
        updates = {}
        for key, value in values.items():
            key = key.lower()
            if key in known:
                updates[key] = value
            else:
                logger.warning(f"Ignoring unknown setting '{key}'")
        return replace(self, **updates)


def load_file(path: str | Path) -> dict[str, Any]:
    """Load settings from a file.

    The format is picked from the extension. Values may sit at the top
    level or under an ``intl_datetime`` section.

    Raises:
        ConfigError: If the file is missing or cannot be parsed.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()

    try:
        content = path.read_text(encoding="utf-8")
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(content) or {}
        elif suffix == ".json":
            data = json.loads(content)
        elif suffix == ".toml":
            data = tomllib.loads(content)
        else:
            raise ConfigError(f"Unsupported file format: {suffix}")
    except (
        OSError,
        UnicodeDecodeError,
        yaml.YAMLError,
        json.JSONDecodeError,
        tomllib.TOMLDecodeError,
    ) as e:
        raise ConfigError(f"Failed to load config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {path} must be a mapping")
    section = data.get(SECTION, data)
    if not isinstance(section, dict):
        raise ConfigError(f"Section '{SECTION}' in {path} must be a mapping")
    return section


def load_env(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Collect ``INTL_DATETIME_*`` variables, keyed by setting name."""
    if environ is None:
        environ = os.environ
    return {
        key[len(ENV_PREFIX):].lower(): value
        for key, value in environ.items()
        if key.startswith(ENV_PREFIX) and value
    }


def load_settings(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> FormatterSettings:
    """Load and validate settings.

    Args:
        path: Optional configuration file.
        environ: Environment mapping (defaults to ``os.environ``).

    Returns:
        Merged settings.

    Raises:
        ConfigError: If a source cannot be read or a value is invalid.
    """
    settings = FormatterSettings()
    if path is not None:
        settings = settings.merge(load_file(path))
    settings = settings.merge(load_env(environ))
    settings.validate()
    return settings
