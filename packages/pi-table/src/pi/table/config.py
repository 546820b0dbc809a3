"""Rendering configuration with JSON persistence and colour detection.

Settings are read from ``~/.pi/table.json`` (if present) and can be
overridden from the command line. Example file::

    {
        "format": "box",
        "color": "auto",
        "lineEnding": "lf",
        "delimiter": ";",
        "customFormat": {"base": "default", "padding": [2, 2]}
    }
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Literal, Mapping

from pi.table.errors import ConfigError
from pi.table.format import FORMATS, TableFormat, format_from_dict

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".pi"
CONFIG_FILE_NAME = "table.json"

ColorMode = Literal["auto", "always", "never"]
COLOR_MODES: tuple[str, ...] = ("auto", "always", "never")

NATIVE_LINE_TERMINATOR = os.linesep
LINE_ENDINGS = {"lf": "\n", "crlf": "\r\n", "native": NATIVE_LINE_TERMINATOR}

# JSON key -> Config field
_KEYS = {
    "format": "format_name",
    "customFormat": "custom_format",
    "color": "color",
    "lineEnding": "line_ending",
    "delimiter": "delimiter",
}


@dataclass
class Config:
    """Table rendering options."""

    format_name: str = "default"
    custom_format: Mapping[str, Any] | None = None
    color: ColorMode = "auto"
    line_ending: str = "lf"
    delimiter: str = ","

    def __post_init__(self) -> None:
        for name in ("format_name", "color", "line_ending", "delimiter"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigError(f"{name} must be a string, got {value!r}")
        if self.custom_format is not None and not isinstance(self.custom_format, Mapping):
            raise ConfigError(f"customFormat must be an object, got {self.custom_format!r}")
        if self.format_name not in FORMATS:
            raise ConfigError(
                f"unknown format {self.format_name!r} (choose from {', '.join(FORMATS)})"
            )
        if self.color not in COLOR_MODES:
            raise ConfigError(f"color must be one of {', '.join(COLOR_MODES)}, got {self.color!r}")
        if self.line_ending not in LINE_ENDINGS:
            raise ConfigError(
                f"lineEnding must be one of {', '.join(LINE_ENDINGS)}, got {self.line_ending!r}"
            )

    @property
    def line_terminator(self) -> str:
        return LINE_ENDINGS[self.line_ending]

    def resolve_format(self) -> TableFormat:
        """Return the custom format if one is configured, else the named one."""
        if self.custom_format is not None:
            return format_from_dict(self.custom_format)
        return FORMATS[self.format_name]

    def apply_overrides(self, **overrides: Any) -> Config:
        """Return a copy with every non-``None`` override applied.

        Naming a format replaces any custom format from the file.
        """
        changes = {key: value for key, value in overrides.items() if value is not None}
        if "format_name" in changes:
            changes.setdefault("custom_format", None)
        return replace(self, **changes)


def default_config_path() -> Path:
    return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def config_from_dict(data: dict[str, Any]) -> Config:
    unknown = set(data) - set(_KEYS)
    if unknown:
        raise ConfigError(f"unknown configuration keys: {sorted(unknown)}")
    return Config(**{_KEYS[key]: value for key, value in data.items()})


def load_config(path: str | Path | None = None) -> Config:
    """Load configuration from *path* (default ``~/.pi/table.json``).

    A missing file yields the defaults.
    """
    config_path = Path(path) if path is not None else default_config_path()
    if not config_path.exists():
        logger.debug("No configuration at %s, using defaults", config_path)
        return Config()

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"cannot load {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a JSON object")

    logger.debug("Loaded configuration from %s", config_path)
    return config_from_dict(data)


def should_colorize(mode: str, stream: Any) -> bool:
    """Decide whether to emit colour escape sequences to *stream*.

    ``always`` and ``never`` are explicit. ``auto`` honours ``NO_COLOR``,
    ``FORCE_COLOR`` and ``TERM=dumb``, then falls back to ``stream.isatty()``.
    """
    if mode == "always":
        return True
    if mode == "never":
        return False

    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("TERM", "").lower() == "dumb":
        return False

    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())
