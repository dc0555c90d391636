"""Application-wide configuration loaded from JSON resources."""

from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Mapping

_CONFIG_RESOURCE = "app.json"
_APP_CONFIG_CACHE: AppConfig | None = None

_VERBOSITY_NAMES = {"disabled", "error", "warning", "info", "verbose", "debug"}
_DEFAULT_VERBOSITY = "warning"
_DEFAULT_FORMAT = "%(levelname)s %(message)s"
_DEFAULT_FILE_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class LoggingSettings:
    """How diagnostics are rendered when no override is given."""

    default_verbosity: str
    format: str
    file_format: str


@dataclass(frozen=True)
class AppConfig:
    """Structured configuration values for the command line tool."""

    logging: LoggingSettings


def get_app_config() -> AppConfig:
    """Return the cached application configuration."""

    global _APP_CONFIG_CACHE
    if _APP_CONFIG_CACHE is None:
        _APP_CONFIG_CACHE = load_app_config()
    return _APP_CONFIG_CACHE


def reset_app_config_cache() -> None:
    """Reset the cached configuration for subsequent reloads."""

    global _APP_CONFIG_CACHE
    _APP_CONFIG_CACHE = None


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load configuration from ``path`` or the bundled JSON resource."""

    data = _read_config_data(path)
    logging_section = data.get("logging") if isinstance(data, Mapping) else None
    return AppConfig(logging=_parse_logging_section(logging_section))


def _read_config_data(path: str | Path | None) -> Mapping[str, Any]:
    if path is not None:
        return _load_json_from_path(Path(path).expanduser())
    return _load_default_config_data()


def _load_json_from_path(path: Path) -> Mapping[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError:
        return {}
    return _parse_json(raw)


def _load_default_config_data() -> Mapping[str, Any]:
    try:
        resource = resources.files(__package__).joinpath(_CONFIG_RESOURCE)
        raw = resource.read_text(encoding="utf-8")
    except (FileNotFoundError, OSError):
        return {}
    return _parse_json(raw)


def _parse_json(raw: str) -> Mapping[str, Any]:
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        return {}
    if isinstance(parsed, Mapping):
        return parsed
    return {}


def _parse_logging_section(section: Mapping[str, Any] | None) -> LoggingSettings:
    if not isinstance(section, Mapping):
        return LoggingSettings(
            default_verbosity=_DEFAULT_VERBOSITY,
            format=_DEFAULT_FORMAT,
            file_format=_DEFAULT_FILE_FORMAT,
        )
    return LoggingSettings(
        default_verbosity=_coerce_verbosity(section.get("default_verbosity")),
        format=_coerce_format(section.get("format"), default=_DEFAULT_FORMAT),
        file_format=_coerce_format(section.get("file_format"), default=_DEFAULT_FILE_FORMAT),
    )


def _coerce_verbosity(value: Any) -> str:
    if not isinstance(value, str):
        return _DEFAULT_VERBOSITY
    candidate = value.strip().lower()
    if candidate not in _VERBOSITY_NAMES:
        return _DEFAULT_VERBOSITY
    return candidate


def _coerce_format(value: Any, *, default: str) -> str:
    if not isinstance(value, str) or "%(message)s" not in value:
        return default
    return value
