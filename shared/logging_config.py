"""Central logging configuration for the command line front-end.

Diagnostics go to stderr through a single handler with a bare
``LEVEL message`` layout so that validation failures read like ordinary
tool output.  The threshold is picked in this order:

``--debug`` flag
    Forces :attr:`LogVerbosity.VERBOSE`.

``TINYMID_LOG_LEVEL``
    Name of a :class:`LogVerbosity` member (``error``, ``info`` ...).

``app.json``
    The ``logging.default_verbosity`` entry of the bundled configuration.

Setting ``TINYMID_LOG_FILE`` additionally records every message, including
debug output, to the given file.  Repeated calls reconfigure the existing
handlers instead of stacking new ones.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path
from typing import TextIO

from app.config import get_app_config

_LOG_LEVEL_ENV = "TINYMID_LOG_LEVEL"
_LOG_FILE_ENV = "TINYMID_LOG_FILE"
_HANDLER_TAG = "_tinymid_logging_handler"
_STREAM_HANDLER: logging.StreamHandler | None = None
_FILE_HANDLER: logging.FileHandler | None = None


class LogVerbosity(str, Enum):
    """Verbosity levels understood by the command line tool."""

    DISABLED = "disabled"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    VERBOSE = "verbose"

    @classmethod
    def parse(cls, value: "LogVerbosity | str") -> "LogVerbosity":
        if isinstance(value, LogVerbosity):
            return value
        normalised = value.strip().lower()
        if normalised == "debug":
            return cls.VERBOSE
        try:
            return cls(normalised)
        except ValueError as exc:
            raise ValueError(f"Unsupported log verbosity: {value}") from exc


_VERBOSITY_LEVELS: dict[LogVerbosity, int] = {
    LogVerbosity.DISABLED: logging.CRITICAL + 1,
    LogVerbosity.ERROR: logging.ERROR,
    LogVerbosity.WARNING: logging.WARNING,
    LogVerbosity.INFO: logging.INFO,
    LogVerbosity.VERBOSE: logging.DEBUG,
}


def resolve_verbosity(debug: bool = False) -> LogVerbosity:
    """Return the verbosity selected by the flag, environment, or config."""

    if debug:
        return LogVerbosity.VERBOSE

    env_value = os.environ.get(_LOG_LEVEL_ENV)
    if env_value:
        try:
            return LogVerbosity.parse(env_value)
        except ValueError:
            logging.getLogger(__name__).warning(
                "Ignoring %s=%r; expected one of %s",
                _LOG_LEVEL_ENV,
                env_value,
                ", ".join(member.value for member in LogVerbosity),
            )

    return LogVerbosity.parse(get_app_config().logging.default_verbosity)


def configure_cli_logging(debug: bool = False, *, stream: TextIO | None = None) -> LogVerbosity:
    """Install (or update) the tool's log handlers on the root logger."""

    global _STREAM_HANDLER, _FILE_HANDLER

    verbosity = resolve_verbosity(debug)
    level = _VERBOSITY_LEVELS[verbosity]
    settings = get_app_config().logging

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    target = stream if stream is not None else sys.stderr
    if _STREAM_HANDLER is None or _STREAM_HANDLER.stream is not target:
        if _STREAM_HANDLER is not None:
            root.removeHandler(_STREAM_HANDLER)
        _STREAM_HANDLER = logging.StreamHandler(target)
        setattr(_STREAM_HANDLER, _HANDLER_TAG, True)
        root.addHandler(_STREAM_HANDLER)
    _STREAM_HANDLER.setFormatter(logging.Formatter(settings.format))
    _STREAM_HANDLER.setLevel(level)

    log_file = os.environ.get(_LOG_FILE_ENV)
    if log_file and _FILE_HANDLER is None:
        _FILE_HANDLER = _create_file_handler(Path(log_file).expanduser(), settings.file_format)
        if _FILE_HANDLER is not None:
            root.addHandler(_FILE_HANDLER)

    logging.getLogger(__name__).debug("Console log verbosity set to %s", verbosity.value)
    return verbosity


def _create_file_handler(path: Path, file_format: str) -> logging.FileHandler | None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError as exc:
        logging.getLogger(__name__).warning(
            "Cannot write log file %s set by %s: %s", path, _LOG_FILE_ENV, exc
        )
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(file_format, datefmt="%Y-%m-%d %H:%M:%S"))
    setattr(handler, _HANDLER_TAG, True)
    return handler


def _reset_for_tests() -> None:
    """Remove handlers installed by :func:`configure_cli_logging`."""

    global _STREAM_HANDLER, _FILE_HANDLER

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root.removeHandler(handler)
            if handler is _FILE_HANDLER:
                handler.close()

    _STREAM_HANDLER = None
    _FILE_HANDLER = None


__all__ = ["LogVerbosity", "configure_cli_logging", "resolve_verbosity"]
