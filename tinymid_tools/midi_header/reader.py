"""Facade for loading a MIDI file and decoding its header."""
from __future__ import annotations

import logging
from pathlib import Path

from .errors import MidiFileAccessError
from .models import DecodedHeader
from .validator import parse_header

logger = logging.getLogger(__name__)


def read_file(path: str | Path) -> bytes:
    """Return the complete contents of ``path``."""

    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MidiFileAccessError(path, exc) from exc
    logger.debug("Read %d bytes from %s", len(data), path)
    return data


def inspect_file(path: str | Path) -> DecodedHeader:
    """Read ``path`` into memory and decode its header chunk."""

    return parse_header(read_file(path))


__all__ = ["inspect_file", "read_file"]
