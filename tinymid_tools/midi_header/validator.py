"""Validation of the fixed ``MThd`` header chunk."""
from __future__ import annotations

import logging

from shared.result import Result

from .errors import (
    InvalidFormatCode,
    InvalidHeaderLength,
    InvalidIdentifier,
    MidiHeaderError,
    ZeroDivision,
    ZeroTrackChunks,
)
from .models import HEADER_IDENTIFIER, HEADER_LENGTH, DecodedHeader, Division, FileFormat
from .streams import ByteCursor

logger = logging.getLogger(__name__)


class HeaderValidator:
    """Walk the five header fields in order and stop at the first defect."""

    def __init__(self, cursor: ByteCursor):
        self.cursor = cursor

    def validate(self) -> DecodedHeader:
        self._read_identifier()
        self._read_length()
        file_format = self._read_format()
        track_chunk_count = self._read_track_chunk_count()
        division = self._read_division()
        return DecodedHeader(
            format=file_format,
            track_chunk_count=track_chunk_count,
            division=division,
        )

    def _read_identifier(self) -> None:
        identifier = self.cursor.read_fixed_string(len(HEADER_IDENTIFIER))
        if identifier != HEADER_IDENTIFIER:
            raise InvalidIdentifier(HEADER_IDENTIFIER, identifier)

    def _read_length(self) -> None:
        length = self.cursor.read_dword()
        if length != HEADER_LENGTH:
            raise InvalidHeaderLength(HEADER_LENGTH, length)

    def _read_format(self) -> FileFormat:
        code = self.cursor.read_word()
        file_format = FileFormat.from_code(code)
        if file_format is None:
            raise InvalidFormatCode(code)
        logger.debug("%s File Format", file_format.label)
        return file_format

    def _read_track_chunk_count(self) -> int:
        count = self.cursor.read_word()
        if count == 0:
            raise ZeroTrackChunks()
        return count

    def _read_division(self) -> Division:
        word = self.cursor.read_word()
        raw = word - 0x10000 if word & 0x8000 else word
        if raw > 0:
            logger.debug("Division given in ticks per beat")
        elif raw < 0:
            logger.debug("Division given in SMPTE format")
        else:
            raise ZeroDivision()
        return Division(raw)


def parse_header(data: bytes) -> DecodedHeader:
    """Decode the header at the start of ``data``; trailing bytes are ignored."""

    return HeaderValidator(ByteCursor(data)).validate()


def try_parse_header(data: bytes) -> Result[DecodedHeader, MidiHeaderError]:
    try:
        return Result.ok(parse_header(data))
    except MidiHeaderError as exc:
        return Result.err(exc)


__all__ = ["HeaderValidator", "parse_header", "try_parse_header"]
