"""Public facade for MIDI header decoding."""

from .errors import (
    InvalidFormatCode,
    InvalidHeaderLength,
    InvalidIdentifier,
    MidiFileAccessError,
    MidiHeaderError,
    UnexpectedEndOfFile,
    ZeroDivision,
    ZeroTrackChunks,
)
from .models import HEADER_IDENTIFIER, HEADER_LENGTH, HEADER_SIZE, DecodedHeader, Division, FileFormat
from .reader import inspect_file, read_file
from .streams import ByteCursor
from .validator import HeaderValidator, parse_header, try_parse_header

__all__ = [
    "ByteCursor",
    "DecodedHeader",
    "Division",
    "FileFormat",
    "HEADER_IDENTIFIER",
    "HEADER_LENGTH",
    "HEADER_SIZE",
    "HeaderValidator",
    "InvalidFormatCode",
    "InvalidHeaderLength",
    "InvalidIdentifier",
    "MidiFileAccessError",
    "MidiHeaderError",
    "UnexpectedEndOfFile",
    "ZeroDivision",
    "ZeroTrackChunks",
    "inspect_file",
    "parse_header",
    "read_file",
    "try_parse_header",
]
