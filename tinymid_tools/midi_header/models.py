"""Data models describing a decoded MIDI header chunk."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import ZeroDivision, ZeroTrackChunks

HEADER_IDENTIFIER = "MThd"
HEADER_LENGTH = 6
HEADER_SIZE = 14


class FileFormat(Enum):
    """How the track chunks of a MIDI file relate to each other."""

    SINGLE_TRACK = 0
    MULTIPLE_TRACK = 1
    MULTIPLE_SONG = 2

    @property
    def label(self) -> str:
        return _FORMAT_LABELS[self]

    @classmethod
    def from_code(cls, code: int) -> Optional["FileFormat"]:
        try:
            return cls(code)
        except ValueError:
            return None


_FORMAT_LABELS = {
    FileFormat.SINGLE_TRACK: "Single Track",
    FileFormat.MULTIPLE_TRACK: "Multiple Track",
    FileFormat.MULTIPLE_SONG: "Multiple Song",
}


@dataclass(frozen=True)
class Division:
    """Time division word from the header, stored as a signed 16-bit value.

    Positive values count ticks per quarter note. Negative values hold the
    SMPTE frame rate (negated) in the high byte and ticks per frame in the
    low byte. The frame rate is reported as-is and never checked against
    the usual 24/25/29/30 set.
    """

    raw: int

    def __post_init__(self) -> None:
        if not -0x8000 <= self.raw <= 0x7FFF:
            raise ValueError(f"Division out of signed 16-bit range: {self.raw}")
        if self.raw == 0:
            raise ZeroDivision()

    @property
    def is_smpte(self) -> bool:
        return self.raw < 0

    @property
    def ticks_per_beat(self) -> int | None:
        if self.is_smpte:
            return None
        return self.raw

    @property
    def smpte_format(self) -> int | None:
        if not self.is_smpte:
            return None
        high = (self.raw >> 8) & 0xFF
        return 0x100 - high

    @property
    def ticks_per_frame(self) -> int | None:
        if not self.is_smpte:
            return None
        return self.raw & 0xFF

    def describe(self) -> str:
        if self.is_smpte:
            return f"SMPTE {self.smpte_format} frames/s, {self.ticks_per_frame} ticks per frame"
        return f"{self.raw} ticks per beat"


@dataclass(frozen=True)
class DecodedHeader:
    """Fully validated contents of an ``MThd`` chunk."""

    format: FileFormat
    track_chunk_count: int
    division: Division

    def __post_init__(self) -> None:
        if not isinstance(self.format, FileFormat):
            raise ValueError(f"Unsupported file format: {self.format!r}")
        if self.track_chunk_count == 0:
            raise ZeroTrackChunks()
        if not 0 < self.track_chunk_count <= 0xFFFF:
            raise ValueError(f"Track chunk count out of 16-bit range: {self.track_chunk_count}")
        if not isinstance(self.division, Division):
            raise ValueError(f"Division must be a Division, got {self.division!r}")

    def describe(self) -> str:
        return (
            f"Format: {self.format.label} ({self.format.value}), "
            f"track chunks: {self.track_chunk_count}, "
            f"division: {self.division.describe()}"
        )


__all__ = [
    "DecodedHeader",
    "Division",
    "FileFormat",
    "HEADER_IDENTIFIER",
    "HEADER_LENGTH",
    "HEADER_SIZE",
]
