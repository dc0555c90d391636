"""Structured failures raised while decoding the MIDI header chunk."""
from __future__ import annotations

from pathlib import Path


class MidiHeaderError(ValueError):
    """Base class for structural defects in the ``MThd`` chunk."""


class UnexpectedEndOfFile(MidiHeaderError):
    """The buffer ran out before a field could be read completely."""

    def __init__(self, position: int):
        super().__init__("File ended unexpectedly")
        self.position = position


class InvalidIdentifier(MidiHeaderError):
    def __init__(self, expected: str, actual: str):
        super().__init__(
            f'Wrong identifier for header chunk: Expected "{expected}" but got "{actual}"'
        )
        self.expected = expected
        self.actual = actual


class InvalidHeaderLength(MidiHeaderError):
    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Wrong header chunk length: Expected {expected:#04x} but got {actual:#06x}"
        )
        self.expected = expected
        self.actual = actual


class InvalidFormatCode(MidiHeaderError):
    def __init__(self, actual: int):
        super().__init__(f"Invalid file format: {actual}")
        self.actual = actual


class ZeroTrackChunks(MidiHeaderError):
    def __init__(self) -> None:
        super().__init__("MIDI File must have at least one track chunk")


class ZeroDivision(MidiHeaderError):
    def __init__(self) -> None:
        super().__init__("Division cannot be zero")


class MidiFileAccessError(OSError):
    """Reading the input file failed before any decoding took place."""

    def __init__(self, path: str | Path, cause: OSError):
        super().__init__(str(cause))
        self.path = Path(path)
        self.cause = cause


__all__ = [
    "InvalidFormatCode",
    "InvalidHeaderLength",
    "InvalidIdentifier",
    "MidiFileAccessError",
    "MidiHeaderError",
    "UnexpectedEndOfFile",
    "ZeroDivision",
    "ZeroTrackChunks",
]
