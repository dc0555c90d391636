"""Command line tools for inspecting Standard MIDI Files."""

from .midi_header import DecodedHeader, FileFormat, MidiHeaderError, inspect_file, parse_header

__all__ = ["DecodedHeader", "FileFormat", "MidiHeaderError", "inspect_file", "parse_header"]
