from __future__ import annotations

import struct


def make_header(
    *,
    identifier: bytes = b"MThd",
    length: int = 6,
    file_format: int = 1,
    tracks: int = 2,
    division: int = 120,
) -> bytes:
    """Build a 14-byte ``MThd`` chunk; ``division`` may be negative."""

    return identifier + struct.pack(">IHHh", length, file_format, tracks, division)


def hex_bytes(text: str) -> bytes:
    return bytes.fromhex(text.replace(" ", ""))
