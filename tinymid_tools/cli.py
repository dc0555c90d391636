"""A command line MIDI viewer."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path

from app.version import get_app_version
from shared.logging_config import configure_cli_logging

from .midi_header import DecodedHeader, MidiFileAccessError, read_file, try_parse_header

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


@dataclass(frozen=True)
class Options:
    infile: Path
    debug: int = 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tinymid", description=__doc__)
    parser.add_argument("infile", type=Path, help="File to read")
    parser.add_argument(
        "-d",
        "--debug",
        action="count",
        default=0,
        help="Turn debugging information on",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_app_version()}")
    return parser


def parse_args(argv: list[str] | None = None) -> Options:
    args = build_parser().parse_args(argv)
    return Options(infile=args.infile, debug=args.debug)


def main(argv: list[str] | None = None) -> int:
    options = parse_args(argv)
    configure_cli_logging(debug=options.debug > 0)

    try:
        data = read_file(options.infile)
    except MidiFileAccessError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE

    summary = try_parse_header(data).map(DecodedHeader.describe)
    if summary.is_err():
        logger.error("%s", summary.error)
        return EXIT_FAILURE

    print(summary.unwrap())
    return EXIT_OK


__all__ = ["EXIT_FAILURE", "EXIT_OK", "Options", "build_parser", "main", "parse_args"]
