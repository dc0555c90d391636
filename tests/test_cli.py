from __future__ import annotations

from pathlib import Path

import pytest

from tinymid_tools.cli import EXIT_FAILURE, EXIT_OK, Options, main, parse_args

from tests.helpers import hex_bytes, make_header


def _write(tmp_path: Path, name: str, data: bytes) -> Path:
    path = tmp_path / name
    path.write_bytes(data)
    return path


def test_parse_args_reads_infile_and_debug_count() -> None:
    assert parse_args(["song.mid"]) == Options(infile=Path("song.mid"), debug=0)
    assert parse_args(["song.mid", "-d"]).debug == 1
    assert parse_args(["-dd", "song.mid"]).debug == 2
    assert parse_args(["song.mid", "--debug"]).debug == 1


def test_missing_infile_is_a_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_args([])

    assert excinfo.value.code == 2
    assert "infile" in capsys.readouterr().err


def test_version_flag_prints_version(monkeypatch, capsys) -> None:
    monkeypatch.setenv("TINYMID_VERSION", "9.8.7")
    from app.version import get_app_version

    get_app_version.cache_clear()  # type: ignore[attr-defined]
    try:
        with pytest.raises(SystemExit) as excinfo:
            parse_args(["--version"])
    finally:
        get_app_version.cache_clear()  # type: ignore[attr-defined]

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == "tinymid 9.8.7"


def test_valid_header_prints_summary(tmp_path: Path, capsys) -> None:
    path = _write(tmp_path, "ok.mid", hex_bytes("4D 54 68 64 00 00 00 06 00 01 00 02 00 78"))

    assert main([str(path)]) == EXIT_OK

    captured = capsys.readouterr()
    assert captured.out.strip() == (
        "Format: Multiple Track (1), track chunks: 2, division: 120 ticks per beat"
    )
    assert captured.err == ""


def test_header_error_exits_with_failure(tmp_path: Path, capsys) -> None:
    path = _write(tmp_path, "bad.mid", hex_bytes("4D 54 68 64 00 00 00 06 00 00 00 00 00 78"))

    assert main([str(path)]) == EXIT_FAILURE

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "ERROR MIDI File must have at least one track chunk"


def test_truncated_file_reports_unexpected_end(tmp_path: Path, capsys) -> None:
    path = _write(tmp_path, "short.mid", make_header()[:9])

    assert main([str(path)]) == EXIT_FAILURE
    assert "File ended unexpectedly" in capsys.readouterr().err


def test_missing_file_exits_with_failure(tmp_path: Path, capsys) -> None:
    assert main([str(tmp_path / "nope.mid")]) == EXIT_FAILURE

    err = capsys.readouterr().err
    assert err.startswith("ERROR ")
    assert "No such file or directory" in err


def test_debug_flag_reports_classification(tmp_path: Path, capsys) -> None:
    path = _write(tmp_path, "smpte.mid", make_header(file_format=0, tracks=1, division=-7600))

    assert main([str(path), "--debug"]) == EXIT_OK

    err = capsys.readouterr().err
    assert "DEBUG Single Track File Format" in err
    assert "DEBUG Division given in SMPTE format" in err


def test_debug_output_is_silent_by_default(tmp_path: Path, capsys) -> None:
    path = _write(tmp_path, "quiet.mid", make_header())

    assert main([str(path)]) == EXIT_OK
    assert capsys.readouterr().err == ""


def test_unwritable_log_file_does_not_abort_inspection(tmp_path: Path, monkeypatch, capsys) -> None:
    blocker = _write(tmp_path, "blocker", b"")
    monkeypatch.setenv("TINYMID_LOG_FILE", str(blocker / "sub" / "log.txt"))
    path = _write(tmp_path, "ok.mid", make_header())

    assert main([str(path)]) == EXIT_OK

    captured = capsys.readouterr()
    assert captured.out.startswith("Format: Multiple Track (1)")
    assert "Cannot write log file" in captured.err
