"""Tests for cli.py: the mutoracle command.

Python 3.13+.
"""

from __future__ import annotations

import io
import json
import sys
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

from mutoracle.cli import EXIT_CRASH, EXIT_USAGE, build_parser, main

if TYPE_CHECKING:
    from pathlib import Path

_HAVOC = bytes(30) + b"HVC" + bytes(31)


class TestParser:
    """Argument parsing."""

    def test_subcommand_required(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args([])
        assert exc_info.value.code == 2

    def test_explain_defaults(self) -> None:
        args = build_parser().parse_args(["explain", "b"])
        assert args.input is None
        assert not args.json

    def test_triage_samples(self) -> None:
        args = build_parser().parse_args(["triage", "a", "dir", "--samples", "2"])
        assert args.samples == 2


class TestTable:
    """mutoracle table."""

    def test_single_harness(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["table", "b"]) == 0
        out = capsys.readouterr().out
        assert "Harness b: capacity=128 read=100 min=64 predicates=15 (disjoint)" in out
        assert "splice_boundary" in out
        assert "u32le@44 == 0xFFFFFFFF" in out
        assert "interest 16/8" in out

    def test_all_harnesses(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["table"]) == 0
        out = capsys.readouterr().out
        assert "Harness a:" in out
        assert "Harness b:" in out
        assert "byte 0 == 0x41 and byte 1 == 0x41" in out

    def test_unknown_harness(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["table", "z"]) == EXIT_USAGE
        assert "[ERROR] Unknown harness 'z'" in capsys.readouterr().err


class TestExplain:
    """mutoracle explain."""

    def test_crash_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "input"
        path.write_bytes(_HAVOC)
        assert main(["explain", "b", str(path)]) == EXIT_CRASH
        out = capsys.readouterr().out
        assert "[CRASH] harness b, 64 byte(s) read" in out
        assert "first match: havoc_hvc (havoc)" in out

    def test_json(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        data = bytearray(_HAVOC)
        data[50:54] = b"ABCD"
        path = tmp_path / "input"
        path.write_bytes(bytes(data))
        assert main(["explain", "b", str(path), "--json"]) == EXIT_CRASH
        result = json.loads(capsys.readouterr().out)
        assert result["outcome"] == "crash"
        assert result["predicate"] == "havoc_hvc"
        assert result["strategy"] == "havoc"
        assert result["all_matches"] == ["havoc_hvc", "dictionary_abcd"]

    def test_no_match(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "seed"
        path.write_bytes(b"AAAA")
        assert main(["explain", "a", str(path)]) == 0
        assert "[NO_MATCH] harness a, 4 byte(s) read" in capsys.readouterr().out

    def test_stdin(self, capsys: pytest.CaptureFixture[str]) -> None:
        fake_stdin = io.TextIOWrapper(io.BytesIO(b"\xff" * 10))
        with patch.object(sys, "stdin", fake_stdin):
            assert main(["explain", "b", "--json"]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result["input"] == "<stdin>"
        assert result["outcome"] == "insufficient_input"
        assert result["predicate"] is None

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["explain", "a", str(tmp_path / "missing")]) == EXIT_USAGE
        assert capsys.readouterr().err.startswith("[ERROR]")


class TestSeeds:
    """mutoracle seeds."""

    def test_writes_corpus(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["seeds", "b", str(tmp_path), "--witnesses"]) == 0
        out = capsys.readouterr().out
        assert out.count("seed ") == 2
        assert out.count("witness ") == 15
        assert (tmp_path / "harness_b.dict").exists()
        assert (tmp_path / "witnesses" / "splice_boundary").exists()


class TestTriageCommand:
    """mutoracle triage."""

    def test_groups(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "c1").write_bytes(_HAVOC)
        (tmp_path / "c2").write_bytes(bytes(64))
        assert main(["triage", "b", str(tmp_path)]) == EXIT_CRASH
        out = capsys.readouterr().out
        assert "Replayed 2 input(s) against harness b" in out
        assert "[havoc_hvc] x1" in out
        assert "[no_match] x1" in out

    def test_json_no_crashes(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "c1").write_bytes(b"AAAA")
        assert main(["triage", "a", str(tmp_path), "--json"]) == 0
        assert json.loads(capsys.readouterr().out)["crashes"] == 0

    def test_missing_path(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["triage", "a", str(tmp_path / "missing")]) == EXIT_USAGE
        assert "No such file or directory" in capsys.readouterr().err
