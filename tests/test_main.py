"""Tests for the command line entry point."""

import io
import json
import sys

import pytest

from nutrient_analysis.main import main
from tests.conftest import WELL_FORMED_ANALYSIS


def test_main_parses_file(tmp_path, capsys) -> None:
    source = tmp_path / "analysis.md"
    source.write_text(WELL_FORMED_ANALYSIS, encoding="utf-8")

    exit_code = main([str(source)])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert json.loads(captured.out) == {
        "macros": [
            {"name": "Protein", "grams": 25.0},
            {"name": "Carbs", "grams": 30.0},
            {"name": "Fat", "grams": 10.0},
        ],
        "micros": ["Vitamin C: 20mg", "Iron: 2mg"],
        "calories": 310,
    }


def _fake_stdin(raw: bytes) -> io.TextIOWrapper:
    return io.TextIOWrapper(io.BytesIO(raw), encoding="utf-8")


def test_main_reads_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "stdin", _fake_stdin(b"## Macronutrients\nProtein: 5g\n"))

    exit_code = main(["--indent", "2"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert '\n  "calories": 20\n' in captured.out


def test_main_missing_file_is_usage_error(tmp_path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing.md")])

    assert excinfo.value.code == 2


def test_main_replaces_invalid_utf8_on_stdin(monkeypatch, capsys) -> None:
    raw = b"## Micronutrients\n- Iron \xff\xfe 2mg\n"
    monkeypatch.setattr(sys, "stdin", _fake_stdin(raw))

    exit_code = main([])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert json.loads(captured.out)["micros"] == ["Iron �� 2mg"]


def test_main_replaces_invalid_utf8_in_file(tmp_path, capsys) -> None:
    source = tmp_path / "analysis.md"
    source.write_bytes(b"\xef\xbb\xbf## Macronutrients\nFat: 2g\n\x80\n")

    exit_code = main([str(source)])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert json.loads(captured.out)["calories"] == 18
