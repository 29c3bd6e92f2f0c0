from __future__ import annotations

import json
from pathlib import Path

import pytest

from stardiff.cli import main


def _write_lines(path: Path, rows: list[dict[str, int]]) -> Path:
    path.write_text("\n".join(json.dumps(row) for row in rows) + "\n", encoding="utf-8")
    return path


def test_cli_look_back_and_structured_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write_lines(
        tmp_path / "snapshots.jsonl",
        [
            {"stars": 1723, "forks": 134},
            {"stars": 1723, "forks": 134},
            {"stars": 1723, "forks": 135},
            {"stars": 1724, "forks": 135},
        ],
    )

    exit_code = main([str(source), "--look-back", "--format", "structured"])

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert [json.loads(line) for line in lines] == [{"forks": 135}, {"stars": 1724}]


def test_cli_zeroed_cold_start_text_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write_lines(tmp_path / "snapshots.jsonl", [{"stars": 2, "forks": 1}])

    exit_code = main([str(source), "--cold-start", "zeroed"])

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert [json.loads(line) for line in lines] == [{"result": ":gitfork: 1 \n:star2: 2"}]


def test_cli_reports_decode_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "bad.jsonl"
    source.write_text('{"stars": 1, "forks": 1}\n{"stars": "many"}\n', encoding="utf-8")

    exit_code = main([str(source)])

    assert exit_code == 1
    assert "Invalid snapshot payload" in capsys.readouterr().err


def test_cli_reports_undecodable_bytes(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "binary.jsonl"
    source.write_bytes(b'{"stars": 1, "forks": 1}\n\xff\xfe\n')

    exit_code = main([str(source)])

    assert exit_code == 1
    assert "Invalid snapshot payload" in capsys.readouterr().err
