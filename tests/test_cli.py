import json

import pytest

from mars.cli import main


def test_prints_outcomes(sample_file, capsys):
    assert main([str(sample_file)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["1 1 E", "3 3 N LOST", "2 3 S"]


def test_json_report(sample_file, capsys):
    assert main([str(sample_file), "--json"]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["grid"] == {"max_x": 5, "max_y": 3}
    assert report["outcomes"][1] == {"x": 3, "y": 3, "orientation": "N", "lost": True}
    assert report["scents"] == [[3, 4]]


def test_missing_argument_fails(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code != 0
    assert "input" in capsys.readouterr().err


def test_unreadable_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error:" in captured.err


def test_parse_error_prints_nothing(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("5 5\n1 2 3\n", encoding="utf-8")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "line 2" in captured.err


def test_construction_error_prints_nothing(tmp_path, capsys):
    path = tmp_path / "big.txt"
    path.write_text("51 10\n1 1 E\nF\n", encoding="utf-8")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Bad dimensions" in captured.err


def test_log_file(sample_file, tmp_path, capsys):
    log_path = tmp_path / "logs" / "run.log"
    assert main([str(sample_file), "--log-level", "debug", "--log-file", str(log_path)]) == 0
    assert capsys.readouterr().out.splitlines()[1] == "3 3 N LOST"
    assert "lost moving to (3, 4)" in log_path.read_text(encoding="utf-8")


def test_error_reported_once(tmp_path, capsys):
    path = tmp_path / "big.txt"
    path.write_text("51 10\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err.count("Bad dimensions") == 1


def test_json_log_lines(sample_file, tmp_path, capsys):
    log_path = tmp_path / "run.log"
    assert main([str(sample_file), "--log-level", "INFO", "--log-json", "--log-file", str(log_path)]) == 0
    capsys.readouterr()
    records = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert any("lost moving to (3, 4)" in record["msg"] for record in records)
    assert {record["level"] for record in records} == {"INFO"}
