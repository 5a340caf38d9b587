from __future__ import annotations

import json

from recursive_csv.cli import main


def test_convert_to_file(tmp_path) -> None:
    output = tmp_path / "employees.csv"
    stats = tmp_path / "stats.json"
    code = main(
        [
            "convert",
            "sample_records:EMPLOYEES",
            "--max-depth",
            "2",
            "--output",
            str(output),
            "--stats",
            str(stats),
        ]
    )
    assert code == 0
    assert output.read_text(encoding="utf-8").splitlines()[0] == (
        "person.first_name,person.last_name,person.age,department"
    )
    payload = json.loads(stats.read_text(encoding="utf-8"))
    assert payload["rows_written"] == 2
    assert payload["record_type"] == "Employee"


def test_convert_callable_to_stdout(capsys) -> None:
    assert main(["convert", "sample_records:make_companies", "--allow-arrays"]) == 0
    assert capsys.readouterr().out == "name,departments\nTechCorp,Engineering|Marketing|Sales\n"


def test_convert_with_config_profile(config_path, capsys) -> None:
    code = main(["convert", "sample_records:make_companies", "--config", str(config_path), "--profile", "arrays"])
    assert code == 0
    assert capsys.readouterr().out == "name;departments\nTechCorp;Engineering/Marketing/Sales\n"


def test_strict_mismatch_reports_error(capsys) -> None:
    assert main(["convert", "sample_records:MIXED", "--strict"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "record 1 is Address" in captured.err


def test_columns(capsys) -> None:
    assert main(["columns", "sample_records:Staff", "--max-depth", "1", "--path-separator", "/"]) == 0
    assert capsys.readouterr().out.splitlines() == ["employee/department", "badge/code", "badge/level", "score"]


def test_bad_reference(capsys) -> None:
    assert main(["columns", "sample_records"]) == 1
    assert "module:attribute" in capsys.readouterr().err
