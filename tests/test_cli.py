"""Tests for the Typer CLI in sarifgen.main."""

import json
from pathlib import Path

from typer.testing import CliRunner

from sarifgen.main import app

runner = CliRunner()


def _write(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def _inputs(tmp_path: Path) -> tuple[Path, Path, Path]:
    descriptions = _write(
        tmp_path / "descriptions.json",
        {"R1": {"shortDescription": "short one", "fullDescription": "desc"}, "R2": {"passDescription": "fine"}},
    )
    first = _write(
        tmp_path / "first.json",
        [
            {
                "identifier": "R1",
                "kind": "fail",
                "action": "WARN",
                "locations": [
                    {"uri": "a.c", "region": {"start_line": 0, "end_line": 2, "start_column": 3, "end_column": 10}}
                ],
            }
        ],
    )
    second = _write(tmp_path / "second.json", [{"identifier": "R2", "kind": "pass"}])
    return descriptions, first, second


def test_convert_to_file(tmp_path):
    descriptions, first, second = _inputs(tmp_path)
    out = tmp_path / "report.sarif"
    result = runner.invoke(app, [str(first), str(second), "--descriptions", str(descriptions), "--output", str(out)])
    assert result.exit_code == 0, result.output

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["version"] == "2.1.0"
    assert len(data["runs"]) == 2
    r1 = data["runs"][0]["results"][0]
    assert r1["level"] == "warning"
    assert r1["message"] == {"text": "desc", "id": "R1Message0", "arguments": []}
    assert r1["locations"][0]["physicalLocation"]["region"] == {
        "startLine": 1,
        "endLine": 3,
        "startColumn": 4,
        "endColumn": 11,
    }
    r2 = data["runs"][1]["results"][0]
    assert r2["kind"] == "pass"
    assert r2["message"]["text"] == "fine"
    assert r2["ruleIndex"] == 1


def test_convert_to_stdout(tmp_path):
    descriptions, first, _ = _inputs(tmp_path)
    result = runner.invoke(app, [str(first), "-d", str(descriptions)])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["runs"][0]["results"][0]["ruleId"] == "R1"


def test_convert_without_descriptions(tmp_path):
    _, first, _ = _inputs(tmp_path)
    result = runner.invoke(app, [str(first)])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    run = data["runs"][0]
    assert run["tool"]["driver"]["rules"] == []
    assert run["results"][0]["ruleIndex"] == -1
    assert run["results"][0]["message"]["text"] == ""


def test_convert_skips_invalid_findings_file(tmp_path):
    descriptions, first, _ = _inputs(tmp_path)
    bad = tmp_path / "bad.json"
    bad.write_text("not json", encoding="utf-8")
    out = tmp_path / "report.sarif"
    result = runner.invoke(app, [str(bad), str(first), "-d", str(descriptions), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert len(json.loads(out.read_text(encoding="utf-8"))["runs"]) == 1


def test_convert_bad_descriptions(tmp_path):
    _, first, _ = _inputs(tmp_path)
    bad = tmp_path / "descriptions.json"
    bad.write_text("[1, 2]", encoding="utf-8")
    result = runner.invoke(app, [str(first), "-d", str(bad)])
    assert result.exit_code != 0


def test_convert_missing_findings_file(tmp_path):
    result = runner.invoke(app, [str(tmp_path / "missing.json")])
    assert result.exit_code != 0


def test_convert_with_summary(tmp_path):
    descriptions, first, second = _inputs(tmp_path)
    out = tmp_path / "report.sarif"
    result = runner.invoke(
        app,
        [str(first), str(second), "-d", str(descriptions), "-o", str(out), "--summary", "--verbose"],
    )
    assert result.exit_code == 0, result.output
    assert "Summary" in result.stdout
    assert "short one" in result.stdout
    assert out.exists()
