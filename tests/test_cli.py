import json

from typer.testing import CliRunner

from assertkit.cli import app

runner = CliRunner()

PASSING_SUITE = """
cases:
  - name: ok
    checks:
      - sequence_equal: {expected: [1, 2], actual: [1, 2]}
"""

FAILING_SUITE = """
cases:
  - name: ok
    checks:
      - contains: {value: "abc", substring: "b"}
  - name: broken
    checks:
      - less_than: {actual: 3, bound: 2}
"""


def _write(tmp_path, content):
    path = tmp_path / "suite.yaml"
    path.write_text(content)
    return path


def test_run_passing_suite(tmp_path):
    config = _write(tmp_path, PASSING_SUITE)
    result = runner.invoke(app, ["run", str(config), "--output-dir", str(tmp_path / "runs")])
    assert result.exit_code == 0
    assert "Run complete" in result.output
    assert "junit.xml" in result.output
    assert "Debug log" in result.output


def test_run_failing_suite_exits_non_zero(tmp_path):
    config = _write(tmp_path, FAILING_SUITE)
    result = runner.invoke(app, ["run", str(config), "--output-dir", str(tmp_path / "runs")])
    assert result.exit_code == 1
    assert "FAIL broken" in result.output


def test_run_single_case(tmp_path):
    config = _write(tmp_path, FAILING_SUITE)
    result = runner.invoke(
        app, ["run", str(config), "--case", "ok", "--output-dir", str(tmp_path / "runs")]
    )
    assert result.exit_code == 0
    assert "broken" not in result.output


def test_run_unknown_case(tmp_path):
    config = _write(tmp_path, PASSING_SUITE)
    result = runner.invoke(
        app, ["run", str(config), "--case", "missing", "--output-dir", str(tmp_path / "runs")]
    )
    assert result.exit_code == 1


def test_run_missing_config():
    result = runner.invoke(app, ["run", "nonexistent.yaml"])
    assert result.exit_code != 0


def test_run_invalid_config(tmp_path):
    config = _write(tmp_path, "cases: []\n")
    result = runner.invoke(app, ["run", str(config), "--output-dir", str(tmp_path / "runs")])
    assert result.exit_code == 1
    assert not (tmp_path / "runs").exists()


def test_run_parallel(tmp_path):
    config = _write(tmp_path, FAILING_SUITE)
    result = runner.invoke(
        app, ["run", str(config), "-p", "2", "--output-dir", str(tmp_path / "runs")]
    )
    assert result.exit_code == 1
    assert "PASS ok" in result.output


def test_schema_generate_command_writes_files(tmp_path):
    out = tmp_path / "schema.json"
    doc = tmp_path / "schema.md"
    result = runner.invoke(app, ["schema", "generate", "--out", str(out), "--doc", str(doc)])
    assert result.exit_code == 0
    schema = json.loads(out.read_text())
    assert "cases" in schema["properties"]
    assert "`equal_with_variance`: { expected, actual, variance }" in doc.read_text()


def test_schema_generate_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["schema", "generate"])
    assert result.exit_code == 0
    assert (tmp_path / "schemas" / "assertkit.schema.json").exists()
    assert (tmp_path / "docs" / "schema.md").exists()


def test_run_mistyped_check_writes_reports(tmp_path):
    config = _write(tmp_path, """
cases:
  - name: mistyped
    checks:
      - greater_than: {actual: 3, bound: x}
""")
    result = runner.invoke(app, ["run", str(config), "--output-dir", str(tmp_path / "runs")])
    assert not isinstance(result.exception, TypeError)
    assert result.exit_code == 1
    assert "FAIL mistyped" in result.output
    run_dirs = list((tmp_path / "runs").iterdir())
    assert len(run_dirs) == 1
    assert (run_dirs[0] / "junit.xml").exists()
