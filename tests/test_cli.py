import json

from typer.testing import CliRunner

from softverify.cli import app
from softverify.queue import VerificationQueue
from softverify.reporting.junit import write_junit

runner = CliRunner()


def _clear_env(monkeypatch):
    for name in (
        "SOFTVERIFY_DEFAULT_WAIT_SECONDS",
        "SOFTVERIFY_DEFAULT_INTERVAL_MILLIS",
        "SOFTVERIFY_PRINT_PASSED",
    ):
        monkeypatch.delenv(name, raising=False)


def test_config_prints_defaults(monkeypatch):
    _clear_env(monkeypatch)
    result = runner.invoke(app, ["config"])
    assert result.exit_code == 0
    assert "default_wait_seconds: 5" in result.output
    assert "default_interval_millis: 10" in result.output
    assert "print_passed: false" in result.output


def test_config_reads_file(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    path = tmp_path / "softverify.yaml"
    path.write_text("default_wait_seconds: 2\n")
    result = runner.invoke(app, ["config", str(path)])
    assert result.exit_code == 0
    assert "default_wait_seconds: 2" in result.output


def test_config_env_overrides_file(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("SOFTVERIFY_DEFAULT_WAIT_SECONDS", "9")
    path = tmp_path / "softverify.yaml"
    path.write_text("default_wait_seconds: 2\n")

    result = runner.invoke(app, ["config", str(path)])
    assert "default_wait_seconds: 9" in result.output

    result = runner.invoke(app, ["config", str(path), "--no-env"])
    assert "default_wait_seconds: 2" in result.output


def test_config_missing_file():
    result = runner.invoke(app, ["config", "nonexistent.yaml"])
    assert result.exit_code == 1


def test_config_invalid_file(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    path = tmp_path / "softverify.yaml"
    path.write_text("default_wait_seconds: -4\n")
    result = runner.invoke(app, ["config", str(path)])
    assert result.exit_code == 1


def test_summary_passing_report(tmp_path, outcome):
    queue = VerificationQueue()
    queue.record(outcome(True, "a"), "first", False, "a", 0, 10)
    path = write_junit(tmp_path / "junit.xml", queue.history)

    result = runner.invoke(app, ["summary", str(path)])
    assert result.exit_code == 0
    assert "1 verification(s): 1 passed, 0 failed" in result.output


def test_summary_failing_report(tmp_path, outcome):
    queue = VerificationQueue()
    queue.record(outcome(True, "a"), "first", False, "a", 0, 10)
    queue.record(outcome(False, "b"), "second", False, "a", 0, 10)
    path = write_junit(tmp_path / "junit.xml", queue.history)

    result = runner.invoke(app, ["summary", str(path)])
    assert result.exit_code == 1
    assert "2 verification(s): 1 passed, 1 failed" in result.output
    assert "FAIL ::> second" in result.output


def test_summary_missing_report():
    result = runner.invoke(app, ["summary", "missing.xml"])
    assert result.exit_code == 1


def test_schema_writes_json_and_doc(tmp_path):
    out = tmp_path / "schemas" / "softverify.schema.json"
    doc = tmp_path / "docs" / "schema.md"
    result = runner.invoke(app, ["schema", "--out", str(out), "--doc", str(doc)])

    assert result.exit_code == 0
    schema = json.loads(out.read_text())
    assert schema["title"] == "softverify config"
    assert set(schema["properties"]) == {
        "default_wait_seconds",
        "default_interval_millis",
        "print_passed",
    }
    assert "`default_wait_seconds`" in doc.read_text()


def test_debug_file_captures_cli_logging(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    config_path = tmp_path / "softverify.yaml"
    config_path.write_text("default_wait_seconds: 2\n")
    debug_file = tmp_path / "logs" / "debug.log"

    result = runner.invoke(
        app, ["--debug-file", str(debug_file), "config", str(config_path)]
    )

    assert result.exit_code == 0
    assert f"Loaded config from {config_path}" in debug_file.read_text()


def test_verbose_without_debug_file_uses_default(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["--verbose", "config"])

    assert result.exit_code == 0
    assert (tmp_path / "softverify-debug.log").exists()


def test_no_debug_file_by_default(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["config"])

    assert result.exit_code == 0
    assert not (tmp_path / "softverify-debug.log").exists()
