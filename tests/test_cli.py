"""Tests de la CLI con `typer.testing.CliRunner`."""

import json

import pytest
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_banner(monkeypatch):
    monkeypatch.setenv("PATTERNBOOK_SHOW_BANNER", "false")


def test_list_json():
    result = runner.invoke(app, ["list", "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert len(payload) == 25


def test_list_table_by_category():
    result = runner.invoke(app, ["list", "--category", "principle"])
    assert result.exit_code == 0, result.output
    assert "delegation" in result.output
    assert "singleton" not in result.output


def test_show_known_pattern():
    result = runner.invoke(app, ["show", "cor"])
    assert result.exit_code == 0, result.output
    assert "Chain of Responsibility" in result.output


def test_show_unknown_pattern_exits_2():
    result = runner.invoke(app, ["show", "singelton"])
    assert result.exit_code == 2
    assert "Unknown pattern" in result.output


def test_run_selected_demos_with_exports(tmp_path):
    json_out = tmp_path / "run.json"
    html_out = tmp_path / "run.html"
    result = runner.invoke(
        app, ["run", "state", "memento", "--json-out", str(json_out), "--html-out", str(html_out)]
    )
    assert result.exit_code == 0, result.output
    assert "Red -> Green: Go" in result.output
    assert "2 demo(s) run, 0 failed." in result.output
    payload = json.loads(json_out.read_text(encoding="utf-8"))
    assert [t["slug"] for t in payload["transcripts"]] == ["state", "memento"]
    assert html_out.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")


def test_run_category_quiet():
    result = runner.invoke(app, ["run", "--category", "creational", "--quiet"])
    assert result.exit_code == 0, result.output
    assert "5 demo(s) run, 0 failed." in result.output
    assert "Assembling Sedan car." not in result.output


def test_run_save_uses_reports_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("PATTERNBOOK_REPORTS_DIR", str(tmp_path / "reports"))
    result = runner.invoke(app, ["run", "iterator", "--quiet", "--save"])
    assert result.exit_code == 0, result.output
    saved = sorted(p.suffix for p in (tmp_path / "reports").iterdir())
    assert saved == [".html", ".json"]


def test_run_unknown_pattern_exits_2():
    result = runner.invoke(app, ["run", "observer", "nope"])
    assert result.exit_code == 2
    assert "Unknown pattern: 'nope'" in result.output


def test_run_failing_demo_exits_1(monkeypatch):
    from core.services import demo_runner
    from patterns.behavioral.state import StateDemo

    class BrokenDemo(StateDemo):
        def run(self, emit):
            raise RuntimeError("broken light")

    monkeypatch.setattr(demo_runner, "create_demo", lambda slug, settings: BrokenDemo(settings))
    result = runner.invoke(app, ["run", "state", "--quiet"])
    assert result.exit_code == 1
    assert "1 failed" in result.output


def test_doctor_run(monkeypatch):
    from cli import doctor

    monkeypatch.setattr(doctor, "_check_pdf", lambda: (False, "no pango"))
    result = runner.invoke(app, ["doctor", "run"])
    assert result.exit_code == 0, result.output
    assert "Pattern docs" in result.output
    assert "falls back to HTML" in result.output


def test_doctor_configure_writes_user_env(tmp_path):
    result = runner.invoke(app, ["doctor", "configure"], input=f"es\n{tmp_path / 'mylogs'}\n")
    assert result.exit_code == 0, result.output
    env_file = tmp_path / "config" / "patternbook" / ".env"
    content = env_file.read_text(encoding="utf-8")
    assert "PATTERNBOOK_DEFAULT_LANGUAGE=es" in content


def test_doctor_configure_rejects_unknown_language():
    result = runner.invoke(app, ["doctor", "configure"], input="fr\n")
    assert result.exit_code == 2
    assert "Unsupported language" in result.output


def test_invalid_configuration_exits_2(monkeypatch):
    monkeypatch.setenv("PATTERNBOOK_LOG_LEVEL", "loud")
    result = runner.invoke(app, ["list", "--json"])
    assert result.exit_code == 2
    assert "Invalid configuration" in result.output
    assert "log_level" in result.output
    assert not isinstance(result.exception, ValueError)


def test_run_strict_stops_at_first_failure(monkeypatch):
    from core.services import demo_runner
    from patterns.behavioral.state import StateDemo

    class BrokenDemo(StateDemo):
        def run(self, emit):
            raise RuntimeError("broken light")

    created = []

    def fake_create(slug, settings):
        created.append(slug)
        return BrokenDemo(settings)

    monkeypatch.setattr(demo_runner, "create_demo", fake_create)
    result = runner.invoke(app, ["run", "state", "memento", "--strict", "--quiet"])
    assert result.exit_code == 1
    assert created == ["state"]
    assert "Demo 'state' failed: broken light" in result.output
    assert "demo(s) run" not in result.output


def test_run_pdf_falls_back_to_html(tmp_path, monkeypatch):
    from cli import main as cli_main

    def broken_pdf(**kwargs):
        raise OSError("cannot load library 'pango'")

    monkeypatch.setattr(cli_main, "export_report_pdf", broken_pdf)
    result = runner.invoke(app, ["run", "iterator", "--quiet", "--pdf-out", str(tmp_path / "r.pdf")])
    assert result.exit_code == 0, result.output
    assert "PDF export failed; wrote HTML instead" in result.output
    assert not (tmp_path / "r.pdf").exists()
    assert (tmp_path / "r.html").read_text(encoding="utf-8").startswith("<!DOCTYPE html>")
