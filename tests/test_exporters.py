"""Tests de exportadores JSON/HTML y del cargador de explicaciones."""

import json

import pytest

from adapters.json_exporter import export_catalogue_json, export_report_json
from adapters.report_exporter import render_report_html
from core.config import AppSettings
from core.domain.errors import DocumentNotFoundError
from core.resources_loader import docs_dir, load_pattern_doc
from core.services.catalogue import list_infos
from core.services.demo_runner import RunRequest, run_demos


@pytest.fixture
def report(settings):
    return run_demos(settings=settings, request=RunRequest(slugs=["observer", "adapter", "srp"])).report


def test_export_report_json(report, tmp_path):
    path = export_report_json(report=report, output_path=tmp_path / "out" / "run.json")
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["ok"] is True
    assert [t["slug"] for t in payload["transcripts"]] == ["observer", "adapter", "single-responsibility"]
    assert payload["transcripts"][0]["lines"][0] == "Phone display: 25.0 C"


def test_export_catalogue_json(tmp_path):
    path = export_catalogue_json(infos=list_infos(), output_path=tmp_path / "catalogue.json")
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert len(payload) == 25
    assert payload[0]["slug"] == "singleton"
    assert payload[0]["category"] == "creational"


def test_render_report_html_groups_by_category(report):
    html = render_report_html(report=report, infos=list_infos())
    assert html.index(">structural<") < html.index(">behavioral<") < html.index(">principle<")
    assert 'id="observer"' in html
    # Autoescape: el XML del adapter no se interpreta como HTML.
    assert "&lt;event&gt;" in html


def test_load_pattern_doc():
    text = load_pattern_doc("singleton")
    assert text.startswith("# Singleton")


def test_docs_dir_override(tmp_path):
    (tmp_path / "observer.md").write_text("# Custom\n", encoding="utf-8")
    settings = AppSettings(docs_dir=tmp_path)
    assert docs_dir(settings) == tmp_path
    assert load_pattern_doc("observer", settings) == "# Custom\n"
    with pytest.raises(DocumentNotFoundError):
        load_pattern_doc("state", settings)
