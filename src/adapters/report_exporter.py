"""Exportación de reportes de ejecución.

Por qué está en adapters:
- PDF/HTML son detalles de infraestructura (WeasyPrint/Jinja2).
- El Core solo conoce el agregado `RunReport` y las fichas `PatternInfo`.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.domain.models import PatternCategory, PatternInfo, RunReport

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_report_html(*, report: RunReport, infos: list[PatternInfo]) -> str:
    """Renderiza un HTML autocontenido con la ficha y la salida de cada demo."""

    generated_at = datetime.now(timezone.utc).isoformat(timespec="seconds")
    info_by_slug = {info.slug: info for info in infos}

    sections: list[tuple[PatternCategory, list]] = []
    for category in PatternCategory:
        entries = [
            (info_by_slug.get(t.slug), t)
            for t in report.transcripts
            if t.category is category
        ]
        if entries:
            sections.append((category, entries))

    template = _get_env().get_template("report.html")
    return template.render(
        report=report,
        sections=sections,
        language=report.language,
        generated_at=generated_at,
        demos_total=len(report.transcripts),
        demos_failed=len(report.failed()),
    )


def export_report_html(*, report: RunReport, infos: list[PatternInfo], output_path: Path) -> Path:
    """Exporta el reporte como HTML.

    Por qué existe:
    - Sirve como fallback cuando el render PDF no está soportado por el entorno.
    - Útil para depurar el contenido del reporte y el template.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_report_html(report=report, infos=infos), encoding="utf-8")
    return output_path


def export_report_pdf(*, report: RunReport, infos: list[PatternInfo], output_path: Path) -> Path:
    """Exporta el reporte como PDF.

    Diseño:
    - WeasyPrint se importa aquí: depende de librerías nativas (Pango) y su
      ausencia no debe impedir usar el resto de la CLI.
    """

    from weasyprint import HTML  # noqa: PLC0415

    output_path.parent.mkdir(parents=True, exist_ok=True)
    html = render_report_html(report=report, infos=infos)
    HTML(string=html, base_url=str(_TEMPLATES_DIR)).write_pdf(str(output_path))
    return output_path
