"""CLI principal (Typer).

Por qué Typer + Rich:
- Typer da subcomandos tipados y ayuda autogenerada.
- Rich pinta tablas/paneles/markdown sin mezclar presentación con el Core.

Los comandos solo traducen flags a llamadas de `core.services` y pintan el
resultado; toda la lógica vive en el Core.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from adapters.json_exporter import catalogue_payload, export_report_json
from adapters.report_exporter import export_report_html, export_report_pdf
from cli import doctor
from cli.ui_components import (
    build_catalogue_table,
    build_doc_view,
    build_info_panel,
    build_transcript_panel,
    print_banner,
)
from core.config import AppSettings, load_settings
from core.domain.errors import PatternbookError
from core.domain.language import Language
from core.domain.models import PatternCategory, RunReport
from core.logging_setup import configure_logging
from core.resources_loader import load_pattern_doc
from core.services.catalogue import get_info, list_infos
from core.services.demo_runner import RunHooks, RunRequest, run_demos

logger = logging.getLogger(__name__)

app = typer.Typer(
    no_args_is_help=True,
    help="Browse and run design-pattern demos (creational, structural, behavioral, principles).",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


class _State:
    show_banner = True


_state = _State()


def _fail(exc: PatternbookError) -> typer.Exit:
    _console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    return typer.Exit(code=exc.exit_code)


def _settings() -> AppSettings:
    try:
        return load_settings()
    except PatternbookError as exc:
        raise _fail(exc) from None


def _language(settings: AppSettings, spanish: bool | None) -> Language:
    if spanish is None:
        return settings.default_language
    return Language.from_bool(spanish)


def _banner() -> None:
    if _state.show_banner:
        print_banner(_console)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging on stderr."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    settings = _settings()
    configure_logging("DEBUG" if verbose else settings.log_level)
    _state.show_banner = settings.show_banner and not no_banner


@app.command("list")
def list_patterns(
    category: Optional[PatternCategory] = typer.Option(None, "--category", "-c", help="Filter by category."),
    as_json: bool = typer.Option(False, "--json", help="Print the catalogue as JSON."),
    spanish: Optional[bool] = typer.Option(None, "--spanish/--english", help="Intent language."),
) -> None:
    """List the catalogue."""

    settings = _settings()
    infos = list_infos(category)
    if as_json:
        typer.echo(json.dumps(catalogue_payload(infos), ensure_ascii=False, indent=2))
        return

    _banner()
    _console.print(build_catalogue_table(infos, _language(settings, spanish)))


@app.command()
def show(
    key: str = typer.Argument(..., help="Pattern slug or alias (e.g. 'observer', 'cor')."),
    spanish: Optional[bool] = typer.Option(None, "--spanish/--english", help="Intent language."),
) -> None:
    """Show a pattern's summary and its markdown explanation."""

    settings = _settings()
    try:
        info = get_info(key)
        doc = load_pattern_doc(info.slug, settings)
    except PatternbookError as exc:
        raise _fail(exc) from None

    _console.print(build_info_panel(info, _language(settings, spanish)))
    _console.print(build_doc_view(doc))


def _export(report: RunReport, json_out: Path | None, html_out: Path | None, pdf_out: Path | None) -> None:
    infos = list_infos()
    if json_out:
        path = export_report_json(report=report, output_path=json_out)
        _console.print(f"[green]JSON report:[/green] {path}")
    if html_out:
        path = export_report_html(report=report, infos=infos, output_path=html_out)
        _console.print(f"[green]HTML report:[/green] {path}")
    if pdf_out:
        try:
            path = export_report_pdf(report=report, infos=infos, output_path=pdf_out)
            _console.print(f"[green]PDF report:[/green] {path}")
        except Exception as exc:
            logger.warning("PDF export failed, falling back to HTML: %s", exc)
            path = export_report_html(report=report, infos=infos, output_path=pdf_out.with_suffix(".html"))
            _console.print(f"[yellow]PDF export failed; wrote HTML instead:[/yellow] {path}")


@app.command("run")
def run_command(
    keys: Optional[List[str]] = typer.Argument(None, help="Slugs or aliases to run (default: all)."),
    category: Optional[PatternCategory] = typer.Option(None, "--category", "-c", help="Run a whole category."),
    strict: bool = typer.Option(False, "--strict", help="Abort on the first failing demo."),
    json_out: Optional[Path] = typer.Option(None, "--json-out", help="Write the run report as JSON."),
    html_out: Optional[Path] = typer.Option(None, "--html-out", help="Write the run report as HTML."),
    pdf_out: Optional[Path] = typer.Option(None, "--pdf-out", help="Write the run report as PDF."),
    save: bool = typer.Option(False, "--save", "-s", help="Write JSON + HTML reports to the reports directory."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not print transcripts."),
) -> None:
    """Run demos and print what each one emits."""

    settings = _settings()
    hooks = RunHooks(warning=lambda message: _console.print(f"[yellow]Warning:[/yellow] {message}"))

    if not quiet:
        _banner()
    try:
        result = run_demos(
            settings=settings,
            request=RunRequest(slugs=keys or None, category=category, strict=strict),
            hooks=hooks,
        )
    except PatternbookError as exc:
        raise _fail(exc) from None

    report = result.report
    if not quiet:
        for transcript in report.transcripts:
            _console.print(build_transcript_panel(transcript))

    if save:
        stamp = report.generated_at.strftime("%Y%m%d-%H%M%S")
        json_out = json_out or settings.reports_dir / f"run-{stamp}.json"
        html_out = html_out or settings.reports_dir / f"run-{stamp}.html"
    _export(report, json_out, html_out, pdf_out)

    failed = report.failed()
    _console.print(f"{len(report.transcripts)} demo(s) run, {len(failed)} failed.")
    if failed:
        raise typer.Exit(code=1)


def run() -> None:
    app()
