"""Doctor command for environment diagnostics."""

from __future__ import annotations

import tempfile
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.report_exporter import export_report_pdf
from core.config import AppSettings, load_settings, write_user_env_vars
from core.domain.errors import InvalidConfigurationError, PatternbookError
from core.domain.language import Language
from core.domain.models import RunReport
from core.resources_loader import docs_dir, missing_docs
from core.services.catalogue import list_infos

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _settings() -> AppSettings:
    try:
        return load_settings()
    except PatternbookError as exc:
        _console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=exc.exit_code) from None


def _check_log_dir(path: Path) -> tuple[bool, str]:
    try:
        path.mkdir(parents=True, exist_ok=True)
        probe = path / ".patternbook-doctor"
        probe.write_text("ok", encoding="utf-8")
        probe.unlink()
        return True, str(path)
    except OSError as exc:
        return False, f"{path}: {exc}"


def _check_pdf() -> tuple[bool, str]:
    """Attempt to render a minimal PDF to detect WeasyPrint issues."""

    try:
        with tempfile.TemporaryDirectory() as tmp:
            export_report_pdf(report=RunReport(), infos=[], output_path=Path(tmp) / "doctor.pdf")
        return True, "OK"
    except Exception as exc:
        return False, f"{type(exc).__name__}: {exc}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = _settings()

    table = Table(title="patternbook doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Language", "OK", settings.default_language.label())
    table.add_row("Log level", "OK", settings.log_level)

    ok_logs, detail_logs = _check_log_dir(settings.log_dir)
    table.add_row("Singleton log dir", "OK" if ok_logs else "FAIL", detail_logs)

    slugs = [info.slug for info in list_infos()]
    missing = missing_docs(slugs, settings)
    table.add_row(
        "Pattern docs",
        "OK" if not missing else "FAIL",
        str(docs_dir(settings)) if not missing else f"missing: {', '.join(missing)}",
    )

    ok_pdf, detail_pdf = _check_pdf()
    table.add_row("WeasyPrint PDF", "OK" if ok_pdf else "OPTIONAL", detail_pdf)

    _console.print(table)

    if not ok_pdf:
        _console.print(
            "\n[yellow]Note:[/yellow] When PDF export fails, `--pdf-out` automatically falls back to HTML."
        )
    if not ok_logs or missing:
        raise typer.Exit(code=1)


@app.command()
def configure() -> None:
    """Interactive setup (stores config in the user config .env)."""

    language = typer.prompt(
        "Default language (en/es)",
        default=Language.default().value,
        show_default=True,
    ).strip().lower()
    try:
        Language(language)
    except ValueError:
        err = InvalidConfigurationError(f"Unsupported language: {language!r}")
        _console.print(f"[red]{escape(str(err))}[/red]")
        raise typer.Exit(code=err.exit_code) from None

    log_dir = typer.prompt(
        "Singleton demo log directory",
        default=str(_settings().log_dir),
        show_default=True,
    ).strip()
    if not log_dir:
        raise typer.BadParameter("log directory is required")

    env_path = write_user_env_vars(
        {
            "PATTERNBOOK_DEFAULT_LANGUAGE": language,
            "PATTERNBOOK_LOG_DIR": log_dir,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
