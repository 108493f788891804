"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `list`, `show` y `run`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.language import Language
from core.domain.models import DemoTranscript, PatternCategory, PatternInfo

_CATEGORY_STYLES = {
    PatternCategory.CREATIONAL: "green",
    PatternCategory.STRUCTURAL: "cyan",
    PatternCategory.BEHAVIORAL: "magenta",
    PatternCategory.PRINCIPLE: "yellow",
}


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar el banner en modos no interactivos (`--json`).
    """

    title = Text("patternbook", style="bold cyan")
    subtitle = Text("Creational • Structural • Behavioral • Principles", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_catalogue_table(infos: list[PatternInfo], language: Language) -> Table:
    table = Table(title="Design patterns")
    table.add_column("Slug", style="bold", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Category", no_wrap=True)
    table.add_column("Intent", style="dim")
    for info in infos:
        name = f"{info.name} [yellow](challenge)[/yellow]" if info.challenge else info.name
        style = _CATEGORY_STYLES[info.category]
        table.add_row(info.slug, name, f"[{style}]{info.category.value}[/{style}]", info.intent_for(language))
    return table


def build_info_panel(info: PatternInfo, language: Language) -> Panel:
    body = Text()
    body.append(info.intent_for(language) + "\n\n", style="italic")
    body.append("Category: ", style="bold")
    body.append(info.category.value, style=_CATEGORY_STYLES[info.category])
    if info.aliases:
        body.append("\nAliases: ", style="bold")
        body.append(", ".join(info.aliases))
    return Panel(body, title=Text(info.name, style="bold"), border_style=_CATEGORY_STYLES[info.category])


def build_doc_view(markdown: str) -> Markdown:
    return Markdown(markdown)


def build_transcript_panel(transcript: DemoTranscript) -> Panel:
    """Panel con la salida de una demo (rojo si falló)."""

    body = Text("\n".join(transcript.lines) if transcript.lines else "(no output)")
    if transcript.error:
        body.append(f"\n\n{transcript.error}", style="bold red")
    subtitle = Text(f"{transcript.duration_ms:.2f} ms", style="dim")
    border = "red" if not transcript.ok else _CATEGORY_STYLES[transcript.category]
    return Panel(body, title=Text(transcript.name, style="bold"), subtitle=subtitle, border_style=border)
